# (c) Nelen & Schuurmans

import asyncio
import logging
from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Sequence
from typing import Any
from typing import Generic
from typing import List
from typing import Optional
from typing import Set
from typing import Tuple
from typing import TypeVar
from uuid import uuid4

from clean_paging.base.domain import EventHandler
from clean_paging.base.domain import EventProvider
from clean_paging.base.domain import FetchOutcome
from clean_paging.base.domain import FetchParams
from clean_paging.base.domain import FetchState
from clean_paging.base.domain import PageInfo
from clean_paging.base.domain import PaginationChanged
from clean_paging.base.domain import Provider
from clean_paging.base.domain import StateChanged
from clean_paging.blinker import BlinkerEventProvider

from .fetch_options import FetchOptions
from .previous import Previous

__all__ = ["PaginatedFetchController", "GetData"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

GetData = Callable[[FetchParams], Awaitable[Any]]


def _noop(*args, **kwargs) -> None:
    pass


class PaginatedFetchController(Provider, Generic[T]):
    """Fetches pages of records from an async data source.

    At most one fetch is in flight at a time: a fetch requested while another
    one is loading is dropped, not queued. Fetches never raise to the caller;
    exceptions from the data source go to ``on_request_error``.

    Changing ``page`` triggers a fetch for that page, changing ``page_size``
    goes back to the first page and refetches. ``fetch_more`` appends the next
    page to the records already loaded, every other fetch replaces them.

    Usage::

        async with PaginatedFetchController(get_data) as controller:
            await controller.fetch_more()
            controller.data_source

    Args:
        get_data: Coroutine function that receives ``FetchParams`` and returns
            a ``FetchOutcome``, a ``Page``, or a mapping with the same keys.
        default_data: The records to start with.
        options: Defaults and callbacks, captured once at construction.
        event_provider: Delivers pagination and state events. Defaults to a
            private ``BlinkerEventProvider``. A provider may be shared between
            controllers: events carry the ``controller_id`` of their sender.
    """

    def __init__(
        self,
        get_data: GetData,
        default_data: Optional[Sequence[T]] = None,
        options: Optional[FetchOptions] = None,
        event_provider: Optional[EventProvider] = None,
    ):
        self.id = uuid4().hex
        self.options = options or FetchOptions()
        self._owns_provider = event_provider is None
        self.event_provider = event_provider or BlinkerEventProvider()
        self._get_data = get_data
        self._on_load = self.options.on_load or _noop
        self._on_request_error = self.options.on_request_error or _noop
        self._defaults = PageInfo(
            page=self.options.default_current,
            page_size=self.options.default_page_size,
        )
        self._page_info = self._defaults
        self._data: List[T] = list(default_data or [])
        self._loading: Optional[bool] = None
        self._effects = self.options.effects
        self._observed = Previous(self._pagination_key(self._defaults))
        self._subscribers: List[EventHandler] = []
        self._reactions: Set["asyncio.Task[None]"] = set()
        self._alive = True
        self.event_provider.register_handler(
            PaginationChanged, self._on_pagination_changed
        )

    async def __aenter__(self) -> "PaginatedFetchController[T]":
        await self.connect()
        return self

    async def __aexit__(self, *args) -> None:
        await self.disconnect()

    async def connect(self) -> None:
        assert self._alive, "Controller is disconnected"
        await self._fetch()

    async def disconnect(self) -> None:
        # a fetch that is still in flight will complete without touching state
        self._alive = False
        self.event_provider.unregister_handler(
            PaginationChanged, self._on_pagination_changed
        )
        for handler in self._subscribers:
            self.event_provider.unregister_handler(StateChanged, handler)
        self._subscribers.clear()
        if self._owns_provider:
            await self.event_provider.disconnect()

    @property
    def data_source(self) -> List[T]:
        return self._data

    @property
    def loading(self) -> Optional[bool]:
        return self._loading

    @property
    def has_more(self) -> bool:
        return self._page_info.has_more

    @property
    def current(self) -> int:
        return self._page_info.page

    @property
    def page_size(self) -> int:
        return self._page_info.page_size

    @property
    def total(self) -> int:
        return self._page_info.total

    @property
    def page_info(self) -> PageInfo:
        return self._page_info

    @property
    def state(self) -> FetchState[T]:
        return FetchState(
            data_source=self._data,
            loading=self._loading,
            has_more=self.has_more,
            current=self.current,
            page_size=self.page_size,
            total=self.total,
        )

    def subscribe(self, handler: EventHandler) -> EventHandler:
        """Call handler with a StateChanged event on every state change.

        Handlers are called synchronously and must not be coroutine functions.
        On a shared event provider, handlers also receive the events of other
        controllers; ``event.controller_id`` tells them apart.
        """
        self._subscribers.append(handler)
        return self.event_provider.register_handler(StateChanged, handler)

    def unsubscribe(self, handler: EventHandler) -> None:
        self._subscribers.remove(handler)
        self.event_provider.unregister_handler(StateChanged, handler)

    async def reload(self) -> None:
        await self._fetch()

    async def fetch_more(self) -> None:
        if not self.has_more:
            return
        if self._loading:
            # the page would advance without its records being fetched
            logger.debug("a fetch is in flight, not advancing to the next page")
            return
        await self._change_pagination(append=True, page=self.current + 1)

    async def reset_page_index(self) -> None:
        await self._change_pagination(page=1)

    def reset(self) -> Optional["asyncio.Task[None]"]:
        """Go back to the page info at construction time.

        The fetched records are kept. When page or page size change, the
        pagination reaction is scheduled as a task (and returned) so that it
        runs after this call; it fetches under the same rules as
        ``set_page_info``. Must be called while the event loop is running.
        """
        event = self._move(**self._defaults.model_dump())
        if event is None:
            return None
        task = asyncio.get_running_loop().create_task(
            self.event_provider.send_async(event)
        )
        self._reactions.add(task)
        task.add_done_callback(self._reactions.discard)
        return task

    async def set_page_info(
        self, page: Optional[int] = None, page_size: Optional[int] = None
    ) -> None:
        values = {"page": page, "page_size": page_size}
        await self._change_pagination(
            **{k: v for (k, v) in values.items() if v is not None}
        )

    async def set_effects(self, *effects: Any) -> None:
        """Refetch (replacing the records) if the effect values changed."""
        if effects == self._effects:
            return
        self._effects = effects
        await self._fetch()

    @staticmethod
    def _pagination_key(page_info: PageInfo) -> Tuple[int, int]:
        return page_info.page, page_info.page_size

    def _publish(self) -> None:
        if self._alive:
            self.event_provider.send(
                StateChanged(controller_id=self.id, state=self.state)
            )

    def _set_loading(self, value: bool) -> None:
        self._loading = value
        self._publish()

    def _move(self, append: bool = False, **values) -> Optional[PaginationChanged]:
        """Update the page info, returning the event to react with (if any)."""
        page_info = self._page_info.update(**values)
        if page_info == self._page_info:
            return None
        self._page_info = page_info
        self._publish()
        current = self._pagination_key(page_info)
        previous = self._observed.observe(current)
        if previous is None or previous == current:
            return None
        return PaginationChanged(
            controller_id=self.id,
            page=page_info.page,
            page_size=page_info.page_size,
            previous_page=previous[0],
            previous_page_size=previous[1],
            append=append,
        )

    async def _change_pagination(self, append: bool = False, **values) -> None:
        event = self._move(append, **values)
        if event is not None:
            await self.event_provider.send_async(event)

    async def _on_pagination_changed(self, event: PaginationChanged) -> None:
        if event.controller_id != self.id:
            return
        if event.page_size_changed:
            self._page_info = self._page_info.update(page=1)
            self._observed.observe(self._pagination_key(self._page_info))
            self._publish()
            await self._fetch()
        elif event.append or len(self._data) <= event.page_size:
            await self._fetch(append=event.append)
        else:
            # more records in memory than a page holds: paging is client-side
            logger.debug(
                "not fetching page %d, %d records are loaded already",
                event.page,
                len(self._data),
            )

    async def _fetch(self, append: bool = False) -> None:
        if not self._alive:
            return
        if self._loading:
            logger.debug("a fetch is in flight, dropping this one")
            return
        self._set_loading(True)
        params = FetchParams(current=self.current, page_size=self.page_size)
        logger.debug(
            "fetching page %d (page_size=%d, append=%s)",
            params.current,
            params.page_size,
            append,
        )
        try:
            outcome = FetchOutcome.coerce(await self._get_data(params))
            if self._alive:
                self._apply(outcome, params, append)
        except Exception as e:
            logger.warning("fetching page %d failed", params.current, exc_info=True)
            if self._alive:
                self._on_request_error(e)
        finally:
            self._set_loading(False)

    def _apply(
        self, outcome: FetchOutcome[T], params: FetchParams, append: bool
    ) -> None:
        if outcome.success is False:
            logger.info("data source reported a failure for page %d", params.current)
            return
        if append:
            self._data = [*self._data, *outcome.data]
        else:
            self._data = list(outcome.data)
        self._page_info = self._page_info.with_total(outcome.total)
        self._publish()
        self._on_load(outcome.data)
