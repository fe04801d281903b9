# (c) Nelen & Schuurmans
import inspect

import blinker

from clean_paging.base.domain import DomainEvent
from clean_paging.base.domain import EventHandler
from clean_paging.base.domain import EventProvider

__all__ = ["BlinkerEventProvider"]


def _sync_wrapper(func):
    async def inner(*args, **kwargs):
        result = func(*args, **kwargs)
        if inspect.isawaitable(result):
            await result

    return inner


class BlinkerEventProvider(EventProvider):
    """Dispatches events through the signals of a private blinker namespace.

    Two providers never deliver each other's events.
    """

    def __init__(self):
        self._namespace = blinker.Namespace()

    def _signal(self, path: tuple[str, ...]) -> blinker.Signal:
        return self._namespace.signal(".".join(path))

    def register_handler(
        self, event_type: type[DomainEvent], handler: EventHandler
    ) -> EventHandler:
        # strong reference: handlers are often closures nobody else holds on to
        self._signal(event_type.event_path).connect(handler, weak=False)
        return handler

    def unregister_handler(
        self, event_type: type[DomainEvent], handler: EventHandler
    ) -> None:
        self._signal(event_type.event_path).disconnect(handler)

    async def disconnect(self) -> None:
        self._namespace.clear()

    def send(self, event: DomainEvent) -> None:
        self._signal(event.__class__.event_path).send(event)

    async def send_async(self, event: DomainEvent) -> None:
        await self._signal(event.__class__.event_path).send_async(
            event, _sync_wrapper=_sync_wrapper
        )
