# (c) Nelen & Schuurmans
from abc import ABC
from abc import abstractmethod
from collections.abc import Awaitable
from collections.abc import Callable
from typing import ClassVar

from .provider import Provider
from .value_object import ValueObject

__all__ = [
    "DomainEvent",
    "EventProvider",
    "EventHandler",
]


EventHandler = Callable[["DomainEvent"], None | Awaitable[None]]


class EventProvider(Provider, ABC):
    """Delivers domain events to the handlers registered for their path.

    Unlike a process-wide event bus, every provider instance keeps its own
    set of handlers.
    """

    @abstractmethod
    def register_handler(
        self, event_type: type["DomainEvent"], handler: EventHandler
    ) -> EventHandler:
        pass

    @abstractmethod
    def unregister_handler(
        self, event_type: type["DomainEvent"], handler: EventHandler
    ) -> None:
        pass

    @abstractmethod
    def send(self, event: "DomainEvent") -> None:
        pass

    @abstractmethod
    async def send_async(self, event: "DomainEvent") -> None:
        pass


class DomainEvent(ValueObject):
    event_path: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls: type["DomainEvent"], path: str | None = None) -> None:
        if path is None:
            cls.event_path += (cls.__name__,)
        else:
            cls.event_path += tuple(path.split("."))
        super().__init_subclass__()
