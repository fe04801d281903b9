from .domain_event import DomainEvent
from .pagination import FetchState

__all__ = ["PaginationChanged", "StateChanged"]


class PaginationChanged(DomainEvent, path="paging.pagination_changed"):
    controller_id: str
    page: int
    page_size: int
    previous_page: int
    previous_page_size: int
    append: bool = False

    @property
    def page_size_changed(self) -> bool:
        return self.page_size != self.previous_page_size


class StateChanged(DomainEvent, path="paging.state_changed"):
    controller_id: str
    state: FetchState
