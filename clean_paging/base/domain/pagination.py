# (c) Nelen & Schuurmans

from collections.abc import Sequence
from typing import Any
from typing import Generic
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic import ValidationError

from .exceptions import BadRequest
from .value_object import ValueObject

__all__ = [
    "Page",
    "PageOptions",
    "PageInfo",
    "FetchParams",
    "FetchOutcome",
    "FetchState",
]

T = TypeVar("T")


class PageOptions(BaseModel):
    limit: int
    offset: int = 0
    order_by: str = "id"
    ascending: bool = True


class Page(BaseModel, Generic[T]):
    total: int
    items: Sequence[T]
    limit: int | None = None
    offset: int | None = None


class PageInfo(ValueObject):
    """Pagination position of a fetch controller.

    ``has_more`` is derived from the last reported total; use ``with_total``
    to set both at once.
    """

    page: int = Field(ge=1)
    page_size: int = Field(gt=0)
    total: int = Field(default=0, ge=0)
    has_more: bool = False

    def with_total(self, total: int) -> "PageInfo":
        return self.update(
            total=total, has_more=total > self.page_size * self.page
        )


class FetchParams(ValueObject):
    current: int = Field(ge=1)
    page_size: int = Field(gt=0)

    @property
    def offset(self) -> int:
        return (self.current - 1) * self.page_size

    def to_page_options(
        self, order_by: str = "id", ascending: bool = True
    ) -> PageOptions:
        return PageOptions(
            limit=self.page_size,
            offset=self.offset,
            order_by=order_by,
            ascending=ascending,
        )


class FetchOutcome(BaseModel, Generic[T]):
    """What a data source returns for one page.

    ``success=False`` is an application-level failure: a valid result that
    must not touch the fetched data.
    """

    model_config = ConfigDict(frozen=True)

    data: list[T] = Field(default_factory=list)
    success: bool | None = None
    total: int = Field(default=0, ge=0)

    @field_validator("data", mode="before")
    @classmethod
    def data_defaults_to_empty(cls, v):
        return [] if v is None else v

    @field_validator("total", mode="before")
    @classmethod
    def total_defaults_to_zero(cls, v):
        return 0 if v is None else v

    @classmethod
    def coerce(cls, value: Any) -> "FetchOutcome[Any]":
        if isinstance(value, FetchOutcome):
            return value
        if isinstance(value, Page):
            value = {"data": list(value.items), "total": value.total}
        elif value is None:
            value = {}
        try:
            return cls.model_validate(value)
        except ValidationError as e:
            raise BadRequest(e)


class FetchState(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    data_source: list[T]
    loading: bool | None
    has_more: bool
    current: int
    page_size: int
    total: int
