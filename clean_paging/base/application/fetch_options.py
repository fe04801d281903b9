# (c) Nelen & Schuurmans

from collections.abc import Callable
from typing import Any

from pydantic import Field
from pydantic import field_validator

from clean_paging.base.domain import ValueObject

__all__ = ["FetchOptions"]


class FetchOptions(ValueObject):
    default_current: int = Field(default=1, ge=1)
    default_page_size: int = Field(default=20, gt=0)
    effects: tuple[Any, ...] = ()
    on_load: Callable[[list[Any]], Any] | None = None
    on_request_error: Callable[[Exception], Any] | None = None

    @field_validator("default_current", mode="before")
    @classmethod
    def first_page_if_unset(cls, v):
        # 0 and None both mean "start at the first page"
        return v or 1
