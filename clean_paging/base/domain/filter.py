# (c) Nelen & Schuurmans

from typing import Any

from .value_object import ValueObject

__all__ = ["Filter"]


class Filter(ValueObject):
    field: str
    values: list[Any]
