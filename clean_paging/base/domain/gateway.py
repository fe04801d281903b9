# (c) Nelen & Schuurmans

from abc import ABC
from typing import List
from typing import Optional

from .filter import Filter
from .pagination import PageOptions
from .types import Json

__all__ = ["Gateway"]


class Gateway(ABC):
    async def filter(
        self, filters: List[Filter], params: Optional[PageOptions] = None
    ) -> List[Json]:
        raise NotImplementedError()

    async def count(self, filters: List[Filter]) -> int:
        return len(await self.filter(filters, params=None))
