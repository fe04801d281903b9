# (c) Nelen & Schuurmans

from collections.abc import Sequence

from clean_paging.base.domain import FetchOutcome
from clean_paging.base.domain import FetchParams
from clean_paging.base.domain import Filter
from clean_paging.base.domain import Gateway
from clean_paging.base.domain import Json

__all__ = ["GatewayPageSource"]


class GatewayPageSource:
    """Serves pages from a Gateway, for use as a fetch controller's data source.

    Args:
        gateway: The gateway to query
        filters: Filters applied to every page
        order_by: Field to sort on (the order must be stable for paging)
        ascending: Sort direction
    """

    def __init__(
        self,
        gateway: Gateway,
        filters: Sequence[Filter] = (),
        order_by: str = "id",
        ascending: bool = True,
    ):
        self.gateway = gateway
        self.filters = list(filters)
        self.order_by = order_by
        self.ascending = ascending

    async def __call__(self, params: FetchParams) -> FetchOutcome[Json]:
        page_options = params.to_page_options(self.order_by, self.ascending)
        records = await self.gateway.filter(self.filters, params=page_options)
        total = len(records)
        # a short first page already tells us the total; otherwise count
        if not (page_options.offset == 0 and total < page_options.limit):
            total = await self.gateway.count(self.filters)
        return FetchOutcome(data=records, total=total)
