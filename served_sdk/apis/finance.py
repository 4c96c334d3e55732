"""Finance module: invoices.

Invoice lists are fetched in two steps: ``GetKeys`` returns the ids matching
a filter, then ``GetRange`` returns the cached records for those ids.
"""

from served_sdk._internal.module import ApiModule, ApiResource
from served_sdk._internal.transport import HttpTransport
from served_sdk.models.common import CacheDataItem, PeriodModel, RequestFilter, ServedModel
from served_sdk.models.finance import Invoice, InvoiceKeysByCustomerRequest


class InvoicesResource(ApiResource):
    resource_name = "invoices"

    async def get_all(self, limit: int = 20) -> list[Invoice]:
        return await self._fetch_via_keys(RequestFilter(take=limit))

    async def get_by_period(self, starts_at: str, ends_at: str, limit: int = 100) -> list[Invoice]:
        """Invoices dated within ``starts_at``..``ends_at`` (``yyyy-MM-dd``)."""
        return await self._fetch_via_keys(
            RequestFilter(take=limit, period=PeriodModel(starts_at=starts_at, ends_at=ends_at))
        )

    async def get_by_customer(self, customer_id: int, limit: int = 100) -> list[Invoice]:
        return await self._fetch_via_keys(
            InvoiceKeysByCustomerRequest(customer_id=customer_id, take=limit)
        )

    async def get_range(self, ids: list[int]) -> list[Invoice]:
        """Fetch cached invoices for ``ids``. Entries without data are dropped."""
        if not ids:
            return []
        items = await self._transport.post(
            f"{self._base_path}/GetRange", ids, list[CacheDataItem[Invoice]]
        )
        return [item.data for item in items or [] if item.data is not None]

    async def get(self, id: int) -> Invoice:
        return await self._transport.get(f"{self._base_path}/{id}", Invoice)

    async def _fetch_via_keys(self, key_filter: ServedModel) -> list[Invoice]:
        keys = await self._transport.post(f"{self._base_path}/GetKeys", key_filter, list[int])
        if not keys:
            return []
        return await self.get_range(keys)


class FinanceApi(ApiModule):
    module_name = "finance"

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.invoices = InvoicesResource(transport, self)
