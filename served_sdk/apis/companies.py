"""Companies module: customers."""

from collections.abc import Iterator

from served_sdk._internal.crud import BulkCrudClient
from served_sdk._internal.module import ApiModule
from served_sdk._internal.query import QueryPair
from served_sdk._internal.transport import HttpTransport
from served_sdk.models.customers import (
    CreateCustomerRequest,
    CustomerDetail,
    CustomerQueryParams,
    CustomerSummary,
    UpdateCustomerRequest,
)


def _customer_filters(query: CustomerQueryParams) -> Iterator[QueryPair]:
    yield "isActive", query.is_active
    yield "customerTypeId", query.customer_type_id


def _customer_summaries(details: list[CustomerDetail]) -> list[CustomerSummary]:
    return [d.to_summary() for d in details]


class CustomersResource(
    BulkCrudClient[
        CustomerSummary,
        CustomerDetail,
        CreateCustomerRequest,
        UpdateCustomerRequest,
        CustomerQueryParams,
    ]
):
    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(
            transport,
            ApiModule.legacy_path("customers"),
            detail_type=CustomerDetail,
            query_type=CustomerQueryParams,
            extra_query_params=_customer_filters,
            map_entities=_customer_summaries,
        )

    async def search(self, search_term: str, take: int = 20) -> list[CustomerSummary]:
        return await self.get_all(
            CustomerQueryParams(search=search_term, take=take, is_active=True)
        )


class CompaniesApi(ApiModule):
    module_name = "companies"

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.customers = CustomersResource(transport)
