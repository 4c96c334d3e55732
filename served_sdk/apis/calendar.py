"""Calendar module: agreements."""

from collections.abc import Iterator
from datetime import datetime

from served_sdk._internal.crud import BulkCrudClient
from served_sdk._internal.module import ApiModule
from served_sdk._internal.query import QueryPair
from served_sdk._internal.transport import HttpTransport
from served_sdk.models.agreements import (
    AgreementDetail,
    AgreementQueryParams,
    AgreementSummary,
    CreateAgreementRequest,
    UpdateAgreementRequest,
)


def _agreement_filters(query: AgreementQueryParams) -> Iterator[QueryPair]:
    yield "customerId", query.customer_id
    yield "projectId", query.project_id
    yield "employeeId", query.employee_id
    yield "startDate", query.start_date
    yield "endDate", query.end_date


def _agreement_summaries(details: list[AgreementDetail]) -> list[AgreementSummary]:
    return [d.to_summary() for d in details]


class AgreementsResource(
    BulkCrudClient[
        AgreementSummary,
        AgreementDetail,
        CreateAgreementRequest,
        UpdateAgreementRequest,
        AgreementQueryParams,
    ]
):
    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(
            transport,
            ApiModule.legacy_path("agreements"),
            detail_type=AgreementDetail,
            query_type=AgreementQueryParams,
            extra_query_params=_agreement_filters,
            map_entities=_agreement_summaries,
        )

    async def get_by_date_range(
        self, start_date: datetime, end_date: datetime, take: int = 100
    ) -> list[AgreementSummary]:
        return await self.get_all(
            AgreementQueryParams(start_date=start_date, end_date=end_date, take=take)
        )

    async def get_by_customer(self, customer_id: int, take: int = 100) -> list[AgreementSummary]:
        return await self.get_all(AgreementQueryParams(customer_id=customer_id, take=take))

    async def get_by_employee(self, employee_id: int, take: int = 100) -> list[AgreementSummary]:
        return await self.get_all(AgreementQueryParams(employee_id=employee_id, take=take))


class CalendarApi(ApiModule):
    module_name = "calendar"

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.agreements = AgreementsResource(transport)
