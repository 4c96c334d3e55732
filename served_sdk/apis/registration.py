"""Registration module: time registrations."""

from collections.abc import Iterator

from served_sdk._internal.crud import BulkCrudClient
from served_sdk._internal.module import ApiModule
from served_sdk._internal.query import QueryPair
from served_sdk._internal.transport import HttpTransport
from served_sdk.models.time_registrations import (
    CreateTimeRegistrationRequest,
    TimeRegistrationDetail,
    TimeRegistrationQueryParams,
    TimeRegistrationSummary,
    UpdateTimeRegistrationRequest,
)


def _time_registration_filters(query: TimeRegistrationQueryParams) -> Iterator[QueryPair]:
    yield "projectId", query.project_id
    yield "taskId", query.task_id
    yield "employeeId", query.employee_id
    # Empty strings mean "no bound", same as None.
    yield "startDate", query.start_date or None
    yield "endDate", query.end_date or None


def _time_registration_summaries(
    details: list[TimeRegistrationDetail],
) -> list[TimeRegistrationSummary]:
    return [d.to_summary() for d in details]


class TimeRegistrationsResource(
    BulkCrudClient[
        TimeRegistrationSummary,
        TimeRegistrationDetail,
        CreateTimeRegistrationRequest,
        UpdateTimeRegistrationRequest,
        TimeRegistrationQueryParams,
    ]
):
    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(
            transport,
            ApiModule.legacy_path("timeregistrations"),
            detail_type=TimeRegistrationDetail,
            query_type=TimeRegistrationQueryParams,
            extra_query_params=_time_registration_filters,
            map_entities=_time_registration_summaries,
        )

    async def get_by_project(
        self, project_id: int, take: int = 100
    ) -> list[TimeRegistrationSummary]:
        return await self.get_all(TimeRegistrationQueryParams(project_id=project_id, take=take))

    async def get_by_task(self, task_id: int, take: int = 100) -> list[TimeRegistrationSummary]:
        return await self.get_all(TimeRegistrationQueryParams(task_id=task_id, take=take))

    async def get_by_employee(
        self, employee_id: int, take: int = 100
    ) -> list[TimeRegistrationSummary]:
        return await self.get_all(TimeRegistrationQueryParams(employee_id=employee_id, take=take))

    async def get_by_date_range(
        self, start_date: str, end_date: str, take: int = 100
    ) -> list[TimeRegistrationSummary]:
        """List registrations between two ``yyyy-MM-dd`` dates."""
        return await self.get_all(
            TimeRegistrationQueryParams(start_date=start_date, end_date=end_date, take=take)
        )


class RegistrationApi(ApiModule):
    module_name = "registration"

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.time_registrations = TimeRegistrationsResource(transport)
