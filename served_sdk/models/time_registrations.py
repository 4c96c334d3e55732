"""Time registration models."""

from datetime import datetime

from pydantic import Field

from served_sdk.models.common import QueryParams, ServedModel


class TimeRegistrationSummary(ServedModel):
    id: int
    date: datetime | None = None
    project_id: int | None = None
    project_name: str | None = None
    task_id: int | None = None
    task_name: str | None = None
    hours: float | None = None
    minutes: int | None = None
    description: str | None = None
    employee_id: int | None = None
    employee_name: str | None = None


class TimeRegistrationDetail(ServedModel):
    id: int
    version: int = 0
    tenant_id: int = 0
    date: datetime | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    comment: str | None = None
    project_id: int | None = None
    project_name: str | None = None
    task_id: int | None = None
    task_name: str | None = None
    hours: float | None = None
    minutes: int | None = None
    billable: bool = False
    employee_id: int | None = None
    employee_name: str | None = None
    created_date: datetime | None = None
    updated_date: datetime | None = None

    @property
    def description(self) -> str | None:
        return self.comment

    def to_summary(self) -> TimeRegistrationSummary:
        return TimeRegistrationSummary(
            id=self.id,
            date=self.date,
            hours=self.hours,
            minutes=self.minutes,
            description=self.description,
            project_id=self.project_id,
            project_name=self.project_name,
            task_id=self.task_id,
            task_name=self.task_name,
            employee_id=self.employee_id,
            employee_name=self.employee_name,
        )


class CreateTimeRegistrationRequest(ServedModel):
    start: datetime
    end: datetime
    task_id: int | None = None
    project_id: int | None = None
    description: str | None = None
    billable: bool = False
    minutes: int = 0


class UpdateTimeRegistrationRequest(ServedModel):
    start: datetime | None = None
    end: datetime | None = None
    task_id: int | None = None
    project_id: int | None = None
    description: str | None = None
    billable: bool | None = None
    minutes: int | None = None


class TimeRegistrationQueryParams(QueryParams):
    """Time registration filters. Dates are passed through as given (``yyyy-MM-dd``)."""

    project_id: int | None = None
    task_id: int | None = None
    employee_id: int | None = None
    start_date: str | None = None
    end_date: str | None = None


class BulkCreateTimeRegistrationsRequest(ServedModel):
    items: list[CreateTimeRegistrationRequest] = Field(default_factory=list)
    continue_on_error: bool = True


class BulkUpdateTimeRegistrationItem(ServedModel):
    id: int
    data: UpdateTimeRegistrationRequest = Field(default_factory=UpdateTimeRegistrationRequest)


class BulkUpdateTimeRegistrationsRequest(ServedModel):
    items: list[BulkUpdateTimeRegistrationItem] = Field(default_factory=list)
    continue_on_error: bool = True


class BulkDeleteTimeRegistrationsRequest(ServedModel):
    ids: list[int] = Field(default_factory=list)
    continue_on_error: bool = True
