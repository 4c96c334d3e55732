"""Agreement (calendar booking) models."""

from datetime import datetime

from pydantic import Field

from served_sdk.models.common import QueryParams, ServedModel


class AgreementSummary(ServedModel):
    id: int
    title: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    customer_id: int | None = None
    customer_name: str | None = None
    project_id: int | None = None
    project_name: str | None = None
    description: str | None = None


class AgreementDetail(ServedModel):
    id: int
    version: int = 0
    tenant_id: int = 0
    title: str = ""
    description: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    customer_id: int | None = None
    customer_name: str | None = None
    project_id: int | None = None
    project_name: str | None = None
    user_ids: list[int] = Field(default_factory=list)
    created_date: datetime | None = None
    updated_date: datetime | None = None

    def to_summary(self) -> AgreementSummary:
        return AgreementSummary(
            id=self.id,
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            customer_id=self.customer_id,
            customer_name=self.customer_name,
            project_id=self.project_id,
            project_name=self.project_name,
        )


class CreateAgreementRequest(ServedModel):
    title: str
    start_date: datetime
    end_date: datetime
    customer_id: int | None = None
    description: str | None = None
    user_ids: list[int] = Field(default_factory=list)


class UpdateAgreementRequest(ServedModel):
    title: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    customer_id: int | None = None
    description: str | None = None
    user_ids: list[int] | None = None


class AgreementQueryParams(QueryParams):
    """Agreement filters. ``start_date``/``end_date`` are sent as ISO 8601 timestamps."""

    customer_id: int | None = None
    project_id: int | None = None
    employee_id: int | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class BulkCreateAgreementsRequest(ServedModel):
    items: list[CreateAgreementRequest] = Field(default_factory=list)
    continue_on_error: bool = True


class BulkUpdateAgreementItem(ServedModel):
    id: int
    data: UpdateAgreementRequest = Field(default_factory=UpdateAgreementRequest)


class BulkUpdateAgreementsRequest(ServedModel):
    items: list[BulkUpdateAgreementItem] = Field(default_factory=list)
    continue_on_error: bool = True


class BulkDeleteAgreementsRequest(ServedModel):
    ids: list[int] = Field(default_factory=list)
    continue_on_error: bool = True
