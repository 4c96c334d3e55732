"""Employee and API key models."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from served_sdk.models.common import QueryParams, ServedModel

# =============================================================================
# Employees
# =============================================================================


class EmployeeSummary(ServedModel):
    id: int
    name: str = ""
    email: str = ""
    is_active: bool = False


class EmployeeDetail(EmployeeSummary):
    user_id: int = 0
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    job_title: str | None = None
    initials: str | None = None
    logo: UUID | None = None
    department_id: int | None = None
    created_date: datetime | None = None

    def to_summary(self) -> EmployeeSummary:
        return EmployeeSummary(
            id=self.id, name=self.name, email=self.email, is_active=self.is_active
        )


class EmployeeQueryParams(QueryParams):
    is_active: bool | None = None
    department_id: int | None = None


# =============================================================================
# API Keys
# =============================================================================


class ApiKey(ServedModel):
    """API key metadata. The secret itself is only returned once, on creation."""

    id: int
    name: str = ""
    key_hint: str = ""
    scopes: list[str] = Field(default_factory=list)
    is_active: bool = False
    expires_at: datetime | None = None
    last_used_at: datetime | None = None
    last_used_ip: str | None = None
    created_date: datetime | None = None
    created_by_name: str | None = None


class ApiKeyCreated(ServedModel):
    api_key: ApiKey
    plain_key: str = ""


class CreateApiKeyRequest(ServedModel):
    name: str
    scopes: list[str] = Field(default_factory=list)
    expires_at: datetime | None = None


class UpdateApiKeyRequest(ServedModel):
    name: str | None = None
    scopes: list[str] | None = None
    expires_at: datetime | None = None
    is_active: bool | None = None
