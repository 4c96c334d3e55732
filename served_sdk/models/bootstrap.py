"""Bootstrap documents: what the current user can see across tenants and workspaces."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from served_sdk.models.common import ServedModel, TenantViewModel, WorkspaceViewModel


class LocationSummary(ServedModel):
    id: int
    name: str = ""


class UserBootstrap(ServedModel):
    """The current user with every tenant and workspace they belong to.

    Tenant slugs from ``tenants`` are what tenant ID resolution matches against.
    """

    user_id: int = 0
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    initials: str | None = None
    logo: UUID | None = None
    created_date: datetime | None = None
    last_activity: datetime | None = None
    version: int = 0
    preferences: dict[str, str] | None = None
    system_permissions: dict[str, bool] | None = None
    tenants: list[TenantViewModel] = Field(default_factory=list)
    workspaces: list[WorkspaceViewModel] = Field(default_factory=list)
    locations: list[LocationSummary] = Field(default_factory=list)


class PermissionSection(ServedModel):
    section_name: str = ""
    claims: dict[str, bool] | None = None


class Setting(ServedModel):
    key: str = ""
    value: str | None = None


class Feature(ServedModel):
    key: str = ""
    is_enabled: bool = False


class TenantEmployee(ServedModel):
    id: int
    user_id: int = 0
    name: str = ""
    initials: str | None = None


class NamedItem(ServedModel):
    id: int
    name: str = ""


class CategoryKeys(ServedModel):
    project_types: list[int] | None = None
    project_statuses: list[int] | None = None
    project_stages: list[int] | None = None
    task_types: list[int] | None = None
    task_states: list[int] | None = None
    task_priorities: list[int] | None = None


class CurrencySummary(ServedModel):
    id: int
    code: str = ""
    name: str | None = None
    is_default: bool = False
    is_enabled: bool = False
    current_rate: float = 0.0


class TenantBootstrap(ServedModel):
    tenant: TenantViewModel | None = None
    permissions: list[PermissionSection] | None = None
    settings: list[Setting] | None = None
    features: list[Feature] | None = None
    employees: list[TenantEmployee] | None = None
    boards: list[NamedItem] | None = None
    category_keys: CategoryKeys | None = None
    currencies: list[CurrencySummary] | None = None

    def is_feature_enabled(self, key: str) -> bool:
        return any(f.key == key and f.is_enabled for f in self.features or [])


class WorkspaceBootstrap(TenantBootstrap):
    workspace: WorkspaceViewModel | None = None
    pipelines: list[NamedItem] | None = None


class UserPermissions(ServedModel):
    user_id: int = 0
    system_permissions: dict[str, bool] | None = None
    tenant_permissions: dict[int, dict[str, bool]] | None = None
    workspace_permissions: dict[int, dict[str, bool]] | None = None
