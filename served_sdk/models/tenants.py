"""Tenant and workspace administration models."""

from datetime import datetime
from uuid import UUID

from served_sdk.models.common import ServedModel


class TenantDetail(ServedModel):
    id: int
    name: str = ""
    slug: str = ""
    logo: UUID | None = None
    version: int = 0
    description: str | None = None
    email: str | None = None
    created_date: datetime | None = None
    last_activity: datetime | None = None


class UpdateTenantRequest(ServedModel):
    tenant_id: int
    version: int
    name: str
    slug: str
    logo: UUID | None = None
    billing_email: str | None = None


class WorkspaceDetail(ServedModel):
    id: int
    name: str = ""
    slug: str = ""
    workspace_type: str = ""
    tenant_id: int = 0
    description: str | None = None
    icon: str | None = None
    color: str | None = None
    is_active: bool = False
    created_date: datetime | None = None


class CreateWorkspaceRequest(ServedModel):
    name: str
    slug: str
    workspace_type: str = "default"
    description: str | None = None
    icon: str | None = None
    color: str | None = None


class UpdateWorkspaceRequest(ServedModel):
    name: str | None = None
    description: str | None = None
    icon: str | None = None
    color: str | None = None
    is_active: bool | None = None
