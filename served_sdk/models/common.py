"""Shared request/response shapes used across all API modules."""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import IntEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# =============================================================================
# Base Model
# =============================================================================


class ServedModel(BaseModel):
    """Base for every Served DTO.

    Fields are declared in snake_case and travel as camelCase on the wire.
    Either spelling is accepted when parsing or constructing.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


# =============================================================================
# Query Models
# =============================================================================


class QueryParams(ServedModel):
    """Standard pagination, sort and search parameters for list operations.

    ``take``/``skip`` are item counts; the query builder converts them to the
    platform's 1-based ``page``/``pageSize``. Absent ``take`` means the
    server default page size.
    """

    take: int | None = None
    skip: int | None = None
    sort: str = ""
    filter: str = ""
    search: str = ""
    keys: list[Any] = Field(default_factory=list)


class PeriodModel(ServedModel):
    """Date range in ISO format (yyyy-MM-dd)."""

    starts_at: str | None = None
    ends_at: str | None = None

    @model_validator(mode="after")
    def starts_before_ends(self) -> "PeriodModel":
        if self.starts_at and self.ends_at:
            if date.fromisoformat(self.starts_at[:10]) > date.fromisoformat(self.ends_at[:10]):
                raise ValueError("startsAt must not be after endsAt")
        return self

    @classmethod
    def from_dates(cls, start: date, end: date) -> "PeriodModel":
        return cls(starts_at=start.strftime("%Y-%m-%d"), ends_at=end.strftime("%Y-%m-%d"))


class RequestFilter(QueryParams):
    """Query parameters with tenant, workspace and location context."""

    tenant_id: int | None = None
    workspace_id: int | None = None
    location_id: int | None = None
    period: PeriodModel | None = None


# =============================================================================
# Response Envelopes
# =============================================================================


class PageMeta(ServedModel):
    """Pagination metadata returned alongside list data."""

    total: int = 0
    page: int = Field(default=1, ge=1)
    page_size: int = 0

    @property
    def total_pages(self) -> int:
        if self.page_size > 0:
            return math.ceil(self.total / self.page_size)
        return 0


class ListResponse(ServedModel, Generic[T]):
    """List envelope: ``{"data": [...], "meta": {...}}``."""

    data: list[T] | None = None
    meta: PageMeta | None = None


class BulkError(ServedModel):
    """Failure details for a single item of a bulk operation."""

    index: int
    item_id: int | None = None
    message: str = ""
    code: str | None = None


class BulkResponse(ServedModel, Generic[T]):
    """Result of a bulk create/update/delete.

    Per-item failures are reported here rather than raised. The server is
    expected to keep ``len(items) == succeeded`` but nothing enforces it.
    """

    total: int = 0
    succeeded: int = 0
    failed: int = 0
    items: list[T] = Field(default_factory=list)
    errors: list[BulkError] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return self.failed > 0 or bool(self.errors)


@dataclass
class Page(Generic[T]):
    """A single fetched page of a list endpoint."""

    items: list[T] = field(default_factory=list)
    meta: PageMeta | None = None

    @property
    def has_more(self) -> bool:
        if self.meta is None:
            return False
        return self.meta.page < self.meta.total_pages


# =============================================================================
# Tenant / Workspace
# =============================================================================


class TenantViewModel(ServedModel):
    """Minimal tenant entry as listed in the bootstrap document."""

    id: int
    name: str = ""
    slug: str = ""


class WorkspaceViewModel(ServedModel):
    """Minimal workspace entry as listed in the bootstrap document."""

    id: int
    name: str = ""
    slug: str = ""
    workspace_type: str = ""


# =============================================================================
# Cache / Delete
# =============================================================================


class CacheDataItem(ServedModel, Generic[T]):
    """Wrapper returned by GetRange cache endpoints."""

    id: int
    version: int = 0
    deleted: bool = False
    data: T | None = None
    cached_date_time: datetime | None = None


class DomainType(IntEnum):
    """Entity classification used by multi-entity delete requests."""

    PROJECT = 1
    TASK = 2
    TIME_REGISTRATION = 3
    AGREEMENT = 4


class DeleteItem(ServedModel):
    id: int
    version: int = 0
    domain_type: DomainType


class DeleteRequest(ServedModel):
    tenant_id: int
    items: list[DeleteItem] = Field(default_factory=list)
