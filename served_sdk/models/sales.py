"""Sales pipeline and deal models."""

from datetime import datetime

from pydantic import Field

from served_sdk.models.common import ServedModel

DEFAULT_CURRENCY = "DKK"

# =============================================================================
# Pipelines
# =============================================================================


class PipelineStage(ServedModel):
    id: int
    pipeline_id: int = 0
    name: str = ""
    probability: int = 0
    color: str | None = None
    sort_order: int = 0
    is_won: bool = False
    is_lost: bool = False
    deal_count: int = 0
    total_value: float = 0.0


class PipelineListItem(ServedModel):
    id: int
    name: str = ""
    is_default: bool = False
    currency: str = DEFAULT_CURRENCY
    stage_count: int = 0
    deal_count: int = 0
    total_value: float = 0.0
    weighted_value: float = 0.0


class Pipeline(ServedModel):
    id: int
    name: str = ""
    description: str | None = None
    workspace_id: int = 0
    is_default: bool = False
    currency: str = DEFAULT_CURRENCY
    is_active: bool = False
    rotten_days: int | None = None
    stages: list[PipelineStage] = Field(default_factory=list)
    deal_count: int = 0
    total_value: float = 0.0
    weighted_value: float = 0.0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreatePipelineStageRequest(ServedModel):
    name: str
    probability: int = 0
    color: str | None = None
    sort_order: int = 0
    is_won: bool = False
    is_lost: bool = False


class CreatePipelineRequest(ServedModel):
    name: str
    workspace_id: int
    description: str | None = None
    is_default: bool = False
    currency: str = DEFAULT_CURRENCY
    rotten_days: int | None = None
    stages: list[CreatePipelineStageRequest] | None = None


class UpdatePipelineRequest(ServedModel):
    id: int
    name: str | None = None
    description: str | None = None
    is_default: bool | None = None
    currency: str | None = None
    is_active: bool | None = None
    rotten_days: int | None = None


# =============================================================================
# Deals
# =============================================================================


class Deal(ServedModel):
    id: int
    name: str = ""
    value: float = 0.0
    currency: str = DEFAULT_CURRENCY
    probability: int | None = None
    weighted_value: float = 0.0
    pipeline_id: int = 0
    pipeline_name: str | None = None
    stage_id: int = 0
    stage_name: str | None = None
    customer_id: int | None = None
    customer_name: str | None = None
    contact_id: int | None = None
    contact_name: str | None = None
    owner_id: int | None = None
    owner_name: str | None = None
    expected_close_date: datetime | None = None
    actual_close_date: datetime | None = None
    created_at: datetime | None = None
    last_activity_at: datetime | None = None
    status: str = "Open"
    lost_reason: str | None = None
    source: str | None = None
    tags: list[str] | None = None
    is_rotten: bool = False
    days_in_stage: int | None = None


class CreateDealRequest(ServedModel):
    name: str
    pipeline_id: int
    stage_id: int
    value: float = 0.0
    currency: str = DEFAULT_CURRENCY
    probability: int | None = None
    customer_id: int | None = None
    contact_id: int | None = None
    owner_id: int | None = None
    expected_close_date: datetime | None = None
    source: str | None = None
    tags: list[str] | None = None


class UpdateDealRequest(ServedModel):
    id: int
    name: str | None = None
    value: float | None = None
    currency: str | None = None
    probability: int | None = None
    customer_id: int | None = None
    contact_id: int | None = None
    owner_id: int | None = None
    expected_close_date: datetime | None = None
    source: str | None = None
    tags: list[str] | None = None
