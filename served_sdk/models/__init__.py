"""Public Pydantic models for the Served platform.

Example:
    from served_sdk.models import CreateProjectRequest, ProjectQueryParams

    request = CreateProjectRequest(name="Website relaunch", customer_id=12)
    query = ProjectQueryParams(is_active=True, take=25)
"""

from served_sdk.models.common import (
    BulkError,
    BulkResponse,
    ListResponse,
    Page,
    PageMeta,
    PeriodModel,
    QueryParams,
    RequestFilter,
    ServedModel,
)
from served_sdk.models.customers import (
    CreateCustomerRequest,
    CustomerDetail,
    CustomerQueryParams,
    CustomerSummary,
    UpdateCustomerRequest,
)
from served_sdk.models.finance import Invoice, InvoiceStatus
from served_sdk.models.identity import ApiKey, ApiKeyCreated, EmployeeDetail, EmployeeSummary
from served_sdk.models.projects import (
    CreateProjectRequest,
    ProjectDetail,
    ProjectQueryParams,
    ProjectSummary,
    UpdateProjectRequest,
)
from served_sdk.models.system import ApiHealthInfo, ConflictWarning, SessionInfo
from served_sdk.models.tasks import (
    CreateTaskRequest,
    TaskDetail,
    TaskPriority,
    TaskQueryParams,
    TaskStatus,
    TaskSummary,
    UpdateTaskRequest,
)
from served_sdk.models.time_registrations import (
    CreateTimeRegistrationRequest,
    TimeRegistrationDetail,
    TimeRegistrationQueryParams,
    TimeRegistrationSummary,
    UpdateTimeRegistrationRequest,
)

__all__ = [
    "ServedModel",
    "QueryParams",
    "RequestFilter",
    "PeriodModel",
    "PageMeta",
    "ListResponse",
    "BulkError",
    "BulkResponse",
    "Page",
    "ProjectSummary",
    "ProjectDetail",
    "CreateProjectRequest",
    "UpdateProjectRequest",
    "ProjectQueryParams",
    "TaskStatus",
    "TaskPriority",
    "TaskSummary",
    "TaskDetail",
    "CreateTaskRequest",
    "UpdateTaskRequest",
    "TaskQueryParams",
    "CustomerSummary",
    "CustomerDetail",
    "CreateCustomerRequest",
    "UpdateCustomerRequest",
    "CustomerQueryParams",
    "TimeRegistrationSummary",
    "TimeRegistrationDetail",
    "CreateTimeRegistrationRequest",
    "UpdateTimeRegistrationRequest",
    "TimeRegistrationQueryParams",
    "EmployeeSummary",
    "EmployeeDetail",
    "ApiKey",
    "ApiKeyCreated",
    "Invoice",
    "InvoiceStatus",
    "SessionInfo",
    "ConflictWarning",
    "ApiHealthInfo",
]
