"""API module facades.

Each module groups the resources of one platform area and is exposed as an
attribute of :class:`served_sdk.ServedClient` (``client.finance.invoices``).
"""

from served_sdk.apis.board import BoardApi
from served_sdk.apis.bootstrap import BootstrapApi
from served_sdk.apis.calendar import CalendarApi
from served_sdk.apis.companies import CompaniesApi
from served_sdk.apis.devops import DevOpsApi
from served_sdk.apis.finance import FinanceApi
from served_sdk.apis.health import HealthApi
from served_sdk.apis.identity import IdentityApi
from served_sdk.apis.project_management import ProjectManagementApi
from served_sdk.apis.registration import RegistrationApi
from served_sdk.apis.reporting import ReportingApi
from served_sdk.apis.sales import SalesApi
from served_sdk.apis.tenant import TenantApi

__all__ = [
    "BoardApi",
    "BootstrapApi",
    "CalendarApi",
    "CompaniesApi",
    "DevOpsApi",
    "FinanceApi",
    "HealthApi",
    "IdentityApi",
    "ProjectManagementApi",
    "RegistrationApi",
    "ReportingApi",
    "SalesApi",
    "TenantApi",
]
