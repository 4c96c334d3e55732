"""Customer models."""

from datetime import datetime
from enum import IntEnum

from pydantic import Field

from served_sdk.models.common import QueryParams, ServedModel


class CustomerType(IntEnum):
    INDIVIDUAL = 0
    COMPANY = 1


class CustomerSummary(ServedModel):
    id: int
    name: str = ""
    customer_no: str | None = None
    email: str | None = None
    phone: str | None = None
    is_active: bool = False
    customer_type: CustomerType = CustomerType.INDIVIDUAL


class CustomerDetail(ServedModel):
    id: int
    version: int = 0
    tenant_id: int = 0
    name: str = ""
    customer_no: str | None = None
    customer_type: CustomerType = CustomerType.INDIVIDUAL
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    vat_number: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None
    is_active: bool = False
    notes: str | None = None
    payment_terms_days: int | None = None
    default_hourly_rate: float | None = None
    currency: str | None = None
    created_date: datetime | None = None
    updated_date: datetime | None = None

    def to_summary(self) -> CustomerSummary:
        return CustomerSummary(
            id=self.id,
            name=self.name,
            customer_no=self.customer_no,
            email=self.email,
            phone=self.phone,
            is_active=self.is_active,
            customer_type=self.customer_type,
        )


class CreateCustomerRequest(ServedModel):
    name: str
    customer_type: CustomerType = CustomerType.COMPANY
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    vat_number: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None
    notes: str | None = None
    payment_terms_days: int | None = None
    default_hourly_rate: float | None = None
    currency: str | None = None


class UpdateCustomerRequest(ServedModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    vat_number: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None
    is_active: bool | None = None
    notes: str | None = None
    payment_terms_days: int | None = None
    default_hourly_rate: float | None = None
    currency: str | None = None


class CustomerQueryParams(QueryParams):
    """Customer list filters. Only active customers are listed unless ``is_active`` is cleared."""

    is_active: bool | None = True
    customer_type_id: int | None = None


class BulkCreateCustomersRequest(ServedModel):
    customers: list[CreateCustomerRequest] = Field(default_factory=list)
    continue_on_error: bool = True


class BulkUpdateCustomerItem(ServedModel):
    id: int
    data: UpdateCustomerRequest = Field(default_factory=UpdateCustomerRequest)


class BulkUpdateCustomersRequest(ServedModel):
    customers: list[BulkUpdateCustomerItem] = Field(default_factory=list)
    continue_on_error: bool = True


class BulkDeleteCustomersRequest(ServedModel):
    ids: list[int] = Field(default_factory=list)
    continue_on_error: bool = True
