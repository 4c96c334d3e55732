"""Finance models."""

from datetime import datetime
from enum import IntEnum
from uuid import UUID

from served_sdk.models.common import ServedModel


class InvoiceStatus(IntEnum):
    WORKING = 0
    BOOKED = 1
    OVERDUE = 2
    PAID = 3
    DRAFT = 4
    SENT = 5


class Invoice(ServedModel):
    id: UUID
    invoice_no: str | None = None
    invoice_date: datetime | None = None
    amount: float = 0.0
    invoice_status: InvoiceStatus = InvoiceStatus.WORKING
    customer_id: int | None = None
    project_id: int | None = None
    header: str | None = None
    due_date: datetime | None = None


class InvoiceKeysByCustomerRequest(ServedModel):
    customer_id: int
    take: int
