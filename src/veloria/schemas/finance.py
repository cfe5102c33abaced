import datetime as dt
from uuid import UUID

from src.veloria.models.enums import PaymentStatus
from src.veloria.schemas.base import CamelModel


class MonthlyRevenue(CamelModel):
    month: str  # "Jan" .. "Dec"
    year: int
    revenue: float


class Financials(CamelModel):
    total_revenue: float
    received_payments: float
    pending_payments: float
    revenue_by_month: list[MonthlyRevenue]


class PaymentSummary(CamelModel):
    project_id: UUID
    project_name: str
    client_name: str
    payment_name: str
    amount: float
    status: PaymentStatus
    date: dt.date | None = None  # paid date, recent payments only
    due_date: dt.date | None = None


class FinanceOverview(CamelModel):
    financials: Financials
    recent_payments: list[PaymentSummary]
    upcoming_payments: list[PaymentSummary]
