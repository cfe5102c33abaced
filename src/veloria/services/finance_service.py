"""Revenue and payment aggregation for the finance dashboard."""

import calendar
from collections import defaultdict
from datetime import date, datetime
from typing import Any

from src.veloria.core.cache import FINANCE_OVERVIEW_KEY, get_cached, set_cached
from src.veloria.core.config import get_settings
from src.veloria.core.logging import get_logger
from src.veloria.models import PaymentStatus, Project, ProjectStatus
from src.veloria.models.base import utc_now
from src.veloria.repositories import ProjectRepository
from src.veloria.schemas.finance import (
    FinanceOverview,
    Financials,
    MonthlyRevenue,
    PaymentSummary,
)

logger = get_logger(__name__)

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
REVENUE_MONTHS = 6
PAYMENT_LIST_LIMIT = 5


def _months_ago(now: datetime, months: int) -> datetime:
    """Same day-of-month ``months`` earlier, clamped to the month's length."""
    year, month_index = divmod(now.year * 12 + now.month - 1 - months, 12)
    month = month_index + 1
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def _as_date(value: str | None) -> date | None:
    return date.fromisoformat(value[:10]) if value else None


def _summary(project: Project, payment: dict[str, Any]) -> PaymentSummary:
    return PaymentSummary(
        project_id=project.id,
        project_name=project.project_name,
        client_name=project.name,
        payment_name=payment["name"],
        amount=payment["amount"],
        status=payment["status"],
        date=_as_date(payment.get("paid_date")),
        due_date=_as_date(payment.get("due_date")),
    )


def build_overview(projects: list[Project], now: datetime) -> FinanceOverview:
    """Aggregate revenue figures from projects.

    * total revenue: project values of all projects not declined
    * received: sum of paid payments; pending: total minus received
    * revenue by month: project values by creation month, last six months
    * recent: last five paid payments; upcoming: next five pending by due date
    """
    total_revenue = sum(
        p.project_value
        for p in projects
        if p.status != ProjectStatus.DECLINED and p.project_value > 0
    )

    paid: list[PaymentSummary] = []
    pending: list[PaymentSummary] = []
    for project in projects:
        for payment in project.payment_schedule:
            status = payment.get("status")
            if status == PaymentStatus.PAID:
                paid.append(_summary(project, payment))
            elif status == PaymentStatus.PENDING and payment.get("due_date"):
                pending.append(_summary(project, payment))

    received = sum(p.amount for p in paid)

    since = _months_ago(now, REVENUE_MONTHS)
    monthly: dict[tuple[int, int], float] = defaultdict(float)
    for project in projects:
        if project.created_at >= since and project.project_value > 0:
            monthly[(project.created_at.year, project.created_at.month)] += project.project_value

    revenue_by_month = [
        MonthlyRevenue(month=MONTH_NAMES[month - 1], year=year, revenue=revenue)
        for (year, month), revenue in sorted(monthly.items())
    ]

    paid.sort(key=lambda p: p.date or date.min, reverse=True)
    pending.sort(key=lambda p: p.due_date or date.max)

    return FinanceOverview(
        financials=Financials(
            total_revenue=total_revenue,
            received_payments=received,
            pending_payments=total_revenue - received,
            revenue_by_month=revenue_by_month,
        ),
        recent_payments=paid[:PAYMENT_LIST_LIMIT],
        upcoming_payments=pending[:PAYMENT_LIST_LIMIT],
    )


class FinanceService:
    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    async def overview(self) -> FinanceOverview:
        """Finance overview, served from Redis when a fresh copy is cached."""
        cached = await get_cached(FINANCE_OVERVIEW_KEY)
        if cached is not None:
            logger.debug("Finance overview served from cache")
            return FinanceOverview.model_validate(cached)

        projects = await self.project_repo.list_with_payments()
        overview = build_overview(projects, utc_now())
        await set_cached(
            FINANCE_OVERVIEW_KEY,
            overview.model_dump(mode="json"),
            get_settings().finance_cache_ttl_seconds,
        )
        return overview
