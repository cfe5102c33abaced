"""Shapes bookings and project schedules into calendar events."""

from datetime import date, datetime, time, timedelta
from typing import Any

from src.veloria.models import Booking, BookingStatus, CallType, Project
from src.veloria.models.enums import MilestoneStatus, PaymentStatus
from src.veloria.schemas.project import CalendarEvent

BOOKING_COLORS = {
    BookingStatus.SCHEDULED: "#3498db",
    BookingStatus.COMPLETED: "#2ecc71",
    BookingStatus.CANCELLED: "#e74c3c",
    BookingStatus.RESCHEDULED: "#f39c12",
}
DEFAULT_COLOR = "#95a5a6"

PROJECT_START_COLOR = "#8b86be"
DEADLINE_COLOR = "#e74c3c"
MILESTONE_COLORS = {
    MilestoneStatus.PENDING: "#f39c12",
    MilestoneStatus.IN_PROGRESS: "#3498db",
    MilestoneStatus.COMPLETED: "#2ecc71",
}
PAYMENT_COLORS = {
    PaymentStatus.PENDING: "#ecb761",
    PaymentStatus.PAID: "#2ecc71",
    PaymentStatus.OVERDUE: "#e74c3c",
}

BOOKING_DURATION = timedelta(hours=1)


def booking_event(booking: Booking) -> CalendarEvent:
    """One-hour event starting at the booking's date and time."""
    hours, minutes = (int(part) for part in booking.time.split(":"))
    start = datetime.combine(booking.date, time(hours, minutes))
    icon = "📹" if booking.call_type == CallType.VIDEO else "📞"
    return CalendarEvent(
        id=str(booking.id),
        title=f"{icon} {booking.name}: {booking.project_type}",
        start=start.isoformat(),
        end=(start + BOOKING_DURATION).isoformat(),
        all_day=False,
        type="booking",
        color=BOOKING_COLORS.get(BookingStatus(booking.status), DEFAULT_COLOR),
        extended_props={
            "email": booking.email,
            "phone": booking.phone,
            "company": booking.company,
            "projectType": booking.project_type,
            "callType": booking.call_type,
            "status": booking.status,
        },
    )


def _in_range(day: date | None, start: date | None, end: date | None) -> bool:
    if day is None:
        return False
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True


def _item_date(item: dict[str, Any], key: str) -> date | None:
    value = item.get(key)
    return date.fromisoformat(value[:10]) if value else None


def project_events(
    project: Project, start: date | None = None, end: date | None = None
) -> list[CalendarEvent]:
    """All-day events for a project's start date, deadline, milestones and payments."""
    project_id = str(project.id)
    base_props = {"projectId": project_id, "clientName": project.name}
    events: list[CalendarEvent] = []

    if _in_range(project.start_date, start, end):
        events.append(
            CalendarEvent(
                id=f"{project_id}-start",
                title=f"Start: {project.project_name}",
                start=project.start_date.isoformat(),  # type: ignore[union-attr]
                all_day=True,
                type="project",
                color=PROJECT_START_COLOR,
                extended_props={**base_props, "type": "project", "status": project.status},
            )
        )

    if _in_range(project.deadline, start, end):
        events.append(
            CalendarEvent(
                id=f"{project_id}-deadline",
                title=f"Deadline: {project.project_name}",
                start=project.deadline.isoformat(),  # type: ignore[union-attr]
                all_day=True,
                type="project",
                color=DEADLINE_COLOR,
                extended_props={**base_props, "type": "project", "status": project.status},
            )
        )

    for milestone in project.milestones:
        due = _item_date(milestone, "due_date")
        if not _in_range(due, start, end):
            continue
        status = MilestoneStatus(milestone.get("status", MilestoneStatus.PENDING))
        events.append(
            CalendarEvent(
                id=f"{project_id}-milestone-{milestone['id']}",
                title=f"{project.project_name}: {milestone['name']}",
                start=due.isoformat(),  # type: ignore[union-attr]
                all_day=True,
                type="milestone",
                color=MILESTONE_COLORS[status],
                extended_props={**base_props, "type": "milestone", "status": status.value},
            )
        )

    for payment in project.payment_schedule:
        due = _item_date(payment, "due_date")
        if not _in_range(due, start, end):
            continue
        status = PaymentStatus(payment.get("status", PaymentStatus.PENDING))
        events.append(
            CalendarEvent(
                id=f"{project_id}-payment-{payment['id']}",
                title=f"{project.project_name}: {payment['name']} ({payment['amount']:g})",
                start=due.isoformat(),  # type: ignore[union-attr]
                all_day=True,
                type="payment",
                color=PAYMENT_COLORS[status],
                extended_props={
                    **base_props,
                    "type": "payment",
                    "status": status.value,
                    "amount": payment["amount"],
                },
            )
        )

    return events
