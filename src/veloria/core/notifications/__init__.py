"""Notification services."""

from src.veloria.core.notifications.email import (
    send_booking_cancellation,
    send_booking_cancelled_notification,
    send_booking_confirmed,
    send_contact_received,
    send_new_booking_notification,
    send_new_contact_notification,
    send_new_project_notification,
    send_project_received,
)

__all__ = [
    "send_booking_cancellation",
    "send_booking_cancelled_notification",
    "send_booking_confirmed",
    "send_contact_received",
    "send_new_booking_notification",
    "send_new_contact_notification",
    "send_new_project_notification",
    "send_project_received",
]
