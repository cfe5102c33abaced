"""Transactional email via the Resend API.

Admin notifications go to ``settings.admin_email``; confirmations go to the
address the visitor submitted. Every sender returns False instead of raising,
so a mail outage never fails the request that triggered it.
"""

import html
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from datetime import date, datetime

import resend

from src.veloria.core.config import get_settings
from src.veloria.core.logging import get_logger
from src.veloria.models import Booking, Contact, Project
from src.veloria.models.enums import CallType

logger = get_logger(__name__)

_email_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="email_sender")

_BODY_STYLE = (
    "font-family: 'Poppins', Arial, sans-serif; line-height: 1.6; color: #333; "
    "max-width: 600px; margin: 0 auto; background-color: #ffffff;"
)
_HEADER_STYLE = (
    "background: linear-gradient(to right, #ecb761, #deb0bd); padding: 30px 20px; "
    "text-align: center; color: #ffffff;"
)
_LABEL_STYLE = "font-weight: bold; color: #8b86be;"
_FOOTER_STYLE = "background-color: #f8f8f8; padding: 20px; text-align: center; color: #666; font-size: 12px;"


def _fmt(value: object, default: str = "Not provided") -> str:
    if value is None or value == "":
        return default
    if isinstance(value, datetime | date):
        return value.strftime("%B %d, %Y")
    return str(value)


def _render(heading: str, intro: str, rows: list[tuple[str, object]], outro: str = "") -> str:
    """Render the shared branded layout with a label/value table."""
    items = "\n".join(
        f'<div style="margin-bottom: 15px;"><div style="{_LABEL_STYLE}">{html.escape(label)}:</div>'
        f'<div style="margin-top: 5px;">{html.escape(_fmt(value))}</div></div>'
        for label, value in rows
    )
    outro_html = f"<p>{html.escape(outro)}</p>" if outro else ""
    year = datetime.now().year
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="margin: 0; padding: 0; background-color: #f9f9f9;">
    <div style="{_BODY_STYLE}">
        <div style="{_HEADER_STYLE}"><h1 style="margin: 0;">Veloria</h1></div>
        <div style="padding: 30px 20px;">
            <h2 style="color: #ecb761; margin-top: 0;">{html.escape(heading)}</h2>
            <p>{html.escape(intro)}</p>
            {items}
            {outro_html}
        </div>
        <div style="{_FOOTER_STYLE}"><p>&copy; {year} Veloria Studio. All rights reserved.</p></div>
    </div>
</body>
</html>"""


def _deliver(to: str, subject: str, body: str, email_type: str) -> bool:
    settings = get_settings()

    if not settings.resend_api_key:
        logger.warning("RESEND_API_KEY not set - email not sent", to=to, email_type=email_type)
        return True

    resend.api_key = settings.resend_api_key

    def _send() -> None:
        resend.Emails.send(
            {
                "from": settings.email_from,
                "to": [to],
                "subject": subject,
                "html": body,
            }
        )

    try:
        future = _email_executor.submit(_send)
        future.result(timeout=settings.email_send_timeout_seconds)
        logger.info("Email sent", to=to, email_type=email_type)
        return True
    except FuturesTimeoutError:
        logger.error(
            "Email send timed out",
            to=to,
            email_type=email_type,
            timeout=settings.email_send_timeout_seconds,
        )
        return False
    except Exception as e:
        logger.error("Failed to send email", to=to, email_type=email_type, error=str(e))
        return False


def _call_type_label(call_type: str) -> str:
    return "Video Call" if call_type == CallType.VIDEO else "Phone Call"


def _meeting_details(booking: Booking) -> str:
    settings = get_settings()
    if booking.call_type == CallType.VIDEO:
        return booking.meeting_link or settings.meeting_video_link
    return f"We will call you at {booking.phone or settings.meeting_phone_number}"


# --- Projects ---


def send_new_project_notification(project: Project) -> bool:
    """Tell the studio about a new project enquiry."""
    body = _render(
        "New Project Request",
        "You've received a new project request with the following details:",
        [
            ("Client", project.name),
            ("Email", project.email),
            ("Phone", project.phone),
            ("Company", project.company_name),
            ("Project", project.project_name),
            ("Service Type", project.service_type),
            ("Budget", project.budget),
            ("Timeline", project.timeline),
            ("Description", project.project_description),
        ],
    )
    return _deliver(get_settings().admin_email, "New Project Request", body, "new_project")


def send_project_received(project: Project) -> bool:
    body = _render(
        "Thank You for Your Project Request",
        f"Dear {project.name}, we've received your request for {project.project_name}.",
        [("Service Type", project.service_type), ("Timeline", project.timeline)],
        "Our team will review the details and get back to you within 24-48 hours.",
    )
    return _deliver(
        project.email,
        "Your Project Request Has Been Received - Veloria Studio",
        body,
        "project_received",
    )


# --- Bookings ---


def _booking_rows(booking: Booking) -> list[tuple[str, object]]:
    return [
        ("Client", booking.name),
        ("Email", booking.email),
        ("Phone", booking.phone),
        ("Date & Time", f"{_fmt(booking.date)} at {booking.time} ({booking.timezone})"),
        ("Call Type", _call_type_label(booking.call_type)),
        ("Project Type", booking.project_type),
    ]


def send_new_booking_notification(booking: Booking) -> bool:
    body = _render(
        "New Discovery Call Booking",
        "You've received a new discovery call booking with the following details:",
        _booking_rows(booking),
    )
    return _deliver(get_settings().admin_email, "New Discovery Call Booking", body, "new_booking")


def send_booking_confirmed(booking: Booking) -> bool:
    body = _render(
        "Your Discovery Call is Confirmed",
        f"Hi {booking.name}, your discovery call with Veloria Studio is booked.",
        [
            ("Date & Time", f"{_fmt(booking.date)} at {booking.time} ({booking.timezone})"),
            ("Call Type", _call_type_label(booking.call_type)),
            ("Meeting Details", _meeting_details(booking)),
            ("Booking Reference", booking.id),
        ],
        "Need to cancel? Use your booking reference and email address on our website.",
    )
    return _deliver(
        booking.email,
        "Your Discovery Call is Confirmed - Veloria Studio",
        body,
        "booking_confirmed",
    )


def send_booking_cancelled_notification(booking: Booking) -> bool:
    body = _render(
        "Discovery Call Cancelled",
        "A client has cancelled their discovery call:",
        _booking_rows(booking),
    )
    return _deliver(
        get_settings().admin_email, "Discovery Call Cancelled", body, "booking_cancelled"
    )


def send_booking_cancellation(booking: Booking) -> bool:
    body = _render(
        "Booking Cancellation Confirmed",
        f"Hi {booking.name}, your discovery call has been cancelled.",
        [("Date & Time", f"{_fmt(booking.date)} at {booking.time} ({booking.timezone})")],
        "You're welcome to book a new call at any time.",
    )
    return _deliver(
        booking.email,
        "Booking Cancellation Confirmed - Veloria Studio",
        body,
        "booking_cancellation",
    )


# --- Contact messages ---


def send_new_contact_notification(contact: Contact) -> bool:
    body = _render(
        "New Contact Form Submission",
        "You've received a new message from the website contact form:",
        [
            ("Name", contact.name),
            ("Email", contact.email),
            ("Phone", contact.phone),
            ("Subject", contact.subject or "N/A"),
            ("Message", contact.message),
        ],
    )
    return _deliver(get_settings().admin_email, "New Contact Form Submission", body, "new_contact")


def send_contact_received(contact: Contact) -> bool:
    body = _render(
        "Thank You for Reaching Out",
        f"Hi {contact.name}, thanks for contacting Veloria Studio.",
        [("Your Message", contact.message)],
        "We'll get back to you as soon as possible.",
    )
    return _deliver(
        contact.email, "Thank You for Contacting Veloria Studio", body, "contact_received"
    )
