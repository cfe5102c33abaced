"""Tests for transactional email rendering and delivery."""

from unittest.mock import MagicMock, patch

import pytest

from src.veloria.core.notifications import email
from tests.factories import BookingFactory, ContactFactory, ProjectFactory

pytestmark = pytest.mark.unit


@pytest.fixture
def mail_settings() -> MagicMock:
    settings = MagicMock()
    settings.resend_api_key = "re_test"
    settings.email_from = "Veloria Team <hello@veloria.in>"
    settings.admin_email = "admin@veloria.in"
    settings.email_send_timeout_seconds = 5
    settings.meeting_video_link = "https://zoom.us/j/studio"
    settings.meeting_phone_number = "+1234567890"
    return settings


def test_without_api_key_nothing_is_sent(mail_settings: MagicMock):
    mail_settings.resend_api_key = None

    with (
        patch.object(email, "get_settings", return_value=mail_settings),
        patch("src.veloria.core.notifications.email.resend.Emails.send") as send,
    ):
        assert email.send_contact_received(ContactFactory.build()) is True

    send.assert_not_called()


def test_admin_notification_goes_to_admin(mail_settings: MagicMock):
    project = ProjectFactory.build(project_name="Bakery <shop>")

    with (
        patch.object(email, "get_settings", return_value=mail_settings),
        patch("src.veloria.core.notifications.email.resend.Emails.send") as send,
    ):
        assert email.send_new_project_notification(project) is True

    params = send.call_args.args[0]
    assert params["to"] == ["admin@veloria.in"]
    assert params["from"] == "Veloria Team <hello@veloria.in>"
    assert "Bakery &lt;shop&gt;" in params["html"]


def test_video_booking_confirmation_has_link(mail_settings: MagicMock):
    booking = BookingFactory.build(call_type="video")

    with (
        patch.object(email, "get_settings", return_value=mail_settings),
        patch("src.veloria.core.notifications.email.resend.Emails.send") as send,
    ):
        email.send_booking_confirmed(booking)

    params = send.call_args.args[0]
    assert params["to"] == [booking.email]
    assert "https://zoom.us/j/studio" in params["html"]
    assert str(booking.id) in params["html"]


def test_send_failure_returns_false(mail_settings: MagicMock):
    with (
        patch.object(email, "get_settings", return_value=mail_settings),
        patch(
            "src.veloria.core.notifications.email.resend.Emails.send",
            side_effect=RuntimeError("boom"),
        ),
    ):
        assert email.send_booking_cancellation(BookingFactory.build()) is False
