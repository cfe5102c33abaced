"""Tests for project schema coercion and validation."""

from datetime import date

import pytest
from pydantic import ValidationError

from src.veloria.schemas.project import (
    ColorSwatch,
    DesignChoices,
    Payment,
    ProjectSubmission,
    ProjectUpdate,
)

pytestmark = pytest.mark.unit


def _submission(**overrides):
    data = {
        "serviceType": "landing",
        "projectName": "Bakery site",
        "projectDescription": "A landing page",
        "projectGoals": ["Get orders"],
        "budget": "$1,000",
        "timeline": "standard",
        "companyName": "Crumbs",
        "industry": "Food",
        "targetAudience": "Locals",
        "name": "Jane",
        "email": "jane@example.com",
    }
    return {**data, **overrides}


class TestDesignChoices:
    def test_legacy_string_palette_is_upgraded(self):
        design = DesignChoices.model_validate({"colorPalette": ["#FF5733"], "fonts": ["Inter"]})

        assert design.color_palette[0] == ColorSwatch(color="#FF5733", category="primary")
        assert design.fonts[0].family == "Inter"

    @pytest.mark.parametrize("value", ["#FFF", "#a1b2c3"])
    def test_valid_hex(self, value: str):
        assert ColorSwatch(color=value).color == value

    @pytest.mark.parametrize("value", ["FF5733", "#GGGGGG", "#12345"])
    def test_invalid_hex_rejected(self, value: str):
        with pytest.raises(ValidationError):
            ColorSwatch(color=value)


class TestFormDates:
    def test_timestamp_is_cut_to_date(self):
        payment = Payment.model_validate(
            {"name": "Deposit", "amount": 100, "dueDate": "2025-06-01T00:00:00.000Z"}
        )
        assert payment.due_date == date(2025, 6, 1)

    def test_empty_string_is_none(self):
        payment = Payment.model_validate({"name": "Deposit", "amount": 100, "paidDate": ""})
        assert payment.paid_date is None

    def test_payment_ids_are_generated(self):
        first = Payment(name="A", amount=1)
        second = Payment(name="B", amount=1)
        assert first.id and first.id != second.id

    def test_amount_must_be_positive(self):
        with pytest.raises(ValidationError):
            Payment(name="Deposit", amount=0)


class TestSubmission:
    def test_goals_are_stripped(self):
        submission = ProjectSubmission.model_validate(
            _submission(projectGoals=["  Get orders ", "", "   "])
        )
        assert submission.project_goals == ["Get orders"]

    def test_blank_goals_rejected(self):
        with pytest.raises(ValidationError):
            ProjectSubmission.model_validate(_submission(projectGoals=["", " "]))

    def test_unknown_service_type_rejected(self):
        with pytest.raises(ValidationError):
            ProjectSubmission.model_validate(_submission(serviceType="spaceship"))

    def test_update_tracks_sent_fields(self):
        update = ProjectUpdate.model_validate({"notes": "call back"})
        assert update.model_dump(exclude_unset=True) == {"notes": "call back"}
