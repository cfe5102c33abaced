"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, ProjectFactory, ...
"""

from tests.factories.base import BaseFactory, generate_uuid, utc_now
from tests.factories.booking import BookingFactory, ContactFactory
from tests.factories.project import ProjectFactory, milestone, payment
from tests.factories.user import DEFAULT_TEST_PASSWORD, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid",
    "utc_now",
    # User
    "UserFactory",
    "DEFAULT_TEST_PASSWORD",
    # Project
    "ProjectFactory",
    "milestone",
    "payment",
    # Booking / contact
    "BookingFactory",
    "ContactFactory",
]
