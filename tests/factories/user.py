"""User factory for test data generation."""

from polyfactory import Use

from src.veloria.core.security import hash_password
from src.veloria.models import User, UserRole
from tests.factories.base import BaseFactory, generate_uuid, utc_now

# Default test password - stored for convenience in tests
DEFAULT_TEST_PASSWORD = "correct-horse-battery-staple"


class UserFactory(BaseFactory):
    """Factory for generating User test data."""

    __model__ = User

    id = Use(generate_uuid)
    email = Use(lambda: f"user_{generate_uuid().hex[-8:]}@example.com")
    hashed_password = Use(lambda: hash_password(DEFAULT_TEST_PASSWORD))
    name = "Studio Admin"
    role = UserRole.ADMIN.value
    is_active = True
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def editor(cls, **kwargs):
        """Create an editor."""
        return cls.build(role=UserRole.EDITOR.value, name=kwargs.pop("name", "Studio Editor"), **kwargs)

    @classmethod
    def inactive(cls, **kwargs):
        """Create an inactive user."""
        return cls.build(is_active=False, **kwargs)
