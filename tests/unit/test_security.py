"""Tests for password hashing, tokens and settings validation."""

from datetime import timedelta
from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.veloria.core.config import Settings
from src.veloria.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.veloria.schemas.user import UserCreate

pytestmark = pytest.mark.unit


class TestPasswords:
    def test_hash_round_trip(self):
        hashed = hash_password("correct-horse-battery-staple")

        assert hashed.startswith("$argon2id$")
        assert verify_password("correct-horse-battery-staple", hashed)
        assert not verify_password("wrong", hashed)

    def test_invalid_hash_is_false_not_error(self):
        assert verify_password("anything", "not-a-hash") is False


class TestTokens:
    def test_claims(self):
        user_id = uuid4()

        payload = decode_token(create_access_token(user_id, "editor"))

        assert payload["sub"] == str(user_id)
        assert payload["role"] == "editor"
        assert payload["type"] == "access"

    def test_expired_token_decodes_to_none(self):
        token = create_access_token(uuid4(), "admin", expires_delta=timedelta(seconds=-1))

        assert decode_token(token) is None

    def test_tampered_token_decodes_to_none(self):
        token = create_access_token(uuid4(), "admin")

        assert decode_token(token[:-2] + "xx") is None


class TestPasswordStrength:
    def test_weak_password_rejected(self):
        with pytest.raises(ValidationError, match="Weak password|too weak"):
            UserCreate(email="a@example.com", password="password1", name="A")

    def test_strong_password_accepted(self):
        user = UserCreate(email="a@example.com", password="correct-horse-battery-staple", name="A")

        assert user.role == "admin"


class TestSettingsValidation:
    def test_short_jwt_secret_rejected(self):
        with pytest.raises(ValidationError, match="at least 32 characters"):
            Settings(database_url="sqlite+aiosqlite://", jwt_secret_key="short")

    def test_default_jwt_secret_rejected(self):
        with pytest.raises(ValidationError, match="changed from default"):
            Settings(
                database_url="sqlite+aiosqlite://",
                jwt_secret_key="change-this-to-a-secure-random-string",
            )

    def test_cors_wildcard_rejected(self):
        with pytest.raises(ValidationError, match="wildcard"):
            Settings(
                database_url="sqlite+aiosqlite://",
                jwt_secret_key="x" * 32,
                cors_origins=["*"],
            )
