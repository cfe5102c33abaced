from uuid import UUID

from pydantic import EmailStr, Field, field_validator
from zxcvbn import zxcvbn

from src.veloria.models.enums import UserRole
from src.veloria.schemas.base import CamelModel

# Minimum zxcvbn score (0-4 scale): 3 = "safely unguessable"
MIN_PASSWORD_SCORE = 3


def check_password_strength(password: str) -> str:
    """Raise ValueError with zxcvbn feedback if the password is guessable."""
    result = zxcvbn(password)
    if result["score"] >= MIN_PASSWORD_SCORE:
        return password

    feedback = result.get("feedback", {})
    warning = feedback.get("warning", "")
    suggestions = feedback.get("suggestions", [])
    if warning:
        raise ValueError(f"Weak password: {warning}")
    if suggestions:
        raise ValueError(f"Weak password: {suggestions[0]}")
    raise ValueError("Password is too weak. Use a longer password with a mix of characters.")


class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=100)
    name: str = Field(min_length=1, max_length=100)
    role: UserRole = UserRole.ADMIN

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        return check_password_strength(v)


class UserRead(CamelModel):
    """Public view of a dashboard user, stored by the client under ``user``."""

    id: UUID
    name: str
    email: EmailStr
    role: UserRole
