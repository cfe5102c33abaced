"""Security utilities - password hashing, tokens and response headers."""

from src.veloria.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.veloria.core.security.headers import SecurityHeadersMiddleware

__all__ = [
    "DUMMY_PASSWORD_HASH",
    "SecurityHeadersMiddleware",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
]
