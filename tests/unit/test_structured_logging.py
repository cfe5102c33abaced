"""Tests for structured logging context."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.veloria.core import config
from src.veloria.core.logging import (
    bind_request_context,
    bind_user_context,
    clear_request_context,
    redact_secrets,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    """Route structlog output to a CapturingLogger for the test."""
    cap_logger = CapturingLogger()
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)


def _log_once(capturing_logger: CapturingLogger) -> dict:
    structlog.get_logger().info("test message")
    (entry,) = capturing_logger.calls
    return entry.kwargs


def test_request_id_is_bound(capturing_logger):
    bind_request_context("req-123")

    assert _log_once(capturing_logger)["request_id"] == "req-123"


def test_missing_request_id_is_not_bound(capturing_logger):
    bind_request_context(None)

    assert "request_id" not in _log_once(capturing_logger)


def test_user_context_omits_email_by_default(capturing_logger):
    user_id = uuid4()

    bind_user_context(user_id, "admin", "admin@example.com")

    kwargs = _log_once(capturing_logger)
    assert kwargs["user_id"] == str(user_id)
    assert kwargs["role"] == "admin"
    assert "user_email" not in kwargs


def test_user_email_logged_when_enabled(capturing_logger, monkeypatch):
    mock_settings = MagicMock()
    mock_settings.log_user_emails = True
    monkeypatch.setattr(config, "get_settings", lambda: mock_settings)

    bind_user_context(uuid4(), "editor", "editor@example.com")

    assert _log_once(capturing_logger)["user_email"] == "editor@example.com"


def test_clear_request_context(capturing_logger):
    bind_request_context("req-123")
    bind_user_context(uuid4(), "admin")

    clear_request_context()

    kwargs = _log_once(capturing_logger)
    assert "request_id" not in kwargs
    assert "user_id" not in kwargs


def test_context_accumulates(capturing_logger):
    user_id = uuid4()

    bind_request_context("req-123")
    bind_user_context(user_id, "admin")

    kwargs = _log_once(capturing_logger)
    assert kwargs["request_id"] == "req-123"
    assert kwargs["user_id"] == str(user_id)


def test_secrets_are_redacted():
    event = redact_secrets(None, "info", {"event": "login", "password": "hunter2", "email": "a@b.c"})

    assert event == {"event": "login", "password": "[redacted]", "email": "a@b.c"}
