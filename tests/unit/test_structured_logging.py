"""Tests for structured logging context."""

from uuid import uuid4

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.hrdesk.core.logging import (
    _service_adder,
    bind_caller_context,
    bind_request_context,
    clear_request_context,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    """Create a capturing logger for tests."""
    cap_logger = CapturingLogger()

    # Save original configuration to restore later
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


def test_bind_request_context(capturing_logger):
    """Test binding request_id to log context."""
    request_id = "test-request-123"

    bind_request_context(request_id)
    logger = structlog.get_logger()
    logger.info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["request_id"] == request_id


def test_bind_request_context_with_none(capturing_logger):
    """Test that None request_id is not bound."""
    bind_request_context(None)
    logger = structlog.get_logger()
    logger.info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert "request_id" not in entries[0].kwargs


def test_bind_caller_context(capturing_logger):
    tenant_id = uuid4()
    user_id = uuid4()

    bind_caller_context(tenant_id, user_id)
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert entries[0].kwargs["tenant_id"] == str(tenant_id)
    assert entries[0].kwargs["user_id"] == str(user_id)


def test_bind_caller_context_without_user(capturing_logger):
    bind_caller_context(uuid4())
    structlog.get_logger().info("test message")

    assert "user_id" not in capturing_logger.calls[0].kwargs


def test_clear_request_context(capturing_logger):
    """Test clearing request context."""
    bind_request_context("test-123")
    bind_caller_context(uuid4())

    clear_request_context()
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert "request_id" not in entries[0].kwargs
    assert "tenant_id" not in entries[0].kwargs


def test_service_fields_are_added():
    add_service = _service_adder("HR Desk", "testing")

    event = add_service(None, "info", {"event": "test message"})

    assert event == {"event": "test message", "service": "HR Desk", "env": "testing"}


def test_service_fields_do_not_override_event_values():
    add_service = _service_adder("HR Desk", "testing")

    event = add_service(None, "info", {"event": "x", "env": "production"})

    assert event["env"] == "production"
