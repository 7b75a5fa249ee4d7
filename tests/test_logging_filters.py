"""Tests for sensitive data filtering and JSON log formatting."""

from __future__ import annotations

import json
import logging
from io import StringIO

import pytest

from app.core.config import LogSettings
from app.core.logging import (
    JsonFormatter,
    RequestIdFilter,
    SensitiveDataFilter,
    clear_request_id,
    configure_logging,
    set_request_id,
)


def _capture(name: str) -> tuple[logging.Logger, StringIO]:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.propagate = False

    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.addFilter(RequestIdFilter())
    handler.addFilter(SensitiveDataFilter())
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return logger, stream


def test_api_key_and_bot_token_are_redacted():
    logger, stream = _capture("test_redaction")

    logger.info(
        "startup",
        extra={
            "api_key": "ff-secret-123",
            "discord_token": "bot-token-456",
            "api_base": "https://stats.test",
        },
    )

    output = stream.getvalue()
    assert "ff-secret-123" not in output
    assert "bot-token-456" not in output
    assert "[REDACTED]" in output
    assert "https://stats.test" in output


def test_nested_secrets_are_redacted():
    logger, stream = _capture("test_nested")

    logger.info(
        "nested_event",
        extra={
            "params": {"key": "query-secret", "player_id": "123"},
            "headers": [{"authorization": "Bearer abc"}],
        },
    )

    output = stream.getvalue()
    assert "query-secret" not in output
    assert "Bearer abc" not in output
    assert "123" in output


def test_safe_fields_pass_through_as_json():
    logger, stream = _capture("test_safe")

    logger.warning(
        "stats.upstream_failed",
        extra={"player_id": "42", "error_type": "ReadError"},
    )

    record = json.loads(stream.getvalue())
    assert record["message"] == "stats.upstream_failed"
    assert record["level"] == "warning"
    assert record["player_id"] == "42"
    assert record["error_type"] == "ReadError"
    assert "[REDACTED]" not in stream.getvalue()


def test_request_id_is_attached_from_context():
    logger, stream = _capture("test_request_id")

    set_request_id("req-xyz")
    try:
        logger.info("cache.hit", extra={"player_id": "1"})
    finally:
        clear_request_id()

    assert json.loads(stream.getvalue())["request_id"] == "req-xyz"


@pytest.mark.parametrize("fmt", ["json", "plain"])
def test_configure_logging_installs_single_handler(fmt: str):
    configure_logging(LogSettings(level="DEBUG", format=fmt))

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING

    configure_logging(LogSettings(level="WARNING"))


def test_configure_logging_file_output(tmp_path):
    log_file = tmp_path / "logs" / "app.log"

    configure_logging(LogSettings(output="file", file_path=str(log_file), level="INFO"))
    logging.getLogger("test_file").info("written", extra={"api_key": "nope"})
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "written" in content
    assert "nope" not in content

    configure_logging(LogSettings(level="WARNING"))
