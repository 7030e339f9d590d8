"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from flask import g
from product_api.api.deps import Identity
from product_api.core.logger import (
    JSONFormatter,
    RequestContextFilter,
    configure_logging,
    ensure_request_id,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("product_api.test", logging.INFO, __file__, 1, "hello %s", ("x",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    configure_logging("DEBUG")

    assert logging.getLogger().level == logging.DEBUG


def test_json_formatter_emits_whitelisted_extras_only() -> None:
    payload = json.loads(
        JSONFormatter().format(_record(product_id=7, user_id=3, secret="nope", request_id="r-1"))
    )

    assert payload["message"] == "hello x"
    assert payload["level"] == "INFO"
    assert payload["product_id"] == 7
    assert payload["user_id"] == 3
    assert payload["request_id"] == "r-1"
    assert "secret" not in payload


def test_request_context_filter_outside_request() -> None:
    record = _record()

    assert RequestContextFilter().filter(record) is True
    assert record.request_id is None
    assert record.actor_id is None


def test_request_context_filter_uses_header_and_identity(app) -> None:
    with app.test_request_context("/", headers={"X-Request-ID": "abc-123"}):
        g.identity = Identity(id=42, email="a@example.com")
        record = _record()
        RequestContextFilter().filter(record)

        assert record.request_id == "abc-123"
        assert record.actor_id == 42


def test_ensure_request_id_is_stable_within_request(app) -> None:
    with app.test_request_context("/"):
        first = ensure_request_id()
        assert first
        assert ensure_request_id() == first
