"""
Tests for the upstream call logging utility.
"""

import json
import logging
from unittest.mock import Mock

from recipebook.events import (
    UPSTREAM_CALL_EVENT,
    build_call_event,
    emit_call_event,
    log_upstream_call,
)


class TestBuildCallEvent:
    """Test call record construction."""

    def test_record_shape(self):
        record = build_call_event(
            "get",
            "https://www.themealdb.com/api/json/v1/1/filter.php",
            params={"i": "chicken"},
            status_code=200,
            elapsed_ms=123.456,
        )

        assert set(record) == {"ts", "event", "method", "url", "params", "status_code", "elapsed_ms", "error"}
        assert record["event"] == UPSTREAM_CALL_EVENT
        assert record["method"] == "GET"
        assert record["params"] == {"i": "chicken"}
        assert record["elapsed_ms"] == 123.5
        assert record["error"] is None

    def test_defaults(self):
        record = build_call_event("GET", "http://x")

        assert record["params"] == {}
        assert record["status_code"] is None
        assert record["elapsed_ms"] is None


class TestLogUpstreamCall:
    """Test the default logging hook."""

    def test_success_logged_at_info_as_json(self, caplog):
        record = build_call_event("GET", "http://x/search.php", {"s": ""}, status_code=200, elapsed_ms=5)

        with caplog.at_level(logging.INFO, logger="recipebook.events"):
            log_upstream_call(record)

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.INFO
        logged = json.loads(caplog.records[0].getMessage())
        assert logged["url"] == "http://x/search.php"
        assert logged["status_code"] == 200

    def test_error_logged_at_warning(self, caplog):
        record = build_call_event("GET", "http://x", error="timeout: read timed out")

        with caplog.at_level(logging.INFO, logger="recipebook.events"):
            log_upstream_call(record)

        assert caplog.records[0].levelno == logging.WARNING

    def test_http_error_status_logged_at_warning(self, caplog):
        record = build_call_event("GET", "http://x", status_code=503)

        with caplog.at_level(logging.INFO, logger="recipebook.events"):
            log_upstream_call(record)

        assert caplog.records[0].levelno == logging.WARNING


class TestEmitCallEvent:
    """Test hook dispatch."""

    def test_hook_receives_record(self):
        hook = Mock()
        record = {"event": UPSTREAM_CALL_EVENT}

        emit_call_event(hook, record)

        hook.assert_called_once_with(record)

    def test_none_hook_is_noop(self):
        emit_call_event(None, {"event": UPSTREAM_CALL_EVENT})

    def test_hook_failure_is_swallowed(self):
        hook = Mock(side_effect=ValueError("bad hook"))

        emit_call_event(hook, {})

        hook.assert_called_once()
