# recipebook/events.py
"""
Structured logging of upstream calls for Recipe Book.

Responsibilities:
- Provide a single log_upstream_call(...) hook that the MealDB connector invokes once
  per outbound request, success or failure.
  - Builds one record with keys: ts, event, method, url, params, status_code,
    elapsed_ms, error.
  - Writes it as a JSON line through the standard logging module (INFO on success,
    WARNING on failure).
  - Never raises exceptions (instrumentation is strictly non-blocking).

- Provide build_call_event(...) so connectors and tests can construct the record
  without logging it.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

UPSTREAM_CALL_EVENT = "upstream_call"

# Signature every call hook must follow
CallHook = Callable[[Dict[str, Any]], None]


def build_call_event(
    method: str,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    status_code: Optional[int] = None,
    elapsed_ms: Optional[float] = None,
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build an upstream call record.

    payload:
    {
        "ts": "2024-01-15T10:30:00.123456+00:00",
        "event": "upstream_call",
        "method": "GET",
        "url": "https://www.themealdb.com/api/json/v1/1/filter.php",
        "params": {"i": "chicken"},
        "status_code": 200,
        "elapsed_ms": 123.4,
        "error": null
    }
    """
    return {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": UPSTREAM_CALL_EVENT,
        "method": method.upper(),
        "url": url,
        "params": params or {},
        "status_code": status_code,
        "elapsed_ms": round(elapsed_ms, 1) if elapsed_ms is not None else None,
        "error": error,
    }


def log_upstream_call(record: Dict[str, Any]) -> None:
    """
    Default call hook: write the record as one JSON log line.

    Failed calls (an ``error`` value or a status code >= 400) are logged at WARNING,
    everything else at INFO. Never raises.
    """
    try:
        line = json.dumps(record, ensure_ascii=False, default=str)
        status_code = record.get("status_code") if isinstance(record, dict) else None
        failed = bool(record.get("error")) or (status_code is not None and status_code >= 400)
        logger.log(logging.WARNING if failed else logging.INFO, "%s", line)
    except Exception as exc:
        # Last-resort: log at debug level, never raise.
        logger.debug("Failed to log upstream call event: %s", exc)


def emit_call_event(hook: Optional[CallHook], record: Dict[str, Any]) -> None:
    """
    Pass a record to a hook, shielding the caller from hook failures.

    A None hook disables instrumentation entirely.
    """
    if hook is None:
        return
    try:
        hook(record)
    except Exception as exc:
        logger.debug("Upstream call hook %r failed: %s", hook, exc)
