"""
TheMealDB connector using requests.

This connector is the only place in the backend that talks to TheMealDB's public JSON API
(https://www.themealdb.com/api.php). It:
- Runs exactly one GET per resolved UpstreamQuery, with a fixed timeout and no retries
- Returns the raw ``meals`` collection (None when the provider answers ``{"meals": null}``)
- Converts every requests failure, non-2xx status and malformed body into UpstreamError
- Reports each call (success or failure) to an optional call hook for structured logging

Configuration (read at construction when not passed explicitly):
- MEALDB_BASE_URL: Optional, defaults to https://www.themealdb.com/api/json/v1/1
- MEALDB_TIMEOUT_SECONDS: Optional, defaults to 10
"""

import logging
import os
import time
from typing import Any, Dict, List, Optional

import requests

from recipebook.events import CallHook, build_call_event, emit_call_event, log_upstream_call
from recipebook.filters import (
    FILTER_ENDPOINT,
    SEARCH_ENDPOINT,
    UpstreamQuery,
)

from .base import BaseConnector, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Sentinel so callers can pass call_hook=None to switch instrumentation off
_DEFAULT_HOOK = object()

# Note: Environment variables should be loaded by api.config module early in the application lifecycle.
# For local development, .env is loaded when api.config is imported (in api/main.py or streamlit_app/app.py).


def _timeout_from_env() -> float:
    """
    Read MEALDB_TIMEOUT_SECONDS, falling back to the default for missing,
    non-numeric, or non-positive values.
    """
    raw = os.getenv("MEALDB_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Invalid MEALDB_TIMEOUT_SECONDS %r, using %s", raw, DEFAULT_TIMEOUT_SECONDS)
        return DEFAULT_TIMEOUT_SECONDS
    if timeout <= 0:
        logger.warning("Non-positive MEALDB_TIMEOUT_SECONDS %r, using %s", raw, DEFAULT_TIMEOUT_SECONDS)
        return DEFAULT_TIMEOUT_SECONDS
    return timeout


class MealDbConnector(BaseConnector):
    """
    Connector for TheMealDB recipe catalog.

    Example:
        >>> connector = MealDbConnector()
        >>> meals = connector.filter_by_ingredient("chicken")  # list of summary records or None
    """
    source = "mealdb"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        call_hook: Any = _DEFAULT_HOOK,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: API root (optional, reads MEALDB_BASE_URL env var or uses the public v1 URL)
            timeout: Per-call timeout in seconds (optional, reads MEALDB_TIMEOUT_SECONDS or uses 10)
            call_hook: Callable receiving one structured record per call. Defaults to
                       recipebook.events.log_upstream_call; pass None to disable.
        """
        self.base_url = (base_url or os.getenv("MEALDB_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout and timeout > 0 else _timeout_from_env()
        self.call_hook: Optional[CallHook] = log_upstream_call if call_hook is _DEFAULT_HOOK else call_hook

    def fetch(self, query: UpstreamQuery) -> Optional[List[Dict[str, Any]]]:
        """
        Run one query against TheMealDB.

        Args:
            query: Resolved UpstreamQuery (endpoint + params)

        Returns:
            The ``meals`` list from the response body, or None when it is null/missing.

        Raises:
            UpstreamError: On timeout, connection failure, non-2xx status, or a body that
                is not a JSON object.
        """
        url = f"{self.base_url}/{query.endpoint}"
        started = time.perf_counter()
        status_code: Optional[int] = None

        try:
            response = requests.get(url, params=query.params, timeout=self.timeout)
            status_code = response.status_code
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            self._report(url, query, status_code, started, f"timeout: {e}")
            raise UpstreamError(f"TheMealDB request timed out after {self.timeout}s", url=url) from e
        except requests.exceptions.HTTPError as e:
            self._report(url, query, status_code, started, f"http error: {e}")
            raise UpstreamError(
                f"TheMealDB returned HTTP {status_code}", url=url, status_code=status_code
            ) from e
        except requests.exceptions.RequestException as e:
            self._report(url, query, status_code, started, f"request failed: {e}")
            raise UpstreamError(f"TheMealDB request failed: {e}", url=url) from e

        try:
            body = response.json()
        except ValueError as e:
            # requests raises a ValueError subclass on malformed bodies
            self._report(url, query, status_code, started, f"invalid json: {e}")
            raise UpstreamError("TheMealDB returned a malformed response", url=url, status_code=status_code) from e

        if not isinstance(body, dict):
            self._report(url, query, status_code, started, "unexpected body type")
            raise UpstreamError("TheMealDB returned an unexpected response shape", url=url, status_code=status_code)

        meals = body.get("meals")
        if meals is not None and not isinstance(meals, list):
            self._report(url, query, status_code, started, "meals is not a list")
            raise UpstreamError("TheMealDB 'meals' field is not a list", url=url, status_code=status_code)

        self._report(url, query, status_code, started, None)
        return meals

    def search(self, term: str) -> Optional[List[Dict[str, Any]]]:
        """Free-text search by meal name (full detail records)."""
        return self.fetch(UpstreamQuery(kind="search", endpoint=SEARCH_ENDPOINT, params={"s": term}))

    def filter_by_ingredient(self, ingredient: str) -> Optional[List[Dict[str, Any]]]:
        """Summary records for meals using an ingredient."""
        return self.fetch(UpstreamQuery(kind="ingredient", endpoint=FILTER_ENDPOINT, params={"i": ingredient}))

    def filter_by_area(self, area: str) -> Optional[List[Dict[str, Any]]]:
        """Summary records for meals from an area (country/cuisine)."""
        return self.fetch(UpstreamQuery(kind="country", endpoint=FILTER_ENDPOINT, params={"a": area}))

    def _report(
        self,
        url: str,
        query: UpstreamQuery,
        status_code: Optional[int],
        started: float,
        error: Optional[str],
    ) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000
        record = build_call_event(
            "GET",
            url,
            params=query.params,
            status_code=status_code,
            elapsed_ms=elapsed_ms,
            error=error,
        )
        emit_call_event(self.call_hook, record)
