"""
Backend API Client Module.

This module is the **single source of truth** for all backend API communication.
All HTTP calls to the FastAPI backend should go through functions in this module.

Key principles:
- One GET per call with a fixed timeout (no retries)
- Centralized error handling: every failure becomes a BackendError with a message
  that can be shown to the user as-is
- Only the ``data`` part of the response envelope is returned to pages
- No Streamlit imports, so the module can be unit tested without a running app

# NOTE: When adding new endpoints, follow this pattern:
    - Create a function that takes parameters needed for the endpoint
    - Validate required parameters before making any request (raise BackendError)
    - Call _get_data(endpoint, params, fallback_message)
"""

import logging
import os
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 10

NETWORK_ERROR_MESSAGE = "Network error: Please check if the backend server is running"
TIMEOUT_ERROR_MESSAGE = "Request timed out. The backend may be slow or unreachable."

FILTER_KEYS = ("ingredient", "country", "category", "search")


class BackendError(Exception):
    """Raised when a backend call fails; ``message`` is safe to display."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def get_backend_url() -> str:
    """
    Get the backend API base URL from environment variable or use default.

    Returns:
        Backend URL string with trailing slash removed. Defaults to http://localhost:8000 for local development.
    """
    url = os.getenv("BACKEND_URL", "http://localhost:8000")
    return url.rstrip("/")


def _error_message_from_response(response: Optional[requests.Response]) -> Optional[str]:
    """Extract the envelope ``message`` from an error response, if there is one."""
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None


def _get_data(endpoint: str, params: Optional[Dict[str, Any]], fallback_message: str) -> Any:
    """
    GET an endpoint and return the ``data`` field of the envelope.

    Args:
        endpoint: Path starting with "/" (e.g. "/api/recipes")
        params: Query parameters (optional)
        fallback_message: Message used when nothing more specific is known

    Raises:
        BackendError: On timeout, connection failure, non-2xx status, or a bad body.
    """
    url = f"{get_backend_url()}{endpoint}"
    try:
        response = requests.get(url, params=params, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error("Backend request timed out: GET %s", url)
        raise BackendError(TIMEOUT_ERROR_MESSAGE) from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Backend connection failed: GET %s: %s", url, e)
        raise BackendError(NETWORK_ERROR_MESSAGE) from e
    except requests.exceptions.HTTPError as e:
        status_code = e.response.status_code if e.response is not None else None
        message = _error_message_from_response(e.response) or fallback_message
        logger.error("Backend returned %s for GET %s: %s", status_code, url, message)
        raise BackendError(message, status_code=status_code) from e
    except requests.exceptions.RequestException as e:
        logger.error("Backend request failed: GET %s: %s", url, e)
        raise BackendError(fallback_message) from e

    try:
        body = response.json()
    except ValueError as e:
        raise BackendError(fallback_message) from e

    if not isinstance(body, dict):
        raise BackendError(fallback_message)
    return body.get("data")


def build_filter_params(filters: Optional[Dict[str, Optional[str]]]) -> Dict[str, str]:
    """
    Keep only the non-blank browse filters.

    Args:
        filters: Mapping with any of ingredient, country, category, search

    Returns:
        Query parameter dict; unknown keys and blank values are dropped.
    """
    params: Dict[str, str] = {}
    if not filters:
        return params
    for key in FILTER_KEYS:
        value = filters.get(key)
        if value and str(value).strip():
            params[key] = str(value).strip()
    return params


def get_recipes(filters: Optional[Dict[str, Optional[str]]] = None) -> List[Dict[str, Any]]:
    """
    Browse recipes.

    Args:
        filters: Optional mapping with ingredient / country / category / search

    Returns:
        List of recipe dicts (camelCase keys, see recipebook.models.NormalizedRecipe).
    """
    data = _get_data("/api/recipes", build_filter_params(filters), "Failed to fetch recipes")
    return data or []


def get_recipe_by_id(recipe_id: str) -> Dict[str, Any]:
    """
    Get one recipe with ingredients and instructions.

    Raises:
        BackendError: If recipe_id is blank (no request is made) or the call fails.
    """
    if not recipe_id or not str(recipe_id).strip():
        raise BackendError("Recipe ID is required")

    data = _get_data(f"/api/recipes/{quote(str(recipe_id).strip(), safe='')}", None, "Failed to fetch recipe details")
    if not data:
        raise BackendError("Recipe not found", status_code=404)
    return data


def get_recipes_by_category(category: str) -> List[Dict[str, Any]]:
    """
    Get up to 10 reduced recipes (id, title, thumbnailUrl, category) from a category.

    Raises:
        BackendError: If category is blank (no request is made) or the call fails.
    """
    if not category or not category.strip():
        raise BackendError("Category is required")

    data = _get_data(f"/api/recipes/category/{quote(category.strip(), safe='')}", None, "Failed to fetch category recipes")
    return data or []


def get_health_status() -> Optional[Dict[str, Any]]:
    """
    Check backend health status by calling /health endpoint.

    Returns:
        The health response dict, or None if the backend is unreachable or unhealthy.
        Never raises.
    """
    try:
        response = requests.get(f"{get_backend_url()}/health", timeout=5)
        response.raise_for_status()
        data = response.json()
    except (requests.exceptions.RequestException, ValueError):
        return None

    if isinstance(data, dict) and data.get("success"):
        return data
    return None
