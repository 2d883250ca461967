"""
Configuration management for Recipe Book.

This module centralizes environment variable loading from .env file at project root.
It should be imported early in both backend (api/main.py) and frontend (streamlit_app/app.py)
to ensure .env is loaded before any other code accesses environment variables.

In production, .env will usually not exist; load_dotenv() is safe to call and will no-op.
Environment variables from the deployment platform will be used instead.

Environment Variables:
- APP_ENV: Optional, "development" (default) or any other value (e.g. "production").
  Outside development, 500 responses do not include the underlying error message.
- LOG_LEVEL: Optional, defaults to "INFO"
- FRONTEND_URL: Optional, CORS origin of the frontend (defaults to http://localhost:8501)
- MEALDB_BASE_URL: Optional, TheMealDB API root (read by the MealDB connector)
- MEALDB_TIMEOUT_SECONDS: Optional, per-call timeout for TheMealDB (read by the MealDB connector)
- BACKEND_URL: Optional, backend URL for the frontend (defaults to http://localhost:8000)
"""

import logging
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

DEVELOPMENT = "development"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    This function locates the project root by going up from this file's location
    (api/config.py -> project root) and loads .env if it exists.

    Safe to call multiple times. Existing environment variables take precedence.
    """
    this_file = Path(__file__).resolve()
    project_root = this_file.parent.parent
    env_path = project_root / ".env"

    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


class AppConfig:
    """Configuration for the FastAPI backend."""

    @staticmethod
    def get_environment() -> str:
        """
        Get the runtime environment name.

        Returns:
            Lower-cased APP_ENV value (default: "development")
        """
        return (os.getenv("APP_ENV") or DEVELOPMENT).strip().lower()

    @staticmethod
    def is_development() -> bool:
        """True when error details may be exposed in responses."""
        return AppConfig.get_environment() == DEVELOPMENT

    @staticmethod
    def get_log_level() -> int:
        """
        Get the logging level from LOG_LEVEL.

        Returns:
            logging level constant (default: logging.INFO for unknown names)
        """
        name = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    @staticmethod
    def get_cors_origins() -> List[str]:
        """
        Get allowed CORS origins.

        FRONTEND_URL may hold a comma-separated list.

        Returns:
            List of origins (default: ["http://localhost:8501"])
        """
        raw = os.getenv("FRONTEND_URL", "http://localhost:8501")
        return [origin.strip().rstrip("/") for origin in raw.split(",") if origin.strip()]
