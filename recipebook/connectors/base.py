"""
Base connector abstract class for recipe catalog integrations.

This module defines the interface a recipe provider connector must implement so the
service layer never depends on a specific provider's HTTP details.

All connectors must:
- Implement the source attribute (e.g., "mealdb")
- Provide a fetch method that runs exactly one resolved UpstreamQuery and returns the
  provider's raw record collection (or None when the provider reports no matches)
- Raise UpstreamError on any transport, timeout, or non-2xx failure
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from recipebook.filters import UpstreamQuery, category_query, lookup_query


class UpstreamError(Exception):
    """
    Exception raised when the upstream recipe provider cannot be reached or answers badly.

    This exception is raised when:
    - The request times out or the connection fails
    - The provider returns a non-2xx status
    - The response body is not the expected JSON document
    """

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code


class BaseConnector(ABC):
    """
    Abstract base class for recipe provider connectors.

    Attributes:
        source: String identifier for the provider (e.g., "mealdb")
    """
    source: str

    @abstractmethod
    def fetch(self, query: UpstreamQuery) -> Optional[List[Dict[str, Any]]]:
        """
        Run one upstream query.

        Args:
            query: Resolved UpstreamQuery (see recipebook.filters)

        Returns:
            List of raw provider records, or None when the provider reports no matches.

        Raises:
            UpstreamError: On timeout, transport failure, non-2xx status or bad body.
        """
        pass

    def lookup(self, recipe_id: str) -> Optional[List[Dict[str, Any]]]:
        """Fetch the full detail record for one recipe id."""
        return self.fetch(lookup_query(recipe_id))

    def filter_by_category(self, category: str) -> Optional[List[Dict[str, Any]]]:
        """Fetch the summary records for one category."""
        return self.fetch(category_query(category))
