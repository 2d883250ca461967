"""
Recipe service functions that back the HTTP API.

This module composes the pieces of the backend into the three operations the API exposes:
- list_recipes: resolve browse filters to one TheMealDB query and reshape the results
- get_recipe: look up one recipe by id (always full mode)
- list_category_recipes: list a category, capped and reduced to four fields

Each operation makes at most one upstream call and returns a ServiceResult whose status
tells the API layer how to answer:
- "ok": records were found
- "no_results": a listing query matched nothing (still a success, with an empty list)
- "not_found": a single-record lookup matched nothing

UpstreamError from the connector is not handled here; it propagates to the caller.
Records that fail validation are raised as UpstreamError too.

Flow: FastAPI route -> service function -> MealDbConnector.fetch() -> reshape -> ServiceResult
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from recipebook.connectors.base import BaseConnector, UpstreamError
from recipebook.connectors.mealdb_connector import MealDbConnector
from recipebook.filters import resolve_query
from recipebook.models import FilterQuery
from recipebook.reshape import reduce_category_listing, reshape_full, reshape_records

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_NO_RESULTS = "no_results"
STATUS_NOT_FOUND = "not_found"


@dataclass
class ServiceResult:
    """Outcome of a service call: a status plus optional data and count."""
    status: str
    data: Any = None
    count: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.status == STATUS_OK


def _get_connector(connector: Optional[BaseConnector]) -> BaseConnector:
    # Resolved at call time so tests can patch recipebook.service.MealDbConnector
    return connector if connector is not None else MealDbConnector()


@contextmanager
def _upstream_records(description: str):
    """Treat records that fail validation as a bad upstream answer."""
    try:
        yield
    except ValidationError as e:
        logger.warning("Invalid TheMealDB record in %s: %s", description, e)
        raise UpstreamError(f"TheMealDB returned an invalid record for {description}") from e


def list_recipes(
    filters: Optional[FilterQuery] = None,
    connector: Optional[BaseConnector] = None,
) -> ServiceResult:
    """
    Browse recipes with optional filters.

    Args:
        filters: Browse filters; only the highest-precedence one is used
        connector: Provider connector (defaults to a new MealDbConnector)

    Returns:
        ServiceResult with status "ok" and a list of NormalizedRecipe, or
        "no_results" with an empty list when the provider has no matches.

    Raises:
        UpstreamError: If the provider call fails.

    Example:
        >>> result = list_recipes(FilterQuery(ingredient="chicken"))
        >>> [r.ingredients for r in result.data][:1]  # filter.php returns summary records
        [[]]
    """
    query = resolve_query(filters)
    logger.info("Recipe listing: query=%s", query.describe())

    meals = _get_connector(connector).fetch(query)
    with _upstream_records(query.describe()):
        recipes = reshape_records(meals)

    if not recipes:
        logger.info("Recipe listing: no results for %s", query.describe())
        return ServiceResult(status=STATUS_NO_RESULTS, data=[], count=0)

    return ServiceResult(status=STATUS_OK, data=recipes, count=len(recipes))


def get_recipe(recipe_id: str, connector: Optional[BaseConnector] = None) -> ServiceResult:
    """
    Look up one recipe by id.

    The first returned record is reshaped in full mode, regardless of whether it
    carries instructions.

    Returns:
        ServiceResult with status "ok" and a NormalizedRecipe, or "not_found"
        when the provider returns no records.

    Raises:
        UpstreamError: If the provider call fails.
    """
    meals = _get_connector(connector).lookup(recipe_id)

    if not meals:
        logger.info("Recipe lookup: %r not found", recipe_id)
        return ServiceResult(status=STATUS_NOT_FOUND)

    with _upstream_records(f"lookup {recipe_id!r}"):
        recipe = reshape_full(meals[0])

    return ServiceResult(status=STATUS_OK, data=recipe)


def list_category_recipes(category: str, connector: Optional[BaseConnector] = None) -> ServiceResult:
    """
    List up to 10 recipes from one category, reduced to id/title/thumbnail/category.

    Returns:
        ServiceResult with status "ok" and a list of CategoryRecipe, or "no_results"
        with an empty list when the category has no recipes.

    Raises:
        UpstreamError: If the provider call fails.
    """
    meals = _get_connector(connector).filter_by_category(category)
    with _upstream_records(f"category {category!r}"):
        recipes = reduce_category_listing(meals, category)

    if not recipes:
        return ServiceResult(status=STATUS_NO_RESULTS, data=[], count=0)

    return ServiceResult(status=STATUS_OK, data=recipes, count=len(recipes))
