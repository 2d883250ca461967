"""
Filter-to-query resolution for TheMealDB.

TheMealDB can only answer one question per request, so a browse request carrying
several filters is collapsed to exactly one upstream query. The first filter that is
set wins, in this order:

    search -> ingredient -> country -> category

With no filter set, the query falls back to ``search.php?s=`` (an empty search term),
which returns the provider's default catalog-wide result set.

Resolution flow: GET /api/recipes -> FilterQuery -> resolve_query() -> UpstreamQuery -> MealDbConnector.fetch()
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from recipebook.models import FilterQuery

SEARCH_ENDPOINT = "search.php"
FILTER_ENDPOINT = "filter.php"
LOOKUP_ENDPOINT = "lookup.php"

# (filter name, endpoint, query parameter) in precedence order
FILTER_PRECEDENCE = (
    ("search", SEARCH_ENDPOINT, "s"),
    ("ingredient", FILTER_ENDPOINT, "i"),
    ("country", FILTER_ENDPOINT, "a"),
    ("category", FILTER_ENDPOINT, "c"),
)


@dataclass(frozen=True)
class UpstreamQuery:
    """A single TheMealDB request: endpoint plus query parameters."""
    kind: str
    endpoint: str
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def value(self) -> Optional[str]:
        """The filter value that governs this query, if any."""
        values = [v for v in self.params.values() if v]
        return values[0] if values else None

    def describe(self) -> str:
        """Short human-readable form used in logs, e.g. ``filter.php?i=chicken``."""
        query_string = "&".join(f"{k}={v}" for k, v in self.params.items())
        return f"{self.endpoint}?{query_string}"


def resolve_query(filters: Optional[FilterQuery]) -> UpstreamQuery:
    """
    Map browse filters to exactly one upstream query.

    Args:
        filters: FilterQuery with any combination of search/ingredient/country/category set.
                 None is treated like an empty FilterQuery.

    Returns:
        UpstreamQuery for the highest-precedence filter that is set, or the
        catalog-wide ``search.php?s=`` query when none is set.

    Examples:
        >>> resolve_query(FilterQuery(ingredient="chicken")).describe()
        'filter.php?i=chicken'
        >>> resolve_query(FilterQuery(category="Beef", search="pie")).describe()
        'search.php?s=pie'
        >>> resolve_query(FilterQuery()).describe()
        'search.php?s='
    """
    if filters is not None:
        for name, endpoint, param in FILTER_PRECEDENCE:
            value = getattr(filters, name)
            if value:
                return UpstreamQuery(kind=name, endpoint=endpoint, params={param: value})

    return UpstreamQuery(kind="all", endpoint=SEARCH_ENDPOINT, params={"s": ""})


def lookup_query(recipe_id: str) -> UpstreamQuery:
    """Build the single-record lookup query for a recipe id."""
    return UpstreamQuery(kind="lookup", endpoint=LOOKUP_ENDPOINT, params={"i": recipe_id})


def category_query(category: str) -> UpstreamQuery:
    """Build the category listing query (same shape as the category filter)."""
    return UpstreamQuery(kind="category", endpoint=FILTER_ENDPOINT, params={"c": category})


def describe_filters(filters: Optional[FilterQuery]) -> str:
    """
    Page title for a set of browse filters.

    The title names the filter that actually governs the query, so it follows the
    same precedence as resolve_query().
    """
    query = resolve_query(filters)
    if query.kind == "search":
        return f'Search results for "{query.value}"'
    if query.kind == "ingredient":
        return f"Recipes with {query.value}"
    if query.kind in ("country", "category"):
        return f"{query.value} Recipes"
    return "All Recipes"
