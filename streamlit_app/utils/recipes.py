"""
Recipe display helpers for the Streamlit pages.

Plain functions (no Streamlit calls) that turn backend recipe dicts into what the
pages render: tag lists, instruction paragraphs, and the "related recipes" strip on
the detail page.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from streamlit_app.utils.api_client import BackendError, get_recipes_by_category

logger = logging.getLogger(__name__)

# The detail page shows at most this many recipes from the same category
RELATED_RECIPES_LIMIT = 8


def split_tags(tags: Optional[str]) -> List[str]:
    """
    Split TheMealDB's comma-separated tag string.

    Examples:
        >>> split_tags("Meat, Casserole,")
        ['Meat', 'Casserole']
        >>> split_tags(None)
        []
    """
    if not tags:
        return []
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def split_instructions(instructions: Optional[str]) -> List[str]:
    """Split instructions into non-empty paragraphs on line breaks."""
    if not instructions:
        return []
    return [line.strip() for line in instructions.splitlines() if line.strip()]


def pick_related(
    category_recipes: List[Dict[str, Any]],
    current_id: Optional[str],
    limit: int = RELATED_RECIPES_LIMIT,
) -> List[Dict[str, Any]]:
    """
    Choose the related recipes shown under a recipe.

    Args:
        category_recipes: Recipes from the same category, in backend order
        current_id: Id of the recipe being viewed (excluded from the result)
        limit: Maximum number of recipes to return

    Returns:
        Up to ``limit`` recipes, excluding the current one.
    """
    related = [r for r in category_recipes if str(r.get("id")) != str(current_id)]
    return related[:limit]


def load_related_recipes(
    recipe: Dict[str, Any],
    fetch: Callable[[str], List[Dict[str, Any]]] = get_recipes_by_category,
    limit: int = RELATED_RECIPES_LIMIT,
) -> List[Dict[str, Any]]:
    """
    Fetch recipes from the same category as ``recipe``.

    A failure here never breaks the detail page: it is logged and an empty list is
    returned. Recipes without a category get no related recipes (and no request).
    """
    category = (recipe.get("category") or "").strip()
    if not category:
        return []

    try:
        category_recipes = fetch(category)
    except BackendError as e:
        logger.warning("Failed to fetch category recipes for %r: %s", category, e.message)
        return []

    return pick_related(category_recipes, recipe.get("id"), limit=limit)


# Characters Streamlit's markdown renderer would otherwise interpret
_MARKDOWN_SPECIAL = set("\\`*_{}[]()#+-.!|<>~$")

# Recipe cards show at most this many tags next to category and area
CARD_TAG_LIMIT = 2


def escape_markdown(text: Optional[str]) -> str:
    """
    Backslash-escape markdown syntax so user text renders literally.

    Examples:
        >>> escape_markdown('Search results for "*pie*"')
        'Search results for "\\\\*pie\\\\*"'
    """
    if not text:
        return ""
    return "".join(f"\\{ch}" if ch in _MARKDOWN_SPECIAL else ch for ch in text)


def card_meta(recipe: Dict[str, Any], tag_limit: int = CARD_TAG_LIMIT) -> List[str]:
    """Category, area and the first few tags shown under a recipe card title."""
    parts = [v for v in (recipe.get("category"), recipe.get("area")) if v]
    return parts + split_tags(recipe.get("tags"))[:tag_limit]
