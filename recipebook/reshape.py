"""
Reshaping of TheMealDB records into the Recipe Book response contract.

Two modes, chosen per record:

- Full mode: the record carries ``strInstructions`` (it came from ``search.php`` or
  ``lookup.php``). Ingredient/measure slots 1..20 are scanned once; a slot is kept only
  when its ingredient is non-blank after trimming. A measure without an ingredient is
  dropped along with its slot.
- Summary mode: no instructions (``filter.php`` results). The recipe gets empty
  instructions and no ingredients, whatever the numbered fields contain.

Category listings are additionally capped and reduced to four fields.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from recipebook.models import (
    CategoryRecipe,
    IngredientLine,
    NormalizedRecipe,
    RawMealRecord,
)

logger = logging.getLogger(__name__)

# Category listings only ever return this many recipes
CATEGORY_LISTING_LIMIT = 10

RawRecord = Union[RawMealRecord, Dict[str, Any]]


def _as_raw(record: RawRecord) -> RawMealRecord:
    if isinstance(record, RawMealRecord):
        return record
    return RawMealRecord.model_validate(record)


def extract_ingredients(record: RawRecord) -> List[IngredientLine]:
    """
    Turn the 20 ingredient/measure slots into an ordered list of IngredientLine.

    Args:
        record: RawMealRecord or raw upstream dict

    Returns:
        IngredientLine list in slot order 1..20, skipping slots whose ingredient
        is None, empty, or whitespace-only. Measures are trimmed; a missing
        measure becomes "".

    Examples:
        >>> extract_ingredients({"idMeal": "1", "strIngredient1": " Salt ", "strMeasure1": None})
        [IngredientLine(ingredient='Salt', measure='')]
    """
    raw = _as_raw(record)
    lines: List[IngredientLine] = []
    for ingredient, measure in raw.ingredient_slots:
        name = (ingredient or "").strip()
        if not name:
            continue
        lines.append(IngredientLine(ingredient=name, measure=(measure or "").strip()))
    return lines


def reshape_full(record: RawRecord) -> NormalizedRecipe:
    """Reshape a full detail record, including its ingredient list."""
    raw = _as_raw(record)
    return NormalizedRecipe(
        id=raw.id_meal,
        title=raw.str_meal,
        category=raw.str_category or "",
        area=raw.str_area or "",
        instructions=raw.str_instructions or "",
        thumbnail_url=raw.str_meal_thumb,
        tags=raw.str_tags,
        video_url=raw.str_youtube,
        source_url=raw.str_source,
        ingredients=extract_ingredients(raw),
    )


def reshape_summary(record: RawRecord) -> NormalizedRecipe:
    """Reshape a summary record: no instructions, no ingredients."""
    raw = _as_raw(record)
    return NormalizedRecipe(
        id=raw.id_meal,
        title=raw.str_meal,
        category=raw.str_category or "",
        area=raw.str_area or "",
        instructions="",
        thumbnail_url=raw.str_meal_thumb,
        tags=raw.str_tags,
        video_url=raw.str_youtube,
        source_url=raw.str_source,
        ingredients=[],
    )


def reshape_record(record: RawRecord) -> NormalizedRecipe:
    """Pick full or summary mode based on whether instructions are present."""
    raw = _as_raw(record)
    if raw.has_full_detail:
        return reshape_full(raw)
    return reshape_summary(raw)


def reshape_records(records: Optional[Iterable[RawRecord]]) -> List[NormalizedRecipe]:
    """
    Reshape an upstream ``meals`` collection.

    Args:
        records: The ``meals`` value from TheMealDB. May be None (the provider
                 returns ``{"meals": null}`` when nothing matches).

    Returns:
        NormalizedRecipe list in upstream order; empty list for None.
    """
    if not records:
        return []
    return [reshape_record(record) for record in records]


def reduce_category_listing(
    records: Optional[Iterable[RawRecord]],
    category: str,
    limit: int = CATEGORY_LISTING_LIMIT,
) -> List[CategoryRecipe]:
    """
    Cap a category listing and reduce each entry to id, title, thumbnail and category.

    Args:
        records: The ``meals`` value from ``filter.php?c=...`` (may be None)
        category: The category that was requested; used when a record omits strCategory
        limit: Maximum number of recipes to keep, in upstream order

    Returns:
        At most ``limit`` CategoryRecipe entries.
    """
    if not records:
        return []

    reduced: List[CategoryRecipe] = []
    for record in records:
        if len(reduced) >= limit:
            break
        raw = _as_raw(record)
        reduced.append(
            CategoryRecipe(
                id=raw.id_meal,
                title=raw.str_meal,
                thumbnail_url=raw.str_meal_thumb,
                category=raw.str_category or category,
            )
        )

    logger.debug("Category listing %r reduced to %d recipes", category, len(reduced))
    return reduced
