"""
Recipe models for the Recipe Book backend.

This module defines the schemas that sit on either side of the reshaping layer:

- RawMealRecord: a record as returned by TheMealDB (fixed ``str*`` field names plus
  20 numbered ingredient/measure fields).
- IngredientLine, NormalizedRecipe, CategoryRecipe: the application's own contract,
  serialized to clients with camelCase keys.
- FilterQuery: the optional browse filters accepted by ``GET /api/recipes``.

# NOTE: The numbered ``strIngredientN`` / ``strMeasureN`` fields are decoded exactly once,
    when a RawMealRecord is validated, into ``ingredient_slots`` (a fixed 20-slot tuple).
    Nothing downstream should look those fields up by name again.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# TheMealDB always ships exactly this many numbered ingredient/measure fields
INGREDIENT_SLOT_COUNT = 20

IngredientSlot = Tuple[Optional[str], Optional[str]]


class RawMealRecord(BaseModel):
    """
    Upstream meal record from TheMealDB.

    Summary records (from ``filter.php``) only carry ``idMeal``, ``strMeal`` and
    ``strMealThumb``; full detail records (from ``search.php`` / ``lookup.php``)
    carry everything, including instructions and the numbered ingredient fields.
    """
    id_meal: str = Field(..., alias="idMeal", description="Upstream meal identifier")
    str_meal: str = Field("", alias="strMeal", description="Meal name")
    str_category: Optional[str] = Field(None, alias="strCategory")
    str_area: Optional[str] = Field(None, alias="strArea")
    str_instructions: Optional[str] = Field(None, alias="strInstructions")
    str_meal_thumb: str = Field("", alias="strMealThumb")
    str_tags: Optional[str] = Field(None, alias="strTags")
    str_youtube: Optional[str] = Field(None, alias="strYoutube")
    str_source: Optional[str] = Field(None, alias="strSource")

    # (ingredient, measure) for slots 1..20, in upstream order
    ingredient_slots: Tuple[IngredientSlot, ...] = Field(
        default=((None, None),) * INGREDIENT_SLOT_COUNT,
        description="Decoded strIngredient1..20 / strMeasure1..20 pairs",
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _decode_numbered_fields(cls, data: Any) -> Any:
        """Collapse the 20 numbered ingredient/measure fields into ``ingredient_slots``."""
        if not isinstance(data, dict) or "ingredient_slots" in data:
            return data

        decoded = dict(data)
        decoded["ingredient_slots"] = tuple(
            (data.get(f"strIngredient{i}"), data.get(f"strMeasure{i}"))
            for i in range(1, INGREDIENT_SLOT_COUNT + 1)
        )
        return decoded

    @field_validator("id_meal", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # The provider sends ids as strings, but fixtures and mirrors sometimes use ints
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("str_meal", "str_meal_thumb", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def has_full_detail(self) -> bool:
        """True when the record came from a detail endpoint (instructions are present)."""
        return bool(self.str_instructions)


class IngredientLine(BaseModel):
    """One ingredient with its measure, both trimmed."""
    ingredient: str = Field(..., min_length=1, description="Ingredient name (never empty)")
    measure: str = Field("", description="Measure text, possibly empty")


class NormalizedRecipe(BaseModel):
    """
    Public recipe model returned to clients.

    Summary-mode recipes have ``instructions == ""`` and ``ingredients == []``.
    """
    id: str = Field(..., description="Recipe identifier (TheMealDB idMeal)")
    title: str = Field(..., description="Recipe name")
    category: str = Field("", description="Recipe category, empty when unknown")
    area: str = Field("", description="Country/cuisine, empty when unknown")
    instructions: str = Field("", description="Cooking instructions")
    thumbnail_url: str = Field("", alias="thumbnailUrl", description="Image URL")
    tags: Optional[str] = Field(None, description="Comma-separated tags")
    video_url: Optional[str] = Field(None, alias="videoUrl", description="YouTube URL")
    source_url: Optional[str] = Field(None, alias="sourceUrl", description="Original recipe URL")
    ingredients: List[IngredientLine] = Field(default_factory=list)

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "52772",
                "title": "Teriyaki Chicken Casserole",
                "category": "Chicken",
                "area": "Japanese",
                "instructions": "Preheat oven to 350° F...",
                "thumbnailUrl": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
                "tags": "Meat,Casserole",
                "videoUrl": "https://www.youtube.com/watch?v=4aZr5hZXP_s",
                "sourceUrl": None,
                "ingredients": [
                    {"ingredient": "soy sauce", "measure": "3/4 cup"},
                    {"ingredient": "water", "measure": "1/2 cup"},
                ],
            }
        },
    )


class CategoryRecipe(BaseModel):
    """Reduced record used by category listings (and the related-recipes strip)."""
    id: str
    title: str
    thumbnail_url: str = Field("", alias="thumbnailUrl")
    category: str

    model_config = ConfigDict(populate_by_name=True)


class FilterQuery(BaseModel):
    """
    Optional browse filters.

    Blank or whitespace-only values are treated as absent. Only one of the fields
    ever governs a query; see recipebook.filters.resolve_query for the precedence.
    """
    search: Optional[str] = None
    ingredient: Optional[str] = None
    country: Optional[str] = None
    category: Optional[str] = None

    @field_validator("search", "ingredient", "country", "category", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def active(self) -> Dict[str, str]:
        """Return the filters that are set, in precedence order."""
        return {
            name: value
            for name, value in (
                ("search", self.search),
                ("ingredient", self.ingredient),
                ("country", self.country),
                ("category", self.category),
            )
            if value is not None
        }
