"""
Recipes router: browse, detail and category endpoints.

This router provides:
- GET /api/recipes - Browse recipes (optional search / ingredient / country / category filters)
- GET /api/recipes/category/{category} - Up to 10 recipes from a category
- GET /api/recipes/{recipe_id} - One recipe in full detail

Empty listings are successes (200 with an empty list); only the single-recipe lookup
answers 404. Upstream failures become 500 envelopes; the HTTPException handler in
api.main renders every error as ``{"success": false, "message": ...}``.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from recipebook.connectors.base import BaseConnector, UpstreamError
from recipebook.connectors.mealdb_connector import MealDbConnector
from recipebook.models import FilterQuery
from recipebook.service import (
    STATUS_NOT_FOUND,
    get_recipe,
    list_category_recipes,
    list_recipes,
)
from api.schemas import (
    CategoryRecipeListResponse,
    ErrorResponse,
    RecipeListResponse,
    RecipeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/recipes", tags=["recipes"])

ERROR_RESPONSES = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "TheMealDB unreachable or failing"},
}


def get_connector() -> BaseConnector:
    """
    Provide the recipe provider connector for a request.

    Overridden in tests via ``app.dependency_overrides[get_connector]``.
    """
    return MealDbConnector()


@router.get(
    "",
    response_model=RecipeListResponse,
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
    summary="Browse recipes",
    description="Browse recipes from TheMealDB. At most one filter is applied, by precedence "
                "search > ingredient > country > category. With no filter, returns the default catalog.",
)
def browse_recipes(
    search: Optional[str] = Query(None, description="Free-text search on the recipe name"),
    ingredient: Optional[str] = Query(None, description="Main ingredient (e.g. 'chicken')"),
    country: Optional[str] = Query(None, description="Country / cuisine (e.g. 'Canadian')"),
    category: Optional[str] = Query(None, description="Category (e.g. 'Seafood')"),
    connector: BaseConnector = Depends(get_connector),
) -> RecipeListResponse:
    """
    Browse recipes with optional filters.

    Raises:
        HTTPException 500: If TheMealDB cannot be reached or answers with an error

    Example:
        ```bash
        GET /api/recipes?ingredient=chicken
        ```
    """
    filters = FilterQuery(search=search, ingredient=ingredient, country=country, category=category)

    try:
        result = list_recipes(filters, connector=connector)
    except UpstreamError as e:
        logger.error("Failed to fetch recipes (filters=%r): %s", filters.active(), e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch recipes",
        ) from e

    if not result.found:
        return RecipeListResponse(success=True, message="No recipes found", data=[], count=0)

    return RecipeListResponse(
        success=True,
        message="Recipes retrieved successfully",
        data=result.data,
        count=result.count,
    )


# Registered before /{recipe_id} so "category" is never taken for an id
@router.get(
    "/category/{category}",
    response_model=CategoryRecipeListResponse,
    response_model_exclude_unset=True,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}, **ERROR_RESPONSES},
    summary="List recipes in a category",
    description="Returns at most 10 recipes from a category, reduced to id, title, thumbnailUrl and category.",
)
def category_recipes(
    category: str,
    connector: BaseConnector = Depends(get_connector),
) -> CategoryRecipeListResponse:
    """
    List up to 10 recipes from one category.

    Raises:
        HTTPException 400: If the category is blank
        HTTPException 500: If TheMealDB cannot be reached or answers with an error
    """
    if not category.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Category is required")

    try:
        result = list_category_recipes(category, connector=connector)
    except UpstreamError as e:
        logger.error("Failed to fetch category recipes (category=%r): %s", category, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch category recipes",
        ) from e

    if not result.found:
        return CategoryRecipeListResponse(
            success=True, message="No recipes found for this category", data=[], count=0
        )

    return CategoryRecipeListResponse(
        success=True,
        message="Category recipes retrieved successfully",
        data=result.data,
        count=result.count,
    )


@router.get(
    "/{recipe_id}",
    response_model=RecipeResponse,
    response_model_exclude_unset=True,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        **ERROR_RESPONSES,
    },
    summary="Get one recipe",
    description="Look up a recipe by TheMealDB id and return it with its full ingredient list.",
)
def recipe_detail(
    recipe_id: str,
    connector: BaseConnector = Depends(get_connector),
) -> RecipeResponse:
    """
    Get one recipe in full detail.

    Raises:
        HTTPException 400: If the id is blank
        HTTPException 404: If TheMealDB has no recipe with this id
        HTTPException 500: If TheMealDB cannot be reached or answers with an error
    """
    if not recipe_id.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Recipe ID is required")

    try:
        result = get_recipe(recipe_id, connector=connector)
    except UpstreamError as e:
        logger.error("Failed to fetch recipe %r: %s", recipe_id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch recipe",
        ) from e

    if result.status == STATUS_NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")

    return RecipeResponse(success=True, message="Recipe retrieved successfully", data=result.data)
