"""
Pydantic schemas for FastAPI request and response models.

Every recipe endpoint answers with the same envelope:

    {"success": bool, "message": str, "data": ..., "count": int}

``data`` and ``count`` are only present when the endpoint sets them, so routes declare
``response_model_exclude_unset=True`` and build the envelope with just the fields they need.

The schemas include:
- RecipeListResponse: GET /api/recipes
- RecipeResponse: GET /api/recipes/{id}
- CategoryRecipeListResponse: GET /api/recipes/category/{category}
- ErrorResponse: any failed request (400/404/500), used for OpenAPI docs
- HealthResponse: GET /health

# NOTE: The recipe payload models live in recipebook.models (NormalizedRecipe, CategoryRecipe);
    they serialize with camelCase keys (thumbnailUrl, videoUrl, sourceUrl).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from recipebook.models import CategoryRecipe, NormalizedRecipe


class ApiResponse(BaseModel):
    """Base response envelope."""
    success: bool = Field(..., description="Whether the request succeeded")
    message: str = Field(..., description="Human-readable outcome")
    count: Optional[int] = Field(None, ge=0, description="Number of items in data (listings only)")


class RecipeListResponse(ApiResponse):
    """Response model for the recipe browse endpoint."""
    data: Optional[List[NormalizedRecipe]] = Field(None, description="Recipes, in upstream order")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Recipes retrieved successfully",
                "data": [
                    {
                        "id": "52795",
                        "title": "Chicken Handi",
                        "category": "",
                        "area": "",
                        "instructions": "",
                        "thumbnailUrl": "https://www.themealdb.com/images/media/meals/wyxwsp1486979827.jpg",
                        "tags": None,
                        "videoUrl": None,
                        "sourceUrl": None,
                        "ingredients": [],
                    }
                ],
                "count": 1,
            }
        }
    )


class RecipeResponse(ApiResponse):
    """Response model for the single recipe endpoint."""
    data: Optional[NormalizedRecipe] = Field(None, description="The recipe, in full detail")


class CategoryRecipeListResponse(ApiResponse):
    """Response model for the category listing endpoint (at most 10 reduced recipes)."""
    data: Optional[List[CategoryRecipe]] = Field(None, description="Reduced recipes")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Category recipes retrieved successfully",
                "data": [
                    {
                        "id": "52874",
                        "title": "Beef and Mustard Pie",
                        "thumbnailUrl": "https://www.themealdb.com/images/media/meals/sytuqu1511553755.jpg",
                        "category": "Beef",
                    }
                ],
                "count": 1,
            }
        }
    )


class ErrorResponse(BaseModel):
    """Response model for failed requests."""
    success: bool = Field(False, description="Always false")
    message: str = Field(..., description="What went wrong")
    error: Optional[str] = Field(None, description="Underlying error detail (development mode only)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"success": False, "message": "Recipe not found"}
        }
    )


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""
    success: bool = True
    message: str
    timestamp: str = Field(..., description="Current server time (ISO-8601, UTC)")


def error_body(message: str, error: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the JSON body for a failed request.

    Args:
        message: Envelope message
        error: Optional underlying error detail; omitted from the body when None
    """
    body: Dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return body
