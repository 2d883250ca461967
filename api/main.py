"""
FastAPI application for the Recipe Book API.

This module wires up the REST API for the recipe browser backend:
- GET /api/recipes: Browse recipes with optional search/ingredient/country/category filters
- GET /api/recipes/{id}: Get one recipe with its full ingredient list
- GET /api/recipes/category/{category}: Get up to 10 recipes from a category
- GET /health: Health check

All recipe data comes from TheMealDB; nothing is stored. Every response, including
errors, uses the envelope ``{"success": bool, "message": str, "data"?: ..., "count"?: int}``.

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
from api.config import AppConfig

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routers import recipes
from api.schemas import HealthResponse, error_body

logging.basicConfig(
    level=AppConfig.get_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

API_NAME = "Recipe Book API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Backend API for browsing recipes from TheMealDB"

app = FastAPI(
    title=API_NAME,
    description=API_DESCRIPTION,
    version=API_VERSION,
    openapi_tags=[
        {
            "name": "recipes",
            "description": "Browse, filter, and look up recipes (proxied from TheMealDB).",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=AppConfig.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(recipes.router)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render every HTTPException as an envelope.

    Unmatched routes become "Endpoint not found". For 5xx errors raised ``from`` an
    underlying exception, the underlying message is included as ``error`` in
    development mode only.
    """
    message = str(exc.detail)
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = "Endpoint not found"

    error = None
    if exc.status_code >= 500 and exc.__cause__ is not None and AppConfig.is_development():
        error = str(exc.__cause__)

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message, error),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors and answer with the generic 500 envelope."""
    logger.exception("Unexpected error on %s %s: %s", request.method, request.url.path, exc)
    error = str(exc) if AppConfig.is_development() else "Something went wrong"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", error),
    )


@app.get("/health", tags=["health"], response_model=HealthResponse)
def health() -> HealthResponse:
    """
    Health check endpoint for monitoring and status checks.

    Returns:
        Envelope-style status with the current server time.
        Always returns 200 OK if the endpoint is reachable; TheMealDB is not contacted.
    """
    return HealthResponse(
        success=True,
        message="Recipe Book API is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@app.get("/")
def root():
    """
    Root endpoint providing API information.

    Returns:
        Dictionary with API name, version and docs URL
    """
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "docs": "/docs",
    }
