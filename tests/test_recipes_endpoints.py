"""
Tests for the recipe API endpoints.

The TheMealDB connector is replaced through FastAPI dependency overrides, so these tests
exercise routing, the service layer, reshaping and the response envelope without any
network access.

Note: run tests with:
    pytest
"""

import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.routers.recipes import get_connector
from recipebook.connectors.base import UpstreamError


@pytest.fixture
def use_connector(make_connector):
    """Install a fake connector for the duration of a test and return a setter."""

    def _install(**kwargs):
        connector = make_connector(**kwargs)
        app.dependency_overrides[get_connector] = lambda: connector
        return connector

    yield _install
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


class TestBrowseRecipes:
    """Tests for GET /api/recipes."""

    def test_ingredient_filter(self, client, use_connector, summary_meals):
        """Test that ?ingredient=chicken lists two summary recipes."""
        connector = use_connector(meals=summary_meals)

        resp = client.get("/api/recipes", params={"ingredient": "chicken"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["message"] == "Recipes retrieved successfully"
        assert body["count"] == 2
        assert [r["id"] for r in body["data"]] == ["52795", "52956"]
        for recipe in body["data"]:
            assert recipe["ingredients"] == []
            assert recipe["instructions"] == ""
            assert "thumbnailUrl" in recipe
        assert connector.queries[0].describe() == "filter.php?i=chicken"

    def test_precedence(self, client, use_connector, summary_meals):
        connector = use_connector(meals=summary_meals)

        client.get("/api/recipes", params={"category": "Beef", "country": "British"})

        assert connector.queries[0].describe() == "filter.php?a=British"

    def test_no_filters(self, client, use_connector, full_meal):
        connector = use_connector(meals=[full_meal])

        resp = client.get("/api/recipes")

        assert resp.status_code == 200
        assert resp.json()["data"][0]["ingredients"][0] == {"ingredient": "soy sauce", "measure": "3/4 cup"}
        assert connector.queries[0].describe() == "search.php?s="

    @pytest.mark.parametrize("meals", [None, []])
    def test_empty_listing_is_success(self, client, use_connector, meals):
        use_connector(meals=meals)

        resp = client.get("/api/recipes", params={"search": "zzzz"})

        assert resp.status_code == 200
        assert resp.json() == {"success": True, "message": "No recipes found", "data": [], "count": 0}

    def test_upstream_failure_in_development(self, client, use_connector):
        use_connector(error=UpstreamError("TheMealDB request timed out after 10.0s"))

        with patch.dict(os.environ, {"APP_ENV": "development"}):
            resp = client.get("/api/recipes")

        assert resp.status_code == 500
        assert resp.json() == {
            "success": False,
            "message": "Failed to fetch recipes",
            "error": "TheMealDB request timed out after 10.0s",
        }

    def test_upstream_failure_in_production(self, client, use_connector):
        use_connector(error=UpstreamError("connection refused"))

        with patch.dict(os.environ, {"APP_ENV": "production"}):
            resp = client.get("/api/recipes")

        assert resp.status_code == 500
        assert resp.json() == {"success": False, "message": "Failed to fetch recipes"}

    def test_invalid_upstream_record(self, client, use_connector):
        """Test that a record without an id is reported as an upstream failure."""
        use_connector(
            meals=[
                {"strMeal": "No id", "strMealThumb": "x.jpg"},
                {"idMeal": "2", "strMeal": "Fine", "strMealThumb": "y.jpg"},
            ]
        )

        with patch.dict(os.environ, {"APP_ENV": "production"}):
            resp = client.get("/api/recipes", params={"ingredient": "chicken"})

        assert resp.status_code == 500
        assert resp.json() == {"success": False, "message": "Failed to fetch recipes"}


class TestRecipeDetail:
    """Tests for GET /api/recipes/{id}."""

    def test_found(self, client, use_connector, full_meal):
        connector = use_connector(meals=[full_meal])

        resp = client.get("/api/recipes/52772")

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["message"] == "Recipe retrieved successfully"
        assert "count" not in body
        assert body["data"]["id"] == "52772"
        assert body["data"]["area"] == "Japanese"
        assert body["data"]["videoUrl"] == "https://www.youtube.com/watch?v=4aZr5hZXP_s"
        assert len(body["data"]["ingredients"]) == 3
        assert connector.queries[0].describe() == "lookup.php?i=52772"

    @pytest.mark.parametrize("meals", [None, []])
    def test_not_found(self, client, use_connector, meals):
        use_connector(meals=meals)

        resp = client.get("/api/recipes/99999999")

        assert resp.status_code == 404
        assert resp.json() == {"success": False, "message": "Recipe not found"}

    def test_blank_id(self, client, use_connector):
        connector = use_connector(meals=[])

        resp = client.get("/api/recipes/%20")

        assert resp.status_code == 400
        assert resp.json() == {"success": False, "message": "Recipe ID is required"}
        assert connector.queries == []

    def test_upstream_failure(self, client, use_connector):
        use_connector(error=UpstreamError("TheMealDB returned HTTP 502", status_code=502))

        with patch.dict(os.environ, {"APP_ENV": "production"}):
            resp = client.get("/api/recipes/52772")

        assert resp.status_code == 500
        assert resp.json() == {"success": False, "message": "Failed to fetch recipe"}

    def test_invalid_upstream_record(self, client, use_connector):
        use_connector(meals=[{"idMeal": None, "strMeal": "Broken"}])

        with patch.dict(os.environ, {"APP_ENV": "development"}):
            resp = client.get("/api/recipes/52772")

        assert resp.status_code == 500
        body = resp.json()
        assert body["message"] == "Failed to fetch recipe"
        assert "invalid record" in body["error"]


class TestCategoryRecipes:
    """Tests for GET /api/recipes/category/{category}."""

    def test_capped_and_reduced(self, client, use_connector):
        records = [{"idMeal": str(i), "strMeal": f"Meal {i}", "strMealThumb": f"{i}.jpg"} for i in range(15)]
        connector = use_connector(meals=records)

        resp = client.get("/api/recipes/category/Beef")

        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Category recipes retrieved successfully"
        assert body["count"] == 10
        assert len(body["data"]) == 10
        assert body["data"][0] == {"id": "0", "title": "Meal 0", "thumbnailUrl": "0.jpg", "category": "Beef"}
        assert connector.queries[0].describe() == "filter.php?c=Beef"

    def test_empty_category(self, client, use_connector):
        use_connector(meals=None)

        resp = client.get("/api/recipes/category/Unknown")

        assert resp.status_code == 200
        assert resp.json() == {
            "success": True,
            "message": "No recipes found for this category",
            "data": [],
            "count": 0,
        }

    def test_blank_category(self, client, use_connector):
        connector = use_connector(meals=[])

        resp = client.get("/api/recipes/category/%20")

        assert resp.status_code == 400
        assert resp.json() == {"success": False, "message": "Category is required"}
        assert connector.queries == []

    def test_upstream_failure(self, client, use_connector):
        use_connector(error=UpstreamError("boom"))

        with patch.dict(os.environ, {"APP_ENV": "development"}):
            resp = client.get("/api/recipes/category/Beef")

        assert resp.status_code == 500
        assert resp.json()["message"] == "Failed to fetch category recipes"
        assert resp.json()["error"] == "boom"

    def test_invalid_upstream_record(self, client, use_connector):
        use_connector(meals=[{"strMeal": "No id"}])

        with patch.dict(os.environ, {"APP_ENV": "production"}):
            resp = client.get("/api/recipes/category/Beef")

        assert resp.status_code == 500
        assert resp.json() == {"success": False, "message": "Failed to fetch category recipes"}


class TestErrorEnvelope:
    """Tests for app-wide error handling."""

    def test_unknown_path(self, client):
        resp = client.get("/api/nothing-here")

        assert resp.status_code == 404
        assert resp.json() == {"success": False, "message": "Endpoint not found"}

    def test_unexpected_error_in_development(self, client, use_connector):
        use_connector(error=RuntimeError("kaboom"))

        with patch.dict(os.environ, {"APP_ENV": "development"}):
            resp = client.get("/api/recipes")

        assert resp.status_code == 500
        assert resp.json() == {"success": False, "message": "Internal server error", "error": "kaboom"}

    def test_unexpected_error_in_production(self, client, use_connector):
        use_connector(error=RuntimeError("secret details"))

        with patch.dict(os.environ, {"APP_ENV": "production"}):
            resp = client.get("/api/recipes")

        assert resp.status_code == 500
        assert resp.json() == {
            "success": False,
            "message": "Internal server error",
            "error": "Something went wrong",
        }
