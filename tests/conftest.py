"""
Shared fixtures: sample TheMealDB records and an in-memory connector.

No test in this suite talks to the network.
"""

from typing import Any, Dict, List, Optional

import pytest

from recipebook.connectors.base import BaseConnector
from recipebook.filters import UpstreamQuery


class FakeConnector(BaseConnector):
    """Connector that returns canned meals (or raises) and records every query."""
    source = "fake"

    def __init__(self, meals: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.meals = meals
        self.error = error
        self.queries: List[UpstreamQuery] = []

    def fetch(self, query: UpstreamQuery) -> Optional[List[Dict[str, Any]]]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.meals


@pytest.fixture
def full_meal() -> Dict[str, Any]:
    """A full detail record as returned by lookup.php / search.php."""
    meal: Dict[str, Any] = {
        "idMeal": "52772",
        "strMeal": "Teriyaki Chicken Casserole",
        "strCategory": "Chicken",
        "strArea": "Japanese",
        "strInstructions": "Preheat oven to 350° F.\r\nCombine soy sauce and water.",
        "strMealThumb": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
        "strTags": "Meat,Casserole",
        "strYoutube": "https://www.youtube.com/watch?v=4aZr5hZXP_s",
        "strSource": None,
    }
    for i in range(1, 21):
        meal[f"strIngredient{i}"] = ""
        meal[f"strMeasure{i}"] = ""
    meal["strIngredient1"] = "soy sauce"
    meal["strMeasure1"] = "3/4 cup"
    meal["strIngredient2"] = " water "
    meal["strMeasure2"] = " 1/2 cup "
    meal["strIngredient5"] = "garlic"
    meal["strMeasure5"] = None
    return meal


@pytest.fixture
def summary_meals() -> List[Dict[str, Any]]:
    """Summary records as returned by filter.php."""
    return [
        {
            "strMeal": "Chicken Handi",
            "strMealThumb": "https://www.themealdb.com/images/media/meals/wyxwsp1486979827.jpg",
            "idMeal": "52795",
        },
        {
            "strMeal": "Chicken Congee",
            "strMealThumb": "https://www.themealdb.com/images/media/meals/1529446352.jpg",
            "idMeal": "52956",
        },
    ]


@pytest.fixture
def make_connector():
    """Factory for FakeConnector instances."""
    return FakeConnector
