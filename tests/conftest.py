import pytest
from datetime import date, timedelta
from typing import List
from app.models import FoodItem, Recipe
from app.services.sources.base import RecipeSource

TODAY = date(2026, 3, 10)


class StubSource(RecipeSource):
    """In-memory recipe source that records every query."""

    def __init__(self, name: str, recipes: List[Recipe] = None, error: Exception = None):
        self.name = name
        self.recipes = recipes or []
        self.error = error
        self.calls = []

    def find_by_ingredients(self, ingredients, number, ranking):
        self.calls.append({"ingredients": list(ingredients), "number": number, "ranking": ranking})
        if self.error:
            raise self.error
        return list(self.recipes)


def make_item(name: str, days: int = None) -> FoodItem:
    expiration = TODAY + timedelta(days=days) if days is not None else None
    return FoodItem(name=name, expiration_date=expiration)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def pantry():
    """A small inventory with a mix of dated and undated items."""
    return [
        make_item("spinach", days=1),
        make_item("milk", days=-1),
        make_item("eggs", days=5),
        make_item("rice"),
        make_item("garlic"),
    ]
