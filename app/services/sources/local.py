import json
import os
from pathlib import Path
from typing import List, Optional
from app.services.sources.base import RecipeSource
from app.models import Recipe
from app.core.rules import RANKING_MINIMIZE_MISSING
from app.core.logging_config import get_logger
from app.services.matching import split_ingredients

logger = get_logger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parents[3] / "data" / "sample_recipes.json"


class LocalSource(RecipeSource):
    name = "Local"

    def __init__(self, file_path: Optional[str] = None):
        self.recipes = []
        for data in self._load_data(str(file_path or DEFAULT_DATA_PATH)):
            try:
                self.recipes.append(self._adapt(data))
            except (TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed recipe {data.get('id')!r}: {e}")

    def _load_data(self, file_path: str) -> List[dict]:
        if not os.path.exists(file_path):
            logger.warning(f"{file_path} not found.")
            return []
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.error(f"Error decoding {file_path}")
            return []
        if not isinstance(data, list):
            logger.error(f"{file_path} must contain a list of recipes")
            return []
        return [r for r in data if isinstance(r, dict) and r.get("id") is not None]

    def find_by_ingredients(self, ingredients: List[str], number: int, ranking: int) -> List[Recipe]:
        """
        Offline stand-in for Spoonacular's findByIngredients over the bundled
        Spoonacular-formatted catalogue.
        """
        query = [i for i in ingredients if i and i.strip()]
        if not query:
            return []

        scored = []
        for recipe in self.recipes:
            used, missed = split_ingredients(recipe.ingredients, query)
            if not used:
                continue
            scored.append((len(used), len(missed), recipe))

        if ranking == RANKING_MINIMIZE_MISSING:
            scored.sort(key=lambda entry: (entry[1], -entry[0]))
        else:
            scored.sort(key=lambda entry: (-entry[0], entry[1]))

        return [recipe for _, _, recipe in scored[:number]]

    def _adapt(self, data: dict) -> Recipe:
        ingredients = [
            i.get("name") or i.get("original") or ""
            for i in data.get("extendedIngredients", [])
        ]
        return Recipe(
            id=str(data.get("id")),
            title=data.get("title") or "Untitled recipe",
            ready_in_minutes=data.get("readyInMinutes") or 0,
            servings=data.get("servings") or 1,
            image=data.get("image"),
            ingredients=[name for name in ingredients if name],
            dish_types=data.get("dishTypes", []),
            diets=data.get("diets", []),
            source_api="local"
        )
