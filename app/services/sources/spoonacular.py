import os
import time
from typing import Any, Dict, List, Optional

import requests
from dotenv import load_dotenv

from app.core.errors import (
    RecipeConfigurationError,
    RecipeNetworkError,
    RecipeRateLimitError,
    RecipeServiceUnavailableError,
    RecipeSourceError,
)
from app.core.logging_config import get_logger
from app.models import Recipe
from app.services.sources.base import RecipeSource

logger = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class SpoonacularSource(RecipeSource):
    name = "Spoonacular"
    BASE_URL = "https://api.spoonacular.com/recipes"

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[float] = None):
        load_dotenv()
        self.api_key = api_key or os.getenv("SPOONACULAR_API_KEY")
        self.timeout = timeout or _timeout_from_env()
        if not self.api_key:
            logger.warning("SPOONACULAR_API_KEY not set. Spoonacular recipe search is disabled.")

    def find_by_ingredients(self, ingredients: List[str], number: int, ranking: int) -> List[Recipe]:
        if not self.api_key:
            raise RecipeConfigurationError()
        if not ingredients:
            return []

        api_start = time.time()
        hits = self._get("findByIngredients", {
            "ingredients": ",".join(ingredients),
            "number": number,
            "ranking": ranking,
            "ignorePantry": "false"
        })
        if not isinstance(hits, list):
            raise RecipeSourceError("Unexpected findByIngredients payload from Spoonacular.")

        recipes = []
        for hit in hits:
            recipe_id = hit.get("id") if isinstance(hit, dict) else None
            if recipe_id is None:
                logger.warning(f"Skipping Spoonacular hit without id: {hit!r}")
                continue
            details = self._get(f"{recipe_id}/information", {"includeNutrition": "false"})
            if not isinstance(details, dict):
                raise RecipeSourceError(f"Unexpected information payload for recipe {recipe_id}.")
            recipes.append(self._adapt(details))

        logger.info(f"Spoonacular returned {len(recipes)} recipes in {time.time() - api_start:.2f}s")
        return recipes

    def _get(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self.BASE_URL}/{path}"
        query = dict(params, apiKey=self.api_key)
        try:
            response = requests.get(url, params=query, timeout=self.timeout)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as exc:
            raise RecipeNetworkError(errors=[str(exc)]) from exc
        except requests.exceptions.RequestException as exc:
            raise RecipeSourceError(errors=[str(exc)]) from exc

        if response.status_code == 429:
            raise RecipeRateLimitError(errors=[f"{url}: HTTP 429"])
        if not response.ok:
            raise RecipeServiceUnavailableError(errors=[f"{url}: HTTP {response.status_code}"])

        try:
            return response.json()
        except ValueError as exc:
            raise RecipeSourceError(
                "Recipe service returned an unreadable response.",
                errors=[f"{url}: {exc}"]
            ) from exc

    def _adapt(self, data: Dict[str, Any]) -> Recipe:
        try:
            ingredients = [
                i.get("name") or i.get("original") or ""
                for i in data.get("extendedIngredients") or []
            ]
            return Recipe(
                id=str(data["id"]),
                title=data.get("title") or "Untitled recipe",
                ready_in_minutes=int(data.get("readyInMinutes") or 0),
                servings=int(data.get("servings") or 1),
                image=data.get("image"),
                ingredients=[name for name in ingredients if name],
                dish_types=data.get("dishTypes") or [],
                diets=data.get("diets") or [],
                source_api="spoonacular"
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise RecipeSourceError("Malformed recipe payload from Spoonacular.", errors=[str(exc)]) from exc


def _timeout_from_env() -> float:
    raw = os.getenv("RECIPE_API_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Invalid RECIPE_API_TIMEOUT_SECONDS={raw!r}; using {DEFAULT_TIMEOUT_SECONDS}")
        return DEFAULT_TIMEOUT_SECONDS
    return value if value > 0 else DEFAULT_TIMEOUT_SECONDS
