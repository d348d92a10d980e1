import math
import time
from dataclasses import replace
from datetime import date
from typing import List, Optional, Sequence, Tuple

from app.core.errors import RecipeSourceError
from app.core.logging_config import get_logger
from app.core.matching_config import MatchingConfig
from app.core.rules import DIFFICULTY_EASY, RANKING_MAXIMIZE_USED, RANKING_MINIMIZE_MISSING
from app.models import FoodItem, PaginationInfo, Recipe, RecipeFilters, RecipeMatch
from app.services import matching
from app.services.inventory import expiring_items
from app.services.sources.base import RecipeSource
from app.services.sources.local import LocalSource
from app.services.sources.spoonacular import SpoonacularSource

logger = get_logger(__name__)

SEARCH_RESULT_COUNT = 20
EXPIRING_RESULT_COUNT = 10
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 50


class RecipeService:
    def __init__(self, sources: Optional[List[RecipeSource]] = None, config: Optional[MatchingConfig] = None):
        self.sources: List[RecipeSource] = sources if sources is not None else [LocalSource(), SpoonacularSource()]
        self.config = config
        self.cache = {}
        self.cache_ttl_seconds = 300

    def get_recipes(self, ingredients: List[str], number: int, ranking: int, sources: List[str] = None) -> List[Recipe]:
        """
        Aggregates recipes from the selected sources.
        Raises the first source's typed error if every selected source failed.
        """
        all_recipes = []
        failures: List[Tuple[str, RecipeSourceError]] = []
        active_source_names = sources if sources else ["Local"]

        now = time.time()
        for source in self.sources:
            if source.name not in active_source_names:
                continue
            cache_key = (source.name, tuple(ingredients), number, ranking)
            cached = self.cache.get(cache_key)
            if cached and (now - cached["timestamp"] < self.cache_ttl_seconds):
                all_recipes.extend(cached["recipes"])
                continue
            try:
                recipes = source.find_by_ingredients(ingredients, number, ranking)
            except RecipeSourceError as e:
                logger.error(f"Error fetching from source {source.name}: {e}")
                failures.append((source.name, e))
                continue
            self.cache[cache_key] = {
                "timestamp": now,
                "recipes": recipes
            }
            all_recipes.extend(recipes)

        if not all_recipes and failures:
            error = failures[0][1]
            error.sources = list(active_source_names)
            error.errors = [f"{name}: {err}" for name, err in failures]
            raise error

        return all_recipes

    def search_recipes_by_ingredients(
        self,
        inventory: Sequence[FoodItem],
        prioritize_expiring: bool = True,
        sources: List[str] = None,
        today: Optional[date] = None
    ) -> List[RecipeMatch]:
        """Search with the inventory (soonest-expiring first when prioritizing) and rank by waste reduction."""
        query = self._query_ingredients(inventory, prioritize_expiring, today)
        if not query:
            return []

        recipes = self.get_recipes(query, SEARCH_RESULT_COUNT, RANKING_MAXIMIZE_USED, sources)
        return matching.match_recipes(recipes, inventory, self.config, today)

    def get_waste_reduction_recipes(
        self,
        inventory: Sequence[FoodItem],
        filters: Optional[RecipeFilters] = None,
        sources: List[str] = None,
        today: Optional[date] = None
    ) -> List[RecipeMatch]:
        filters = filters or RecipeFilters()
        recipes = self.search_recipes_by_ingredients(inventory, filters.use_expiring, sources, today)
        return apply_filters(recipes, filters, self._config())

    def get_expiration_based_recipes(
        self,
        inventory: Sequence[FoodItem],
        days_ahead: int = 3,
        sources: List[str] = None,
        today: Optional[date] = None
    ) -> List[RecipeMatch]:
        """Recipes that use up items expiring in the next `days_ahead` days, most rescued first."""
        expiring = expiring_items(inventory, days_ahead, today, include_expired=False)
        if not expiring:
            return []

        query = [item.name for item in expiring]
        recipes = self.get_recipes(query, EXPIRING_RESULT_COUNT, RANKING_MINIMIZE_MISSING, sources)
        config = replace(self._config(), expiring_threshold_days=days_ahead)
        matches = [matching.match_recipe(r, inventory, config, today) for r in recipes]
        matches = [m for m in matches if m.expiring_ingredients]
        return sorted(matches, key=lambda m: -len(m.expiring_ingredients))

    def _query_ingredients(
        self,
        inventory: Sequence[FoodItem],
        prioritize_expiring: bool,
        today: Optional[date]
    ) -> List[str]:
        all_names = [item.name for item in inventory if item.name and item.name.strip()]
        if not prioritize_expiring:
            return all_names
        window = self._config().expiring_window_days
        expiring = [item.name for item in expiring_items(inventory, window, today)]
        if not expiring:
            logger.info("No dated inventory within the expiring window; searching with full inventory")
            return all_names
        return expiring

    def _config(self) -> MatchingConfig:
        return self.config or matching.matching_config


def apply_filters(recipes: List[RecipeMatch], filters: RecipeFilters, config: MatchingConfig) -> List[RecipeMatch]:
    if filters.quick_meals:
        recipes = [r for r in recipes if r.ready_in_minutes <= config.quick_meal_minutes]
    if filters.easy_only:
        recipes = [r for r in recipes if r.difficulty == DIFFICULTY_EASY]
    if filters.min_match_percentage is not None:
        recipes = [r for r in recipes if r.match_percentage >= filters.min_match_percentage]
    if filters.max_cooking_time is not None:
        recipes = [r for r in recipes if r.ready_in_minutes <= filters.max_cooking_time]
    return recipes


def paginate(recipes: List[RecipeMatch], page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> Tuple[List[RecipeMatch], PaginationInfo]:
    page = max(1, page)
    limit = min(max(1, limit or DEFAULT_PAGE_SIZE), MAX_PAGE_SIZE)
    start = (page - 1) * limit
    total_pages = math.ceil(len(recipes) / limit)
    info = PaginationInfo(
        current_page=page,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
        results_per_page=limit
    )
    return recipes[start:start + limit], info


recipe_service = RecipeService()
