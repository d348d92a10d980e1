from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from app.core.matching_config import MatchingConfig, load_matching_config
from app.core.rules import (
    DIFFICULTY_DEFAULT,
    DIFFICULTY_LEVELS,
    EXPIRY_POINT_BANDS,
    LEFTOVER_KEYWORDS,
    TAG_FEW_MISSING,
    TAG_LEFTOVERS,
    TAG_MINIMAL_SHOPPING,
    TAG_QUICK_MEAL,
    TAG_RESCUES_WASTE_PRONE,
    TAG_SIMPLE_RECIPE,
    TAG_USES_EXPIRING,
)
from app.models import FoodItem, Recipe, RecipeMatch, SubstitutionSuggestion
from app.services.inventory import days_left
from app.services.substitution_service import contains_either_way, find_available_substitute
from app.services.waste_classifier import waste_prone_subset

matching_config = load_matching_config()


def match_recipe(
    recipe: Recipe,
    inventory: Sequence[FoodItem],
    config: Optional[MatchingConfig] = None,
    today: Optional[date] = None
) -> RecipeMatch:
    """Score a recipe against the user's inventory.

    Args:
        recipe: Candidate recipe; only its ingredient names are compared.
        inventory: What the user has on hand.
        config: Tunable weights and thresholds (module config when omitted).
        today: Reference date for expiry (defaults to today).

    Returns:
        A RecipeMatch with matched/missing ingredients, integer match percentage,
        substitution suggestions for every gap, the expiring and waste-prone
        inventory the recipe would use up, a waste-reduction score and tags.

    Notes:
        - An ingredient is "on hand" when an inventory name and the ingredient
          contain one another (case-insensitive), same as substitution lookup.
        - Missing ingredients with no known substitute get no suggestion.
    """
    config = config or matching_config
    today = today or date.today()

    required = [name for name in recipe.ingredients if name and name.strip()]
    usable = [item for item in inventory if item.name and item.name.strip()]
    inventory_names = [item.name for item in usable]

    matched, missing = split_ingredients(required, inventory_names)
    match_percentage = calculate_match_percentage(len(matched), len(required), config)

    suggestions: List[SubstitutionSuggestion] = []
    for name in missing:
        found = find_available_substitute(name, inventory_names)
        if found is not None:
            suggestions.append(SubstitutionSuggestion(
                missing=name,
                substitute=found.substitute,
                in_inventory=found.available
            ))

    consumed = consumed_inventory(required, usable)
    expiring: List[Tuple[FoodItem, int]] = []
    for item in consumed:
        remaining = days_left(item, today)
        if remaining is not None and remaining <= config.expiring_threshold_days:
            expiring.append((item, remaining))
    waste_prone = waste_prone_subset([item.name for item in consumed])

    score = waste_reduction_score(
        expiring_days=[remaining for _, remaining in expiring],
        matched_count=len(matched),
        required_count=len(required),
        waste_prone_count=len(waste_prone),
        config=config
    )
    tags = waste_reduction_tags(
        recipe,
        match_percentage,
        has_expiring=bool(expiring),
        has_waste_prone=bool(waste_prone),
        config=config
    )

    return RecipeMatch(
        id=recipe.id,
        name=recipe.title,
        time=f"{recipe.ready_in_minutes} min",
        ready_in_minutes=recipe.ready_in_minutes,
        difficulty=calculate_difficulty(recipe),
        image=recipe.image,
        ingredients=list(recipe.ingredients),
        matched_ingredients=matched,
        missing_ingredients=missing,
        match_percentage=match_percentage,
        expiring_ingredients=[item.name for item, _ in expiring],
        waste_prone_ingredients=waste_prone,
        waste_reduction_score=score,
        waste_reduction_tags=tags,
        substitution_suggestions=suggestions,
        source=recipe.source_api
    )


def match_recipes(
    recipes: Iterable[Recipe],
    inventory: Sequence[FoodItem],
    config: Optional[MatchingConfig] = None,
    today: Optional[date] = None
) -> List[RecipeMatch]:
    """Match every recipe and return them best first."""
    return rank_matches([match_recipe(r, inventory, config, today) for r in recipes])


def rank_matches(matches: Iterable[RecipeMatch]) -> List[RecipeMatch]:
    """Order by waste-reduction score, then waste-prone items used, then match percentage."""
    return sorted(
        matches,
        key=lambda m: (-m.waste_reduction_score, -len(m.waste_prone_ingredients), -m.match_percentage)
    )


def split_ingredients(required: Sequence[str], available: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Partition required ingredients into (matched, missing), keeping recipe order."""
    normalized_available = [name.lower() for name in available]
    matched: List[str] = []
    missing: List[str] = []
    for name in required:
        normalized = name.lower()
        if any(contains_either_way(normalized, have) for have in normalized_available):
            matched.append(name)
        else:
            missing.append(name)
    return matched, missing


def consumed_inventory(required: Sequence[str], inventory: Sequence[FoodItem]) -> List[FoodItem]:
    """Inventory items the recipe would use, in inventory order."""
    normalized_required = [name.lower() for name in required]
    return [
        item for item in inventory
        if any(contains_either_way(item.name.lower(), ing) for ing in normalized_required)
    ]


def calculate_match_percentage(matched: int, required: int, config: Optional[MatchingConfig] = None) -> int:
    if required <= 0:
        return 0
    config = config or matching_config
    return config.round_percentage(matched * 100 / required)


def expiry_points(remaining_days: int) -> int:
    for max_days, points in EXPIRY_POINT_BANDS:
        if remaining_days <= max_days:
            return points
    return 0


def waste_reduction_score(
    expiring_days: Iterable[int],
    matched_count: int,
    required_count: int,
    waste_prone_count: int,
    config: Optional[MatchingConfig] = None
) -> float:
    """Higher means the recipe rescues more food that would otherwise be thrown out."""
    config = config or matching_config
    score = float(sum(expiry_points(d) for d in expiring_days))

    # Efficiency: share of the recipe already in the pantry.
    if required_count > 0:
        score += (matched_count / required_count) * config.efficiency_weight

    score += waste_prone_count * config.waste_prone_weight

    return round(min(score, config.max_waste_score), 2)


def waste_reduction_tags(
    recipe: Recipe,
    match_percentage: int,
    has_expiring: bool,
    has_waste_prone: bool,
    config: Optional[MatchingConfig] = None
) -> List[str]:
    config = config or matching_config
    tags: List[str] = []

    if has_expiring:
        tags.append(TAG_USES_EXPIRING)
    if has_waste_prone:
        tags.append(TAG_RESCUES_WASTE_PRONE)

    if match_percentage >= config.minimal_shopping_percentage:
        tags.append(TAG_MINIMAL_SHOPPING)
    elif match_percentage >= config.few_missing_percentage:
        tags.append(TAG_FEW_MISSING)

    if recipe.ready_in_minutes <= config.quick_meal_minutes:
        tags.append(TAG_QUICK_MEAL)

    if len(recipe.ingredients) <= config.simple_recipe_max_ingredients:
        tags.append(TAG_SIMPLE_RECIPE)

    title = (recipe.title or "").lower()
    if any(keyword in title for keyword in LEFTOVER_KEYWORDS):
        tags.append(TAG_LEFTOVERS)

    return tags


def calculate_difficulty(recipe: Recipe) -> str:
    ingredient_count = len(recipe.ingredients)
    for label, max_minutes, max_ingredients in DIFFICULTY_LEVELS:
        if recipe.ready_in_minutes <= max_minutes and ingredient_count <= max_ingredients:
            return label
    return DIFFICULTY_DEFAULT
