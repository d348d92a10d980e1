from app.core.matching_config import MatchingConfig
from app.core.rules import (
    TAG_FEW_MISSING,
    TAG_LEFTOVERS,
    TAG_MINIMAL_SHOPPING,
    TAG_QUICK_MEAL,
    TAG_RESCUES_WASTE_PRONE,
    TAG_SIMPLE_RECIPE,
    TAG_USES_EXPIRING,
)
from app.models import Recipe
from app.services.matching import (
    calculate_difficulty,
    calculate_match_percentage,
    expiry_points,
    match_recipe,
    match_recipes,
    rank_matches,
)
from tests.conftest import TODAY, make_item


def make_recipe(recipe_id, ingredients, minutes=30, title=None):
    return Recipe(
        id=recipe_id,
        title=title or f"Recipe {recipe_id}",
        ready_in_minutes=minutes,
        servings=2,
        ingredients=ingredients,
        source_api="local"
    )


def test_matched_and_missing_keep_recipe_order():
    recipe = make_recipe("1", ["eggs", "Spinach", "mushrooms"])
    match = match_recipe(recipe, [make_item("fresh spinach"), make_item("Eggs")], today=TODAY)

    assert match.matched_ingredients == ["eggs", "Spinach"]
    assert match.missing_ingredients == ["mushrooms"]
    assert match.match_percentage == 67


def test_match_percentage_rounding_modes():
    assert calculate_match_percentage(1, 8, MatchingConfig()) == 13
    assert calculate_match_percentage(1, 8, MatchingConfig(match_rounding="floor")) == 12
    assert calculate_match_percentage(1, 3, MatchingConfig(match_rounding="ceil")) == 34
    assert calculate_match_percentage(2, 3, MatchingConfig(match_rounding="floor")) == 66
    assert calculate_match_percentage(3, 3) == 100


def test_recipe_without_ingredients_has_zero_match():
    match = match_recipe(make_recipe("1", []), [make_item("rice")], today=TODAY)
    assert match.match_percentage == 0
    assert match.missing_ingredients == []


def test_missing_ingredients_get_substitution_suggestions():
    recipe = make_recipe("1", ["butter", "salt", "milk"])
    match = match_recipe(recipe, [make_item("coconut oil")], today=TODAY)

    by_missing = {s.missing: s for s in match.substitution_suggestions}
    assert by_missing["butter"].substitute == "coconut oil"
    assert by_missing["butter"].in_inventory is True
    assert by_missing["milk"].substitute == "almond milk"
    assert by_missing["milk"].in_inventory is False
    # No catalog entry for salt: no suggestion rather than a bogus one.
    assert "salt" not in by_missing


def test_waste_prone_consumption_raises_rank():
    inventory = [make_item("spinach"), make_item("quinoa"), make_item("rice")]
    with_greens = make_recipe("greens", ["spinach", "rice"])
    without_greens = make_recipe("plain", ["quinoa", "rice"])

    ranked = match_recipes([without_greens, with_greens], inventory, today=TODAY)

    assert [m.id for m in ranked] == ["greens", "plain"]
    assert ranked[0].waste_prone_ingredients == ["spinach"]
    assert ranked[0].waste_reduction_score > ranked[1].waste_reduction_score


def test_waste_prone_tiebreak_when_scores_are_capped():
    config = MatchingConfig(max_waste_score=30)
    inventory = [make_item("spinach"), make_item("quinoa"), make_item("rice")]
    with_greens = make_recipe("greens", ["spinach", "rice"])
    without_greens = make_recipe("plain", ["quinoa", "rice"])

    ranked = match_recipes([without_greens, with_greens], inventory, config=config, today=TODAY)

    assert ranked[0].waste_reduction_score == ranked[1].waste_reduction_score == 30
    assert ranked[0].id == "greens"


def test_zero_waste_weight_never_lowers_rank():
    config = MatchingConfig(waste_prone_weight=0)
    inventory = [make_item("spinach"), make_item("quinoa"), make_item("rice")]
    ranked = match_recipes(
        [make_recipe("plain", ["quinoa", "rice"]), make_recipe("greens", ["spinach", "rice"])],
        inventory,
        config=config,
        today=TODAY
    )
    assert ranked[0].id == "greens"


def test_waste_reduction_score_combines_expiry_efficiency_and_perishables():
    inventory = [make_item("spinach", days=1), make_item("rice")]
    match = match_recipe(make_recipe("1", ["spinach", "rice"]), inventory, today=TODAY)

    # 40 (expires tomorrow) + 30 (all ingredients on hand) + 10 (spinach is perishable)
    assert match.waste_reduction_score == 80
    assert match.expiring_ingredients == ["spinach"]


def test_waste_reduction_score_is_capped():
    inventory = [make_item("spinach", days=-2), make_item("milk", days=0), make_item("tomato", days=2)]
    match = match_recipe(make_recipe("1", ["spinach", "milk", "tomato"]), inventory, today=TODAY)
    assert match.waste_reduction_score == 100


def test_expiry_points_bands():
    assert expiry_points(-3) == 50
    assert expiry_points(0) == 40
    assert expiry_points(1) == 40
    assert expiry_points(3) == 30
    assert expiry_points(7) == 20
    assert expiry_points(8) == 0


def test_items_beyond_threshold_are_not_expiring(pantry):
    match = match_recipe(make_recipe("1", ["eggs", "rice", "garlic"]), pantry, today=TODAY)
    assert match.expiring_ingredients == []
    assert TAG_USES_EXPIRING not in match.waste_reduction_tags


def test_tags_for_quick_simple_leftover_friendly_recipe():
    inventory = [make_item("tomato", days=2), make_item("onion"), make_item("garlic")]
    recipe = make_recipe("1", ["tomato", "onion", "garlic", "basil"], minutes=10, title="Quick Tomato Soup")
    match = match_recipe(recipe, inventory, today=TODAY)

    assert match.waste_reduction_tags == [
        TAG_USES_EXPIRING,
        TAG_RESCUES_WASTE_PRONE,
        TAG_FEW_MISSING,
        TAG_QUICK_MEAL,
        TAG_SIMPLE_RECIPE,
        TAG_LEFTOVERS,
    ]
    assert match.match_percentage == 75


def test_minimal_shopping_tag_at_full_match():
    match = match_recipe(make_recipe("1", ["rice"], minutes=40), [make_item("rice")], today=TODAY)
    assert TAG_MINIMAL_SHOPPING in match.waste_reduction_tags
    assert TAG_FEW_MISSING not in match.waste_reduction_tags
    assert TAG_QUICK_MEAL not in match.waste_reduction_tags


def test_difficulty_levels():
    assert calculate_difficulty(make_recipe("1", ["a", "b", "c"], minutes=10)) == "Easy"
    assert calculate_difficulty(make_recipe("2", ["a"] * 8, minutes=25)) == "Medium"
    assert calculate_difficulty(make_recipe("3", ["a"] * 4, minutes=60)) == "Advanced"
    assert calculate_difficulty(make_recipe("4", ["a"] * 12, minutes=10)) == "Advanced"


def test_rank_is_stable_for_equal_matches():
    inventory = [make_item("rice")]
    first = match_recipe(make_recipe("a", ["rice"]), inventory, today=TODAY)
    second = match_recipe(make_recipe("b", ["rice"]), inventory, today=TODAY)
    assert [m.id for m in rank_matches([first, second])] == ["a", "b"]


def test_match_result_fields():
    recipe = make_recipe("7", ["rice"], minutes=20, title="Rice Bowl")
    match = match_recipe(recipe, [make_item("rice")], today=TODAY)
    assert match.name == "Rice Bowl"
    assert match.time == "20 min"
    assert match.source == "local"
    assert match.ingredients == ["rice"]
