import pytest
from app.core.rules import WASTE_PRONE_INGREDIENTS
from app.services.waste_classifier import is_waste_prone, waste_prone_subset


def test_descriptive_name_matches_listed_fragment():
    assert is_waste_prone("Fresh Strawberries") is True


def test_shelf_stable_item_is_not_waste_prone():
    assert is_waste_prone("canned beans") is False


@pytest.mark.parametrize("fragment", WASTE_PRONE_INGREDIENTS)
def test_every_listed_fragment_is_waste_prone(fragment):
    assert is_waste_prone(fragment)
    assert is_waste_prone(fragment.upper())


def test_partial_name_contained_in_fragment():
    # "greens" is part of "mixed greens".
    assert is_waste_prone("Greens") is True


@pytest.mark.parametrize("ingredient", ["rice", "dried lentils", "olive oil", "salt"])
def test_pantry_staples_are_not_waste_prone(ingredient):
    assert is_waste_prone(ingredient) is False


def test_custom_fragments():
    assert is_waste_prone("ripe mango", fragments=("mango",)) is True
    assert is_waste_prone("ripe mango", fragments=("papaya",)) is False


def test_waste_prone_subset_keeps_order():
    assert waste_prone_subset(["rice", "Baby Spinach", "salt", "whole milk"]) == ["Baby Spinach", "whole milk"]
