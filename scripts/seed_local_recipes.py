"""Append Spoonacular recipes for the given ingredients to the local catalogue.

Usage: python scripts/seed_local_recipes.py chicken spinach rice
"""
import json
import os
import sys
from app.core.rules import RANKING_MAXIMIZE_USED
from app.services.sources.local import DEFAULT_DATA_PATH
from app.services.sources.spoonacular import SpoonacularSource


def main():
    ingredients = sys.argv[1:]
    if not ingredients:
        raise SystemExit("Usage: seed_local_recipes.py INGREDIENT [INGREDIENT ...]")
    if not os.getenv("SPOONACULAR_API_KEY"):
        raise RuntimeError("SPOONACULAR_API_KEY is required to seed recipes.")

    with open(DEFAULT_DATA_PATH, "r", encoding="utf-8") as handle:
        catalogue = json.load(handle)
    known_ids = {str(r.get("id")) for r in catalogue}

    source = SpoonacularSource()
    added = 0
    for recipe in source.find_by_ingredients(ingredients, number=10, ranking=RANKING_MAXIMIZE_USED):
        if recipe.id in known_ids:
            continue
        catalogue.append({
            "id": int(recipe.id),
            "title": recipe.title,
            "readyInMinutes": recipe.ready_in_minutes,
            "servings": recipe.servings,
            "image": recipe.image,
            "dishTypes": recipe.dish_types,
            "diets": recipe.diets,
            "extendedIngredients": [{"name": name} for name in recipe.ingredients]
        })
        known_ids.add(recipe.id)
        added += 1

    with open(DEFAULT_DATA_PATH, "w", encoding="utf-8") as handle:
        json.dump(catalogue, handle, indent=2)

    print(f"Added {added} recipes to {DEFAULT_DATA_PATH}.")


if __name__ == "__main__":
    main()
