from typing import Iterable, List, Optional, Sequence

from app.core.substitutions import SUBSTITUTION_CATALOG, SubstitutionCategory
from app.models import SubstitutionMatch


def contains_either_way(a: str, b: str) -> bool:
    """True when either string is a substring of the other."""
    return a in b or b in a


def find_substitutions(
    ingredient: str,
    catalog: Sequence[SubstitutionCategory] = SUBSTITUTION_CATALOG
) -> List[str]:
    """Return substitutes for every catalog key that loosely matches the ingredient.

    Args:
        ingredient: Ingredient name in any casing, possibly padded.
        catalog: Categories to scan, in order.

    Returns:
        Substitutes in catalog order with duplicates dropped (first one wins).
        Empty when nothing matches.
    """
    normalized = ingredient.lower().strip()
    found: List[str] = []

    for category in catalog:
        for key, substitutes in category.substitutions.items():
            if contains_either_way(normalized, key):
                found.extend(substitutes)

    return list(dict.fromkeys(found))


def find_available_substitute(
    missing_ingredient: str,
    available_ingredients: Iterable[str],
    catalog: Sequence[SubstitutionCategory] = SUBSTITUTION_CATALOG
) -> Optional[SubstitutionMatch]:
    """Pick a substitute for a missing ingredient, preferring one already on hand.

    Returns:
        - the first substitute found in the inventory, with available=True
        - otherwise the first known substitute, with available=False
        - None when the ingredient has no known substitutes at all
    """
    candidates = find_substitutions(missing_ingredient, catalog)
    normalized_available = [name.lower() for name in available_ingredients]

    for substitute in candidates:
        normalized_substitute = substitute.lower()
        if any(contains_either_way(have, normalized_substitute) for have in normalized_available):
            return SubstitutionMatch(substitute=substitute, available=True)

    if candidates:
        return SubstitutionMatch(substitute=candidates[0], available=False)

    return None
