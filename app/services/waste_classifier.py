from typing import Iterable, List, Sequence

from app.core.rules import WASTE_PRONE_INGREDIENTS
from app.services.substitution_service import contains_either_way


def is_waste_prone(ingredient: str, fragments: Sequence[str] = WASTE_PRONE_INGREDIENTS) -> bool:
    """Check whether an ingredient spoils quickly. Case-insensitive, loose substring match."""
    normalized = ingredient.lower()
    return any(contains_either_way(normalized, fragment) for fragment in fragments)


def waste_prone_subset(ingredients: Iterable[str]) -> List[str]:
    return [name for name in ingredients if is_waste_prone(name)]
