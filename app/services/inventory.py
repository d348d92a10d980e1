from datetime import date
from typing import Iterable, List, Optional

from app.models import FoodItem


def days_left(item: FoodItem, today: Optional[date] = None) -> Optional[int]:
    """Whole days until the item expires (negative once expired), or None if undated."""
    if item.expiration_date is None:
        return None
    today = today or date.today()
    return (item.expiration_date - today).days


def expiring_items(
    inventory: Iterable[FoodItem],
    within_days: int,
    today: Optional[date] = None,
    include_expired: bool = True
) -> List[FoodItem]:
    """Dated items expiring within `within_days`, soonest first."""
    today = today or date.today()
    dated = []
    for item in inventory:
        remaining = days_left(item, today)
        if remaining is None or remaining > within_days:
            continue
        if remaining < 0 and not include_expired:
            continue
        dated.append((remaining, item))
    dated.sort(key=lambda pair: pair[0])
    return [item for _, item in dated]


def inventory_from_request(ingredients: Iterable[str], inventory: Iterable[FoodItem]) -> List[FoodItem]:
    """Merge bare ingredient names into the inventory, skipping names already present."""
    merged = list(inventory)
    known = {item.name.strip().lower() for item in merged}
    for name in ingredients:
        key = name.strip().lower()
        if key and key not in known:
            merged.append(FoodItem(name=name.strip()))
            known.add(key)
    return merged
