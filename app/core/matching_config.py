import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from app.core.logging_config import get_logger

logger = get_logger(__name__)

ROUNDING_MODES = ("half_up", "floor", "ceil")


@dataclass(frozen=True)
class MatchingConfig:
    match_rounding: str = "half_up"
    waste_prone_weight: float = 10.0
    efficiency_weight: float = 30.0
    max_waste_score: float = 100.0
    expiring_threshold_days: int = 3
    expiring_window_days: int = 7
    quick_meal_minutes: int = 15
    simple_recipe_max_ingredients: int = 5
    minimal_shopping_percentage: int = 80
    few_missing_percentage: int = 60

    def round_percentage(self, value: float) -> int:
        if self.match_rounding == "floor":
            return int(math.floor(value))
        if self.match_rounding == "ceil":
            return int(math.ceil(value))
        return int(math.floor(value + 0.5))


def _as_int(data: Dict[str, Any], key: str, default: int) -> int:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    logger.warning(f"Invalid {key} {value!r}; using {default}")
    return default


def _as_float(data: Dict[str, Any], key: str, default: float) -> float:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    logger.warning(f"Invalid {key} {value!r}; using {default}")
    return default


def _as_rounding(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip().lower() in ROUNDING_MODES:
        return value.strip().lower()
    if value is not None:
        logger.warning(f"Unknown match_rounding {value!r}; using {default}")
    return default


def _config_path() -> Path:
    return Path(__file__).resolve().parents[2] / "config" / "matching_config.json"


def load_matching_config(path: Optional[Path] = None) -> MatchingConfig:
    config_path = path or _config_path()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return MatchingConfig()
    except OSError as exc:
        logger.warning(f"Cannot read matching config at {config_path}: {exc}")
        return MatchingConfig()
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid matching config JSON at {config_path}: {exc}")
        return MatchingConfig()

    if not isinstance(data, dict):
        logger.warning(f"Matching config at {config_path} must be a JSON object; using defaults")
        return MatchingConfig()

    defaults = MatchingConfig()
    return MatchingConfig(
        match_rounding=_as_rounding(data.get("match_rounding"), defaults.match_rounding),
        waste_prone_weight=max(0.0, _as_float(data, "waste_prone_weight", defaults.waste_prone_weight)),
        efficiency_weight=_as_float(data, "efficiency_weight", defaults.efficiency_weight),
        max_waste_score=_as_float(data, "max_waste_score", defaults.max_waste_score),
        expiring_threshold_days=_as_int(data, "expiring_threshold_days", defaults.expiring_threshold_days),
        expiring_window_days=_as_int(data, "expiring_window_days", defaults.expiring_window_days),
        quick_meal_minutes=_as_int(data, "quick_meal_minutes", defaults.quick_meal_minutes),
        simple_recipe_max_ingredients=_as_int(
            data, "simple_recipe_max_ingredients", defaults.simple_recipe_max_ingredients
        ),
        minimal_shopping_percentage=_as_int(
            data, "minimal_shopping_percentage", defaults.minimal_shopping_percentage
        ),
        few_missing_percentage=_as_int(data, "few_missing_percentage", defaults.few_missing_percentage)
    )
