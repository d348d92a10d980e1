import json
import logging
import pytest
from app.core.matching_config import MatchingConfig, load_matching_config


def test_missing_file_uses_defaults(tmp_path):
    assert load_matching_config(tmp_path / "missing.json") == MatchingConfig()


def test_invalid_json_uses_defaults(tmp_path):
    path = tmp_path / "matching_config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_matching_config(path) == MatchingConfig()


def test_partial_config_overrides_only_given_fields(tmp_path):
    path = tmp_path / "matching_config.json"
    path.write_text(json.dumps({
        "match_rounding": "FLOOR",
        "waste_prone_weight": "15",
        "expiring_threshold_days": 2
    }), encoding="utf-8")

    config = load_matching_config(path)

    assert config.match_rounding == "floor"
    assert config.waste_prone_weight == 15.0
    assert config.expiring_threshold_days == 2
    assert config.efficiency_weight == MatchingConfig().efficiency_weight


def test_invalid_values_fall_back(tmp_path):
    path = tmp_path / "matching_config.json"
    path.write_text(json.dumps({
        "match_rounding": "banker",
        "waste_prone_weight": -5,
        "quick_meal_minutes": "soon",
        "max_waste_score": True
    }), encoding="utf-8")

    config = load_matching_config(path)

    assert config.match_rounding == "half_up"
    # Negative weights clamp to zero.
    assert config.waste_prone_weight == 0.0
    assert config.quick_meal_minutes == 15
    assert config.max_waste_score == 100.0


def test_bundled_config_loads():
    config = load_matching_config()
    assert config.match_rounding in ("half_up", "floor", "ceil")
    assert config.waste_prone_weight >= 0


def test_round_percentage():
    assert MatchingConfig().round_percentage(62.5) == 63
    assert MatchingConfig().round_percentage(62.49) == 62
    assert MatchingConfig(match_rounding="floor").round_percentage(62.9) == 62
    assert MatchingConfig(match_rounding="ceil").round_percentage(62.1) == 63


@pytest.mark.parametrize("content", ["[1, 2]", "null", "\"half_up\"", "42"])
def test_non_object_json_uses_defaults(tmp_path, content):
    path = tmp_path / "matching_config.json"
    path.write_text(content, encoding="utf-8")
    assert load_matching_config(path) == MatchingConfig()


def test_unreadable_path_uses_defaults(tmp_path):
    # A directory where the file should be.
    path = tmp_path / "matching_config.json"
    path.mkdir()
    assert load_matching_config(path) == MatchingConfig()


def test_integral_floats_are_accepted(tmp_path):
    path = tmp_path / "matching_config.json"
    path.write_text(json.dumps({"expiring_threshold_days": 2.0}), encoding="utf-8")
    assert load_matching_config(path).expiring_threshold_days == 2


def test_fractional_int_field_warns_and_falls_back(tmp_path, caplog):
    path = tmp_path / "matching_config.json"
    path.write_text(json.dumps({"quick_meal_minutes": 12.5}), encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        config = load_matching_config(path)

    assert config.quick_meal_minutes == 15
    assert "quick_meal_minutes" in caplog.text
