"""
Tests for loading the game settings.
"""

import json
from pathlib import Path

import pytest
from core.error_handling import ConfigurationError
from core.settings import GameSettings, load_settings
from pydantic import ValidationError


def test_defaults():
    settings = GameSettings()
    assert settings.legendary_bonus_damage == 20
    assert settings.armor_reduction == 0.3
    assert settings.dispel_probability == 0.2
    assert settings.animated_weapon_health == 50
    assert settings.profile_file == Path("score.json")


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "nope.json") == GameSettings()
    assert load_settings(None) == GameSettings()


def test_load_values(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"legendary_bonus_damage": 5, "max_rounds": 7}))
    settings = load_settings(path)
    assert settings.legendary_bonus_damage == 5
    assert settings.max_rounds == 7
    assert settings.armor_reduction == 0.3


def test_relative_profile_file_resolved_next_to_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"profile_file": "saves/score.json"}))
    assert load_settings(path).profile_file == tmp_path / "saves" / "score.json"


def test_absolute_profile_file_kept(tmp_path):
    target = tmp_path / "elsewhere" / "score.json"
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"profile_file": str(target)}))
    assert load_settings(path).profile_file == target


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2]",
        json.dumps({"armor_reduction": 1.5}),
        json.dumps({"dispel_probability": -0.1}),
        json.dumps({"max_rounds": 0}),
    ],
)
def test_invalid_file_raises_configuration_error(tmp_path, content):
    path = tmp_path / "settings.json"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_model_validates_directly():
    with pytest.raises(ValidationError):
        GameSettings(legendary_bonus_damage=-1)


def test_shipped_settings_file_is_valid():
    path = Path(__file__).parents[2] / "data" / "settings.json"
    settings = load_settings(path)
    assert settings.profile_file == path.parent / "score.json"


@pytest.mark.parametrize("level", ["verbose", "", 10])
def test_unknown_log_level_raises_configuration_error(tmp_path, level):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"log_level": level}))
    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_log_level_is_normalized(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"log_level": " debug "}))
    assert load_settings(path).log_level == "DEBUG"
