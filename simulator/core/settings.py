"""
Settings module for the simulator.

Holds the tunable values of an encounter and the location of the profile
table, loaded from a JSON file and validated with pydantic.
"""

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from core.constants import (
    ANIMATED_WEAPON_HEALTH,
    DEFAULT_DAMAGE_REDUCTION,
    DEFAULT_HERO_DAMAGE,
    DEFAULT_HERO_HEALTH,
    DEFAULT_PROFILE_FILE,
    DISPEL_PROBABILITY,
    LEGENDARY_BONUS_DAMAGE,
    MAX_COMBAT_ROUNDS,
    POINTS_PER_VICTORY,
)
from core.error_handling import ConfigurationError, log_error
from core.logging import log_debug


class GameSettings(BaseModel):
    """
    Tunable values for encounters and persistence.

    Every field has a default, so an empty settings file (or none at all)
    yields a playable configuration.
    """

    profile_file: Path = Field(
        default=Path(DEFAULT_PROFILE_FILE),
        description="Path of the JSON file holding the player profiles.",
    )
    legendary_bonus_damage: int = Field(
        default=LEGENDARY_BONUS_DAMAGE,
        ge=0,
        description="Bonus damage a legendary enemy deals after each attack.",
    )
    armor_reduction: float = Field(
        default=DEFAULT_DAMAGE_REDUCTION,
        ge=0.0,
        le=1.0,
        description="Fraction of incoming damage absorbed by armored enemies.",
    )
    dispel_probability: float = Field(
        default=DISPEL_PROBABILITY,
        ge=0.0,
        le=1.0,
        description="Chance that a hit dispels an animated weapon.",
    )
    animated_weapon_health: int = Field(
        default=ANIMATED_WEAPON_HEALTH,
        gt=0,
        description="Health of a weapon animated into an enemy.",
    )
    hero_health: int = Field(
        default=DEFAULT_HERO_HEALTH,
        gt=0,
        description="Starting health of a playable character.",
    )
    hero_damage: int = Field(
        default=DEFAULT_HERO_DAMAGE,
        ge=0,
        description="Base damage of a playable character, before its weapon.",
    )
    points_per_victory: int = Field(
        default=POINTS_PER_VICTORY,
        ge=0,
        description="Score awarded to the hero for each won encounter.",
    )
    max_rounds: int = Field(
        default=MAX_COMBAT_ROUNDS,
        gt=0,
        description="Number of rounds after which an encounter is a draw.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Name of the logging level used by the demo.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings(path: Path | None = None) -> GameSettings:
    """
    Loads the game settings from a JSON file.

    Args:
        path (Path | None):
            The settings file. When None, or when the file does not exist,
            the defaults are returned.

    Returns:
        GameSettings:
            The validated settings.

    Raises:
        ConfigurationError:
            If the file is not valid JSON or holds invalid values.

    """
    if path is None or not path.exists():
        log_debug("Using default settings", {"path": path})
        return GameSettings()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected object in {path}, got {type(data).__name__}")
        settings = GameSettings(**data)
    except (json.JSONDecodeError, ValidationError, ValueError) as e:
        log_error(f"Invalid settings file {path}", {"error": str(e)})
        raise ConfigurationError(f"File {path} raised an error: {e}") from e
    # Relative profile paths are resolved against the settings file.
    if not settings.profile_file.is_absolute():
        settings.profile_file = path.parent / settings.profile_file
    return settings
