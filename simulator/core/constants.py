"""
Constants and enumerations for the simulator.

Defines global constants and the enumerations for character types and
character classes used throughout the simulator.
"""

from enum import Enum

# Bonus damage dealt by a legendary enemy after each of its attacks.
LEGENDARY_BONUS_DAMAGE = 20

# Default fraction of incoming damage absorbed by an armored enemy.
DEFAULT_DAMAGE_REDUCTION = 0.3

# Fixed health of a weapon animated into an enemy.
ANIMATED_WEAPON_HEALTH = 50

# Probability that any hit dispels the enchantment of an animated weapon.
DISPEL_PROBABILITY = 0.2

# Default values for playable characters.
DEFAULT_HERO_HEALTH = 100
DEFAULT_HERO_DAMAGE = 5

# Encounter defaults.
POINTS_PER_VICTORY = 10
MAX_COMBAT_ROUNDS = 50

# Default location of the persisted profile table.
DEFAULT_PROFILE_FILE = "score.json"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class CharacterType(NiceEnum):
    """Defines the type of character in the game."""

    PLAYER = "PLAYER"
    ENEMY = "ENEMY"

    @property
    def color(self) -> str:
        """Returns the color string associated with this character type."""
        return {
            CharacterType.PLAYER: "bold blue",
            CharacterType.ENEMY: "bold red",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies character type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class CharacterClass(NiceEnum):
    """Defines the playable character classes."""

    WARRIOR = "WARRIOR"
    MAGE = "MAGE"
    THIEF = "THIEF"

    @property
    def color(self) -> str:
        """Returns the color string associated with this character class."""
        return {
            CharacterClass.WARRIOR: "bold red",
            CharacterClass.MAGE: "bold magenta",
            CharacterClass.THIEF: "bold green",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies character class color formatting to a message."""
        return f"[{self.color}]{message}[/]"
