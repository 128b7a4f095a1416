"""
Combatant module for the simulator.

Defines the contract shared by every entity that can fight: enemies,
decorated enemies, animated weapons and playable characters.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from core.constants import CharacterType
from core.logging import get_combat_logger


class Combatant(ABC):
    """
    Abstract base class of everything that can take part in an encounter.

    A combatant exposes its name, health and damage, can take damage and can
    attack another combatant. It is alive exactly while its health is above
    zero.
    """

    char_type: CharacterType = CharacterType.ENEMY

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_combat_logger()

    @property
    def logger(self) -> logging.Logger:
        """The logger this combatant narrates its actions through."""
        return self._logger

    @property
    @abstractmethod
    def name(self) -> str:
        """The display name of the combatant."""

    @property
    @abstractmethod
    def health(self) -> int:
        """The remaining health of the combatant."""

    @property
    @abstractmethod
    def damage(self) -> int:
        """The damage dealt by a regular attack."""

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @property
    def colored_name(self) -> str:
        """Returns the combatant's name colored by its character type."""
        return self.char_type.colorize(self.name)

    @abstractmethod
    def take_damage(self, amount: int) -> None:
        """
        Reduces the health of the combatant.

        Args:
            amount (int): The damage received.

        """

    @abstractmethod
    def attack(self, target: Combatant) -> None:
        """
        Attacks another combatant.

        Args:
            target (Combatant): The combatant being attacked.

        """

    def __str__(self) -> str:
        return f"{self.name} (HP: {self.health}, DMG: {self.damage})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, health={self.health}, damage={self.damage})"
