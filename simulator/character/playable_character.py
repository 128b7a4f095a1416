"""
Playable character module for the simulator.

Defines the hero controlled by the player, a combatant whose damage and
protection come from the equipment it carries.
"""

from __future__ import annotations

import logging

from combat.combatant import Combatant
from core.constants import (
    DEFAULT_HERO_DAMAGE,
    DEFAULT_HERO_HEALTH,
    CharacterClass,
    CharacterType,
)
from core.error_handling import require_enum_type, require_non_empty_string
from items.armor import Armor
from items.weapon import Weapon


class PlayableCharacter(Combatant):
    """
    Represents the hero of an encounter.

    Attributes:
        character_class (CharacterClass):
            The class of the hero, which decides its starting equipment.
        max_health (int):
            The health the hero started the encounter with.
        base_damage (int):
            The damage dealt without a weapon.
        weapon (Weapon | None):
            The equipped weapon, adding its damage to every attack.
        armor (Armor | None):
            The equipped armor, absorbing part of every hit.

    """

    char_type = CharacterType.PLAYER

    def __init__(
        self,
        name: str,
        character_class: CharacterClass,
        health: int = DEFAULT_HERO_HEALTH,
        base_damage: int = DEFAULT_HERO_DAMAGE,
        weapon: Weapon | None = None,
        armor: Armor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(logger)
        self._name = require_non_empty_string(name, "name")
        self.character_class = require_enum_type(
            character_class, CharacterClass, "character_class", {"name": name}
        )
        if health <= 0:
            raise ValueError(f"Hero health must be positive, got {health}.")
        self._health = health
        self.max_health = health
        self.base_damage = base_damage
        self.weapon = weapon
        self.armor = armor

    @property
    def name(self) -> str:
        return self._name

    @property
    def health(self) -> int:
        return self._health

    @property
    def damage(self) -> int:
        if self.weapon is None:
            return self.base_damage
        return self.base_damage + self.weapon.damage

    def equip(self, weapon: Weapon, armor: Armor) -> None:
        """
        Equips a weapon and an armor, replacing the current ones.

        Args:
            weapon (Weapon): The new weapon.
            armor (Armor): The new armor.

        """
        self.weapon = weapon
        self.armor = armor
        self.logger.debug(f"{self.name} equips {weapon.name} and {armor.name}")

    def take_damage(self, amount: int) -> None:
        taken = max(amount, 0)
        if self.armor is not None:
            taken = self.armor.absorb(taken)
        self._health = max(self._health - taken, 0)
        self.logger.info(
            f"{self.name} takes {taken} damage (base: {amount}, remaining HP: {self._health})"
        )

    def attack(self, target: Combatant) -> None:
        self.logger.info(f"{self.name} attacks {target.name} for {self.damage} damage")
        if self.weapon is not None:
            self.weapon.use()
        target.take_damage(self.damage)

    def heal(self, amount: int) -> int:
        """
        Increases the hero's health by the given amount, up to max_health.

        Args:
            amount (int): The amount to heal.

        Returns:
            int: The health actually regained.

        """
        before = self._health
        self._health = min(self._health + max(amount, 0), self.max_health)
        return self._health - before
