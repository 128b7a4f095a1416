"""
Adapter that lets a weapon fight as an enemy.

An animated weapon is not a combatant, it only knows its damage and how to
be used. WeaponToEnemyAdapter gives it the combatant interface so the
encounter can treat it like any other enemy, modifiers included.
"""

from __future__ import annotations

import logging

from core.constants import (
    ANIMATED_WEAPON_HEALTH,
    DISPEL_PROBABILITY,
    CharacterType,
)
from core.error_handling import require_fraction
from core.rng import DefaultRandomSource, RandomSource
from items.weapon import Weapon

from .combatant import Combatant


class WeaponToEnemyAdapter(Combatant):
    """
    Exposes a weapon as an enemy.

    The adapter does not own the weapon: it only calls weapon.use() when
    attacking, the weapon stays with whoever handed it over.

    Every hit also rolls against the dispel probability; a successful roll
    breaks the enchantment and drops the health to zero, whatever the
    damage was.
    """

    char_type = CharacterType.ENEMY

    def __init__(
        self,
        weapon: Weapon,
        rng: RandomSource | None = None,
        health: int = ANIMATED_WEAPON_HEALTH,
        dispel_probability: float = DISPEL_PROBABILITY,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(logger)
        self._weapon = weapon
        self._rng = rng or DefaultRandomSource()
        self._name = "Animated Weapon"
        self._health = health
        self._damage = weapon.damage
        self._dispel_probability = require_fraction(
            dispel_probability, "dispel_probability", {"weapon": weapon.name}
        )

    @property
    def weapon(self) -> Weapon:
        return self._weapon

    @property
    def name(self) -> str:
        return self._name

    @property
    def health(self) -> int:
        return self._health

    @property
    def damage(self) -> int:
        return self._damage

    def take_damage(self, amount: int) -> None:
        self.logger.info(f"{self.name} takes {amount} damage!")
        self._health = max(self._health - max(amount, 0), 0)

        # The dispel roll happens on every hit, after the regular damage.
        if self._rng.random() <= self._dispel_probability:
            self.logger.info(f"The attack dispels the enchantment on {self.name}!")
            self._health = 0

        if self._health > 0:
            self.logger.info(f"{self.name} has {self._health} health left")

    def attack(self, target: Combatant) -> None:
        self.logger.info(f"{self.name} attacks {target.name}!")
        self._weapon.use()
        target.take_damage(self.damage)
