"""
Enemy modifiers for the simulator.

Each modifier wraps exactly one combatant and forwards every read and every
action to it, overriding only the behavior it adds. Modifiers can be stacked
to any depth; the outermost one is what the encounter holds on to, and calls
travel inward through the chain in the order the modifiers were applied.
"""

from __future__ import annotations

import logging

from core.constants import (
    DEFAULT_DAMAGE_REDUCTION,
    LEGENDARY_BONUS_DAMAGE,
    CharacterType,
)
from core.error_handling import require_fraction

from .combatant import Combatant


class EnemyDecorator(Combatant):
    """
    Base modifier: a combatant that behaves exactly like the one it wraps.

    Subclasses override the members they change and must still call the
    wrapped combatant for take_damage and attack.
    """

    def __init__(self, enemy: Combatant, logger: logging.Logger | None = None) -> None:
        super().__init__(logger or enemy.logger)
        self._wrapped_enemy = enemy

    @property
    def wrapped(self) -> Combatant:
        """The combatant this modifier wraps."""
        return self._wrapped_enemy

    @property
    def char_type(self) -> CharacterType:  # type: ignore[override]
        return self._wrapped_enemy.char_type

    @property
    def name(self) -> str:
        return self._wrapped_enemy.name

    @property
    def health(self) -> int:
        return self._wrapped_enemy.health

    @property
    def damage(self) -> int:
        return self._wrapped_enemy.damage

    @property
    def is_alive(self) -> bool:
        return self._wrapped_enemy.is_alive

    def take_damage(self, amount: int) -> None:
        self._wrapped_enemy.take_damage(amount)

    def attack(self, target: Combatant) -> None:
        self._wrapped_enemy.attack(target)


class LegendaryEnemyDecorator(EnemyDecorator):
    """After every attack, strikes the target again for a fixed bonus."""

    def __init__(
        self,
        enemy: Combatant,
        bonus_damage: int = LEGENDARY_BONUS_DAMAGE,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(enemy, logger)
        if bonus_damage < 0:
            raise ValueError(f"Bonus damage must be non-negative, got {bonus_damage}.")
        self._bonus_damage = bonus_damage

    @property
    def bonus_damage(self) -> int:
        return self._bonus_damage

    @property
    def name(self) -> str:
        return f"Legendary {self._wrapped_enemy.name}"

    def attack(self, target: Combatant) -> None:
        super().attack(target)
        self.logger.info(
            f"{self.name} is legendary and deals {self._bonus_damage} extra damage!"
        )
        target.take_damage(self._bonus_damage)


class WindfuryEnemyDecorator(EnemyDecorator):
    """Attacks twice in a row."""

    @property
    def name(self) -> str:
        return f"Windfury {self._wrapped_enemy.name}"

    def attack(self, target: Combatant) -> None:
        super().attack(target)
        self.logger.info(f"Windfury lets {self.name} attack a second time!")
        super().attack(target)


class ArmoredEnemyDecorator(EnemyDecorator):
    """
    Absorbs a fraction of every hit before passing the rest inward.

    The forwarded damage is truncated, not rounded: with the default
    reduction of 0.3 a hit of 15 becomes 10.
    """

    def __init__(
        self,
        enemy: Combatant,
        damage_reduction: float = DEFAULT_DAMAGE_REDUCTION,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(enemy, logger)
        self._damage_reduction = require_fraction(
            damage_reduction, "damage_reduction", {"enemy": enemy.name}
        )

    @property
    def damage_reduction(self) -> float:
        return self._damage_reduction

    @property
    def name(self) -> str:
        return f"Armored {self._wrapped_enemy.name}"

    def reduce(self, damage: int) -> int:
        """
        Computes the damage that gets through the armor.

        Args:
            damage (int): The incoming damage.

        Returns:
            int: The reduced damage, never negative.

        """
        # Round away float noise before truncating.
        reduced = int(round(max(damage, 0) * (1 - self._damage_reduction), 9))
        return max(reduced, 0)

    def take_damage(self, amount: int) -> None:
        self.logger.info(
            f"Armor absorbs {self._damage_reduction * 100:g}% of the damage!"
        )
        super().take_damage(self.reduce(amount))


def unwrap_chain(combatant: Combatant) -> Combatant:
    """
    Walks a modifier chain down to the innermost combatant.

    Args:
        combatant (Combatant): The head of the chain.

    Returns:
        Combatant: The first combatant that is not a modifier.

    """
    while isinstance(combatant, EnemyDecorator):
        combatant = combatant.wrapped
    return combatant


def chain_depth(combatant: Combatant) -> int:
    """Returns the number of modifiers stacked on top of the innermost combatant."""
    depth = 0
    while isinstance(combatant, EnemyDecorator):
        combatant = combatant.wrapped
        depth += 1
    return depth
