"""
Base enemy of the simulator.
"""

from __future__ import annotations

import logging

from core.constants import CharacterType

from .combatant import Combatant


class Enemy(Combatant):
    """
    A plain enemy with fixed damage.

    This is the innermost element of every decorator chain, the modifiers in
    enemy_decorators only ever reach its state through take_damage and attack.
    """

    char_type = CharacterType.ENEMY

    def __init__(
        self,
        name: str,
        health: int,
        damage: int,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(logger)
        if not name:
            raise ValueError("Enemy name must not be empty.")
        if health < 0:
            raise ValueError(f"Enemy health must be non-negative, got {health}.")
        if damage < 0:
            raise ValueError(f"Enemy damage must be non-negative, got {damage}.")
        self._name = name
        self._health = health
        self._damage = damage

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
        self._health = max(self._health - max(amount, 0), 0)
        self.logger.info(
            f"{self.name} takes {amount} damage (remaining HP: {self._health})"
        )

    def attack(self, target: Combatant) -> None:
        self.logger.info(f"{self.name} attacks {target.name} for {self.damage} damage")
        target.take_damage(self.damage)
