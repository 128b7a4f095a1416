"""
Combat system module for the encounter simulator.

This module holds the combatant contract, the base enemy, the stackable
enemy modifiers, the weapon-to-enemy adapter and the encounter driver
(combat.combat_manager, imported on its own).
"""

from .combatant import Combatant
from .enemy import Enemy
from .enemy_decorators import (
    ArmoredEnemyDecorator,
    EnemyDecorator,
    LegendaryEnemyDecorator,
    WindfuryEnemyDecorator,
    chain_depth,
    unwrap_chain,
)
from .enemy_factory import decorate_enemy
from .weapon_adapter import WeaponToEnemyAdapter

__all__ = [
    "Combatant",
    "Enemy",
    "ArmoredEnemyDecorator",
    "EnemyDecorator",
    "LegendaryEnemyDecorator",
    "WindfuryEnemyDecorator",
    "chain_depth",
    "unwrap_chain",
    "decorate_enemy",
    "WeaponToEnemyAdapter",
]
