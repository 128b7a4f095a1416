"""
Equipment module for the encounter simulator.

This module contains the per-class equipment chests and the facade that
picks the right chest for a character class.
"""

from .equipment_chest import (
    EquipmentChest,
    MagicalEquipmentChest,
    ThiefEquipmentChest,
    WarriorEquipmentChest,
)
from .equipment_facade import WeaponEquipmentFacade

__all__ = [
    "EquipmentChest",
    "MagicalEquipmentChest",
    "ThiefEquipmentChest",
    "WarriorEquipmentChest",
    "WeaponEquipmentFacade",
]
