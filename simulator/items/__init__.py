"""
Items system module for the encounter simulator.

This module contains the weapons and armor handed out by the equipment
chests.
"""

from .armor import Armor, LeatherArmor, MageRobe, PlateArmor
from .weapon import Dagger, MagicStaff, Sword, Weapon

__all__ = [
    "Armor",
    "LeatherArmor",
    "MageRobe",
    "PlateArmor",
    "Dagger",
    "MagicStaff",
    "Sword",
    "Weapon",
]
