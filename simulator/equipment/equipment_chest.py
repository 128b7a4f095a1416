"""
Equipment chests for the simulator.

A chest is a small factory handing out the starting weapon and armor of one
character class. Every call returns fresh items, so two heroes never share
the same weapon instance.
"""

from abc import ABC, abstractmethod

from items.armor import Armor, LeatherArmor, MageRobe, PlateArmor
from items.weapon import Dagger, MagicStaff, Sword, Weapon


class EquipmentChest(ABC):
    """Produces a matching weapon and armor for one character class."""

    @abstractmethod
    def get_weapon(self) -> Weapon:
        """Returns a new weapon from this chest."""

    @abstractmethod
    def get_armor(self) -> Armor:
        """Returns a new armor piece from this chest."""


class WarriorEquipmentChest(EquipmentChest):

    def get_weapon(self) -> Weapon:
        return Sword(
            name="Longsword",
            description="A heavy, double-edged blade.",
            damage=15,
        )

    def get_armor(self) -> Armor:
        return PlateArmor(
            name="Plate Armor",
            description="Interlocking steel plates covering the whole body.",
            defense=8,
        )


class MagicalEquipmentChest(EquipmentChest):

    def get_weapon(self) -> Weapon:
        return MagicStaff(
            name="Oak Staff",
            description="A gnarled staff humming with arcane power.",
            damage=12,
        )

    def get_armor(self) -> Armor:
        return MageRobe(
            name="Mage Robe",
            description="A silk robe woven with protective runes.",
            defense=2,
        )


class ThiefEquipmentChest(EquipmentChest):

    def get_weapon(self) -> Weapon:
        return Dagger(
            name="Dagger",
            description="A short, easily concealed blade.",
            damage=10,
        )

    def get_armor(self) -> Armor:
        return LeatherArmor(
            name="Leather Armor",
            description="Supple boiled leather that does not hinder movement.",
            defense=4,
        )
