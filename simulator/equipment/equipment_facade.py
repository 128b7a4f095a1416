"""
Equipment facade for the simulator.

Hides the choice of the equipment chest behind a single object built from a
character class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.constants import CharacterClass
from core.error_handling import ConfigurationError, log_error
from items.armor import Armor
from items.weapon import Weapon

from .equipment_chest import (
    EquipmentChest,
    MagicalEquipmentChest,
    ThiefEquipmentChest,
    WarriorEquipmentChest,
)

if TYPE_CHECKING:
    from character.playable_character import PlayableCharacter


class WeaponEquipmentFacade:
    """
    Single entry point to the starting equipment of a character class.

    The chest is picked once, at construction. An unknown class is rejected
    right away with a ConfigurationError rather than on first use.
    """

    def __init__(self, character_class: CharacterClass) -> None:
        self._equipment_chest = self._select_chest(character_class)

    @staticmethod
    def _select_chest(character_class: CharacterClass) -> EquipmentChest:
        if character_class is CharacterClass.WARRIOR:
            return WarriorEquipmentChest()
        if character_class is CharacterClass.MAGE:
            return MagicalEquipmentChest()
        if character_class is CharacterClass.THIEF:
            return ThiefEquipmentChest()
        log_error(
            f"Unknown character class: {character_class}",
            {"character_class": character_class},
        )
        raise ConfigurationError(f"Unknown character class: {character_class}")

    @property
    def equipment_chest(self) -> EquipmentChest:
        return self._equipment_chest

    def get_weapon(self) -> Weapon:
        return self._equipment_chest.get_weapon()

    def get_starter_set(self) -> tuple[Weapon, Armor]:
        """Returns a matching weapon and armor from the selected chest."""
        return self._equipment_chest.get_weapon(), self._equipment_chest.get_armor()

    def get_equipment_description(self) -> str:
        """
        Describes the starting equipment by the types of its items.

        Returns:
            str: For instance "Weapon: Sword, Armor: PlateArmor".

        """
        weapon, armor = self.get_starter_set()
        return f"Weapon: {type(weapon).__name__}, Armor: {type(armor).__name__}"

    def equip(self, character: PlayableCharacter) -> tuple[Weapon, Armor]:
        """
        Hands the starter set to a character.

        Args:
            character (PlayableCharacter): The character to equip.

        Returns:
            tuple[Weapon, Armor]: The items the character now carries.

        """
        weapon, armor = self.get_starter_set()
        character.equip(weapon, armor)
        return weapon, armor
