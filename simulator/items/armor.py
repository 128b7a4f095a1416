"""
Armor module for the simulator.

Defines the Armor class and the concrete armor pieces handed out by the
equipment chests.
"""

from pydantic import BaseModel, Field


class Armor(BaseModel):
    """
    Represents a piece of armor that can be equipped by characters.

    Armor absorbs a flat amount of every hit taken by its wearer.
    """

    name: str = Field(
        description="The name of the armor piece.",
    )
    description: str = Field(
        default="",
        description="A brief description of the armor piece.",
    )
    defense: int = Field(
        ge=0,
        description="The flat amount of damage absorbed from each hit.",
    )

    def absorb(self, damage: int) -> int:
        """
        Returns the damage that gets through this armor.

        Args:
            damage (int): The incoming damage.

        Returns:
            int: The damage left after absorption, never negative.

        """
        return max(damage - self.defense, 0)


class PlateArmor(Armor):
    """Heavy armor of the warrior chest."""


class MageRobe(Armor):
    """Light robe of the magical chest."""


class LeatherArmor(Armor):
    """Supple armor of the thief chest."""
