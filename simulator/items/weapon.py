from core.logging import get_logger
from pydantic import BaseModel, Field

logger = get_logger("simulator.items")


class Weapon(BaseModel):
    """
    Represents a weapon that can be wielded by characters in combat.

    A weapon deals a fixed amount of damage and counts how many times it has
    been used, each use being narrated through the items logger.
    """

    name: str = Field(
        description="The name of the weapon.",
    )
    description: str = Field(
        default="",
        description="A description of the weapon.",
    )
    damage: int = Field(
        ge=0,
        description="The damage dealt by a single strike with this weapon.",
    )
    times_used: int = Field(
        default=0,
        ge=0,
        description="How many times the weapon has been used.",
    )

    def use(self) -> None:
        """Uses the weapon once."""
        self.times_used += 1
        logger.info(f"{self.name} is used ({self.times_used} times so far)")


class Sword(Weapon):

    def use(self) -> None:
        super().use()
        logger.info(f"{self.name} cleaves through the air")


class MagicStaff(Weapon):

    def use(self) -> None:
        super().use()
        logger.info(f"{self.name} crackles with arcane energy")


class Dagger(Weapon):

    def use(self) -> None:
        super().use()
        logger.info(f"{self.name} strikes from the shadows")
