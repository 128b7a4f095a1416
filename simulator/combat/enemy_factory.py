import logging
from collections.abc import Iterable

from core.error_handling import ConfigurationError, log_error
from core.settings import GameSettings

from .combatant import Combatant
from .enemy_decorators import (
    ArmoredEnemyDecorator,
    LegendaryEnemyDecorator,
    WindfuryEnemyDecorator,
)


def decorate_enemy(
    enemy: Combatant,
    modifiers: Iterable[str],
    settings: GameSettings | None = None,
    logger: logging.Logger | None = None,
) -> Combatant:
    """
    Wraps an enemy in the named modifiers, innermost first.

    This lets encounters describe their enemies declaratively, e.g. a
    "Goblin" with ["legendary", "windfury"] becomes
    Windfury(Legendary(Goblin)), which deals the legendary bonus twice per
    attack.

    Supported modifiers:
        - "legendary": LegendaryEnemyDecorator
        - "windfury": WindfuryEnemyDecorator
        - "armored": ArmoredEnemyDecorator

    Args:
        enemy: The combatant to wrap.
        modifiers: Modifier names, applied in order (case-insensitive).
        settings: Where the bonus damage and armor reduction come from.
        logger: Logger handed to every modifier, defaults to the enemy's one.

    Returns:
        Combatant: The outermost modifier, or the enemy itself when no
        modifier is given.

    Raises:
        ConfigurationError: If a modifier name is not recognized.
    """
    settings = settings or GameSettings()
    combatant = enemy
    for modifier in modifiers:
        key = modifier.strip().lower()
        if key == "legendary":
            combatant = LegendaryEnemyDecorator(
                combatant, settings.legendary_bonus_damage, logger
            )
        elif key == "windfury":
            combatant = WindfuryEnemyDecorator(combatant, logger)
        elif key == "armored":
            combatant = ArmoredEnemyDecorator(combatant, settings.armor_reduction, logger)
        else:
            log_error(
                f"Unknown enemy modifier: {modifier}",
                {"enemy": enemy.name, "modifier": modifier},
            )
            raise ConfigurationError(f"Unknown enemy modifier: {modifier}")
    return combatant
