"""
Main entry point for the encounter simulator.

This script loads the settings, equips a hero through the equipment facade,
builds a few enemies (plain, stacked with modifiers, and an animated weapon)
and runs an encounter, keeping the hero's score through the caching profile
repository.

Usage:
    python simulator/main.py [HERO_NAME] [WARRIOR|MAGE|THIEF]

When no class is given the player picks it, and the target of every
round, from an interactive menu.
"""

import sys
from pathlib import Path

from character import PlayableCharacter
from combat import Enemy, WeaponToEnemyAdapter, decorate_enemy
from combat.combat_manager import CombatManager
from core.constants import CharacterClass
from core.error_handling import ConfigurationError, log_error
from core.logging import setup_logging
from core.rng import DefaultRandomSource
from core.settings import load_settings
from core.utils import cprint, crule
from equipment import WeaponEquipmentFacade
from persistence import PlayerProfileCacheRepository
from ui.cli_interface import PlayerInterface

# Get the path to the data folder.
data_dir = Path(__file__).with_suffix("").parent / "../data"


def parse_character_class(value: str) -> CharacterClass:
    """Returns the character class named on the command line."""
    try:
        return CharacterClass[value.strip().upper()]
    except KeyError:
        choices = ", ".join(c.name for c in CharacterClass)
        log_error(
            f"Unknown character class: {value}",
            {"value": value, "choices": choices},
        )
        raise ConfigurationError(
            f"Unknown character class: {value} (expected one of {choices})"
        ) from None


def main(argv: list[str]) -> int:
    settings = load_settings(data_dir / "settings.json")
    setup_logging(settings.log_level)

    hero_name = argv[0] if argv else "Hero"
    interface = None
    if len(argv) > 1:
        character_class = parse_character_class(argv[1])
    else:
        interface = PlayerInterface()
        character_class = interface.choose_character_class()

    crule("Encounter Simulator", style="bold green")

    # Equip the hero.
    facade = WeaponEquipmentFacade(character_class)
    hero = PlayableCharacter(
        hero_name,
        character_class,
        health=settings.hero_health,
        base_damage=settings.hero_damage,
    )
    facade.equip(hero)
    cprint(
        f"{hero.colored_name} the {character_class.colored_name} "
        f"takes up the starter set ({facade.get_equipment_description()})."
    )

    # Build the enemies.
    rng = DefaultRandomSource()
    goblin = decorate_enemy(Enemy("Goblin", 40, 6), ["armored"], settings)
    orc = decorate_enemy(Enemy("Orc", 60, 8), ["legendary", "windfury"], settings)
    animated = WeaponToEnemyAdapter(
        WeaponEquipmentFacade(CharacterClass.THIEF).get_weapon(),
        rng=rng,
        health=settings.animated_weapon_health,
        dispel_probability=settings.dispel_probability,
    )
    enemies = [goblin, animated, orc]
    for enemy in enemies:
        cprint(f"    {enemy.colored_name}: {enemy.health} HP, {enemy.damage} DMG")

    # Run the encounter.
    repository = PlayerProfileCacheRepository(path=settings.profile_file)
    previous = repository.get_profile(hero.name).score
    cprint(f"Current score of {hero.colored_name}: {previous}")

    crule("Combat", style="bold red")
    manager = CombatManager(
        hero,
        enemies,
        repository,
        settings,
        target_selector=interface.choose_target if interface else None,
    )
    result = manager.run()
    manager.final_report(result)

    crule("Leaderboard", style="bold green")
    for position, profile in enumerate(repository.list_profiles(), start=1):
        cprint(f"    {position:2}. {profile.name:<20} {profile.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
