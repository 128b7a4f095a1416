# combat_manager.py
from collections.abc import Callable
from dataclasses import dataclass

from catchery import log_debug, log_warning
from character.playable_character import PlayableCharacter
from core.logging import get_combat_logger
from core.settings import GameSettings
from core.utils import cprint, crule, make_bar
from persistence.profile_repository import PlayerProfileRepository

from combat.combatant import Combatant


@dataclass
class CombatResult:
    """Outcome of an encounter."""

    victory: bool
    winner: str | None
    rounds: int
    score: int


class CombatManager:
    """Manages the flow of an encounter between a hero and a group of enemies.

    Each round the hero strikes one enemy still standing, then every
    surviving enemy strikes back. The encounter ends when either side is
    defeated, or as a draw after the configured number of rounds. A victory
    adds the configured points to the hero's profile.
    """

    def __init__(
        self,
        hero: PlayableCharacter,
        enemies: list[Combatant],
        repository: PlayerProfileRepository,
        settings: GameSettings | None = None,
        target_selector: Callable[[list[Combatant]], Combatant] | None = None,
    ):
        """Initialize the CombatManager with participants and score keeping.

        Args:
            hero (PlayableCharacter): The character controlled by the player.
            enemies (list[Combatant]): The enemies, modifiers already applied.
            repository (PlayerProfileRepository): Where the hero's score is kept.
            settings (GameSettings | None): Round limit and points per victory.
            target_selector (Callable | None): Picks the enemy the hero strikes,
                defaults to the first one still alive.

        """
        if not enemies:
            raise ValueError("An encounter needs at least one enemy.")
        self.hero = hero
        self.enemies = enemies
        self.repository = repository
        self.settings = settings or GameSettings()
        self.target_selector = target_selector or (lambda targets: targets[0])
        self.logger = get_combat_logger()

        # This will now represent the "Round Number"
        self.round_number: int = 0

    def get_alive_enemies(self) -> list[Combatant]:
        """Returns the enemies that are still alive."""
        return [enemy for enemy in self.enemies if enemy.is_alive]

    def is_combat_over(self) -> bool:
        """Determines if the encounter has ended."""
        return not self.hero.is_alive or not self.get_alive_enemies()

    def run_round(self) -> bool:
        """Runs a single round of the encounter.

        Returns:
            bool: True if the round was played, False if the encounter was
            already over.

        """
        if self.is_combat_over():
            log_debug("Encounter already over, no round to play.")
            return False

        self.round_number += 1
        self.logger.info(f"Round {self.round_number} begins")

        target = self.target_selector(self.get_alive_enemies())
        self.hero.attack(target)
        if not target.is_alive:
            self.logger.info(f"{target.name} has been defeated!")

        for enemy in self.get_alive_enemies():
            if not self.hero.is_alive:
                break
            enemy.attack(self.hero)

        if not self.hero.is_alive:
            self.logger.info(f"{self.hero.name} has been defeated!")
        return True

    def run(self) -> CombatResult:
        """Plays rounds until the encounter is over and records the outcome.

        Returns:
            CombatResult: Who won, after how many rounds, and the hero's score.

        """
        while not self.is_combat_over():
            if self.round_number >= self.settings.max_rounds:
                log_warning(
                    "Encounter reached the round limit, ending in a draw",
                    {
                        "hero": self.hero.name,
                        "rounds": self.round_number,
                        "context": "round_limit",
                    },
                )
                break
            self.run_round()

        victory = self.hero.is_alive and not self.get_alive_enemies()
        profile = self.repository.get_profile(self.hero.name)
        score = profile.score
        if victory:
            score += self.settings.points_per_victory
            self.repository.update_high_score(self.hero.name, score)
            winner: str | None = self.hero.name
        elif not self.hero.is_alive:
            alive = self.get_alive_enemies()
            winner = alive[0].name if alive else None
        else:
            winner = None

        return CombatResult(
            victory=victory,
            winner=winner,
            rounds=self.round_number,
            score=score,
        )

    def final_report(self, result: CombatResult) -> None:
        """Prints the final battle report after the encounter ends."""
        crule("📊  Final Battle Report", style="bold blue")
        cprint(
            f"{self.hero.colored_name} "
            f"{make_bar(self.hero.health, self.hero.max_health, color='green')} "
            f"{self.hero.health}/{self.hero.max_health}"
        )
        defeated = [enemy for enemy in self.enemies if not enemy.is_alive]
        if defeated:
            cprint(
                f"[bold magenta]Defeated Enemies ({len(defeated)}):[/] "
                + ", ".join(d.name for d in defeated)
            )
        if result.victory:
            cprint(f"[bold green]Victory in {result.rounds} rounds! Score: {result.score}[/]")
        elif result.winner:
            cprint(f"[bold red]Defeated by {result.winner} after {result.rounds} rounds.[/]")
        else:
            cprint(f"[bold yellow]Draw after {result.rounds} rounds.[/]")
        cprint("")
