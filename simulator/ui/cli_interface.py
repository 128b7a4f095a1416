"""
User interface module for the simulator.

Provides console-based menus for the few choices the player makes: the
character class of the hero and the enemy to strike each round.
"""

from collections.abc import Callable
from typing import Any

from combat.combatant import Combatant
from core.constants import CharacterClass
from core.utils import ccapture
from equipment.equipment_facade import WeaponEquipmentFacade
from prompt_toolkit import ANSI, PromptSession
from rich.table import Table


class PlayerInterface:
    """
    Command-line interface for player interactions in the simulator.

    Shows Rich tables and reads the answer with prompt_toolkit, accepting the
    numeric shortcut printed next to each entry.
    """

    def __init__(self, prompt: Callable[[Any], str] | None = None) -> None:
        """
        Initialize the PlayerInterface.

        Args:
            prompt (Callable[[Any], str] | None):
                Reads one answer from the player. Defaults to a prompt_toolkit
                session that wipes the typed line after each answer.

        """
        if prompt is None:
            # one session keeps history
            session: PromptSession = PromptSession(erase_when_done=True)
            prompt = session.prompt
        self._prompt = prompt

    def choose_character_class(self) -> CharacterClass:
        """Asks the player for the class of the hero.

        Returns:
            CharacterClass: The selected class.

        """
        classes = list(CharacterClass)
        table = Table(title="Classes", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Class", style="bold")
        table.add_column("Starter set", style="magenta")
        for i, character_class in enumerate(classes, 1):
            table.add_row(
                str(i),
                character_class.colored_name,
                WeaponEquipmentFacade(character_class).get_equipment_description(),
            )
        return classes[self._ask(table, "Class > ", len(classes))]

    def choose_target(self, targets: list[Combatant]) -> Combatant:
        """Asks the player which enemy to strike.

        Args:
            targets (list[Combatant]): The enemies still alive.

        Returns:
            Combatant: The selected enemy, the only one when there is no choice.

        Raises:
            ValueError: If there is no target at all.

        """
        if not targets:
            raise ValueError("There is no target to choose from.")
        if len(targets) == 1:
            return targets[0]
        table = Table(title="Targets", pad_edge=False)
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column("Name", style="bold")
        table.add_column("Health")
        table.add_column("Damage", style="red")
        for i, target in enumerate(targets, 1):
            table.add_row(
                str(i),
                target.colored_name,
                str(target.health),
                str(target.damage),
            )
        return targets[self._ask(table, "Target > ", len(targets))]

    def _ask(self, table: Table, question: str, count: int) -> int:
        # Keep asking until the user provides a valid entry.
        message = "\n" + ccapture(table) + "\n" + question
        while True:
            answer = self._prompt(ANSI(message))
            index = self.get_digit_choice(answer) - 1
            if 0 <= index < count:
                return index

    @staticmethod
    def get_digit_choice(answer: str) -> int:
        """
        Convert a single digit string input to its integer value.

        Args:
            answer (str): User input string to parse.

        Returns:
            int: The integer value of the digit (0-9), or -1 if invalid input.

        """
        if isinstance(answer, str):
            answer = answer.strip()
            if len(answer) == 1 and answer.isdigit():
                return int(answer)
        return -1
