"""
Tests for the command-line menus.
"""

import pytest
from combat.enemy import Enemy
from core.constants import CharacterClass
from ui.cli_interface import PlayerInterface


def scripted(*answers):
    """Builds a prompt function replaying the given answers."""
    queue = list(answers)
    asked = []

    def prompt(message):
        asked.append(message)
        return queue.pop(0)

    prompt.asked = asked
    return prompt


def test_choose_character_class():
    prompt = scripted("2")
    assert PlayerInterface(prompt).choose_character_class() == CharacterClass.MAGE
    assert len(prompt.asked) == 1


def test_invalid_answers_are_asked_again():
    prompt = scripted("", "x", "9", "3")
    assert PlayerInterface(prompt).choose_character_class() == CharacterClass.THIEF
    assert len(prompt.asked) == 4


def test_choose_target():
    wolf, bat = Enemy("Wolf", 10, 1), Enemy("Bat", 5, 1)
    assert PlayerInterface(scripted("2")).choose_target([wolf, bat]) is bat


def test_single_target_needs_no_prompt():
    prompt = scripted()
    wolf = Enemy("Wolf", 10, 1)
    assert PlayerInterface(prompt).choose_target([wolf]) is wolf
    assert prompt.asked == []


def test_no_target_rejected():
    with pytest.raises(ValueError):
        PlayerInterface(scripted()).choose_target([])


@pytest.mark.parametrize(
    "answer, expected",
    [("1", 1), (" 7 ", 7), ("12", -1), ("a", -1), ("", -1), (None, -1)],
)
def test_get_digit_choice(answer, expected):
    assert PlayerInterface.get_digit_choice(answer) == expected
