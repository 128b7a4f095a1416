"""
Tests for building modifier chains from modifier names.
"""

import pytest
from combat.enemy import Enemy
from combat.enemy_decorators import (
    ArmoredEnemyDecorator,
    LegendaryEnemyDecorator,
    WindfuryEnemyDecorator,
)
from combat.enemy_factory import decorate_enemy
from core.error_handling import ConfigurationError
from core.settings import GameSettings


@pytest.fixture
def orc():
    return Enemy(name="Orc", health=60, damage=8)


def test_no_modifiers_returns_enemy(orc):
    assert decorate_enemy(orc, []) is orc


def test_modifiers_applied_innermost_first(orc):
    chain = decorate_enemy(orc, ["legendary", "windfury"])
    assert isinstance(chain, WindfuryEnemyDecorator)
    assert isinstance(chain.wrapped, LegendaryEnemyDecorator)
    assert chain.wrapped.wrapped is orc
    assert chain.name == "Windfury Legendary Orc"


def test_modifier_names_are_case_insensitive(orc):
    chain = decorate_enemy(orc, [" Armored "])
    assert isinstance(chain, ArmoredEnemyDecorator)


def test_settings_are_forwarded(orc):
    settings = GameSettings(legendary_bonus_damage=3, armor_reduction=0.5)
    chain = decorate_enemy(orc, ["legendary", "armored"], settings)
    assert chain.damage_reduction == 0.5
    assert chain.wrapped.bonus_damage == 3


def test_unknown_modifier_rejected(orc):
    with pytest.raises(ConfigurationError, match="vampiric"):
        decorate_enemy(orc, ["legendary", "vampiric"])
