"""
Tests for the encounter driver.
"""

import pytest
from character.playable_character import PlayableCharacter
from combat.combat_manager import CombatManager
from combat.enemy import Enemy
from combat.enemy_decorators import LegendaryEnemyDecorator
from core.constants import CharacterClass
from core.settings import GameSettings
from persistence.profile_cache import PlayerProfileCacheRepository
from persistence.profile_store import PlayerProfileFileRepository


@pytest.fixture
def repository(tmp_path):
    return PlayerProfileCacheRepository(path=tmp_path / "score.json")


def make_hero(health=100, base_damage=10):
    return PlayableCharacter(
        "Aria", CharacterClass.WARRIOR, health=health, base_damage=base_damage
    )


def test_requires_enemies(repository):
    with pytest.raises(ValueError):
        CombatManager(make_hero(), [], repository)


def test_victory_awards_points(repository, tmp_path):
    manager = CombatManager(make_hero(), [Enemy("Rat", 10, 1)], repository)
    result = manager.run()

    assert result.victory
    assert result.winner == "Aria"
    assert result.rounds == 1
    assert result.score == 10
    assert repository.get_profile("Aria").score == 10
    # The new score reached the file as well.
    assert PlayerProfileFileRepository(tmp_path / "score.json").get_profile("Aria").score == 10


def test_victories_accumulate(repository):
    for _ in range(3):
        CombatManager(make_hero(), [Enemy("Rat", 10, 1)], repository).run()
    assert repository.get_profile("Aria").score == 30


def test_defeat_keeps_score(repository):
    repository.update_high_score("Aria", 40)
    troll = LegendaryEnemyDecorator(Enemy("Troll", 100, 50))
    result = CombatManager(make_hero(health=10, base_damage=1), [troll], repository).run()

    assert not result.victory
    assert result.winner == "Legendary Troll"
    assert result.rounds == 1
    assert result.score == 40
    assert repository.get_profile("Aria").score == 40


def test_draw_after_round_limit(repository):
    settings = GameSettings(max_rounds=3)
    manager = CombatManager(
        make_hero(base_damage=0), [Enemy("Statue", 10, 0)], repository, settings
    )
    result = manager.run()

    assert not result.victory
    assert result.winner is None
    assert result.rounds == 3
    assert result.score == 0


def test_round_order_hero_strikes_first(repository):
    hero = make_hero(health=5, base_damage=10)
    rat = Enemy("Rat", 10, 100)
    manager = CombatManager(hero, [rat], repository)
    assert manager.run_round()
    # The rat died before it could strike back.
    assert hero.health == 5
    assert not manager.run_round()


def test_all_surviving_enemies_strike_back(repository):
    hero = make_hero(health=100, base_damage=1)
    enemies = [Enemy("Wolf", 50, 3), Enemy("Bat", 50, 2)]
    CombatManager(hero, enemies, repository).run_round()
    assert hero.health == 95
    assert enemies[0].health == 49
    assert enemies[1].health == 50


def test_target_selector_is_used(repository):
    enemies = [Enemy("Wolf", 50, 0), Enemy("Bat", 50, 0)]
    manager = CombatManager(
        make_hero(), enemies, repository, target_selector=lambda targets: targets[-1]
    )
    manager.run_round()
    assert enemies[0].health == 50
    assert enemies[1].health == 40


def test_final_report_prints(repository, capsys):
    manager = CombatManager(make_hero(), [Enemy("Rat", 10, 1)], repository)
    manager.final_report(manager.run())
    assert "Rat" in capsys.readouterr().out
