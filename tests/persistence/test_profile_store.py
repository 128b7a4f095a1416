"""
Tests for the file-backed profile store.
"""

import json

import pytest
from persistence.player_profile import PlayerProfile
from persistence.profile_store import PlayerProfileFileRepository
from pydantic import ValidationError


@pytest.fixture
def score_file(tmp_path):
    return tmp_path / "score.json"


@pytest.fixture
def store(score_file):
    return PlayerProfileFileRepository(score_file)


def read_table(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_construction_creates_empty_table(store, score_file):
    assert score_file.exists()
    assert read_table(score_file) == {}


def test_construction_keeps_existing_table(score_file):
    score_file.write_text(json.dumps({"Alice": {"name": "Alice", "score": 12}}))
    store = PlayerProfileFileRepository(score_file)
    assert store.get_profile("Alice").score == 12


def test_construction_creates_missing_directories(tmp_path):
    path = tmp_path / "saves" / "score.json"
    PlayerProfileFileRepository(path)
    assert path.exists()


def test_get_profile_creates_zero_score(store, score_file):
    profile = store.get_profile("Bob")
    assert profile == PlayerProfile(name="Bob", score=0)
    assert read_table(score_file) == {"Bob": {"name": "Bob", "score": 0}}


def test_get_profile_is_idempotent(store):
    first = store.get_profile("Bob")
    second = store.get_profile("Bob")
    assert first.name == second.name
    assert first.score == second.score == 0


def test_update_creates_missing_profile(store, score_file):
    store.update_high_score("Alice", 50)
    assert read_table(score_file)["Alice"]["score"] == 50


def test_update_overwrites_score(store):
    store.update_high_score("Alice", 50)
    store.update_high_score("Alice", 20)
    assert store.get_profile("Alice").score == 20


def test_updates_survive_a_new_store(store, score_file):
    store.update_high_score("Alice", 50)
    store.get_profile("Bob")
    fresh = PlayerProfileFileRepository(score_file)
    assert fresh.get_profile("Alice").score == 50
    assert fresh.get_profile("Bob").score == 0


def test_update_keeps_other_profiles(store):
    store.update_high_score("Alice", 50)
    store.update_high_score("Bob", 30)
    assert store.get_profile("Alice").score == 50


def test_negative_score_rejected_without_writing(store, score_file):
    store.update_high_score("Alice", 50)
    with pytest.raises(ValidationError):
        store.update_high_score("Alice", -1)
    assert read_table(score_file)["Alice"]["score"] == 50


def test_empty_name_rejected(store):
    with pytest.raises(ValidationError):
        store.get_profile("")


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        "[1, 2, 3]",
        '{"Alice": {"name": "Alice", "score": -5}}',
        '{"Alice": {"name": "Mallory", "score": 5}}',
        '{"Alice": 7}',
        "",
    ],
)
def test_undecodable_table_is_treated_as_empty(store, score_file, content):
    score_file.write_text(content, encoding="utf-8")
    assert store.get_profile("Alice").score == 0
    # The broken table has been replaced by a valid one.
    assert read_table(score_file) == {"Alice": {"name": "Alice", "score": 0}}


def test_decode_failure_is_logged(store, score_file, caplog):
    score_file.write_text("garbage", encoding="utf-8")
    store.get_profile("Alice")
    assert any("profile table" in r.getMessage() for r in caplog.records)


def test_deleted_file_is_treated_as_empty(store, score_file):
    store.update_high_score("Alice", 50)
    score_file.unlink()
    store.update_high_score("Bob", 5)
    assert read_table(score_file) == {"Bob": {"name": "Bob", "score": 5}}


def test_no_temporary_file_left_behind(store, tmp_path):
    store.update_high_score("Alice", 50)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["score.json"]


def test_list_profiles_sorted_by_score(store):
    store.update_high_score("Alice", 50)
    store.update_high_score("Bob", 70)
    store.update_high_score("Carol", 50)
    assert [p.name for p in store.list_profiles()] == ["Bob", "Alice", "Carol"]
