"""
File-backed store of player profiles.

The whole table lives in a single JSON object mapping player names to
profiles. Every mutating call reads the full table, changes it and writes
the full table back; the new file is written next to the old one and then
renamed over it, so a crash leaves either the old or the new table.
"""

import json
import logging
from pathlib import Path

from core.constants import DEFAULT_PROFILE_FILE
from core.error_handling import ERROR_HANDLER, ErrorSeverity
from core.logging import PERSISTENCE_LOGGER_NAME
from pydantic import TypeAdapter

from .player_profile import PlayerProfile
from .profile_repository import PlayerProfileRepository

ProfileTable = dict[str, PlayerProfile]

_TABLE_ADAPTER = TypeAdapter(ProfileTable)

logger = logging.getLogger(PERSISTENCE_LOGGER_NAME)


class PlayerProfileFileRepository(PlayerProfileRepository):
    """
    Durable profile store on top of a JSON file.

    A table that cannot be decoded (corrupted, wrong shape, unreadable) is
    treated as empty: the failure is logged but never raised, and the next
    write replaces the broken file. Stored scores are therefore best-effort.

    Not safe for concurrent use: two processes writing the same file will
    lose each other's updates.
    """

    def __init__(self, path: Path | str = DEFAULT_PROFILE_FILE) -> None:
        self._path = Path(path)
        if not self._path.exists():
            self._save_profiles({})

    @property
    def path(self) -> Path:
        return self._path

    def get_profile(self, name: str) -> PlayerProfile:
        logger.debug(f"Loading profile table to look up '{name}'")
        profiles = self._load_profiles()
        if name not in profiles:
            logger.info(f"Creating a new profile for '{name}'")
            profiles[name] = PlayerProfile(name=name)
            self._save_profiles(profiles)
        return profiles[name]

    def update_high_score(self, name: str, score: int) -> None:
        logger.debug(f"Updating the score of '{name}' to {score}")
        profiles = self._load_profiles()
        if name not in profiles:
            logger.info(f"Creating a new profile for '{name}'")
            profiles[name] = PlayerProfile(name=name)
        profiles[name].score = score
        self._save_profiles(profiles)

    def list_profiles(self) -> list[PlayerProfile]:
        profiles = self._load_profiles()
        return sorted(profiles.values(), key=lambda p: (-p.score, p.name))

    def _load_profiles(self) -> ProfileTable:
        return ERROR_HANDLER.safe_execute(
            self._read_table,
            {},
            "Could not decode the profile table, starting from an empty one",
            ErrorSeverity.MEDIUM,
            {"path": str(self._path)},
        )

    def _read_table(self) -> ProfileTable:
        with open(self._path, encoding="utf-8") as f:
            data = json.load(f)
        profiles = _TABLE_ADAPTER.validate_python(data)
        for key, profile in profiles.items():
            if key != profile.name:
                raise ValueError(f"Profile stored under '{key}' is named '{profile.name}'")
        return profiles

    def _save_profiles(self, profiles: ProfileTable) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        tmp_path.write_bytes(_TABLE_ADAPTER.dump_json(profiles, indent=2))
        tmp_path.replace(self._path)
