"""
Caching proxy in front of a profile repository.
"""

import logging
from pathlib import Path

from core.constants import DEFAULT_PROFILE_FILE
from core.logging import PERSISTENCE_LOGGER_NAME

from .player_profile import PlayerProfile
from .profile_repository import PlayerProfileRepository
from .profile_store import PlayerProfileFileRepository

logger = logging.getLogger(PERSISTENCE_LOGGER_NAME)


class PlayerProfileCacheRepository(PlayerProfileRepository):
    """
    Write-through cache of player profiles.

    Reads are served from memory once a profile has been loaded. Updates
    always reach the backing repository before returning, so the cached
    score of a player is never older than the last completed update.

    The cache lives as long as the process and is not safe for concurrent
    use.
    """

    def __init__(
        self,
        database: PlayerProfileRepository | None = None,
        path: Path | str = DEFAULT_PROFILE_FILE,
    ) -> None:
        self._cached_profiles: dict[str, PlayerProfile] = {}
        self._database = database or PlayerProfileFileRepository(path)

    @property
    def database(self) -> PlayerProfileRepository:
        return self._database

    def is_cached(self, name: str) -> bool:
        return name in self._cached_profiles

    def clear_cache(self) -> None:
        self._cached_profiles.clear()

    def get_profile(self, name: str) -> PlayerProfile:
        if name not in self._cached_profiles:
            logger.debug(f"Profile of '{name}' not found in cache")
            self._cached_profiles[name] = self._database.get_profile(name)
        else:
            logger.debug(f"Profile of '{name}' served from cache")
        return self._cached_profiles[name]

    def update_high_score(self, name: str, score: int) -> None:
        if name not in self._cached_profiles:
            logger.debug(f"Profile of '{name}' not found in cache")
            self._database.update_high_score(name, score)
            # Reload so the cache holds what the store actually persisted.
            self._cached_profiles[name] = self._database.get_profile(name)
            return

        # The cache only follows a write the store has completed.
        self._database.update_high_score(name, score)
        self._cached_profiles[name].score = score

    def list_profiles(self) -> list[PlayerProfile]:
        return self._database.list_profiles()
