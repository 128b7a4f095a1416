"""
Persistence module for the encounter simulator.

This module contains the player profile model, the repository contract, the
file-backed store and the write-through cache placed in front of it.
"""

from .player_profile import PlayerProfile
from .profile_cache import PlayerProfileCacheRepository
from .profile_repository import PlayerProfileRepository
from .profile_store import PlayerProfileFileRepository

__all__ = [
    "PlayerProfile",
    "PlayerProfileCacheRepository",
    "PlayerProfileFileRepository",
    "PlayerProfileRepository",
]
