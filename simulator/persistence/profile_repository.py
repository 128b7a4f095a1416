"""
Repository contract for player profiles.
"""

from abc import ABC, abstractmethod

from .player_profile import PlayerProfile


class PlayerProfileRepository(ABC):
    """
    Access to player profiles by name.

    A missing profile is never an error: both operations create a profile
    with a score of zero on first contact with an unknown name.
    """

    @abstractmethod
    def get_profile(self, name: str) -> PlayerProfile:
        """
        Returns the profile of a player, creating it if needed.

        Args:
            name (str): The name of the player.

        Returns:
            PlayerProfile: The stored profile.

        """

    @abstractmethod
    def update_high_score(self, name: str, score: int) -> None:
        """
        Overwrites the score of a player, creating the profile if needed.

        Args:
            name (str): The name of the player.
            score (int): The new score, must be non-negative.

        """

    @abstractmethod
    def list_profiles(self) -> list[PlayerProfile]:
        """Returns every stored profile, highest score first."""
