"""
Character system module for the encounter simulator.

This module contains the playable character, the hero that the enemies of
an encounter fight against.
"""

from .playable_character import PlayableCharacter

__all__ = [
    "PlayableCharacter",
]
