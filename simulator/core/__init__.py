"""
Core system module for the encounter simulator.

This module contains the fundamental components shared by every other
package: game constants, logging, error handling, settings, randomness and
display utilities.
"""

from .constants import (
    CharacterClass,
    CharacterType,
)
from .error_handling import (
    ERROR_HANDLER,
    ConfigurationError,
    ErrorHandler,
    ErrorSeverity,
    GameError,
)
from .rng import (
    DefaultRandomSource,
    RandomSource,
)
from .settings import (
    GameSettings,
    load_settings,
)
from .utils import (
    ccapture,
    cprint,
    crule,
    make_bar,
)

__all__ = [
    # Inport from constants.py
    "CharacterClass",
    "CharacterType",
    # Import from error_handling.py
    "ERROR_HANDLER",
    "ConfigurationError",
    "ErrorHandler",
    "ErrorSeverity",
    "GameError",
    # Import from rng.py
    "DefaultRandomSource",
    "RandomSource",
    # Import from settings.py
    "GameSettings",
    "load_settings",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
]
