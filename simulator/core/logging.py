"""
Logging configuration module for the simulator.

Provides centralized logging setup with colored output using rich, plus the
named loggers that combatants narrate the encounter through.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

# Name of the logger that combatants narrate gameplay through.
COMBAT_LOGGER_NAME = "simulator.combat"

# Name of the logger used by the persistence layer.
PERSISTENCE_LOGGER_NAME = "simulator.persistence"


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Sets up logging configuration with rich colored output.

    Args:
        level (int | str): The logging level to set. Defaults to logging.INFO.

    """
    console = Console(width=120, force_terminal=True, force_jupyter=False)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The configured logger instance.

    """
    return logging.getLogger(name)


def get_combat_logger() -> logging.Logger:
    """Returns the logger combatants narrate through when none is injected."""
    return get_logger(COMBAT_LOGGER_NAME)


# Create a default logger for the simulator
logger = get_logger("simulator")


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    # Format context as key=value pairs
    if not context:
        return message
    context_str = " ".join(f"{k}={v}" for k, v in context.items())
    return f"{message} [{context_str}]"


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs a debug message with optional context."""
    logger.debug(_with_context(message, context))
