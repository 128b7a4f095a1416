"""
Centralized error handling and logging system.
"""

import logging
import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")


class ConfigurationError(ValueError):
    """Raised when the game is configured with a value it cannot act on."""


class ErrorSeverity(Enum):
    """Enumeration of error severity levels for the game's error handling system."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class GameError:
    """Represents a game error with severity, context, and optional exception information."""
    message: str
    severity: ErrorSeverity
    context: dict[str, Any]
    exception: Optional[Exception] = None


class ErrorHandler:
    """Centralized error handling for the game."""

    def __init__(self) -> None:
        """Initialize the ErrorHandler with a logger and empty error history."""
        self.logger = logging.getLogger("game_errors")
        self.error_history: list[GameError] = []

    def handle(
        self,
        message: str,
        severity: ErrorSeverity,
        context: Optional[dict[str, Any]] = None,
        exception: Optional[Exception] = None,
    ) -> None:
        """Handle an error based on its severity."""
        error = GameError(
            message=message,
            severity=severity,
            context=context or {},
            exception=exception,
        )
        self.error_history.append(error)

        # Prefix context keys to avoid conflicts with logging system reserved keys
        safe_context = {f"ctx_{key}": value for key, value in error.context.items()}

        if error.severity == ErrorSeverity.CRITICAL:
            self.logger.critical(f"CRITICAL: {error.message}", extra=safe_context)
            if error.exception:
                self.logger.critical(
                    "".join(traceback.format_exception(error.exception))
                )
        elif error.severity == ErrorSeverity.HIGH:
            self.logger.error(f"ERROR: {error.message}", extra=safe_context)
        elif error.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(f"WARNING: {error.message}", extra=safe_context)
        else:
            self.logger.info(f"INFO: {error.message}", extra=safe_context)

    def safe_execute(
        self,
        operation: Callable[[], T],
        default: T,
        error_message: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[dict] = None,
    ) -> T:
        """
        Runs an operation and returns its result, or the default if it raises.

        The failure is recorded and logged according to its severity, it is
        never propagated to the caller.
        """
        try:
            return operation()
        except Exception as e:
            self.handle(
                f"{error_message}: {str(e)}",
                severity,
                context,
                e,
            )
            return default

    def clear(self) -> None:
        """Forget every recorded error."""
        self.error_history.clear()


# Global error handler instance
ERROR_HANDLER = ErrorHandler()


def log_error(
    message: str,
    context: Optional[dict[str, Any]] = None,
    exception: Optional[Exception] = None,
) -> None:
    """Log an error-level message."""
    ERROR_HANDLER.handle(message, ErrorSeverity.HIGH, context, exception)


# ==============================================================================
# VALIDATION HELPERS
# ==============================================================================
# These helpers validate configuration values, logging the failure before
# raising a ConfigurationError.


def require_non_empty_string(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> str:
    """
    Validates that a value is a non-empty string.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        str: The validated string value

    Raises:
        ConfigurationError: If validation fails
    """
    if not value or not isinstance(value, str):
        log_error(
            f"{param_name} must be a non-empty string, got: {value}",
            {
                **(context or {}),
                "param_name": param_name,
                "value": value,
                "type": type(value).__name__,
            },
        )
        raise ConfigurationError(f"Invalid {param_name}: {value}")
    return value


def require_enum_type(
    value: Any, enum_class: type, param_name: str, context: Optional[dict[str, Any]] = None
) -> Any:
    """
    Validates that a value is a member of the specified enum type.

    Args:
        value: The value to validate
        enum_class: The expected enum class
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        The validated enum value

    Raises:
        ConfigurationError: If validation fails
    """
    if not isinstance(value, enum_class):
        log_error(
            f"{param_name} must be {enum_class.__name__} enum, got: {type(value).__name__}",
            {
                **(context or {}),
                "param_name": param_name,
                "expected_type": enum_class.__name__,
                "actual_type": type(value).__name__,
                "value": value,
            },
        )
        raise ConfigurationError(
            f"Invalid {param_name}: expected {enum_class.__name__}, got {type(value).__name__}"
        )
    return value


def require_fraction(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> float:
    """
    Validates that a value is a number between 0 and 1 (inclusive).

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        float: The validated fraction

    Raises:
        ConfigurationError: If validation fails
    """
    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or not 0.0 <= value <= 1.0
    ):
        log_error(
            f"{param_name} must be a number between 0 and 1, got: {value}",
            {**(context or {}), "param_name": param_name, "value": value},
        )
        raise ConfigurationError(f"Invalid {param_name}: {value}")
    return float(value)
