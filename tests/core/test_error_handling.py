"""
Tests for the centralized error handler and validation helpers.
"""

import logging

import pytest
from core.error_handling import (
    ConfigurationError,
    ErrorHandler,
    ErrorSeverity,
    require_enum_type,
    require_fraction,
    require_non_empty_string,
)
from core.constants import CharacterClass


@pytest.fixture
def handler():
    return ErrorHandler()


def test_safe_execute_returns_result(handler):
    assert handler.safe_execute(lambda: 42, 0, "never fails") == 42
    assert handler.error_history == []


def test_safe_execute_returns_default_on_failure(handler, caplog):
    def explode():
        raise RuntimeError("boom")

    assert handler.safe_execute(explode, {}, "Loading failed") == {}
    assert len(handler.error_history) == 1
    error = handler.error_history[0]
    assert error.severity == ErrorSeverity.MEDIUM
    assert isinstance(error.exception, RuntimeError)
    assert "Loading failed: boom" in error.message
    assert any(r.levelno == logging.WARNING for r in caplog.records)


@pytest.mark.parametrize(
    "severity, level",
    [
        (ErrorSeverity.LOW, logging.INFO),
        (ErrorSeverity.MEDIUM, logging.WARNING),
        (ErrorSeverity.HIGH, logging.ERROR),
        (ErrorSeverity.CRITICAL, logging.CRITICAL),
    ],
)
def test_handle_logs_by_severity(handler, caplog, severity, level):
    caplog.set_level(logging.INFO, logger="game_errors")
    handler.handle("something happened", severity, {"key": "value"})
    assert caplog.records[0].levelno == level


def test_clear(handler):
    handler.handle("x", ErrorSeverity.LOW)
    handler.clear()
    assert handler.error_history == []


def test_require_non_empty_string():
    assert require_non_empty_string("Aria", "name") == "Aria"
    with pytest.raises(ConfigurationError):
        require_non_empty_string("", "name")


def test_require_enum_type():
    assert require_enum_type(CharacterClass.MAGE, CharacterClass, "cls") is CharacterClass.MAGE
    with pytest.raises(ConfigurationError):
        require_enum_type("MAGE", CharacterClass, "cls")


@pytest.mark.parametrize("value", [0, 0.0, 0.3, 1, 1.0])
def test_require_fraction_accepts(value):
    assert require_fraction(value, "fraction") == float(value)


@pytest.mark.parametrize("value", [-0.01, 1.01, True, "0.5", None])
def test_require_fraction_rejects(value):
    with pytest.raises(ConfigurationError):
        require_fraction(value, "fraction")


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)
