"""Exception hierarchy for the equipment tracker.

Routine validation failures are returned as values by the repository;
these exceptions cover misuse of the API and callers that prefer to raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from equipment_tracker.results import ValidationResult

__all__ = [
    "EquipmentTrackerError",
    "InvalidArgumentError",
    "DuplicateStrategyError",
    "StrategyNotRegisteredError",
    "ValidationFailedError",
]


class EquipmentTrackerError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(EquipmentTrackerError, ValueError):
    """A required argument was missing (None)."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"{argument} cannot be None.")


class DuplicateStrategyError(EquipmentTrackerError, ValueError):
    """A strategy name is already registered in a ValidationContext."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A strategy with the name '{name}' is already registered.")


class StrategyNotRegisteredError(EquipmentTrackerError, LookupError):
    """Validation was requested for a strategy name that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Validation strategy '{name}' is not registered.")


class ValidationFailedError(EquipmentTrackerError):
    """Equipment failed validation.

    Carries the full ValidationResult so callers can render both the
    blocking errors and the advisory warnings.

    Attributes:
        result: The ValidationResult that caused the failure.
    """

    def __init__(self, result: ValidationResult, message: str | None = None) -> None:
        self.result = result
        super().__init__(message or f"Validation failed: {', '.join(result.errors)}")
