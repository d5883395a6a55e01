"""Validation result container.

Accumulates blocking errors and advisory warnings for one equipment record.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from equipment_tracker.exceptions import InvalidArgumentError

__all__ = ["ValidationResult"]


@dataclass
class ValidationResult:
    """Result of validating an equipment record.

    ``is_valid`` is True exactly when no error has been added. Warnings
    never affect validity.

    Attributes:
        is_valid: Whether validation passed (no errors).
        errors: Blocking error messages, in insertion order.
        warnings: Advisory warning messages, in insertion order.
    """

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error and mark the result invalid.

        The message is stored verbatim, empty strings included.
        """
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning. Validity is unchanged."""
        self.warnings.append(message)

    def combine(self, other: ValidationResult) -> ValidationResult:
        """Combine this result with another into a new result.

        Neither operand is modified. Errors and warnings are concatenated
        in (self, other) order and validity is the logical AND of both.

        Args:
            other: The result to combine with this one.

        Returns:
            A new ValidationResult.

        Raises:
            InvalidArgumentError: If other is None.

        Example:
            combined = basic_result.combine(serial_result).combine(rules_result)
        """
        if other is None:
            raise InvalidArgumentError("other")
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=[*self.errors, *other.errors],
            warnings=[*self.warnings, *other.warnings],
        )

    @property
    def has_warnings(self) -> bool:
        """Check if any warnings were added."""
        return len(self.warnings) > 0

    def formatted_messages(self) -> str:
        """Render errors and warnings as a human-readable block.

        Returns:
            An "Errors:" section and a "Warnings:" section, each entry on its
            own line prefixed with "  - ". Empty sections are omitted and an
            empty string is returned when there is nothing to report.
        """
        lines: list[str] = []
        if self.errors:
            lines.append("Errors:")
            lines.extend(f"  - {error}" for error in self.errors)
        if self.warnings:
            lines.append("Warnings:")
            lines.extend(f"  - {warning}" for warning in self.warnings)
        return os.linesep.join(lines)

    def __str__(self) -> str:
        return self.formatted_messages() or "Valid"
