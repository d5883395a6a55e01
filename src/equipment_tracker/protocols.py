"""Validation protocols for type checking.

Structural types for validation strategies and for anything the
repository can use to screen equipment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from equipment_tracker.models import Equipment
    from equipment_tracker.results import ValidationResult

__all__ = ["ValidationStrategy", "EquipmentValidator"]


@runtime_checkable
class ValidationStrategy(Protocol):
    """Protocol for a self-contained equipment rule set.

    Use this for type hints when accepting any strategy. Concrete
    strategies usually subclass BaseStrategy instead.
    """

    @property
    def name(self) -> str:
        """Name of this strategy."""
        ...

    @property
    def description(self) -> str:
        """Human-readable summary of what this strategy checks."""
        ...

    def validate(self, equipment: Equipment) -> ValidationResult:
        """Validate an equipment record."""
        ...


@runtime_checkable
class EquipmentValidator(Protocol):
    """Anything that can screen an equipment record before it is stored.

    Both ValidationContext and EquipmentValidationService satisfy this.
    """

    def validate(self, equipment: Equipment) -> ValidationResult:
        """Validate an equipment record."""
        ...
