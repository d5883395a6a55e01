"""Named registry of validation strategies.

ValidationContext lets callers register and unregister strategies at runtime
and run all of them, or a chosen subset, against one equipment record.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from equipment_tracker.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
)
from equipment_tracker.exceptions import (
    DuplicateStrategyError,
    InvalidArgumentError,
    StrategyNotRegisteredError,
)
from equipment_tracker.results import ValidationResult

if TYPE_CHECKING:
    from equipment_tracker.models import Equipment
    from equipment_tracker.protocols import ValidationStrategy

__all__ = ["ValidationContext"]

logger = logging.getLogger(__name__)


class ValidationContext(ObservableMixin):
    """Registry mapping names to validation strategies.

    Strategies run in registration order. Exceptions raised by a strategy
    propagate to the caller; use EquipmentValidationService when faults
    should be recorded as errors instead.

    Supports the Observer pattern - add observers to receive
    VALIDATION_STARTED and VALIDATION_COMPLETED events.

    Example:
        context = ValidationContext()
        context.register("basic", BasicEquipmentStrategy())
        context.register("serial", SerialNumberStrategy(repository.equipment_view()))

        result = context.validate(equipment)            # every strategy
        result = context.validate(equipment, "serial")  # just one
    """

    def __init__(self) -> None:
        self._strategies: dict[str, ValidationStrategy] = {}

    def register(self, name: str, strategy: ValidationStrategy) -> None:
        """Register a strategy under a unique name.

        Args:
            name: Key used to select the strategy in validate().
            strategy: The strategy to register.

        Raises:
            InvalidArgumentError: If name or strategy is None.
            DuplicateStrategyError: If name is already registered.
        """
        if name is None:
            raise InvalidArgumentError("name")
        if strategy is None:
            raise InvalidArgumentError("strategy")
        if name in self._strategies:
            raise DuplicateStrategyError(name)

        self._strategies[name] = strategy
        logger.debug("Registered validation strategy %r (%s)", name, strategy.name)

    def unregister(self, name: str) -> bool:
        """Remove a strategy by name.

        Returns:
            True if a strategy was removed, False if not found.
        """
        if self._strategies.pop(name, None) is None:
            return False
        logger.debug("Unregistered validation strategy %r", name)
        return True

    def has(self, name: str) -> bool:
        """Check if a strategy is registered under the given name."""
        return name in self._strategies

    def registered_names(self) -> set[str]:
        """Get the set of registered strategy names."""
        return set(self._strategies)

    def get(self, name: str) -> ValidationStrategy | None:
        """Get a strategy by name, or None if not registered."""
        return self._strategies.get(name)

    def validate(self, equipment: Equipment, *names: str) -> ValidationResult:
        """Run strategies against an equipment record and combine the results.

        Args:
            equipment: Record to validate.
            *names: Strategies to run, in this order. When omitted, every
                registered strategy runs in registration order.

        Returns:
            The combined ValidationResult. A valid, empty result when no
            strategy ran.

        Raises:
            InvalidArgumentError: If equipment is None.
            StrategyNotRegisteredError: If any requested name is unknown.
                Checked before any strategy runs.

        Note:
            Emits VALIDATION_STARTED event before validation begins and
            VALIDATION_COMPLETED event after validation finishes.
        """
        if equipment is None:
            raise InvalidArgumentError("equipment")

        if names:
            selected = []
            for name in names:
                if name not in self._strategies:
                    raise StrategyNotRegisteredError(name)
                selected.append((name, self._strategies[name]))
        else:
            selected = list(self._strategies.items())

        start_time = time.perf_counter()
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_STARTED,
                source=self,
                data={
                    "equipment": equipment,
                    "strategy_names": [name for name, _ in selected],
                },
            )
        )

        result = ValidationResult()
        for _, strategy in selected:
            result = result.combine(strategy.validate(equipment))

        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_COMPLETED,
                source=self,
                data={
                    "equipment": equipment,
                    "is_valid": result.is_valid,
                    "error_count": len(result.errors),
                    "warning_count": len(result.warnings),
                    "duration_ms": (time.perf_counter() - start_time) * 1000,
                },
            )
        )
        return result

    def __len__(self) -> int:
        """Return number of registered strategies."""
        return len(self._strategies)

    def __contains__(self, name: object) -> bool:
        return name in self._strategies

    def __repr__(self) -> str:
        names = ", ".join(self._strategies)
        return f"ValidationContext(strategies=[{names}])"
