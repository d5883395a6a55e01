"""Composite validation service.

EquipmentValidationService runs an ordered list of strategies and keeps
going when one of them raises, recording the fault as a validation error.
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
from equipment_tracker.exceptions import InvalidArgumentError, ValidationFailedError
from equipment_tracker.results import ValidationResult
from equipment_tracker.strategies import (
    BasicEquipmentStrategy,
    BusinessRulesStrategy,
    SerialNumberStrategy,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from equipment_tracker.config import ValidationRules
    from equipment_tracker.models import Equipment
    from equipment_tracker.protocols import ValidationStrategy

__all__ = ["EquipmentValidationService"]

logger = logging.getLogger(__name__)


class EquipmentValidationService(ObservableMixin):
    """Validator that runs every strategy and isolates strategy faults.

    A strategy that raises does not abort validation: the exception is
    logged and turned into the error
    ``"Validation strategy '<name>' failed: <detail>"``, and the remaining
    strategies still run.

    Example:
        repository = EquipmentRepository()
        service = EquipmentValidationService(repository.equipment_view())
        repository.validator = service

        outcome = repository.add(equipment)
    """

    def __init__(
        self,
        existing_equipment: Iterable[Equipment] | None = None,
        *,
        rules: ValidationRules | None = None,
        include_defaults: bool = True,
    ) -> None:
        """Initialize the service.

        Args:
            existing_equipment: Live view of stored equipment, used by the
                serial number strategy for uniqueness checks.
            rules: Rule set passed to the default strategies.
            include_defaults: If True, start with the basic, serial number
                and business rules strategies in that order.
        """
        self._strategies: list[ValidationStrategy] = []
        if include_defaults:
            self._strategies.extend(
                [
                    BasicEquipmentStrategy(rules),
                    SerialNumberStrategy(existing_equipment, rules),
                    BusinessRulesStrategy(rules),
                ]
            )

    def add_strategy(self, strategy: ValidationStrategy) -> None:
        """Append a strategy to run after the existing ones.

        Raises:
            InvalidArgumentError: If strategy is None.
        """
        if strategy is None:
            raise InvalidArgumentError("strategy")
        self._strategies.append(strategy)

    def remove_strategy(self, strategy_type: type) -> bool:
        """Remove the first strategy that is an instance of ``strategy_type``.

        Returns:
            True if a strategy was removed, False if none matched.
        """
        for i, strategy in enumerate(self._strategies):
            if isinstance(strategy, strategy_type):
                self._strategies.pop(i)
                return True
        return False

    def strategy_info(self) -> list[tuple[str, str]]:
        """Get (name, description) pairs for the strategies, in run order."""
        return [(s.name, s.description) for s in self._strategies]

    @property
    def strategies(self) -> list[ValidationStrategy]:
        """Get copy of strategies list."""
        return self._strategies.copy()

    def validate(self, equipment: Equipment) -> ValidationResult:
        """Run all strategies and combine their results.

        Args:
            equipment: Record to validate.

        Returns:
            ValidationResult with errors and warnings from every strategy,
            including one error per strategy that raised.

        Raises:
            InvalidArgumentError: If equipment is None.
        """
        if equipment is None:
            raise InvalidArgumentError("equipment")

        start_time = time.perf_counter()
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_STARTED,
                source=self,
                data={"equipment": equipment, "strategy_count": len(self._strategies)},
            )
        )

        result = ValidationResult()
        for strategy in self._strategies:
            try:
                result = result.combine(strategy.validate(equipment))
            except Exception as exc:
                logger.exception("Validation strategy %r raised", strategy.name)
                result.add_error(f"Validation strategy '{strategy.name}' failed: {exc}")
                self.notify(
                    ValidationEvent(
                        event_type=ValidationEventType.STRATEGY_FAILED,
                        source=self,
                        data={
                            "equipment": equipment,
                            "strategy_name": strategy.name,
                            "exception": exc,
                        },
                    )
                )

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

    def validate_and_raise(self, equipment: Equipment) -> ValidationResult:
        """Validate and raise if the record is invalid.

        Returns:
            The ValidationResult when valid (it may still carry warnings).

        Raises:
            ValidationFailedError: If validation produced any error.
        """
        result = self.validate(equipment)
        if not result.is_valid:
            raise ValidationFailedError(result)
        return result

    def __len__(self) -> int:
        """Return number of strategies."""
        return len(self._strategies)

    def __repr__(self) -> str:
        names = ", ".join(s.name for s in self._strategies)
        return f"EquipmentValidationService(strategies=[{names}])"
