"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any

import pytest
from hypothesis import strategies as st

from equipment_tracker import (
    BaseStrategy,
    Equipment,
    EquipmentRepository,
    MaintenanceRecord,
    ValidationContext,
    ValidationEvent,
    ValidationEventType,
    ValidationResult,
)

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for messages (empty strings are legal messages)
messages = st.text(max_size=80)

# Strategy for strategy registry names
strategy_names = st.text(
    min_size=1,
    max_size=20,
    alphabet=st.characters(whitelist_categories=("L", "N")),
)

# Strategy for serial numbers that satisfy the required format
valid_serials = st.from_regex(r"[A-Z]{2,4}-[0-9]{3,6}", fullmatch=True)

# Strategy for ValidationResult instances with arbitrary contents
validation_results = st.builds(
    lambda errors, warnings: _result_with(errors, warnings),
    st.lists(messages, max_size=4),
    st.lists(messages, max_size=4),
)


def _result_with(errors: list[str], warnings: list[str]) -> ValidationResult:
    result = ValidationResult()
    for error in errors:
        result.add_error(error)
    for warning in warnings:
        result.add_warning(warning)
    return result


# -----------------------------------------------------------------------------
# Test Model Helpers
# -----------------------------------------------------------------------------

REFERENCE_DAY = date(2025, 6, 15)
"""Fixed 'today' used by business-rule tests."""


def make_equipment(**overrides: Any) -> Equipment:
    """Create a record that passes every built-in strategy."""
    fields: dict[str, Any] = {
        "name": "MRI Scanner",
        "serial_number": "MRI-001",
        "category": "Imaging",
        "purchase_date": date.today() - timedelta(days=3 * 365),
        "status": "Active",
    }
    fields.update(overrides)
    return Equipment(**fields)


def make_record(equipment_id: int, **overrides: Any) -> MaintenanceRecord:
    """Create a maintenance record for the given equipment."""
    fields: dict[str, Any] = {
        "equipment_id": equipment_id,
        "maintenance_date": date(2024, 1, 10),
        "maintenance_type": "Preventive",
        "description": "Annual calibration",
        "performed_by": "J. Doe",
        "cost": "150.00",
    }
    fields.update(overrides)
    return MaintenanceRecord(**fields)


# -----------------------------------------------------------------------------
# Test Strategy Classes
# -----------------------------------------------------------------------------


class PassingStrategy(BaseStrategy):
    """Strategy that always passes, optionally with a warning."""

    def __init__(self, name: str = "passing", warning: str | None = None) -> None:
        self._name = name
        self._warning = warning
        self.calls = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return "Always passes."

    def _check(self, equipment: Equipment, result: ValidationResult) -> None:
        self.calls += 1
        if self._warning is not None:
            result.add_warning(self._warning)


class FailingStrategy(BaseStrategy):
    """Strategy that always fails with a configurable error."""

    def __init__(self, name: str = "failing", error: str = "Failed") -> None:
        self._name = name
        self._error = error

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return "Always fails."

    def _check(self, equipment: Equipment, result: ValidationResult) -> None:
        result.add_error(self._error)


class ExplodingStrategy(BaseStrategy):
    """Strategy whose validate raises instead of returning a result."""

    @property
    def name(self) -> str:
        return "exploding"

    @property
    def description(self) -> str:
        return "Raises RuntimeError."

    def _check(self, equipment: Equipment, result: ValidationResult) -> None:
        raise RuntimeError("boom")


class RecordingObserver:
    """Observer that records all events for testing."""

    def __init__(self) -> None:
        self.events: list[ValidationEvent] = []

    def on_event(self, event: ValidationEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list[ValidationEventType]:
        return [e.event_type for e in self.events]


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def equipment() -> Equipment:
    """Create a fresh, valid, unsaved Equipment instance."""
    return make_equipment()


@pytest.fixture
def repository() -> EquipmentRepository:
    """Create a repository without validation."""
    return EquipmentRepository()


@pytest.fixture
def context() -> ValidationContext:
    """Create an empty ValidationContext."""
    return ValidationContext()


@pytest.fixture
def recorder() -> RecordingObserver:
    """Create a RecordingObserver."""
    return RecordingObserver()
