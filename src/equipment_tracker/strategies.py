"""Built-in equipment validation strategies.

Provides the abstract BaseStrategy plus the three rule sets applied to
equipment before it is stored: basic field checks, serial number format and
uniqueness, and organisational business rules.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import TYPE_CHECKING, Callable

from equipment_tracker.config import ValidationRules
from equipment_tracker.exceptions import InvalidArgumentError
from equipment_tracker.models import UNSET_DATE, Equipment
from equipment_tracker.results import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "BaseStrategy",
    "BasicEquipmentStrategy",
    "SerialNumberStrategy",
    "BusinessRulesStrategy",
]


class BaseStrategy(ABC):
    """Abstract base class for equipment validation strategies.

    Subclasses provide ``name``, ``description`` and ``_check``. The base
    class rejects a missing record and hands ``_check`` a fresh result.

    Example:
        class LocationStrategy(BaseStrategy):
            @property
            def name(self) -> str:
                return "Location Validation"

            @property
            def description(self) -> str:
                return "Requires a ward code in the equipment name."

            def _check(self, equipment: Equipment, result: ValidationResult) -> None:
                if "/" not in equipment.name:
                    result.add_error("Equipment name must include a ward code.")
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this strategy for error reporting and identification."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable summary of what this strategy checks."""
        ...

    def validate(self, equipment: Equipment) -> ValidationResult:
        """Validate an equipment record.

        Args:
            equipment: Record to validate.

        Returns:
            ValidationResult containing errors and warnings.

        Raises:
            InvalidArgumentError: If equipment is None.
        """
        if equipment is None:
            raise InvalidArgumentError("equipment")
        result = ValidationResult()
        self._check(equipment, result)
        return result

    @abstractmethod
    def _check(self, equipment: Equipment, result: ValidationResult) -> None:
        """Add this strategy's errors and warnings to ``result``."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class BasicEquipmentStrategy(BaseStrategy):
    """Required-field and length checks for every equipment field."""

    def __init__(self, rules: ValidationRules | None = None) -> None:
        self._rules = rules or ValidationRules()

    @property
    def name(self) -> str:
        return "Basic Equipment Validation"

    @property
    def description(self) -> str:
        return (
            "Validates required fields, data types, and basic integrity constraints "
            "for equipment records."
        )

    def _check(self, equipment: Equipment, result: ValidationResult) -> None:
        rules = self._rules

        if _is_blank(equipment.name):
            result.add_error("Equipment name is required and cannot be empty.")
        elif len(equipment.name) > rules.name_max_length:
            result.add_error(
                f"Equipment name cannot exceed {rules.name_max_length} characters."
            )
        elif len(equipment.name) < rules.name_min_length:
            result.add_error(
                f"Equipment name must be at least {rules.name_min_length} characters long."
            )

        if _is_blank(equipment.serial_number):
            result.add_error("Serial number is required and cannot be empty.")
        elif len(equipment.serial_number) > rules.serial_max_length:
            result.add_error(
                f"Serial number cannot exceed {rules.serial_max_length} characters."
            )

        if _is_blank(equipment.category):
            result.add_error("Equipment category is required and cannot be empty.")
        elif len(equipment.category) > rules.category_max_length:
            result.add_error(
                f"Equipment category cannot exceed {rules.category_max_length} characters."
            )

        if _is_blank(equipment.status):
            result.add_error("Equipment status is required and cannot be empty.")
        elif len(equipment.status) > rules.status_max_length:
            result.add_error(
                f"Equipment status cannot exceed {rules.status_max_length} characters."
            )

        if equipment.purchase_date == UNSET_DATE:
            result.add_error("Purchase date is required and must be a valid date.")

        if not _is_blank(equipment.name) and equipment.name[0].islower():
            result.add_warning("Equipment name should start with a capital letter.")

        if not _is_blank(equipment.serial_number) and " " in equipment.serial_number:
            result.add_warning(
                "Serial number contains spaces, which may cause issues in some systems."
            )


class SerialNumberStrategy(BaseStrategy):
    """Serial number format, uniqueness and naming-convention checks.

    Uniqueness is only checked when ``existing_equipment`` is given. Pass a
    live view of the repository (``EquipmentRepository.equipment_view()``)
    so that equipment added after construction is taken into account.
    """

    def __init__(
        self,
        existing_equipment: Iterable[Equipment] | None = None,
        rules: ValidationRules | None = None,
    ) -> None:
        self._existing = existing_equipment
        self._rules = rules or ValidationRules()
        self._pattern = re.compile(self._rules.serial_pattern, re.ASCII)

    @property
    def name(self) -> str:
        return "Serial Number Validation"

    @property
    def description(self) -> str:
        return (
            "Validates serial number format, uniqueness, and compliance with "
            "organizational standards."
        )

    @property
    def checks_uniqueness(self) -> bool:
        """Whether an equipment collection was supplied."""
        return self._existing is not None

    def _check(self, equipment: Equipment, result: ValidationResult) -> None:
        serial = equipment.serial_number
        if _is_blank(serial):
            result.add_error("Serial number is required for validation.")
            return

        format_ok = self._pattern.match(serial) is not None
        if not format_ok:
            result.add_error(
                f"Serial number '{serial}' does not match required format. "
                f"Expected format: {self._rules.serial_format_hint}."
            )

        if self._existing is not None and self._is_duplicate(equipment):
            result.add_error(
                f"Serial number '{serial}' is already in use by another equipment item."
            )

        if format_ok:
            self._check_conventions(serial, result)

    def _is_duplicate(self, equipment: Equipment) -> bool:
        # Matching ids are the same record being revalidated on update.
        wanted = equipment.serial_number.casefold()
        return any(
            other.id != equipment.id and (other.serial_number or "").casefold() == wanted
            for other in self._existing or ()
        )

    def _check_conventions(self, serial: str, result: ValidationResult) -> None:
        prefix, number = serial.split("-", 1)

        if prefix not in self._rules.recognized_serial_prefixes:
            result.add_warning(
                f"Serial number prefix '{prefix}' is not a recognized equipment category. "
                "Consider using standard prefixes like MRI, CT, XR, US, etc."
            )

        if len(number) > 3 and not number.startswith("0") and int(number) < 1000:
            result.add_warning(
                "Consider using leading zeros in serial numbers for better organization "
                "(e.g., '001' instead of '1')."
            )


def _years_before(day: date, years: int) -> date:
    """Same calendar day ``years`` earlier; Feb 29 falls back to Feb 28."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


class BusinessRulesStrategy(BaseStrategy):
    """Organisational policy checks on status, category, dates and lifecycle.

    Args:
        rules: Lists and thresholds to apply. Defaults to ValidationRules().
        today: Clock returning the current date. Defaults to date.today.
    """

    _CATEGORY_AGE_MESSAGES = {
        "imaging": (
            "Imaging equipment over {years} years old may require more frequent "
            "calibration and maintenance."
        ),
        "laboratory": (
            "Laboratory equipment over {years} years old should be evaluated for "
            "accuracy and compliance standards."
        ),
    }

    def __init__(
        self,
        rules: ValidationRules | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._rules = rules or ValidationRules()
        self._today = today or date.today

    @property
    def name(self) -> str:
        return "Business Rules Validation"

    @property
    def description(self) -> str:
        return (
            "Validates equipment records against business-specific rules, "
            "organizational policies, and operational constraints."
        )

    def _check(self, equipment: Equipment, result: ValidationResult) -> None:
        today = self._today()
        self._check_status(equipment, result)
        self._check_category(equipment, result)
        self._check_purchase_date(equipment, result, today)
        self._check_lifecycle(equipment, result, today)

    def _check_status(self, equipment: Equipment, result: ValidationResult) -> None:
        if _is_blank(equipment.status):
            return

        status = equipment.status.casefold()
        allowed = self._rules.valid_statuses
        if status not in {s.casefold() for s in allowed}:
            result.add_error(
                f"Status '{equipment.status}' is not valid. "
                f"Allowed values are: {', '.join(allowed)}."
            )

        if equipment.is_new and status != "active":
            result.add_warning(
                "New equipment items should typically start with 'Active' status "
                "unless there's a specific reason."
            )

    def _check_category(self, equipment: Equipment, result: ValidationResult) -> None:
        if _is_blank(equipment.category):
            return

        standard = self._rules.standard_categories
        if equipment.category.casefold() not in {c.casefold() for c in standard}:
            result.add_warning(
                f"Category '{equipment.category}' is not in the standard list. "
                f"Consider using one of: {', '.join(standard)}."
            )

    def _check_purchase_date(
        self, equipment: Equipment, result: ValidationResult, today: date
    ) -> None:
        purchased = equipment.purchase_date
        if purchased == UNSET_DATE:
            return

        rules = self._rules
        if purchased > today:
            result.add_error("Purchase date cannot be in the future.")

        if purchased < rules.earliest_purchase_date:
            result.add_error(
                f"Purchase date cannot be earlier than "
                f"{rules.earliest_purchase_date.isoformat()}. Please verify the date."
            )

        if purchased < _years_before(today, rules.old_equipment_years):
            result.add_warning(
                f"Equipment is over {rules.old_equipment_years} years old. "
                "Consider reviewing maintenance schedules and replacement planning."
            )

        if (
            purchased > today - timedelta(days=rules.recent_purchase_days)
            and equipment.status.casefold() == "active"
        ):
            result.add_warning(
                "Recently purchased equipment marked as 'Active'. "
                "Ensure installation and commissioning are complete."
            )

    def _check_lifecycle(
        self, equipment: Equipment, result: ValidationResult, today: date
    ) -> None:
        rules = self._rules
        age = today.year - equipment.purchase_date.year
        status = (equipment.status or "").casefold()

        if status == "retired" and age < rules.retired_min_age_years:
            result.add_warning(
                f"Equipment marked as 'Retired' but is less than "
                f"{rules.retired_min_age_years} years old. Verify retirement reason."
            )
        elif status == "out of service":
            result.add_warning(
                "Equipment marked as 'Out of Service'. "
                "Ensure maintenance tickets are created for resolution."
            )
        elif status == "active" and age > rules.active_max_age_years:
            result.add_warning(
                f"Active equipment is over {rules.active_max_age_years} years old. "
                "Consider maintenance review and potential replacement planning."
            )

        category = (equipment.category or "").casefold()
        for name, max_age in rules.category_max_age_years.items():
            if category == name.casefold() and age > max_age:
                template = self._CATEGORY_AGE_MESSAGES.get(
                    category,
                    f"{name} equipment over {{years}} years old should be reviewed.",
                )
                result.add_warning(template.format(years=max_age))
