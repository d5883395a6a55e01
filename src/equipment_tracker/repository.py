"""In-memory equipment and maintenance repository.

Owns both entity collections, assigns identifiers, screens equipment through
an optional validator and cascades equipment deletes to maintenance records.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Union, overload

from equipment_tracker.config import TrackerSettings
from equipment_tracker.context import ValidationContext
from equipment_tracker.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
)
from equipment_tracker.exceptions import InvalidArgumentError, ValidationFailedError
from equipment_tracker.models import Equipment, EquipmentStatus, MaintenanceRecord
from equipment_tracker.results import ValidationResult
from equipment_tracker.strategies import (
    BasicEquipmentStrategy,
    BusinessRulesStrategy,
    SerialNumberStrategy,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from equipment_tracker.protocols import EquipmentValidator

__all__ = [
    "AddResult",
    "EquipmentRepository",
    "EquipmentView",
    "Rejected",
    "Stored",
    "build_default_repository",
    "seed_demo_data",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stored:
    """Outcome of an add that stored the equipment.

    Attributes:
        equipment: The stored record, with its identifier assigned.
        validation: The validation result, which may carry warnings.
    """

    equipment: Equipment
    validation: ValidationResult = field(default_factory=ValidationResult)

    @property
    def is_stored(self) -> bool:
        return True

    def unwrap(self) -> Equipment:
        """Return the stored equipment."""
        return self.equipment


@dataclass(frozen=True)
class Rejected:
    """Outcome of an add that failed validation.

    Attributes:
        equipment: The record as submitted; its identifier is still 0.
        validation: The result holding the blocking errors and any warnings.
    """

    equipment: Equipment
    validation: ValidationResult

    @property
    def is_stored(self) -> bool:
        return False

    @property
    def errors(self) -> list[str]:
        return self.validation.errors

    @property
    def warnings(self) -> list[str]:
        return self.validation.warnings

    def unwrap(self) -> Equipment:
        """Raise the failure for callers that prefer exceptions.

        Raises:
            ValidationFailedError: Always.
        """
        raise ValidationFailedError(self.validation)


AddResult = Union[Stored, Rejected]


class EquipmentView(Sequence[Equipment]):
    """Read-only, live view of the repository's equipment list.

    Reflects every later add and delete; offers no way to mutate the list.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[Equipment]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> Equipment: ...

    @overload
    def __getitem__(self, index: slice) -> list[Equipment]: ...

    def __getitem__(self, index: int | slice) -> Equipment | list[Equipment]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Equipment]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"EquipmentView(count={len(self._items)})"


class EquipmentRepository(ObservableMixin):
    """Equipment inventory with maintenance history.

    Identifiers start at 1 and are assigned in add order, separately for
    equipment and maintenance records. Unknown identifiers passed to
    update() or delete() are ignored.

    Example:
        repository = EquipmentRepository()
        context = ValidationContext()
        context.register("serial", SerialNumberStrategy(repository.equipment_view()))
        repository.validator = context

        outcome = repository.add(Equipment(name="CT Scanner", serial_number="CT-003", ...))
        if outcome.is_stored:
            repository.add_maintenance_record(
                MaintenanceRecord(equipment_id=outcome.equipment.id, ...)
            )
        else:
            print(outcome.validation.formatted_messages())
    """

    def __init__(self, validator: EquipmentValidator | None = None) -> None:
        """Initialize an empty repository.

        Args:
            validator: Screens equipment before add(), typically a
                ValidationContext. None accepts every record as-is.
        """
        self._equipment: list[Equipment] = []
        self._maintenance_records: list[MaintenanceRecord] = []
        self._next_equipment_id = 1
        self._next_maintenance_id = 1
        self._validator = validator

    @property
    def validator(self) -> EquipmentValidator | None:
        """The validator applied on add(), or None when validation is skipped."""
        return self._validator

    @validator.setter
    def validator(self, validator: EquipmentValidator | None) -> None:
        self._validator = validator

    def add(self, equipment: Equipment) -> AddResult:
        """Validate and store a new equipment record.

        Args:
            equipment: The record to store. Its identifier is overwritten.

        Returns:
            Stored with the record on success, or Rejected with the
            validation result. A rejected add leaves the repository unchanged.

        Raises:
            InvalidArgumentError: If equipment is None.

        Note:
            Emits EQUIPMENT_ADDED or EQUIPMENT_REJECTED.
        """
        if equipment is None:
            raise InvalidArgumentError("equipment", "Equipment cannot be None.")

        validation = ValidationResult()
        if self._validator is not None:
            validation = self._validator.validate(equipment)
            if not validation.is_valid:
                logger.warning(
                    "Rejected equipment %r (%s): %d error(s)",
                    equipment.name,
                    equipment.serial_number,
                    len(validation.errors),
                )
                self.notify(
                    ValidationEvent(
                        event_type=ValidationEventType.EQUIPMENT_REJECTED,
                        source=self,
                        data={"equipment": equipment, "result": validation},
                    )
                )
                return Rejected(equipment, validation)

        equipment.id = self._next_equipment_id
        self._next_equipment_id += 1
        self._equipment.append(equipment)
        logger.info("Stored equipment %d (%s)", equipment.id, equipment.serial_number)
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.EQUIPMENT_ADDED,
                source=self,
                data={"equipment": equipment, "result": validation},
            )
        )
        return Stored(equipment, validation)

    def get(self, equipment_id: int) -> Equipment | None:
        """Get equipment by identifier, or None if not found."""
        for equipment in self._equipment:
            if equipment.id == equipment_id:
                return equipment
        return None

    def update(self, equipment: Equipment) -> None:
        """Overwrite the stored record that has the same identifier.

        Name, serial number, category, purchase date and status are copied
        onto the stored instance. Does nothing if the identifier is unknown.

        Raises:
            InvalidArgumentError: If equipment is None.
        """
        if equipment is None:
            raise InvalidArgumentError("equipment", "Equipment cannot be None.")

        existing = self.get(equipment.id)
        if existing is None:
            logger.debug("Ignoring update for unknown equipment %d", equipment.id)
            return

        existing.copy_fields_from(equipment)
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.EQUIPMENT_UPDATED,
                source=self,
                data={"equipment": existing},
            )
        )

    def delete(self, equipment_id: int) -> None:
        """Remove equipment and every maintenance record that refers to it.

        Does nothing if the identifier is unknown.
        """
        index = next(
            (i for i, item in enumerate(self._equipment) if item.id == equipment_id), None
        )
        if index is None:
            logger.debug("Ignoring delete for unknown equipment %d", equipment_id)
            return

        equipment = self._equipment.pop(index)
        before = len(self._maintenance_records)
        # Slice assignment keeps the list returned by all_maintenance_records() live.
        self._maintenance_records[:] = [
            r for r in self._maintenance_records if r.equipment_id != equipment_id
        ]
        removed_records = before - len(self._maintenance_records)
        logger.info(
            "Deleted equipment %d and %d maintenance record(s)", equipment_id, removed_records
        )
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.EQUIPMENT_DELETED,
                source=self,
                data={
                    "equipment": equipment,
                    "equipment_id": equipment_id,
                    "maintenance_records_removed": removed_records,
                },
            )
        )

    def add_maintenance_record(self, record: MaintenanceRecord) -> MaintenanceRecord:
        """Store a maintenance record and assign its identifier.

        Maintenance records are not validated.

        Raises:
            InvalidArgumentError: If record is None.
        """
        if record is None:
            raise InvalidArgumentError("record", "Maintenance record cannot be None.")

        record.id = self._next_maintenance_id
        self._next_maintenance_id += 1
        self._maintenance_records.append(record)
        logger.debug(
            "Stored maintenance record %d for equipment %d", record.id, record.equipment_id
        )
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.MAINTENANCE_RECORDED,
                source=self,
                data={"record": record},
            )
        )
        return record

    def maintenance_records_for(self, equipment_id: int) -> list[MaintenanceRecord]:
        """Get the maintenance records of one equipment item, oldest first."""
        return [r for r in self._maintenance_records if r.equipment_id == equipment_id]

    def all_equipment(self) -> list[Equipment]:
        """Get the live equipment list. Later changes are visible through it."""
        return self._equipment

    def all_maintenance_records(self) -> list[MaintenanceRecord]:
        """Get the live maintenance record list."""
        return self._maintenance_records

    def equipment_view(self) -> EquipmentView:
        """Get a read-only live view of the equipment list."""
        return EquipmentView(self._equipment)

    def __len__(self) -> int:
        """Return number of stored equipment items."""
        return len(self._equipment)

    def __repr__(self) -> str:
        return (
            f"EquipmentRepository(equipment={len(self._equipment)}, "
            f"maintenance_records={len(self._maintenance_records)})"
        )


def seed_demo_data(repository: EquipmentRepository) -> list[Equipment]:
    """Add the two demonstration items and return them.

    Items rejected by the repository's validator are left out of the result.
    """
    demo = [
        Equipment(
            name="MRI Scanner",
            serial_number="MRI-001",
            category="Imaging",
            purchase_date=date(2020, 5, 15),
            status=EquipmentStatus.ACTIVE,
        ),
        Equipment(
            name="X-Ray Machine",
            serial_number="XR-002",
            category="Imaging",
            purchase_date=date(2019, 3, 10),
            status=EquipmentStatus.ACTIVE,
        ),
    ]
    return [outcome.equipment for outcome in map(repository.add, demo) if outcome.is_stored]


def build_default_repository(settings: TrackerSettings | None = None) -> EquipmentRepository:
    """Create a repository validated by the three built-in strategies.

    The serial number strategy watches the repository's own equipment, so
    duplicates of anything added later are rejected.

    Args:
        settings: Rules and seeding options. Defaults to TrackerSettings().
    """
    settings = settings or TrackerSettings()
    repository = EquipmentRepository()

    context = ValidationContext()
    context.register("Basic", BasicEquipmentStrategy(settings.rules))
    context.register(
        "SerialNumber", SerialNumberStrategy(repository.equipment_view(), settings.rules)
    )
    context.register("BusinessRules", BusinessRulesStrategy(settings.rules))
    repository.validator = context

    if settings.seed_demo_data:
        seed_demo_data(repository)
    return repository
