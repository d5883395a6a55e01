"""Equipment and maintenance record models.

Pydantic models for the two entity collections held by the repository.
Both are mutable: the repository assigns identifiers after construction.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator

__all__ = ["UNSET_DATE", "EquipmentStatus", "Equipment", "MaintenanceRecord"]

UNSET_DATE = date.min
"""Sentinel for a date that was never filled in."""


class EquipmentStatus(str, Enum):
    """Recommended equipment statuses. Status fields accept any string."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    MAINTENANCE = "Maintenance"
    RETIRED = "Retired"
    OUT_OF_SERVICE = "Out of Service"


class Equipment(BaseModel):
    """A piece of tracked equipment.

    An ``id`` of 0 means the record has not been stored yet; the repository
    assigns a positive identifier on a successful add.

    Example:
        scanner = Equipment(
            name="MRI Scanner",
            serial_number="MRI-001",
            category="Imaging",
            purchase_date=date(2020, 5, 15),
            status=EquipmentStatus.ACTIVE,
        )
    """

    id: int = 0
    name: str = ""
    serial_number: str = ""
    category: str = ""
    purchase_date: date = UNSET_DATE
    status: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def _status_value(cls, value: object) -> object:
        if isinstance(value, EquipmentStatus):
            return value.value
        return value

    @property
    def is_new(self) -> bool:
        """True until the repository assigns an identifier."""
        return self.id == 0

    def copy_fields_from(self, other: Equipment) -> None:
        """Overwrite the editable fields with those of another record.

        The identifier is left untouched.
        """
        self.name = other.name
        self.serial_number = other.serial_number
        self.category = other.category
        self.purchase_date = other.purchase_date
        self.status = other.status


class MaintenanceRecord(BaseModel):
    """A maintenance event performed on a piece of equipment.

    ``equipment_id`` refers to the owning Equipment. The reference is not
    enforced; the repository removes records when their equipment is deleted.
    """

    id: int = 0
    equipment_id: int = 0
    maintenance_date: date = UNSET_DATE
    maintenance_type: str = ""
    description: str = ""
    performed_by: str = ""
    cost: Decimal = Field(default=Decimal("0"))
