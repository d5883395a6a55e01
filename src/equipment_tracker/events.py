"""Observer pattern implementation for validation and repository events.

Provides event types, observer protocol, and mixin for adding observer
support to the validation registry, the composite service and the repository.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "ValidationEventType",
    "ValidationEvent",
    "ValidationObserver",
    "ObservableMixin",
]


class ValidationEventType(Enum):
    """Types of events that can be observed."""

    VALIDATION_STARTED = auto()
    """Emitted when validation of an equipment record begins."""

    VALIDATION_COMPLETED = auto()
    """Emitted when validation of an equipment record completes."""

    STRATEGY_FAILED = auto()
    """Emitted when a strategy raised and the fault was recorded as an error."""

    EQUIPMENT_ADDED = auto()
    """Emitted when equipment is stored and assigned an identifier."""

    EQUIPMENT_REJECTED = auto()
    """Emitted when equipment fails validation and is not stored."""

    EQUIPMENT_UPDATED = auto()
    """Emitted when stored equipment is overwritten in place."""

    EQUIPMENT_DELETED = auto()
    """Emitted when equipment and its maintenance records are removed."""

    MAINTENANCE_RECORDED = auto()
    """Emitted when a maintenance record is stored."""


@dataclass
class ValidationEvent:
    """An event that can be observed.

    Attributes:
        event_type: The type of event that occurred.
        source: The object that emitted the event.
        data: Event-specific data dictionary.

    Example:
        event = ValidationEvent(
            event_type=ValidationEventType.EQUIPMENT_REJECTED,
            source=repository,
            data={"equipment": equipment, "result": result},
        )
    """

    event_type: ValidationEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class ValidationObserver(Protocol):
    """Protocol for event observers.

    Example:
        class AuditObserver:
            def on_event(self, event: ValidationEvent) -> None:
                if event.event_type == ValidationEventType.EQUIPMENT_DELETED:
                    audit.record(event.data["equipment_id"])
    """

    def on_event(self, event: ValidationEvent) -> None:
        """Handle an event.

        Args:
            event: The event to handle.
        """
        ...


class ObservableMixin:
    """Mixin class to add observer support to any class."""

    _observers: list[ValidationObserver]

    def _ensure_observers(self) -> None:
        """Ensure the observers list is initialized."""
        if not hasattr(self, "_observers") or self._observers is None:
            self._observers = []

    def add_observer(self, observer: ValidationObserver) -> None:
        """Add an observer to receive events.

        Args:
            observer: An object implementing the ValidationObserver protocol.
        """
        self._ensure_observers()
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: ValidationObserver) -> None:
        """Remove an observer from receiving events."""
        self._ensure_observers()
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: ValidationEvent) -> None:
        """Notify all observers of an event."""
        self._ensure_observers()
        for observer in self._observers:
            observer.on_event(event)

    @property
    def observers(self) -> list[ValidationObserver]:
        """Get a copy of the current observers list."""
        self._ensure_observers()
        return self._observers.copy()

    def clear_observers(self) -> None:
        """Remove all observers."""
        self._ensure_observers()
        self._observers.clear()
