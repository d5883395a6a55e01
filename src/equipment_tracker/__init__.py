"""Equipment inventory and maintenance tracking with pluggable validation."""

from equipment_tracker.config import TrackerSettings, ValidationRules, configure_logging
from equipment_tracker.context import ValidationContext
from equipment_tracker.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)
from equipment_tracker.exceptions import (
    DuplicateStrategyError,
    EquipmentTrackerError,
    InvalidArgumentError,
    StrategyNotRegisteredError,
    ValidationFailedError,
)
from equipment_tracker.models import (
    UNSET_DATE,
    Equipment,
    EquipmentStatus,
    MaintenanceRecord,
)
from equipment_tracker.protocols import EquipmentValidator, ValidationStrategy
from equipment_tracker.repository import (
    AddResult,
    EquipmentRepository,
    EquipmentView,
    Rejected,
    Stored,
    build_default_repository,
    seed_demo_data,
)
from equipment_tracker.results import ValidationResult
from equipment_tracker.rich_observers import ConsoleReportObserver, render_validation_result
from equipment_tracker.service import EquipmentValidationService
from equipment_tracker.strategies import (
    BaseStrategy,
    BasicEquipmentStrategy,
    BusinessRulesStrategy,
    SerialNumberStrategy,
)

__all__ = [
    # Models
    "UNSET_DATE",
    "Equipment",
    "EquipmentStatus",
    "MaintenanceRecord",
    # Validation results
    "ValidationResult",
    # Strategies
    "BaseStrategy",
    "BasicEquipmentStrategy",
    "BusinessRulesStrategy",
    "SerialNumberStrategy",
    "ValidationStrategy",
    "EquipmentValidator",
    # Registry and composite service
    "ValidationContext",
    "EquipmentValidationService",
    # Repository
    "AddResult",
    "EquipmentRepository",
    "EquipmentView",
    "Rejected",
    "Stored",
    "build_default_repository",
    "seed_demo_data",
    # Errors
    "EquipmentTrackerError",
    "InvalidArgumentError",
    "DuplicateStrategyError",
    "StrategyNotRegisteredError",
    "ValidationFailedError",
    # Observer pattern
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
    # Rich output
    "ConsoleReportObserver",
    "render_validation_result",
    # Configuration
    "TrackerSettings",
    "ValidationRules",
    "configure_logging",
]

__version__ = "0.1.0"
