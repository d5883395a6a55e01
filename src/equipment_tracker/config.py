"""Configuration for validation rules and runtime settings.

ValidationRules holds every list and threshold the built-in strategies use;
TrackerSettings reads process-level options from the environment.
"""

from __future__ import annotations

import logging
from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["ValidationRules", "TrackerSettings", "configure_logging"]


class ValidationRules(BaseModel):
    """Rule set shared by the built-in validation strategies.

    Defaults reflect the organisation's medical equipment standards.
    Override individual values to adapt the strategies without subclassing.

    Example:
        rules = ValidationRules(standard_categories=("Imaging", "Dental"))
        strategy = BusinessRulesStrategy(rules=rules)
    """

    model_config = ConfigDict(frozen=True)

    # Field lengths
    name_min_length: int = 2
    name_max_length: int = 100
    serial_max_length: int = 50
    category_max_length: int = 50
    status_max_length: int = 20

    # Serial numbers
    serial_pattern: str = r"^[A-Z]{2,4}-\d{3,6}$"
    serial_format_hint: str = (
        "2-4 uppercase letters followed by dash and 3-6 digits (e.g., 'MRI-001', 'XRAY-12345')"
    )
    recognized_serial_prefixes: tuple[str, ...] = (
        "MRI",
        "CT",
        "XR",
        "XRAY",
        "US",
        "ECHO",
        "LAB",
        "SURG",
        "ICU",
        "ER",
    )

    # Business rules
    valid_statuses: tuple[str, ...] = (
        "Active",
        "Inactive",
        "Maintenance",
        "Retired",
        "Out of Service",
    )
    standard_categories: tuple[str, ...] = (
        "Imaging",
        "Laboratory",
        "Surgical",
        "Monitoring",
        "Support",
        "Emergency",
        "Rehabilitation",
    )
    earliest_purchase_date: date = date(1990, 1, 1)
    old_equipment_years: int = 20
    recent_purchase_days: int = 30
    retired_min_age_years: int = 5
    active_max_age_years: int = 15
    category_max_age_years: dict[str, int] = Field(
        default_factory=lambda: {"Imaging": 10, "Laboratory": 12}
    )


class TrackerSettings(BaseSettings):
    """Process-level settings read from ``EQUIPMENT_TRACKER_*`` variables.

    Nested rule values use a double underscore, e.g.
    ``EQUIPMENT_TRACKER_RULES__OLD_EQUIPMENT_YEARS=25``.
    """

    model_config = SettingsConfigDict(
        env_prefix="EQUIPMENT_TRACKER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = "WARNING"
    seed_demo_data: bool = False
    rules: ValidationRules = Field(default_factory=ValidationRules)


def configure_logging(settings: TrackerSettings | None = None) -> None:
    """Configure root logging at the level named in the settings."""
    settings = settings or TrackerSettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
