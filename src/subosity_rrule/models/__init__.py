"""subosity-rrule domain models.

Pydantic models for recurrence configurations, billing projections and the
CLI configuration file.
"""

from .billing import BillingItem, Renewal, SpendSummary
from .config_models import AppConfig, CalendarConfig, LoggingConfig, OutputConfig
from .rule import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    Frequency,
    RuleConfiguration,
    RuleViolation,
    SetPosition,
    SpecificDate,
    Weekday,
    WeekdayPattern,
)

__all__ = [
    # Rule models
    "Frequency",
    "Weekday",
    "SetPosition",
    "SpecificDate",
    "WeekdayPattern",
    "RuleConfiguration",
    "RuleViolation",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    # Billing models
    "BillingItem",
    "Renewal",
    "SpendSummary",
    # Config models
    "AppConfig",
    "CalendarConfig",
    "LoggingConfig",
    "OutputConfig",
]
