"""Recurrence rule engine for the Subosity subscription tracker."""

__version__ = "0.3.0"

from subosity_rrule.core import (  # noqa: E402
    INVALID_RULE_TEXT,
    RuleDecodeError,
    count_occurrences_in_range,
    describe_configuration,
    describe_rule,
    generate_rule,
    is_valid,
    next_occurrence,
    occurrences_in_range,
    parse_rule,
    validate_configuration,
)
from subosity_rrule.models.rule import (  # noqa: E402
    Frequency,
    RuleConfiguration,
    RuleViolation,
    SetPosition,
    SpecificDate,
    Weekday,
    WeekdayPattern,
)

__all__ = [
    "__version__",
    "Frequency",
    "Weekday",
    "SetPosition",
    "SpecificDate",
    "WeekdayPattern",
    "RuleConfiguration",
    "RuleViolation",
    "RuleDecodeError",
    "INVALID_RULE_TEXT",
    "parse_rule",
    "generate_rule",
    "describe_rule",
    "describe_configuration",
    "next_occurrence",
    "occurrences_in_range",
    "count_occurrences_in_range",
    "validate_configuration",
    "is_valid",
]
