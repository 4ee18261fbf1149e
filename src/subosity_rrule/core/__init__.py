"""Recurrence rule engine: codec, parser, generator, describer, enumerator, validator."""

from .codec import RuleDecodeError, RuleParts, decode, try_decode
from .describer import (
    INVALID_RULE_TEXT,
    describe_configuration,
    describe_rule,
    ordinal,
)
from .generator import generate_rule
from .occurrences import (
    configuration_next_occurrence,
    configuration_occurrences,
    count_occurrences_in_range,
    next_occurrence,
    occurrences_in_range,
)
from .parser import configuration_from_parts, parse_rule
from .validator import is_valid, validate_configuration

__all__ = [
    "RuleDecodeError",
    "RuleParts",
    "decode",
    "try_decode",
    "parse_rule",
    "configuration_from_parts",
    "generate_rule",
    "describe_rule",
    "describe_configuration",
    "ordinal",
    "INVALID_RULE_TEXT",
    "next_occurrence",
    "occurrences_in_range",
    "count_occurrences_in_range",
    "configuration_occurrences",
    "configuration_next_occurrence",
    "validate_configuration",
    "is_valid",
]
