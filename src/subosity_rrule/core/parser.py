"""Rule-string to editable configuration."""

from __future__ import annotations

import logging

from subosity_rrule.core.codec import RuleDecodeError, RuleParts, decode
from subosity_rrule.models.rule import RuleConfiguration, SpecificDate, WeekdayPattern

logger = logging.getLogger(__name__)


def parse_rule(rule: str | None) -> RuleConfiguration:
    """Parse a rule-string into a ``RuleConfiguration``.

    Never raises: empty or undecodable input yields
    ``RuleConfiguration.default()`` (monthly on the 1st).
    """
    if not rule or not rule.strip():
        return RuleConfiguration.default()
    try:
        parts = decode(rule)
    except RuleDecodeError as e:
        logger.warning("Falling back to default rule for %r: %s", rule, e)
        return RuleConfiguration.default()
    return configuration_from_parts(parts)


def configuration_from_parts(parts: RuleParts) -> RuleConfiguration:
    """Infer the editing mode from decoded parts.

    A set-position together with weekdays is a weekday pattern and wins over
    any BYMONTHDAY in the same rule. A lone ordinal weekday token (``1MO``,
    ``-1FR``) is a pattern too.
    """
    config = RuleConfiguration(
        frequency=parts.frequency,
        interval=parts.interval,
        months=list(parts.months),
    )
    weekdays = parts.weekdays

    if parts.set_positions and weekdays:
        config.mode = WeekdayPattern(position=parts.set_positions[0], weekdays=weekdays)
        return config

    ordinal = parts.ordinal
    if ordinal is not None:
        config.mode = WeekdayPattern(position=ordinal, weekdays=weekdays)
        return config

    if parts.month_days:
        config.mode = SpecificDate(month_days=list(parts.month_days))
    elif weekdays:
        config.weekdays = weekdays
    return config
