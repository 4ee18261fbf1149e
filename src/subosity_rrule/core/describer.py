"""Human readable descriptions of recurrence rules.

Two flavours are produced:

- compact: ``Every month on day 1``
- detailed: ``Every month on the 1st``

Yearly rules always spell out the month (``Every year on March 15th``,
``Every year on the first Monday of September``). Weekly weekday lists are
rendered Monday first regardless of the order they were stored in.
"""

from __future__ import annotations

import logging

from subosity_rrule.core.codec import RuleDecodeError, decode
from subosity_rrule.core.generator import generate_rule
from subosity_rrule.core.parser import configuration_from_parts
from subosity_rrule.models.rule import (
    MONTH_NAMES,
    Frequency,
    RuleConfiguration,
    SetPosition,
    SpecificDate,
    Weekday,
    WeekdayPattern,
)

logger = logging.getLogger(__name__)

INVALID_RULE_TEXT = "Invalid recurrence rule"

_POSITIONS = frozenset(position.value for position in SetPosition)


def describe_rule(rule: str | None, detailed: bool = False) -> str:
    """Describe a rule-string.

    Returns an empty string for an empty rule and ``INVALID_RULE_TEXT`` when
    the rule cannot be decoded.
    """
    if not rule or not rule.strip():
        return ""
    try:
        parts = decode(rule)
    except RuleDecodeError as e:
        logger.warning("Cannot describe rule %r: %s", rule, e)
        return INVALID_RULE_TEXT
    return _render(configuration_from_parts(parts), detailed)


def describe_configuration(config: RuleConfiguration, detailed: bool = False) -> str:
    """Describe a configuration that is still being edited."""
    return describe_rule(generate_rule(config), detailed=detailed)


def ordinal(number: int) -> str:
    """Convert number to ordinal string (1 -> 1st, 12 -> 12th, 23 -> 23rd)."""
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def position_label(position: int) -> str:
    """first/second/third/fourth/last, falling back to ordinals."""
    if position in _POSITIONS:
        return SetPosition(position).label
    if position < 0:
        return f"{ordinal(-position)} to last"
    return ordinal(position)


def month_name(month: int) -> str:
    if 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return str(month)


def _render(config: RuleConfiguration, detailed: bool) -> str:
    parts = [_every(config.frequency, config.interval)]
    mode = config.mode

    if config.frequency is Frequency.WEEKLY:
        days = _canonical_weekdays(config.by_weekday)
        if days:
            parts.append("on " + ", ".join(day.full_name for day in days))
    elif config.frequency is Frequency.DAILY:
        pass
    elif isinstance(mode, WeekdayPattern) and mode.weekday is not None:
        phrase = f"on the {position_label(mode.position)} {mode.weekday.full_name}"
        if config.frequency is Frequency.YEARLY and config.months:
            phrase += f" of {month_name(config.months[0])}"
        parts.append(phrase)
    elif isinstance(mode, SpecificDate) and mode.month_days:
        if config.frequency is Frequency.YEARLY and config.months:
            parts.append(_yearly_date_phrase(config.months[0], mode.month_days))
        else:
            parts.append(_monthly_date_phrase(mode.month_days, detailed))
    elif config.weekdays:
        days = _canonical_weekdays(config.weekdays)
        parts.append("on " + ", ".join(day.full_name for day in days))

    return " ".join(parts)


def _every(frequency: Frequency, interval: int) -> str:
    if interval > 1:
        return f"Every {interval} {frequency.unit}s"
    return f"Every {frequency.unit}"


def _canonical_weekdays(weekdays: list[Weekday]) -> list[Weekday]:
    return sorted(set(weekdays), key=lambda day: day.index)


def _day_label(day: int) -> str:
    if day == -1:
        return "last day"
    if day < 0:
        return f"{ordinal(-day)} to last day"
    return ordinal(day)


def _monthly_date_phrase(days: list[int], detailed: bool) -> str:
    if not detailed and all(day > 0 for day in days):
        return "on day " + ", ".join(str(day) for day in days)
    return "on the " + ", ".join(_day_label(day) for day in days)


def _yearly_date_phrase(month: int, days: list[int]) -> str:
    name = month_name(month)
    if all(day > 0 for day in days):
        return f"on {name} " + ", ".join(ordinal(day) for day in days)
    return "on the " + ", ".join(_day_label(day) for day in days) + f" of {name}"
