"""Validation of recurrence configurations before they are saved."""

from __future__ import annotations

from subosity_rrule.models.rule import (
    MONTH_NAMES,
    Frequency,
    RuleConfiguration,
    RuleViolation,
    SetPosition,
    SpecificDate,
    WeekdayPattern,
)

# Nominal month lengths; February allows the 29th, which is clamped to the
# 28th in common years when occurrences are enumerated.
MONTH_LENGTHS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

ALLOWED_POSITIONS = frozenset(position.value for position in SetPosition)


def validate_configuration(config: RuleConfiguration) -> list[RuleViolation]:
    """Return every violated invariant of ``config``; empty means valid."""
    violations: list[RuleViolation] = []

    def add(field: str, message: str) -> None:
        violations.append(RuleViolation(field=field, message=message))

    if config.interval < 1:
        add("interval", "Interval must be at least 1")

    if config.frequency is Frequency.WEEKLY:
        if len(set(config.weekdays)) != len(config.weekdays):
            add("by_weekday", "Each weekday can only be selected once")
        if config.months:
            add("by_month", "Weekly rules do not use months")
        if config.mode is not None:
            add("mode", "Weekly rules repeat on weekdays, not on a date or pattern")
        return violations

    if config.frequency is Frequency.DAILY:
        return violations

    month = None
    if config.frequency is Frequency.YEARLY:
        if len(config.months) != 1:
            add("by_month", "Select exactly one month")
        elif not 1 <= config.months[0] <= 12:
            add("by_month", "Month must be between 1 and 12")
        else:
            month = config.months[0]

    mode = config.mode
    if mode is None:
        add("mode", "Choose either a specific date or a pattern")
    elif isinstance(mode, SpecificDate):
        _check_month_days(mode, month, add)
    elif isinstance(mode, WeekdayPattern):
        if len(mode.weekdays) != 1:
            add("by_weekday", "Select exactly one weekday")
        if mode.position not in ALLOWED_POSITIONS:
            add("by_set_position", "Position must be first, second, third, fourth or last")

    return violations


def is_valid(config: RuleConfiguration) -> bool:
    return not validate_configuration(config)


def _check_month_days(mode: SpecificDate, month: int | None, add) -> None:
    if not mode.month_days:
        add("by_month_day", "Select a day of the month")
        return
    for day in mode.month_days:
        if not 1 <= abs(day) <= 31:
            add("by_month_day", f"Day of month must be between 1 and 31, got {day}")
        elif month is not None and abs(day) > MONTH_LENGTHS[month - 1]:
            name = MONTH_NAMES[month - 1]
            add(
                "by_month_day",
                f"{name} has only {MONTH_LENGTHS[month - 1]} days, got {day}",
            )
