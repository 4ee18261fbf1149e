"""Configuration to canonical rule-string."""

from __future__ import annotations

from subosity_rrule.models.rule import (
    Frequency,
    RuleConfiguration,
    SpecificDate,
    WeekdayPattern,
)


def generate_rule(config: RuleConfiguration) -> str:
    """Serialize ``config`` as ``FREQ=..;INTERVAL=..[;BYMONTH..][;BYDAY..][;BYMONTHDAY..][;BYSETPOS..]``.

    The configuration is not re-validated; run
    ``subosity_rrule.core.validator.validate_configuration`` first. WEEKLY
    rules never carry month, month-day or set-position parts.
    """
    weekly = config.frequency is Frequency.WEEKLY
    parts = [f"FREQ={config.frequency.value}", f"INTERVAL={config.interval}"]

    if not weekly and config.months:
        parts.append(f"BYMONTH={_join(config.months)}")

    weekdays = config.by_weekday
    if weekdays:
        parts.append("BYDAY=" + ",".join(day.value for day in weekdays))

    if not weekly and isinstance(config.mode, SpecificDate) and config.mode.month_days:
        parts.append(f"BYMONTHDAY={_join(config.mode.month_days)}")

    if not weekly and isinstance(config.mode, WeekdayPattern):
        parts.append(f"BYSETPOS={config.mode.position}")

    return ";".join(parts)


def _join(values: list[int]) -> str:
    return ",".join(str(value) for value in values)
