"""Occurrence enumeration over bounded date windows.

Uses a hybrid approach:
- ``dateutil.rrule`` for interval phase arithmetic, weekday selection and
  nth-weekday resolution ("first Monday", "last Friday").
- ``calendar.monthrange`` clamping for specific-date rules, so a renewal on
  the 31st lands on Apr 30 and a Feb 29 renewal lands on Feb 28 in common
  years instead of being skipped.

Every series is pinned to an anchor date (the subscription start). Before
evaluation the series start is moved forward by whole interval periods to the
window, which keeps the phase of "every N weeks" rules while making the cost
proportional to the window rather than to the age of the subscription.

Dates are plain calendar dates; ``datetime`` inputs are truncated to their
date.
"""

from __future__ import annotations

import logging
from calendar import monthrange
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta
from dateutil.rrule import DAILY, MO, MONTHLY, WEEKLY, YEARLY, rrule

from subosity_rrule.core.codec import RuleDecodeError, decode
from subosity_rrule.core.parser import configuration_from_parts
from subosity_rrule.models.rule import Frequency, RuleConfiguration, SpecificDate

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_HORIZON_YEARS = 10

_RRULE_FREQUENCIES = {
    Frequency.DAILY: DAILY,
    Frequency.WEEKLY: WEEKLY,
    Frequency.MONTHLY: MONTHLY,
    Frequency.YEARLY: YEARLY,
}

_PERIODS = {
    Frequency.DAILY: relativedelta(days=1),
    Frequency.WEEKLY: relativedelta(weeks=1),
    Frequency.MONTHLY: relativedelta(months=1),
    Frequency.YEARLY: relativedelta(years=1),
}


def next_occurrence(
    rule: str | None,
    from_date: date,
    anchor: date | None = None,
    horizon_years: int = DEFAULT_SEARCH_HORIZON_YEARS,
) -> date | None:
    """Return the earliest occurrence on or after ``from_date``.

    Args:
        rule: Rule-string.
        from_date: Inclusive lower bound.
        anchor: Series start; defaults to ``from_date``.
        horizon_years: Give up after searching this far ahead.

    Returns:
        The occurrence date, or None for empty/invalid rules or when nothing
        occurs within the horizon.
    """
    config = _load(rule)
    if config is None:
        return None
    return configuration_next_occurrence(config, from_date, anchor, horizon_years)


def occurrences_in_range(
    rule: str | None,
    start: date,
    end: date,
    anchor: date | None = None,
) -> list[date]:
    """Return all occurrences between ``start`` and ``end`` inclusive.

    The series phase is pinned to ``anchor`` (defaults to ``start``) and
    nothing before the anchor is returned. Empty or invalid rules yield an
    empty list.
    """
    config = _load(rule)
    if config is None:
        return []
    return configuration_occurrences(config, start, end, anchor)


def count_occurrences_in_range(
    rule: str | None,
    start: date,
    end: date,
    anchor: date | None = None,
) -> int:
    """Number of occurrences in the window, used for cost projection."""
    return len(occurrences_in_range(rule, start, end, anchor))


def configuration_occurrences(
    config: RuleConfiguration,
    start: date,
    end: date,
    anchor: date | None = None,
) -> list[date]:
    """Same as ``occurrences_in_range`` for an already parsed configuration.

    Raises:
        ValueError: If ``config.interval`` is below 1.
    """
    start_day = _as_date(start)
    anchor_day = _as_date(anchor) if anchor is not None else start_day
    return _expand(config, anchor_day, start_day, _as_date(end))


def configuration_next_occurrence(
    config: RuleConfiguration,
    from_date: date,
    anchor: date | None = None,
    horizon_years: int = DEFAULT_SEARCH_HORIZON_YEARS,
) -> date | None:
    """Same as ``next_occurrence`` for an already parsed configuration."""
    start = _as_date(from_date)
    anchor_day = _as_date(anchor) if anchor is not None else start
    window_start = max(start, anchor_day)

    # search in windows of at least a year (or two interval periods)
    step = _PERIODS[config.frequency] * (max(config.interval, 1) * 2)
    limit = max(window_start + step, window_start + relativedelta(years=horizon_years))
    while window_start <= limit:
        window_end = max(window_start + step, window_start + relativedelta(years=1))
        window_end = min(window_end, limit)
        found = _expand(config, anchor_day, window_start, window_end)
        if found:
            return found[0]
        window_start = window_end + timedelta(days=1)
    return None


def _load(rule: str | None) -> RuleConfiguration | None:
    if not rule or not rule.strip():
        return None
    try:
        return configuration_from_parts(decode(rule))
    except RuleDecodeError as e:
        logger.warning("Ignoring undecodable rule %r: %s", rule, e)
        return None


def _expand(
    config: RuleConfiguration, anchor: date, start: date, end: date
) -> list[date]:
    if config.interval < 1:
        raise ValueError(f"Interval must be at least 1, got {config.interval}")
    if end < start or anchor > end:
        return []
    logger.debug(
        "Expanding %s rule over %s..%s (anchor %s)", config.frequency.value, start, end, anchor
    )

    if _clamps_month_days(config):
        found = _clamped_occurrences(config, anchor, start, end)
    else:
        series = _build_rrule(config, anchor, _reanchor(config, anchor, start))
        found = [
            moment.date()
            for moment in series.between(_midnight(start), _midnight(end), inc=True)
        ]
    return [day for day in found if day >= anchor]


def _reanchor(config: RuleConfiguration, anchor: date, start: date) -> date:
    """Move the series start forward by whole interval periods up to ``start``."""
    if start <= anchor:
        return anchor
    interval = config.interval

    if config.frequency is Frequency.DAILY:
        periods = (start - anchor).days // interval
        return anchor + timedelta(days=periods * interval)

    if config.frequency is Frequency.WEEKLY:
        week_zero = anchor - timedelta(days=anchor.weekday())
        periods = ((start - week_zero).days // 7) // interval
        if periods == 0:
            return anchor
        return week_zero + timedelta(weeks=periods * interval)

    if config.frequency is Frequency.MONTHLY:
        months = (start.year - anchor.year) * 12 + start.month - anchor.month
        periods = months // interval
        if periods == 0:
            return anchor
        return anchor.replace(day=1) + relativedelta(months=periods * interval)

    periods = (start.year - anchor.year) // interval
    if periods == 0:
        return anchor
    return date(anchor.year + periods * interval, 1, 1)


def _build_rrule(config: RuleConfiguration, anchor: date, series_start: date) -> rrule:
    # Defaults that dateutil would take from dtstart are taken from the
    # anchor instead, since dtstart may have been moved.
    weekdays = [day.index for day in config.by_weekday]
    if config.frequency is Frequency.WEEKLY and not weekdays:
        weekdays = [anchor.weekday()]

    months = config.by_month or None
    if config.frequency is Frequency.YEARLY and config.is_pattern and not months:
        months = [anchor.month]

    set_position = None
    if config.frequency is not Frequency.WEEKLY:
        set_position = config.by_set_position

    return rrule(
        _RRULE_FREQUENCIES[config.frequency],
        dtstart=_midnight(series_start),
        interval=config.interval,
        wkst=MO,
        byweekday=weekdays or None,
        bymonth=months,
        bymonthday=config.by_month_day or None,
        bysetpos=set_position,
    )


def _clamps_month_days(config: RuleConfiguration) -> bool:
    if config.frequency not in (Frequency.MONTHLY, Frequency.YEARLY):
        return False
    if isinstance(config.mode, SpecificDate):
        return True
    return config.mode is None and not config.weekdays


def _clamped_occurrences(
    config: RuleConfiguration, anchor: date, start: date, end: date
) -> list[date]:
    days = config.by_month_day or [anchor.day]
    series_start = _reanchor(config, anchor, start)

    if config.frequency is Frequency.YEARLY:
        periods = rrule(
            YEARLY,
            dtstart=datetime(series_start.year, 1, 1),
            interval=config.interval,
            bymonth=config.by_month or [anchor.month],
            bymonthday=1,
        )
    else:
        periods = rrule(
            MONTHLY,
            dtstart=datetime(series_start.year, series_start.month, 1),
            interval=config.interval,
            bymonth=config.by_month or None,
            bymonthday=1,
        )

    found: set[date] = set()
    first_month = datetime(start.year, start.month, 1)
    for month_start in periods.between(first_month, _midnight(end), inc=True):
        last_day = monthrange(month_start.year, month_start.month)[1]
        for day in days:
            candidate = month_start.date().replace(day=_clamp(day, last_day))
            if start <= candidate <= end:
                found.add(candidate)
    return sorted(found)


def _clamp(day: int, last_day: int) -> int:
    if day > 0:
        return min(day, last_day)
    return max(1, last_day + day + 1)


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _midnight(day: date) -> datetime:
    return datetime(day.year, day.month, day.day)
