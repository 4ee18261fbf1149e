"""Decoding of RRULE strings into typed parts.

This is the single place where rule-strings are interpreted. The parser, the
describer and the occurrence enumerator all go through ``decode`` and decide
for themselves how to recover from a ``RuleDecodeError``.

Supported grammar (RFC 5545 subset)::

    [RRULE:]FREQ=<DAILY|WEEKLY|MONTHLY|YEARLY>
        [;INTERVAL=<n>]
        [;BYMONTH=<1-12,...>]
        [;BYDAY=<MO|TU|WE|TH|FR|SA|SU,...> or a single <+-n><weekday>]
        [;BYMONTHDAY=<1-31 or -1..-31,...>]
        [;BYSETPOS=<n,...>]
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from subosity_rrule.models.rule import Frequency, Weekday

RRULE_PREFIX = "RRULE:"

SUPPORTED_KEYS = frozenset(
    {"FREQ", "INTERVAL", "BYMONTH", "BYDAY", "BYMONTHDAY", "BYSETPOS"}
)

_BYDAY_PATTERN = re.compile(r"^([+-]?\d{1,2})?(MO|TU|WE|TH|FR|SA|SU)$")


class RuleDecodeError(ValueError):
    """Raised when a rule-string cannot be decoded."""


@dataclass(frozen=True)
class RuleParts:
    """Typed components of a decoded rule-string.

    ``days`` keeps BYDAY entries as ``(ordinal, weekday)`` pairs; the ordinal
    is ``None`` for plain tokens such as ``MO``.
    """

    frequency: Frequency = Frequency.MONTHLY
    interval: int = 1
    months: tuple[int, ...] = ()
    days: tuple[tuple[int | None, Weekday], ...] = ()
    month_days: tuple[int, ...] = ()
    set_positions: tuple[int, ...] = ()

    @property
    def weekdays(self) -> list[Weekday]:
        return [weekday for _, weekday in self.days]

    @property
    def ordinal(self) -> int | None:
        """Ordinal of a single ``1MO``-style token, None for plain weekdays."""
        for ordinal, _ in self.days:
            if ordinal is not None:
                return ordinal
        return None


def decode(rule: str) -> RuleParts:
    """Decode a rule-string.

    Unknown FREQ values (and a missing FREQ) decode to MONTHLY.

    Raises:
        RuleDecodeError: If the string is empty, malformed, uses unsupported
            properties or carries out-of-range values.
    """
    text = rule.strip()
    if text.upper().startswith(RRULE_PREFIX):
        text = text[len(RRULE_PREFIX) :]
    if not text:
        raise RuleDecodeError("Empty recurrence rule")

    values: dict[str, str] = {}
    for part in text.split(";"):
        if not part.strip():
            continue
        key, sep, value = part.partition("=")
        key = key.strip().upper()
        value = value.strip().upper()
        if not sep or not key or not value:
            raise RuleDecodeError(f"Malformed rule part: {part!r}")
        if key not in SUPPORTED_KEYS:
            raise RuleDecodeError(f"Unsupported rule part: {key}")
        if key in values:
            raise RuleDecodeError(f"Duplicate rule part: {key}")
        values[key] = value

    try:
        frequency = Frequency(values.get("FREQ", Frequency.MONTHLY.value))
    except ValueError:
        frequency = Frequency.MONTHLY

    interval = 1
    if "INTERVAL" in values:
        interval = _parse_int("INTERVAL", values["INTERVAL"])
        if interval < 1:
            raise RuleDecodeError(f"INTERVAL must be at least 1, got {interval}")

    months = _parse_int_list("BYMONTH", values.get("BYMONTH"), _is_month)
    month_days = _parse_int_list("BYMONTHDAY", values.get("BYMONTHDAY"), _is_month_day)
    set_positions = _parse_int_list("BYSETPOS", values.get("BYSETPOS"), _is_set_position)
    days = _parse_days(values.get("BYDAY"))
    if set_positions and any(ordinal is not None for ordinal, _ in days):
        raise RuleDecodeError("BYSETPOS cannot be combined with ordinal weekdays")

    return RuleParts(
        frequency=frequency,
        interval=interval,
        months=months,
        days=days,
        month_days=month_days,
        set_positions=set_positions,
    )


def try_decode(rule: str | None) -> RuleParts | None:
    """Decode ``rule``, returning ``None`` for empty or undecodable input."""
    if not rule or not rule.strip():
        return None
    try:
        return decode(rule)
    except RuleDecodeError:
        return None


def _parse_int(key: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise RuleDecodeError(f"{key} expects integers, got {value!r}") from None


def _parse_int_list(key: str, raw: str | None, accept) -> tuple[int, ...]:
    if raw is None:
        return ()
    numbers = []
    for item in raw.split(","):
        number = _parse_int(key, item.strip())
        if not accept(number):
            raise RuleDecodeError(f"{key} value out of range: {number}")
        numbers.append(number)
    return tuple(numbers)


def _parse_days(raw: str | None) -> tuple[tuple[int | None, Weekday], ...]:
    if raw is None:
        return ()
    days = []
    for item in raw.split(","):
        match = _BYDAY_PATTERN.match(item.strip())
        if match is None:
            raise RuleDecodeError(f"Unknown weekday token: {item!r}")
        ordinal = int(match.group(1)) if match.group(1) else None
        if ordinal is not None and not 1 <= abs(ordinal) <= 53:
            raise RuleDecodeError(f"BYDAY ordinal out of range: {ordinal}")
        days.append((ordinal, Weekday(match.group(2))))
    # one pattern holds a single weekday and position
    if len(days) > 1 and any(ordinal is not None for ordinal, _ in days):
        raise RuleDecodeError(f"Ordinal weekdays must stand alone in BYDAY, got {raw!r}")
    return tuple(days)


def _is_month(value: int) -> bool:
    return 1 <= value <= 12


def _is_month_day(value: int) -> bool:
    return 1 <= abs(value) <= 31


def _is_set_position(value: int) -> bool:
    return 1 <= abs(value) <= 366
