"""Recurrence rule configuration models.

A ``RuleConfiguration`` is the editable shape of a recurrence pattern. The
monthly/yearly sub-modes are a tagged union on ``mode``: a rule either repeats
on specific day(s) of the month or on the Nth weekday of the period, never
both.

Numeric ranges are deliberately not enforced here so that out-of-range
candidates coming from a form can still be represented and reported by
``subosity_rrule.core.validator``.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class Frequency(str, Enum):
    """Supported recurrence frequencies."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"

    @property
    def unit(self) -> str:
        """Singular calendar unit, e.g. ``month``."""
        return _FREQUENCY_UNITS[self]


_FREQUENCY_UNITS = {
    Frequency.DAILY: "day",
    Frequency.WEEKLY: "week",
    Frequency.MONTHLY: "month",
    Frequency.YEARLY: "year",
}


class Weekday(str, Enum):
    """Two-letter RFC 5545 weekday tokens, Monday first."""

    MO = "MO"
    TU = "TU"
    WE = "WE"
    TH = "TH"
    FR = "FR"
    SA = "SA"
    SU = "SU"

    @property
    def index(self) -> int:
        """Zero-based index, Monday = 0 (same as ``date.weekday()``)."""
        return list(Weekday).index(self)

    @property
    def full_name(self) -> str:
        return WEEKDAY_NAMES[self.index]

    @classmethod
    def from_index(cls, index: int) -> Weekday:
        if not 0 <= index <= 6:
            raise ValueError(f"Weekday index out of range: {index}")
        return list(cls)[index]


WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class SetPosition(IntEnum):
    """Allowed positions for weekday patterns."""

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    LAST = -1

    @property
    def label(self) -> str:
        return self.name.lower()


class SpecificDate(BaseModel):
    """Specific-date mode: repeat on fixed day(s) of the month.

    Negative days count back from the end of the month (-1 is the last day).
    """

    kind: Literal["date"] = "date"
    month_days: list[int] = Field(default_factory=lambda: [1])


class WeekdayPattern(BaseModel):
    """Pattern mode: repeat on the Nth weekday of the period."""

    kind: Literal["pattern"] = "pattern"
    position: int = 1
    weekdays: list[Weekday] = Field(default_factory=lambda: [Weekday.MO])

    @property
    def weekday(self) -> Weekday | None:
        return self.weekdays[0] if self.weekdays else None


RuleMode = Annotated[Union[SpecificDate, WeekdayPattern], Field(discriminator="kind")]


class RuleConfiguration(BaseModel):
    """Editable recurrence configuration.

    ``weekdays`` holds the plain weekday selection used by WEEKLY rules;
    weekday patterns keep their weekday inside ``mode``. ``months`` is used by
    YEARLY rules in both sub-modes.
    """

    frequency: Frequency = Frequency.MONTHLY
    interval: int = 1
    weekdays: list[Weekday] = Field(default_factory=list)
    months: list[int] = Field(default_factory=list)
    mode: Optional[RuleMode] = None

    @classmethod
    def default(cls) -> RuleConfiguration:
        """Monthly on the 1st, used when there is no usable prior rule."""
        return cls(
            frequency=Frequency.MONTHLY,
            interval=1,
            mode=SpecificDate(month_days=[1]),
        )

    @classmethod
    def from_fields(
        cls,
        frequency: Frequency | str,
        interval: int = 1,
        by_weekday: list[Weekday | str] | None = None,
        by_month_day: list[int] | None = None,
        by_month: list[int] | None = None,
        by_set_position: int | None = None,
    ) -> RuleConfiguration:
        """Build a configuration from the flat field view used by forms.

        Raises:
            ValueError: If both a specific date and a set-position are given.
        """
        frequency = Frequency(frequency.upper())
        weekdays = [Weekday(day.upper()) for day in by_weekday or []]
        config = cls(frequency=frequency, interval=interval, months=list(by_month or []))

        if by_set_position is not None and by_month_day:
            raise ValueError("Choose either a specific date or a pattern, not both")

        if frequency is Frequency.WEEKLY:
            config.weekdays = weekdays
        elif by_set_position is not None:
            config.mode = WeekdayPattern(position=by_set_position, weekdays=weekdays)
        elif by_month_day:
            config.mode = SpecificDate(month_days=list(by_month_day))
        else:
            config.weekdays = weekdays
        return config

    @property
    def is_pattern(self) -> bool:
        return isinstance(self.mode, WeekdayPattern)

    @property
    def is_specific_date(self) -> bool:
        return isinstance(self.mode, SpecificDate)

    @property
    def by_weekday(self) -> list[Weekday]:
        if isinstance(self.mode, WeekdayPattern):
            return list(self.mode.weekdays)
        return list(self.weekdays)

    @property
    def by_month_day(self) -> list[int]:
        if isinstance(self.mode, SpecificDate):
            return list(self.mode.month_days)
        return []

    @property
    def by_month(self) -> list[int]:
        return list(self.months)

    @property
    def by_set_position(self) -> int | None:
        if isinstance(self.mode, WeekdayPattern):
            return self.mode.position
        return None


class RuleViolation(BaseModel):
    """A single field-level validation failure."""

    field: str
    message: str
