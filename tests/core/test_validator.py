"""Unit tests for configuration validation."""

from __future__ import annotations

import pytest

from subosity_rrule.core.validator import is_valid, validate_configuration
from subosity_rrule.models.rule import (
    Frequency,
    RuleConfiguration,
    SpecificDate,
    Weekday,
    WeekdayPattern,
)


def _fields(config: RuleConfiguration) -> list[str]:
    return [violation.field for violation in validate_configuration(config)]


class TestValidConfigurations:
    @pytest.mark.parametrize(
        "config",
        [
            RuleConfiguration.default(),
            RuleConfiguration.from_fields("MONTHLY", by_set_position=-1, by_weekday=["FR"]),
            RuleConfiguration.from_fields("MONTHLY", by_month_day=[1, 15, -1]),
            RuleConfiguration.from_fields("YEARLY", by_month=[2], by_month_day=[29]),
            RuleConfiguration.from_fields(
                "YEARLY", by_month=[9], by_set_position=1, by_weekday=["MO"]
            ),
            RuleConfiguration.from_fields("WEEKLY", interval=2, by_weekday=["MO", "TH"]),
            RuleConfiguration(frequency=Frequency.DAILY),
        ],
    )
    def test_no_violations(self, config):
        assert validate_configuration(config) == []
        assert is_valid(config)


class TestViolations:
    def test_interval_below_one(self):
        config = RuleConfiguration.default().model_copy(update={"interval": 0})
        assert _fields(config) == ["interval"]

    def test_monthly_needs_a_mode(self):
        config = RuleConfiguration(frequency=Frequency.MONTHLY)
        violations = validate_configuration(config)
        assert [v.field for v in violations] == ["mode"]
        assert violations[0].message == "Choose either a specific date or a pattern"

    def test_yearly_needs_exactly_one_month(self):
        config = RuleConfiguration.from_fields("YEARLY", by_month_day=[15])
        assert "by_month" in _fields(config)

        config = RuleConfiguration.from_fields("YEARLY", by_month=[3, 4], by_month_day=[15])
        assert "by_month" in _fields(config)

    def test_yearly_month_out_of_range(self):
        config = RuleConfiguration.from_fields("YEARLY", by_month=[13], by_month_day=[1])
        assert _fields(config) == ["by_month"]

    @pytest.mark.parametrize("day", [0, 32, -32])
    def test_month_day_out_of_range(self, day):
        config = RuleConfiguration(frequency=Frequency.MONTHLY, mode=SpecificDate(month_days=[day]))
        assert _fields(config) == ["by_month_day"]

    def test_empty_month_days(self):
        config = RuleConfiguration(frequency=Frequency.MONTHLY, mode=SpecificDate(month_days=[]))
        assert _fields(config) == ["by_month_day"]

    @pytest.mark.parametrize("month, day", [(2, 30), (4, 31), (6, 31), (11, 31)])
    def test_day_must_exist_in_yearly_month(self, month, day):
        config = RuleConfiguration.from_fields("YEARLY", by_month=[month], by_month_day=[day])
        assert _fields(config) == ["by_month_day"]

    def test_pattern_needs_exactly_one_weekday(self):
        config = RuleConfiguration(
            frequency=Frequency.MONTHLY,
            mode=WeekdayPattern(position=1, weekdays=[Weekday.MO, Weekday.TU]),
        )
        assert _fields(config) == ["by_weekday"]

        config = RuleConfiguration(
            frequency=Frequency.MONTHLY, mode=WeekdayPattern(position=1, weekdays=[])
        )
        assert _fields(config) == ["by_weekday"]

    @pytest.mark.parametrize("position", [0, 5, -2])
    def test_pattern_position_must_be_allowed(self, position):
        config = RuleConfiguration.from_fields(
            "MONTHLY", by_set_position=position, by_weekday=["MO"]
        )
        assert _fields(config) == ["by_set_position"]

    def test_weekly_weekdays_must_be_unique(self):
        config = RuleConfiguration(
            frequency=Frequency.WEEKLY, weekdays=[Weekday.MO, Weekday.MO]
        )
        assert _fields(config) == ["by_weekday"]

    def test_weekly_flags_unused_parts(self):
        config = RuleConfiguration(
            frequency=Frequency.WEEKLY,
            weekdays=[Weekday.MO],
            months=[3],
            mode=SpecificDate(month_days=[1]),
        )
        assert _fields(config) == ["by_month", "mode"]

    def test_reports_every_violation(self):
        config = RuleConfiguration(
            frequency=Frequency.YEARLY,
            interval=0,
            mode=WeekdayPattern(position=7, weekdays=[]),
        )
        assert _fields(config) == ["interval", "by_month", "by_weekday", "by_set_position"]
        assert not is_valid(config)
