"""Unit tests for parse_rule()."""

from __future__ import annotations

import logging

import pytest

from subosity_rrule.core.parser import parse_rule
from subosity_rrule.models.rule import (
    Frequency,
    RuleConfiguration,
    SpecificDate,
    Weekday,
    WeekdayPattern,
)


class TestFallbacks:
    """Empty and undecodable rules fall back to monthly on the 1st."""

    @pytest.mark.parametrize("rule", [None, "", "   "])
    def test_empty_rule_gives_default(self, rule):
        config = parse_rule(rule)
        assert config == RuleConfiguration.default()
        assert config.frequency is Frequency.MONTHLY
        assert config.interval == 1
        assert config.by_month_day == [1]

    def test_invalid_rule_gives_default(self):
        assert parse_rule("not a rule") == RuleConfiguration.default()

    def test_invalid_rule_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="subosity_rrule"):
            parse_rule("FREQ=MONTHLY;COUNT=2")
        assert "Falling back to default rule" in caplog.text


class TestModeInference:
    """Tests for specific-date vs. pattern mode inference."""

    def test_set_position_with_weekday_is_pattern(self):
        config = parse_rule("FREQ=MONTHLY;INTERVAL=1;BYSETPOS=1;BYDAY=MO")
        assert isinstance(config.mode, WeekdayPattern)
        assert config.by_set_position == 1
        assert config.by_weekday == [Weekday.MO]
        assert config.by_month_day == []

    def test_ordinal_weekday_is_pattern(self):
        config = parse_rule("FREQ=MONTHLY;BYDAY=-1FR")
        assert config.is_pattern
        assert config.by_set_position == -1
        assert config.by_weekday == [Weekday.FR]

    @pytest.mark.parametrize("rule", ["FREQ=MONTHLY;BYDAY=1MO,3MO", "FREQ=MONTHLY;BYDAY=1MO,-1FR"])
    def test_several_ordinal_weekdays_fall_back_to_default(self, rule):
        assert parse_rule(rule) == RuleConfiguration.default()

    def test_pattern_wins_over_month_day(self):
        config = parse_rule("FREQ=MONTHLY;BYMONTHDAY=15;BYSETPOS=2;BYDAY=TU")
        assert config.is_pattern
        assert config.by_month_day == []

    def test_month_day_is_specific_date(self):
        config = parse_rule("FREQ=YEARLY;BYMONTH=3;BYMONTHDAY=15")
        assert isinstance(config.mode, SpecificDate)
        assert config.by_month_day == [15]
        assert config.by_month == [3]

    def test_weekly_weekdays_stay_plain(self):
        config = parse_rule("FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE")
        assert config.mode is None
        assert config.weekdays == [Weekday.MO, Weekday.WE]
        assert config.interval == 2

    def test_frequency_only(self):
        config = parse_rule("FREQ=MONTHLY")
        assert config.mode is None
        assert config.weekdays == []
