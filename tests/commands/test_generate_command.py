"""Unit tests for the 'generate' command."""

import json

from typer.testing import CliRunner

from subosity_rrule.commands.generate_command import app

runner = CliRunner()


class TestGenerateCommand:
    def test_default_frequency_with_month_day(self):
        result = runner.invoke(app, ["--month-day", "15"])
        assert result.exit_code == 0
        assert "FREQ=MONTHLY;INTERVAL=1;BYMONTHDAY=15" in result.output

    def test_last_friday(self):
        result = runner.invoke(app, ["-f", "MONTHLY", "--position=-1", "--day", "FR"])
        assert result.exit_code == 0
        assert "FREQ=MONTHLY;INTERVAL=1;BYDAY=FR;BYSETPOS=-1" in result.output

    def test_weekly_lowercase_input(self):
        result = runner.invoke(app, ["-f", "weekly", "-i", "2", "--day", "mo", "--day", "fr"])
        assert result.exit_code == 0
        assert "FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,FR" in result.output

    def test_json_output_includes_description(self):
        result = runner.invoke(
            app, ["-f", "YEARLY", "--month", "3", "--month-day", "15", "-o", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["rule"] == "FREQ=YEARLY;INTERVAL=1;BYMONTH=3;BYMONTHDAY=15"
        assert data["description"] == "Every year on March 15th"

    def test_yearly_without_month_is_rejected(self):
        result = runner.invoke(app, ["-f", "YEARLY", "--month-day", "15"])
        assert result.exit_code == 2
        assert "by_month" in result.output

    def test_both_sub_modes_are_rejected(self):
        result = runner.invoke(app, ["--month-day", "1", "--position", "1", "--day", "MO"])
        assert result.exit_code == 2

    def test_unknown_frequency(self):
        result = runner.invoke(app, ["-f", "HOURLY"])
        assert result.exit_code == 2

    def test_monthly_without_mode_is_rejected(self):
        result = runner.invoke(app, ["-f", "MONTHLY"])
        assert result.exit_code == 2
        assert "mode" in result.output
