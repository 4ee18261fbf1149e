"""Unit tests for the 'next' command."""

import json

from typer.testing import CliRunner

from subosity_rrule.commands.next_command import app

runner = CliRunner()


class TestNextCommand:
    def test_next_occurrences_are_clamped(self):
        result = runner.invoke(
            app, ["FREQ=MONTHLY;BYMONTHDAY=31", "--from", "2025-04-01", "-n", "3", "-o", "json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["next"] == ["2025-04-30", "2025-05-31", "2025-06-30"]

    def test_anchor_keeps_biweekly_phase(self):
        result = runner.invoke(
            app,
            [
                "FREQ=WEEKLY;INTERVAL=2;BYDAY=MO",
                "--from",
                "2025-01-07",
                "--anchor",
                "2025-01-06",
                "-n",
                "2",
                "-o",
                "json",
            ],
        )
        assert json.loads(result.output)["next"] == ["2025-01-20", "2025-02-03"]

    def test_pretty_output_shows_weekday(self):
        result = runner.invoke(app, ["FREQ=MONTHLY;BYSETPOS=-1;BYDAY=FR", "--from", "2025-03-29"])
        assert result.exit_code == 0
        assert "2025-04-25" in result.output
        assert "Friday" in result.output

    def test_nothing_within_horizon(self, config_service):
        config_service.set("calendar.search_horizon_years", 1)
        result = runner.invoke(
            app, ["FREQ=YEARLY;BYMONTH=2;BYSETPOS=5;BYDAY=MO", "--from", "2025-01-01"]
        )
        assert result.exit_code == 0
        assert "No occurrence" in result.output

    def test_invalid_rule(self):
        result = runner.invoke(app, ["FREQ=MONTHLY;COUNT=1"])
        assert result.exit_code == 2

    def test_bad_date(self):
        result = runner.invoke(app, ["FREQ=DAILY", "--from", "01/02/2025"])
        assert result.exit_code == 2
