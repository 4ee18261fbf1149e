"""Unit tests for the 'validate' command."""

import json

from typer.testing import CliRunner

from subosity_rrule.commands.validate_command import app

runner = CliRunner()


class TestValidateCommand:
    def test_valid_rule(self):
        result = runner.invoke(app, ["FREQ=YEARLY;BYMONTH=3;BYMONTHDAY=15"])
        assert result.exit_code == 0
        assert "Valid rule" in result.output

    def test_violations_exit_with_invalid_args(self):
        result = runner.invoke(app, ["FREQ=YEARLY;BYMONTHDAY=15"])
        assert result.exit_code == 2
        assert "by_month" in result.output

    def test_missing_mode(self):
        result = runner.invoke(app, ["FREQ=MONTHLY"])
        assert result.exit_code == 2
        assert "mode" in result.output

    def test_json_report(self):
        result = runner.invoke(app, ["FREQ=YEARLY;BYMONTH=4;BYMONTHDAY=31", "-o", "json"])
        assert result.exit_code == 2
        data = json.loads(result.output)
        assert data["valid"] is False
        assert data["violations"][0]["field"] == "by_month_day"

    def test_json_report_valid(self):
        result = runner.invoke(app, ["FREQ=WEEKLY;BYDAY=MO", "-o", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "rule": "FREQ=WEEKLY;BYDAY=MO",
            "valid": True,
            "violations": [],
        }

    def test_undecodable_rule(self):
        result = runner.invoke(app, ["FREQ=MONTHLY;WKST=MO"])
        assert result.exit_code == 2
        assert "Invalid recurrence rule" in result.output
