"""Unit tests for the 'describe' command."""

import json

from typer.testing import CliRunner

from subosity_rrule.commands.describe_command import app

runner = CliRunner()


class TestDescribeCommand:
    """Tests for the 'describe' command."""

    def test_pattern_rule(self):
        result = runner.invoke(app, ["FREQ=MONTHLY;BYSETPOS=-1;BYDAY=FR"])
        assert result.exit_code == 0
        assert "Every month on the last Friday" in result.output

    def test_compact_and_detailed(self):
        result = runner.invoke(app, ["FREQ=MONTHLY;BYMONTHDAY=1"])
        assert "Every month on day 1" in result.output

        result = runner.invoke(app, ["FREQ=MONTHLY;BYMONTHDAY=1", "--detailed"])
        assert "Every month on the 1st" in result.output

    def test_detailed_from_config(self, config_service):
        config_service.set("output.detailed", True)
        result = runner.invoke(app, ["FREQ=MONTHLY;BYMONTHDAY=1"])
        assert "on the 1st" in result.output

    def test_json_output(self):
        result = runner.invoke(app, ["FREQ=YEARLY;BYMONTH=3;BYMONTHDAY=15", "-o", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "rule": "FREQ=YEARLY;BYMONTH=3;BYMONTHDAY=15",
            "description": "Every year on March 15th",
        }

    def test_invalid_rule_exits_with_invalid_args(self):
        result = runner.invoke(app, ["FREQ=MONTHLY;COUNT=3"])
        assert result.exit_code == 2
        assert "Invalid recurrence rule" in result.output

    def test_unknown_output_format(self):
        result = runner.invoke(app, ["FREQ=DAILY", "-o", "xml"])
        assert result.exit_code == 2
        assert "Unknown output format" in result.output
