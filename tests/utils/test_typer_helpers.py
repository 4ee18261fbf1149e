"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

import typer
from typer.testing import CliRunner

from subosity_rrule.utils.typer_helpers import SuggestingGroup, suggest_commands

runner = CliRunner()


def _make_app() -> typer.Typer:
    app = typer.Typer(cls=SuggestingGroup)

    @app.command("describe")
    def describe() -> None:
        typer.echo("described")

    @app.command("validate")
    def validate() -> None:
        typer.echo("validated")

    return app


class TestSuggestingGroup:
    """Tests for the SuggestingGroup Typer group."""

    def test_valid_command_passes_through(self):
        result = runner.invoke(_make_app(), ["describe"])
        assert result.exit_code == 0
        assert "described" in result.output

    def test_typo_suggests_close_match(self):
        result = runner.invoke(_make_app(), ["descirbe"])
        assert result.exit_code == 2
        assert "Did you mean this?" in result.output
        assert "describe" in result.output

    def test_unrelated_command_keeps_usage_error(self):
        result = runner.invoke(_make_app(), ["zzz"])
        assert result.exit_code == 2
        assert "Did you mean" not in result.output

    def test_typo_points_to_help(self):
        result = runner.invoke(_make_app(), ["valdiate"])
        assert "validate" in result.output
        assert "--help' for the list of commands" in result.output

    def test_typo_is_logged(self, isolated_dirs):
        runner.invoke(_make_app(), ["descirbe"])
        content = (isolated_dirs / "logs" / "subosity_rrule.log").read_text()
        assert "unknown command 'descirbe'" in content


class TestSuggestCommands:
    def test_close_matches(self):
        assert suggest_commands("ocurrences", ["describe", "occurrences", "next"]) == ["occurrences"]

    def test_group_names_match(self):
        assert suggest_commands("projet", ["project", "config"]) == ["project"]

    def test_no_match(self):
        assert suggest_commands("zzz", ["describe", "validate"]) == []
