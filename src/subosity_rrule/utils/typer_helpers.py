"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from subosity_rrule.utils.exit_codes import ERROR_INVALID_ARGS
from subosity_rrule.utils.logger import get_logger
from subosity_rrule.utils.ui.console import get_console


def suggest_commands(attempted: str, commands: list[str]) -> list[str]:
    """Up to three command names close to ``attempted``.

    Command groups are matched by name too, so ``projet`` suggests
    ``project``.
    """
    return get_close_matches(attempted, sorted(commands), n=3, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Typer group that answers a mistyped command with close matches.

    ``subosity-rrule ocurrences`` prints "Did you mean this? occurrences"
    and exits with the invalid-arguments code. Unrelated names keep click's
    usage error.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            attempted = args[0]
            suggestions = suggest_commands(attempted, list(self.commands))
            if not suggestions:
                raise

            get_logger().info("unknown command %r, suggested %s", attempted, suggestions)
            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            console.print()
            console.print(f"Run '{ctx.command_path} --help' for the list of commands.")
            raise typer.Exit(ERROR_INVALID_ARGS) from e
