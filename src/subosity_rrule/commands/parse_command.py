"""Command 'parse' of subosity-rrule"""

import typer

from subosity_rrule.core.parser import configuration_from_parts
from subosity_rrule.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .options import configuration_view, require_rule, resolve_detailed, resolve_output

app = typer.Typer()


@app.command("parse")
@command_wrapper
def parse(
    rule: str = typer.Argument(..., help="Recurrence rule to parse"),
    detailed: bool = typer.Option(False, "--detailed", "-d", help="Detailed description"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show the editable configuration behind a recurrence rule."""
    output = resolve_output(output)
    config = configuration_from_parts(require_rule(rule))
    format_output(configuration_view(config, resolve_detailed(detailed)), output)
