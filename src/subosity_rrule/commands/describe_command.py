"""Command 'describe' of subosity-rrule"""

import typer

from subosity_rrule.core.describer import describe_rule
from subosity_rrule.utils.ui.console import get_console
from subosity_rrule.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .options import require_rule, resolve_detailed, resolve_output

app = typer.Typer()
console = get_console(highlight=False)


@app.command("describe")
@command_wrapper
def describe(
    rule: str = typer.Argument(..., help="Recurrence rule, e.g. FREQ=MONTHLY;BYMONTHDAY=1"),
    detailed: bool = typer.Option(
        False, "--detailed", "-d", help="Spell days out as ordinals (the 1st, the 15th)"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Describe a recurrence rule in plain English."""
    output = resolve_output(output)
    require_rule(rule)
    text = describe_rule(rule, detailed=resolve_detailed(detailed))

    if output in ("json", "yaml"):
        format_output({"rule": rule, "description": text}, output)
    else:
        console.print(text)
