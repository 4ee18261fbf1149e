"""Command 'occurrences' of subosity-rrule"""

from datetime import datetime

import typer

from subosity_rrule.core.occurrences import occurrences_in_range
from subosity_rrule.utils.exit_codes import ERROR_INVALID_ARGS
from subosity_rrule.utils.ui.formatters import format_output

from .decorators import AppError, command_wrapper
from .options import DATE_FORMATS, as_date, require_rule, resolve_output

app = typer.Typer()


@app.command("occurrences")
@command_wrapper
def occurrences(
    rule: str = typer.Argument(..., help="Recurrence rule"),
    start: datetime = typer.Option(..., "--start", formats=DATE_FORMATS, help="First day"),
    end: datetime = typer.Option(..., "--end", formats=DATE_FORMATS, help="Last day (inclusive)"),
    anchor: datetime | None = typer.Option(
        None, "--anchor", formats=DATE_FORMATS, help="Subscription start date (default: --start)"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """List every occurrence of a rule between two dates."""
    output = resolve_output(output)
    require_rule(rule)
    if end < start:
        raise AppError("--end must not be before --start", exit_code=ERROR_INVALID_ARGS)

    days = occurrences_in_range(rule, start.date(), end.date(), as_date(anchor))

    if output in ("json", "yaml"):
        format_output(
            {
                "rule": rule,
                "start": start.date().isoformat(),
                "end": end.date().isoformat(),
                "count": len(days),
                "occurrences": [day.isoformat() for day in days],
            },
            output,
        )
    else:
        format_output(
            [{"date": day.isoformat(), "weekday": day.strftime("%A")} for day in days], output
        )
