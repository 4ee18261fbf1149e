"""Command 'next' of subosity-rrule"""

from datetime import date, datetime, timedelta

import typer

from subosity_rrule.core.occurrences import next_occurrence
from subosity_rrule.services.config_service import get_config_service
from subosity_rrule.utils.ui.console import get_console
from subosity_rrule.utils.ui.formatters import format_output, format_warning

from .decorators import command_wrapper
from .options import DATE_FORMATS, as_date, require_rule, resolve_output

app = typer.Typer()
console = get_console()


@app.command("next")
@command_wrapper
def next_command(
    rule: str = typer.Argument(..., help="Recurrence rule"),
    from_date: datetime | None = typer.Option(
        None, "--from", formats=DATE_FORMATS, help="Search from this day (default: today)"
    ),
    anchor: datetime | None = typer.Option(
        None, "--anchor", formats=DATE_FORMATS, help="Subscription start date (default: --from)"
    ),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of occurrences"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show the next renewal date(s) of a rule."""
    output = resolve_output(output)
    require_rule(rule)
    horizon = get_config_service().config.calendar.search_horizon_years

    start = as_date(from_date, date.today())
    series_anchor = as_date(anchor, start)

    found: list[date] = []
    cursor = start
    while len(found) < count:
        day = next_occurrence(rule, cursor, series_anchor, horizon)
        if day is None:
            break
        found.append(day)
        cursor = day + timedelta(days=1)

    if output in ("json", "yaml"):
        format_output({"rule": rule, "next": [day.isoformat() for day in found]}, output)
        return

    if not found:
        format_warning(f"No occurrence within {horizon} years of {start.isoformat()}")
        return
    if output == "table":
        format_output(
            [{"date": day.isoformat(), "weekday": day.strftime("%A")} for day in found], output
        )
        return
    for day in found:
        console.print(f"{day.isoformat()}  [dim]{day.strftime('%A')}[/dim]")
