"""Command 'generate' of subosity-rrule"""

import typer

from subosity_rrule.core.generator import generate_rule
from subosity_rrule.models.rule import RuleConfiguration
from subosity_rrule.utils.exit_codes import ERROR_INVALID_ARGS
from subosity_rrule.utils.ui.console import get_console
from subosity_rrule.utils.ui.formatters import format_output

from .decorators import AppError, command_wrapper
from .options import configuration_view, require_valid, resolve_detailed, resolve_output

app = typer.Typer()
console = get_console(highlight=False)


@app.command("generate")
@command_wrapper
def generate(
    frequency: str = typer.Option(
        "MONTHLY", "--frequency", "-f", help="DAILY, WEEKLY, MONTHLY or YEARLY"
    ),
    interval: int = typer.Option(1, "--interval", "-i", help="Repeat every N periods"),
    day: list[str] | None = typer.Option(None, "--day", help="Weekday (MO..SU), repeatable"),
    month_day: list[int] | None = typer.Option(
        None, "--month-day", help="Day of the month, negative counts from the end; repeatable"
    ),
    month: list[int] | None = typer.Option(None, "--month", help="Month number (1-12)"),
    position: int | None = typer.Option(
        None, "--position", help="Weekday position: 1-4, or -1 for last"
    ),
    detailed: bool = typer.Option(False, "--detailed", "-d", help="Detailed description"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Build a recurrence rule from its parts.

    Examples:
      subosity-rrule generate -f MONTHLY --month-day 15
      subosity-rrule generate -f MONTHLY --position -1 --day FR
      subosity-rrule generate -f YEARLY --month 3 --month-day 15
    """
    output = resolve_output(output)
    try:
        config = RuleConfiguration.from_fields(
            frequency,
            interval=interval,
            by_weekday=day or [],
            by_month_day=month_day or [],
            by_month=month or [],
            by_set_position=position,
        )
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e

    require_valid(config)

    if output in ("json", "yaml", "table"):
        format_output(configuration_view(config, resolve_detailed(detailed)), output)
    else:
        console.print(generate_rule(config))
