"""Spend projection commands."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

import typer

from subosity_rrule.core.occurrences import count_occurrences_in_range
from subosity_rrule.models.billing import BillingItem
from subosity_rrule.services.config_service import get_config_service
from subosity_rrule.services.projection_service import ProjectionService, load_billing_items
from subosity_rrule.utils.exit_codes import ERROR_INVALID_ARGS
from subosity_rrule.utils.typer_helpers import SuggestingGroup
from subosity_rrule.utils.ui.formatters import format_output, format_warning

from .decorators import AppError, command_wrapper
from .options import DATE_FORMATS, as_date, require_rule, resolve_output

app = typer.Typer(cls=SuggestingGroup, help="Spend projections and renewal calendars")

_ITEMS_HELP = "YAML file with a list of subscriptions (name, rule, amount, anchor)"


def _load_items(path: Path) -> list[BillingItem]:
    try:
        return load_billing_items(path)
    except ValueError as e:
        raise AppError(str(e), exit_code=ERROR_INVALID_ARGS) from e


def _parse_amount(amount: str) -> Decimal:
    try:
        return Decimal(amount)
    except InvalidOperation as e:
        raise AppError(f"Invalid amount: {amount!r}", exit_code=ERROR_INVALID_ARGS) from e


def _renewal_rows(renewals) -> list[dict]:
    return [
        {
            "date": renewal.renews_on.isoformat(),
            "name": renewal.name,
            "amount": str(renewal.amount),
        }
        for renewal in renewals
    ]


@app.command("cost")
@command_wrapper
def cost(
    rule: str = typer.Argument(..., help="Recurrence rule"),
    amount: str = typer.Option(..., "--amount", "-a", help="Amount charged per renewal"),
    start: datetime = typer.Option(..., "--start", formats=DATE_FORMATS, help="First day"),
    end: datetime = typer.Option(..., "--end", formats=DATE_FORMATS, help="Last day (inclusive)"),
    anchor: datetime | None = typer.Option(
        None, "--anchor", formats=DATE_FORMATS, help="Subscription start date"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Projected cost of one subscription over a window."""
    output = resolve_output(output)
    require_rule(rule)
    price = _parse_amount(amount)

    renewals = count_occurrences_in_range(rule, start.date(), end.date(), as_date(anchor))
    format_output(
        {
            "rule": rule,
            "start": start.date().isoformat(),
            "end": end.date().isoformat(),
            "renewals": renewals,
            "amount": str(price),
            "total": str(price * renewals),
        },
        output,
    )


@app.command("summary")
@command_wrapper
def summary(
    items_file: Path = typer.Argument(..., exists=True, dir_okay=False, help=_ITEMS_HELP),
    on: datetime | None = typer.Option(
        None, "--on", formats=DATE_FORMATS, help="Reference day (default: today)"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Daily, monthly and yearly spend across all subscriptions."""
    output = resolve_output(output)
    service = ProjectionService(_load_items(items_file))
    spend = service.summarize(as_date(on, date.today()))

    format_output(spend.model_dump(mode="json"), output)
    if spend.skipped and output not in ("json", "yaml"):
        format_warning(f"Skipped subscriptions with invalid rules: {', '.join(spend.skipped)}")


@app.command("calendar")
@command_wrapper
def calendar(
    items_file: Path = typer.Argument(..., exists=True, dir_okay=False, help=_ITEMS_HELP),
    month: datetime | None = typer.Option(
        None, "--month", formats=["%Y-%m"], help="Month as YYYY-MM (default: this month)"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Renewals falling in one calendar month."""
    output = resolve_output(output)
    service = ProjectionService(_load_items(items_file))
    target = as_date(month, date.today())

    renewals = service.renewals_in_month(target.year, target.month)
    format_output(_renewal_rows(renewals), output)


@app.command("upcoming")
@command_wrapper
def upcoming(
    items_file: Path = typer.Argument(..., exists=True, dir_okay=False, help=_ITEMS_HELP),
    from_date: datetime | None = typer.Option(
        None, "--from", formats=DATE_FORMATS, help="Search from this day (default: today)"
    ),
    limit: int | None = typer.Option(None, "--limit", "-l", min=1, help="Maximum renewals"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Next renewal of each subscription, soonest first."""
    output = resolve_output(output)
    calendar_config = get_config_service().config.calendar
    service = ProjectionService(_load_items(items_file))

    renewals = service.upcoming(
        as_date(from_date, date.today()),
        limit=limit or calendar_config.upcoming_limit,
        horizon_years=calendar_config.search_horizon_years,
    )
    format_output(_renewal_rows(renewals), output)
