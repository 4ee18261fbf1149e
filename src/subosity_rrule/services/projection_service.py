"""Projection service - spend projections and renewal calendars.

Costs are projected from actual occurrences: a subscription billed on the
last Friday of every month costs ``amount × occurrences`` in any window.
Subscriptions whose rule cannot be decoded contribute nothing and are
reported in ``SpendSummary.skipped`` instead of failing the aggregation.

A subscription without an ``anchor`` is phased from ``DEFAULT_ANCHOR``
whatever the window, so "every 2 weeks" lands on the same weeks in the
summary, the calendar and the upcoming list. Rules without a day take the
anchor's: monthly on the 1st, yearly on January 1st, weekly on Saturdays.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

import yaml
from dateutil.relativedelta import relativedelta
from pydantic import ValidationError

from subosity_rrule.core.codec import try_decode
from subosity_rrule.core.occurrences import (
    DEFAULT_SEARCH_HORIZON_YEARS,
    count_occurrences_in_range,
    next_occurrence,
    occurrences_in_range,
)
from subosity_rrule.models.billing import BillingItem, Renewal, SpendSummary

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")

DEFAULT_ANCHOR = date(2000, 1, 1)


def project_cost(
    rule: str | None,
    amount: Decimal | int | str,
    start: date,
    end: date,
    anchor: date | None = None,
) -> Decimal:
    """Projected spend for one subscription in an inclusive window."""
    return Decimal(str(amount)) * count_occurrences_in_range(rule, start, end, anchor)


def load_billing_items(path: Path) -> list[BillingItem]:
    """Load billing items from a YAML (or JSON) file.

    The file holds either a list of items or a mapping with a
    ``subscriptions`` list. Each item has ``name``, ``rule``, ``amount`` and
    an optional ``anchor`` date.

    Raises:
        ValueError: If the file is not YAML or not a list of valid items.
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: not a valid YAML document: {e}") from e

    if isinstance(data, dict):
        data = data.get("subscriptions")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of subscriptions")

    try:
        return [BillingItem.model_validate(entry) for entry in data]
    except ValidationError as e:
        raise ValueError(f"{path}: invalid subscription entry: {e}") from e


class ProjectionService:
    """Service for spend projections over a set of subscriptions."""

    def __init__(self, items: Iterable[BillingItem]):
        """Initialize the projection service.

        Args:
            items: Subscriptions to project
        """
        self.items = list(items)

    def summarize(self, reference: date) -> SpendSummary:
        """Daily, monthly and yearly projected spend.

        Args:
            reference: Day the projection is made for. ``monthly`` covers its
                calendar month and ``yearly`` the year starting on it;
                ``daily`` is the yearly figure spread over that year.

        Returns:
            SpendSummary with the names of undecodable subscriptions in
            ``skipped``
        """
        month_start = reference.replace(day=1)
        month_end = month_start + relativedelta(months=1) - timedelta(days=1)
        year_end = reference + relativedelta(years=1) - timedelta(days=1)
        days_in_year = (year_end - reference).days + 1

        summary = SpendSummary()
        for item in self.items:
            if try_decode(item.rule) is None:
                logger.info("Skipping %s: unusable rule %r", item.name, item.rule)
                summary.skipped.append(item.name)
                continue
            anchor = _anchor(item)
            summary.monthly += project_cost(item.rule, item.amount, month_start, month_end, anchor)
            summary.yearly += project_cost(item.rule, item.amount, reference, year_end, anchor)

        summary.daily = (summary.yearly / days_in_year).quantize(_CENTS)
        return summary

    def renewals_in_range(self, start: date, end: date) -> list[Renewal]:
        """All renewals in an inclusive window, ordered by date then name."""
        renewals = [
            Renewal(renews_on=day, name=item.name, amount=item.amount)
            for item in self.items
            for day in occurrences_in_range(item.rule, start, end, _anchor(item))
        ]
        return sorted(renewals, key=lambda renewal: (renewal.renews_on, renewal.name))

    def renewals_in_month(self, year: int, month: int) -> list[Renewal]:
        """Calendar events for one month."""
        month_start = date(year, month, 1)
        month_end = month_start + relativedelta(months=1) - timedelta(days=1)
        return self.renewals_in_range(month_start, month_end)

    def upcoming(
        self,
        reference: date,
        limit: int | None = None,
        horizon_years: int = DEFAULT_SEARCH_HORIZON_YEARS,
    ) -> list[Renewal]:
        """Next renewal of every subscription on or after ``reference``."""
        renewals = []
        for item in self.items:
            day = next_occurrence(item.rule, reference, _anchor(item), horizon_years)
            if day is not None:
                renewals.append(Renewal(renews_on=day, name=item.name, amount=item.amount))
        renewals.sort(key=lambda renewal: (renewal.renews_on, renewal.name))
        return renewals[:limit] if limit is not None else renewals


def _anchor(item: BillingItem) -> date:
    return item.anchor or DEFAULT_ANCHOR


def project_spend(items: Iterable[BillingItem], reference: date) -> SpendSummary:
    """Shortcut for ``ProjectionService(items).summarize(reference)``."""
    return ProjectionService(items).summarize(reference)


def renewals_in_month(items: Iterable[BillingItem], year: int, month: int) -> list[Renewal]:
    """Shortcut for ``ProjectionService(items).renewals_in_month(year, month)``."""
    return ProjectionService(items).renewals_in_month(year, month)
