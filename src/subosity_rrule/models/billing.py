"""Billing data models used for spend projections."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


class BillingItem(BaseModel):
    """A subscription as seen by the projection service.

    ``anchor`` is the subscription's start date; it pins the phase of
    interval-based rules such as "every 2 weeks".
    """

    name: str
    rule: str = ""
    amount: Decimal = Field(default=Decimal("0"))
    anchor: date | None = None


class Renewal(BaseModel):
    """One renewal of a subscription on a calendar date."""

    renews_on: date
    name: str
    amount: Decimal


class SpendSummary(BaseModel):
    """Projected spend across a set of subscriptions."""

    daily: Decimal = Decimal("0")
    monthly: Decimal = Decimal("0")
    yearly: Decimal = Decimal("0")
    skipped: list[str] = Field(default_factory=list)
