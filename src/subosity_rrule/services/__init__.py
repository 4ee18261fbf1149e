"""Services module for subosity-rrule - projections and configuration."""

from .config_service import ConfigService, get_config_service
from .projection_service import (
    ProjectionService,
    load_billing_items,
    project_cost,
    project_spend,
    renewals_in_month,
)

__all__ = [
    "ConfigService",
    "get_config_service",
    "ProjectionService",
    "load_billing_items",
    "project_cost",
    "project_spend",
    "renewals_in_month",
]
