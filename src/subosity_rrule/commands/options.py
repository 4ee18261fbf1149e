"""Shared option handling and views for rule commands."""

from datetime import date, datetime
from typing import Any

from subosity_rrule.core.codec import RuleDecodeError, RuleParts, decode
from subosity_rrule.core.describer import describe_configuration
from subosity_rrule.core.generator import generate_rule
from subosity_rrule.core.validator import validate_configuration
from subosity_rrule.models.rule import RuleConfiguration
from subosity_rrule.services.config_service import get_config_service
from subosity_rrule.utils.exit_codes import ERROR_INVALID_ARGS
from subosity_rrule.utils.ui.formatters import OUTPUT_FORMATS

from .decorators import AppError

DATE_FORMATS = ["%Y-%m-%d"]


def resolve_output(output: str | None) -> str:
    """Explicit ``--output`` wins over the configured default."""
    if output is None:
        return get_config_service().config.output.format
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}'. Choose from: {', '.join(OUTPUT_FORMATS)}",
            exit_code=ERROR_INVALID_ARGS,
        )
    return output


def resolve_detailed(detailed: bool) -> bool:
    return detailed or get_config_service().config.output.detailed


def require_rule(rule: str) -> RuleParts:
    """Decode ``rule`` or fail the command with ERROR_INVALID_ARGS."""
    try:
        return decode(rule)
    except RuleDecodeError as e:
        raise AppError(f"Invalid recurrence rule: {e}", exit_code=ERROR_INVALID_ARGS) from e


def require_valid(config: RuleConfiguration) -> None:
    """Fail the command with ERROR_INVALID_ARGS listing every violation."""
    violations = validate_configuration(config)
    if violations:
        details = "; ".join(f"{v.field}: {v.message}" for v in violations)
        raise AppError(f"Invalid configuration - {details}", exit_code=ERROR_INVALID_ARGS)


def as_date(value: datetime | None, default: date | None = None) -> date | None:
    if value is None:
        return default
    return value.date()


def configuration_view(config: RuleConfiguration, detailed: bool = False) -> dict[str, Any]:
    """Flat, JSON-compatible view of a configuration."""
    return {
        "rule": generate_rule(config),
        "description": describe_configuration(config, detailed=detailed),
        "frequency": config.frequency.value,
        "interval": config.interval,
        "mode": config.mode.kind if config.mode is not None else None,
        "by_weekday": [day.value for day in config.by_weekday],
        "by_month": config.by_month,
        "by_month_day": config.by_month_day,
        "by_set_position": config.by_set_position,
    }
