"""Command 'validate' of subosity-rrule"""

import typer

from subosity_rrule.core.describer import describe_configuration
from subosity_rrule.core.parser import configuration_from_parts
from subosity_rrule.core.validator import validate_configuration
from subosity_rrule.utils.exit_codes import ERROR_INVALID_ARGS
from subosity_rrule.utils.ui.formatters import format_error, format_output, format_success

from .decorators import command_wrapper
from .options import require_rule, resolve_output

app = typer.Typer()


@app.command("validate")
@command_wrapper
def validate(
    rule: str = typer.Argument(..., help="Recurrence rule to check"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Check that a rule is complete enough to be saved.

    Exits with code 2 when the rule cannot be decoded or violates a rule
    constraint (for example a yearly rule without a month).
    """
    output = resolve_output(output)
    config = configuration_from_parts(require_rule(rule))
    violations = validate_configuration(config)

    if output in ("json", "yaml"):
        format_output(
            {
                "rule": rule,
                "valid": not violations,
                "violations": [violation.model_dump() for violation in violations],
            },
            output,
        )
    elif violations:
        for violation in violations:
            format_error(f"{violation.field}: {violation.message}")
    else:
        format_success(f"Valid rule: {describe_configuration(config)}")

    if violations:
        raise typer.Exit(code=ERROR_INVALID_ARGS)
