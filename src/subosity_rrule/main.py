"""Main entry point for the subosity-rrule command line."""

import typer

from subosity_rrule.commands import (
    config_command,
    describe_command,
    generate_command,
    next_command,
    occurrences_command,
    parse_command,
    project_command,
    validate_command,
    version_command,
)
from subosity_rrule.services.config_service import get_config_service
from subosity_rrule.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    SUCCESS,
    get_exit_code_description,
)
from subosity_rrule.utils.logger import set_log_level
from subosity_rrule.utils.typer_helpers import SuggestingGroup
from subosity_rrule.utils.ui.console import set_color
from subosity_rrule.utils.ui.formatters import format_error

# Create main app with custom group class
app = typer.Typer(
    name="subosity-rrule",
    cls=SuggestingGroup,
    help="Describe, validate and enumerate subscription recurrence rules",
    no_args_is_help=True,
    epilog="Exit codes: "
    + "; ".join(
        f"{code} {get_exit_code_description(code).lower()}"
        for code in (SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS)
    ),
)


@app.callback()
def main(
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
) -> None:
    """Apply output and logging settings shared by every command."""
    try:
        config = get_config_service().config
    except RuntimeError as e:
        format_error(str(e))
        raise typer.Exit(ERROR_GENERAL) from e
    set_log_level(config.logging.level)
    set_color(config.output.color and not no_color)


# Add top-level commands
app.command("describe")(describe_command.describe)
app.command("parse")(parse_command.parse)
app.command("generate")(generate_command.generate)
app.command("validate")(validate_command.validate)
app.command("next")(next_command.next_command)
app.command("occurrences")(occurrences_command.occurrences)
app.command("version")(version_command.version)

# Add subcommands
app.add_typer(project_command.app, name="project", help="Spend projections and renewal calendars")
app.add_typer(config_command.app, name="config", help="Configuration management")


if __name__ == "__main__":
    app()
