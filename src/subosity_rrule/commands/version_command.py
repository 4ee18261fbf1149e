"""Command 'version' of subosity-rrule"""

import typer

from subosity_rrule import __version__
from subosity_rrule.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(__version__)
