"""safepath command-line tool."""

from typing import Optional

import typer
from rich.console import Console

from safepath.cli import __version__
from safepath.cli.commands import directory, file, name
from safepath.cli.utils.context import CLIContext
from safepath.cli.utils.output import OutputFormatter
from safepath.core.config import get_settings
from safepath.infrastructure.logging import bind_context, clear_context, get_logger, setup_logging

app = typer.Typer(
    name="safepath",
    help="safepath - validate names and manage POSIX paths safely across filesystems",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    pretty_exceptions_enable=False,
)

console = Console()
logger = get_logger(__name__)


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        console.print(f"safepath v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug output",
    ),
    output_format: str = typer.Option(
        "table",
        "--output",
        "-o",
        help="Output format: table, json, yaml",
    ),
):
    """
    safepath

    Cross-filesystem name validation and race-tolerant directory creation.
    """
    settings = get_settings()
    setup_logging("DEBUG" if debug else settings.log_level)
    clear_context()
    bind_context(command=ctx.invoked_subcommand)

    ctx.obj = CLIContext(
        debug=debug,
        settings=settings,
        formatter=OutputFormatter(output_format, console=console),
        console=console,
    )

    if debug:
        logger.debug("cli_started", output_format=output_format)


app.add_typer(name.app, name="name", help="Validate file and directory names")
app.add_typer(directory.app, name="dir", help="Inspect and create directories")
app.add_typer(file.app, name="file", help="Read and write text files")


if __name__ == "__main__":
    app()
