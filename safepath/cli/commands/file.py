"""File commands."""

import typer

from safepath.cli.utils.context import CLIContext
from safepath.core.filename import file_name_validation_errors_to_strings
from safepath.core.path import (
    Directory,
    File,
    NotAbsolutePath,
    build_directory_error_to_string,
    file_read_error_to_string,
    file_write_error_to_string,
)

app = typer.Typer(help="Read and write text files")


def _resolve_file(cli_ctx: CLIContext, path: str) -> File:
    """Split an absolute path into its directory chain and file leaf."""
    if not path.startswith("/"):
        cli_ctx.formatter.print_error(build_directory_error_to_string(NotAbsolutePath(path)))
        raise typer.Exit(1)

    parent_path, _, name = path.rpartition("/")
    if parent_path.endswith("/"):
        # Empty segment right before the leaf; build the whole path to report it
        built = Directory.build(path)
    else:
        built = Directory.build(parent_path or "/")
    if not built.success:
        cli_ctx.formatter.print_error(build_directory_error_to_string(built.error))
        raise typer.Exit(1)

    leaf = built.value.file(name)
    if not leaf.success:
        cli_ctx.formatter.print_error(
            f"Invalid file name '{name}'",
            details=file_name_validation_errors_to_strings(leaf.error),
        )
        raise typer.Exit(1)
    return leaf.value


@app.command("read")
def read_file(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Absolute file path"),
):
    """
    Print the content of a text file.

    Example:
        safepath file read /etc/hostname
    """
    cli_ctx: CLIContext = ctx.obj
    file = _resolve_file(cli_ctx, path)

    result = cli_ctx.run(file.read())
    if not result.success:
        cli_ctx.formatter.print_error(file_read_error_to_string(result.error))
        raise typer.Exit(1)

    cli_ctx.formatter.print_text(result.value)


@app.command("write")
def write_file(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Absolute file path"),
    content: str = typer.Argument(..., help="Text to write"),
):
    """
    Write text to a file, replacing its content.

    Example:
        safepath file write /tmp/notes.txt "hello"
    """
    cli_ctx: CLIContext = ctx.obj
    file = _resolve_file(cli_ctx, path)

    result = cli_ctx.run(file.write(content))
    if not result.success:
        cli_ctx.formatter.print_error(file_write_error_to_string(result.error))
        raise typer.Exit(1)

    cli_ctx.formatter.print_success(f"Wrote {len(content)} characters to '{file.full_path}'")
