"""Directory commands."""

import typer

from safepath.cli.utils.context import CLIContext
from safepath.core.path import (
    Directory,
    build_directory_error_to_string,
    directory_exists_error_to_string,
    mkdir_error_to_string,
    mkdirp_error_to_string,
)

app = typer.Typer(help="Inspect and create directories")


def _build(cli_ctx: CLIContext, path: str) -> Directory:
    built = Directory.build(path)
    if not built.success:
        cli_ctx.formatter.print_error(build_directory_error_to_string(built.error))
        raise typer.Exit(1)
    return built.value


@app.command("show")
def show_directory(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Absolute directory path"),
):
    """
    Parse a path and show its directory chain.

    Example:
        safepath dir show /home/user/documents
    """
    cli_ctx: CLIContext = ctx.obj
    directory = _build(cli_ctx, path)

    cli_ctx.formatter.print_detail(
        {
            "full_path": directory.full_path,
            "name": directory.name,
            "is_root": directory.is_root,
            "depth": len(directory.ancestors()),
            "ancestors": [ancestor.full_path for ancestor in directory.ancestors()],
        },
        title=f"Directory: {directory.full_path}",
    )


@app.command("exists")
def directory_exists(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Absolute directory path"),
):
    """
    Check whether a directory exists.

    Exits with status 1 when the directory is missing or a file is in the way.

    Example:
        safepath dir exists /var/data
    """
    cli_ctx: CLIContext = ctx.obj
    directory = _build(cli_ctx, path)

    result = cli_ctx.run(directory.exists())
    if not result.success:
        cli_ctx.formatter.print_error(directory_exists_error_to_string(result.error))
        raise typer.Exit(1)

    if result.value:
        cli_ctx.formatter.print_success(f"Directory '{directory.full_path}' exists")
    else:
        cli_ctx.formatter.print_error(f"Directory '{directory.full_path}' does not exist")
        raise typer.Exit(1)


@app.command("create")
def create_directory(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Absolute directory path"),
    parents: bool = typer.Option(
        False, "--parents", "-p", help="Create missing parent directories"
    ),
):
    """
    Create a directory.

    Example:
        safepath dir create /tmp/project/build --parents
    """
    cli_ctx: CLIContext = ctx.obj
    directory = _build(cli_ctx, path)

    if parents:
        result = cli_ctx.run(directory.mkdirp())
        render = mkdirp_error_to_string
    else:
        result = cli_ctx.run(directory.mkdir())
        render = mkdir_error_to_string

    if not result.success:
        cli_ctx.formatter.print_error(render(result.error))
        raise typer.Exit(1)

    if result.value:
        cli_ctx.formatter.print_success(f"Directory '{directory.full_path}' created")
    else:
        cli_ctx.formatter.print_warning(f"Directory '{directory.full_path}' already exists")
