"""Name validation commands."""

from typing import List

import typer

from safepath.cli.utils.context import CLIContext
from safepath.core.filename import file_name_validation_errors_to_strings, validate

app = typer.Typer(help="Validate file and directory names")


@app.command("check")
def check_names(
    ctx: typer.Context,
    names: List[str] = typer.Argument(..., help="Names to validate"),
):
    """
    Validate names against FAT32, exFAT, NTFS, APFS, ext4 and XFS rules.

    Example:
        safepath name check report.txt "bad:name" ..
    """
    cli_ctx: CLIContext = ctx.obj

    rows = []
    for name in names:
        result = validate(name)
        rows.append({
            "name": name,
            "valid": result.success,
            "findings": [] if result.success else file_name_validation_errors_to_strings(result.error),
        })

    cli_ctx.formatter.print_list(rows, columns=["name", "valid", "findings"], title="Name Validation")

    if not all(row["valid"] for row in rows):
        raise typer.Exit(1)
