"""Import sessions from a CSV file."""

from __future__ import annotations

from pathlib import Path

import typer

from gp_cli.commands.common import fail, get_state, print_json_payload
from gp_cli.core.store import StoreError
from gp_cli.importers.csv_import import DataImportError, ImportErrorKind, import_csv


def import_command(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="CSV file exported by gp or the mobile app"),
) -> None:
    """Import practice sessions from CSV, skipping sessions already stored."""
    state = get_state(ctx)

    if file.suffix.lower() != ".csv":
        fail(state, ImportErrorKind.INVALID_FILE_FORMAT.description)

    try:
        data = file.expanduser().read_bytes()
    except OSError as exc:
        fail(state, f"Failed to read {file}: {exc}")

    try:
        result = import_csv(data, state.open_store())
    except DataImportError as exc:
        fail(state, exc.kind.description)
    except StoreError as exc:
        fail(state, str(exc))

    if state.json_output:
        print_json_payload(state, {"status": "imported", "path": str(file), **result.to_dict()})
        return

    if state.plain_output:
        typer.echo(f"sessions_imported\t{result.sessions_imported}")
        typer.echo(f"drills_imported\t{result.drills_imported}")
        typer.echo(f"duplicates_skipped\t{result.duplicates_skipped}")
        typer.echo(f"errors\t{','.join(kind.value for kind in result.errors)}")
        return

    state.console.print(result.summary, markup=False)
    if result.errors and state.verbose:
        for kind in result.errors:
            state.console.print(f"- {kind.description}", markup=False)
