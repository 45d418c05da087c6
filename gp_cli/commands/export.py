"""Export stored sessions to CSV or JSON."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import typer

from gp_cli.commands.common import fail, get_state, load_sessions, print_json_payload
from gp_cli.core.config import resolve_output_dir
from gp_cli.core.constants import DATE_RANGE_LABELS
from gp_cli.core.models import ExportFormat
from gp_cli.exporters import export_data, generate_file_name, write_export
from gp_cli.utils.dates import format_medium_datetime, validate_date_range


def export_command(
    ctx: typer.Context,
    output_format: Optional[str] = typer.Option(None, "--format", help="Export format: csv|json"),
    date_range: Optional[str] = typer.Option(
        None,
        "--range",
        help="Date range: week|month|three-months|six-months|year|all",
        callback=validate_date_range,
    ),
    output_dir: Optional[Path] = typer.Option(None, help="Output directory"),
    output_file: Optional[Path] = typer.Option(None, help="Write to this file instead of a generated name"),
) -> None:
    """Export practice sessions as CSV or JSON."""
    state = get_state(ctx)
    export_cfg = state.config.get("export", {})

    raw_format = (output_format or export_cfg.get("default_format") or "csv").lower()
    try:
        export_format = ExportFormat(raw_format)
    except ValueError:
        fail(state, f"Invalid format '{raw_format}'. Expected one of: csv|json", code=2)

    range_key = date_range or validate_date_range(export_cfg.get("date_range") or "all") or "all"

    sessions = load_sessions(state, state.open_store(), date_range=range_key)
    data = export_data(sessions, export_format)

    if output_file is not None:
        path = output_file.expanduser().resolve()
    else:
        path = resolve_output_dir(state.config, explicit=output_dir) / generate_file_name(export_format)

    try:
        write_export(path, data)
    except OSError as exc:
        fail(state, f"Failed to write export {path}: {exc}")

    drill_count = sum(len(session.drills) for session in sessions)
    result: Dict[str, Any] = {
        "status": "exported",
        "format": export_format.value,
        "mime_type": export_format.mime_type,
        "path": str(path),
        "range": DATE_RANGE_LABELS[range_key],
        "sessions": len(sessions),
        "drills": drill_count,
        "earliest": format_medium_datetime(sessions[-1].date) if sessions else None,
        "latest": format_medium_datetime(sessions[0].date) if sessions else None,
    }

    if state.json_output:
        print_json_payload(state, result)
        return

    if state.plain_output:
        for key in ("status", "format", "path", "range", "sessions", "drills", "earliest", "latest"):
            if result.get(key) is not None:
                typer.echo(f"{key}\t{result[key]}")
        return

    state.console.print(
        f"Exported {len(sessions)} sessions ({drill_count} drills) as {export_format.value} "
        f"to {path}",
        markup=False,
        soft_wrap=True,
    )
    if sessions and state.verbose:
        state.console.print(f"{result['range']}: {result['earliest']} - {result['latest']}", markup=False)
