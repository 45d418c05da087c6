"""List stored practice sessions."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import typer
from rich.table import Table

from gp_cli.commands.common import get_state, load_sessions, print_json_payload
from gp_cli.core.constants import DATE_RANGE_LABELS
from gp_cli.core.models import SessionRecord
from gp_cli.utils.dates import format_medium_datetime, validate_date_range


def _session_summary(session: SessionRecord) -> Dict[str, Any]:
    return {
        "id": session.id,
        "date": format_medium_datetime(session.date),
        "notes": session.notes,
        "drills": session.total_drills,
        "average_success": session.average_success_percentage,
        "weather": session.weather_summary,
        "location": session.location_summary,
    }


def sessions_command(
    ctx: typer.Context,
    date_range: str = typer.Option(
        "all",
        "--range",
        help="Date range: week|month|three-months|six-months|year|all",
        callback=validate_date_range,
    ),
    limit: Optional[int] = typer.Option(None, help="Show at most N sessions"),
    drills: bool = typer.Option(False, "--drills", help="List drills under each session"),
) -> None:
    """Show stored practice sessions, newest first."""
    state = get_state(ctx)
    sessions = load_sessions(state, state.open_store(), date_range=date_range)
    if limit is not None:
        sessions = sessions[:limit]

    if state.json_output:
        rows: List[Dict[str, Any]] = []
        for session in sessions:
            row = _session_summary(session)
            if drills:
                row["drill_results"] = [
                    {
                        "name": drill.name,
                        "category": drill.category.value,
                        "score": drill.display_score,
                        "success": drill.success_percentage,
                    }
                    for drill in session.drills
                ]
            rows.append(row)
        print_json_payload(state, {"range": DATE_RANGE_LABELS[date_range], "sessions": rows})
        return

    if state.plain_output:
        for session in sessions:
            summary = _session_summary(session)
            typer.echo(
                "\t".join(
                    str(summary[key] if summary[key] is not None else "")
                    for key in ("date", "notes", "drills", "average_success", "weather", "location")
                )
            )
            if drills:
                for drill in session.drills:
                    typer.echo(f"\t{drill.name}\t{drill.category.value}\t{drill.display_score}")
        return

    if not sessions:
        state.console.print("No practice sessions stored.")
        return

    table = Table(title=f"Practice Sessions ({len(sessions)} total, {DATE_RANGE_LABELS[date_range]})")
    table.add_column("Date")
    table.add_column("Notes")
    table.add_column("Drills")
    table.add_column("Avg %")
    table.add_column("Weather")
    table.add_column("Location")

    for session in sessions:
        table.add_row(
            format_medium_datetime(session.date),
            session.notes or "",
            str(session.total_drills),
            f"{session.average_success_percentage}%",
            session.weather_summary,
            session.location_summary,
        )
        if drills:
            for drill in session.drills:
                table.add_row("", f"  {drill.name}", drill.category.value, drill.display_score, "", "")

    state.console.print(table)
