"""CSV session export."""

from __future__ import annotations

import csv
import io
from typing import Any, Iterable, List, Optional, TextIO

from gp_cli.core.constants import CSV_FIELD_COUNT, CSV_HEADER
from gp_cli.core.models import SessionRecord
from gp_cli.utils.csv_line import flatten_line_breaks
from gp_cli.utils.dates import format_medium_datetime
from gp_cli.utils.formatting import format_number, format_success_rate

SESSION_FIELD_COUNT = 14


def _writer(handle: TextIO) -> Any:
    return csv.writer(handle, quoting=csv.QUOTE_ALL, lineterminator="\n")


def _cell(value: Optional[object]) -> str:
    # Importer reads one physical line per row.
    if value is None:
        return ""
    return flatten_line_breaks(str(value))


def _session_fields(session: SessionRecord) -> List[Optional[object]]:
    return [
        format_medium_datetime(session.date),
        session.notes,
        format_number(session.temperature),
        session.weather_condition,
        session.weather_description,
        format_number(session.humidity),
        format_number(session.feels_like_temperature),
        format_number(session.wind_speed),
        format_number(session.wind_direction_degrees),
        session.wind_direction_text,
        session.location_name,
        session.course_type,
        format_number(session.latitude),
        format_number(session.longitude),
    ]


def session_cells(session: SessionRecord) -> List[List[str]]:
    """Cell values for one session, one list per drill."""
    session_fields = _session_fields(session)
    if not session.drills:
        empty_drill: List[Optional[object]] = [""] * (CSV_FIELD_COUNT - SESSION_FIELD_COUNT)
        return [[_cell(value) for value in session_fields + empty_drill]]

    rows: List[List[str]] = []
    for drill in session.drills:
        values = session_fields + [
            drill.name,
            drill.description,
            drill.category.display_name,
            format_number(drill.max_score),
            format_number(drill.actual_score),
            format_success_rate(drill),
            drill.notes,
            format_medium_datetime(drill.completed_at),
        ]
        rows.append([_cell(value) for value in values])
    return rows


def format_csv_row(values: Iterable[Optional[object]]) -> str:
    """Render values as one fully quoted CSV line without terminator."""
    buffer = io.StringIO()
    _writer(buffer).writerow([_cell(value) for value in values])
    return buffer.getvalue().rstrip("\n")


def session_rows(session: SessionRecord) -> List[str]:
    """Render one session as CSV lines, one per drill."""
    return [format_csv_row(cells) for cells in session_cells(session)]


def sessions_to_csv(sessions: Iterable[SessionRecord]) -> str:
    """Render sessions as CSV text with the extended 22-column header."""
    buffer = io.StringIO()
    buffer.write(CSV_HEADER + "\n")
    writer = _writer(buffer)
    for session in sessions:
        writer.writerows(session_cells(session))
    return buffer.getvalue()
