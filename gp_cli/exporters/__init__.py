"""Session exporters."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from gp_cli.core.constants import EXPORT_FILE_PREFIX
from gp_cli.core.models import ExportFormat, SessionRecord
from gp_cli.exporters.csv_export import sessions_to_csv
from gp_cli.exporters.json_export import sessions_to_json


def export_data(
    sessions: Sequence[SessionRecord],
    export_format: ExportFormat,
    export_date: Optional[datetime] = None,
) -> bytes:
    """Serialize sessions to UTF-8 bytes in the requested format."""
    if export_format is ExportFormat.CSV:
        return sessions_to_csv(sessions).encode("utf-8")
    return sessions_to_json(sessions, export_date=export_date).encode("utf-8")


def generate_file_name(export_format: ExportFormat, now: Optional[datetime] = None) -> str:
    """Build 'golf_practice_data_<yyyy-MM-dd_HH-mm>.<ext>'."""
    timestamp = (now or datetime.now()).strftime("%Y-%m-%d_%H-%M")
    return f"{EXPORT_FILE_PREFIX}_{timestamp}.{export_format.file_extension}"


def write_export(path: Path, data: bytes) -> Path:
    """Write exported bytes and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path
