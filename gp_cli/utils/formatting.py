"""Formatting helpers used by exports and console output."""

from __future__ import annotations

from typing import List, Optional

from gp_cli.core.models import DrillRecord


def format_number(value: Optional[float]) -> str:
    """Render an optional number as text, empty when absent."""
    if value is None:
        return ""
    return str(value)


def format_success_rate(drill: DrillRecord) -> str:
    """Render the CSV success-rate cell, e.g. '80.0%', '100%' or ''."""
    if drill.max_score is not None and drill.actual_score is not None and drill.max_score > 0:
        return f"{drill.actual_score / drill.max_score * 100:.1f}%"
    if drill.is_completed is not None:
        return "100%" if drill.is_completed else "0%"
    return ""


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def format_import_summary(
    sessions_imported: int,
    drills_imported: int,
    duplicates_skipped: int,
    error_count: int,
) -> str:
    """Summarize an import outcome as short human lines."""
    if sessions_imported == 0 and drills_imported == 0:
        return "No new data was imported."

    lines: List[str] = []
    if sessions_imported:
        lines.append(f"{_plural(sessions_imported, 'session')} imported")
    if drills_imported:
        lines.append(f"{_plural(drills_imported, 'drill')} imported")
    if duplicates_skipped:
        lines.append(f"{_plural(duplicates_skipped, 'duplicate')} skipped")
    if error_count:
        lines.append(f"{_plural(error_count, 'error')} encountered")
    return "\n".join(lines)
