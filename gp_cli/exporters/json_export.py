"""JSON session export."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from gp_cli.core.constants import EXPORT_VERSION
from gp_cli.core.models import DrillRecord, SessionRecord
from gp_cli.utils.dates import to_iso8601


def drill_to_dict(drill: DrillRecord) -> Dict[str, Any]:
    return {
        "id": drill.id,
        "name": drill.name,
        "description": drill.description,
        "category": drill.category.value,
        "maxScore": drill.max_score,
        "actualScore": drill.actual_score,
        "isCompleted": drill.is_completed,
        "notes": drill.notes,
        "completedAt": to_iso8601(drill.completed_at),
    }


def session_to_dict(session: SessionRecord) -> Dict[str, Any]:
    return {
        "id": session.id,
        "date": to_iso8601(session.date),
        "notes": session.notes,
        "temperature": session.temperature,
        "weatherCondition": session.weather_condition,
        "weatherDescription": session.weather_description,
        "humidity": session.humidity,
        "feelsLikeTemperature": session.feels_like_temperature,
        "windSpeed": session.wind_speed,
        "windDirection": session.wind_direction_degrees,
        "windDirectionText": session.wind_direction_text,
        "locationName": session.location_name,
        "locationType": session.course_type,
        "locationLatitude": session.latitude,
        "locationLongitude": session.longitude,
        "drills": [drill_to_dict(drill) for drill in session.drills],
    }


def build_export_payload(
    sessions: Sequence[SessionRecord],
    export_date: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Build the export container object."""
    return {
        "exportDate": to_iso8601(export_date or datetime.now()),
        "version": EXPORT_VERSION,
        "totalSessions": len(sessions),
        "totalDrills": sum(len(session.drills) for session in sessions),
        "sessions": [session_to_dict(session) for session in sessions],
    }


def sessions_to_json(sessions: Sequence[SessionRecord], export_date: Optional[datetime] = None) -> str:
    """Render sessions as pretty, key-sorted JSON text."""
    payload = build_export_payload(sessions, export_date=export_date)
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n"

