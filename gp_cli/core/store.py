"""Session storage: repository protocol plus JSON-file and in-memory stores."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from gp_cli.core.constants import STORE_VERSION
from gp_cli.core.models import DrillCategory, DrillRecord, ScoringType, SessionRecord

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when the session store cannot be read or written."""


class SessionRepository(Protocol):
    """Where imported sessions come from and go to."""

    def list_all(self) -> List[SessionRecord]:
        ...

    def add(self, session: SessionRecord) -> None:
        ...

    def save(self) -> None:
        ...


class InMemorySessionStore:
    """List-backed repository; ``save_count`` records persist calls."""

    def __init__(self, sessions: Optional[List[SessionRecord]] = None) -> None:
        self.sessions: List[SessionRecord] = list(sessions or [])
        self.save_count = 0

    def list_all(self) -> List[SessionRecord]:
        return list(self.sessions)

    def add(self, session: SessionRecord) -> None:
        self.sessions.append(session)

    def save(self) -> None:
        self.save_count += 1


def _datetime_or_none(value: Any) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(str(value))


def drill_to_record(drill: DrillRecord) -> Dict[str, Any]:
    return {
        "id": drill.id,
        "name": drill.name,
        "description": drill.description,
        "category": drill.category.value,
        "scoringType": drill.scoring_type.value,
        "maxScore": drill.max_score,
        "actualScore": drill.actual_score,
        "isCompleted": drill.is_completed,
        "notes": drill.notes,
        "completedAt": drill.completed_at.isoformat(),
    }


def drill_from_record(data: Dict[str, Any]) -> DrillRecord:
    drill = DrillRecord(
        name=data["name"],
        description=data.get("description") or data["name"],
        category=DrillCategory(data["category"]),
        scoring_type=ScoringType(data.get("scoringType", ScoringType.SCORED.value)),
        max_score=data.get("maxScore"),
        actual_score=data.get("actualScore"),
        is_completed=data.get("isCompleted"),
        notes=data.get("notes"),
        completed_at=_datetime_or_none(data.get("completedAt")) or datetime.now(),
    )
    if data.get("id"):
        drill.id = str(data["id"])
    return drill


def session_to_record(session: SessionRecord) -> Dict[str, Any]:
    return {
        "id": session.id,
        "date": session.date.isoformat(),
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
        "latitude": session.latitude,
        "longitude": session.longitude,
        "courseName": session.course_name,
        "courseType": session.course_type,
        "distanceToCourse": session.distance_to_course,
        "drills": [drill_to_record(drill) for drill in session.drills],
    }


def session_from_record(data: Dict[str, Any]) -> SessionRecord:
    session_date = _datetime_or_none(data.get("date"))
    if session_date is None:
        raise ValueError("session record is missing its date")
    session = SessionRecord(
        date=session_date,
        notes=data.get("notes"),
        drills=[drill_from_record(item) for item in data.get("drills", [])],
        temperature=data.get("temperature"),
        weather_condition=data.get("weatherCondition"),
        weather_description=data.get("weatherDescription"),
        humidity=data.get("humidity"),
        feels_like_temperature=data.get("feelsLikeTemperature"),
        wind_speed=data.get("windSpeed"),
        wind_direction_degrees=data.get("windDirection"),
        wind_direction_text=data.get("windDirectionText"),
        location_name=data.get("locationName"),
        latitude=data.get("latitude"),
        longitude=data.get("longitude"),
        course_name=data.get("courseName"),
        course_type=data.get("courseType"),
        distance_to_course=data.get("distanceToCourse"),
    )
    if data.get("id"):
        session.id = str(data["id"])
    return session


class JsonSessionStore:
    """Repository persisted as one pretty-printed JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._sessions: Optional[List[SessionRecord]] = None

    def _load(self) -> List[SessionRecord]:
        if self._sessions is not None:
            return self._sessions

        if not self.path.exists():
            self._sessions = []
            return self._sessions

        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"Failed to read session store {self.path}: {exc}") from exc

        if not isinstance(payload, dict) or not isinstance(payload.get("sessions"), list):
            raise StoreError(f"Session store {self.path} must contain a 'sessions' list")

        try:
            self._sessions = [session_from_record(item) for item in payload["sessions"]]
        except (KeyError, TypeError, ValueError) as exc:
            raise StoreError(f"Invalid session record in {self.path}: {exc}") from exc

        logger.debug("Loaded %d sessions from %s", len(self._sessions), self.path)
        return self._sessions

    def list_all(self) -> List[SessionRecord]:
        return list(self._load())

    def add(self, session: SessionRecord) -> None:
        self._load().append(session)

    def save(self) -> None:
        sessions = self._load()
        payload = {
            "version": STORE_VERSION,
            "sessions": [session_to_record(session) for session in sessions],
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            text = json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
            self.path.write_text(text + "\n", encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Failed to write session store {self.path}: {exc}") from exc
        logger.debug("Saved %d sessions to %s", len(sessions), self.path)
