"""Practice session and drill data models."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from gp_cli.core.constants import WIND_DIRECTIONS


def _new_id() -> str:
    return uuid.uuid4().hex


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class DrillCategory(str, Enum):
    """Drill category; the value doubles as the display name."""

    PUTTING = "Putting"
    CHIPPING = "Chipping"
    PITCHING = "Pitching"
    IRONS = "Irons"
    DRIVER = "Driver"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_display_name(cls, name: str) -> Optional["DrillCategory"]:
        """Resolve a display name case-insensitively, or None."""
        return _CATEGORY_BY_NAME.get(name.lower())


_CATEGORY_BY_NAME = {category.display_name.lower(): category for category in DrillCategory}


class ScoringType(str, Enum):
    SCORED = "scored"
    COMPLETION = "completion"

    @property
    def display_name(self) -> str:
        return "Scored" if self is ScoringType.SCORED else "Completion"


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"

    @property
    def file_extension(self) -> str:
        return self.value

    @property
    def mime_type(self) -> str:
        return "text/csv" if self is ExportFormat.CSV else "application/json"


def wind_direction_text(degrees: Optional[int]) -> Optional[str]:
    """Convert wind bearing in degrees to a 16-point compass label."""
    if degrees is None:
        return None
    index = _round_half_away(degrees / 22.5) % len(WIND_DIRECTIONS)
    return WIND_DIRECTIONS[index]


@dataclass
class DrillRecord:
    """One logged attempt at a drill within a session."""

    name: str
    description: str
    category: DrillCategory
    scoring_type: ScoringType
    max_score: Optional[int] = None
    actual_score: Optional[int] = None
    is_completed: Optional[bool] = None
    notes: Optional[str] = None
    completed_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=_new_id)

    @classmethod
    def scored(
        cls,
        name: str,
        description: str,
        category: DrillCategory,
        max_score: int,
        actual_score: int,
        notes: Optional[str] = None,
        completed_at: Optional[datetime] = None,
    ) -> "DrillRecord":
        return cls(
            name=name,
            description=description,
            category=category,
            scoring_type=ScoringType.SCORED,
            max_score=max_score,
            actual_score=actual_score,
            notes=notes,
            completed_at=completed_at or datetime.now(),
        )

    @classmethod
    def completion(
        cls,
        name: str,
        description: str,
        category: DrillCategory,
        is_completed: bool,
        notes: Optional[str] = None,
        completed_at: Optional[datetime] = None,
    ) -> "DrillRecord":
        return cls(
            name=name,
            description=description,
            category=category,
            scoring_type=ScoringType.COMPLETION,
            is_completed=is_completed,
            notes=notes,
            completed_at=completed_at or datetime.now(),
        )

    @property
    def success_rate(self) -> float:
        """Success as a fraction in [0, 1]."""
        if self.scoring_type is ScoringType.SCORED:
            if self.max_score is None or self.actual_score is None or self.max_score <= 0:
                return 0.0
            return min(max(self.actual_score / self.max_score, 0.0), 1.0)
        if self.scoring_type is ScoringType.COMPLETION:
            return 1.0 if self.is_completed else 0.0
        return 0.0

    @property
    def success_percentage(self) -> int:
        return int(self.success_rate * 100)

    @property
    def display_score(self) -> str:
        if self.scoring_type is ScoringType.SCORED:
            if self.actual_score is not None and self.max_score is not None:
                return f"{self.actual_score}/{self.max_score}"
            return "0/0"
        return "Completed" if self.is_completed else "Not Completed"


@dataclass
class SessionRecord:
    """One practice outing with its drills and environment snapshot."""

    date: datetime
    notes: Optional[str] = None
    drills: List[DrillRecord] = field(default_factory=list)

    temperature: Optional[float] = None
    weather_condition: Optional[str] = None
    weather_description: Optional[str] = None
    humidity: Optional[int] = None
    feels_like_temperature: Optional[float] = None

    wind_speed: Optional[float] = None
    wind_direction_degrees: Optional[int] = None
    wind_direction_text: Optional[str] = None

    location_name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    course_name: Optional[str] = None
    course_type: Optional[str] = None
    distance_to_course: Optional[float] = None

    id: str = field(default_factory=_new_id)

    @property
    def total_drills(self) -> int:
        return len(self.drills)

    @property
    def average_success_percentage(self) -> int:
        if not self.drills:
            return 0
        return sum(drill.success_percentage for drill in self.drills) // len(self.drills)

    @property
    def has_weather_data(self) -> bool:
        return self.temperature is not None and self.weather_condition is not None

    @property
    def has_wind_data(self) -> bool:
        return self.wind_speed is not None

    @property
    def has_location_data(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def has_course_data(self) -> bool:
        return self.course_name is not None

    @property
    def weather_summary(self) -> str:
        if not self.has_weather_data:
            return "No weather data"
        summary = f"{_round_half_away(self.temperature or 0.0)}°F"
        if self.weather_condition:
            summary += f", {self.weather_condition}"
        if self.has_wind_data:
            summary += f", {_round_half_away(self.wind_speed or 0.0)} mph"
            if self.wind_direction_text:
                summary += f" {self.wind_direction_text}"
        return summary

    @property
    def location_summary(self) -> str:
        if self.course_name:
            return self.course_name
        if self.location_name:
            return self.location_name
        return "Unknown Location"
