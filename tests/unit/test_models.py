from __future__ import annotations

from datetime import datetime

import pytest

from gp_cli.core.models import (
    DrillCategory,
    DrillRecord,
    ExportFormat,
    ScoringType,
    SessionRecord,
    wind_direction_text,
)


def test_category_from_display_name_is_case_insensitive() -> None:
    assert DrillCategory.from_display_name("Putting") is DrillCategory.PUTTING
    assert DrillCategory.from_display_name("DRIVER") is DrillCategory.DRIVER
    assert DrillCategory.from_display_name("irons") is DrillCategory.IRONS


def test_category_from_display_name_unknown() -> None:
    assert DrillCategory.from_display_name("InvalidCategory") is None
    assert DrillCategory.from_display_name(" Putting") is None


def test_scored_success_rate_is_clamped() -> None:
    drill = DrillRecord.scored("d", "d", DrillCategory.PUTTING, max_score=10, actual_score=8)
    assert drill.success_rate == pytest.approx(0.8)
    assert drill.success_percentage == 80
    over = DrillRecord.scored("d", "d", DrillCategory.PUTTING, max_score=5, actual_score=7)
    assert over.success_rate == 1.0
    negative = DrillRecord.scored("d", "d", DrillCategory.PUTTING, max_score=5, actual_score=-1)
    assert negative.success_rate == 0.0


def test_scored_success_rate_without_max_is_zero() -> None:
    drill = DrillRecord("d", "d", DrillCategory.CHIPPING, ScoringType.SCORED, max_score=0, actual_score=3)
    assert drill.success_rate == 0.0
    assert drill.display_score == "3/0"
    missing = DrillRecord("d", "d", DrillCategory.CHIPPING, ScoringType.SCORED)
    assert missing.display_score == "0/0"


def test_completion_success_rate() -> None:
    done = DrillRecord.completion("d", "d", DrillCategory.PITCHING, is_completed=True)
    not_done = DrillRecord.completion("d", "d", DrillCategory.PITCHING, is_completed=False)
    assert done.success_rate == 1.0
    assert done.display_score == "Completed"
    assert not_done.success_rate == 0.0
    assert not_done.display_score == "Not Completed"


def test_drill_ids_are_unique() -> None:
    first = DrillRecord.completion("d", "d", DrillCategory.PITCHING, is_completed=True)
    second = DrillRecord.completion("d", "d", DrillCategory.PITCHING, is_completed=True)
    assert first.id != second.id


def test_session_average_success_percentage() -> None:
    session = SessionRecord(date=datetime(2024, 1, 15, 9, 30))
    assert session.average_success_percentage == 0
    session.drills = [
        DrillRecord.scored("a", "a", DrillCategory.PUTTING, max_score=10, actual_score=8),
        DrillRecord.completion("b", "b", DrillCategory.DRIVER, is_completed=False),
        DrillRecord.completion("c", "c", DrillCategory.DRIVER, is_completed=True),
    ]
    assert session.total_drills == 3
    assert session.average_success_percentage == 60


def test_weather_summary() -> None:
    session = SessionRecord(
        date=datetime(2024, 1, 15),
        temperature=72.5,
        weather_condition="Clear",
        wind_speed=8.4,
        wind_direction_text="NE",
    )
    assert session.has_weather_data
    assert session.weather_summary == "73°F, Clear, 8 mph NE"


def test_weather_summary_without_data() -> None:
    assert SessionRecord(date=datetime(2024, 1, 15), temperature=70.0).weather_summary == "No weather data"


def test_location_summary_precedence() -> None:
    session = SessionRecord(date=datetime(2024, 1, 15))
    assert session.location_summary == "Unknown Location"
    session.location_name = "Austin, TX"
    assert session.location_summary == "Austin, TX"
    session.course_name = "Lions Municipal"
    assert session.has_course_data
    assert session.location_summary == "Lions Municipal"


def test_has_location_data_requires_both_coordinates() -> None:
    session = SessionRecord(date=datetime(2024, 1, 15), latitude=30.0)
    assert not session.has_location_data
    session.longitude = -97.0
    assert session.has_location_data


@pytest.mark.parametrize(
    "degrees, expected",
    [(None, None), (0, "N"), (45, "NE"), (90, "E"), (200, "SSW"), (350, "N"), (360, "N")],
)
def test_wind_direction_text(degrees, expected) -> None:
    assert wind_direction_text(degrees) == expected


def test_export_format_metadata() -> None:
    assert ExportFormat.CSV.file_extension == "csv"
    assert ExportFormat.CSV.mime_type == "text/csv"
    assert ExportFormat.JSON.file_extension == "json"
    assert ExportFormat.JSON.mime_type == "application/json"
