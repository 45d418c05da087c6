from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List

import pytest
from typer.testing import CliRunner

from gp_cli.core.models import DrillCategory, DrillRecord, SessionRecord
from gp_cli.core.store import InMemorySessionStore

LEGACY_CSV = "\n".join(
    [
        "Session Date,Session Notes,Drill Name,Drill Description,Category,Max Score,Actual Score,Success Rate,Drill Notes,Completed At",
        '"Jan 15, 2024 at 9:30 AM","Morning practice session","10 from 3′","Make 10 putts from 3 feet","Putting","10","8","80.0%","Good putting today","Jan 15, 2024 at 9:45 AM"',
        '"Jan 15, 2024 at 9:30 AM","Morning practice session","Chip to 3-Foot Circle","Chip balls to land within 3 feet of pin","Chipping","5","3","60.0%","","Jan 15, 2024 at 10:00 AM"',
        '"Jan 20, 2024 at 2:15 PM","","Alignment-stick pitches","Practice pitching using alignment sticks for proper setup","Pitching","","","100%","Felt more consistent","Jan 20, 2024 at 2:30 PM"',
        '"Jan 20, 2024 at 2:15 PM","","Balance & Setup Drills","Practice proper stance and balance throughout swing","Driver","","","0%","Need more work on balance","Jan 20, 2024 at 2:45 PM"',
        '"Jan 25, 2024 at 4:00 PM","Focused on iron accuracy","7-iron on line (out of 5)","Hit 5 seven-iron shots on target line","Irons","5","5","100.0%","Perfect session!","Jan 25, 2024 at 4:20 PM"',
    ]
)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def legacy_csv() -> str:
    return LEGACY_CSV


@pytest.fixture()
def sample_sessions() -> List[SessionRecord]:
    morning = SessionRecord(
        date=datetime(2024, 1, 15, 9, 30),
        notes="Morning practice session",
        temperature=72.5,
        weather_condition="Clear",
        weather_description="clear sky",
        humidity=40,
        feels_like_temperature=71.0,
        wind_speed=8.2,
        wind_direction_degrees=45,
        wind_direction_text="NE",
        location_name="Austin, TX",
        latitude=30.27,
        longitude=-97.74,
        course_type="Driving Range",
    )
    morning.drills = [
        DrillRecord.scored(
            name="10 from 3′",
            description="Make 10 putts from 3 feet",
            category=DrillCategory.PUTTING,
            max_score=10,
            actual_score=8,
            notes="Good putting today",
            completed_at=datetime(2024, 1, 15, 9, 45),
        ),
        DrillRecord.scored(
            name="Chip to 3-Foot Circle",
            description="Chip balls to land within 3 feet of pin",
            category=DrillCategory.CHIPPING,
            max_score=5,
            actual_score=3,
            completed_at=datetime(2024, 1, 15, 10, 0),
        ),
    ]

    afternoon = SessionRecord(date=datetime(2024, 1, 20, 14, 15))
    afternoon.drills = [
        DrillRecord.completion(
            name="Alignment-stick pitches",
            description="Practice pitching using alignment sticks",
            category=DrillCategory.PITCHING,
            is_completed=True,
            notes="Felt more consistent",
            completed_at=datetime(2024, 1, 20, 14, 30),
        ),
        DrillRecord.completion(
            name='Balance & "Setup" Drills',
            description="Stance and balance, throughout the swing",
            category=DrillCategory.DRIVER,
            is_completed=False,
            completed_at=datetime(2024, 1, 20, 14, 45),
        ),
    ]

    irons = SessionRecord(date=datetime(2024, 1, 25, 16, 0), notes="Focused on iron accuracy")
    irons.drills = [
        DrillRecord.scored(
            name="7-iron on line (out of 5)",
            description="Hit 5 seven-iron shots on target line",
            category=DrillCategory.IRONS,
            max_score=5,
            actual_score=5,
            notes="Perfect session!",
            completed_at=datetime(2024, 1, 25, 16, 20),
        )
    ]
    return [morning, afternoon, irons]


@pytest.fixture()
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture()
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    monkeypatch.setenv("GP_CONFIG_FILE", str(tmp_path / "config.toml"))
    monkeypatch.setenv("GP_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("GP_OUTPUT_DIR", str(tmp_path / "exports"))
    monkeypatch.delenv("GP_SESSIONS_FILE", raising=False)
    return tmp_path
