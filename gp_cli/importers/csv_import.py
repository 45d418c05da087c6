"""CSV session import with schema tolerance and duplicate suppression."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from gp_cli.core.constants import CSV_COLUMNS, CSV_FIELD_COUNT, REQUIRED_HEADER_TERMS
from gp_cli.core.models import DrillCategory, DrillRecord, ScoringType, SessionRecord
from gp_cli.core.store import SessionRepository
from gp_cli.utils.csv_line import parse_csv_line
from gp_cli.utils.dates import parse_flexible_date, same_day
from gp_cli.utils.formatting import format_import_summary

logger = logging.getLogger(__name__)


class ImportErrorKind(str, Enum):
    INVALID_FILE_FORMAT = "invalidFileFormat"
    EMPTY_FILE = "emptyFile"
    INVALID_HEADER = "invalidHeader"
    INVALID_DATE_FORMAT = "invalidDateFormat"
    INVALID_SCORE_FORMAT = "invalidScoreFormat"
    DUPLICATE_SESSION = "duplicateSession"
    UNKNOWN_CATEGORY = "unknownCategory"

    @property
    def description(self) -> str:
        return _ERROR_DESCRIPTIONS[self]


_ERROR_DESCRIPTIONS = {
    ImportErrorKind.INVALID_FILE_FORMAT: "Invalid file format. Please select a UTF-8 CSV file.",
    ImportErrorKind.EMPTY_FILE: "The selected file is empty.",
    ImportErrorKind.INVALID_HEADER: (
        "Invalid CSV header. Expected columns including Session Date, Drill Name and Category."
    ),
    ImportErrorKind.INVALID_DATE_FORMAT: "Invalid date format in CSV file.",
    ImportErrorKind.INVALID_SCORE_FORMAT: "Invalid score format in CSV file.",
    ImportErrorKind.DUPLICATE_SESSION: "Some sessions already exist and will be skipped.",
    ImportErrorKind.UNKNOWN_CATEGORY: "Unknown drill category found in CSV file.",
}


class DataImportError(RuntimeError):
    """Raised when an import cannot proceed at all."""

    def __init__(self, kind: ImportErrorKind) -> None:
        super().__init__(kind.description)
        self.kind = kind


@dataclass(frozen=True)
class ImportResult:
    """Outcome of one import call."""

    sessions_imported: int = 0
    drills_imported: int = 0
    duplicates_skipped: int = 0
    errors: Tuple[ImportErrorKind, ...] = field(default_factory=tuple)

    @property
    def summary(self) -> str:
        return format_import_summary(
            self.sessions_imported,
            self.drills_imported,
            self.duplicates_skipped,
            len(self.errors),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sessionsImported": self.sessions_imported,
            "drillsImported": self.drills_imported,
            "duplicatesSkipped": self.duplicates_skipped,
            "errors": [kind.value for kind in self.errors],
        }


@dataclass(frozen=True)
class CsvRow:
    """One flat import row; every field is the raw unescaped text."""

    session_date: str = ""
    session_notes: str = ""
    temperature: str = ""
    weather_condition: str = ""
    weather_description: str = ""
    humidity: str = ""
    feels_like: str = ""
    wind_speed: str = ""
    wind_direction: str = ""
    wind_direction_text: str = ""
    location_name: str = ""
    location_type: str = ""
    location_latitude: str = ""
    location_longitude: str = ""
    drill_name: str = ""
    drill_description: str = ""
    category: str = ""
    max_score: str = ""
    actual_score: str = ""
    success_rate: str = ""
    drill_notes: str = ""
    completed_at: str = ""


_ATTRIBUTE_BY_LABEL = {label.lower(): attribute for label, attribute in CSV_COLUMNS}
_POSITIONAL_COLUMNS = {attribute: index for index, (_, attribute) in enumerate(CSV_COLUMNS)}


@dataclass(frozen=True)
class ColumnSchema:
    """Where each CsvRow attribute lives in a data line."""

    columns: Dict[str, int]
    width: int

    @classmethod
    def from_header(cls, header_line: str) -> "ColumnSchema":
        labels = [label.strip().lower() for label in parse_csv_line(header_line)]
        named: Dict[str, int] = {}
        for index, label in enumerate(labels):
            attribute = _ATTRIBUTE_BY_LABEL.get(label)
            if attribute is not None and attribute not in named:
                named[attribute] = index

        # Loose labels such as "Drill Category" still name a known column.
        claimed = set(named.values())
        for label_name, attribute in _ATTRIBUTE_BY_LABEL.items():
            if attribute in named:
                continue
            for index, label in enumerate(labels):
                if index not in claimed and label_name in label:
                    named[attribute] = index
                    claimed.add(index)
                    break

        if len(named) == CSV_FIELD_COUNT:
            return cls(columns=named, width=len(labels))
        if len(labels) >= CSV_FIELD_COUNT:
            # Wide but unrecognised headers keep the extended column order.
            return cls(columns=dict(_POSITIONAL_COLUMNS), width=CSV_FIELD_COUNT)
        return cls(columns=named, width=len(labels))

    def row_from_fields(self, fields: Sequence[str]) -> Optional[CsvRow]:
        """Map tokenized fields to a CsvRow, or None when the line is too short."""
        if len(fields) < self.width:
            return None
        values = {attribute: fields[index] for attribute, index in self.columns.items() if index < len(fields)}
        return CsvRow(**values)


def _decode(data: Union[bytes, str]) -> str:
    if isinstance(data, str):
        return data.lstrip("\ufeff")
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DataImportError(ImportErrorKind.INVALID_FILE_FORMAT) from exc


def _validate_header(header_line: str) -> None:
    header = header_line.replace('"', "").lower()
    if not all(term in header for term in REQUIRED_HEADER_TERMS):
        raise DataImportError(ImportErrorKind.INVALID_HEADER)


def parse_rows(lines: Sequence[str], schema: ColumnSchema) -> List[CsvRow]:
    """Tokenize data lines, silently dropping ones narrower than the header."""
    rows: List[CsvRow] = []
    for line in lines:
        row = schema.row_from_fields(parse_csv_line(line))
        if row is None:
            logger.debug("Skipping short CSV row: %s", line)
            continue
        rows.append(row)
    return rows


def group_rows(rows: Sequence[CsvRow]) -> Dict[Tuple[str, str], List[CsvRow]]:
    """Group rows by raw (session date, session notes) text, in file order."""
    groups: Dict[Tuple[str, str], List[CsvRow]] = {}
    for row in rows:
        groups.setdefault((row.session_date, row.session_notes), []).append(row)
    return groups


def _parse_int(value: str) -> Optional[int]:
    text = value.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def _parse_float(value: str) -> Optional[float]:
    text = value.strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    # nan and inf have no JSON representation.
    return number if math.isfinite(number) else None


def _text_or_none(value: str) -> Optional[str]:
    return value if value else None


def is_duplicate(session_date: datetime, notes: Optional[str], existing: Sequence[SessionRecord]) -> bool:
    """Same calendar day and identical notes (absent and empty are equal)."""
    return any(
        same_day(session.date, session_date) and (session.notes or None) == notes
        for session in existing
    )


def session_from_row(row: CsvRow, session_date: datetime) -> SessionRecord:
    """Build a drill-less session from a group's first row."""
    return SessionRecord(
        date=session_date,
        notes=_text_or_none(row.session_notes),
        temperature=_parse_float(row.temperature),
        weather_condition=_text_or_none(row.weather_condition),
        weather_description=_text_or_none(row.weather_description),
        humidity=_parse_int(row.humidity),
        feels_like_temperature=_parse_float(row.feels_like),
        wind_speed=_parse_float(row.wind_speed),
        wind_direction_degrees=_parse_int(row.wind_direction),
        wind_direction_text=_text_or_none(row.wind_direction_text),
        location_name=_text_or_none(row.location_name),
        course_type=_text_or_none(row.location_type),
        latitude=_parse_float(row.location_latitude),
        longitude=_parse_float(row.location_longitude),
    )


def drill_from_row(row: CsvRow) -> DrillRecord:
    """Build a drill from a row; raises ValueError for an unknown category."""
    category = DrillCategory.from_display_name(row.category)
    if category is None:
        raise ValueError(f"Unknown drill category: {row.category!r}")

    max_score = _parse_int(row.max_score)
    actual_score = _parse_int(row.actual_score)
    scoring_type = ScoringType.SCORED if max_score is not None or actual_score is not None else ScoringType.COMPLETION

    is_completed: Optional[bool] = None
    if scoring_type is ScoringType.COMPLETION:
        is_completed = row.success_rate != "" and row.success_rate != "0%"

    return DrillRecord(
        name=row.drill_name,
        description=row.drill_description or row.drill_name,
        category=category,
        scoring_type=scoring_type,
        max_score=max_score,
        actual_score=actual_score,
        is_completed=is_completed,
        notes=_text_or_none(row.drill_notes),
        completed_at=parse_flexible_date(row.completed_at) or datetime.now(),
    )


def import_csv(data: Union[bytes, str], store: SessionRepository) -> ImportResult:
    """Import CSV sessions into the store.

    Raises DataImportError only for unreadable, empty or header-less input,
    before touching the store. Bad dates and unknown categories are collected
    in the result while the remaining groups are still imported. The store is
    saved once at the end.
    """
    text = _decode(data)
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise DataImportError(ImportErrorKind.EMPTY_FILE)

    _validate_header(lines[0])
    schema = ColumnSchema.from_header(lines[0])
    groups = group_rows(parse_rows(lines[1:], schema))

    existing = store.list_all()
    sessions_imported = 0
    drills_imported = 0
    duplicates_skipped = 0
    errors: List[ImportErrorKind] = []

    for (raw_date, raw_notes), rows in groups.items():
        session_date = parse_flexible_date(raw_date)
        if session_date is None:
            logger.info("Skipping session with unparseable date %r", raw_date)
            errors.append(ImportErrorKind.INVALID_DATE_FORMAT)
            continue

        notes = _text_or_none(raw_notes)
        if is_duplicate(session_date, notes, existing):
            logger.debug("Skipping duplicate session %r (%r)", raw_date, raw_notes)
            duplicates_skipped += 1
            continue

        session = session_from_row(rows[0], session_date)
        for row in rows:
            if not row.drill_name:
                continue
            try:
                drill = drill_from_row(row)
            except ValueError as exc:
                logger.info("Skipping drill %r: %s", row.drill_name, exc)
                errors.append(ImportErrorKind.UNKNOWN_CATEGORY)
                continue
            session.drills.append(drill)
            drills_imported += 1

        store.add(session)
        sessions_imported += 1

    store.save()
    logger.debug(
        "Imported %d sessions, %d drills; %d duplicates, %d errors",
        sessions_imported,
        drills_imported,
        duplicates_skipped,
        len(errors),
    )

    return ImportResult(
        sessions_imported=sessions_imported,
        drills_imported=drills_imported,
        duplicates_skipped=duplicates_skipped,
        errors=tuple(errors),
    )
