"""Static constants and mappings for the golf practice CLI."""

from __future__ import annotations

EXPORT_VERSION = "1.0"
EXPORT_FILE_PREFIX = "golf_practice_data"
STORE_VERSION = "1.0"

# (header label, CsvRow attribute) in export order.
CSV_COLUMNS = [
    ("Session Date", "session_date"),
    ("Session Notes", "session_notes"),
    ("Temperature", "temperature"),
    ("Weather Condition", "weather_condition"),
    ("Weather Description", "weather_description"),
    ("Humidity", "humidity"),
    ("Feels Like", "feels_like"),
    ("Wind Speed", "wind_speed"),
    ("Wind Direction", "wind_direction"),
    ("Wind Direction Text", "wind_direction_text"),
    ("Location Name", "location_name"),
    ("Location Type", "location_type"),
    ("Location Latitude", "location_latitude"),
    ("Location Longitude", "location_longitude"),
    ("Drill Name", "drill_name"),
    ("Drill Description", "drill_description"),
    ("Category", "category"),
    ("Max Score", "max_score"),
    ("Actual Score", "actual_score"),
    ("Success Rate", "success_rate"),
    ("Drill Notes", "drill_notes"),
    ("Completed At", "completed_at"),
]

CSV_HEADER = ",".join(label for label, _ in CSV_COLUMNS)
CSV_FIELD_COUNT = len(CSV_COLUMNS)

LEGACY_CSV_COLUMNS = [
    "Session Date",
    "Session Notes",
    "Drill Name",
    "Drill Description",
    "Category",
    "Max Score",
    "Actual Score",
    "Success Rate",
    "Drill Notes",
    "Completed At",
]

REQUIRED_HEADER_TERMS = ("session date", "drill name", "category")

WIND_DIRECTIONS = [
    "N",
    "NNE",
    "NE",
    "ENE",
    "E",
    "ESE",
    "SE",
    "SSE",
    "S",
    "SSW",
    "SW",
    "WSW",
    "W",
    "WNW",
    "NW",
    "NNW",
]

DATE_RANGE_LABELS = {
    "week": "Last 7 Days",
    "month": "Last 30 Days",
    "three-months": "Last 3 Months",
    "six-months": "Last 6 Months",
    "year": "Last Year",
    "all": "All Time",
}

MONTH_ABBREVIATIONS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]
