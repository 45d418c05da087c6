from __future__ import annotations

import pytest

from gp_cli.core.models import DrillCategory, DrillRecord
from gp_cli.utils.formatting import format_import_summary, format_number, format_success_rate


def test_format_number() -> None:
    assert format_number(None) == ""
    assert format_number(72.5) == "72.5"
    assert format_number(45) == "45"
    assert format_number(0) == "0"


@pytest.mark.parametrize(
    "drill, expected",
    [
        (DrillRecord.scored("a", "a", DrillCategory.PUTTING, max_score=10, actual_score=8), "80.0%"),
        (DrillRecord.scored("a", "a", DrillCategory.PUTTING, max_score=3, actual_score=1), "33.3%"),
        (DrillRecord.completion("b", "b", DrillCategory.DRIVER, is_completed=True), "100%"),
        (DrillRecord.completion("b", "b", DrillCategory.DRIVER, is_completed=False), "0%"),
        (DrillRecord.scored("c", "c", DrillCategory.IRONS, max_score=0, actual_score=0), ""),
    ],
)
def test_format_success_rate(drill: DrillRecord, expected: str) -> None:
    assert format_success_rate(drill) == expected


def test_import_summary_nothing_imported() -> None:
    assert format_import_summary(0, 0, 4, 0) == "No new data was imported."


def test_import_summary_lists_nonzero_counts() -> None:
    assert format_import_summary(1, 3, 0, 2) == "1 session imported\n3 drills imported\n2 errors encountered"
