from __future__ import annotations

from pathlib import Path

from campus_timetable.models import Day, Lesson, TimeSlot
from campus_timetable.validate.checks import audit_store
from campus_timetable.validate.report import format_validation_report, write_validation_report


def test_audit_of_clean_store(store, seeded) -> None:
    report = audit_store(store)
    assert report["lesson_count"] == 5
    assert report["clash_count"] == 0
    assert report["duplicate_lesson_ids"] == []
    assert report["dangling_references"] == []
    assert report["utilization_by_classroom"]["201"] == 8.0


def test_audit_flags_clashes_written_around_the_mutator(store) -> None:
    # Bypass validation to prove the audit catches what the mutator prevents
    store.append_lesson(Lesson(1, 1, "101", Day.MONDAY, TimeSlot.FIRST, id=0))
    store.append_lesson(Lesson(2, 1, "101", Day.MONDAY, TimeSlot.FIRST, id=0))
    report = audit_store(store)
    assert report["clash_count"] == 2
    assert report["professor_clashes"] == ["1:Monday:8:30-10:00"]
    assert report["classroom_clashes"] == ["101:Monday:8:30-10:00"]
    assert report["duplicate_lesson_ids"] == [0]
    # Distinct occupancy, not raw lesson count
    assert report["utilization_by_classroom"]["101"] == 4.0


def test_audit_reports_dangling_references(store, mutator) -> None:
    mutator.add_lesson(Lesson(404, 9, "999", Day.MONDAY, TimeSlot.FIRST))
    dangling = audit_store(store)["dangling_references"]
    assert len(dangling) == 3


def test_report_text_and_file(store, seeded, tmp_path: Path) -> None:
    report = audit_store(store)
    text = format_validation_report(report)
    assert "clash_count: 0" in text
    assert "201: 8.00%" in text
    path = write_validation_report(report, tmp_path / "out")
    assert path.exists()
