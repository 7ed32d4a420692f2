from __future__ import annotations

import json
from pathlib import Path

import pytest

from campus_timetable.config import load_config
from campus_timetable.data.loader import load_data, parse_data, parse_lesson, populate_store
from campus_timetable.data.store import EntityStore
from campus_timetable.models import CourseType, Day, TimeSlot
from campus_timetable.scheduler.mutator import ScheduleMutator

ROOT = Path(__file__).resolve().parents[1]


def test_sample_data_loads() -> None:
    data = load_data(ROOT / "data" / "sample_week.json")
    assert [p.id for p in data.professors] == [1, 2, 3]
    assert data.classrooms[1].has_projector is False
    assert data.courses[4].type is CourseType.SEMINAR
    assert len(data.lessons) == 5


def test_parse_lesson_accepts_snake_case() -> None:
    x = parse_lesson(
        {"course_id": 1, "professor_id": 2, "classroom_number": 101, "day": "Friday", "slot": "14:00-15:30"}
    )
    assert x.classroom_number == "101"
    assert (x.day, x.time_slot) == (Day.FRIDAY, TimeSlot.FOURTH)


def test_parse_lesson_missing_field() -> None:
    with pytest.raises(ValueError):
        parse_lesson({"courseId": 1})


def test_populate_reports_rejections() -> None:
    doc = json.loads((ROOT / "data" / "sample_week.json").read_text(encoding="utf-8"))
    doc["lessons"].append(dict(doc["lessons"][0], classroomNumber="202"))
    store = EntityStore()
    audit = populate_store(store, ScheduleMutator(store), parse_data(doc))
    assert store.lesson_count == 5
    assert audit[-1].startswith("Rejected (ProfessorConflict, clashes with lesson 0)")


def test_config_overrides_and_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("CAMPUS_TIMETABLE_LOG_LEVEL", "debug")
    cfg = load_config(tmp_path, {"outputs_dir": str(tmp_path / "o"), "data_file": None})
    assert cfg.log_level == "DEBUG"
    assert cfg.outputs_dir == tmp_path / "o"
    assert cfg.data_file == tmp_path / "data" / "sample_week.json"
    with pytest.raises(ValueError):
        load_config(tmp_path, {"colour": "blue"})
