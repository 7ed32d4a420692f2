from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from ..models.classroom import Classroom
from ..models.course import Course, parse_course_type
from ..models.lesson import Lesson
from ..models.period import parse_day, parse_slot
from ..models.professor import Professor
from ..scheduler.mutator import ScheduleMutator
from .store import EntityStore


@dataclass
class LoadedData:
    professors: List[Professor] = field(default_factory=list)
    classrooms: List[Classroom] = field(default_factory=list)
    courses: List[Course] = field(default_factory=list)
    lessons: List[Lesson] = field(default_factory=list)


def _pick(raw: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    # Accept camelCase and snake_case spellings
    for k in keys:
        if k in raw:
            return raw[k]
    if default is not None:
        return default
    raise ValueError(f"Missing field {keys[0]!r} in {raw!r}")


def parse_lesson(raw: Dict[str, Any]) -> Lesson:
    return Lesson(
        course_id=int(_pick(raw, "courseId", "course_id")),
        professor_id=int(_pick(raw, "professorId", "professor_id")),
        classroom_number=str(_pick(raw, "classroomNumber", "classroom_number")),
        day=parse_day(_pick(raw, "dayOfWeek", "day_of_week", "day")),
        time_slot=parse_slot(_pick(raw, "timeSlot", "time_slot", "slot")),
    )


def parse_data(doc: Dict[str, Any]) -> LoadedData:
    return LoadedData(
        professors=[
            Professor(id=int(p["id"]), name=str(p["name"]), department=str(p.get("department", "")))
            for p in doc.get("professors", [])
        ],
        classrooms=[
            Classroom(
                number=str(c["number"]),
                capacity=int(c.get("capacity", 0)),
                has_projector=bool(_pick(c, "hasProjector", "has_projector", default=False)),
            )
            for c in doc.get("classrooms", [])
        ],
        courses=[
            Course(id=int(c["id"]), name=str(c["name"]), type=parse_course_type(c["type"]))
            for c in doc.get("courses", [])
        ],
        lessons=[parse_lesson(x) for x in doc.get("lessons", [])],
    )


def load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_data(path: Path) -> LoadedData:
    return parse_data(load_json(path))


def populate_store(store: EntityStore, mutator: ScheduleMutator, data: LoadedData) -> List[str]:
    """Register reference data, then submit every lesson request through ``mutator``.

    Returns audit lines; rejected requests are reported there, not raised.
    """
    logger = logging.getLogger(__name__)
    audit: List[str] = []
    for p in data.professors:
        store.add_professor(p)
    for c in data.classrooms:
        store.add_classroom(c)
    for c in data.courses:
        store.add_course(c)
    logger.info(
        f"Registered {len(data.professors)} professors, {len(data.classrooms)} classrooms, "
        f"{len(data.courses)} courses"
    )
    for req in data.lessons:
        res = mutator.add_lesson(req)
        where = f"course {req.course_id} prof {req.professor_id} room {req.classroom_number} {req.day.value} {req.time_slot.value}"
        if res:
            audit.append(f"Added lesson {res.lesson.id}: {where}")
        else:
            audit.append(f"Rejected ({res.failure.value}, clashes with lesson {res.conflict.lesson.id}): {where}")
    return audit
