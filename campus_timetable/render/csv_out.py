from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

from ..data.store import EntityStore
from ..models.lesson import Lesson
from ..models.period import DAYS, TIME_SLOTS, Day, TimeSlot

HEADER = "Classroom,Day,TimeSlot,LessonId,Course,Professor"


def csv_blocks(store: EntityStore) -> str:
    # One block per classroom, every cell of the weekly grid, blanks for free slots
    lines: List[str] = []
    seen: set[str] = set()
    for room in store.classrooms:
        if room.number in seen:
            continue
        seen.add(room.number)
        booked: Dict[Tuple[Day, TimeSlot], Lesson] = {}
        for x in store.iter_lessons():
            if x.classroom_number == room.number:
                booked.setdefault((x.day, x.time_slot), x)
        lines.append(HEADER)
        for d in DAYS:
            for s in TIME_SLOTS:
                a = booked.get((d, s))
                if a is None:
                    lines.append(f"{room.number},{d.value},{s.value},,,")
                    continue
                course = store.find_course(a.course_id)
                prof = store.find_professor(a.professor_id)
                course_name = f"{course.name} ({course.type.value})" if course else str(a.course_id)
                prof_name = prof.name if prof else str(a.professor_id)
                lines.append(f"{room.number},{d.value},{s.value},{a.id},{course_name},{prof_name}")
        lines.append("")  # blank line
    return "\n".join(lines)


def write_csv_blocks(text: str, outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / "timetable.csv"
    with path.open("w", encoding="utf-8") as f:
        f.write(text)
    return path
