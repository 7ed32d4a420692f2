from __future__ import annotations

from collections import Counter
from typing import Dict, List

from ..analytics.queries import get_classroom_utilization
from ..data.store import EntityStore
from ..models.conflict import ConflictKind, ScheduleConflict
from ..models.lesson import Lesson


class ConflictValidator:
    """Decides whether a candidate placement collides with a stored lesson.

    Professor collisions win over classroom collisions, and within each kind
    the earliest stored lesson is reported. ``exclude`` names a lesson id that
    must not be compared against (a lesson being moved cannot clash with its
    own current booking). Has no side effects.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    def validate(self, candidate: Lesson, exclude: int | None = None) -> ScheduleConflict | None:
        excluded = self.store.find_lesson(exclude) if exclude is not None else None
        if self.store.ledger.can_place(candidate, excluded):
            return None
        others = [x for x in self.store.iter_lessons() if exclude is None or x.id != exclude]
        for existing in others:
            if existing.professor_key == candidate.professor_key:
                return ScheduleConflict(ConflictKind.PROFESSOR, existing)
        for existing in others:
            if existing.classroom_key == candidate.classroom_key:
                return ScheduleConflict(ConflictKind.CLASSROOM, existing)
        return None


def _fmt_key(key) -> str:
    owner, day, slot = key
    return f"{owner}:{day.value}:{slot.value}"


def audit_store(store: EntityStore) -> Dict[str, object]:
    report: Dict[str, object] = {}
    lessons = store.lessons()
    report["lesson_count"] = len(lessons)

    # Collisions
    professor_slots: Counter = Counter(x.professor_key for x in lessons)
    classroom_slots: Counter = Counter(x.classroom_key for x in lessons)
    professor_clashes = [_fmt_key(k) for k, c in professor_slots.items() if c > 1]
    classroom_clashes = [_fmt_key(k) for k, c in classroom_slots.items() if c > 1]
    report["clash_count"] = len(professor_clashes) + len(classroom_clashes)
    report["professor_clashes"] = professor_clashes
    report["classroom_clashes"] = classroom_clashes

    ids = Counter(x.id for x in lessons)
    report["duplicate_lesson_ids"] = sorted(i for i, c in ids.items() if i is not None and c > 1)

    # Lessons naming reference data that was never registered
    dangling: List[str] = []
    for x in lessons:
        if store.find_professor(x.professor_id) is None:
            dangling.append(f"lesson {x.id}: professor {x.professor_id}")
        if store.find_classroom(x.classroom_number) is None:
            dangling.append(f"lesson {x.id}: classroom {x.classroom_number}")
        if store.find_course(x.course_id) is None:
            dangling.append(f"lesson {x.id}: course {x.course_id}")
    report["dangling_references"] = dangling

    report["utilization_by_classroom"] = {
        c.number: round(get_classroom_utilization(store, c.number), 2) for c in store.classrooms
    }
    return report
