from __future__ import annotations

from collections import Counter
from typing import List

from ..data.store import EntityStore
from ..models.course import CourseType
from ..models.lesson import Lesson
from ..models.period import WEEKLY_SLOTS, Day, TimeSlot, parse_day, parse_slot


def find_available_classrooms(store: EntityStore, time_slot: TimeSlot | str, day: Day | str) -> List[str]:
    slot = parse_slot(time_slot)
    d = parse_day(day)
    return [c.number for c in store.classrooms if store.ledger.classroom_count(c.number, d, slot) == 0]


def get_professor_schedule(store: EntityStore, professor_id: int) -> List[Lesson]:
    return [x for x in store.iter_lessons() if x.professor_id == professor_id]


def get_classroom_utilization(store: EntityStore, classroom_number: str) -> float:
    """Percentage of the 25-slot week in which the classroom is booked.

    Counts distinct (day, slot) pairs rather than lesson records, which is the
    same number while no two lessons share a classroom booking.
    """
    occupied = {
        (x.day, x.time_slot) for x in store.iter_lessons() if x.classroom_number == classroom_number
    }
    return 100.0 * len(occupied) / WEEKLY_SLOTS


def get_most_popular_course_type(store: EntityStore) -> CourseType:
    counts: Counter = Counter()
    for x in store.iter_lessons():
        course = store.find_course(x.course_id)
        if course is not None:
            counts[course.type] += 1
    leader, best = CourseType.LECTURE, 0
    for t in CourseType:
        if counts[t] > best:
            leader, best = t, counts[t]
    return leader
