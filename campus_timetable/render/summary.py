from __future__ import annotations

from typing import List

from ..analytics.queries import (
    find_available_classrooms,
    get_classroom_utilization,
    get_most_popular_course_type,
)
from ..data.store import EntityStore
from ..models.period import Day, TimeSlot


def summary_lines(store: EntityStore, day: Day = Day.MONDAY, slot: TimeSlot = TimeSlot.FIRST) -> List[str]:
    lines = [f"Lessons scheduled: {store.lesson_count}"]
    free = find_available_classrooms(store, slot, day)
    lines.append(f"Free classrooms {day.value} {slot.value}: {', '.join(free) or '-'}")
    lines.append("Classroom utilization:")
    for room in store.classrooms:
        lines.append(f"  {room.number}: {get_classroom_utilization(store, room.number):.2f}%")
    lines.append(f"Most popular course type: {get_most_popular_course_type(store).value}")
    return lines
