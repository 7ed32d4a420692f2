from __future__ import annotations

from collections import Counter
from typing import Tuple

from ..models.lesson import Lesson
from ..models.period import Day, TimeSlot


class OccupancyLedger:
    def __init__(self):
        # Count lessons per (professor, day, slot) and (classroom, day, slot)
        self.professor_busy: Counter = Counter()
        self.classroom_busy: Counter = Counter()

    def professor_count(self, professor_id: int, day: Day, slot: TimeSlot) -> int:
        return self.professor_busy.get((professor_id, day, slot), 0)

    def classroom_count(self, classroom: str, day: Day, slot: TimeSlot) -> int:
        return self.classroom_busy.get((classroom, day, slot), 0)

    def can_place(self, lesson: Lesson, exclude: Lesson | None = None) -> bool:
        prof = self.professor_count(*lesson.professor_key)
        room = self.classroom_count(*lesson.classroom_key)
        if exclude is not None:
            if exclude.professor_key == lesson.professor_key:
                prof -= 1
            if exclude.classroom_key == lesson.classroom_key:
                room -= 1
        return prof <= 0 and room <= 0

    def place(self, lesson: Lesson) -> None:
        self.professor_busy[lesson.professor_key] += 1
        self.classroom_busy[lesson.classroom_key] += 1

    def remove(self, lesson: Lesson) -> None:
        _decrement(self.professor_busy, lesson.professor_key)
        _decrement(self.classroom_busy, lesson.classroom_key)


def _decrement(counter: Counter, key: Tuple) -> None:
    if counter[key] <= 1:
        counter.pop(key, None)
    else:
        counter[key] -= 1
