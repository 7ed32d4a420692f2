from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .period import Day, TimeSlot, parse_day, parse_slot


@dataclass(frozen=True)
class Lesson:
    course_id: int
    professor_id: int
    classroom_number: str
    day: Day
    time_slot: TimeSlot
    # Issued by the mutator on a successful add; None for a bare request
    id: int | None = None

    def __post_init__(self) -> None:
        # Labels are normalised to grid members; anything off the grid raises ValueError
        object.__setattr__(self, "day", parse_day(self.day))
        object.__setattr__(self, "time_slot", parse_slot(self.time_slot))

    @property
    def professor_key(self) -> Tuple[int, Day, TimeSlot]:
        return (self.professor_id, self.day, self.time_slot)

    @property
    def classroom_key(self) -> Tuple[str, Day, TimeSlot]:
        return (self.classroom_number, self.day, self.time_slot)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "courseId": self.course_id,
            "professorId": self.professor_id,
            "classroomNumber": self.classroom_number,
            "dayOfWeek": self.day.value,
            "timeSlot": self.time_slot.value,
        }
