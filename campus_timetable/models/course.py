from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CourseType(str, Enum):
    # Lecture first: it is the fallback for the most-popular tally
    LECTURE = "Lecture"
    SEMINAR = "Seminar"
    LAB = "Lab"
    PRACTICE = "Practice"


def parse_course_type(value: CourseType | str) -> CourseType:
    if isinstance(value, CourseType):
        return value
    for t in CourseType:
        if t.value.lower() == str(value).strip().lower():
            return t
    raise ValueError(f"Unknown course type: {value!r}")


@dataclass(frozen=True)
class Course:
    id: int
    name: str
    type: CourseType
