from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Tuple

from ..models.classroom import Classroom
from ..models.course import Course
from ..models.lesson import Lesson
from ..models.professor import Professor
from .registry import OccupancyLedger

logger = logging.getLogger(__name__)


class EntityStore:
    """Reference data plus the authoritative lesson collection.

    Holds no validation logic. Duplicate registrations are accepted and
    lookups return the first match in registration order.
    """

    def __init__(self):
        self.professors: List[Professor] = []
        self.classrooms: List[Classroom] = []
        self.courses: List[Course] = []
        self._lessons: List[Lesson] = []
        self._next_id = 0
        self.ledger = OccupancyLedger()

    # Reference data

    def add_professor(self, professor: Professor) -> None:
        if self.find_professor(professor.id) is not None:
            logger.warning(f"Duplicate professor id {professor.id} registered")
        self.professors.append(professor)

    def add_classroom(self, classroom: Classroom) -> None:
        if self.find_classroom(classroom.number) is not None:
            logger.warning(f"Duplicate classroom {classroom.number} registered")
        self.classrooms.append(classroom)

    def add_course(self, course: Course) -> None:
        if self.find_course(course.id) is not None:
            logger.warning(f"Duplicate course id {course.id} registered")
        self.courses.append(course)

    def find_professor(self, professor_id: int) -> Professor | None:
        return next((p for p in self.professors if p.id == professor_id), None)

    def find_classroom(self, number: str) -> Classroom | None:
        return next((c for c in self.classrooms if c.number == number), None)

    def find_course(self, course_id: int) -> Course | None:
        return next((c for c in self.courses if c.id == course_id), None)

    # Lessons

    def next_lesson_id(self) -> int:
        lesson_id = self._next_id
        self._next_id += 1
        return lesson_id

    def append_lesson(self, lesson: Lesson) -> None:
        self._lessons.append(lesson)
        self.ledger.place(lesson)

    def find_lesson(self, lesson_id: int) -> Lesson | None:
        return next((x for x in self._lessons if x.id == lesson_id), None)

    def remove_lesson(self, lesson_id: int) -> Lesson | None:
        for i, lesson in enumerate(self._lessons):
            if lesson.id == lesson_id:
                del self._lessons[i]
                self.ledger.remove(lesson)
                return lesson
        return None

    def move_lesson(self, lesson_id: int, classroom_number: str) -> Lesson | None:
        # Swap the record at the same position; id and storage order are kept
        for i, lesson in enumerate(self._lessons):
            if lesson.id == lesson_id:
                moved = replace(lesson, classroom_number=classroom_number)
                self.ledger.remove(lesson)
                self._lessons[i] = moved
                self.ledger.place(moved)
                return moved
        return None

    def lessons(self) -> Tuple[Lesson, ...]:
        return tuple(self._lessons)

    def iter_lessons(self) -> Iterable[Lesson]:
        return iter(self._lessons)

    @property
    def lesson_count(self) -> int:
        return len(self._lessons)
