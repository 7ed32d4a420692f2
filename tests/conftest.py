from __future__ import annotations

import pytest

from campus_timetable.data.store import EntityStore
from campus_timetable.models import Classroom, Course, CourseType, Day, Lesson, Professor, TimeSlot
from campus_timetable.scheduler.mutator import ScheduleMutator


@pytest.fixture
def store() -> EntityStore:
    s = EntityStore()
    s.add_professor(Professor(1, "Prof. Ivanenko", "Programming"))
    s.add_professor(Professor(2, "Prof. Petrenko", "Mathematics"))
    s.add_professor(Professor(3, "Prof. Sydorenko", "Programming"))
    for number, cap, proj in [("101", 30, True), ("102", 25, False), ("201", 40, True), ("202", 35, True)]:
        s.add_classroom(Classroom(number, cap, proj))
    s.add_course(Course(1, "Programming Languages", CourseType.LECTURE))
    s.add_course(Course(2, "Programming Languages", CourseType.LAB))
    s.add_course(Course(3, "Higher Mathematics", CourseType.LECTURE))
    s.add_course(Course(4, "Higher Mathematics", CourseType.PRACTICE))
    s.add_course(Course(5, "Algorithms", CourseType.SEMINAR))
    return s


@pytest.fixture
def mutator(store: EntityStore) -> ScheduleMutator:
    return ScheduleMutator(store)


@pytest.fixture
def seeded(store: EntityStore, mutator: ScheduleMutator) -> ScheduleMutator:
    # Lesson ids 0..4
    for req in [
        Lesson(1, 1, "101", Day.MONDAY, TimeSlot.FIRST),
        Lesson(2, 1, "102", Day.MONDAY, TimeSlot.SECOND),
        Lesson(3, 2, "201", Day.TUESDAY, TimeSlot.FIRST),
        Lesson(4, 2, "201", Day.WEDNESDAY, TimeSlot.SECOND),
        Lesson(5, 3, "202", Day.THURSDAY, TimeSlot.THIRD),
    ]:
        assert mutator.add_lesson(req)
    return mutator
