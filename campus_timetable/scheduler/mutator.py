from __future__ import annotations

import logging
from dataclasses import replace

from ..data.store import EntityStore
from ..models.conflict import MutationResult
from ..models.lesson import Lesson
from ..validate.checks import ConflictValidator


class ScheduleMutator:
    """Add, reassign and cancel lessons without ever breaking the clash invariants.

    Every change is validated in full before the store is touched, so a
    rejected call leaves the store exactly as it was. Lesson ids are issued
    only for committed adds, starting at 0.
    """

    def __init__(self, store: EntityStore, validator: ConflictValidator | None = None):
        self.store = store
        self.validator = validator or ConflictValidator(store)
        self.logger = logging.getLogger(__name__)

    def add_lesson(self, lesson: Lesson) -> MutationResult:
        conflict = self.validator.validate(lesson)
        if conflict is not None:
            self.logger.warning(
                f"Rejected lesson course={lesson.course_id} prof={lesson.professor_id} "
                f"room={lesson.classroom_number} {lesson.day.value} {lesson.time_slot.value}: "
                f"{conflict.kind.value} with lesson {conflict.lesson.id}"
            )
            return MutationResult.rejected(conflict)
        stored = replace(lesson, id=self.store.next_lesson_id())
        self.store.append_lesson(stored)
        self.logger.info(
            f"Add lesson {stored.id}: course={stored.course_id} prof={stored.professor_id} "
            f"room={stored.classroom_number} {stored.day.value} {stored.time_slot.value}"
        )
        return MutationResult.committed(stored)

    def reassign_classroom(self, lesson_id: int, new_classroom_number: str) -> MutationResult:
        lesson = self.store.find_lesson(lesson_id)
        if lesson is None:
            self.logger.warning(f"Reassign: no lesson with id {lesson_id}")
            return MutationResult.not_found()
        candidate = replace(lesson, classroom_number=new_classroom_number)
        conflict = self.validator.validate(candidate, exclude=lesson_id)
        if conflict is not None:
            self.logger.warning(
                f"Reassign lesson {lesson_id} -> room {new_classroom_number} rejected: "
                f"{conflict.kind.value} with lesson {conflict.lesson.id}"
            )
            return MutationResult.rejected(conflict)
        previous = lesson.classroom_number
        moved = self.store.move_lesson(lesson_id, new_classroom_number)
        self.logger.info(f"Reassign lesson {lesson_id}: room {previous} -> {new_classroom_number}")
        return MutationResult.committed(moved)

    def cancel_lesson(self, lesson_id: int) -> MutationResult:
        removed = self.store.remove_lesson(lesson_id)
        if removed is None:
            self.logger.warning(f"Cancel: no lesson with id {lesson_id}")
            return MutationResult.not_found()
        self.logger.info(f"Cancel lesson {lesson_id}")
        return MutationResult.committed(removed)
