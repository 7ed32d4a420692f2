from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .lesson import Lesson


class ConflictKind(str, Enum):
    PROFESSOR = "ProfessorConflict"
    CLASSROOM = "ClassroomConflict"


class FailureKind(str, Enum):
    PROFESSOR_CONFLICT = "ProfessorConflict"
    CLASSROOM_CONFLICT = "ClassroomConflict"
    NOT_FOUND = "NotFound"


@dataclass(frozen=True)
class ScheduleConflict:
    kind: ConflictKind
    lesson: Lesson

    @property
    def failure(self) -> FailureKind:
        return FailureKind(self.kind.value)


@dataclass(frozen=True)
class MutationResult:
    """Outcome of add/reassign/cancel. Truthy exactly when the change was committed."""

    ok: bool
    failure: FailureKind | None = None
    conflict: ScheduleConflict | None = None
    lesson: Lesson | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def committed(cls, lesson: Lesson | None = None) -> "MutationResult":
        return cls(True, lesson=lesson)

    @classmethod
    def rejected(cls, conflict: ScheduleConflict) -> "MutationResult":
        return cls(False, failure=conflict.failure, conflict=conflict)

    @classmethod
    def not_found(cls) -> "MutationResult":
        return cls(False, failure=FailureKind.NOT_FOUND)
