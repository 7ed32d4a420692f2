# Re-export common types
from .classroom import Classroom
from .conflict import ConflictKind, FailureKind, MutationResult, ScheduleConflict
from .course import Course, CourseType, parse_course_type
from .lesson import Lesson
from .period import DAYS, TIME_SLOTS, WEEKLY_SLOTS, Day, TimeSlot, parse_day, parse_slot
from .professor import Professor

__all__ = [
    "Professor",
    "Classroom",
    "Course",
    "CourseType",
    "Lesson",
    "Day",
    "TimeSlot",
    "DAYS",
    "TIME_SLOTS",
    "WEEKLY_SLOTS",
    "ConflictKind",
    "FailureKind",
    "ScheduleConflict",
    "MutationResult",
    "parse_day",
    "parse_slot",
    "parse_course_type",
]
