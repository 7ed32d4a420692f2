from .queries import (
    find_available_classrooms,
    get_classroom_utilization,
    get_most_popular_course_type,
    get_professor_schedule,
)

__all__ = [
    "find_available_classrooms",
    "get_professor_schedule",
    "get_classroom_utilization",
    "get_most_popular_course_type",
]
