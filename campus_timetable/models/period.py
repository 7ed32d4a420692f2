from __future__ import annotations

from enum import Enum
from typing import List


class Day(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"


class TimeSlot(str, Enum):
    # Declaration order is chronological
    FIRST = "8:30-10:00"
    SECOND = "10:15-11:45"
    THIRD = "12:15-13:45"
    FOURTH = "14:00-15:30"
    FIFTH = "15:45-17:15"


DAYS: List[Day] = list(Day)
TIME_SLOTS: List[TimeSlot] = list(TimeSlot)
WEEKLY_SLOTS = len(DAYS) * len(TIME_SLOTS)  # 25


def parse_day(value: Day | str) -> Day:
    if isinstance(value, Day):
        return value
    for d in Day:
        if d.value.lower() == str(value).strip().lower():
            return d
    raise ValueError(f"Unknown day of week: {value!r}")


def parse_slot(value: TimeSlot | str) -> TimeSlot:
    if isinstance(value, TimeSlot):
        return value
    raw = str(value).strip()
    for s in TimeSlot:
        if s.value == raw or s.name == raw.upper():
            return s
    raise ValueError(f"Unknown time slot: {value!r}")
