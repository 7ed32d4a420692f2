"""Weekly academic timetable with professor and classroom clash protection."""

__version__ = "0.1.0"
