from .mutator import ScheduleMutator

__all__ = ["ScheduleMutator"]
