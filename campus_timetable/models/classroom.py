from dataclasses import dataclass


@dataclass(frozen=True)
class Classroom:
    number: str
    capacity: int
    has_projector: bool = False
