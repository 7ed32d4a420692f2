from dataclasses import dataclass


@dataclass(frozen=True)
class Professor:
    id: int
    name: str
    department: str
