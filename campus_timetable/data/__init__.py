from .registry import OccupancyLedger
from .store import EntityStore

__all__ = ["EntityStore", "OccupancyLedger"]
