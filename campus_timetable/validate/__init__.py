from .checks import ConflictValidator, audit_store
from .report import format_validation_report, write_validation_report

__all__ = [
    "ConflictValidator",
    "audit_store",
    "format_validation_report",
    "write_validation_report",
]
