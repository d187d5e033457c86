"""Core modules for datebucket."""

from datebucket.core.models import (
    FileRecord,
    FailureCategory,
    OrganizeResult,
    ScanResult,
)

__all__ = [
    "FileRecord",
    "FailureCategory",
    "OrganizeResult",
    "ScanResult",
]
