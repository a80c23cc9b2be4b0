"""
SignalDesk Exception Hierarchy

Exceptions raised at the row-source boundary.

The normalization engine itself never raises: every malformed field has a
documented fallback. These errors describe failures of the collaborators
that supply raw rows (views, files).

Exception codes follow the pattern: SD_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class SignalDeskError(Exception):
    """
    Base exception for all SignalDesk errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (SD_*)
        details: Additional context about the error
        source_name: Row source / view involved, if applicable
    """
    message: str
    code: str = "SD_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    source_name: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.source_name:
            parts.append(f"(source: {self.source_name})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/CLI output."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.source_name:
            result["source_name"] = self.source_name
        return result


# =============================================================================
# Row Source Errors
# =============================================================================

@dataclass
class RowSourceError(SignalDeskError):
    """Neither the explain view nor the base view could be queried."""
    code: str = "SD_ROW_SOURCE_ERROR"


# =============================================================================
# Row File Errors
# =============================================================================

@dataclass
class RowFileLoadError(SignalDeskError):
    """Failed to read or parse a row-source file."""
    code: str = "SD_ROW_FILE_LOAD_ERROR"


@dataclass
class RowFileValidationError(SignalDeskError):
    """Row-source file failed schema validation."""
    code: str = "SD_ROW_FILE_VALIDATION_ERROR"


@dataclass
class RowFileVersionMismatch(SignalDeskError):
    """Row-source file schema version is not compatible."""
    code: str = "SD_ROW_FILE_VERSION_MISMATCH"


__all__ = [
    "SignalDeskError",
    "RowSourceError",
    "RowFileLoadError",
    "RowFileValidationError",
    "RowFileVersionMismatch",
]
