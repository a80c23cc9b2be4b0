"""
SignalDesk Row Sources

Collaborators that supply raw rows to the engine, plus the loader that
applies the boundary policy (explain/base fallback, demo substitution).
"""
from __future__ import annotations

from .base import (
    BASE_COLUMNS,
    EVIDENCE_COLUMNS,
    EXPLAIN_COLUMNS,
    OrderBy,
    QueryResult,
    RowSource,
)
from .memory import InMemoryRowSource
from .file import FileRowSource, load_row_file, read_document
from .schema import SCHEMA_VERSION, RowFileSchema
from .loader import (
    ACCESS_BLOCKED_PREFIX,
    ACCESS_NO_ROWS,
    ACCESS_OK,
    load_decision_detail,
    load_decisions,
)

__all__ = [
    "BASE_COLUMNS",
    "EVIDENCE_COLUMNS",
    "EXPLAIN_COLUMNS",
    "OrderBy",
    "QueryResult",
    "RowSource",
    "InMemoryRowSource",
    "FileRowSource",
    "load_row_file",
    "read_document",
    "SCHEMA_VERSION",
    "RowFileSchema",
    "ACCESS_BLOCKED_PREFIX",
    "ACCESS_NO_ROWS",
    "ACCESS_OK",
    "load_decision_detail",
    "load_decisions",
]
