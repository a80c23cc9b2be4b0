"""
SignalDesk File Row Source

Loads a row-source snapshot from a YAML or JSON file and serves it
through an in-memory row source.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import RowFileLoadError, RowFileValidationError, RowFileVersionMismatch
from .base import OrderBy, QueryResult, RowSource, Scalar
from .memory import InMemoryRowSource
from .schema import SCHEMA_VERSION, RowFileSchema, check_schema_version, validate_row_file

logger = logging.getLogger(__name__)


def read_document(path: Path) -> Any:
    """Load data from YAML or JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in {".yaml", ".yml"}:
            return yaml.safe_load(f)
        elif path.suffix.lower() == ".json":
            return json.load(f)
        else:
            # Try YAML first, then JSON
            content = f.read()
            try:
                return yaml.safe_load(content)
            except yaml.YAMLError:
                return json.loads(content)


def load_row_file(path: Union[str, Path], strict_version: bool = True) -> RowFileSchema:
    """
    Load and validate a row-source file.

    Raises:
        RowFileLoadError: If the file cannot be read or parsed
        RowFileVersionMismatch: If the schema version is incompatible
        RowFileValidationError: If validation fails
    """
    path = Path(path)

    try:
        data = read_document(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise RowFileLoadError(
            message=f"Failed to load row file: {e}",
            details={"path": str(path), "error": str(e)},
            source_name=str(path),
        )

    if strict_version and isinstance(data, dict) and not check_schema_version(data):
        file_version = data.get("schema_version", "unknown")
        raise RowFileVersionMismatch(
            message=f"Schema version mismatch: file has {file_version}, expected {SCHEMA_VERSION}",
            details={"file_version": file_version, "expected_version": SCHEMA_VERSION},
            source_name=str(path),
        )

    try:
        schema = validate_row_file(data)
    except ValidationError as e:
        raise RowFileValidationError(
            message=f"Row file validation failed: {e.error_count()} errors",
            details={"errors": e.errors(include_url=False), "path": str(path)},
            source_name=str(path),
        )

    logger.info(
        "Loaded row file %s (%d views)", path, len(schema.views),
        extra={"source_name": str(path)},
    )
    return schema


class FileRowSource(RowSource):
    """
    Row source backed by a YAML/JSON snapshot file.

    Usage:
        source = FileRowSource("snapshots/staging.yaml")
        result = source.select("v_production_decisions")
    """

    def __init__(self, path: Union[str, Path], strict_version: bool = True):
        self.path = Path(path)
        self.schema = load_row_file(self.path, strict_version=strict_version)
        self.name = self.schema.name or self.path.name
        self._rows = InMemoryRowSource(views=self.schema.views, blocked=self.schema.blocked)

    def select(
        self,
        view: str,
        columns: Optional[tuple[str, ...]] = None,
        *,
        eq: Optional[tuple[str, Scalar]] = None,
        order: Optional[OrderBy] = None,
        limit: Optional[int] = None,
    ) -> QueryResult:
        return self._rows.select(view, columns, eq=eq, order=order, limit=limit)
