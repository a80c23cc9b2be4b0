"""
SignalDesk Row File Schemas

Pydantic models for validating row-source files (YAML/JSON).

Only the document envelope is validated. Rows themselves stay untyped:
they cross the untrusted boundary as-is and are coerced by the engine.

Example:
    schema_version: "1.0.0"
    name: staging-snapshot
    views:
      v_production_decisions:
        - signal_id: sig-001
          production_status: incident
          severity_score_7d: 240
    blocked:
      v_production_decisions_explain: permission_denied
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

SCHEMA_VERSION = "1.0.0"


class RowFileSchema(BaseModel):
    """Envelope of a row-source file."""
    schema_version: str = Field(SCHEMA_VERSION, description="Row file schema version")
    name: Optional[str] = Field(None, description="Human-readable snapshot name")
    views: dict[str, list[dict[str, Any]]] = Field(
        default_factory=dict, description="View name -> raw rows"
    )
    blocked: dict[str, str] = Field(
        default_factory=dict, description="View name -> error hint for refused queries"
    )

    @field_validator("views")
    @classmethod
    def view_names_not_blank(cls, v: dict[str, list[dict[str, Any]]]) -> dict[str, list[dict[str, Any]]]:
        for name in v:
            if not name.strip():
                raise ValueError("View names must not be blank")
        return v


def validate_row_file(data: Any) -> RowFileSchema:
    """
    Validate a row file document.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return RowFileSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Compatible when the major version matches."""
    file_version = str(data.get("schema_version", SCHEMA_VERSION))
    return file_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
