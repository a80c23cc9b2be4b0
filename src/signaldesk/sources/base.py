"""
SignalDesk Row Source (Interface)

A row source answers simple select queries against named views. In
production this is a database or PostgREST client; row-level access
control lives behind it. Query failures are reported, never raised.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

Scalar = Union[str, int, float, bool]

BASE_COLUMNS: tuple[str, ...] = (
    "signal_id",
    "prod_issues_24h",
    "prod_issues_7d",
    "last_prod_issue_at",
    "minutes_since_last_prod_issue",
    "severity_score_7d",
    "production_status",
    "suggested_action_code",
    "suggested_action_text",
)

EXPLAIN_COLUMNS: tuple[str, ...] = BASE_COLUMNS + (
    "trend_24h_vs_7d",
    "confidence",
    "severity_label",
    "status_reason_code",
)

EVIDENCE_COLUMNS: tuple[str, ...] = (
    "id",
    "signal_id",
    "body",
    "source",
    "created_at",
    "created_by",
    "kind",
    "severity",
    "area",
    "is_production_issue",
    "production_issue_score",
    "production_issue_reason",
)


@dataclass(frozen=True)
class OrderBy:
    """Single-column ordering. Nulls always sort last."""
    column: str
    ascending: bool = False


@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of a select.

    Attributes:
        data: Raw rows (empty on failure)
        ok: False when the view is missing, blocked, or the query failed
        error_hint: Short machine-readable reason when ok is False
    """
    data: list[dict[str, Any]] = field(default_factory=list)
    ok: bool = True
    error_hint: Optional[str] = None

    @classmethod
    def failed(cls, hint: str) -> QueryResult:
        return cls(data=[], ok=False, error_hint=hint or "query_failed")


class RowSource(ABC):
    """Queryable source of raw rows."""

    name: str = "rows"

    @abstractmethod
    def select(
        self,
        view: str,
        columns: Optional[tuple[str, ...]] = None,
        *,
        eq: Optional[tuple[str, Scalar]] = None,
        order: Optional[OrderBy] = None,
        limit: Optional[int] = None,
    ) -> QueryResult:
        """
        Select rows from a view.

        Args:
            view: View or table name
            columns: Columns to project; None selects every column
            eq: (column, value) equality filter
            order: Ordering to apply before the limit
            limit: Maximum number of rows

        Returns:
            QueryResult. Implementations report failures through
            ``ok``/``error_hint`` instead of raising.
        """
