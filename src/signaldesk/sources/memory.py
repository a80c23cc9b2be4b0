"""InMemoryRowSource: dict-backed row source.

Views are plain lists of dicts. A view can be marked blocked to simulate
row-level access control refusing a query. In production, swap the
implementation for a database client; the RowSource interface stays the same.
"""

import logging
from typing import Any, Optional

from .base import OrderBy, QueryResult, RowSource, Scalar

logger = logging.getLogger(__name__)


class InMemoryRowSource(RowSource):
    """Serves rows from memory with eq / order / limit support."""

    name = "memory"

    def __init__(
        self,
        views: Optional[dict[str, list[dict[str, Any]]]] = None,
        blocked: Optional[dict[str, str]] = None,
    ):
        """
        Args:
            views: view name -> rows
            blocked: view name -> error hint returned for every query
        """
        self._views: dict[str, list[dict[str, Any]]] = {
            name: list(rows) for name, rows in (views or {}).items()
        }
        self._blocked: dict[str, str] = dict(blocked or {})

    # ── Mutation (test / fixture helpers) ─────────────────────────────────────

    def put_view(self, view: str, rows: list[dict[str, Any]]) -> None:
        self._views[view] = list(rows)

    def drop_view(self, view: str) -> None:
        self._views.pop(view, None)

    def block(self, view: str, hint: str = "permission_denied") -> None:
        self._blocked[view] = hint

    def unblock(self, view: str) -> None:
        self._blocked.pop(view, None)

    def view_names(self) -> list[str]:
        return sorted(self._views)

    # ── RowSource ─────────────────────────────────────────────────────────────

    def select(
        self,
        view: str,
        columns: Optional[tuple[str, ...]] = None,
        *,
        eq: Optional[tuple[str, Scalar]] = None,
        order: Optional[OrderBy] = None,
        limit: Optional[int] = None,
    ) -> QueryResult:
        if view in self._blocked:
            return QueryResult.failed(self._blocked[view])
        if view not in self._views:
            return QueryResult.failed(f"view_not_found:{view}")

        rows = [row for row in self._views[view] if isinstance(row, dict)]

        if eq is not None:
            column, value = eq
            rows = [row for row in rows if row.get(column) == value]

        if order is not None:
            known = [row for row in rows if row.get(order.column) is not None]
            unknown = [row for row in rows if row.get(order.column) is None]
            try:
                known.sort(key=lambda row: row[order.column], reverse=not order.ascending)
            except TypeError:
                logger.warning("Cannot order %s by %s: mixed value types", view, order.column)
                return QueryResult.failed(f"order_failed:{order.column}")
            rows = known + unknown

        if limit is not None:
            rows = rows[: max(0, limit)]

        if columns is None:
            data = [dict(row) for row in rows]
        else:
            data = [{column: row.get(column) for column in columns} for row in rows]
        return QueryResult(data=data, ok=True)
