"""
SignalDesk Loader

Boundary between a RowSource and the normalization engine.

Policy decided here, not in the engine:
- explain view first, base view as fallback (mode fixed per batch)
- demo substitution when nothing is accessible
- access hints describing why a drill-down came back empty
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from .. import config
from ..engine import coerce_row, normalize_decisions, normalize_evidence
from ..exceptions import RowSourceError
from ..models import DecisionBatch, DecisionDetail, DecisionMode
from .base import (
    BASE_COLUMNS,
    EVIDENCE_COLUMNS,
    EXPLAIN_COLUMNS,
    OrderBy,
    QueryResult,
    RowSource,
    Scalar,
)
from .demo import DEMO_SOURCE, demo_decision, demo_decisions, demo_evidence

logger = logging.getLogger(__name__)

ACCESS_OK = "ok"
ACCESS_NO_ROWS = "no_rows"
ACCESS_BLOCKED_PREFIX = "blocked_or_missing:"


def _safe_select(
    source: RowSource,
    view: str,
    columns: tuple[str, ...],
    *,
    eq: Optional[tuple[str, Scalar]] = None,
    order: Optional[OrderBy] = None,
    limit: Optional[int] = None,
) -> QueryResult:
    """Run a select; a misbehaving source that raises counts as a failed query."""
    try:
        return source.select(view, columns, eq=eq, order=order, limit=limit)
    except Exception:
        logger.exception("Row source raised while selecting from %s", view, extra={"source_name": view})
        return QueryResult.failed("exception")


# =============================================================================
# Worklist
# =============================================================================

def load_decisions(
    source: RowSource,
    *,
    demo_fallback: Optional[bool] = None,
) -> DecisionBatch:
    """
    Load, normalize and rank every decision the caller can see.

    Args:
        source: Row source to query
        demo_fallback: Substitute demo rows when no rows are returned.
            None uses ``SIGNALDESK_DEMO_FALLBACK``.

    Returns:
        Ranked DecisionBatch

    Raises:
        RowSourceError: If both the explain view and the base view fail
    """
    if demo_fallback is None:
        demo_fallback = config.DEMO_FALLBACK

    explain = _safe_select(source, config.EXPLAIN_VIEW, EXPLAIN_COLUMNS)
    if explain.ok:
        rows, use_explain, view = explain.data, True, config.EXPLAIN_VIEW
    else:
        logger.info(
            "Explain view unavailable (%s), falling back to base view", explain.error_hint,
            extra={"source_name": config.EXPLAIN_VIEW},
        )
        base = _safe_select(source, config.BASE_VIEW, BASE_COLUMNS)
        if not base.ok:
            raise RowSourceError(
                message=f"Failed to load production decisions: {base.error_hint}",
                details={
                    "explain_hint": explain.error_hint,
                    "base_hint": base.error_hint,
                },
                source_name=config.BASE_VIEW,
            )
        rows, use_explain, view = base.data, False, config.BASE_VIEW

    if not rows and demo_fallback:
        logger.warning(
            "No decision rows accessible in %s, substituting demo rows", view,
            extra={"source_name": view, "is_demo": True},
        )
        return normalize_decisions(demo_decisions(), explain=True, source_name=DEMO_SOURCE, is_demo=True)

    batch = normalize_decisions(rows, explain=use_explain, source_name=view)
    logger.info(
        "Loaded %d decisions from %s", len(batch), view,
        extra={"source_name": view, "row_count": len(batch), "using_explain": use_explain},
    )
    return batch


# =============================================================================
# Drill-down
# =============================================================================

def load_decision_detail(
    source: RowSource,
    signal_id: str,
    *,
    demo_fallback: Optional[bool] = None,
    evidence_limit: Optional[int] = None,
    now: Optional[datetime] = None,
) -> DecisionDetail:
    """
    Best-effort drill-down for one signal. Never raises.

    The decision row comes from the explain view when it has one, else from
    the base view. Evidence is read newest first. When neither a decision
    row nor evidence is accessible and demo fallback is on, demo content is
    returned with ``is_demo`` set.

    Args:
        source: Row source to query
        signal_id: Signal to look up
        demo_fallback: None uses ``SIGNALDESK_DEMO_FALLBACK``
        evidence_limit: None uses ``SIGNALDESK_EVIDENCE_LIMIT``
        now: Clock for demo evidence timestamps
    """
    if demo_fallback is None:
        demo_fallback = config.DEMO_FALLBACK
    if evidence_limit is None:
        evidence_limit = config.EVIDENCE_LIMIT
    signal_id = signal_id.strip() if isinstance(signal_id, str) else ""
    match = ("signal_id", signal_id)

    explain = _safe_select(source, config.EXPLAIN_VIEW, EXPLAIN_COLUMNS, eq=match, limit=1)
    if explain.ok and explain.data:
        row = explain.data[0]
        mode, view, access_hint = DecisionMode.EXPLAIN, config.EXPLAIN_VIEW, ACCESS_OK
    else:
        base = _safe_select(source, config.BASE_VIEW, BASE_COLUMNS, eq=match, limit=1)
        row = base.data[0] if base.data else None
        mode, view = DecisionMode.BASE, config.BASE_VIEW
        if row is not None:
            access_hint = ACCESS_OK
        elif explain.ok or base.ok:
            access_hint = ACCESS_NO_ROWS
        else:
            access_hint = ACCESS_BLOCKED_PREFIX + (explain.error_hint or base.error_hint or "unknown")

    entries = _safe_select(
        source,
        config.ENTRIES_VIEW,
        EVIDENCE_COLUMNS,
        eq=match,
        order=OrderBy("created_at", ascending=False),
        limit=evidence_limit,
    )
    evidence_hint = ACCESS_OK if entries.ok else (entries.error_hint or "blocked_or_missing")

    if row is None and not entries.data and demo_fallback:
        logger.warning(
            "No rows accessible for signal, substituting demo content",
            extra={"signal_id": signal_id, "access_hint": access_hint, "is_demo": True},
        )
        return DecisionDetail(
            signal_id=signal_id,
            decision=coerce_row(demo_decision(signal_id), explain=True),
            evidence=normalize_evidence(demo_evidence(signal_id, now)),
            mode=DecisionMode.EXPLAIN,
            source_name=DEMO_SOURCE,
            access_hint=access_hint,
            evidence_hint=evidence_hint,
            is_demo=True,
        )

    return DecisionDetail(
        signal_id=signal_id,
        decision=coerce_row(row, explain=mode is DecisionMode.EXPLAIN) if row is not None else None,
        evidence=normalize_evidence(entries.data),
        mode=mode,
        source_name=view,
        access_hint=access_hint,
        evidence_hint=evidence_hint,
    )
