"""Normalization pipeline: raw rows in, ranked DecisionBatch out.

Stages:
  1. detect:  resolve explain vs base mode once for the whole batch
  2. coerce:  one NormalizedDecision per raw row (labels resolved inside)
  3. rank:    deterministic worklist order

Pure and synchronous. Whatever collection it is given is normalized and
ranked; demo substitution is decided by the row source, never here.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from ..models import DecisionBatch, DecisionMode, EvidenceEntry
from .coercion import coerce_evidence, coerce_row, has_explain_fields, parse_timestamp
from .ranking import rank_decisions

logger = logging.getLogger(__name__)


def _materialize(raw_rows: Any) -> list:
    if raw_rows is None:
        return []
    if isinstance(raw_rows, Mapping):
        return [raw_rows]
    if isinstance(raw_rows, (str, bytes)) or not isinstance(raw_rows, Iterable):
        return []
    return list(raw_rows)


def detect_mode(raw_rows: Any, explain: Optional[bool] = None) -> DecisionMode:
    """Explicit flag wins; otherwise inspect the first mapping row."""
    if explain is not None:
        return DecisionMode.EXPLAIN if explain else DecisionMode.BASE
    for row in _materialize(raw_rows):
        if isinstance(row, Mapping):
            return DecisionMode.EXPLAIN if has_explain_fields(row) else DecisionMode.BASE
    return DecisionMode.BASE


def normalize_decisions(
    raw_rows: Any,
    explain: Optional[bool] = None,
    *,
    source_name: Optional[str] = None,
    is_demo: bool = False,
) -> DecisionBatch:
    """
    Normalize and rank a batch of raw decision rows.

    Args:
        raw_rows: Iterable of raw rows (arbitrary values). None means no rows.
        explain: Force explain (True) or base (False) mode; None detects it.
        source_name: Name of the view the rows came from, passed through.
        is_demo: Marks a batch made of demo rows, passed through.

    Returns:
        DecisionBatch with decisions in worklist order. Never raises.
    """
    rows = _materialize(raw_rows)
    mode = detect_mode(rows, explain)
    use_explain = mode is DecisionMode.EXPLAIN

    decisions = [coerce_row(row, explain=use_explain) for row in rows]
    ranked = rank_decisions(decisions)

    logger.debug(
        "Normalized %d decision rows (%s mode)", len(ranked), mode.value,
        extra={"row_count": len(ranked), "using_explain": use_explain, "source_name": source_name},
    )
    return DecisionBatch(
        decisions=tuple(ranked),
        mode=mode,
        source_name=source_name,
        is_demo=is_demo,
    )


def normalize_evidence(raw_rows: Any) -> tuple[EvidenceEntry, ...]:
    """
    Coerce evidence rows and order them newest first. Never raises.

    Timestamps compare as instants, so mixed offsets order correctly.
    Ties on created_at keep id order; undated entries go last.
    """
    entries = sorted((coerce_evidence(row) for row in _materialize(raw_rows)), key=lambda e: e.id)
    dated = [(parse_timestamp(e.created_at), e) for e in entries]
    newest_first = sorted(
        (pair for pair in dated if pair[0] is not None),
        key=lambda pair: pair[0],
        reverse=True,
    )
    undated = [e for at, e in dated if at is None]
    return tuple(e for _, e in newest_first) + tuple(undated)
