"""
SignalDesk Engine

Decision normalization and ranking:

- coercion:  raw row -> NormalizedDecision (total, never raises)
- labels:    severity band derivation from the 7-day score
- ranking:   deterministic multi-key worklist order
- pipeline:  batch entry point with explain-mode detection

Usage:
    from signaldesk.engine import normalize_decisions

    batch = normalize_decisions(rows)
    for decision in batch:
        ...
"""
from __future__ import annotations

from .coercion import (
    EXPLAIN_FIELDS,
    LEGACY_ALIASES,
    coerce_evidence,
    coerce_row,
    has_explain_fields,
    parse_timestamp,
    synthesize_id,
    to_bool_or_none,
    to_count,
    to_enum,
    to_number_or_none,
    to_string_or_none,
    to_timestamp_or_none,
)
from .labels import (
    SEVERITY_BANDS,
    derive_severity_label,
    resolve_severity_label,
)
from .ranking import (
    compare_decisions,
    decision_sort_key,
    rank_decisions,
    status_urgency,
)
from .pipeline import (
    detect_mode,
    normalize_decisions,
    normalize_evidence,
)

__all__ = [
    # Coercion
    "EXPLAIN_FIELDS",
    "LEGACY_ALIASES",
    "coerce_evidence",
    "coerce_row",
    "has_explain_fields",
    "parse_timestamp",
    "synthesize_id",
    "to_bool_or_none",
    "to_count",
    "to_enum",
    "to_number_or_none",
    "to_string_or_none",
    "to_timestamp_or_none",
    # Labels
    "SEVERITY_BANDS",
    "derive_severity_label",
    "resolve_severity_label",
    # Ranking
    "compare_decisions",
    "decision_sort_key",
    "rank_decisions",
    "status_urgency",
    # Pipeline
    "detect_mode",
    "normalize_decisions",
    "normalize_evidence",
]
