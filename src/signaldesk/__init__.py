"""
SignalDesk - Production Decision Normalization & Ranking

SignalDesk turns heterogeneous production-decision rows into a
prioritized, explainable worklist.

Core Principle: "Never fail, always degrade to a documented default."

Key Features:
- Total row coercion (any input yields a valid NormalizedDecision)
- Severity bands derived from the 7-day score
- Deterministic, total worklist ordering
- Explain vs base mode resolved once per batch
- Row-source boundary with explain/base fallback and demo substitution

Quick Start:
    from signaldesk import normalize_decisions

    batch = normalize_decisions(rows)
    if batch.using_explain:
        ...  # trend/confidence are meaningful
    for decision in batch:
        print(decision.signal_id, decision.severity_label.value)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "SignalDesk Team"

# =============================================================================
# Models
# =============================================================================
from .models import (
    SYNTHESIZED_ID_PREFIX,
    ConfidenceLabel,
    DecisionBatch,
    DecisionDetail,
    DecisionMode,
    EvidenceEntry,
    NormalizedDecision,
    ProductionStatus,
    SeverityLabel,
    TrendLabel,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    coerce_row,
    compare_decisions,
    derive_severity_label,
    normalize_decisions,
    normalize_evidence,
    rank_decisions,
    resolve_severity_label,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    RowFileLoadError,
    RowFileValidationError,
    RowFileVersionMismatch,
    RowSourceError,
    SignalDeskError,
)

__all__ = [
    "__version__",
    # Models
    "SYNTHESIZED_ID_PREFIX",
    "ConfidenceLabel",
    "DecisionBatch",
    "DecisionDetail",
    "DecisionMode",
    "EvidenceEntry",
    "NormalizedDecision",
    "ProductionStatus",
    "SeverityLabel",
    "TrendLabel",
    # Engine
    "coerce_row",
    "compare_decisions",
    "derive_severity_label",
    "normalize_decisions",
    "normalize_evidence",
    "rank_decisions",
    "resolve_severity_label",
    # Exceptions
    "RowFileLoadError",
    "RowFileValidationError",
    "RowFileVersionMismatch",
    "RowSourceError",
    "SignalDeskError",
]
