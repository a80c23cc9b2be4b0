"""
SignalDesk Models

    from signaldesk.models import (
        # Enums
        ProductionStatus, SeverityLabel, TrendLabel, ConfidenceLabel, DecisionMode,
        # Decisions
        NormalizedDecision, DecisionBatch,
        # Evidence
        EvidenceEntry, DecisionDetail,
    )
"""
from __future__ import annotations

from .enums import (
    ConfidenceLabel,
    DecisionMode,
    ProductionStatus,
    SeverityLabel,
    TrendLabel,
)
from .decision import (
    SYNTHESIZED_ID_PREFIX,
    DecisionBatch,
    NormalizedDecision,
)
from .evidence import (
    DecisionDetail,
    EvidenceEntry,
)

__all__ = [
    # Enums
    "ConfidenceLabel",
    "DecisionMode",
    "ProductionStatus",
    "SeverityLabel",
    "TrendLabel",
    # Decisions
    "SYNTHESIZED_ID_PREFIX",
    "DecisionBatch",
    "NormalizedDecision",
    # Evidence
    "DecisionDetail",
    "EvidenceEntry",
]
