"""
SignalDesk Decision Models

Key components:
- NormalizedDecision: strict, total, UI-ready decision record
- DecisionBatch: ranked decisions plus the mode they were normalized under

Both are immutable values. A NormalizedDecision is rebuilt from its raw
row on every normalization pass; nothing caches or mutates it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .enums import (
    ConfidenceLabel,
    DecisionMode,
    ProductionStatus,
    SeverityLabel,
    TrendLabel,
)

Number = Union[int, float]

# Reserved: a source id that already carries this prefix is kept verbatim
# and reads as synthesized.
SYNTHESIZED_ID_PREFIX = "missing:"


# =============================================================================
# Normalized Decision
# =============================================================================

@dataclass(frozen=True)
class NormalizedDecision:
    """
    A fully-populated production decision for one signal.

    Attributes:
        signal_id: Never empty. Synthesized ids start with "missing:"
        prod_issues_24h: Production issues in the last 24h (>= 0)
        prod_issues_7d: Production issues in the last 7 days (>= 0)
        last_prod_issue_at: ISO-8601 timestamp of the latest issue
        minutes_since_last_prod_issue: Finite recency in minutes
        production_status: Decision status (default ok)
        severity_score_7d: Rolling 7-day severity score (>= 0)
        suggested_action_code: Machine code of the suggested next step
        suggested_action_text: Human text of the suggested next step
        status_reason_code: Why the status was chosen (explain mode only)
        severity_label: Always populated
        trend_label: Explain mode only
        confidence_label: Explain mode only
    """
    signal_id: str
    prod_issues_24h: int = 0
    prod_issues_7d: int = 0
    last_prod_issue_at: Optional[str] = None
    minutes_since_last_prod_issue: Optional[Number] = None
    production_status: ProductionStatus = ProductionStatus.OK
    severity_score_7d: int = 0
    suggested_action_code: Optional[str] = None
    suggested_action_text: Optional[str] = None
    status_reason_code: Optional[str] = None
    severity_label: SeverityLabel = SeverityLabel.NONE
    trend_label: Optional[TrendLabel] = None
    confidence_label: Optional[ConfidenceLabel] = None

    @property
    def is_synthesized_id(self) -> bool:
        """True when the id carries the reserved "missing:" prefix."""
        return self.signal_id.startswith(SYNTHESIZED_ID_PREFIX)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with enum values as strings."""
        return {
            "signal_id": self.signal_id,
            "prod_issues_24h": self.prod_issues_24h,
            "prod_issues_7d": self.prod_issues_7d,
            "last_prod_issue_at": self.last_prod_issue_at,
            "minutes_since_last_prod_issue": self.minutes_since_last_prod_issue,
            "production_status": self.production_status.value,
            "severity_score_7d": self.severity_score_7d,
            "suggested_action_code": self.suggested_action_code,
            "suggested_action_text": self.suggested_action_text,
            "status_reason_code": self.status_reason_code,
            "severity_label": self.severity_label.value,
            "trend_label": self.trend_label.value if self.trend_label else None,
            "confidence_label": self.confidence_label.value if self.confidence_label else None,
        }


# =============================================================================
# Decision Batch
# =============================================================================

@dataclass(frozen=True)
class DecisionBatch:
    """
    Ranked decisions handed to the presentation layer.

    In base mode the trend/confidence fields of every decision are None
    and should be hidden by the consumer rather than shown as unknown.
    """
    decisions: tuple[NormalizedDecision, ...] = field(default_factory=tuple)
    mode: DecisionMode = DecisionMode.BASE
    source_name: Optional[str] = None
    is_demo: bool = False

    @property
    def using_explain(self) -> bool:
        return self.mode is DecisionMode.EXPLAIN

    def __len__(self) -> int:
        return len(self.decisions)

    def __iter__(self):
        return iter(self.decisions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "using_explain": self.using_explain,
            "mode": self.mode.value,
            "source_name": self.source_name,
            "is_demo": self.is_demo,
            "decisions": [d.to_dict() for d in self.decisions],
        }
