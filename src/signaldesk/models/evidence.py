"""
SignalDesk Evidence Models

Evidence entries form the timeline shown on a decision drill-down.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .decision import NormalizedDecision
from .enums import DecisionMode

Number = Union[int, float]


@dataclass(frozen=True)
class EvidenceEntry:
    """One user-submitted entry attached to a signal."""
    id: str
    signal_id: Optional[str] = None
    body: Optional[str] = None
    source: Optional[str] = None
    created_at: Optional[str] = None
    created_by: Optional[str] = None
    kind: Optional[str] = None
    severity: Optional[str] = None
    area: Optional[str] = None
    is_production_issue: Optional[bool] = None
    production_issue_score: Optional[Number] = None
    production_issue_reason: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "signal_id": self.signal_id,
            "body": self.body,
            "source": self.source,
            "created_at": self.created_at,
            "created_by": self.created_by,
            "kind": self.kind,
            "severity": self.severity,
            "area": self.area,
            "is_production_issue": self.is_production_issue,
            "production_issue_score": self.production_issue_score,
            "production_issue_reason": self.production_issue_reason,
        }


@dataclass(frozen=True)
class DecisionDetail:
    """
    Drill-down for a single signal.

    Attributes:
        signal_id: The requested signal
        decision: Normalized decision, or None when no row was accessible
        evidence: Evidence timeline, newest first
        mode: Which decision view answered
        source_name: Name of the decision view used
        access_hint: "ok", "no_rows" or "blocked_or_missing:<hint>"
        evidence_hint: "ok" or the evidence view's error hint
        is_demo: Demo content was substituted
    """
    signal_id: str
    decision: Optional[NormalizedDecision] = None
    evidence: tuple[EvidenceEntry, ...] = field(default_factory=tuple)
    mode: DecisionMode = DecisionMode.BASE
    source_name: Optional[str] = None
    access_hint: str = "ok"
    evidence_hint: str = "ok"
    is_demo: bool = False

    @property
    def using_explain(self) -> bool:
        return self.mode is DecisionMode.EXPLAIN

    def to_dict(self) -> dict[str, Any]:
        return {
            "signal_id": self.signal_id,
            "using_explain": self.using_explain,
            "source_name": self.source_name,
            "access_hint": self.access_hint,
            "evidence_hint": self.evidence_hint,
            "is_demo": self.is_demo,
            "decision": self.decision.to_dict() if self.decision else None,
            "evidence": [e.to_dict() for e in self.evidence],
        }
