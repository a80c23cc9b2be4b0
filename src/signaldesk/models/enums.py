"""
SignalDesk Enumerations

All enums inherit from (str, Enum) for JSON serialization compatibility.
Member values are the exact, case-sensitive strings found in raw rows.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Production Status
# =============================================================================

class ProductionStatus(str, Enum):
    """Production-impact status of a signal, most urgent first."""
    INCIDENT = "incident"
    INVESTIGATE = "investigate"
    WATCH = "watch"
    OK = "ok"

    @property
    def urgency(self) -> int:
        """Ranking weight: incident 4 > investigate 3 > watch 2 > ok 1."""
        return _STATUS_URGENCY[self]


_STATUS_URGENCY = {
    ProductionStatus.INCIDENT: 4,
    ProductionStatus.INVESTIGATE: 3,
    ProductionStatus.WATCH: 2,
    ProductionStatus.OK: 1,
}


# =============================================================================
# Labels
# =============================================================================

class SeverityLabel(str, Enum):
    """Severity band derived from the 7-day severity score."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    NONE = "None"


class TrendLabel(str, Enum):
    """24h volume compared to the 7d daily baseline."""
    WORSENING = "worsening"
    STABLE = "stable"
    IMPROVING = "improving"


class ConfidenceLabel(str, Enum):
    """Confidence in the decision, based on 7d volume and incident status."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# =============================================================================
# Batch Mode
# =============================================================================

class DecisionMode(str, Enum):
    """Which row shape a batch was normalized under."""
    BASE = "base"
    EXPLAIN = "explain"
