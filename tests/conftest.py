"""
Pytest configuration and fixtures for SignalDesk tests.

Provides factory helpers for raw rows and normalized decisions, plus an
in-memory row source populated with both decision views and evidence.
"""
import pytest

from signaldesk.models import (
    NormalizedDecision,
    ProductionStatus,
    SeverityLabel,
)
from signaldesk.sources import InMemoryRowSource

EXPLAIN_VIEW = "v_production_decisions_explain"
BASE_VIEW = "v_production_decisions"
ENTRIES_VIEW = "v_signal_entries_enriched"


# =============================================================================
# Factory Helpers
# =============================================================================

def make_raw_row(signal_id: str = "sig-001", **overrides) -> dict:
    """Base-shaped raw row as a decision view would return it."""
    row = {
        "signal_id": signal_id,
        "prod_issues_24h": 1,
        "prod_issues_7d": 3,
        "last_prod_issue_at": "2026-01-12T10:02:00Z",
        "minutes_since_last_prod_issue": 42,
        "severity_score_7d": 90,
        "production_status": "watch",
        "suggested_action_code": "monitor",
        "suggested_action_text": "Keep watching.",
    }
    row.update(overrides)
    return row


def make_explain_row(signal_id: str = "sig-001", **overrides) -> dict:
    """Explain-shaped raw row (base plus trend/confidence/label/reason)."""
    row = make_raw_row(signal_id)
    row.update({
        "trend_24h_vs_7d": "stable",
        "confidence": "medium",
        "severity_label": None,
        "status_reason_code": "VOLUME_7D",
    })
    row.update(overrides)
    return row


def make_evidence_row(entry_id: str, signal_id: str = "sig-001", **overrides) -> dict:
    row = {
        "id": entry_id,
        "signal_id": signal_id,
        "body": f"Entry {entry_id}",
        "source": "form",
        "created_at": "2026-01-12T10:00:00+00:00",
        "created_by": "user-1",
        "kind": "observation",
        "severity": "medium",
        "area": "api",
        "is_production_issue": True,
        "production_issue_score": 40,
        "production_issue_reason": "Heuristic match",
    }
    row.update(overrides)
    return row


def make_decision(
    signal_id: str = "sig-001",
    production_status: ProductionStatus = ProductionStatus.OK,
    severity_score_7d: int = 0,
    prod_issues_24h: int = 0,
    prod_issues_7d: int = 0,
    minutes_since_last_prod_issue=None,
    **kwargs,
) -> NormalizedDecision:
    """NormalizedDecision with ranking-relevant fields up front."""
    kwargs.setdefault("severity_label", SeverityLabel.NONE)
    return NormalizedDecision(
        signal_id=signal_id,
        production_status=production_status,
        severity_score_7d=severity_score_7d,
        prod_issues_24h=prod_issues_24h,
        prod_issues_7d=prod_issues_7d,
        minutes_since_last_prod_issue=minutes_since_last_prod_issue,
        **kwargs,
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def explain_rows():
    return [
        make_explain_row("sig-watch", production_status="watch", severity_score_7d=500),
        make_explain_row("sig-incident", production_status="incident", severity_score_7d=1,
                         trend_24h_vs_7d="worsening", confidence="high"),
        make_explain_row("sig-ok", production_status="ok", severity_score_7d=0,
                         severity_label="None"),
    ]


@pytest.fixture
def base_rows():
    return [
        make_raw_row("sig-b", production_status="investigate", severity_score_7d=120),
        make_raw_row("sig-a", production_status="investigate", severity_score_7d=120),
    ]


@pytest.fixture
def memory_source(explain_rows, base_rows):
    return InMemoryRowSource(views={
        EXPLAIN_VIEW: explain_rows,
        BASE_VIEW: base_rows,
        ENTRIES_VIEW: [
            make_evidence_row("e-1", "sig-incident", created_at="2026-01-12T09:00:00+00:00"),
            make_evidence_row("e-2", "sig-incident", created_at="2026-01-12T11:00:00+00:00"),
            make_evidence_row("e-3", "sig-incident", created_at=None),
            make_evidence_row("e-4", "sig-other"),
        ],
    })
