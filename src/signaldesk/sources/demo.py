"""Demo rows substituted at the row-source boundary when nothing is accessible.

Typical when the caller is not authenticated and row-level access control
returns no rows. The engine never knows it is normalizing demo data; the
loader marks the batch with ``is_demo``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

DEMO_REASON_CODE = "DEMO_NO_AUTH"
DEMO_SOURCE = "demo"


def demo_decision(signal_id: str) -> dict[str, Any]:
    """Explain-shaped decision row for a drill-down."""
    return {
        "signal_id": signal_id,
        "prod_issues_24h": 2,
        "prod_issues_7d": 9,
        "last_prod_issue_at": None,
        "minutes_since_last_prod_issue": 25,
        "severity_score_7d": 245,
        "production_status": "incident",
        "suggested_action_code": "page_oncall",
        "suggested_action_text": "Page on-call. Start incident response. Confirm impact and scope.",
        "trend_24h_vs_7d": "worsening",
        "confidence": "high",
        "severity_label": "High",
        "status_reason_code": DEMO_REASON_CODE,
    }


def demo_decisions() -> list[dict[str, Any]]:
    """Explain-shaped worklist rows, one per production status."""
    return [
        demo_decision("demo-checkout-5xx"),
        {
            "signal_id": "demo-payments-latency",
            "prod_issues_24h": 1,
            "prod_issues_7d": 4,
            "last_prod_issue_at": None,
            "minutes_since_last_prod_issue": 140,
            "severity_score_7d": 95,
            "production_status": "investigate",
            "suggested_action_code": "triage_today",
            "suggested_action_text": "Triage today. Compare p95 latency against the last deploy.",
            "trend_24h_vs_7d": "stable",
            "confidence": "medium",
            "severity_label": None,
            "status_reason_code": DEMO_REASON_CODE,
        },
        {
            "signal_id": "demo-login-flaky",
            "prod_issues_24h": 0,
            "prod_issues_7d": 2,
            "last_prod_issue_at": None,
            "minutes_since_last_prod_issue": 2900,
            "severity_score_7d": 30,
            "production_status": "watch",
            "suggested_action_code": "monitor",
            "suggested_action_text": "Keep watching. Escalate if it recurs within 24h.",
            "trend_24h_vs_7d": "improving",
            "confidence": "low",
            "severity_label": None,
            "status_reason_code": DEMO_REASON_CODE,
        },
        {
            "signal_id": "demo-docs-typo",
            "prod_issues_24h": 0,
            "prod_issues_7d": 0,
            "last_prod_issue_at": None,
            "minutes_since_last_prod_issue": None,
            "severity_score_7d": 0,
            "production_status": "ok",
            "suggested_action_code": None,
            "suggested_action_text": None,
            "trend_24h_vs_7d": "stable",
            "confidence": "low",
            "severity_label": "None",
            "status_reason_code": DEMO_REASON_CODE,
        },
    ]


def demo_evidence(signal_id: str, now: Optional[datetime] = None) -> list[dict[str, Any]]:
    """Evidence timeline rows for a demo drill-down, newest first."""
    now = now or datetime.now(timezone.utc)
    return [
        {
            "id": "demo-1",
            "signal_id": signal_id,
            "created_at": now.isoformat(),
            "created_by": None,
            "source": DEMO_SOURCE,
            "kind": "incident",
            "severity": "high",
            "area": "prod",
            "body": "Spike in 5xx errors after deploy; customers report checkout failures.",
            "is_production_issue": True,
            "production_issue_score": 90,
            "production_issue_reason": "Keyword match: error/5xx + prod area",
        },
        {
            "id": "demo-2",
            "signal_id": signal_id,
            "created_at": (now - timedelta(minutes=35)).isoformat(),
            "created_by": None,
            "source": DEMO_SOURCE,
            "kind": "observation",
            "severity": "medium",
            "area": "api",
            "body": "Latency increased in /payments endpoint; p95 doubled vs baseline.",
            "is_production_issue": True,
            "production_issue_score": 55,
            "production_issue_reason": "Heuristic: latency + payments + api",
        },
        {
            "id": "demo-3",
            "signal_id": signal_id,
            "created_at": (now - timedelta(minutes=90)).isoformat(),
            "created_by": None,
            "source": DEMO_SOURCE,
            "kind": "note",
            "severity": "low",
            "area": "deploy",
            "body": "Deploy rolled out to 100% of traffic.",
            "is_production_issue": False,
            "production_issue_score": 0,
            "production_issue_reason": "Not classified as production issue",
        },
    ]
