"""
SignalDesk Deterministic Ranking

Total ordering of normalized decisions for the worklist.

Tie-breakers (in order):
1. production_status urgency (descending)
2. severity_score_7d (descending)
3. prod_issues_24h (descending)
4. prod_issues_7d (descending)
5. minutes_since_last_prod_issue (ascending, unknown recency last)
6. signal_id (ascending, case-sensitive)

Sorting never mutates its input and any two calls on an equal multiset
produce the same sequence.
"""
from __future__ import annotations

from collections.abc import Iterable

from ..models import NormalizedDecision, ProductionStatus


def status_urgency(status: ProductionStatus) -> int:
    """incident 4 > investigate 3 > watch 2 > ok 1."""
    return status.urgency


def decision_sort_key(decision: NormalizedDecision) -> tuple:
    """
    Generate a sort key for stable decision ordering.

    Descending fields are negated; unknown recency sorts as +infinity.
    """
    minutes = decision.minutes_since_last_prod_issue
    recency = (0, minutes) if minutes is not None else (1, 0)

    return (
        -status_urgency(decision.production_status),
        -decision.severity_score_7d,
        -decision.prod_issues_24h,
        -decision.prod_issues_7d,
        recency,
        decision.signal_id,
    )


def compare_decisions(a: NormalizedDecision, b: NormalizedDecision) -> int:
    """
    Three-way comparator: negative if ``a`` ranks first, positive if ``b`` does.

    Returns 0 only for rows that agree on every tie-breaker, signal_id included.
    """
    key_a = decision_sort_key(a)
    key_b = decision_sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def rank_decisions(decisions: Iterable[NormalizedDecision]) -> list[NormalizedDecision]:
    """Return a new list of decisions in worklist order."""
    return sorted(decisions, key=decision_sort_key)
