"""
SignalDesk Label Derivation

Severity bands from the 7-day severity score.

Thresholds (first match wins):
    score >= 200  -> High
    score >= 80   -> Medium
    score >= 1    -> Low
    otherwise     -> None

An explicit "None" label from the source is treated as not supplied and
is always recomputed from the score, so the label tracks the current
score unless a stronger explicit label overrides it.

Trend and confidence are never derived; they only pass through coercion.
"""
from __future__ import annotations

from typing import Optional, Union

from ..models import SeverityLabel

SEVERITY_HIGH_THRESHOLD = 200
SEVERITY_MEDIUM_THRESHOLD = 80
SEVERITY_LOW_THRESHOLD = 1

# Ordered (threshold, label) bands; first match wins.
SEVERITY_BANDS: tuple[tuple[int, SeverityLabel], ...] = (
    (SEVERITY_HIGH_THRESHOLD, SeverityLabel.HIGH),
    (SEVERITY_MEDIUM_THRESHOLD, SeverityLabel.MEDIUM),
    (SEVERITY_LOW_THRESHOLD, SeverityLabel.LOW),
)


def derive_severity_label(score: Union[int, float]) -> SeverityLabel:
    """Severity band for a score."""
    for threshold, label in SEVERITY_BANDS:
        if score >= threshold:
            return label
    return SeverityLabel.NONE


def resolve_severity_label(
    raw_label: Optional[SeverityLabel],
    score: Union[int, float],
) -> SeverityLabel:
    """
    Keep an explicit High/Medium/Low label, otherwise derive from the score.

    Args:
        raw_label: Label already coerced from the source row, or None
        score: Coerced severity_score_7d

    Returns:
        Always a SeverityLabel, never None
    """
    if raw_label is not None and raw_label is not SeverityLabel.NONE:
        return raw_label
    return derive_severity_label(score)
