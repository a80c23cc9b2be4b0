"""
SignalDesk Row Coercion

Turns an untrusted raw row into a strict NormalizedDecision.

Key features:
- Total: never raises, for any input (None, lists, empty maps, bad types)
- Per-field fallbacks instead of errors
- Deterministic synthesized ids for rows without a usable signal_id
- Legacy field aliasing for trend/confidence
"""
from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, TypeVar, Union

from ..canon import content_hash_short
from ..models import (
    SYNTHESIZED_ID_PREFIX,
    ConfidenceLabel,
    EvidenceEntry,
    NormalizedDecision,
    ProductionStatus,
    SeverityLabel,
    TrendLabel,
)
from .labels import resolve_severity_label

logger = logging.getLogger(__name__)

Number = Union[int, float]
E = TypeVar("E", bound=Enum)

# Keys that only exist on the explain shape. Any of them marks explain mode.
EXPLAIN_FIELDS = (
    "trend_24h_vs_7d",
    "confidence",
    "severity_label",
    "status_reason_code",
)

# canonical explain field -> older column name carrying the same value
LEGACY_ALIASES = {
    "trend_24h_vs_7d": "trend_label",
    "confidence": "confidence_label",
}

# "+00" style offsets as emitted by Postgres; fromisoformat wants "+00:00".
_SHORT_OFFSET = re.compile(r"(\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?[+-]\d{2})$")


# =============================================================================
# Field Access
# =============================================================================

def _as_mapping(raw: Any) -> Mapping:
    return raw if isinstance(raw, Mapping) else {}


def _read(row: Mapping, key: str) -> Any:
    try:
        return row.get(key)
    except Exception:
        return None


def _has_key(row: Mapping, key: str) -> bool:
    try:
        return key in row
    except Exception:
        return False


def _aliased(row: Mapping, key: str) -> Any:
    """Value of ``key``, or of its legacy alias when ``key`` is absent."""
    value = _read(row, key)
    if value is None and key in LEGACY_ALIASES:
        value = _read(row, LEGACY_ALIASES[key])
    return value


def has_explain_fields(raw: Any) -> bool:
    """True if the row carries any explain-only key (even with a null value)."""
    row = _as_mapping(raw)
    keys = EXPLAIN_FIELDS + tuple(LEGACY_ALIASES.values())
    return any(_has_key(row, key) for key in keys)


# =============================================================================
# Scalar Coercers
# =============================================================================

def to_number_or_none(value: Any) -> Optional[Number]:
    """
    Coerce to a finite number.

    Accepts native ints/floats/Decimals and trimmed numeric strings.
    Booleans, NaN, infinities, blanks and anything else become None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        number = float(value)
        return number if math.isfinite(number) else None
    if isinstance(value, str):
        text = value.strip()
        # float() accepts digit separators; a numeric column never does.
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def to_count(value: Any) -> int:
    """Coerce to a non-negative integer, truncating toward zero. Default 0."""
    number = to_number_or_none(value)
    if number is None:
        return 0
    return max(0, int(number))


def to_string_or_none(value: Any) -> Optional[str]:
    """Real strings only, trimmed. Empty after trimming becomes None."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 string into an aware datetime.

    Naive values are taken as UTC. Returns None when blank or unparsable.
    """
    text = to_string_or_none(value)
    if text is None:
        return None
    candidate = text
    if candidate[-1] in "Zz":
        candidate = candidate[:-1] + "+00:00"
    candidate = _SHORT_OFFSET.sub(r"\1:00", candidate)
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_timestamp_or_none(value: Any) -> Optional[str]:
    """Trimmed ISO-8601 string, or None when blank or unparsable."""
    if parse_timestamp(value) is None:
        return None
    return to_string_or_none(value)


def to_bool_or_none(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def to_enum(value: Any, enum_cls: type[E]) -> Optional[E]:
    """Exact, case-sensitive member match, else None."""
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


# =============================================================================
# Synthesized Ids
# =============================================================================

def synthesize_id(raw: Any) -> str:
    """
    Deterministic placeholder id derived from the row content.

    Identical rows always yield the same id; the prefix keeps synthesized
    ids distinguishable from real ones.
    """
    synthesized = SYNTHESIZED_ID_PREFIX + content_hash_short(raw)
    logger.debug("Synthesized id for row without identifier", extra={"signal_id": synthesized})
    return synthesized


# =============================================================================
# Row Coercion
# =============================================================================

def coerce_row(raw: Any, *, explain: Optional[bool] = None) -> NormalizedDecision:
    """
    Coerce one raw decision row.

    Args:
        raw: Anything. Non-mappings are treated as rows with no fields.
        explain: Batch mode. None infers it from this row's own keys.
            In base mode the explain-only fields are ignored.

    Returns:
        A valid NormalizedDecision. Never raises.
    """
    row = _as_mapping(raw)
    if explain is None:
        explain = has_explain_fields(row)

    severity_score = to_count(_read(row, "severity_score_7d"))
    raw_severity = to_enum(_read(row, "severity_label"), SeverityLabel) if explain else None

    return NormalizedDecision(
        signal_id=to_string_or_none(_read(row, "signal_id")) or synthesize_id(raw),
        prod_issues_24h=to_count(_read(row, "prod_issues_24h")),
        prod_issues_7d=to_count(_read(row, "prod_issues_7d")),
        last_prod_issue_at=to_timestamp_or_none(_read(row, "last_prod_issue_at")),
        minutes_since_last_prod_issue=to_number_or_none(_read(row, "minutes_since_last_prod_issue")),
        production_status=(
            to_enum(_read(row, "production_status"), ProductionStatus) or ProductionStatus.OK
        ),
        severity_score_7d=severity_score,
        suggested_action_code=to_string_or_none(_read(row, "suggested_action_code")),
        suggested_action_text=to_string_or_none(_read(row, "suggested_action_text")),
        status_reason_code=(
            to_string_or_none(_read(row, "status_reason_code")) if explain else None
        ),
        severity_label=resolve_severity_label(raw_severity, severity_score),
        trend_label=to_enum(_aliased(row, "trend_24h_vs_7d"), TrendLabel) if explain else None,
        confidence_label=(
            to_enum(_aliased(row, "confidence"), ConfidenceLabel) if explain else None
        ),
    )


def coerce_evidence(raw: Any) -> EvidenceEntry:
    """Coerce one evidence timeline row. Never raises."""
    row = _as_mapping(raw)
    return EvidenceEntry(
        id=to_string_or_none(_read(row, "id")) or synthesize_id(raw),
        signal_id=to_string_or_none(_read(row, "signal_id")),
        body=to_string_or_none(_read(row, "body")),
        source=to_string_or_none(_read(row, "source")),
        created_at=to_timestamp_or_none(_read(row, "created_at")),
        created_by=to_string_or_none(_read(row, "created_by")),
        kind=to_string_or_none(_read(row, "kind")),
        severity=to_string_or_none(_read(row, "severity")),
        area=to_string_or_none(_read(row, "area")),
        is_production_issue=to_bool_or_none(_read(row, "is_production_issue")),
        production_issue_score=to_number_or_none(_read(row, "production_issue_score")),
        production_issue_reason=to_string_or_none(_read(row, "production_issue_reason")),
    )
