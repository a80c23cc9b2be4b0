"""
Canonical JSON Serialization

Deterministic JSON serialization for content hashing of raw rows.

- Sorted keys (lexicographic)
- No whitespace
- UTF-8 encoding

Raw rows come from an untrusted boundary, so serialization here never
raises: values that JSON cannot represent are rendered through a stable
textual fallback instead.
"""
from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193


def _default_serializer(obj: Any) -> Any:
    """
    Fallback JSON serializer for non-standard types.

    Handles:
    - datetime/date: ISO 8601 format
    - UUID / Decimal: string representation
    - Enum: value
    - set/frozenset: sorted list
    - bytes: hex
    - anything else: "<TypeName>" plus its str()
    """
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, (UUID, Decimal)):
        return str(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    if isinstance(obj, bytes):
        return obj.hex()
    try:
        text = str(obj)
    except Exception:
        text = ""
    return f"<{type(obj).__name__}>{text}"


def canonical_json(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Same input always produces the same output.

    Example:
        >>> canonical_json({"b": 1, "a": 2})
        '{"a":2,"b":1}'
    """
    try:
        return json.dumps(
            obj,
            sort_keys=True,
            separators=(",", ":"),
            default=_default_serializer,
            ensure_ascii=False,
        )
    except (TypeError, ValueError, RecursionError):
        # Mixed-type keys cannot be sorted; circular containers cannot be encoded.
        pass
    try:
        return repr(obj)
    except Exception:
        # Oversized ints and very deep nesting defeat repr too.
        return f"<{type(obj).__name__}>"


def fnv1a_32(data: bytes) -> int:
    """32-bit FNV-1a hash of a byte string."""
    h = FNV32_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV32_PRIME) & 0xFFFFFFFF
    return h


def content_hash_short(obj: Any) -> str:
    """
    Stable, non-cryptographic content hash as 8 lowercase hex characters.

    Example:
        >>> len(content_hash_short({"signal_id": None}))
        8
    """
    payload = canonical_json(obj).encode("utf-8", errors="surrogatepass")
    return f"{fnv1a_32(payload):08x}"


__all__ = [
    "canonical_json",
    "fnv1a_32",
    "content_hash_short",
]
