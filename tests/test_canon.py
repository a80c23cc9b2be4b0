"""
Tests for canonical JSON and content hashing.

Synthesized ids depend on these being deterministic and total.
"""
from datetime import datetime, timezone
from decimal import Decimal

from signaldesk.canon import canonical_json, content_hash_short, fnv1a_32


class TestCanonicalJson:
    """Same input, same bytes."""

    def test_keys_sorted_without_whitespace(self):
        assert canonical_json({"b": 1, "a": 2}) == '{"a":2,"b":1}'

    def test_key_order_does_not_matter(self):
        assert canonical_json({"x": 1, "y": [1, 2]}) == canonical_json({"y": [1, 2], "x": 1})

    def test_non_json_types_use_fallback(self):
        result = canonical_json({
            "at": datetime(2026, 1, 12, 10, 2, tzinfo=timezone.utc),
            "amount": Decimal("1.50"),
            "tags": {"b", "a"},
        })
        assert '"amount":"1.50"' in result
        assert '"at":"2026-01-12T10:02:00+00:00"' in result
        assert '"tags":["a","b"]' in result

    def test_unsortable_keys_never_raise(self):
        row = {1: "int key", "a": "str key"}
        first = canonical_json(row)
        assert isinstance(first, str)
        assert canonical_json(row) == first

    def test_circular_container_never_raises(self):
        row: dict = {"signal_id": None}
        row["self"] = row
        assert isinstance(canonical_json(row), str)

    def test_oversized_int_never_raises(self):
        row = {"signal_id": None, "note": 10**5000}
        assert canonical_json(row) == canonical_json(row)
        assert len(content_hash_short(row)) == 8

    def test_deep_nesting_never_raises(self):
        nested: list = []
        for _ in range(2000):
            nested = [nested]
        assert canonical_json(nested) == canonical_json(nested)
        assert len(content_hash_short({"payload": nested})) == 8


class TestFnv1a:
    """32-bit FNV-1a reference vectors."""

    def test_empty_input_is_offset_basis(self):
        assert fnv1a_32(b"") == 0x811C9DC5

    def test_single_byte(self):
        assert fnv1a_32(b"a") == 0xE40C292C

    def test_word(self):
        assert fnv1a_32(b"foobar") == 0xBF9CF968


class TestContentHashShort:

    def test_eight_lowercase_hex_chars(self):
        value = content_hash_short({"signal_id": "  "})
        assert len(value) == 8
        assert value == value.lower()
        int(value, 16)

    def test_deterministic(self):
        row = {"severity_score_7d": 12, "signal_id": None}
        assert content_hash_short(row) == content_hash_short(dict(row))

    def test_none_and_lists_hash(self):
        assert len(content_hash_short(None)) == 8
        assert content_hash_short([1, 2]) != content_hash_short([2, 1])
