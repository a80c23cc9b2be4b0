"""
Tests for SignalDesk models and exceptions.
"""
import dataclasses

import pytest

from signaldesk.exceptions import (
    RowFileLoadError,
    RowFileValidationError,
    RowFileVersionMismatch,
    RowSourceError,
    SignalDeskError,
)
from signaldesk.models import (
    DecisionBatch,
    DecisionDetail,
    DecisionMode,
    EvidenceEntry,
    NormalizedDecision,
    ProductionStatus,
    SeverityLabel,
    TrendLabel,
)

from tests.conftest import make_decision


class TestEnums:

    def test_values_match_raw_strings(self):
        assert [s.value for s in ProductionStatus] == ["incident", "investigate", "watch", "ok"]
        assert [s.value for s in SeverityLabel] == ["High", "Medium", "Low", "None"]

    def test_str_enum_compares_to_string(self):
        assert ProductionStatus.WATCH == "watch"
        assert TrendLabel("improving") is TrendLabel.IMPROVING

    def test_urgency_strictly_decreasing(self):
        weights = [s.urgency for s in ProductionStatus]
        assert weights == sorted(weights, reverse=True)
        assert len(set(weights)) == 4


class TestNormalizedDecision:

    def test_defaults(self):
        decision = NormalizedDecision(signal_id="x")
        assert decision.production_status is ProductionStatus.OK
        assert decision.severity_label is SeverityLabel.NONE
        assert decision.prod_issues_24h == 0
        assert decision.trend_label is None

    def test_is_frozen(self):
        decision = make_decision("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            decision.signal_id = "y"

    def test_synthesized_id(self):
        assert make_decision("missing:0a1b2c3d").is_synthesized_id
        assert not make_decision("sig-1").is_synthesized_id

    def test_to_dict_uses_plain_values(self):
        data = make_decision(
            "x",
            production_status=ProductionStatus.INCIDENT,
            trend_label=TrendLabel.STABLE,
        ).to_dict()
        assert data["production_status"] == "incident"
        assert data["severity_label"] == "None"
        assert data["trend_label"] == "stable"
        assert data["confidence_label"] is None
        assert type(data["production_status"]) is str


class TestBatchAndDetail:

    def test_batch_is_sized_and_iterable(self):
        batch = DecisionBatch(decisions=(make_decision("a"), make_decision("b")))
        assert len(batch) == 2
        assert [d.signal_id for d in batch] == ["a", "b"]
        assert not batch.using_explain

    def test_detail_to_dict(self):
        detail = DecisionDetail(
            signal_id="a",
            decision=make_decision("a"),
            evidence=(EvidenceEntry(id="e-1", signal_id="a"),),
            mode=DecisionMode.EXPLAIN,
            source_name="v_production_decisions_explain",
        )
        data = detail.to_dict()
        assert data["using_explain"] is True
        assert data["access_hint"] == "ok"
        assert data["decision"]["signal_id"] == "a"
        assert data["evidence"][0]["id"] == "e-1"

    def test_empty_detail(self):
        data = DecisionDetail(signal_id="a", access_hint="no_rows").to_dict()
        assert data["decision"] is None
        assert data["evidence"] == []


class TestExceptions:

    def test_str_includes_code_and_source(self):
        err = RowSourceError("Both views failed", source_name="v_production_decisions")
        assert str(err) == "[SD_ROW_SOURCE_ERROR] Both views failed (source: v_production_decisions)"

    def test_default_codes(self):
        assert SignalDeskError("x").code == "SD_INTERNAL_ERROR"
        assert RowFileLoadError("x").code == "SD_ROW_FILE_LOAD_ERROR"
        assert RowFileValidationError("x").code == "SD_ROW_FILE_VALIDATION_ERROR"
        assert RowFileVersionMismatch("x").code == "SD_ROW_FILE_VERSION_MISMATCH"

    def test_hierarchy(self):
        for cls in (RowSourceError, RowFileLoadError, RowFileValidationError, RowFileVersionMismatch):
            assert issubclass(cls, SignalDeskError)
        with pytest.raises(SignalDeskError):
            raise RowFileLoadError("boom")

    def test_to_dict_omits_empty_parts(self):
        assert SignalDeskError("x").to_dict() == {"code": "SD_INTERNAL_ERROR", "message": "x"}
        data = RowSourceError("x", details={"explain_hint": "denied"}, source_name="s").to_dict()
        assert data["details"] == {"explain_hint": "denied"}
        assert data["source_name"] == "s"
