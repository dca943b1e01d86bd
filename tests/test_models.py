"""Tests for pattern ingress and insight models."""

from __future__ import annotations

import dataclasses
import math

import pytest
from pydantic import ValidationError

from orb_insights.errors import EmptyBatchItem, InvalidConfidence
from orb_insights.models import Insight, InsightContext, LearningAction, Pattern, _new_id, coerce_pattern
from orb_insights.policy import ActionClass


class TestHelpers:
	def test_new_id_length(self) -> None:
		assert len(_new_id()) == 12

	def test_new_id_unique(self) -> None:
		ids = {_new_id() for _ in range(100)}
		assert len(ids) == 100


class TestPattern:
	def test_defaults(self) -> None:
		p = Pattern(kind="frequent_action", confidence=0.5)
		assert p.frequency == 0.0
		assert p.evidence == {}
		assert p.event_ids == []
		assert p.status == "detected"
		assert p.detected_at is None
		assert len(p.id) == 12

	def test_explicit_id_kept(self) -> None:
		assert Pattern(id="abc", kind="x", confidence=0.5).id == "abc"

	def test_string_confidence_rejected_at_construction(self) -> None:
		with pytest.raises(ValidationError):
			Pattern(kind="x", confidence="0.5")  # type: ignore[arg-type]

	def test_range_not_checked_at_construction(self) -> None:
		p = Pattern(kind="x", confidence=2.0)
		assert p.confidence == 2.0

	def test_blank_kind_rejected(self) -> None:
		with pytest.raises(ValidationError):
			Pattern(kind="   ", confidence=0.5)

	def test_frozen(self) -> None:
		p = Pattern(kind="x", confidence=0.5)
		with pytest.raises(ValidationError):
			p.confidence = 0.9  # type: ignore[misc]

	def test_extras_preserved(self) -> None:
		p = Pattern(kind="x", confidence=0.5, source="calendar", weight=3)
		assert p.extras == {"source": "calendar", "weight": 3}

	def test_bad_status_rejected(self) -> None:
		with pytest.raises(ValidationError):
			Pattern(kind="x", confidence=0.5, status="unknown")


class TestCoercePattern:
	def test_passthrough(self) -> None:
		p = Pattern(kind="x", confidence=0.5)
		assert coerce_pattern(p) is p

	def test_from_mapping(self) -> None:
		p = coerce_pattern({"kind": "error_pattern", "confidence": 0.8, "id": "abc"})
		assert p.kind == "error_pattern"
		assert p.id == "abc"

	def test_numeric_string_rejected(self) -> None:
		with pytest.raises(InvalidConfidence):
			coerce_pattern({"kind": "x", "confidence": "0.75"})

	def test_int_confidence_accepted(self) -> None:
		assert coerce_pattern({"kind": "x", "confidence": 1}).confidence == 1.0

	def test_missing_id_derived_from_content(self) -> None:
		raw = {"kind": "frequent_action", "confidence": 0.92, "evidence": {"actions": ["git-commit"]}}
		first = coerce_pattern(raw)
		second = coerce_pattern(dict(raw))
		assert first.id == second.id
		assert len(first.id) == 12
		assert coerce_pattern({**raw, "confidence": 0.91}).id != first.id

	def test_id_derivation_ignores_key_order(self) -> None:
		a = coerce_pattern({"kind": "x", "confidence": 0.5, "source": "inbox"})
		b = coerce_pattern({"source": "inbox", "confidence": 0.5, "kind": "x"})
		assert a.id == b.id

	def test_missing_kind(self) -> None:
		with pytest.raises(EmptyBatchItem) as exc_info:
			coerce_pattern({"confidence": 0.5})
		assert "kind" in exc_info.value.reason

	def test_missing_confidence(self) -> None:
		with pytest.raises(EmptyBatchItem):
			coerce_pattern({"kind": "x"})

	def test_blank_kind(self) -> None:
		with pytest.raises(EmptyBatchItem):
			coerce_pattern({"kind": "", "confidence": 0.5})

	def test_non_numeric_confidence(self) -> None:
		with pytest.raises(InvalidConfidence):
			coerce_pattern({"kind": "x", "confidence": "high"})

	def test_bool_confidence(self) -> None:
		with pytest.raises(InvalidConfidence):
			coerce_pattern({"kind": "x", "confidence": True})

	def test_not_a_mapping(self) -> None:
		with pytest.raises(EmptyBatchItem):
			coerce_pattern(["kind", "x"])  # type: ignore[arg-type]
		with pytest.raises(EmptyBatchItem):
			coerce_pattern(None)  # type: ignore[arg-type]


def _insight(**overrides: object) -> Insight:
	defaults: dict[str, object] = {
		"id": "insight-p1",
		"pattern_id": "p1",
		"kind": "frequent_action",
		"title": "t",
		"description": "d",
		"recommendation": "",
		"confidence": 0.6,
		"action_class": ActionClass.LOG_ONLY,
	}
	defaults.update(overrides)
	return Insight(**defaults)  # type: ignore[arg-type]


class TestInsight:
	def test_construction(self) -> None:
		insight = _insight(metadata={"a": 1})
		assert insight.metadata == {"a": 1}

	@pytest.mark.parametrize("bad", [1.01, -0.5, math.nan])
	def test_invalid_confidence_is_construction_error(self, bad: float) -> None:
		with pytest.raises(InvalidConfidence):
			_insight(confidence=bad)

	def test_immutable(self) -> None:
		insight = _insight()
		with pytest.raises(dataclasses.FrozenInstanceError):
			insight.title = "x"  # type: ignore[misc]

	def test_to_dict_plain_types(self) -> None:
		d = _insight(metadata={"k": "v"}).to_dict()
		assert d["action_class"] == "log_only"
		assert d["metadata"] == {"k": "v"}
		assert set(d) == {
			"id", "pattern_id", "kind", "title", "description",
			"recommendation", "confidence", "action_class", "metadata",
		}


class TestInsightContext:
	def test_defaults(self) -> None:
		ctx = InsightContext()
		assert ctx.role is None
		assert ctx.recent_events == ()


class TestLearningAction:
	def test_defaults(self) -> None:
		action = LearningAction(type="create_shortcut", insight_id="insight-p1", confidence=0.95)
		assert action.status == "pending"
		assert action.target == ""
		assert len(action.id) == 12
