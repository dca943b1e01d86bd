"""Tests for the confidence policy thresholds."""

from __future__ import annotations

import math

import pytest

from orb_insights.constants import CONFIDENCE_THRESHOLDS
from orb_insights.errors import InsightError, InvalidConfidence
from orb_insights.policy import ActionClass, ConfidencePolicy, classify, validate_confidence


class TestClassify:
	@pytest.mark.parametrize("confidence,expected", [
		(1.0, ActionClass.AUTO_APPLY),
		(0.95, ActionClass.AUTO_APPLY),
		(0.9, ActionClass.AUTO_APPLY),
		(0.8999, ActionClass.SUGGEST),
		(0.7, ActionClass.SUGGEST),
		(0.6999, ActionClass.LOG_ONLY),
		(0.5, ActionClass.LOG_ONLY),
		(0.4999, ActionClass.IGNORE),
		(0.0, ActionClass.IGNORE),
	])
	def test_thresholds(self, confidence: float, expected: ActionClass) -> None:
		assert classify(confidence) is expected

	def test_accepts_ints(self) -> None:
		assert classify(1) is ActionClass.AUTO_APPLY
		assert classify(0) is ActionClass.IGNORE

	@pytest.mark.parametrize("bad", [1.5, -0.1, math.nan, math.inf, -math.inf])
	def test_out_of_range_rejected(self, bad: float) -> None:
		with pytest.raises(InvalidConfidence):
			classify(bad)

	@pytest.mark.parametrize("bad", ["0.8", None, True, [0.8]])
	def test_non_numeric_rejected(self, bad: object) -> None:
		with pytest.raises(InvalidConfidence):
			classify(bad)  # type: ignore[arg-type]

	def test_error_is_value_error(self) -> None:
		with pytest.raises(ValueError):
			classify(2.0)
		assert issubclass(InvalidConfidence, InsightError)

	def test_error_carries_value(self) -> None:
		with pytest.raises(InvalidConfidence) as exc_info:
			classify(1.5)
		assert exc_info.value.value == 1.5


class TestActionClass:
	def test_rank_order(self) -> None:
		ranks = [a.rank for a in (ActionClass.AUTO_APPLY, ActionClass.SUGGEST, ActionClass.LOG_ONLY, ActionClass.IGNORE)]
		assert ranks == sorted(ranks, reverse=True)
		assert len(set(ranks)) == 4

	def test_string_values(self) -> None:
		assert ActionClass.AUTO_APPLY.value == "auto_apply"
		assert ActionClass("log_only") is ActionClass.LOG_ONLY

	def test_threshold_table_is_stable(self) -> None:
		assert [bound for bound, _ in CONFIDENCE_THRESHOLDS] == [0.9, 0.7, 0.5, 0.0]


class TestValidateConfidence:
	def test_returns_float(self) -> None:
		assert validate_confidence(1) == 1.0
		assert isinstance(validate_confidence(1), float)

	def test_rejects_nan(self) -> None:
		with pytest.raises(InvalidConfidence):
			validate_confidence(float("nan"))


class TestConfidencePolicy:
	def test_delegates_to_classify(self) -> None:
		policy = ConfidencePolicy()
		for c in (0.0, 0.5, 0.7, 0.9, 1.0, 0.33, 0.77):
			assert policy.classify(c) is classify(c)

	def test_validate(self) -> None:
		with pytest.raises(InvalidConfidence):
			ConfidencePolicy().validate(-1)
