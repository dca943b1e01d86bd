"""Confidence policy -- maps a confidence score to an action class."""

from __future__ import annotations

import math
from enum import Enum
from numbers import Real

from orb_insights.constants import CONFIDENCE_THRESHOLDS
from orb_insights.errors import InvalidConfidence


class ActionClass(str, Enum):
	"""How autonomously the system may act on an insight."""

	AUTO_APPLY = "auto_apply"
	SUGGEST = "suggest"
	LOG_ONLY = "log_only"
	IGNORE = "ignore"

	@property
	def rank(self) -> int:
		"""Higher rank means more autonomy (AUTO_APPLY=3, IGNORE=0)."""
		return _RANKS[self]


_RANKS: dict[ActionClass, int] = {
	ActionClass.AUTO_APPLY: 3,
	ActionClass.SUGGEST: 2,
	ActionClass.LOG_ONLY: 1,
	ActionClass.IGNORE: 0,
}


def validate_confidence(confidence: object) -> float:
	"""Return confidence as a float, raising InvalidConfidence unless it is a number in [0, 1]."""
	if isinstance(confidence, bool) or not isinstance(confidence, Real):
		raise InvalidConfidence(confidence)
	value = float(confidence)
	if math.isnan(value) or value < 0.0 or value > 1.0:
		raise InvalidConfidence(confidence)
	return value


def classify(confidence: float) -> ActionClass:
	"""Classify a confidence score. Boundary values belong to the higher class."""
	value = validate_confidence(confidence)
	for lower_bound, action in CONFIDENCE_THRESHOLDS:
		if value >= lower_bound:
			return ActionClass(action)
	# last bound is 0.0
	return ActionClass.IGNORE


class ConfidencePolicy:
	"""Injectable handle on classify(); holds no state of its own."""

	def classify(self, confidence: float) -> ActionClass:
		return classify(confidence)

	def validate(self, confidence: object) -> float:
		return validate_confidence(confidence)
