"""Insight dispatch -- decides whether to execute, prompt, log, or drop an insight."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from orb_insights.config import DispatchConfig
from orb_insights.constants import (
	KIND_EFFICIENCY_GAIN,
	KIND_ERROR_PATTERN,
	KIND_FREQUENT_ACTION,
	KIND_MODE_PREFERENCE,
	KIND_RISK_THRESHOLD,
	KIND_TIME_BASED_ROUTINE,
)
from orb_insights.generator import prioritize
from orb_insights.models import Insight, LearningAction
from orb_insights.policy import ActionClass

log = logging.getLogger(__name__)


class Disposition(str, Enum):
	EXECUTE = "execute"
	PROMPT = "prompt"
	LOG = "log"
	DROP = "drop"


_DISPOSITIONS: dict[ActionClass, Disposition] = {
	ActionClass.AUTO_APPLY: Disposition.EXECUTE,
	ActionClass.SUGGEST: Disposition.PROMPT,
	ActionClass.LOG_ONLY: Disposition.LOG,
	ActionClass.IGNORE: Disposition.DROP,
}

# kind -> (learning action type, target)
_LEARNING_ACTIONS: dict[str, tuple[str, str]] = {
	KIND_FREQUENT_ACTION: ("create_shortcut", "shortcuts"),
	KIND_TIME_BASED_ROUTINE: ("suggest_automation", "schedule"),
	KIND_MODE_PREFERENCE: ("recommend_mode", "default_mode"),
	KIND_ERROR_PATTERN: ("adjust_constraint", "workflow"),
	KIND_EFFICIENCY_GAIN: ("update_preference", "workflow"),
	KIND_RISK_THRESHOLD: ("adjust_risk_threshold", "risk_level"),
}

Handler = Callable[[Insight, LearningAction | None], None]


def suggest_learning_action(insight: Insight) -> LearningAction | None:
	"""Propose an adaptation for insights the user should see or the system may apply."""
	if insight.action_class not in (ActionClass.AUTO_APPLY, ActionClass.SUGGEST):
		return None
	action_type, target = _LEARNING_ACTIONS.get(insight.kind, ("update_preference", insight.kind))
	return LearningAction(
		type=action_type,  # type: ignore[arg-type]
		insight_id=insight.id,
		confidence=insight.confidence,
		target=target,
		reason=insight.recommendation or insight.title,
	)


@dataclass(frozen=True)
class DispatchRecord:
	"""How one insight was routed."""

	insight: Insight
	disposition: Disposition
	learning_action: LearningAction | None = None


class InsightDispatcher:
	"""Routes insights to per-disposition handlers based on their action class."""

	def __init__(
		self,
		config: DispatchConfig | None = None,
		handlers: dict[Disposition, Handler] | None = None,
	) -> None:
		self.config = config or DispatchConfig()
		self._handlers: dict[Disposition, Handler] = dict(handlers or {})

	def register(self, disposition: Disposition, handler: Handler) -> None:
		self._handlers[disposition] = handler

	def disposition(self, insight: Insight) -> Disposition:
		result = _DISPOSITIONS[insight.action_class]
		if result is Disposition.EXECUTE and insight.kind in self.config.manual_kinds:
			return Disposition.PROMPT
		return result

	def dispatch_all(self, insights: Iterable[Insight]) -> list[DispatchRecord]:
		"""Route insights in priority order, surfacing at most max_surfaced prompts."""
		records: list[DispatchRecord] = []
		prompted = 0
		for insight in prioritize(insights):
			disposition = self.disposition(insight)
			if disposition is Disposition.PROMPT:
				if prompted >= self.config.max_surfaced:
					disposition = Disposition.LOG
				else:
					prompted += 1

			action = None
			if disposition in (Disposition.EXECUTE, Disposition.PROMPT):
				action = suggest_learning_action(insight)

			handler = self._handlers.get(disposition)
			if handler is not None:
				handler(insight, action)
			log.debug("Dispatched %s as %s", insight.id, disposition.value)
			records.append(DispatchRecord(insight=insight, disposition=disposition, learning_action=action))
		return records
