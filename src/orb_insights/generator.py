"""Insight generation -- turns one pattern into one action-classified insight."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from orb_insights.config import EngineConfig
from orb_insights.formatting import DefaultInsightFormatter, InsightFormatter
from orb_insights.models import Insight, InsightContext, Pattern, coerce_pattern
from orb_insights.policy import ActionClass, ConfidencePolicy
from orb_insights.roles import ROLE_REGISTRY, RoleRegistry

_RECOMMENDED = frozenset({ActionClass.AUTO_APPLY, ActionClass.SUGGEST})


class InsightGenerator:
	"""Pure pattern -> insight transformation. No I/O, no clock, no randomness."""

	def __init__(
		self,
		formatter: InsightFormatter | None = None,
		policy: ConfidencePolicy | None = None,
		registry: RoleRegistry | None = None,
	) -> None:
		self.formatter = formatter or DefaultInsightFormatter()
		self.policy = policy or ConfidencePolicy()
		self.registry = registry or ROLE_REGISTRY

	@classmethod
	def from_config(cls, config: EngineConfig) -> InsightGenerator:
		return cls(formatter=DefaultInsightFormatter(excerpt_chars=config.excerpt_chars))

	def generate(
		self,
		pattern: Pattern | Mapping[str, Any],
		context: InsightContext | None = None,
	) -> Insight:
		"""Generate an insight. Raises InvalidConfidence before any text is built."""
		pattern = coerce_pattern(pattern)
		action_class = self.policy.classify(pattern.confidence)

		role_context = None
		if context is not None and context.role is not None:
			role_context = self.registry.get_context(context.role)

		recommendation = ""
		if action_class in _RECOMMENDED:
			recommendation = self.formatter.recommendation(pattern)

		metadata = {**pattern.metadata, **pattern.extras}
		return Insight(
			id=f"insight-{pattern.id}",
			pattern_id=pattern.id,
			kind=pattern.kind,
			title=self.formatter.title(pattern, role_context),
			description=self.formatter.description(pattern, context),
			recommendation=recommendation,
			confidence=float(pattern.confidence),
			action_class=action_class,
			metadata=metadata,
		)

	def prioritize(self, insights: Iterable[Insight]) -> list[Insight]:
		return prioritize(insights)


def prioritize(insights: Iterable[Insight]) -> list[Insight]:
	"""Order insights by action class (AUTO_APPLY first), then confidence.

	The sort is stable, so insights with equal keys keep their input order.
	Returns a new list; the input is not modified.
	"""
	return sorted(insights, key=lambda i: (-i.action_class.rank, -i.confidence))
