"""Batch insight generation with per-item failure isolation."""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from orb_insights.config import InsightsConfig
from orb_insights.constants import DEFAULT_LIMITS
from orb_insights.errors import EmptyBatchItem, InsightError
from orb_insights.generator import InsightGenerator, prioritize
from orb_insights.models import Insight, InsightContext, Pattern
from orb_insights.policy import ActionClass

log = logging.getLogger(__name__)

# decode_patterns yields InsightError in place of entries it could not validate
PatternInput = Pattern | Mapping[str, Any] | InsightError


@dataclass(frozen=True)
class BatchOutcome:
	"""Result for one input position: an insight or the error it produced."""

	index: int
	insight: Insight | None = None
	error: InsightError | None = None
	pattern_id: str | None = None

	def __post_init__(self) -> None:
		if (self.insight is None) == (self.error is None):
			raise InsightError(f"outcome {self.index} must carry exactly one of insight or error")

	@property
	def ok(self) -> bool:
		return self.error is None

	def unwrap(self) -> Insight:
		if self.error is not None:
			raise self.error
		if self.insight is None:
			raise InsightError(f"outcome {self.index} has no insight")
		return self.insight


def _pattern_id(item: Any) -> str | None:
	if isinstance(item, EmptyBatchItem):
		return _pattern_id(item.item)
	if isinstance(item, Pattern):
		return item.id
	if isinstance(item, Mapping):
		value = item.get("id")
		return str(value) if value is not None else None
	return None


def _generate_one(
	generator: InsightGenerator,
	index: int,
	item: PatternInput,
	context: InsightContext | None,
) -> BatchOutcome:
	try:
		if isinstance(item, InsightError):
			raise item
		insight = generator.generate(item, context)
	except InsightError as exc:
		log.warning("Pattern %d (%s) failed: %s", index, _pattern_id(item) or "no id", exc)
		return BatchOutcome(index=index, error=exc, pattern_id=_pattern_id(item))
	return BatchOutcome(index=index, insight=insight, pattern_id=insight.pattern_id)


def generate_batch(
	patterns: Sequence[PatternInput],
	context: InsightContext | None = None,
	generator: InsightGenerator | None = None,
	max_workers: int = 1,
) -> list[BatchOutcome]:
	"""Generate one outcome per pattern, in input order.

	A failing pattern produces an error outcome at its position; the rest of
	the batch is unaffected. With max_workers > 1 items are processed on a
	thread pool and collected positionally.
	"""
	generator = generator or InsightGenerator()
	items = list(patterns)
	if max_workers <= 1 or len(items) <= 1:
		return [_generate_one(generator, i, item, context) for i, item in enumerate(items)]

	with ThreadPoolExecutor(max_workers=max_workers) as pool:
		return list(pool.map(
			lambda pair: _generate_one(generator, pair[0], pair[1], context),
			enumerate(items),
		))


async def agenerate_batch(
	patterns: Sequence[PatternInput],
	context: InsightContext | None = None,
	generator: InsightGenerator | None = None,
) -> list[BatchOutcome]:
	"""Async variant of generate_batch; gather preserves input order."""
	generator = generator or InsightGenerator()
	return list(await asyncio.gather(*(
		asyncio.to_thread(_generate_one, generator, i, item, context)
		for i, item in enumerate(patterns)
	)))


@dataclass
class BatchReport:
	"""Aggregated results of one batch run."""

	outcomes: list[BatchOutcome] = field(default_factory=list)
	insights: list[Insight] = field(default_factory=list)  # prioritized
	failures: list[BatchOutcome] = field(default_factory=list)
	counts: dict[str, int] = field(default_factory=dict)
	mean_confidence: float = 0.0


def summarize_outcomes(outcomes: Sequence[BatchOutcome]) -> dict[str, int]:
	"""Count successful outcomes per action class, plus failures under "failed"."""
	counts: Counter[str] = Counter({action.value: 0 for action in ActionClass})
	counts["failed"] = 0
	for outcome in outcomes:
		if outcome.ok and outcome.insight is not None:
			counts[outcome.insight.action_class.value] += 1
		else:
			counts["failed"] += 1
	return dict(counts)


class BatchCoordinator:
	"""Fans patterns through an InsightGenerator and assembles a report."""

	def __init__(
		self,
		generator: InsightGenerator | None = None,
		max_workers: int = DEFAULT_LIMITS["max_workers"],
	) -> None:
		self._generator = generator or InsightGenerator()
		self._max_workers = max_workers

	@classmethod
	def from_config(cls, config: InsightsConfig) -> BatchCoordinator:
		return cls(InsightGenerator.from_config(config.engine), config.engine.max_workers)

	def run(self, patterns: Sequence[PatternInput], context: InsightContext | None = None) -> BatchReport:
		outcomes = generate_batch(patterns, context, self._generator, self._max_workers)
		return self._report(outcomes)

	async def arun(self, patterns: Sequence[PatternInput], context: InsightContext | None = None) -> BatchReport:
		outcomes = await agenerate_batch(patterns, context, self._generator)
		return self._report(outcomes)

	def _report(self, outcomes: list[BatchOutcome]) -> BatchReport:
		insights = [o.insight for o in outcomes if o.ok and o.insight is not None]
		failures = [o for o in outcomes if not o.ok]
		mean = sum(i.confidence for i in insights) / len(insights) if insights else 0.0
		if failures:
			log.info("Batch finished: %d insights, %d failures", len(insights), len(failures))
		return BatchReport(
			outcomes=outcomes,
			insights=prioritize(insights),
			failures=failures,
			counts=summarize_outcomes(outcomes),
			mean_confidence=round(mean, 4),
		)
