"""Natural-language formatting for insights.

The generator talks to an InsightFormatter so product copy can change (or be
stubbed in tests) without touching classification or ordering.
"""

from __future__ import annotations

from typing import Any, Protocol

from orb_insights.constants import (
	DEFAULT_LIMITS,
	KIND_EFFICIENCY_GAIN,
	KIND_ERROR_PATTERN,
	KIND_FREQUENT_ACTION,
	KIND_MODE_PREFERENCE,
	KIND_RISK_THRESHOLD,
	KIND_TIME_BASED_ROUTINE,
)
from orb_insights.models import InsightContext, Pattern
from orb_insights.roles import RoleContext

NEUTRAL_PREFIX = "Insight"
GENERIC_RECOMMENDATION = "Review this pattern and take appropriate action"

RECOMMENDATIONS: dict[str, str] = {
	KIND_FREQUENT_ACTION: "Create a keyboard shortcut or schedule automatic execution",
	KIND_TIME_BASED_ROUTINE: "Set up automatic task scheduling for this time",
	KIND_MODE_PREFERENCE: "Set as default mode for this context",
	KIND_ERROR_PATTERN: "Review workflow steps and error logs",
	KIND_EFFICIENCY_GAIN: "Continue using this improved workflow",
	KIND_RISK_THRESHOLD: "Increase risk tolerance for this mode",
}


class InsightFormatter(Protocol):
	"""Produces the three text fields of an insight."""

	def title(self, pattern: Pattern, role_context: RoleContext | None) -> str: ...

	def description(self, pattern: Pattern, context: InsightContext | None) -> str: ...

	def recommendation(self, pattern: Pattern) -> str: ...


def _first(evidence: dict[str, Any], key: str, default: str) -> str:
	values = evidence.get(key)
	if isinstance(values, (list, tuple)) and values:
		return str(values[0])
	return default


def _number(evidence: dict[str, Any], key: str) -> float:
	value = evidence.get(key, 0)
	if isinstance(value, bool) or not isinstance(value, (int, float)):
		return 0.0
	return float(value)


def _time_start(evidence: dict[str, Any]) -> str:
	window = evidence.get("time_window")
	if isinstance(window, dict) and window.get("start"):
		return str(window["start"])
	return "Unknown Time"


def _render_value(value: Any) -> str:
	if isinstance(value, (list, tuple)):
		return ",".join(str(v) for v in value)
	return str(value)


def evidence_excerpt(evidence: dict[str, Any], max_chars: int) -> str:
	"""Render evidence as ``k=v; k2=v2`` in key order, truncated to max_chars."""
	text = "; ".join(f"{key}={_render_value(evidence[key])}" for key in sorted(evidence))
	if len(text) > max_chars:
		return text[: max(max_chars - 3, 0)].rstrip() + "..."
	return text


class DefaultInsightFormatter:
	"""Template-based formatter keyed on pattern kind."""

	def __init__(self, excerpt_chars: int = DEFAULT_LIMITS["excerpt_chars"]) -> None:
		self.excerpt_chars = excerpt_chars

	def title(self, pattern: Pattern, role_context: RoleContext | None) -> str:
		prefix = role_context.title if role_context is not None else NEUTRAL_PREFIX
		return f"{prefix}: {self._kind_title(pattern)}"

	def description(self, pattern: Pattern, context: InsightContext | None) -> str:
		text = self._kind_description(pattern)
		if context is not None and context.mode:
			text += f" Seen in {context.mode} mode."
		if pattern.evidence:
			text += f" Evidence: {evidence_excerpt(pattern.evidence, self.excerpt_chars)}"
		return text

	def recommendation(self, pattern: Pattern) -> str:
		return RECOMMENDATIONS.get(pattern.kind, GENERIC_RECOMMENDATION)

	def _kind_title(self, pattern: Pattern) -> str:
		ev = pattern.evidence
		if pattern.kind == KIND_FREQUENT_ACTION:
			return f"Frequent {_first(ev, 'actions', 'Unknown Action')} Detected"
		if pattern.kind == KIND_TIME_BASED_ROUTINE:
			return f"Daily Routine at {_time_start(ev)}"
		if pattern.kind == KIND_MODE_PREFERENCE:
			return f"{_first(ev, 'modes', 'Unknown Mode')} Mode Preferred"
		if pattern.kind == KIND_ERROR_PATTERN:
			return f"{_first(ev, 'actions', 'Unknown Action')} Failing Often"
		if pattern.kind == KIND_EFFICIENCY_GAIN:
			return "Workflow Improvement Found"
		if pattern.kind == KIND_RISK_THRESHOLD:
			return "Risk Tolerance Learned"
		return f"Pattern Detected ({pattern.kind})"

	def _kind_description(self, pattern: Pattern) -> str:
		ev = pattern.evidence
		if pattern.kind == KIND_FREQUENT_ACTION:
			action = _first(ev, "actions", "Unknown Action")
			per_day = _number(ev, "avg_per_day")
			return (
				f"You execute '{action}' {pattern.frequency:g} times ({per_day:.1f}/day). "
				f"This action could be automated or assigned a keyboard shortcut."
			)
		if pattern.kind == KIND_TIME_BASED_ROUTINE:
			action = _first(ev, "actions", "Unknown Action")
			return f"You regularly perform '{action}' around {_time_start(ev)}. This could be scheduled automatically."
		if pattern.kind == KIND_MODE_PREFERENCE:
			mode = _first(ev, "modes", "Unknown Mode")
			where = ev.get("context") or "this context"
			rate = _number(ev, "usage_rate") * 100
			return f"You use {mode} mode {rate:.0f}% of the time on {where}. Set it as default for this context?"
		if pattern.kind == KIND_ERROR_PATTERN:
			action = _first(ev, "actions", "Unknown Action")
			rate = _number(ev, "error_rate") * 100
			return f"'{action}' fails {rate:.1f}% of the time. This workflow may need review or debugging."
		if pattern.kind == KIND_EFFICIENCY_GAIN:
			improvement = _number(ev, "improvement") * 100
			return f"Your new workflow is {improvement:.0f}% faster. Great optimization!"
		if pattern.kind == KIND_RISK_THRESHOLD:
			mode = _first(ev, "modes", "this mode")
			rate = _number(ev, "approval_rate") * 100
			return f"You approve {rate:.0f}% of high-risk actions in {mode}. Adjust risk threshold?"
		return (
			f"Pattern '{pattern.kind}' observed {pattern.frequency:g} times "
			f"with {pattern.confidence * 100:.0f}% confidence."
		)
