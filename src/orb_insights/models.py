"""Data models for patterns, insights, and learning actions."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from orb_insights.errors import EmptyBatchItem, InvalidConfidence
from orb_insights.policy import ActionClass, validate_confidence
from orb_insights.roles import Role


def _new_id() -> str:
	return uuid4().hex[:12]


def content_id(data: Mapping[str, Any]) -> str:
	"""Stable 12-hex id derived from a pattern payload, ignoring any "id" key."""
	payload = {k: v for k, v in data.items() if k != "id"}
	encoded = json.dumps(payload, sort_keys=True, default=str).encode()
	return hashlib.sha256(encoded).hexdigest()[:12]


class Pattern(BaseModel):
	"""A detected behavioral regularity, as delivered by an external detector.

	Confidence range is not checked here; the confidence policy rejects bad
	scores with InvalidConfidence at generation time. Fields the model does not
	know are kept and passed through to the insight. A pattern without an id
	gets one derived from its content, so identical payloads map to the same
	insight.
	"""

	model_config = ConfigDict(extra="allow", frozen=True)

	kind: str
	confidence: float
	id: str = ""
	frequency: float = 0.0
	evidence: dict[str, Any] = Field(default_factory=dict)
	event_ids: list[str] = Field(default_factory=list)
	event_count: int = 0
	status: Literal["detected", "validated", "applied", "rejected"] = "detected"
	detected_at: str | None = None
	metadata: dict[str, Any] = Field(default_factory=dict)

	@model_validator(mode="before")
	@classmethod
	def _default_id(cls, data: Any) -> Any:
		if isinstance(data, Mapping) and not data.get("id"):
			data = {**data, "id": content_id(data)}
		return data

	@field_validator("kind")
	@classmethod
	def _kind_not_blank(cls, value: str) -> str:
		if not value.strip():
			raise ValueError("kind must not be blank")
		return value

	@field_validator("confidence", mode="before")
	@classmethod
	def _confidence_is_number(cls, value: Any) -> Any:
		# same acceptance rule as validate_confidence; range is left to the policy
		if isinstance(value, bool) or not isinstance(value, Real):
			raise ValueError(f"confidence must be a number, got {type(value).__name__}")
		return value

	@property
	def extras(self) -> dict[str, Any]:
		"""Unknown fields supplied at ingress."""
		return dict(self.model_extra or {})


def coerce_pattern(value: Pattern | Mapping[str, Any]) -> Pattern:
	"""Build a Pattern from a raw mapping, mapping failures to engine errors."""
	if isinstance(value, Pattern):
		return value
	if not isinstance(value, Mapping):
		raise EmptyBatchItem(f"expected a pattern mapping, got {type(value).__name__}", value)
	for required in ("kind", "confidence"):
		if value.get(required) is None:
			raise EmptyBatchItem(f"missing required field {required!r}", value)
	try:
		return Pattern.model_validate(dict(value))
	except ValidationError as exc:
		if any(err["loc"] and err["loc"][0] == "confidence" for err in exc.errors()):
			raise InvalidConfidence(value.get("confidence")) from exc
		raise EmptyBatchItem(str(exc.errors()[0]["msg"]), value) from exc


@dataclass(frozen=True)
class InsightContext:
	"""Optional caller context. Affects phrasing only, never the action class."""

	role: Role | None = None
	user_id: str | None = None
	mode: str | None = None
	persona: str | None = None
	recent_events: tuple[str, ...] = ()


@dataclass(frozen=True)
class Insight:
	"""Human-readable, action-classified derivation of exactly one Pattern."""

	id: str
	pattern_id: str
	kind: str
	title: str
	description: str
	recommendation: str
	confidence: float
	action_class: ActionClass
	metadata: dict[str, Any] = field(default_factory=dict, hash=False)

	def __post_init__(self) -> None:
		validate_confidence(self.confidence)

	def to_dict(self) -> dict[str, Any]:
		return {
			"id": self.id,
			"pattern_id": self.pattern_id,
			"kind": self.kind,
			"title": self.title,
			"description": self.description,
			"recommendation": self.recommendation,
			"confidence": self.confidence,
			"action_class": self.action_class.value,
			"metadata": dict(self.metadata),
		}


LearningActionType = Literal[
	"create_shortcut",
	"suggest_automation",
	"recommend_mode",
	"adjust_constraint",
	"update_preference",
	"adjust_risk_threshold",
]


@dataclass(frozen=True)
class LearningAction:
	"""A concrete adaptation proposed for a surfaced insight."""

	type: LearningActionType
	insight_id: str
	confidence: float
	target: str = ""
	reason: str = ""
	status: Literal["pending", "applied", "rejected"] = "pending"
	id: str = field(default_factory=_new_id)
