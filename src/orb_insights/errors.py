"""Typed, recoverable errors raised by the insight engine."""

from __future__ import annotations

from typing import Any


class InsightError(ValueError):
	"""Base class for engine errors. Never fatal to the process."""


class InvalidConfidence(InsightError):
	"""Confidence is outside [0, 1], NaN, or not a number."""

	def __init__(self, value: Any) -> None:
		self.value = value
		super().__init__(f"confidence must be a number in [0, 1], got {value!r}")


class UnknownRole(InsightError):
	"""Role token is not one of the six known roles."""

	def __init__(self, role: Any) -> None:
		self.role = role
		super().__init__(f"unknown role: {role!r}")


class EmptyBatchItem(InsightError):
	"""A batch entry is missing the fields required to build a Pattern."""

	def __init__(self, reason: str, item: Any = None) -> None:
		self.reason = reason
		self.item = item
		super().__init__(f"invalid batch item: {reason}")
