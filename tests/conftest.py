"""Shared fixtures for insight engine tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from orb_insights.generator import InsightGenerator
from orb_insights.models import Pattern


@pytest.fixture()
def make_pattern() -> Callable[..., Pattern]:
	def _make(**overrides: Any) -> Pattern:
		defaults: dict[str, Any] = {
			"id": "p1",
			"kind": "frequent_action",
			"confidence": 0.92,
			"frequency": 47,
			"evidence": {"actions": ["git-commit"], "avg_per_day": 6.7},
		}
		defaults.update(overrides)
		return Pattern(**defaults)
	return _make


@pytest.fixture()
def generator() -> InsightGenerator:
	return InsightGenerator()
