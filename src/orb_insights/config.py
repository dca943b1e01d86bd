"""Configuration loading from orb-insights.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from orb_insights.constants import CALIBRATION_SUMMARY, DEFAULT_LIMITS, PATTERN_KINDS

log = logging.getLogger(__name__)


@dataclass
class EngineConfig:
	"""Insight generation settings."""

	max_workers: int = DEFAULT_LIMITS["max_workers"]
	excerpt_chars: int = DEFAULT_LIMITS["excerpt_chars"]


@dataclass
class DispatchConfig:
	"""Insight routing settings."""

	max_surfaced: int = DEFAULT_LIMITS["max_surfaced"]
	manual_kinds: list[str] = field(default_factory=list)  # never auto-executed


@dataclass
class PlanConfig:
	"""Action plan settings."""

	eta_step_minutes: int = DEFAULT_LIMITS["eta_step_minutes"]
	calibration_eta_minutes: int = DEFAULT_LIMITS["calibration_eta_minutes"]
	calibration_summary: str = CALIBRATION_SUMMARY


@dataclass
class InsightsConfig:
	"""Top-level configuration."""

	engine: EngineConfig = field(default_factory=EngineConfig)
	dispatch: DispatchConfig = field(default_factory=DispatchConfig)
	plan: PlanConfig = field(default_factory=PlanConfig)


def _build_engine(data: dict[str, Any]) -> EngineConfig:
	ec = EngineConfig()
	if "max_workers" in data:
		ec.max_workers = int(data["max_workers"])
	if "excerpt_chars" in data:
		ec.excerpt_chars = int(data["excerpt_chars"])
	return ec


def _build_dispatch(data: dict[str, Any]) -> DispatchConfig:
	dc = DispatchConfig()
	if "max_surfaced" in data:
		dc.max_surfaced = int(data["max_surfaced"])
	if "manual_kinds" in data:
		dc.manual_kinds = [str(k) for k in data["manual_kinds"]]
	return dc


def _build_plan(data: dict[str, Any]) -> PlanConfig:
	pc = PlanConfig()
	if "eta_step_minutes" in data:
		pc.eta_step_minutes = int(data["eta_step_minutes"])
	if "calibration_eta_minutes" in data:
		pc.calibration_eta_minutes = int(data["calibration_eta_minutes"])
	if "calibration_summary" in data:
		pc.calibration_summary = str(data["calibration_summary"])
	return pc


def load_config(path: str | Path) -> InsightsConfig:
	"""Load configuration from a TOML file. Missing sections use defaults."""
	p = Path(path)
	if not p.exists():
		raise FileNotFoundError(f"Config file not found: {p}")

	with open(p, "rb") as f:
		data = tomllib.load(f)

	cfg = InsightsConfig()
	for section in ("engine", "dispatch", "plan"):
		if section not in data:
			log.info("No [%s] section in %s, using defaults", section, p)
	cfg.engine = _build_engine(data.get("engine", {}))
	cfg.dispatch = _build_dispatch(data.get("dispatch", {}))
	cfg.plan = _build_plan(data.get("plan", {}))
	return cfg


def validate_config(config: InsightsConfig) -> list[tuple[str, str]]:
	"""Check a loaded config for problems. Returns (level, message) pairs."""
	issues: list[tuple[str, str]] = []

	if config.engine.max_workers < 1:
		issues.append(("error", f"engine.max_workers must be >= 1, got {config.engine.max_workers}"))
	if config.engine.excerpt_chars < 4:
		issues.append(("error", f"engine.excerpt_chars must be >= 4, got {config.engine.excerpt_chars}"))

	if config.dispatch.max_surfaced < 0:
		issues.append(("error", f"dispatch.max_surfaced must be >= 0, got {config.dispatch.max_surfaced}"))
	elif config.dispatch.max_surfaced == 0:
		issues.append(("warning", "dispatch.max_surfaced is 0: suggestions will never be shown"))
	for kind in config.dispatch.manual_kinds:
		if kind not in PATTERN_KINDS:
			issues.append(("warning", f"dispatch.manual_kinds: unknown pattern kind {kind!r}"))

	if config.plan.eta_step_minutes <= 0:
		issues.append(("error", f"plan.eta_step_minutes must be > 0, got {config.plan.eta_step_minutes}"))
	if config.plan.calibration_eta_minutes <= 0:
		issues.append((
			"error",
			f"plan.calibration_eta_minutes must be > 0, got {config.plan.calibration_eta_minutes}",
		))
	if not config.plan.calibration_summary.strip():
		issues.append(("error", "plan.calibration_summary must not be empty"))

	return issues
