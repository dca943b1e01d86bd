"""Centralized thresholds, role ordering, and default limits."""

from __future__ import annotations

# -- Roles --

ROLE_ORB = "orb"
ROLE_SOL = "sol"
ROLE_TE = "te"
ROLE_MAV = "mav"
ROLE_LUNA = "luna"
ROLE_FORGE = "forge"

# Display and iteration order
ROLE_ORDER: tuple[str, ...] = (ROLE_ORB, ROLE_SOL, ROLE_TE, ROLE_MAV, ROLE_LUNA, ROLE_FORGE)

# -- Confidence thresholds --

AUTO_APPLY_THRESHOLD = 0.9
SUGGEST_THRESHOLD = 0.7
LOG_ONLY_THRESHOLD = 0.5
IGNORE_THRESHOLD = 0.0

# Lower bound -> action class value, highest first. Only policy.classify reads this.
CONFIDENCE_THRESHOLDS: tuple[tuple[float, str], ...] = (
	(AUTO_APPLY_THRESHOLD, "auto_apply"),
	(SUGGEST_THRESHOLD, "suggest"),
	(LOG_ONLY_THRESHOLD, "log_only"),
	(IGNORE_THRESHOLD, "ignore"),
)

# -- Pattern kinds --

KIND_FREQUENT_ACTION = "frequent_action"
KIND_TIME_BASED_ROUTINE = "time_based_routine"
KIND_MODE_PREFERENCE = "mode_preference"
KIND_ERROR_PATTERN = "error_pattern"
KIND_EFFICIENCY_GAIN = "efficiency_gain"
KIND_RISK_THRESHOLD = "risk_threshold"

PATTERN_KINDS: frozenset[str] = frozenset({
	KIND_FREQUENT_ACTION,
	KIND_TIME_BASED_ROUTINE,
	KIND_MODE_PREFERENCE,
	KIND_ERROR_PATTERN,
	KIND_EFFICIENCY_GAIN,
	KIND_RISK_THRESHOLD,
})

PATTERN_STATUSES: frozenset[str] = frozenset({"detected", "validated", "applied", "rejected"})

# -- Plan item statuses --

PLAN_STATUS_QUEUED = "queued"
PLAN_STATUS_IN_FLIGHT = "in-flight"
PLAN_STATUS_DONE = "done"

# -- Reflection --

REFLECTION_MAX_ACTIONS = 3
EMBEDDING_SEED_LENGTH = 8
EMBEDDING_SEED_MODULUS = 97

# Common default limits used across the codebase
DEFAULT_LIMITS: dict[str, int] = {
	"max_workers": 4,
	"excerpt_chars": 80,
	"max_surfaced": 5,
	"eta_step_minutes": 15,
	"calibration_eta_minutes": 10,
}

CALIBRATION_SUMMARY = "calibrate next objective"
