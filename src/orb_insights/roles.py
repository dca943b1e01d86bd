"""Role registry -- constant display metadata for the six assistant roles.

The tables below are built once at import into read-only mappings and are
only reachable through the accessor functions or a RoleRegistry value.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from orb_insights.constants import ROLE_ORDER
from orb_insights.errors import UnknownRole


class Role(str, Enum):
	ORB = "orb"  # system orchestrator
	SOL = "sol"  # engine / inference
	TE = "te"  # reflection / memory
	MAV = "mav"  # actions / tools
	LUNA = "luna"  # preferences / intent
	FORGE = "forge"  # multi-agent coordination


@dataclass(frozen=True)
class Palette:
	"""Five color tokens used to render a role."""

	surface: str
	background: str
	text_primary: str
	text_muted: str
	accent: str


@dataclass(frozen=True)
class RoleContext:
	"""Display metadata for a single role."""

	role: Role
	title: str
	description: str
	capabilities: tuple[str, ...]
	palette: Palette

	@property
	def accent(self) -> str:
		return self.palette.accent


_TITLES: dict[Role, str] = {
	Role.ORB: "Orb",
	Role.SOL: "Sol",
	Role.TE: "Te",
	Role.MAV: "Mav",
	Role.LUNA: "Luna",
	Role.FORGE: "Forge",
}

_DESCRIPTIONS: dict[Role, str] = {
	Role.ORB: "System orchestrator and coordinator",
	Role.SOL: "What the model runs on (engine/inference/brain)",
	Role.TE: "What the model reflects on (memory/evaluation/self-critique)",
	Role.MAV: "What the model accomplishes (actions/tools/execution)",
	Role.LUNA: "What the user decides they want it to be (intent/preferences/constraints)",
	Role.FORGE: "Multi-agent coordination and orchestration",
}

_CAPABILITIES: dict[Role, tuple[str, ...]] = {
	Role.ORB: ("routing", "context-sync", "safety"),
	Role.SOL: ("narrative", "analysis", "signal"),
	Role.TE: ("reflection", "memory", "embedding"),
	Role.MAV: ("automation", "tasking", "ops"),
	Role.LUNA: ("design", "persona", "ux-audit"),
	Role.FORGE: ("runtime", "composition", "delivery"),
}

_PALETTES: dict[Role, Palette] = {
	Role.ORB: Palette(
		surface="#0c0f13", background="#05070a",
		text_primary="#ffffff", text_muted="#a0b0c0", accent="#b9e4ff",
	),
	Role.SOL: Palette(
		surface="#001a26", background="#000d14",
		text_primary="#ffffff", text_muted="#7f9faf", accent="#00d4ff",
	),
	Role.TE: Palette(
		surface="#001a0d", background="#000d0a",
		text_primary="#ffffff", text_muted="#7faf9f", accent="#00ff88",
	),
	Role.MAV: Palette(
		surface="#261a00", background="#140d00",
		text_primary="#ffffff", text_muted="#af9f7f", accent="#ffaa00",
	),
	Role.LUNA: Palette(
		surface="#26001a", background="#14000d",
		text_primary="#ffffff", text_muted="#af7f9f", accent="#ff00ff",
	),
	Role.FORGE: Palette(
		surface="#1a0026", background="#0d0014",
		text_primary="#ffffff", text_muted="#9f7faf", accent="#e0b0ff",
	),
}

_PALETTE_FIELDS = frozenset(f.name for f in dataclasses.fields(Palette))
_CONTEXT_FIELDS = frozenset({"title", "description", "capabilities", "palette"})


def _build_contexts() -> Mapping[Role, RoleContext]:
	contexts = {
		role: RoleContext(
			role=role,
			title=_TITLES[role],
			description=_DESCRIPTIONS[role],
			capabilities=_CAPABILITIES[role],
			palette=_PALETTES[role],
		)
		for role in map(Role, ROLE_ORDER)
	}
	return MappingProxyType(contexts)


_ROLE_CONTEXTS: Mapping[Role, RoleContext] = _build_contexts()
_ROLE_ORDER: tuple[Role, ...] = tuple(Role(token) for token in ROLE_ORDER)


def parse_role(role: Role | str) -> Role:
	"""Resolve a Role or its exact lowercase token. No fallback role."""
	if isinstance(role, Role):
		return role
	try:
		return Role(role)
	except ValueError:
		raise UnknownRole(role) from None


def get_context(role: Role | str) -> RoleContext:
	return _ROLE_CONTEXTS[parse_role(role)]


def get_palette(role: Role | str) -> Palette:
	return get_context(role).palette


def list_roles() -> tuple[Role, ...]:
	"""Roles in display order: orb, sol, te, mav, luna, forge."""
	return _ROLE_ORDER


def derive_context(role: Role | str, **overrides: Any) -> RoleContext:
	"""Return a copy of a role's context with some fields replaced.

	Accepts ``title``, ``description``, ``capabilities`` and ``palette``, plus
	individual palette tokens (``accent=``, ``surface=``, ...). The shared base
	context is never modified.
	"""
	base = get_context(role)
	unknown = set(overrides) - _CONTEXT_FIELDS - _PALETTE_FIELDS
	if unknown:
		raise TypeError(f"unknown role context fields: {', '.join(sorted(unknown))}")

	palette_overrides = {k: overrides.pop(k) for k in list(overrides) if k in _PALETTE_FIELDS}
	palette = overrides.pop("palette", base.palette)
	if palette_overrides:
		palette = dataclasses.replace(palette, **palette_overrides)
	if "capabilities" in overrides:
		overrides["capabilities"] = tuple(overrides["capabilities"])
	return dataclasses.replace(base, palette=palette, **overrides)


def role_context_summary(context: RoleContext) -> str:
	"""One-line description of a role, e.g. for prompts or tooltips."""
	capability_list = ", ".join(context.capabilities)
	return f"{context.title}: {context.description} (capabilities: {capability_list})"


class RoleRegistry:
	"""Read-only view over the role tables, passed explicitly to collaborators."""

	def get_context(self, role: Role | str) -> RoleContext:
		return get_context(role)

	def get_palette(self, role: Role | str) -> Palette:
		return get_palette(role)

	def list_roles(self) -> tuple[Role, ...]:
		return list_roles()

	def derive_context(self, role: Role | str, **overrides: Any) -> RoleContext:
		return derive_context(role, **overrides)


ROLE_REGISTRY = RoleRegistry()


# -- Runtime context --


@dataclass(frozen=True)
class OrbContext:
	"""Role-tagged session context passed alongside requests."""

	role: Role
	session_id: str
	user_id: str | None = None
	device_id: str | None = None
	mode: str | None = None
	persona: str | None = None
	created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

	@property
	def role_context(self) -> RoleContext:
		return get_context(self.role)


def create_orb_context(
	role: Role | str,
	session_id: str,
	user_id: str | None = None,
	device_id: str | None = None,
	mode: str | None = None,
	persona: str | None = None,
) -> OrbContext:
	return OrbContext(
		role=parse_role(role),
		session_id=session_id,
		user_id=user_id,
		device_id=device_id,
		mode=mode,
		persona=persona,
	)
