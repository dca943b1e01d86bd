"""Reflection builder -- bounded remedial actions plus a deterministic embedding seed."""

from __future__ import annotations

from dataclasses import dataclass

from orb_insights.constants import EMBEDDING_SEED_LENGTH, EMBEDDING_SEED_MODULUS, REFLECTION_MAX_ACTIONS
from orb_insights.roles import Role, RoleContext


@dataclass(frozen=True)
class Reflection:
	"""Output of one reflection pass over a role's signals."""

	role: Role
	summary: str
	actions: tuple[str, ...]
	embedding_seed: tuple[int, ...]
	emphasis_color: str


def embedding_seed(text: str) -> tuple[int, ...]:
	"""Fixed-length, order-sensitive seed derived from text. Empty text gives zeros."""
	if not text:
		return (0,) * EMBEDDING_SEED_LENGTH
	return tuple(ord(text[i % len(text)]) % EMBEDDING_SEED_MODULUS for i in range(EMBEDDING_SEED_LENGTH))


def reflect(context: RoleContext, signals: list[str]) -> Reflection:
	joined = " ".join(signals)
	quadrant = len(joined) % 5 + 1
	actions = tuple(
		f"Resolve signal {index + 1}: {signal}"
		for index, signal in enumerate(signals[:REFLECTION_MAX_ACTIONS])
	)
	return Reflection(
		role=context.role,
		summary=f"{context.title} reflects on {len(signals)} inputs and prioritizes quadrant {quadrant}.",
		actions=actions,
		embedding_seed=embedding_seed(joined),
		emphasis_color=context.accent,
	)
