"""Tests for the reflection builder."""

from __future__ import annotations

from orb_insights.reflection import embedding_seed, reflect
from orb_insights.roles import Role, get_context


class TestReflect:
	def test_actions_bounded_and_ordered(self) -> None:
		result = reflect(get_context("te"), ["late replies", "missed standup", "slow build", "noisy inbox"])
		assert result.actions == (
			"Resolve signal 1: late replies",
			"Resolve signal 2: missed standup",
			"Resolve signal 3: slow build",
		)

	def test_fewer_signals_than_cap(self) -> None:
		assert len(reflect(get_context("te"), ["one"]).actions) == 1

	def test_summary(self) -> None:
		result = reflect(get_context("te"), ["abcd"])
		# len("abcd") % 5 + 1 == 5
		assert result.summary == "Te reflects on 1 inputs and prioritizes quadrant 5."

	def test_role_and_color(self) -> None:
		result = reflect(get_context("sol"), [])
		assert result.role is Role.SOL
		assert result.emphasis_color == get_context("sol").accent
		assert result.actions == ()

	def test_deterministic(self) -> None:
		ctx = get_context("orb")
		assert reflect(ctx, ["a", "b"]) == reflect(ctx, ["a", "b"])


class TestEmbeddingSeed:
	def test_fixed_length(self) -> None:
		assert len(embedding_seed("hello world, this is long text")) == 8
		assert len(embedding_seed("a")) == 8

	def test_empty_is_zeros(self) -> None:
		assert embedding_seed("") == (0,) * 8

	def test_values(self) -> None:
		# ord("a") == 97 -> 0, ord("b") == 98 -> 1
		assert embedding_seed("ab") == (0, 1, 0, 1, 0, 1, 0, 1)

	def test_order_sensitive(self) -> None:
		assert embedding_seed("ab") != embedding_seed("ba")

	def test_reflect_uses_joined_signals(self) -> None:
		result = reflect(get_context("te"), ["a", "b"])
		assert result.embedding_seed == embedding_seed("a b")
