"""Action plan builder -- turns a role's goals into ordered, owned action items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal
from uuid import uuid4

from orb_insights.config import PlanConfig
from orb_insights.constants import PLAN_STATUS_IN_FLIGHT, PLAN_STATUS_QUEUED
from orb_insights.roles import Role, RoleContext

PlanStatus = Literal["queued", "in-flight", "done"]


@dataclass(frozen=True)
class ActionPlanItem:
	owner: Role
	summary: str
	eta_minutes: int
	status: PlanStatus = "queued"
	id: str = field(default_factory=lambda: uuid4().hex[:12])


@dataclass(frozen=True)
class ActionPlan:
	owner: Role
	actions: tuple[ActionPlanItem, ...]
	accent: str


def build_action_plan(context: RoleContext, goals: list[str], config: PlanConfig | None = None) -> ActionPlan:
	"""Build a plan with one item per goal; never returns an empty plan.

	The first item is in-flight and the rest are queued, with ETAs growing by
	a fixed step. With no goals a single queued calibration item is emitted.
	"""
	config = config or PlanConfig()
	actions = [
		ActionPlanItem(
			owner=context.role,
			summary=goal,
			eta_minutes=config.eta_step_minutes * (index + 1),
			status=PLAN_STATUS_IN_FLIGHT if index == 0 else PLAN_STATUS_QUEUED,
		)
		for index, goal in enumerate(goals)
	]
	if not actions:
		actions.append(ActionPlanItem(
			owner=context.role,
			summary=config.calibration_summary,
			eta_minutes=config.calibration_eta_minutes,
			status=PLAN_STATUS_QUEUED,
		))
	return ActionPlan(owner=context.role, actions=tuple(actions), accent=context.accent)
