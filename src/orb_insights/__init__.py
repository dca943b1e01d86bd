"""Adaptation engine: behavioral patterns -> action-classified insights."""

from orb_insights.action_plan import ActionPlan, ActionPlanItem, build_action_plan
from orb_insights.batch import (
	BatchCoordinator,
	BatchOutcome,
	BatchReport,
	agenerate_batch,
	generate_batch,
	summarize_outcomes,
)
from orb_insights.dispatch import Disposition, DispatchRecord, InsightDispatcher, suggest_learning_action
from orb_insights.errors import EmptyBatchItem, InsightError, InvalidConfidence, UnknownRole
from orb_insights.formatting import DefaultInsightFormatter, InsightFormatter
from orb_insights.generator import InsightGenerator, prioritize
from orb_insights.ingress import decode_patterns, valid_patterns
from orb_insights.models import Insight, InsightContext, LearningAction, Pattern, coerce_pattern
from orb_insights.policy import ActionClass, ConfidencePolicy, classify
from orb_insights.reflection import Reflection, embedding_seed, reflect
from orb_insights.roles import (
	ROLE_REGISTRY,
	OrbContext,
	Palette,
	Role,
	RoleContext,
	RoleRegistry,
	create_orb_context,
	derive_context,
	get_context,
	get_palette,
	list_roles,
	parse_role,
	role_context_summary,
)

__all__ = [
	"ROLE_REGISTRY",
	"ActionClass",
	"ActionPlan",
	"ActionPlanItem",
	"BatchCoordinator",
	"BatchOutcome",
	"BatchReport",
	"ConfidencePolicy",
	"DefaultInsightFormatter",
	"DispatchRecord",
	"Disposition",
	"EmptyBatchItem",
	"Insight",
	"InsightContext",
	"InsightDispatcher",
	"InsightError",
	"InsightFormatter",
	"InsightGenerator",
	"InvalidConfidence",
	"LearningAction",
	"OrbContext",
	"Palette",
	"Pattern",
	"Reflection",
	"Role",
	"RoleContext",
	"RoleRegistry",
	"UnknownRole",
	"agenerate_batch",
	"build_action_plan",
	"classify",
	"coerce_pattern",
	"create_orb_context",
	"decode_patterns",
	"derive_context",
	"embedding_seed",
	"generate_batch",
	"get_context",
	"get_palette",
	"list_roles",
	"parse_role",
	"prioritize",
	"reflect",
	"role_context_summary",
	"suggest_learning_action",
	"valid_patterns",
]
