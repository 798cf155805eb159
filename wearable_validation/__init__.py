import logging

from wearable_validation.budgets import (
    compute_triangle_budget,
    find_duplicate_hidden_slots,
    get_available_hidden_slots,
    get_available_target_slots,
    get_budget_config,
    get_skin_required_hidden_slots,
    is_helmet_special_rule,
)
from wearable_validation.models import (
    ModelStats,
    ResolvedBudget,
    Severity,
    Slot,
    UserSelection,
    ValidationReport,
)
from wearable_validation.rules import DEFAULT_RULES, evaluate

logger = logging.getLogger(__name__)

HELMET_COMBINE_NOTE = "Helmet with hidden slots: triangle budget combines hidden slot budgets."
HAND_OVERRIDE_NOTE = "Hand accessory hides base hand: triangle budget increased to 1.5k."


class ValidationRunner:
    def __init__(self, rules=DEFAULT_RULES):
        self.rules = tuple(rules)

    def resolve_budget(self, selection: UserSelection) -> ResolvedBudget:
        config = get_budget_config(selection.target_slot)
        return ResolvedBudget(
            target_slot=Slot(selection.target_slot),
            triangles=compute_triangle_budget(selection),
            max_materials=config.max_materials,
            max_textures=config.max_textures,
        )

    def validate(self, stats: ModelStats, selection: UserSelection, file_name: str) -> ValidationReport:
        """Runs all validation rules against the extracted model statistics."""
        budget = self.resolve_budget(selection)
        logger.debug(
            "Validating %s as %s with a budget of %d triangles",
            file_name, budget.target_slot.value, budget.triangles,
        )

        results = evaluate(self.rules, stats, budget)

        return ValidationReport(
            overall=overall_severity(results),
            target_slot=budget.target_slot,
            applied_triangle_budget=budget.triangles,
            max_materials=budget.max_materials,
            max_textures=budget.max_textures,
            results=results,
            notes=generate_notes(selection),
            file_name=file_name,
            model_stats=stats,
        )


def overall_severity(results):
    severities = {r.result for r in results}
    if Severity.FAIL in severities:
        return Severity.FAIL
    if Severity.WARN in severities:
        return Severity.WARN
    return Severity.PASS


def generate_notes(selection: UserSelection):
    notes = []
    target = Slot(selection.target_slot)
    if target == Slot.HELMET and selection.hidden_slots:
        notes.append(HELMET_COMBINE_NOTE)
    if target == Slot.HANDS and selection.hand_hides_base:
        notes.append(HAND_OVERRIDE_NOTE)
    return tuple(notes)


_default_runner = ValidationRunner()


def run_validation(stats: ModelStats, selection: UserSelection, file_name: str) -> ValidationReport:
    return _default_runner.validate(stats, selection, file_name)


__all__ = [
    "ValidationRunner",
    "compute_triangle_budget",
    "find_duplicate_hidden_slots",
    "generate_notes",
    "get_available_hidden_slots",
    "get_available_target_slots",
    "get_budget_config",
    "get_skin_required_hidden_slots",
    "is_helmet_special_rule",
    "overall_severity",
    "run_validation",
]
