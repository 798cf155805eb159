from wearable_validation.models import ModelStats, ResolvedBudget, RuleCategory, RuleResult, Severity


def check(stats: ModelStats, budget: ResolvedBudget):
    """Checks material count (avatar skin material excluded) against the slot cap."""
    actual = stats.material_count_excl_avatar_skin
    max_materials = budget.max_materials

    if actual <= max_materials:
        return RuleResult(
            id="materials",
            category=RuleCategory.MATERIALS,
            expected=f"≤ {max_materials} materials",
            actual=f"{actual} materials",
            result=Severity.PASS,
        )
    else:
        return RuleResult(
            id="materials",
            category=RuleCategory.MATERIALS,
            expected=f"≤ {max_materials} materials",
            actual=f"{actual} materials",
            result=Severity.FAIL,
            tip=f"Remove {actual - max_materials} material(s) or combine similar materials.",
        )
