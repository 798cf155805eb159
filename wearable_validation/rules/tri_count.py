import math

from wearable_validation.models import ModelStats, ResolvedBudget, RuleCategory, RuleResult, Severity


def check(stats: ModelStats, budget: ResolvedBudget):
    """Checks total triangle count against the resolved slot budget."""
    actual = stats.triangle_count
    max_tris = budget.triangles

    if actual <= max_tris:
        return RuleResult(
            id="triangles",
            category=RuleCategory.GEOMETRY,
            expected=f"≤ {max_tris:,} triangles",
            actual=f"{actual:,} triangles",
            result=Severity.PASS,
        )

    reduce_pct = math.ceil((actual - max_tris) / actual * 100)
    return RuleResult(
        id="triangles",
        category=RuleCategory.GEOMETRY,
        expected=f"≤ {max_tris:,} triangles",
        actual=f"{actual:,} triangles",
        result=Severity.FAIL,
        tip=f"Reduce triangles by {reduce_pct}% (Decimate modifier or manual cleanup).",
    )
