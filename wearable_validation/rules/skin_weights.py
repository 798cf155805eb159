from wearable_validation.models import ModelStats, ResolvedBudget, RuleCategory, RuleResult, Severity

WARN_RATIO = 0.005
FAIL_RATIO = 0.03


def has_skinning(stats: ModelStats, budget: ResolvedBudget) -> bool:
    """No skinned mesh means there is nothing to check."""
    return stats.skinning is not None


def check(stats: ModelStats, budget: ResolvedBudget):
    """Grades the share of vertices with invalid bone weights.

    Both thresholds are exclusive: a ratio must exceed them to escalate.
    """
    skinning = stats.skinning
    if skinning is None:
        return RuleResult(
            id="skin-weights",
            category=RuleCategory.SKIN_WEIGHTS,
            expected="Valid skin weights",
            actual="No skinning data",
            result=Severity.PASS,
        )

    bad_ratio = skinning.bad_ratio
    tip = None
    if bad_ratio > FAIL_RATIO:
        severity = Severity.FAIL
        tip = f"Fix skin weights - more than {FAIL_RATIO:.0%} of vertices have invalid weights."
    elif bad_ratio > WARN_RATIO:
        severity = Severity.WARN
        tip = "Some vertices have invalid skin weights - check weight painting."
    else:
        severity = Severity.PASS

    return RuleResult(
        id="skin-weights",
        category=RuleCategory.SKIN_WEIGHTS,
        expected=f"≤ {WARN_RATIO:.1%} vertices with bad weights",
        actual=(
            f"{skinning.bad_weight_vertices}/{skinning.total_vertices} vertices "
            f"({bad_ratio * 100:.2f}%)"
        ),
        result=severity,
        tip=tip,
    )
