from wearable_validation.models import ModelStats, ResolvedBudget, RuleCategory, RuleResult, Severity

MB = 1024 * 1024
MAX_FILE_SIZE_BYTES = 3 * MB
RECOMMENDED_FILE_SIZE_BYTES = 1 * MB


def check_structure(stats: ModelStats, budget: ResolvedBudget):
    """An asset with no triangles or no materials is almost always a bad export."""
    issues = []
    if stats.triangle_count == 0:
        issues.append("No triangles found")
    if stats.material_count_excl_avatar_skin == 0:
        issues.append("No materials found")

    if not issues:
        return RuleResult(
            id="file-integrity",
            category=RuleCategory.FILE_INTEGRITY,
            expected="Valid model structure",
            actual="Model structure is valid",
            result=Severity.PASS,
        )
    return RuleResult(
        id="file-integrity",
        category=RuleCategory.FILE_INTEGRITY,
        expected="Valid model structure",
        actual=", ".join(issues),
        result=Severity.FAIL,
        tip="Check the model export - it must contain geometry and materials.",
    )


def check_file_size(stats: ModelStats, budget: ResolvedBudget):
    size = stats.file_size_bytes
    size_mb = size / MB
    max_mb = MAX_FILE_SIZE_BYTES // MB
    recommended_mb = RECOMMENDED_FILE_SIZE_BYTES // MB

    tip = None
    if size > MAX_FILE_SIZE_BYTES:
        severity = Severity.FAIL
        tip = (
            f"File size exceeds the {max_mb}MB limit. Optimize textures or "
            f"simplify geometry to reduce it."
        )
    elif size > RECOMMENDED_FILE_SIZE_BYTES:
        severity = Severity.WARN
        tip = (
            f"File size is {size_mb:.2f}MB. For best performance keep single items "
            f"under {recommended_mb}MB (up to 2MB if the thumbnail is under 1MB)."
        )
    else:
        severity = Severity.PASS

    return RuleResult(
        id="file-size",
        category=RuleCategory.FILE_INTEGRITY,
        expected=f"≤ {max_mb}MB (recommended: ≤ {recommended_mb}MB)",
        actual=f"{size_mb:.2f}MB",
        result=severity,
        tip=tip,
    )
