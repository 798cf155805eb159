from wearable_validation.models import ModelStats, ResolvedBudget, RuleCategory, RuleResult, Severity

MAX_TEXTURE_SIZE = 1024


def check_count(stats: ModelStats, budget: ResolvedBudget):
    """Checks the number of distinct textures against the slot cap."""
    actual = stats.used_texture_count
    max_textures = budget.max_textures

    if actual <= max_textures:
        return RuleResult(
            id="textures",
            category=RuleCategory.TEXTURES,
            expected=f"≤ {max_textures} textures",
            actual=f"{actual} textures",
            result=Severity.PASS,
        )
    else:
        return RuleResult(
            id="textures",
            category=RuleCategory.TEXTURES,
            expected=f"≤ {max_textures} textures",
            actual=f"{actual} textures",
            result=Severity.FAIL,
            tip=f"Remove {actual - max_textures} texture(s) or combine similar textures.",
        )


def check_sizes(stats: ModelStats, budget: ResolvedBudget):
    oversized = [
        t for t in stats.textures
        if t.width > MAX_TEXTURE_SIZE or t.height > MAX_TEXTURE_SIZE
    ]
    expected = f"All textures ≤ {MAX_TEXTURE_SIZE}×{MAX_TEXTURE_SIZE}"

    if not oversized:
        return RuleResult(
            id="texture-sizes",
            category=RuleCategory.TEXTURES,
            expected=expected,
            actual="All textures within size limit",
            result=Severity.PASS,
        )

    names = ", ".join(t.name for t in oversized)
    return RuleResult(
        id="texture-sizes",
        category=RuleCategory.TEXTURES,
        expected=expected,
        actual=f"{len(oversized)} texture(s) exceed {MAX_TEXTURE_SIZE}×{MAX_TEXTURE_SIZE}",
        result=Severity.FAIL,
        tip=f"Resize {names} to {MAX_TEXTURE_SIZE}×{MAX_TEXTURE_SIZE} or smaller.",
    )


def check_square(stats: ModelStats, budget: ResolvedBudget):
    """Non-square textures are allowed but flagged."""
    non_square = [t for t in stats.textures if t.width != t.height]

    if not non_square:
        return RuleResult(
            id="texture-square",
            category=RuleCategory.TEXTURES,
            expected="All textures are square (recommended)",
            actual="All textures are square",
            result=Severity.PASS,
        )

    names = ", ".join(t.name for t in non_square)
    return RuleResult(
        id="texture-square",
        category=RuleCategory.TEXTURES,
        expected="All textures are square (recommended)",
        actual=f"{len(non_square)} texture(s) are not square",
        result=Severity.WARN,
        tip=f"Make {names} square for better performance (optional).",
    )


# Wearables render with a toon shader. Detail maps are discouraged, never blocking.

def check_normal_maps(stats: ModelStats, budget: ResolvedBudget):
    if not stats.has_normal_maps:
        return RuleResult(
            id="normal-maps",
            category=RuleCategory.TEXTURES,
            expected="No normal maps (toon shader)",
            actual="No normal maps",
            result=Severity.PASS,
        )
    return RuleResult(
        id="normal-maps",
        category=RuleCategory.TEXTURES,
        expected="No normal maps (toon shader)",
        actual="Normal maps detected",
        result=Severity.WARN,
        tip="Remove normal maps - the toon shader does not use them.",
    )


def check_metallic_roughness_maps(stats: ModelStats, budget: ResolvedBudget):
    if not stats.has_metallic_roughness_maps:
        return RuleResult(
            id="metallic-roughness-maps",
            category=RuleCategory.TEXTURES,
            expected="No metallic/roughness maps (toon shader)",
            actual="No metallic/roughness maps",
            result=Severity.PASS,
        )
    return RuleResult(
        id="metallic-roughness-maps",
        category=RuleCategory.TEXTURES,
        expected="No metallic/roughness maps (toon shader)",
        actual="Metallic/roughness maps detected",
        result=Severity.WARN,
        tip="Remove metallic/roughness maps - the toon shader does not use PBR maps.",
    )
