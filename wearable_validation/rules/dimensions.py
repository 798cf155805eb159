from wearable_validation.models import ModelStats, ResolvedBudget, RuleCategory, RuleResult, Severity

MAX_WIDTH = 2.42
MAX_HEIGHT = 2.42
MAX_DEPTH = 1.4


def check(stats: ModelStats, budget: ResolvedBudget):
    """Checks the bounding box (meters) against the wearable volume."""
    bbox = stats.bbox
    exceeded = bbox.width > MAX_WIDTH or bbox.height > MAX_HEIGHT or bbox.depth > MAX_DEPTH
    bounds = f"{MAX_WIDTH}m × {MAX_HEIGHT}m × {MAX_DEPTH}m"

    return RuleResult(
        id="dimensions",
        category=RuleCategory.DIMENSIONS,
        expected=f"≤ {bounds}",
        actual=f"{bbox.width:.2f}m × {bbox.height:.2f}m × {bbox.depth:.2f}m",
        result=Severity.FAIL if exceeded else Severity.PASS,
        tip=f"Scale the model down uniformly to fit within {bounds}." if exceeded else None,
    )
