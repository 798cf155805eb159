"""Ordered rule pipeline.

Each entry pairs a predicate deciding whether the rule applies with a pure
evaluator ``(ModelStats, ResolvedBudget) -> RuleResult``. Report order
follows this tuple.
"""
from wearable_validation.rules import (
    dimensions,
    file_integrity,
    materials,
    skin_weights,
    textures,
    tri_count,
)


def always(stats, budget):
    return True


DEFAULT_RULES = (
    (always, tri_count.check),
    (always, materials.check),
    (always, textures.check_count),
    (always, textures.check_sizes),
    (always, textures.check_square),
    (always, textures.check_normal_maps),
    (always, textures.check_metallic_roughness_maps),
    (skin_weights.has_skinning, skin_weights.check),
    (always, dimensions.check),
    (always, file_integrity.check_structure),
    (always, file_integrity.check_file_size),
)


def evaluate(rules, stats, budget):
    """Runs every applicable rule and returns the results in pipeline order."""
    return tuple(evaluator(stats, budget) for applies, evaluator in rules if applies(stats, budget))
