"""Policy helpers for producers of ModelStats.

Mesh traversal happens outside this package (in a DCC or a glTF loader), but
the decisions about what counts as a material, a texture or a bad skin weight
belong with the rules that consume them.
"""
import math

from wearable_validation.models import AlphaMode, NormalsStats, SkinningStats

AVATAR_SKIN_MATERIAL = "AvatarSkin_MAT"

WEIGHT_SUM_MIN = 0.98
WEIGHT_SUM_MAX = 1.02


def count_materials_excluding_avatar_skin(material_names):
    """Distinct materials, not counting the avatar's own skin material."""
    return len({name for name in material_names if name != AVATAR_SKIN_MATERIAL})


def count_unique_textures(textures):
    """Textures are considered the same when name and size match."""
    return len({(t.name, t.width, t.height) for t in textures})


def alpha_mode_for(transparent, alpha_test=0.0):
    if transparent:
        return AlphaMode.MASK if alpha_test > 0 else AlphaMode.BLEND
    return AlphaMode.OPAQUE


def _is_number(value):
    return isinstance(value, (int, float)) and not math.isnan(value)


def is_bad_weight_vertex(weights, joints, bone_count):
    """True when a vertex's skinning cannot be trusted.

    A vertex is bad when any weight is NaN or negative, when its weights do
    not sum to ~1, or when any joint index falls outside the skeleton.
    """
    if any(not _is_number(w) or w < 0 for w in weights):
        return True
    total = sum(weights)
    if total < WEIGHT_SUM_MIN or total > WEIGHT_SUM_MAX:
        return True
    return any(not _is_number(j) or j < 0 or j >= bone_count for j in joints)


def summarize_skinning(vertices, bone_count):
    """Builds SkinningStats from ``(weights, joints)`` pairs.

    Returns None when there are no skinned vertices, which the skin-weight
    rule treats as nothing to validate.
    """
    total = 0
    bad = 0
    for weights, joints in vertices:
        total += 1
        if is_bad_weight_vertex(weights, joints, bone_count):
            bad += 1
    if total == 0:
        return None
    return SkinningStats(total_vertices=total, bad_weight_vertices=bad)


def disabled_normals():
    # Inverted-normal detection gave unreliable results and is switched off.
    return NormalsStats(inverted_vertex_ratio=0.0, inverted_face_ratio=0.0)
