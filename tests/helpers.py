from wearable_validation.models import (
    AlphaMode,
    BoundingBox,
    ModelStats,
    NormalsStats,
    Slot,
    TextureInfo,
    UserSelection,
)


def make_stats(**overrides):
    """A hat-sized wearable that passes every rule unless overridden."""
    values = dict(
        triangle_count=1000,
        material_count_excl_avatar_skin=2,
        textures=(
            TextureInfo("baseColor", 512, 512),
            TextureInfo("emission", 256, 256),
        ),
        used_texture_count=2,
        has_normal_maps=False,
        has_metallic_roughness_maps=False,
        alpha_modes=(AlphaMode.OPAQUE, AlphaMode.MASK),
        bbox=BoundingBox(1.0, 2.0, 0.5),
        normals=NormalsStats(),
        skinning=None,
        file_size_bytes=500 * 1024,
    )
    values.update(overrides)
    return ModelStats(**values)


def make_selection(target=Slot.HAT, hidden=(), hand_hides_base=False):
    return UserSelection(target_slot=target, hidden_slots=tuple(hidden), hand_hides_base=hand_hides_base)


STATS_JSON = {
    "triangleCount": 1200,
    "materialCountExclAvatarSkin": 1,
    "textures": [{"name": "baseColor", "width": 1024, "height": 1024}],
    "usedTextureCount": 1,
    "hasNormalMaps": False,
    "hasMetallicRoughnessMaps": False,
    "alphaModes": ["OPAQUE"],
    "bbox": {"width": 0.4, "height": 0.3, "depth": 0.4},
    "normals": {"invertedVertexRatio": 0, "invertedFaceRatio": 0},
    "fileSizeBytes": 204800,
}
