from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class WearableValidationError(Exception):
    """Base class for errors raised outside the rule engine's report channel."""


class RegistryError(WearableValidationError):
    """The packaged slot registry is incomplete or malformed."""


class StatsContractError(WearableValidationError):
    """A ModelStats payload is missing fields or carries the wrong types."""


class Slot(Enum):
    HAT = "hat"
    HELMET = "helmet"
    UPPER_BODY = "upper_body"
    LOWER_BODY = "lower_body"
    FEET = "feet"
    HAIR = "hair"
    MASK = "mask"
    EYEWEAR = "eyewear"
    EARRING = "earring"
    TIARA = "tiara"
    TOP_HEAD = "top_head"
    FACIAL_HAIR = "facial_hair"
    HANDS = "hands"
    SKIN = "skin"
    HEAD = "head"  # hidden-slot only, never a target


class Severity(Enum):
    PASS = "PASS"
    WARN = "WARN"
    FAIL = "FAIL"


class RuleCategory(Enum):
    GEOMETRY = "Geometry"
    MATERIALS = "Materials"
    TEXTURES = "Textures/Maps"
    NORMALS = "Normals"
    SKIN_WEIGHTS = "Skin Weights"
    DIMENSIONS = "Dimensions"
    FILE_INTEGRITY = "File Integrity"


class AlphaMode(Enum):
    OPAQUE = "OPAQUE"
    MASK = "MASK"
    BLEND = "BLEND"


@dataclass(frozen=True)
class BudgetConfig:
    base_triangles: int
    max_materials: int
    max_textures: int
    helmet_all_head_hidden_triangles: Optional[int] = None


@dataclass(frozen=True)
class UserSelection:
    """What the wearer picked: target slot plus the slots the item hides.

    hidden_slots keeps caller order and duplicates. Entries that are not a
    known Slot are tolerated and contribute nothing to the budget.
    """
    target_slot: Slot
    hidden_slots: Tuple[Any, ...] = ()
    hand_hides_base: bool = False


@dataclass(frozen=True)
class ResolvedBudget:
    """Per-run limits handed to every rule evaluator."""
    target_slot: Slot
    triangles: int
    max_materials: int
    max_textures: int


@dataclass(frozen=True)
class TextureInfo:
    name: str
    width: int
    height: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class BoundingBox:
    """Model extents in meters."""
    width: float
    height: float
    depth: float

    def to_dict(self) -> Dict[str, Any]:
        return {"width": self.width, "height": self.height, "depth": self.depth}


@dataclass(frozen=True)
class NormalsStats:
    inverted_vertex_ratio: float = 0.0
    inverted_face_ratio: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "invertedVertexRatio": self.inverted_vertex_ratio,
            "invertedFaceRatio": self.inverted_face_ratio,
        }


@dataclass(frozen=True)
class SkinningStats:
    total_vertices: int
    bad_weight_vertices: int

    @property
    def bad_ratio(self) -> float:
        if self.total_vertices <= 0:
            return 0.0
        return self.bad_weight_vertices / self.total_vertices

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalVertices": self.total_vertices,
            "badWeightVertices": self.bad_weight_vertices,
        }


@dataclass(frozen=True)
class ModelStats:
    """Normalized facts about a wearable, produced by an external extractor."""
    triangle_count: int
    material_count_excl_avatar_skin: int
    textures: Tuple[TextureInfo, ...] = ()
    used_texture_count: int = 0
    has_normal_maps: bool = False
    has_metallic_roughness_maps: bool = False
    alpha_modes: Tuple[AlphaMode, ...] = ()
    bbox: BoundingBox = field(default_factory=lambda: BoundingBox(0.0, 0.0, 0.0))
    normals: NormalsStats = field(default_factory=NormalsStats)
    skinning: Optional[SkinningStats] = None
    file_size_bytes: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "triangleCount": self.triangle_count,
            "materialCountExclAvatarSkin": self.material_count_excl_avatar_skin,
            "textures": [t.to_dict() for t in self.textures],
            "usedTextureCount": self.used_texture_count,
            "hasNormalMaps": self.has_normal_maps,
            "hasMetallicRoughnessMaps": self.has_metallic_roughness_maps,
            "alphaModes": [m.value for m in self.alpha_modes],
            "bbox": self.bbox.to_dict(),
            "normals": self.normals.to_dict(),
            "fileSizeBytes": self.file_size_bytes,
        }
        if self.skinning is not None:
            data["skinning"] = self.skinning.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelStats":
        """Builds ModelStats from the camelCase JSON contract."""
        if not isinstance(data, dict):
            raise StatsContractError("Model statistics must be a JSON object")
        try:
            bbox = data["bbox"]
            normals = data.get("normals") or {}
            skinning = data.get("skinning")
            return cls(
                triangle_count=_as_int(data["triangleCount"], "triangleCount"),
                material_count_excl_avatar_skin=_as_int(
                    data["materialCountExclAvatarSkin"], "materialCountExclAvatarSkin"
                ),
                textures=tuple(
                    TextureInfo(
                        name=str(t["name"]),
                        width=_as_int(t["width"], "textures.width"),
                        height=_as_int(t["height"], "textures.height"),
                    )
                    for t in data.get("textures", [])
                ),
                used_texture_count=_as_int(data.get("usedTextureCount", 0), "usedTextureCount"),
                has_normal_maps=_as_bool(data.get("hasNormalMaps", False), "hasNormalMaps"),
                has_metallic_roughness_maps=_as_bool(
                    data.get("hasMetallicRoughnessMaps", False), "hasMetallicRoughnessMaps"
                ),
                alpha_modes=tuple(AlphaMode(m) for m in data.get("alphaModes", [])),
                bbox=BoundingBox(
                    width=float(bbox["width"]),
                    height=float(bbox["height"]),
                    depth=float(bbox["depth"]),
                ),
                normals=NormalsStats(
                    inverted_vertex_ratio=float(normals.get("invertedVertexRatio", 0.0)),
                    inverted_face_ratio=float(normals.get("invertedFaceRatio", 0.0)),
                ),
                skinning=SkinningStats(
                    total_vertices=_as_int(skinning["totalVertices"], "skinning.totalVertices"),
                    bad_weight_vertices=_as_int(
                        skinning["badWeightVertices"], "skinning.badWeightVertices"
                    ),
                ) if skinning else None,
                file_size_bytes=_as_int(data["fileSizeBytes"], "fileSizeBytes"),
            )
        except KeyError as e:
            raise StatsContractError(f"Missing model statistics field: {e.args[0]}") from e
        except (TypeError, ValueError) as e:
            raise StatsContractError(f"Invalid model statistics: {e}") from e


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise StatsContractError(f"Field '{name}' must be a number, got {value!r}")
    # Whole-valued floats only; counts are never truncated.
    if isinstance(value, float) and not value.is_integer():
        raise StatsContractError(f"Field '{name}' must be a whole number, got {value!r}")
    return int(value)


def _as_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise StatsContractError(f"Field '{name}' must be true or false, got {value!r}")
    return value


@dataclass(frozen=True)
class RuleResult:
    id: str
    category: RuleCategory
    expected: str
    actual: str
    result: Severity
    tip: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "category": self.category.value,
            "expected": self.expected,
            "actual": self.actual,
            "result": self.result.value,
        }
        if self.tip is not None:
            data["tip"] = self.tip
        return data


@dataclass(frozen=True)
class ValidationReport:
    overall: Severity
    target_slot: Slot
    applied_triangle_budget: int
    max_materials: int
    max_textures: int
    results: Tuple[RuleResult, ...]
    notes: Tuple[str, ...]
    file_name: str
    model_stats: ModelStats

    def result_for(self, rule_id: str) -> Optional[RuleResult]:
        return next((r for r in self.results if r.id == rule_id), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall": self.overall.value,
            "targetSlot": self.target_slot.value,
            "appliedTriangleBudget": self.applied_triangle_budget,
            "maxMaterials": self.max_materials,
            "maxTextures": self.max_textures,
            "results": [r.to_dict() for r in self.results],
            "notes": list(self.notes),
            "fileName": self.file_name,
            "modelStats": self.model_stats.to_dict(),
        }
