"""Slot budget table and triangle-budget resolution.

The registry is read once at import from ``slot_registry.json`` and frozen
into read-only mappings; nothing here holds writable state.
"""
import json
import os
from collections import Counter
from types import MappingProxyType

from wearable_validation.models import BudgetConfig, RegistryError, Slot, UserSelection

REGISTRY_PATH = os.path.join(os.path.dirname(__file__), "slot_registry.json")


def _load_registry(registry_path):
    with open(registry_path, "r", encoding="utf-8") as f:
        registry = json.load(f)

    slots = registry.get("slots", {})
    missing = [s.value for s in Slot if s.value not in slots]
    if missing:
        raise RegistryError(f"Slot registry has no budget for: {', '.join(missing)}")

    configs = {}
    target_slots = []
    for name, entry in slots.items():
        try:
            slot = Slot(name)
        except ValueError as e:
            raise RegistryError(f"Unknown slot in registry: {name}") from e
        configs[slot] = BudgetConfig(
            base_triangles=entry["base_triangles"],
            max_materials=entry["max_materials"],
            max_textures=entry["max_textures"],
            helmet_all_head_hidden_triangles=entry.get("helmet_all_head_hidden_triangles"),
        )
        if not entry.get("hidden_only", False):
            target_slots.append(slot)

    return (
        MappingProxyType(configs),
        tuple(target_slots),
        frozenset(Slot(s) for s in registry["helmet_head_hide_set"]),
        registry["skin_triangles"],
        registry["hand_hides_base_triangles"],
    )


(
    BUDGET_CONFIG,
    TARGET_SLOTS,
    HELMET_HIDE_SET,
    SKIN_TRIANGLES,
    HAND_HIDES_BASE_TRIANGLES,
) = _load_registry(REGISTRY_PATH)

BASE_TRI_BUDGET = MappingProxyType(
    {slot: config.base_triangles for slot, config in BUDGET_CONFIG.items()}
)


def _as_slot(value):
    """Returns the Slot for a Slot or slot name, or None when it is not one."""
    if isinstance(value, Slot):
        return value
    try:
        return Slot(value)
    except ValueError:
        return None


def _base_triangles(value):
    slot = _as_slot(value)
    if slot is None:
        return 0
    return BASE_TRI_BUDGET.get(slot, 0)


def get_budget_config(slot):
    config = BUDGET_CONFIG.get(_as_slot(slot))
    if config is None:
        raise ValueError(f"Unknown slot: {slot!r}")
    return config


def get_available_target_slots():
    """All slots a wearable can target, in registry order (``head`` excluded)."""
    return list(TARGET_SLOTS)


def get_available_hidden_slots(target_slot):
    """Slots that can be hidden alongside ``target_slot``; empty if no target."""
    target = _as_slot(target_slot) if target_slot is not None else None
    if target is None:
        return []
    return [slot for slot in TARGET_SLOTS if slot != target]


def get_skin_required_hidden_slots():
    """Skin replaces the whole avatar, so every other target slot is hidden."""
    return [slot for slot in TARGET_SLOTS if slot != Slot.SKIN]


def is_helmet_special_rule(selection: UserSelection) -> bool:
    if _as_slot(selection.target_slot) != Slot.HELMET:
        return False
    hidden = {_as_slot(s) for s in selection.hidden_slots}
    return HELMET_HIDE_SET.issubset(hidden)


def find_duplicate_hidden_slots(selection: UserSelection):
    """Hidden slots listed more than once, in first-seen order."""
    counts = Counter(_as_slot(s) or s for s in selection.hidden_slots)
    return [slot for slot, count in counts.items() if count > 1]


def compute_triangle_budget(selection: UserSelection) -> int:
    """Resolves the effective triangle allowance for a selection.

    Skin is a fixed allowance and never combines. A hand accessory that hides
    the base hand gets a fixed allowance. Otherwise the target's base budget
    is summed with the base budget of every hidden slot, and a helmet hiding
    the full head region is capped at the helmet package budget instead.
    """
    target = _as_slot(selection.target_slot)

    if target == Slot.SKIN:
        return SKIN_TRIANGLES

    if target == Slot.HANDS and selection.hand_hides_base:
        return HAND_HIDES_BASE_TRIANGLES

    # Not deduplicated: a slot listed twice is counted twice.
    combined = _base_triangles(target) + sum(_base_triangles(s) for s in selection.hidden_slots)

    if is_helmet_special_rule(selection):
        combined = BUDGET_CONFIG[Slot.HELMET].helmet_all_head_hidden_triangles

    return combined
