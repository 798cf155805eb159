from wearable_validation.budgets import (
    get_available_hidden_slots,
    get_available_target_slots,
    get_skin_required_hidden_slots,
)
from wearable_validation.models import Slot, UserSelection


class SelectionState:
    """Holds the user's slot choices and hands out immutable UserSelection snapshots."""
    def __init__(self):
        self.reset()

    def reset(self):
        """Clears the selection back to its initial state."""
        self.target_slot = None
        self.hidden_slots = []
        self.hand_hides_base = False

    def set_target_slot(self, slot):
        """Changes the target and drops it from the hidden list.

        Choosing skin hides every other slot, since skin replaces the whole body.
        """
        if slot is None:
            self.target_slot = None
            return

        slot = Slot(slot)
        if slot not in get_available_target_slots():
            raise ValueError(f"'{slot.value}' can only be hidden, not targeted")

        self.target_slot = slot
        self.hidden_slots = [s for s in self.hidden_slots if s != slot]

        if slot == Slot.SKIN:
            self.hidden_slots = get_skin_required_hidden_slots()

    def set_hidden_slots(self, slots):
        self.hidden_slots = [Slot(s) for s in slots]

    def toggle_hidden_slot(self, slot):
        """Hides or un-hides a slot. Slots forced hidden by skin stay hidden."""
        slot = Slot(slot)
        if slot in self.hidden_slots:
            if self.is_locked(slot):
                return
            self.hidden_slots = [s for s in self.hidden_slots if s != slot]
        else:
            self.hidden_slots = self.hidden_slots + [slot]

    def set_hand_hides_base(self, hides):
        self.hand_hides_base = bool(hides)

    def is_locked(self, slot):
        return self.target_slot == Slot.SKIN and Slot(slot) in self.hidden_slots

    def available_hidden_slots(self):
        return get_available_hidden_slots(self.target_slot)

    def to_selection(self):
        if self.target_slot is None:
            raise ValueError("No target slot selected")
        return UserSelection(
            target_slot=self.target_slot,
            hidden_slots=tuple(self.hidden_slots),
            hand_hides_base=self.hand_hides_base,
        )
