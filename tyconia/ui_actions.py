"""UI and world-interaction actions."""

from __future__ import annotations

import copy
import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

__all__ = ["UiActionKind", "UiAction", "InterAction", "zoom_action"]


class UiActionKind(Enum):
    """Kinds of UI actions."""

    ZOOM = "zoom"
    HOTBAR_SLOT = "hotbar_slot"
    HOTBAR_SLOT_NEXT = "hotbar_slot_next"
    HOTBAR_SLOT_PREVIOUS = "hotbar_slot_previous"
    HOTBAR = "hotbar"
    MENU = "menu"
    HUD_TOGGLE = "hud_toggle"
    HOTBAR_TOGGLE = "hotbar_toggle"
    INVENTORY_TOGGLE = "inventory_toggle"


_WITH_VALUE = {UiActionKind.ZOOM, UiActionKind.HOTBAR_SLOT, UiActionKind.HOTBAR}
_INDEXED = {UiActionKind.HOTBAR_SLOT, UiActionKind.HOTBAR}

_FIXED_DISPLAY = {
    UiActionKind.MENU: "Summon menu",
    UiActionKind.HOTBAR_SLOT_NEXT: "Next hotbar slot",
    UiActionKind.HOTBAR_SLOT_PREVIOUS: "Previous hotbar slot",
    UiActionKind.HUD_TOGGLE: "Toggle HUD",
    UiActionKind.HOTBAR_TOGGLE: "Toggle hotbar",
    UiActionKind.INVENTORY_TOGGLE: "Toggle inventory",
}


@dataclass(frozen=True)
class UiAction:
    """A UI action; zoom carries a factor, hotbar actions carry an index."""

    kind: UiActionKind
    value: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind in _WITH_VALUE:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise ValueError(f"{self.kind.name} requires an integer value")
            if self.kind in _INDEXED and self.value < 0:
                raise ValueError(f"{self.kind.name} index must not be negative")
        elif self.value is not None:
            raise ValueError(f"{self.kind.name} takes no value")

    @classmethod
    def zooming(cls, factor: int) -> UiAction:
        return cls(UiActionKind.ZOOM, factor)

    @classmethod
    def hotbar_slot(cls, index: int) -> UiAction:
        return cls(UiActionKind.HOTBAR_SLOT, index)

    @classmethod
    def hotbar(cls, index: int) -> UiAction:
        return cls(UiActionKind.HOTBAR, index)

    def display(self) -> str:
        """Human readable description of the action."""
        if self.kind is UiActionKind.ZOOM:
            return f"Zoom with {self.value} factor"
        if self.kind is UiActionKind.HOTBAR:
            return f"Switch to hotbar {self.value + 1}"
        if self.kind is UiActionKind.HOTBAR_SLOT:
            return f"Switch to hotbar slot {self.value + 1}"
        return _FIXED_DISPLAY[self.kind]

    def zoom(self) -> Optional[int]:
        """The zoom factor if this is a zoom action, else None."""
        return self.value if self.kind is UiActionKind.ZOOM else None

    def desktop_mapping(self, input_mappings: Any) -> Optional[Any]:
        """Copy of the mapping entry bound to this action, if any."""
        entry = input_mappings.ui_actions.get(self)
        return copy.deepcopy(entry) if entry is not None else None


class InterAction(Enum):
    """Player interactions with game world entities."""

    PIPETTE = "pipette"
    CONSTRUCT = "construct"
    DECONSTRUCT = "deconstruct"
    DISTRIBUTE = "distribute"
    COPY_CONFIGURATION = "copy_configuration"
    PASTE_CONFIGURATION = "paste_configuration"

    def display(self) -> str:
        """Human readable description of the interaction."""
        return _INTER_DISPLAY[self]

    def desktop_mapping(self, input_mappings: Any) -> Optional[Any]:
        """Copy of the mapping entry bound to this interaction, if any."""
        entry = input_mappings.inter_actions.get(self)
        return copy.deepcopy(entry) if entry is not None else None


_INTER_DISPLAY = {
    InterAction.PIPETTE: "Grab entity",
    InterAction.CONSTRUCT: "Build entity",
    InterAction.DECONSTRUCT: "Destroy entity",
    InterAction.DISTRIBUTE: "Give item to entity",
    InterAction.COPY_CONFIGURATION: "Copy configuration from entity",
    InterAction.PASTE_CONFIGURATION: "Paste configuration from entity",
}


def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def zoom_action(wheel_deltas: Iterable[float]) -> Optional[UiAction]:
    """Turn a frame's vertical wheel deltas into a zoom action, if any."""
    factor = _round_half_away(sum(wheel_deltas))
    return UiAction.zooming(factor) if factor != 0 else None