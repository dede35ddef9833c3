"""Inventories, their on-screen slot grid and slot selection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from tyconia.pack import ItemEntry

__all__ = ["Inventory", "InventorySlot", "InventoryGrid", "EnableInventory"]


@dataclass
class Inventory:
    """Storage slots holding item entries.

    ``active`` is the index of the slot currently selected for use.
    """

    entries: list[Optional[ItemEntry]] = field(default_factory=list)
    active: Optional[int] = None

    @classmethod
    def with_capacity(cls, capacity: int) -> Inventory:
        """An inventory of ``capacity`` empty slots."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        return cls([None] * capacity)

    def dump(self, item_entries: Iterable[ItemEntry]) -> None:
        """Put entries into the empty slots in order; entries that do not fit are dropped."""
        incoming = iter(item_entries)
        for index, slot in enumerate(self.entries):
            if slot is not None:
                continue
            entry = next(incoming, None)
            if entry is None:
                break
            self.entries[index] = entry

    def swap(self, first: int, second: int) -> None:
        """Exchange the contents of two slots."""
        self.entries[first], self.entries[second] = self.entries[second], self.entries[first]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class InventorySlot:
    """A displayed inventory slot."""

    entry: Optional[ItemEntry]
    index: int
    selected: bool = False


@dataclass
class InventoryGrid:
    """An inventory laid out as ``display_width`` by ``display_height`` slots.

    Clicking a slot selects it; clicking it again deselects it; clicking
    another slot while one is selected swaps their contents.
    """

    inventory: Inventory
    display_width: int
    display_height: int
    _selected: Optional[int] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.display_width < 0 or self.display_height < 0:
            raise ValueError("display size must not be negative")
        self._selected = self.inventory.active

    @property
    def selected(self) -> Optional[int]:
        """Index of the selected slot, if any."""
        return self._selected

    def rows(self) -> list[list[InventorySlot]]:
        """Displayed slots row by row; rows end where the inventory runs out."""
        result: list[list[InventorySlot]] = []
        for row in range(self.display_height):
            cells: list[InventorySlot] = []
            for col in range(self.display_width):
                index = row * self.display_width + col
                if index >= len(self.inventory):
                    break
                cells.append(
                    InventorySlot(
                        entry=self.inventory.entries[index],
                        index=index,
                        selected=self._selected == index,
                    )
                )
            result.append(cells)
        return result

    def slots(self) -> list[InventorySlot]:
        """All displayed slots in display order."""
        return [slot for row in self.rows() for slot in row]

    def click(self, index: int) -> Optional[tuple[int, int]]:
        """Handle a click on slot ``index``.

        Returns the pair of swapped slot indices when the click swapped two
        slots, otherwise ``None``. Deselecting a slot by clicking it again
        leaves the inventory's active index untouched.
        """
        if index not in {slot.index for slot in self.slots()}:
            raise IndexError(f"slot {index} is not displayed")

        if self._selected is None:
            self._selected = index
            self.inventory.active = index
            return None

        if self._selected == index:
            self._selected = None
            return None

        first = self._selected
        self.inventory.swap(first, index)
        self.inventory.active = None
        self._selected = None
        return (first, index)


@dataclass(frozen=True)
class EnableInventory:
    """Whether the inventory window is shown; hidden by default."""

    enabled: bool = False

    ENABLED: ClassVar[EnableInventory]
    DISABLED: ClassVar[EnableInventory]

    def toggled(self) -> EnableInventory:
        """The opposite inventory state."""
        return EnableInventory(not self.enabled)


EnableInventory.ENABLED = EnableInventory(True)
EnableInventory.DISABLED = EnableInventory(False)