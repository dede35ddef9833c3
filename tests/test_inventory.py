import pytest

from tyconia.inventory import EnableInventory, Inventory, InventoryGrid, InventorySlot
from tyconia.pack import ItemEntry, ItemId


def _entry(name, quantity=1):
    return ItemEntry(ItemId(name), quantity)


def test_with_capacity_is_empty():
    inventory = Inventory.with_capacity(4)
    assert len(inventory) == 4
    assert all(slot is None for slot in inventory.entries)
    assert inventory.active is None


def test_with_capacity_negative_raises():
    with pytest.raises(ValueError):
        Inventory.with_capacity(-1)


def test_dump_fills_only_empty_slots_in_order():
    inventory = Inventory([None, _entry("auto_arm"), None, None])
    inventory.dump([_entry("mover_belt"), _entry("infinite_io")])
    assert inventory.entries == [
        _entry("mover_belt"),
        _entry("auto_arm"),
        _entry("infinite_io"),
        None,
    ]


def test_dump_drops_entries_that_do_not_fit():
    inventory = Inventory.with_capacity(1)
    inventory.dump([_entry("auto_arm"), _entry("mover_belt")])
    assert inventory.entries == [_entry("auto_arm")]


def test_swap_exchanges_slots():
    inventory = Inventory([_entry("auto_arm"), None])
    inventory.swap(0, 1)
    assert inventory.entries == [None, _entry("auto_arm")]


def test_grid_limits_slots_to_inventory_length():
    grid = InventoryGrid(Inventory.with_capacity(5), display_width=3, display_height=3)
    assert [slot.index for slot in grid.slots()] == [0, 1, 2, 3, 4]
    assert [len(row) for row in grid.rows()] == [3, 2, 0]


def test_grid_marks_active_slot_selected():
    inventory = Inventory([_entry("auto_arm"), None], active=1)
    grid = InventoryGrid(inventory, display_width=2, display_height=1)
    assert grid.slots() == [
        InventorySlot(_entry("auto_arm"), 0, False),
        InventorySlot(None, 1, True),
    ]


def test_click_selects_then_deselects():
    inventory = Inventory.with_capacity(2)
    grid = InventoryGrid(inventory, display_width=2, display_height=1)
    assert grid.click(1) is None
    assert grid.selected == 1
    assert inventory.active == 1
    assert grid.click(1) is None
    assert grid.selected is None
    assert [slot.selected for slot in grid.slots()] == [False, False]


def test_click_other_slot_swaps_and_clears_selection():
    inventory = Inventory([_entry("auto_arm", 2), None, _entry("mover_belt")])
    grid = InventoryGrid(inventory, display_width=3, display_height=1)
    grid.click(0)
    assert grid.click(2) == (0, 2)
    assert inventory.entries == [_entry("mover_belt"), None, _entry("auto_arm", 2)]
    assert inventory.active is None
    assert grid.selected is None


def test_click_outside_display_raises():
    grid = InventoryGrid(Inventory.with_capacity(2), display_width=1, display_height=1)
    with pytest.raises(IndexError):
        grid.click(1)


def test_enable_inventory_defaults_and_toggle():
    assert EnableInventory() == EnableInventory.DISABLED
    assert EnableInventory.DISABLED.toggled() == EnableInventory.ENABLED
    assert EnableInventory.ENABLED.toggled().toggled() == EnableInventory.ENABLED