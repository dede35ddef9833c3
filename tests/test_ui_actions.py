from types import SimpleNamespace

import pytest

from tyconia.ui_actions import InterAction, UiAction, UiActionKind, zoom_action


def test_fixed_display_strings():
    assert UiAction(UiActionKind.MENU).display() == "Summon menu"
    assert UiAction(UiActionKind.HUD_TOGGLE).display() == "Toggle HUD"
    assert UiAction(UiActionKind.INVENTORY_TOGGLE).display() == "Toggle inventory"
    assert UiAction(UiActionKind.HOTBAR_SLOT_NEXT).display() == "Next hotbar slot"


def test_hotbar_slot_display_is_one_based():
    assert UiAction.hotbar_slot(0).display() == "Switch to hotbar slot 1"


def test_zoom_display_contains_factor():
    assert UiAction.zooming(-3).display() == "Zoom with -3 factor"


def test_zoom_accessor():
    assert UiAction.zooming(4).zoom() == 4
    assert UiAction(UiActionKind.MENU).zoom() is None
    assert UiAction.hotbar(2).zoom() is None


@pytest.mark.parametrize(
    "kind, value",
    [
        (UiActionKind.MENU, 3),
        (UiActionKind.ZOOM, None),
        (UiActionKind.HOTBAR_SLOT, -1),
        (UiActionKind.HOTBAR, None),
    ],
)
def test_invalid_values_rejected(kind, value):
    with pytest.raises(ValueError):
        UiAction(kind, value)


def test_actions_usable_as_keys():
    mapping = {UiAction.hotbar_slot(2): "slot"}
    assert mapping[UiAction.hotbar_slot(2)] == "slot"
    assert UiAction.hotbar_slot(3) not in mapping


def test_ui_desktop_mapping():
    entry = {"primary": ["Escape"]}
    mappings = SimpleNamespace(ui_actions={UiAction(UiActionKind.MENU): entry})
    found = UiAction(UiActionKind.MENU).desktop_mapping(mappings)
    assert found == entry
    assert found is not entry
    assert UiAction(UiActionKind.HUD_TOGGLE).desktop_mapping(mappings) is None


def test_inter_action_display():
    assert InterAction.PIPETTE.display() == "Grab entity"
    assert InterAction.CONSTRUCT.display() == "Build entity"
    assert InterAction.PASTE_CONFIGURATION.display() == "Paste configuration from entity"


def test_inter_action_desktop_mapping():
    entry = {"primary": ["Left"]}
    mappings = SimpleNamespace(inter_actions={InterAction.CONSTRUCT: entry})
    assert InterAction.CONSTRUCT.desktop_mapping(mappings) == entry
    assert InterAction.DECONSTRUCT.desktop_mapping(mappings) is None


def test_zoom_action_sums_deltas():
    action = zoom_action([2.0, 1.0])
    assert action == UiAction.zooming(3)


def test_zoom_action_none_when_cancelled_or_empty():
    assert zoom_action([0.2, -0.2]) is None
    assert zoom_action([]) is None
    assert zoom_action([0.4]) is None


def test_zoom_action_rounds_half_away_from_zero():
    assert zoom_action([0.5]) == zoom_action([1.0])
    assert zoom_action([-0.5]) == zoom_action([-1.0])
    assert zoom_action([2.5]) == zoom_action([3.0])