# tyconia

The rules behind an isometric restaurant tycoon game, as a plain Python
library with no engine attached and no dependencies outside the standard
library.

## Modules

- `tyconia.pack`: mod metadata and content. `SemVer` (with `SemverStage`),
  `Meta`, `MetaDescriptor`, `MetaAttributions`, `MetaSource`, `MetaSources`,
  `ModPack`, `Pack`, `ItemPack`, `ResearchPack`, `RecipePack`, `ItemId`,
  `ItemEntry`, `Recipe`, `ResearchDeclared` and more. `SemVer.parse` and
  `Meta.parse` read identifiers such as `cooking_time_2.0.0-rc3`; `str()`
  writes them back. `base_mod()` returns the pack shipped with the game and
  `to_snake_case()` converts camel case and spaced words.
- `tyconia.conditions`: research unlock conditions `SatisfyAll`,
  `SatisfyAny`, `ReachedMetric` and `UnderMetric`, checked against a mapping
  of tracked metrics with `evaluate()` or `evaluate_condition()`. Missing
  metrics count as 0.
- `tyconia.tiles`: pipe-separated text maps. `validate_maps()` checks that
  maps share one size and returns `(width, height)`;
  `parse_map_with_positions()` yields `(TilePos, legend_index)` for every
  non-blank tile; `legend_to_index()` maps a tile character to its legend
  index (`_` is blank and gives `None`).
- `tyconia.levels`: `LevelIsometric` (label, resources, legend, surface
  layers as `SurfaceDeclared`) with `tiles_with_texture_index()`,
  `legend_textures()` and `apply_texture()`; also `Level`, `LevelManager`,
  `LevelLoadStatus` and `Config`.
- `tyconia.inventory`: `Inventory` slot lists with `with_capacity()`,
  `dump()` and `swap()`; `InventoryGrid`, which lays an inventory out as
  rows of `InventorySlot` and handles clicks (select, deselect, or swap with
  the selected slot); `EnableInventory`.
- `tyconia.ui_actions`: `UiAction` (kinds in `UiActionKind`; zoom carries a
  factor, hotbar actions an index) and `InterAction`, each with `display()`;
  `zoom_action()` turns a frame's wheel deltas into a zoom action.
- `tyconia.states`: `GameState`, `InGameState`, `DeveloperMode`,
  `EnableHUD`, with `next_game_state()` (the last request in a frame wins)
  and `apply_hud_toggles()` (any number of requests in a frame toggles once).

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

Parsing and formatting mod identifiers:

```python
from tyconia.pack import Meta, base_mod

meta = Meta.parse("mega_factory_10.4.1-nightly")
print(meta.mod_name)   # mega_factory
print(str(meta))       # mega_factory_10.4.1-nightly

print([item.value for item in base_mod().items])  # ['auto_arm', 'mover_belt', 'infinite_io']
```

Checking a research unlock condition:

```python
from tyconia.conditions import SatisfyAll, ReachedMetric, UnderMetric

condition = SatisfyAll([
    ReachedMetric("total_assets", 15000.0),
    UnderMetric("waste_generated", 10.0),
])
condition.evaluate({"total_assets": 16000.0, "waste_generated": 5.0})  # True
```

Reading a tile map:

```python
from tyconia.tiles import validate_maps, parse_map_with_positions

layout = "_ | A | 1\nB | C | 2"
validate_maps([layout])            # (3, 2)
parse_map_with_positions(layout)   # positions with legend indices; '_' is skipped
```

Working with an inventory:

```python
from tyconia.inventory import Inventory, InventoryGrid
from tyconia.pack import ItemEntry, ItemId

inventory = Inventory.with_capacity(4)
inventory.dump([ItemEntry(ItemId("auto_arm"), 3)])

grid = InventoryGrid(inventory, display_width=2, display_height=2)
grid.click(0)          # selects slot 0
grid.click(3)          # swaps slots 0 and 3, returns (0, 3)
```

UI actions:

```python
from tyconia.ui_actions import UiAction, InterAction, zoom_action

UiAction.hotbar_slot(0).display()   # 'Switch to hotbar slot 1'
zoom_action([0.4, 0.3])             # UiAction with kind ZOOM and value 1
InterAction.CONSTRUCT.display()     # 'Build entity'
```

## Errors

An inconsistent set of maps raises `InconsistentWidth` or
`InconsistentHeight` (both `MapValidationError`), an unknown tile character
raises `UndefinedTileError`, and malformed identifiers raise
`ParseMetaError` or `ParseSemVerError`. All of these are `ValueError`s.

## What this package does not do

It has no rendering, audio, window or game loop, and no command to run. It
does not read keyboard or mouse input, hold key bindings, or turn input into
player movement or into UI and world actions: `UiAction` and `InterAction`
describe actions, but nothing here decides when they fire. It does not read
or write level or mod files; levels and packs are built in code.