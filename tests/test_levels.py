from datetime import timedelta

import pytest

from tyconia.levels import (
    Config,
    Level,
    LevelIsometric,
    LevelLoadStatus,
    LevelManager,
    SurfaceDeclared,
)
from tyconia.pack import ItemId
from tyconia.tiles import (
    InconsistentHeight,
    InconsistentWidth,
    parse_map_with_positions,
    validate_maps,
)

LAYER_A = "_ | 0 | _\n_ | 0 | 1\n_ | _ | 1"
LAYER_B = "1 | _ | _\n_ | _ | _\n0 | _ | _"

TEXTURES = {"base::auto_arm": "arm.png", "base::mover_belt": "belt.png"}


def _level(*layers):
    return LevelIsometric(
        label="prologue_restaurant",
        resources={"money": 200.0},
        legend=["base::auto_arm", "base::mover_belt"],
        surface=[((0, 0), layer) for layer in layers],
    )


def test_legend_and_surface_are_normalised():
    level = _level(LAYER_A)
    assert level.legend == [ItemId("base::auto_arm"), ItemId("base::mover_belt")]
    assert level.surface == [SurfaceDeclared((0.0, 0.0), LAYER_A)]


def test_tiles_with_texture_index_matches_parsing():
    level = _level(LAYER_A, LAYER_B)
    maps = level.tiles_with_texture_index()
    size = validate_maps([LAYER_A, LAYER_B])
    assert maps == [
        ((0.0, 0.0), size, parse_map_with_positions(LAYER_A)),
        ((0.0, 0.0), size, parse_map_with_positions(LAYER_B)),
    ]


def test_tiles_with_texture_index_rejects_uneven_layers():
    with pytest.raises(InconsistentHeight):
        _level(LAYER_A, "0 | 1 | _").tiles_with_texture_index()
    with pytest.raises(InconsistentWidth):
        _level(LAYER_A, "0 | 1\n_ | _ | _\n_ | _ | _").tiles_with_texture_index()


def test_no_surfaces_gives_no_maps():
    assert _level().tiles_with_texture_index() == []


def test_legend_textures_in_legend_order():
    assert _level(LAYER_A).legend_textures(TEXTURES) == ["arm.png", "belt.png"]


def test_legend_textures_missing_texture():
    with pytest.raises(KeyError):
        _level(LAYER_A).legend_textures({"base::auto_arm": "arm.png"})


def test_apply_texture_maps_each_index_to_legend_texture():
    level = _level(LAYER_A, LAYER_B)
    raw = level.tiles_with_texture_index()
    textured = level.apply_texture(raw, TEXTURES)
    textures = level.legend_textures(TEXTURES)

    assert len(textured) == len(raw)
    for (pos, size, tiles), (raw_pos, raw_size, raw_tiles) in zip(textured, raw):
        assert pos == raw_pos
        assert size == raw_size
        assert [tile for tile, _ in tiles] == [tile for tile, _ in raw_tiles]
        assert [handle for _, handle in tiles] == [textures[i] for _, i in raw_tiles]


def test_apply_texture_index_outside_legend():
    level = _level("_ | 2")
    with pytest.raises(IndexError):
        level.apply_texture(level.tiles_with_texture_index(), TEXTURES)


def test_level_default_play_time():
    assert Level().total_play_time == timedelta(seconds=1)


def test_level_manager_holds_levels():
    manager = LevelManager()
    level = _level(LAYER_A)
    manager.iso[level.label] = level
    assert manager.iso == {"prologue_restaurant": level}
    assert LevelManager().iso == {}


def test_config_lookup():
    config = Config({"difficulty": "hard"})
    assert config["difficulty"] == "hard"
    assert config.get("missing", "fallback") == "fallback"
    with pytest.raises(KeyError):
        config["missing"]


def test_load_status_values_are_distinct():
    assert LevelLoadStatus("assets_loading") is LevelLoadStatus.ASSETS_LOADING
    assert LevelLoadStatus.ASSETS_LOADING is not LevelLoadStatus.ASSETS_LOADED