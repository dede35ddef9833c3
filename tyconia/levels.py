"""Isometric level declarations and their tile layers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any, TypeVar, Union

from tyconia.pack import ItemId
from tyconia.tiles import TilePos, parse_map_with_positions, validate_maps

__all__ = [
    "SurfaceDeclared",
    "LevelIsometric",
    "Level",
    "LevelManager",
    "LevelLoadStatus",
    "Config",
]

Vec2 = tuple[float, float]
RawTile = tuple[TilePos, int]
RawMap = tuple[Vec2, tuple[int, int], list[RawTile]]

_Handle = TypeVar("_Handle")


@dataclass(frozen=True)
class SurfaceDeclared:
    """One tile layer: its world position and its text map."""

    position: Vec2
    content: str

    def __post_init__(self) -> None:
        x, y = self.position
        object.__setattr__(self, "position", (float(x), float(y)))


@dataclass
class LevelIsometric:
    """A level declared as layered isometric text maps with a tile legend."""

    label: str
    resources: dict[str, float] = field(default_factory=dict)
    legend: list[ItemId] = field(default_factory=list)
    surface: list[SurfaceDeclared] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.legend = [ItemId(item) if isinstance(item, str) else item for item in self.legend]
        self.surface = [
            item if isinstance(item, SurfaceDeclared) else SurfaceDeclared(*item)
            for item in self.surface
        ]

    def tiles_with_texture_index(self) -> list[RawMap]:
        """Parse every layer into ``(position, (width, height), tiles)``.

        Raises :class:`~tyconia.tiles.MapValidationError` when the layers do
        not share one size.
        """
        size = validate_maps([layer.content for layer in self.surface])
        return [
            (layer.position, size, parse_map_with_positions(layer.content))
            for layer in self.surface
        ]

    def legend_textures(self, textures: Mapping[str, _Handle]) -> list[_Handle]:
        """Textures for the legend entries, in legend order."""
        return [textures[item.value] for item in self.legend]

    def apply_texture(
        self,
        tiles: Sequence[RawMap],
        textures: Mapping[str, _Handle],
    ) -> list[tuple[Vec2, tuple[int, int], list[tuple[TilePos, _Handle]]]]:
        """Replace every tile's legend index by its texture."""
        return [
            (
                position,
                size,
                [
                    (tile_pos, textures[self.legend[index].value])
                    for tile_pos, index in layer
                ],
            )
            for position, size, layer in tiles
        ]


@dataclass
class Level:
    """Running state of a level."""

    total_play_time: timedelta = field(default_factory=lambda: timedelta(seconds=1))


@dataclass
class LevelManager:
    """Declared isometric levels by label."""

    iso: dict[str, LevelIsometric] = field(default_factory=dict)


class LevelLoadStatus(Enum):
    """Loading progress of a level's assets."""

    ASSETS_LOADING = "assets_loading"
    ASSETS_LOADED = "assets_loaded"


@dataclass
class Config:
    """String settings of a level."""

    values: dict[str, str] = field(default_factory=dict)

    def __getitem__(self, key: str) -> str:
        return self.values[key]

    def get(self, key: str, default: Any = None) -> Union[str, Any]:
        return self.values.get(key, default)