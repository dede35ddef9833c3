"""Tile legends and text maps of isometric level surfaces."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "TilePos",
    "MapValidationError",
    "InconsistentWidth",
    "InconsistentHeight",
    "UndefinedTileError",
    "legend_to_index",
    "validate_maps",
    "parse_map_with_positions",
    "split_lines",
]

_log = logging.getLogger(__name__)

BLANK_TILE = "_"

_LEGEND = "0123456789" "ABCDEGHKNOPQRSUZ" "@#$%&*+=^~?!"
_LEGEND_INDEX = {char: index for index, char in enumerate(_LEGEND)}


@dataclass(frozen=True)
class TilePos:
    """Column and row of a tile inside a tilemap."""

    x: int
    y: int


class MapValidationError(ValueError):
    """Raised when a set of maps does not share one size."""


class InconsistentWidth(MapValidationError):
    """Rows of the maps differ in their number of columns."""

    def __init__(self, message: str = "maps have rows of inconsistent width") -> None:
        super().__init__(message)


class InconsistentHeight(MapValidationError):
    """The maps differ in their number of rows."""

    def __init__(self, message: str = "maps have inconsistent height") -> None:
        super().__init__(message)


class UndefinedTileError(ValueError):
    """Raised for a character that the tile legend does not define."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Undefined tile '{char}'")
        self.char = char


def split_lines(text: str) -> list[str]:
    """Split text into lines at ``\\n``, dropping a trailing ``\\r`` and a final empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def legend_to_index(char: str) -> Optional[int]:
    """Legend index of a tile character; ``None`` for the blank tile ``_``.

    Digits map to 0-9, the letters ``ABCDEGHKNOPQRSUZ`` to 10-25 and the
    symbols ``@#$%&*+=^~?!`` to 26-37.
    """
    if char == BLANK_TILE:
        return None
    try:
        return _LEGEND_INDEX[char]
    except KeyError:
        raise UndefinedTileError(char) from None


def validate_maps(maps: Sequence[str]) -> tuple[int, int]:
    """Check that all maps share one width and height and return ``(width, height)``.

    Columns are counted as the pipe-separated segments of a row. An empty
    sequence of maps gives ``(0, 0)``.
    """
    if not maps:
        return (0, 0)

    expected_height = len(split_lines(maps[0]))
    expected_width: Optional[int] = None

    for map_text in maps:
        lines = split_lines(map_text)
        if len(lines) != expected_height:
            raise InconsistentHeight()
        for line in lines:
            width = len(line.split("|"))
            if expected_width is None:
                expected_width = width
            elif width != expected_width:
                raise InconsistentWidth()

    return (expected_width or 0, expected_height)


def parse_map_with_positions(map_str: str) -> list[tuple[TilePos, int]]:
    """Positions and legend indices of all non-blank tiles, row by row.

    Empty rows are skipped but still count towards the row number.
    """
    output: list[tuple[TilePos, int]] = []
    for y, line in enumerate(split_lines(map_str)):
        trimmed = line.strip()
        if not trimmed:
            continue
        for x, token in enumerate(part.strip() for part in trimmed.split("|")):
            if not token:
                _log.error("Empty token encountered at line %d column %d", y, x)
                continue
            index = legend_to_index(token[0])
            if index is None:
                continue
            output.append((TilePos(x, y), index))
    return output