"""Game levels: a grid of tiles with a start and a goal position."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Iterator


class TileType(IntEnum):
    """Kinds of tile a level is built from."""

    EMPTY = 0
    GROUND = 1


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in world coordinates."""

    x: float
    y: float
    width: float
    height: float

    def overlaps(self, other: Rect) -> bool:
        """Return True if the two rectangles share some interior area."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


def _tokens(text: str) -> Iterator[str]:
    yield from text.split()


def _next(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"level data ends before {what}") from None


def _read_int(tokens: Iterator[str], what: str) -> int:
    token = _next(tokens, what)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer for {what}, got {token!r}") from None


def _read_float(tokens: Iterator[str], what: str) -> float:
    token = _next(tokens, what)
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"expected a number for {what}, got {token!r}") from None


@dataclass
class Level:
    """A rectangular tile map; ``tiles[y][x]`` holds the tile at column x, row y."""

    width: int
    height: int
    start: tuple[float, float] = (0.0, 0.0)
    goal: tuple[float, float] = (0.0, 0.0)
    tiles: list[list[TileType]] = field(default_factory=list)

    @classmethod
    def empty(cls, width: int, height: int) -> Level:
        """Create a level of the given size with every tile empty."""
        tiles = [[TileType.EMPTY] * width for _ in range(height)]
        return cls(width, height, tiles=tiles)

    @classmethod
    def parse(cls, text: str) -> Level:
        """Read a level from its whitespace-separated text form."""
        tokens = _tokens(text)
        width = _read_int(tokens, "width")
        height = _read_int(tokens, "height")
        start = (_read_float(tokens, "start x"), _read_float(tokens, "start y"))
        goal = (_read_float(tokens, "goal x"), _read_float(tokens, "goal y"))
        tiles = []
        for y in range(height):
            row = []
            for x in range(width):
                value = _read_int(tokens, f"tile ({x}, {y})")
                try:
                    row.append(TileType(value))
                except ValueError:
                    raise ValueError(f"unknown tile type {value} at ({x}, {y})") from None
            tiles.append(row)
        return cls(width, height, start, goal, tiles)

    @classmethod
    def load(cls, path: str | Path) -> Level:
        """Read a level from a file."""
        return cls.parse(Path(path).read_text())

    def get(self, x: int, y: int) -> TileType:
        """Return the tile at (x, y); anything outside the level is empty."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return TileType.EMPTY
        return self.tiles[y][x]

    def colliders(self, tile_size: float) -> list[Rect]:
        """Return a world-space rectangle for every solid tile, row by row."""
        return [
            Rect(x * tile_size, y * tile_size, tile_size, tile_size)
            for y in range(self.height)
            for x in range(self.width)
            if self.get(x, y) is not TileType.EMPTY
        ]