"""Editable tile maps as used by the level editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path


class EditorTile(IntEnum):
    """Tiles the editor can place."""

    EMPTY = 0
    GROUND = 1


@dataclass
class EditorMap:
    """A tile grid with a spawn point; ``tiles[y][x]`` is column x, row y."""

    width: int
    height: int
    spawn_x: int = 0
    spawn_y: int = 0
    tiles: list[list[EditorTile]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.tiles:
            self.tiles = [[EditorTile.EMPTY] * self.width for _ in range(self.height)]

    @classmethod
    def parse(cls, text: str) -> EditorMap:
        """Read a map from its text form."""
        try:
            numbers = [int(token) for token in text.split()]
        except ValueError as exc:
            raise ValueError(f"map data must be integers: {exc}") from None
        if len(numbers) < 4:
            raise ValueError("map data ends before its header is complete")
        width, height, spawn_x, spawn_y = numbers[:4]
        cells = numbers[4:]
        if len(cells) < width * height:
            raise ValueError(f"map data holds {len(cells)} tiles, expected {width * height}")
        try:
            tiles = [
                [EditorTile(value) for value in cells[row * width:(row + 1) * width]]
                for row in range(height)
            ]
        except ValueError as exc:
            raise ValueError(f"unknown tile type: {exc}") from None
        return cls(width, height, spawn_x, spawn_y, tiles)

    @classmethod
    def load(cls, path: str | Path) -> EditorMap:
        """Read a map from a file."""
        return cls.parse(Path(path).read_text())

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> EditorTile:
        """Return the tile at (x, y); anything outside the map is empty."""
        if not self._inside(x, y):
            return EditorTile.EMPTY
        return self.tiles[y][x]

    def set(self, x: int, y: int, tile: EditorTile) -> None:
        """Place a tile; raises ValueError outside the map or on the spawn."""
        if not self._inside(x, y):
            raise ValueError(f"cannot set tile at ({x}, {y}) to {int(tile)}: outside of map")
        if (x, y) == (self.spawn_x, self.spawn_y):
            raise ValueError(f"cannot set tile at ({x}, {y}) to {int(tile)}: it is the spawn")
        self.tiles[y][x] = EditorTile(tile)

    def set_spawn(self, x: int, y: int) -> None:
        """Move the spawn; raises ValueError outside the map or on a solid tile."""
        if not self._inside(x, y):
            raise ValueError(f"cannot set spawn at ({x}, {y}): outside of map")
        if self.get(x, y) is not EditorTile.EMPTY:
            raise ValueError(f"cannot set spawn at ({x}, {y}): tile is not empty")
        self.spawn_x, self.spawn_y = x, y

    def cycle(self, x: int, y: int) -> None:
        """Replace the tile at (x, y) with the next kind of tile."""
        following = EditorTile((self.get(x, y) + 1) % len(EditorTile))
        self.set(x, y, following)

    def dumps(self) -> str:
        """Return the map in its text form."""
        lines = [str(self.width), str(self.height), f"{self.spawn_x} {self.spawn_y}"]
        lines.extend(
            "".join(f"{int(self.get(x, y))} " for x in range(self.width))
            for y in range(self.height)
        )
        return "\n".join(lines) + "\n"

    def save(self, path: str | Path) -> None:
        """Write the map to a file."""
        Path(path).write_text(self.dumps())