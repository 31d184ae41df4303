"""The player character's state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PLAYER_SIZE = 0.9 * 96.0


class Facing(Enum):
    """Direction the player is heading in."""

    LEFT = "left"
    RIGHT = "right"

    def flipped(self) -> Facing:
        """Return the opposite direction."""
        return Facing.RIGHT if self is Facing.LEFT else Facing.LEFT


@dataclass
class Player:
    """Position, size and velocity of the player in world units."""

    x: float
    y: float
    w: float = PLAYER_SIZE
    h: float = PLAYER_SIZE
    dx: float = 0.0
    dy: float = 0.0
    max_speed: float = 400.0
    facing: Facing = Facing.RIGHT

    @classmethod
    def at_tile(cls, tile_x: float, tile_y: float, tile_size: float) -> Player:
        """Create a player standing at the given tile coordinates."""
        return cls(tile_x * tile_size, tile_y * tile_size)