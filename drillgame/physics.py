"""Game rules: movement, collisions, camera and win/lose state."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from drillgame.level import Level, Rect
from drillgame.player import Facing, Player

TILE_SIZE = 48
GRAVITY = 750.0
JUMP_IMPULSE = 600.0
JUMP_COOLDOWN = 1.0
ACCELERATION = 750.0
DASH_SPEED = 800.0
MAX_SPEED = 400.0
DRAG = 0.8
HARD_LANDING_SPEED = 200.0
FLOOR_BOUNCE = 0.25
WALL_BOUNCE = 0.9
CAMERA_LEAD = 96.0
CAMERA_SMOOTHING = 0.2


class GameState(Enum):
    """Phase of a round."""

    START = "start"
    PLAYING = "playing"
    WON = "won"
    GAME_OVER = "game_over"


class SoundEvent(Enum):
    """Sounds the game should play after a step."""

    DRILL = "drill"
    HIT = "hit"
    WIN = "win"
    LOSE = "lose"


@dataclass(frozen=True)
class Controls:
    """Keys pressed during one frame."""

    jump: bool = False
    left: bool = False
    right: bool = False
    dash: bool = False
    reset: bool = False


@dataclass
class Camera:
    """A 2D camera: ``target`` in the world is drawn at ``offset`` on screen."""

    offset_x: float
    offset_y: float
    target_x: float
    target_y: float
    rotation: float = 0.0
    zoom: float = 1.0

    def screen_to_world(self, x: float, y: float) -> tuple[float, float]:
        """Convert a screen position into world coordinates."""
        sx = (x - self.offset_x) / self.zoom
        sy = (y - self.offset_y) / self.zoom
        angle = math.radians(-self.rotation)
        cos, sin = math.cos(angle), math.sin(angle)
        return (
            sx * cos - sy * sin + self.target_x,
            sx * sin + sy * cos + self.target_y,
        )

    def follow(self, x: float, y: float, amount: float) -> None:
        """Move the target part of the way towards (x, y)."""
        self.target_x += (x - self.target_x) * amount
        self.target_y += (y - self.target_y) * amount


def has_won(player: Player, goal: tuple[float, float], tile_size: float) -> bool:
    """Return True if the player is within one tile of the goal tile."""
    goal_x, goal_y = goal[0] * tile_size, goal[1] * tile_size
    return math.hypot(player.x - goal_x, player.y - goal_y) < tile_size


class Simulation:
    """The state of one running game and the rules that advance it."""

    def __init__(
        self,
        level: Level,
        tile_size: float = TILE_SIZE,
        screen_size: tuple[float, float] = (1920.0, 1080.0),
    ) -> None:
        self.level = level
        self.tile_size = tile_size
        self.player = Player.at_tile(*level.start, tile_size)
        half_w, half_h = screen_size[0] / 2.0, screen_size[1] / 2.0
        self.camera = Camera(half_w, half_h, half_w, half_h, 0.0, 0.5)
        self.state = GameState.PLAYING
        self.timer = 0.0
        self.dash_ready = True
        self.jump_cooldown = 0.0
        self._colliders = level.colliders(tile_size)

    def reset(self) -> None:
        """Put the player back at the start and restart the clock."""
        self.player.x = self.level.start[0] * self.tile_size
        self.player.y = self.level.start[1] * self.tile_size
        self.player.dx = 0.0
        self.player.dy = 0.0
        self.timer = 0.0
        self.state = GameState.START

    def step(self, controls: Controls, dt: float) -> list[SoundEvent]:
        """Advance the game by ``dt`` seconds and return the sounds to play."""
        events: list[SoundEvent] = []
        if self.state is GameState.PLAYING:
            self._play(controls, dt, events)
        elif self.state is GameState.START:
            self.player.facing = Facing.RIGHT
            self.state = GameState.PLAYING
        if controls.reset:
            self.reset()

        if self.player.y > self.level.height * self.tile_size:
            if self.state is not GameState.GAME_OVER:
                events.append(SoundEvent.LOSE)
            self.state = GameState.GAME_OVER

        if has_won(self.player, self.level.goal, self.tile_size):
            if self.state is not GameState.WON:
                events.append(SoundEvent.WIN)
            self.state = GameState.WON
        return events

    def _hits_ground(self, rect: Rect) -> bool:
        return any(rect.overlaps(ground) for ground in self._colliders)

    def _play(self, controls: Controls, dt: float, events: list[SoundEvent]) -> None:
        player = self.player
        self.timer += dt
        player.max_speed = MAX_SPEED

        if controls.left:
            player.facing = Facing.LEFT
        if controls.right:
            player.facing = Facing.RIGHT

        if controls.dash and self.dash_ready:
            player.dx += DASH_SPEED if player.facing is Facing.RIGHT else -DASH_SPEED
            events.append(SoundEvent.DRILL)
            self.dash_ready = False

        if player.facing is Facing.RIGHT:
            player.dx += ACCELERATION * dt
        else:
            player.dx -= ACCELERATION * dt

        self.jump_cooldown = max(0.0, self.jump_cooldown - dt)
        if controls.jump and self.jump_cooldown < 0.001:
            self.jump_cooldown = JUMP_COOLDOWN
            player.dy -= JUMP_IMPULSE

        player.dy += GRAVITY * dt
        prev_y = player.y
        player.y += player.dy * dt
        if player.dy > 0:
            feet = Rect(player.x + player.w / 4, player.y + player.h, player.w / 2, 1)
        else:
            feet = Rect(player.x + player.w / 4, player.y - 1, player.w / 2, 1)
        if self._hits_ground(feet):
            if abs(player.dy) > HARD_LANDING_SPEED:
                events.append(SoundEvent.HIT)
            player.y = prev_y - player.dy * dt
            player.dy = FLOOR_BOUNCE * -player.dy
            self.jump_cooldown = 0.0
            self.dash_ready = True

        player.dx -= player.dx * DRAG * dt
        prev_x = player.x
        player.x += player.dx * dt
        if player.dx > 0:
            side = Rect(player.x + player.w, player.y + 1, 1, player.h - 2)
        else:
            side = Rect(player.x - 1, player.y + 1, 1, player.h - 2)
        if self._hits_ground(side):
            events.append(SoundEvent.HIT)
            player.x = prev_x - player.dx * dt
            player.dx *= -WALL_BOUNCE
            player.facing = player.facing.flipped()
            self.dash_ready = True
            self.jump_cooldown = 0.0

        self.camera.follow(player.x + CAMERA_LEAD, player.y + CAMERA_LEAD, CAMERA_SMOOTHING)