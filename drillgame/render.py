"""Drawing the game scene: background, level, player, HUD and overlays."""

from __future__ import annotations

import math
from pathlib import Path

import pygame

from drillgame.level import Level
from drillgame.physics import Camera, GameState, Simulation
from drillgame.player import Player

TILE_SIZE = 48
PLAYER_SPRITE_SIZE = TILE_SIZE * 4
PLAYER_FRAMES = 4
PLAYER_FPS = 12
GAME_SIZE = (1920, 1080)
BACKGROUND_NAMES = (
    "sky1.png",
    "sky2.png",
    "sky3.png",
    "mountains1.png",
    "mountains2.png",
    "mountains3.png",
    "house1.png",
    "house2.png",
    "house3.png",
)
PARALLAX = -0.5
PARALLAX_AMOUNT = 0.15

SKY = (63, 63, 116)
BLACK = (0, 0, 0)
GREEN = (0, 228, 48)
GROUND_FALLBACK = (127, 106, 79)
PLAYER_FALLBACK = (255, 255, 255)
WIN_TINT = (0, 228, 48, 100)
LOSE_TINT = (230, 41, 55, 100)
HUD_POSITION = (10, 10)
HUD_FONT_SIZE = 40
OVERLAY_POSITION = (1920 // 2, 1280 // 2)
OVERLAY_FONT_SIZE = 60


def animation_frame(seconds: float, fps: int, frames: int) -> int:
    """Return the sprite-sheet frame to show after ``seconds`` of play."""
    return int(seconds * fps) % frames


def background_position(index: int, camera: Camera) -> tuple[float, float]:
    """Return the world position of background layer ``index`` for a camera."""
    shift = math.fmod(
        ((index * 600) % 823 + camera.target_x * (index + 1) * PARALLAX) * PARALLAX_AMOUNT,
        GAME_SIZE[0],
    )
    return camera.target_x + shift, camera.target_y + 80 * index - camera.offset_y


def letterbox(
    screen_w: float, screen_h: float, game_w: float, game_h: float
) -> tuple[float, float, float, float]:
    """Fit the game area into the screen keeping its aspect ratio.

    Returns ``(offset_x, offset_y, scaled_w, scaled_h)``.
    """
    scale = min(screen_w / game_w, screen_h / game_h)
    scaled_w = game_w * scale
    scaled_h = game_h * scale
    return (screen_w - scaled_w) * 0.5, (screen_h - scaled_h) * 0.5, scaled_w, scaled_h


def hud_text(fps: int, timer: float) -> str:
    """Return the heads-up display text."""
    return f"FPS: {fps}\nTime: {timer:.2f}"


def overlay_text(state: GameState, timer: float) -> str | None:
    """Return the end-of-round message for a state, or None while playing."""
    if state is GameState.GAME_OVER:
        return f"Game Over!\nYour time was {timer:.2f}\nPress R to restart"
    if state is GameState.WON:
        return f"Congratulations! You Won!\nYour time was {timer:.2f}\nPress R to restart"
    return None


def _to_screen(camera: Camera, x: float, y: float) -> tuple[float, float]:
    # The game camera never rotates, so rotation is not applied here.
    return (
        (x - camera.target_x) * camera.zoom + camera.offset_x,
        (y - camera.target_y) * camera.zoom + camera.offset_y,
    )


def _load_image(directory: Path | None, name: str, size: tuple[int, int]) -> pygame.Surface | None:
    if directory is None:
        return None
    path = directory / name
    if not path.is_file():
        return None
    return pygame.transform.scale(pygame.image.load(str(path)), size)


def _draw_text(surface: pygame.Surface, text: str, pos: tuple[int, int], font: pygame.font.Font) -> None:
    x, y = pos
    for line in text.split("\n"):
        surface.blit(font.render(line, True, BLACK), (x, y))
        y += font.get_linesize()


class Renderer:
    """Draws a running game into an off-screen surface and onto a window."""

    def __init__(self, asset_dir: str | Path | None = None, size: tuple[int, int] = GAME_SIZE) -> None:
        pygame.font.init()
        directory = Path(asset_dir) if asset_dir is not None else None
        self.size = size
        self.scene = pygame.Surface(size)
        self._player_sheet = _load_image(
            directory,
            "player_moving_right.png",
            (PLAYER_SPRITE_SIZE * PLAYER_FRAMES, PLAYER_SPRITE_SIZE),
        )
        self._ground = _load_image(directory, "ground.png", (TILE_SIZE, TILE_SIZE))
        self._backgrounds = [
            (index, image)
            for index, name in enumerate(BACKGROUND_NAMES)
            if (image := _load_image(directory, name, GAME_SIZE)) is not None
        ]
        self._zoomed: dict[tuple[int, float], pygame.Surface] = {}
        self._hud_font = pygame.font.Font(None, HUD_FONT_SIZE)
        self._overlay_font = pygame.font.Font(None, OVERLAY_FONT_SIZE)

    def _scaled(self, image: pygame.Surface, zoom: float) -> pygame.Surface:
        key = (id(image), zoom)
        if key not in self._zoomed:
            w, h = image.get_size()
            self._zoomed[key] = pygame.transform.scale(
                image, (max(1, round(w * zoom)), max(1, round(h * zoom)))
            )
        return self._zoomed[key]

    def _draw_background(self, camera: Camera) -> None:
        for index, image in self._backgrounds:
            base_x, base_y = background_position(index, camera)
            scaled = self._scaled(image, camera.zoom)
            for j in range(-2, 2):
                pos = _to_screen(camera, int(base_x + j * GAME_SIZE[0]), int(base_y))
                self.scene.blit(scaled, (round(pos[0]), round(pos[1])))

    def _draw_level(self, level: Level, camera: Camera) -> None:
        size = max(1, round(TILE_SIZE * camera.zoom))
        for rect in level.colliders(TILE_SIZE):
            x, y = _to_screen(camera, rect.x, rect.y)
            if self._ground is not None:
                self.scene.blit(self._scaled(self._ground, camera.zoom), (round(x), round(y)))
            else:
                pygame.draw.rect(self.scene, GROUND_FALLBACK, (round(x), round(y), size, size))
        gx, gy = _to_screen(camera, level.goal[0] * TILE_SIZE, level.goal[1] * TILE_SIZE)
        pygame.draw.rect(self.scene, GREEN, (round(gx), round(gy), size, size))

    def _draw_player(self, player: Player, camera: Camera, seconds: float) -> None:
        if self._player_sheet is None:
            x, y = _to_screen(camera, player.x, player.y)
            w = max(1, round(player.w * camera.zoom))
            h = max(1, round(player.h * camera.zoom))
            pygame.draw.rect(self.scene, PLAYER_FALLBACK, (round(x), round(y), w, h))
            return
        frame = animation_frame(seconds, PLAYER_FPS, PLAYER_FRAMES)
        sprite = self._player_sheet.subsurface(
            (frame * PLAYER_SPRITE_SIZE, 0, PLAYER_SPRITE_SIZE, PLAYER_SPRITE_SIZE)
        )
        if player.dx < 0:
            sprite = pygame.transform.flip(sprite, False, True)
        side = max(1, round(PLAYER_SPRITE_SIZE * camera.zoom))
        sprite = pygame.transform.scale(sprite, (side, side))
        angle = math.atan2(player.dy, player.dx) * (180 / 3.1415)
        sprite = pygame.transform.rotate(sprite, -angle)
        cx, cy = _to_screen(
            camera, player.x + PLAYER_SPRITE_SIZE / 4, player.y + PLAYER_SPRITE_SIZE / 4
        )
        self.scene.blit(sprite, sprite.get_rect(center=(round(cx), round(cy))))

    def draw_scene(self, simulation: Simulation, fps: int, seconds: float) -> pygame.Surface:
        """Draw the whole scene for the current game state and return it."""
        camera = simulation.camera
        self.scene.fill(SKY)
        self._draw_background(camera)
        self._draw_level(simulation.level, camera)
        self._draw_player(simulation.player, camera, seconds)
        _draw_text(self.scene, hud_text(fps, simulation.timer), HUD_POSITION, self._hud_font)

        message = overlay_text(simulation.state, simulation.timer)
        if message is not None:
            tint = LOSE_TINT if simulation.state is GameState.GAME_OVER else WIN_TINT
            overlay = pygame.Surface(self.size, pygame.SRCALPHA)
            overlay.fill(tint)
            self.scene.blit(overlay, (0, 0))
            _draw_text(self.scene, message, OVERLAY_POSITION, self._overlay_font)
        return self.scene

    def present(self, window: pygame.Surface) -> None:
        """Scale the scene onto the window, letterboxed on black."""
        window.fill(BLACK)
        screen_w, screen_h = window.get_size()
        offset_x, offset_y, scaled_w, scaled_h = letterbox(screen_w, screen_h, *self.size)
        scaled = pygame.transform.scale(
            self.scene, (max(1, round(scaled_w)), max(1, round(scaled_h)))
        )
        window.blit(scaled, (round(offset_x), round(offset_y)))