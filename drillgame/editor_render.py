"""Drawing the level editor's view of a map."""

from __future__ import annotations

import pygame

from drillgame.editor_map import EditorMap, EditorTile
from drillgame.physics import Camera

TILE_SIZE = 48
SCENE_SIZE = (1920, 1080)
WHITE = (255, 255, 255)
BROWN = (127, 106, 79)
PURPLE = (200, 122, 255)
GREEN = (0, 228, 48)
BLACK = (0, 0, 0)

_COLORS = {
    EditorTile.EMPTY: WHITE,
    EditorTile.GROUND: BROWN,
}


def color_of(tile: EditorTile | int) -> tuple[int, int, int]:
    """Return the colour a tile is shown in; unknown tiles are purple."""
    try:
        return _COLORS[EditorTile(tile)]
    except ValueError:
        return PURPLE


def _to_screen(camera: Camera, x: float, y: float) -> tuple[int, int]:
    return (
        round((x - camera.target_x) * camera.zoom + camera.offset_x),
        round((y - camera.target_y) * camera.zoom + camera.offset_y),
    )


class EditorRenderer:
    """Draws an editor map into an off-screen surface and onto a window."""

    def __init__(self, size: tuple[int, int] = SCENE_SIZE, tile_size: int = TILE_SIZE) -> None:
        pygame.font.init()
        self.size = size
        self.tile_size = tile_size
        self.scene = pygame.Surface(size)
        self._font = pygame.font.Font(None, 40)

    def draw_scene(self, editor_map: EditorMap, camera: Camera, fps: int) -> pygame.Surface:
        """Draw every tile, the spawn marker and the FPS counter; return the scene."""
        self.scene.fill(BLACK)
        side = max(1, round(self.tile_size * camera.zoom))
        for y in range(editor_map.height):
            for x in range(editor_map.width):
                sx, sy = _to_screen(camera, x * self.tile_size, y * self.tile_size)
                pygame.draw.rect(self.scene, color_of(editor_map.get(x, y)), (sx, sy, side, side))
        half = self.tile_size // 2
        center = _to_screen(
            camera,
            editor_map.spawn_x * self.tile_size + half,
            editor_map.spawn_y * self.tile_size + half,
        )
        pygame.draw.circle(self.scene, GREEN, center, max(1, round(half * camera.zoom)))
        self.scene.blit(self._font.render(f"FPS: {fps}", True, BLACK), (10, 10))
        return self.scene

    def present(self, window: pygame.Surface) -> None:
        """Copy the scene onto the window unscaled."""
        window.fill(BLACK)
        window.blit(self.scene, (0, 0))