"""The level editor command."""

from __future__ import annotations

import logging
import sys

import pygame

from drillgame.editor_map import EditorMap
from drillgame.editor_render import SCENE_SIZE, TILE_SIZE, EditorRenderer
from drillgame.physics import Camera

WINDOW_SIZE = (1280, 720)
WINDOW_TITLE = "TITLE"
CAMERA_SPEED = 1000
EDGE_MARGIN = 10

log = logging.getLogger(__name__)


def parse_args(argv: list[str] | None) -> tuple[str, tuple[int, int] | None]:
    """Return the map file and, for a new map, its (width, height).

    Accepts either ``FILE`` or ``WIDTH HEIGHT FILE``.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 1:
        return args[0], None
    if len(args) == 3:
        try:
            width, height = int(args[0]), int(args[1])
        except ValueError:
            raise ValueError(f"width and height must be integers, got {args[0]!r} {args[1]!r}") from None
        return args[2], (width, height)
    raise ValueError("Wrong number of args!")


def move_camera(
    offset: tuple[float, float],
    direction: tuple[int, int],
    dt: float,
    window_size: tuple[int, int],
    map_size: tuple[int, int],
    tile_size: int,
) -> tuple[float, float]:
    """Return the camera offset after panning; a move that leaves the map is dropped."""
    moved = []
    for current, step, window, tiles in zip(offset, direction, window_size, map_size):
        following = current + step * CAMERA_SPEED * dt
        if following > EDGE_MARGIN or following < window - tile_size * tiles - EDGE_MARGIN:
            following = current
        moved.append(following)
    return moved[0], moved[1]


def tile_under(camera: Camera, x: float, y: float, tile_size: int) -> tuple[int, int]:
    """Return the map tile under a screen position."""
    world_x, world_y = camera.screen_to_world(x, y)
    return int(world_x / tile_size), int(world_y / tile_size)


def _handle_click(editor_map: EditorMap, camera: Camera, pos: tuple[int, int], button: int) -> None:
    tile_x, tile_y = tile_under(camera, pos[0], pos[1], TILE_SIZE)
    try:
        if button == 3:
            editor_map.set_spawn(tile_x, tile_y)
        elif button == 1:
            editor_map.cycle(tile_x, tile_y)
    except ValueError as exc:
        log.warning("%s", exc)


def main(argv: list[str] | None = None) -> int:
    """Edit a map in a window and save it when the window closes."""
    try:
        path, size = parse_args(argv)
        editor_map = EditorMap.load(path) if size is None else EditorMap(*size)
    except (OSError, ValueError) as exc:
        print(f"editor: {exc}", file=sys.stderr)
        return 1

    pygame.init()
    try:
        window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = EditorRenderer(SCENE_SIZE, TILE_SIZE)
        camera = Camera(0.0, 0.0, 0.0, 0.0, 0.0, 1.0)
        clock = pygame.time.Clock()

        running = True
        while running:
            dt = clock.tick() / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    _handle_click(editor_map, camera, event.pos, event.button)

            keys = pygame.key.get_pressed()
            direction = (
                int(keys[pygame.K_a]) - int(keys[pygame.K_d]),
                int(keys[pygame.K_w]) - int(keys[pygame.K_s]),
            )
            camera.offset_x, camera.offset_y = move_camera(
                (camera.offset_x, camera.offset_y),
                direction,
                dt,
                window.get_size(),
                (editor_map.width, editor_map.height),
                TILE_SIZE,
            )

            renderer.draw_scene(editor_map, camera, int(clock.get_fps()))
            renderer.present(window)
            pygame.display.flip()
    finally:
        pygame.quit()

    editor_map.save(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())