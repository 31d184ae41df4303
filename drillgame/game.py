"""The game's command: opens a window and runs the main loop."""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

import pygame

from drillgame.level import Level
from drillgame.physics import Controls, GameState, Simulation, SoundEvent
from drillgame.render import GAME_SIZE, Renderer

WINDOW_SIZE = (1280, 720)
WINDOW_TITLE = "TITLE"
MUSIC_VOLUME = 0.6
DEFAULT_LEVEL = "levels/level2.wad"
DEFAULT_ASSETS = "assets"


def parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parse the game's command-line options."""
    parser = argparse.ArgumentParser(prog="drillgame", description="Play a level.")
    parser.add_argument("--level", default=DEFAULT_LEVEL, help="level file to play")
    parser.add_argument("--assets", default=DEFAULT_ASSETS, help="directory of images and sounds")
    return parser.parse_args(argv)


class _Sounds:
    def __init__(self, directory: Path) -> None:
        try:
            pygame.mixer.init()
        except pygame.error:
            self.enabled = False
            self._banks: dict[SoundEvent, list[pygame.mixer.Sound]] = {}
            return
        self.enabled = True
        self._directory = directory
        self._banks = {
            SoundEvent.DRILL: self._load(f"drill-00{n}.wav" for n in range(1, 5)),
            SoundEvent.HIT: self._load(f"hit-00{n}.wav" for n in range(1, 5)),
            SoundEvent.WIN: self._load(["win.wav"]),
            SoundEvent.LOSE: self._load(["lose.wav"]),
        }
        music = directory / "dirll-muzak.wav"
        if music.is_file():
            pygame.mixer.music.load(str(music))
            pygame.mixer.music.set_volume(MUSIC_VOLUME)
            pygame.mixer.music.play(-1)

    def _load(self, names) -> list[pygame.mixer.Sound]:
        paths = (self._directory / name for name in names)
        return [pygame.mixer.Sound(str(path)) for path in paths if path.is_file()]

    def play(self, events: list[SoundEvent]) -> None:
        for event in events:
            bank = self._banks.get(event)
            if bank:
                random.choice(bank).play()

    def follow_state(self, state: GameState) -> None:
        if not self.enabled:
            return
        if state is GameState.PLAYING:
            pygame.mixer.music.unpause()
        else:
            pygame.mixer.music.pause()


def _controls(pressed: set[int]) -> Controls:
    return Controls(
        jump=pygame.K_w in pressed or pygame.K_SPACE in pressed,
        left=pygame.K_a in pressed,
        right=pygame.K_d in pressed,
        dash=pygame.K_LSHIFT in pressed,
        reset=pygame.K_r in pressed,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the game until the window is closed."""
    args = parse_args(argv)
    try:
        level = Level.load(args.level)
    except (OSError, ValueError) as exc:
        print(f"cannot load level {args.level}: {exc}", file=sys.stderr)
        return 1
    print(f"Size of map: {level.width} * {level.height}")

    pygame.init()
    try:
        window = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        assets = Path(args.assets)
        sounds = _Sounds(assets)
        renderer = Renderer(assets, GAME_SIZE)
        simulation = Simulation(level, screen_size=(float(GAME_SIZE[0]), float(GAME_SIZE[1])))
        clock = pygame.time.Clock()
        started = time.perf_counter()

        running = True
        while running:
            dt = clock.tick() / 1000.0
            pressed: set[int] = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    pressed.add(event.key)
            if pygame.K_f in pressed:
                pygame.display.toggle_fullscreen()

            sounds.follow_state(simulation.state)
            sounds.play(simulation.step(_controls(pressed), dt))

            renderer.draw_scene(simulation, int(clock.get_fps()), time.perf_counter() - started)
            renderer.present(window)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())