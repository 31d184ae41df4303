import pytest

from drillgame.level import Level, TileType
from drillgame.physics import (
    Camera,
    Controls,
    GameState,
    Simulation,
    SoundEvent,
    has_won,
)
from drillgame.player import Facing, Player


def open_level(width=5, height=5):
    level = Level.empty(width, height)
    level.goal = (width + 10.0, height + 10.0)
    return level


def test_start_state_switches_to_playing_facing_right():
    sim = Simulation(open_level())
    sim.state = GameState.START
    sim.player.facing = Facing.LEFT
    events = sim.step(Controls(), 0.0)
    assert sim.state is GameState.PLAYING
    assert sim.player.facing is Facing.RIGHT
    assert events == []


def test_timer_advances_while_playing():
    sim = Simulation(open_level())
    sim.step(Controls(), 0.25)
    sim.step(Controls(), 0.25)
    assert sim.timer == pytest.approx(0.5)


def test_dash_once_until_landing():
    sim = Simulation(open_level())
    events = sim.step(Controls(dash=True), 0.0)
    assert sim.player.dx == 800.0
    assert events == [SoundEvent.DRILL]
    assert sim.dash_ready is False
    assert sim.step(Controls(dash=True), 0.0) == []
    assert sim.player.dx == 800.0


def test_dash_left_goes_negative():
    sim = Simulation(open_level())
    sim.step(Controls(left=True, dash=True), 0.0)
    assert sim.player.facing is Facing.LEFT
    assert sim.player.dx == -800.0


def test_jump_has_cooldown():
    sim = Simulation(open_level())
    sim.step(Controls(jump=True), 0.0)
    assert sim.player.dy == -600.0
    assert sim.jump_cooldown == 1.0
    sim.step(Controls(jump=True), 0.0)
    assert sim.player.dy == -600.0


def test_falling_out_of_level_is_game_over_once():
    level = open_level()
    sim = Simulation(level)
    sim.player.y = level.height * 48 + 10
    assert SoundEvent.LOSE in sim.step(Controls(), 0.0)
    assert sim.state is GameState.GAME_OVER
    assert SoundEvent.LOSE not in sim.step(Controls(), 0.0)
    assert sim.state is GameState.GAME_OVER


def test_reset_returns_to_start():
    level = open_level()
    level.start = (1.0, 2.0)
    sim = Simulation(level)
    sim.step(Controls(dash=True), 0.3)
    sim.step(Controls(reset=True), 0.0)
    assert sim.state is GameState.START
    assert (sim.player.x, sim.player.y) == (48.0, 96.0)
    assert (sim.player.dx, sim.player.dy) == (0.0, 0.0)
    assert sim.timer == 0.0


def test_reaching_goal_wins_once():
    level = Level.empty(5, 5)
    level.start = (2.0, 2.0)
    level.goal = (2.0, 2.0)
    sim = Simulation(level)
    assert sim.step(Controls(), 0.0) == [SoundEvent.WIN]
    assert sim.state is GameState.WON
    assert sim.step(Controls(), 0.0) == []


def test_landing_bounces_and_restores_dash():
    level = Level.empty(5, 5)
    level.goal = (20.0, 20.0)
    for x in range(5):
        level.tiles[4][x] = TileType.GROUND
    sim = Simulation(level)
    sim.player.x, sim.player.y, sim.player.dy = 48.0, 110.0, 300.0
    sim.dash_ready = False
    events = sim.step(Controls(), 0.01)
    assert SoundEvent.HIT in events
    assert sim.player.dy < 0
    assert sim.player.y < 110.0
    assert sim.dash_ready is True


def test_wall_reverses_direction():
    level = Level.empty(5, 5)
    level.goal = (20.0, 20.0)
    for y in range(5):
        level.tiles[y][3] = TileType.GROUND
    sim = Simulation(level)
    start_x = 144 - sim.player.w - 1
    sim.player.x, sim.player.y, sim.player.dx = start_x, 48.0, 400.0
    events = sim.step(Controls(), 0.01)
    assert events == [SoundEvent.HIT]
    assert sim.player.dx < 0
    assert sim.player.facing is Facing.LEFT
    assert sim.player.x < start_x


def test_has_won():
    assert has_won(Player(96.0, 48.0), (2.0, 1.0), 48)
    assert not has_won(Player(0.0, 0.0), (2.0, 1.0), 48)


def test_camera_offset_maps_to_target():
    camera = Camera(100.0, 50.0, 10.0, 20.0, rotation=30.0, zoom=2.0)
    x, y = camera.screen_to_world(100.0, 50.0)
    assert (x, y) == pytest.approx((10.0, 20.0))


def test_identity_camera():
    camera = Camera(0.0, 0.0, 0.0, 0.0)
    assert camera.screen_to_world(37.0, -5.0) == pytest.approx((37.0, -5.0))


def test_camera_follow_moves_towards_point():
    camera = Camera(0.0, 0.0, 0.0, 0.0)
    camera.follow(100.0, -100.0, 1.0)
    assert (camera.target_x, camera.target_y) == (100.0, -100.0)
    camera.follow(0.0, 0.0, 0.0)
    assert (camera.target_x, camera.target_y) == (100.0, -100.0)