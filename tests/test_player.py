from drillgame.player import Facing, Player


def test_flipped():
    assert Facing.LEFT.flipped() is Facing.RIGHT
    assert Facing.RIGHT.flipped() is Facing.LEFT


def test_flipped_twice_is_identity():
    assert Facing.LEFT.flipped().flipped() is Facing.LEFT
    assert Facing.RIGHT.flipped().flipped() is Facing.RIGHT


def test_at_tile_scales_position():
    player = Player.at_tile(3, 2, 48)
    assert (player.x, player.y) == (3 * 48, 2 * 48)


def test_new_player_is_at_rest_facing_right():
    player = Player(10.0, 20.0)
    assert (player.dx, player.dy) == (0.0, 0.0)
    assert player.facing is Facing.RIGHT
    assert player.max_speed == 400.0
    assert player.w == player.h == 0.9 * 96.0