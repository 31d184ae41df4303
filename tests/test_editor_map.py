import pytest

from drillgame.editor_map import EditorMap, EditorTile


def test_new_map_is_empty():
    editor_map = EditorMap(3, 2)
    assert len(editor_map.tiles) == 2
    assert all(editor_map.get(x, y) is EditorTile.EMPTY for x in range(3) for y in range(2))
    assert (editor_map.spawn_x, editor_map.spawn_y) == (0, 0)


def test_dumps_format():
    editor_map = EditorMap(2, 1)
    assert editor_map.dumps() == "2\n1\n0 0\n0 0 \n"


def test_round_trip():
    editor_map = EditorMap(4, 3, 1, 1)
    editor_map.set(0, 2, EditorTile.GROUND)
    editor_map.set(3, 0, EditorTile.GROUND)
    assert EditorMap.parse(editor_map.dumps()) == editor_map


def test_save_and_load(tmp_path):
    editor_map = EditorMap(3, 3, 2, 0)
    editor_map.set(1, 1, EditorTile.GROUND)
    path = tmp_path / "map.wad"
    editor_map.save(path)
    assert EditorMap.load(path) == editor_map


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_set_outside_raises(x, y):
    with pytest.raises(ValueError):
        EditorMap(3, 3).set(x, y, EditorTile.GROUND)


def test_set_on_spawn_raises():
    editor_map = EditorMap(3, 3, 1, 1)
    with pytest.raises(ValueError):
        editor_map.set(1, 1, EditorTile.GROUND)
    assert editor_map.get(1, 1) is EditorTile.EMPTY


def test_set_spawn_on_ground_raises():
    editor_map = EditorMap(3, 3)
    editor_map.set(2, 2, EditorTile.GROUND)
    with pytest.raises(ValueError):
        editor_map.set_spawn(2, 2)
    assert (editor_map.spawn_x, editor_map.spawn_y) == (0, 0)


def test_set_spawn_outside_raises():
    with pytest.raises(ValueError):
        EditorMap(3, 3).set_spawn(5, 0)


def test_set_spawn_moves_spawn():
    editor_map = EditorMap(3, 3)
    editor_map.set_spawn(2, 1)
    assert (editor_map.spawn_x, editor_map.spawn_y) == (2, 1)


def test_cycle_wraps_around():
    editor_map = EditorMap(3, 3)
    editor_map.cycle(1, 2)
    assert editor_map.get(1, 2) is EditorTile.GROUND
    editor_map.cycle(1, 2)
    assert editor_map.get(1, 2) is EditorTile.EMPTY


def test_get_outside_is_empty():
    assert EditorMap(2, 2).get(-3, 9) is EditorTile.EMPTY


def test_parse_short_data_raises():
    with pytest.raises(ValueError):
        EditorMap.parse("2 2 0 0 1")


def test_parse_unknown_tile_raises():
    with pytest.raises(ValueError):
        EditorMap.parse("1 1 0 0 5")