# drillgame

A small side-scrolling platformer. You steer a drill that keeps on
accelerating in the direction it faces, bounces off walls and ground, and
has to reach the goal tile before it falls off the bottom of the level.
It comes with a simple tile map editor.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
drillgame [--level FILE] [--assets DIR]
```

- `--level` is the level file to play (default `levels/level2.wad`).
- `--assets` is the directory of images and sounds (default `assets`).

Both defaults are relative to the directory you start the game from. If
the level cannot be read, the game prints an error and exits with status 1.
Missing images are drawn as plain coloured rectangles and missing sounds
are skipped, so the game runs without any assets at all.

Controls:

| Key          | Action                                             |
|--------------|----------------------------------------------------|
| W or Space   | Jump (once the jump cooldown has run out)          |
| A / D        | Face left / right                                  |
| Left Shift   | Dash in the facing direction (recharges on impact) |
| F            | Toggle fullscreen                                  |
| R            | Restart the level                                  |
| Escape       | Quit                                               |

You win when the drill gets within one tile of the goal. You lose when it
falls below the bottom edge of the map. The HUD shows the frame rate and
the elapsed time; the final time is shown when the round ends. Music
plays only while a round is in progress.

## Editing maps

Open an existing map:

```
drillgame-editor path/to/map.wad
```

Or create a new, empty map of a given size in tiles:

```
drillgame-editor WIDTH HEIGHT path/to/new_map.wad
```

Any other number of arguments, or a width or height that is not an
integer, makes the editor print an error and exit with status 1.

In the editor:

- W, A, S, D pan the view over the map; the view stops near the map's edges.
- Left click cycles the tile under the cursor (empty, ground, empty, ...).
  The spawn tile cannot be changed.
- Right click moves the spawn point to the tile under the cursor, as long
  as that tile is empty.
- Escape or closing the window quits.

Refused edits are logged as warnings. The map is written back to the file
when the editor quits.

## File formats

Both formats are plain text of whitespace-separated integers.

A game level (`drillgame.level.Level`, read with `Level.load` or
`Level.parse`) holds:

```
WIDTH HEIGHT
START_X START_Y
GOAL_X GOAL_Y
<HEIGHT rows of WIDTH tile numbers>
```

An editor map (`drillgame.editor_map.EditorMap`, read with `load`/`parse`
and written with `save`/`dumps`) holds:

```
WIDTH
HEIGHT
SPAWN_X SPAWN_Y
<HEIGHT rows of WIDTH tile numbers>
```

In both, `0` is an empty tile and `1` is ground; tiles outside the map
count as empty. Malformed data raises `ValueError`.

## What it does not do

The editor has no notion of a goal: its maps carry only a spawn point, so
a map saved by the editor is not a game level as it stands. Add the
`GOAL_X GOAL_Y` line after the spawn line by hand before playing it.

## Using it as a library

The simulation does not need a window:

```python
from drillgame.level import Level
from drillgame.physics import Controls, Simulation

level = Level.load("levels/level2.wad")
sim = Simulation(level)
events = sim.step(Controls(right=True), 1 / 60)
print(sim.state, events)
```

`Simulation.step` advances the game by one frame and returns the sounds
(`SoundEvent`) to play; `Simulation.reset` puts the player back at the
start. `drillgame.render.Renderer` and `drillgame.editor_render.EditorRenderer`
draw a simulation or an editor map onto pygame surfaces.