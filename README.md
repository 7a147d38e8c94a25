# cubray

cubray is a small first-person raycasting engine. It reads a `.cub` scene
file. The file names four wall textures, gives a floor colour and a ceiling
colour, and holds a grid map. cubray checks that the map is closed and then
lets you walk through it in a window. The walls are textured and drawn one
screen column at a time.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Running

```
cubray path/to/level.cub
```

The command first checks that the first argument names a file it can open.
If it cannot, it prints `Error` and `Map file not found` and exits with
status 0.

After that there must be exactly one argument, and its name must contain
`.cub`. If the scene is not valid, or a texture cannot be loaded, cubray
prints `Error` and the reason and exits with status 1.

When the scene loads, cubray prints the map's height and width and its rows,
then opens a 1600×1200 window. It prints `Game ended` once the window is
closed.

### Controls

| Key            | Action                 |
|----------------|------------------------|
| W / S          | move forward / back    |
| A / D          | strafe left / right    |
| Left / Right   | turn                   |
| Escape         | quit                   |

A move in one direction is refused while the wall in that direction is
closer than 20 units.

## The `.cub` format

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png

F 220,100,0
C 225,30,0

        1111111111111
        1000000000001
111111111011000001101
100000000011000001001
10110000011100000N001
111111111111111111111
```

- `NO`, `SO`, `WE` and `EA` give the paths of the wall textures. Each path
  must name a readable file. The images are loaded with pygame, so any
  format that pygame can read will work.
- `F` and `C` give the floor and ceiling colours. Each is three numbers from
  0 to 255, separated by commas, with no spaces.
- Blank lines between settings are skipped. Any other line must start with
  one of the six keys.
- The map starts at the first line whose first non-blank character is `1`.
  All six settings must come before that line.
- A map cell is `1` (wall), `0` (floor), a space (void), or one of `N`, `S`,
  `E`, `W`. The letter marks the player's start cell and the direction the
  player faces. There must be exactly one player. Shorter rows are padded
  with void.
- The map must be closed: no floor cell may reach the edge of the map or a
  void cell. Once the map has passed this check, void cells become walls.

## Using it as a library

The parsing and raycasting parts work without opening a window:

```python
from cubray.parser import load_scene
from cubray.player import Player
from cubray.raycast import cast_ray, fov_angles

scene = load_scene("level.cub")
player = Player.spawn(scene)
x, y = player.eye()
for angle in fov_angles(player.rotation, 5):
    print(cast_ray(scene.grid, angle, x, y))
```

Each of these modules has one job:

- `cubray.parser` has `parse_scene` and `load_scene`. Both return a `Scene`:
  the texture paths, the floor and ceiling colours and a validated
  `cubray.grid.Grid`. `parse_scene` takes a `path_exists` callable, so you
  can parse a scene whose texture files are not on disk.
- `cubray.raycast` casts rays through the grid (`cast_ray`). It also measures
  the walls around a point (`probe_walls`, which returns a `Probe`) and gives
  one ray angle per screen column (`fov_angles`).
- `cubray.player` holds `Player` and `Controls`. `Player.update` moves and
  turns the player for one frame.
- `cubray.render` draws the view into a `Frame` of packed RGBA values, using
  `Texture` objects and `render_scene`. It needs no window.
- `cubray.app` holds `load_textures` and `describe_map`. It also holds `run`,
  which opens the window, and `main`, which the `cubray` command calls.

Scene errors raise `cubray.config.SceneError`. Its message is the same one
the command prints.

The package also has small helper modules. `cubray.linereader` reads a
stream line by line through a fixed buffer. `cubray.printer` is a minimal
printf. `cubray.colors` parses colour lines and packs RGBA values.
`cubray.textsearch`, `cubray.textedit`, `cubray.buffers` and
`cubray.numfmt` are string, byte and number-formatting helpers.

## What it does not do

cubray draws only walls, floor and ceiling. There is no minimap, no sprites,
no doors and no mouse control. It does not save games or settings.