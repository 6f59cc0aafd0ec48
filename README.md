# raycube

A first-person maze explorer rendered with grid raycasting and drawn with
pygame. Each level is a plain-text `.cub` scene file that names four wall
textures, a floor colour, a ceiling colour and a map.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
raycube path/to/level.cub
raycube --bonus path/to/level.cub
```

The window is 1024 by 768 pixels. Controls:

- `W` / `S`: walk forward / back
- `A` / `D`: strafe left / right
- Left / Right arrows: turn
- `Esc` or closing the window: quit

With `--bonus`:

- the map may contain doors (`2`), drawn with the door texture;
- the player cannot walk into wall cells (`1`);
- the mouse is grabbed and horizontal mouse movement turns the view;
- an animated torch is drawn over the walls.

Image files are looked up relative to the current working directory. Besides
the four textures named in the scene, the game always loads `tex/Door.png`,
and in bonus mode the torch frames `tex/torch_frames/frame00.png` to
`frame07.png`. These images are not part of the package.

On a clean exit the command prints ` [FIN DEL JUEGO] ` and returns status 0.
Any problem with the arguments, the scene or the images prints an error
message and returns status 1.

## Scene files

A scene file has a texture block and a colour block, in either order, followed
by the map. Blank lines may separate the blocks; the map comes last.

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png

F 220,100,0
C 225,30,0

        1111111111111
        1000000000001
        1011000001111
111111111011000001001
100000000000000000001
1111111111100000N0001
        1111111111111
```

Rules enforced when loading:

- The text after the last dot of the file name must be exactly `.cub`.
- Each texture key (`NO`, `SO`, `WE`, `EA`) and colour key (`F`, `C`) appears
  exactly once and takes exactly one value.
- Colours are exactly three comma-separated integers between 0 and 255.
- The first map line, after leading spaces, must start with `1`. Shorter map
  rows are padded with spaces to the width of the longest.
- The map uses `0` (floor), `1` (wall), spaces (void) and a single player
  start marked `N`, `S`, `E` or `W`; the start may not be in the first row or
  first column. In bonus mode `2` (door) is also allowed.
- Every walkable cell must be inside the map edges and must not touch a space
  or the end of a row on any of its four sides.

A malformed scene raises `raycube.scene.SceneError`, whose message describes
the problem.

## Using the library

```python
from raycube.scene import load_scene
from raycube.gridmap import find_player, start_angle, validate_map
from raycube.raycast import cast_view

scene = load_scene("level.cub")
x, y, orientation, rows = find_player(scene.rows)
validate_map(rows, scene.columns, allow_doors=False)
hits = cast_view(rows, scene.columns, x * 32 + 16, y * 32 + 16, start_angle(orientation))
```

- `raycube.scene`: `check_extension`, `parse_color`, `parse_scene`,
  `load_scene`, the `Scene` dataclass (with `floor_color` and `ceiling_color`
  as `0xRRGGBBAA` integers) and `SceneError`.
- `raycube.gridmap`: `find_player`, `start_angle` and `validate_map`.
- `raycube.raycast`: `cast_ray` and `cast_view` return `Hit` records
  (distance, hit point, `Side`, door flag); `texture_column`, `wall_height`
  and `sign` help turn them into screen columns.
- `raycube.shading`: the `Texture` type (`Texture.from_rgba` builds one from
  raw RGBA bytes), `wall_strip` for a shaded column of `(y, color)` pairs,
  and the helpers `texel_color`, `shade_factor`, `apply_shadow` and
  `reverse_bytes`.
- `raycube.player`: `Player`, `Key` and `spawn_player`; `Player.step`
  advances one frame of movement.
- `raycube.animation`: `TorchAnimation`, whose `tick` returns the frame to
  draw.
- `raycube.game`: `Game` ties these together. Textures and a torch may be
  passed in directly, so `Game.update` and `Game.render_frame` can draw onto
  any pygame surface without opening a window; `Game.run` opens the window.
- `raycube.app.main(argv=None)`: the `raycube` command.

## What it does not do

There are no enemies, weapons, sound or minimap. Doors are only drawn: they
stop rays but do not block the player and cannot be opened. The package ships
no textures or sample levels.