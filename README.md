# cubraycast

A small first-person raycasting engine. It reads a `.cub` scene description,
checks it, and either opens a window you can walk around in or renders a
single frame to a BMP image.

## Installation

```
pip install .
```

This brings in `pygame` (window and input) and `pillow` (loading textures).

## Running

Open a scene in a window:

```
cubraycast maps/level.cub
```

Render the first frame to `save.bmp` in the current directory instead of
opening a window:

```
cubraycast maps/level.cub --save
```

The first argument must be a path that ends in `.cub` and contains exactly one
dot. The optional second argument must be exactly `--save`. Any other number
of arguments is an error. On any error the command prints `Error` followed by
a one-line message and exits with status 1.

### Controls

| Key          | Action              |
|--------------|---------------------|
| `W` / `S`    | walk forward / back |
| `A` / `D`    | strafe left / right |
| `←` / `→`    | turn left / right   |
| `Esc`        | quit                |

Walking forward or back takes precedence over strafing when both are held.
The player only moves onto open floor. In the window a minimap with the
player's position is drawn in the top-left corner; the saved BMP has no
minimap.

## Scene files

A scene holds eight elements, each given once and in any order, followed by
the map:

```
R 640 480
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
S ./textures/sprite.xpm
F 220,100,0
C 225,30,0

111111
100201
10N001
111111
```

- `R` — resolution, width and height separated by spaces, both greater
  than 2. In a window the resolution is shrunk to fit the screen.
- `NO`, `SO`, `WE`, `EA` — wall texture paths. Each must end in `.xpm` and be
  readable, and no wall path may be a prefix of another.
- `S` — sprite texture path, with the same checks. Its top-left pixel colour
  is treated as transparent.
- `F`, `C` — floor and ceiling colours as `r,g,b`, each in 0–255.

Textures are loaded with Pillow, so any image it can read works.

The map uses `1` for walls, `0` for empty floor, `2` for sprites, spaces for
void, and exactly one of `N`, `S`, `E`, `W` for the player's starting cell and
facing. The map must be at least 3×3, closed by walls, and contain no empty
rows or columns between parts of it.

## Using it as a library

```python
from cubraycast.scene import parse_scene
from cubraycast.image import Textures
from cubraycast.game import Game

scene = parse_scene("maps/level.cub")
game = Game(scene, Textures.load(scene.config))
game.save_bmp("frame.bmp")
```

`Game.render()` draws a frame into `game.frame` and returns the wall distance
of every column; `Game.step()` also moves the player and draws the minimap.
`cubraycast.image.encode_bmp` turns an `Image` into BMP bytes without writing
a file, and `cubraycast.scene.parse_scene_text` parses a scene from a string.

Problems with the arguments or the scene raise `cubraycast.errors.ParsingError`;
display and texture problems raise `DisplayError`, and failures writing the
image raise `BmpError`. All three derive from `CubError`, whose `report()`
gives the text the command prints.

## Tests

```
pip install ".[test]"
pytest
```