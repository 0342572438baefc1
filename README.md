# tinyraycaster

A small software raycaster. Every frame is drawn pixel by pixel into an
in-memory framebuffer. The left half of the window shows a top-down map with
the player's field of view. The right half shows a first-person view with
textured walls and billboard sprites hidden behind walls by a depth buffer.
The finished frame is then scaled to the window and shown through pygame.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
tinyraycaster --assets path/to/assets
```

`--assets` names the directory that holds the two texture atlases,
`walltext.bmp` for the walls and `monsters.bmp` for the sprites. It defaults
to `assets` in the current directory.

Each atlas is an image that pygame can load. It holds N square textures
placed side by side, so its width must be a whole multiple of its height. If
either atlas cannot be loaded or has the wrong shape, the program prints the
reason to standard error, prints `Failed to load textures`, and exits with a
non-zero status.

Controls:

| Key      | Action          |
|----------|-----------------|
| `W`      | walk forward    |
| `S`      | walk backward   |
| `A`      | turn left       |
| `D`      | turn right      |
| `Esc`    | quit            |

Closing the window also quits. The main loop runs at about 60 frames per
second.

## Using the pieces as a library

The rendering core does not need a window. It works on plain Python objects:

```python
from tinyraycaster.colors import pack_color, write_ppm
from tinyraycaster.framebuffer import Framebuffer
from tinyraycaster.gamemap import default_map
from tinyraycaster.texture import load_texture
from tinyraycaster.render import render
from tinyraycaster.app import default_player, default_sprites

white = pack_color(255, 255, 255, 255)
grey = pack_color(160, 160, 160, 255)

fb = Framebuffer(1024, 512, white)
game_map = default_map()
player = default_player()
sprites = default_sprites()
walls = load_texture("walltext.bmp")
monsters = load_texture("monsters.bmp")

render(fb, game_map, player, sprites, walls, monsters, white, grey)
write_ppm("frame.ppm", fb.pixels, fb.width, fb.height)
```

- `tinyraycaster.colors`: `pack_color` / `unpack_color` for 32-bit RGBA
  values with red in the lowest byte, and `write_ppm` to save a sequence of
  packed colours as a binary (P6) PPM image.
- `tinyraycaster.framebuffer.Framebuffer`: a pixel buffer with `clear`,
  `set_pixel`, `get_pixel`, `draw_rect` (clipped to the image) and
  `to_bytes` (R, G, B, A bytes per pixel).
- `tinyraycaster.gamemap`: `GameMap` with `cell` and `is_empty`, and
  `default_map()` for the built-in 16×16 level.
- `tinyraycaster.texture`: `Texture` atlases with `texel` and `column`,
  built with `Texture.from_rgba` or loaded from an image file with
  `load_texture`. Bad shapes and loading errors raise `TextureError`.
- `tinyraycaster.entities`: `Player` (with `step` for turning, walking and
  collision against the map), `Sprite`, and `update_sprite_distances`.
- `tinyraycaster.render`: `render`, plus its parts `sort_sprites`,
  `wall_tex_coord_x`, `draw_map_sprite` and `draw_sprite`.
- `tinyraycaster.controls.handle_event`: applies a pygame event to the
  player's movement. It returns `False` when the game should quit.
- `tinyraycaster.timer.FrameLimiter`: `cap` sleeps out the rest of each
  frame; the clock and sleep functions can be passed in.
- `tinyraycaster.app`: `default_player`, `default_sprites` and `main`, the
  entry point of the `tinyraycaster` command.

## What it does not do

- No texture images ship with the package; you supply the two atlases.
- The sprites are fixed scenery. They do not move, and there is no shooting,
  health or scoring.
- There is only the one built-in level. Levels cannot be loaded from files.