# gamebreaker

A small 2D game toolkit built on pygame. It is a library: it has no command
of its own.

## Modules

- `gamebreaker.colors`
  - `Color(r, g, b, a=255)`: a frozen RGBA colour; each channel must be in
    0..255, otherwise `ValueError`. Iterating it yields `r, g, b, a`;
    `with_alpha(alpha)` returns a copy with a new alpha.
  - `hsv_to_rgb(h, s, v)`: hue in degrees, saturation and value to an
    `(r, g, b)` tuple on the scale of `v`.
  - `color_from_hex(value, alpha=255)`: decodes a packed integer taking red
    from bits 8-15, green from bits 4-11 and blue from bits 0-7.
- `gamebreaker.shapes`
  - `circle_outline_points(x, y, radius)`: the pixels of a circle outline.
  - `circle_fill_spans(x, y, radius)`: horizontal lines `(x1, y1, x2, y2)`
    that fill a circle.
  - `point_in_rect(px, py, x1, y1, x2, y2)`: inclusive hit test.
- `gamebreaker.sprites`
  - `Sprite`: a pygame surface split into equally wide frames, with a draw
    offset and a grabbed region. Build one with `Sprite.load(fname, frames,
    offx, offy)`, `Sprite.load_ext(...)` (adds `grabx, graby, grabw, grabh`;
    a zero width or height means the whole image) or
    `Sprite.from_surface(surface, frames, offx, offy)`. A frame count below 1
    is treated as 1. `frame_width()` and `frame_rect(frame)` give the source
    region of a frame; frame numbers wrap around.
  - `SpriteError`: raised when the file is missing or cannot be loaded.
- `gamebreaker.draw`
  - `View(x, y, enabled)`: the top-left corner of the visible area.
  - `Canvas(surface, view=None)`: draws onto a pygame surface, converting
    world coordinates with `to_screen(x, y)`. It keeps a current colour
    (`color`, `color_rgb`, `color_sdl`, `color_hsv`, `color_get`, `alpha`) and a
    text alignment (`set_text_align`). Drawing methods: `point`, `line`,
    `rect`, `circle`, `triangle`, `sprite`, `sprite_stretched` and `button`;
    each returns the affected `pygame.Rect`, except `button`.
  - `ButtonState(released, hovered)`: returned by `Canvas.button`, which is
    given the mouse position and whether a button is held or was released.
    While held over the button, the sprite's last frame is shown; with a
    disabled view nothing is drawn.
- `gamebreaker.input`
  - `KeyboardState`: record keys with `set_key(key, down)`, call `update()`
    once per frame, and ask `pressed`, `released` or `holding`.
  - `JoystickState`: the same for up to 32 controllers, with `connect()`,
    `count()`, `working()` and `set_button(joy, button, down)`. Out-of-range
    controller or button indices raise `IndexError`.
  - `JoyButton`: controller button numbers.
  - `ord_of(key)`: code of the first character, 0 for an empty string.
- `gamebreaker.fs`
  - `exists`, `path` (directory part with a trailing slash), `path_parent`
    and `create_folder`.
  - `find_list(directory, filter, mask)` and
    `find_list_ext(directory, filters, mask)`: list files whose extension
    contains the filter text, or directories when `mask` has
    `FindFlags.DIR`; `FindFlags.FULLPATH` prefixes the directory. Results are
    `ListEntry` items tagged with `EntryType`, sorted by name.
  - `TextFile(fname, mode)`: a line-based text file opened with a
    `FileMode` (`READ`, `WRITE`, `APPEND`). `write`, `read`, `ln`, `eof`,
    `close`; works as a context manager. Reading a file opened for writing,
    or the reverse, raises `FileAccessError`.
- `gamebreaker.ini`
  - `IniFile(fname)`: `read_int`, `read_str` (with defaults for missing
    sections or keys), `write_int` and `write_str` (which save immediately),
    `save` and `close`; works as a context manager. Key case is preserved.
- `gamebreaker.lists`
  - `ListEntry(type, data)`, `get_string(entries, sep)` (each item followed
    by `sep`), `find_value(entries, pos)` and `find_pos(entries, value)`
    (-1 when absent).

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Example

```python
import pygame
from gamebreaker.draw import Canvas, View
from gamebreaker.ini import IniFile
from gamebreaker.input import KeyboardState

pygame.init()
screen = pygame.display.set_mode((640, 480))
canvas = Canvas(screen, View(0, 0))
keys = KeyboardState()

with IniFile("settings.ini") as settings:
    volume = settings.read_int("audio", "volume", 100)

canvas.color_rgb(255, 128, 0)
canvas.circle(320, 240, 40, False)

keys.set_key(pygame.K_SPACE, True)
if keys.pressed(pygame.K_SPACE):
    canvas.rect(10, 10, 100, 20, True)
keys.update()
pygame.display.flip()
```

Text files work as context managers:

```python
from gamebreaker.fs import FileMode, TextFile

with TextFile("log.txt", FileMode.WRITE) as log:
    log.write("started")
    log.ln()
```

## What it does not do

- It does not open windows or run a game loop; you create the pygame
  display and feed input events into `KeyboardState` and `JoystickState`
  yourself.
- It does not play sound or render text; `Canvas.set_text_align` only
  stores the alignment.
- It has no rooms, game objects, cameras or file-picker dialogs.