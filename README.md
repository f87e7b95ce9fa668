# tinylove

Building blocks for a small 2D game runtime with an API in the style of LÖVE.
Drawing happens in software on 32-bit ARGB pixel buffers, so it needs no GPU
and no window system.

## Modules

- `tinylove.bitmap`: `Bitmap`, a row-by-row grid of `0xAARRGGBB` pixels with
  `pixel(x, y)` and `copy()`, and `load_image(filename)`, which loads a PNG
  file as a `Bitmap`. It raises `OSError` for an unreadable or empty file and
  `ValueError` for data that is not a PNG image.
- `tinylove.painter`: `Painter` draws into a target `Bitmap`. It has
  `strike_line`, `strike_rect`, `fill_rect`, `strike_poly`, `fill_poly`,
  `strike_ellipse`, `fill_ellipse`, `draw` (an unscaled blit that skips fully
  transparent pixels), `print_text`, `printf` and `text_width`. It keeps a
  clip rectangle (`clip`, `sanitize_clip`) and a transform stack of 64 entries
  (`push`, `pop`, `origin`, `translate`, `scale`, `rotate`). Only translation
  affects drawing; scale and rotation are stored but not applied. `Rect`
  offers `intersect` and `is_null`. Bitmap fonts come from
  `load_font_file(filename, characters, flags)` or
  `load_font_bitmap(atlas, characters, flags)`. The glyphs in the atlas are
  separated by columns whose top pixel has the same colour as the atlas's
  first pixel.
- `tinylove.settings`: `Settings` holds the screen size, the game directory
  and frame timing. `update_timing(delta)` records a frame, and the counters
  restart once a full second has passed. `asset_path(settings, path)`
  returns an `AssetPath` with the full path and the lower-case extension.
- `tinylove.runtime`: `ModuleRegistry` with `preload(name, factory)` and
  `require(name)`. `require` builds each module once and raises
  `LookupError` for names that were never preloaded. The module also has
  `get_version()`, `relpath_to_modname("a/b.lua") == "a.b"` and
  `not_implemented(*args)`, which raises `NotImplementedFeature`.
- `tinylove.mathlib`: `MathModule(seed=None)`. Its `random()` returns a float
  in [0, 1], `random(max)` an integer in [1, max] and `random(min, max)` an
  integer in [min, max]. `set_random_seed(a[, b])` reseeds it.
- `tinylove.system`: `System`. It reports the OS as `"Lutro"` and a processor
  count of 1. Its clipboard is private to the object (`set_clipboard_text`,
  `get_clipboard_text`). `open_url` always returns `False`, and `vibrate`
  only records the request.
- `tinylove.mouse`: `Mouse.update(input_state)` polls a callable
  `input_state(port, device, index, id)`. X and Y motion accumulates, and
  buttons are replaced on each poll. Query the state with `is_down(*buttons)`
  (1 left, 2 right, 3 middle), `get_x`, `get_y` and `get_position`.
- `tinylove.timer`: `Timer(settings, clock=None)` with `get_time()` (seconds
  from a microsecond clock), `get_delta()` and `get_fps()`.
- `tinylove.mixer`: `PresaturateBuffer` holds interleaved float samples.
  `to_int16(value)` rounds a sample half away from zero and saturates it to
  16 bits.
- `tinylove.archive`: `unzip(path, extraction_directory)` extracts a zipped
  game. It raises `ArchiveError` for a missing or unreadable archive, for an
  entry that points outside the directory, and for a file whose directory
  does not exist.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Painting example

```python
from tinylove.bitmap import Bitmap
from tinylove.painter import Painter, Rect

target = Bitmap(width=64, height=48)
painter = Painter(target)
painter.clear()

painter.foreground = 0xFFFF0000
painter.fill_rect(Rect(4, 4, 10, 10))
painter.strike_line(0, 0, 63, 47)

print(hex(target.pixel(5, 5)))  # 0xffff0000
```

Colours are packed `0xAARRGGBB` integers. A colour whose alpha byte is zero
is not drawn.

## What is not included

The package supplies the parts and leaves out what ties them together:

- There is no engine or game loop that loads and runs game scripts.
- There is no window module.
- There is no command-line program.
- Nothing decodes or plays sound. `tinylove.mixer` provides only the sample
  buffer and the conversion to 16 bits.