# fdfkit

The pieces needed to draw a height map as a wireframe: points and maps, a
camera, colour gradients, a 32-bit pixel image with line drawing and keyboard
handlers. Alongside them is a small toolkit of C-style string, formatting,
list and line-reading helpers.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

**Rendering**

- `fdfkit.geometry`: `Point`, `Map` and `Line`. `make_grid(width, depth)`
  builds `width` columns of `depth` zeroed points, `Map.center_to_origin()`
  shifts every point by half the map's width and depth so that it sits around
  (0, 0), and `make_line(start, end, map)` pairs copies of two points with a
  `transform_z` equal to the largest of the map's height range, width and depth.
- `fdfkit.camera`: `Projection` (`ISOMETRIC`, `SIDE_PARALLEL`, `TOP`) and
  `Camera`. `scale_to_fit(map, window_width, window_height)` returns half the
  fitting scale, or 2 for large maps; `camera_for(map, window_width,
  window_height)` builds an isometric camera centred in the window, and
  `Camera.reset(map)` restores scale, position and rotation while keeping the
  projection.
- `fdfkit.color`: `Gradient` blends two `0xRRGGBB` colours channel by channel;
  `palette(min_color, max_color)` and `gradient_for(start, end)` build one, and
  `Gradient.color_at(index, length)` gives the colour `index` steps along a line
  of `length` steps.
- `fdfkit.image`: `Image(width, height, endian=0)` is a buffer of 4-byte pixels
  with `put_pixel(x, y, color)`, `clear(background)` and
  `draw_line(start, end)`, which steps from `start` toward `end` with a colour
  gradient, leaving out the end point and anything on row or column zero or
  outside the image.
- `fdfkit.controls`: `Key` and the `translate`, `scale`, `rotate` and `project`
  handlers. Each takes a key, a `Camera` and optionally the collection of keys
  held down (used when the key is `None`), applies the first matching action
  and returns whether it changed anything.

**Toolkit**

- `fdfkit.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`
  on ints or one-character strings.
- `fdfkit.convert`: `atoi`, `atoi_base`, `itoa`, `split`, `word_count`,
  `to_lower`, `to_upper`. Parsed integers wrap to 32 bits.
- `fdfkit.strings`: `strchr`, `strrchr`, `strnstr`, `strncmp`, `strlcpy`,
  `strlcat`, `strjoin`, `substr`, `strtrim`, `strmapi`, `striteri`. Searches
  return an index or `None`; the bounded copies return the resulting text with
  the length they tried to create.
- `fdfkit.printf`: `sprintf(fmt, *args)` and `printf(fmt, *args)` support
  `%c %s %p %d %i %u %x %X %%` with the `+ - space 0 #` flags, width and
  precision (including `*`); `parse_spec` and `render` expose the single
  conversion step as a `FormatSpec`. A bad conversion or a missing argument
  raises `FormatError`.
- `fdfkit.linkedlist`: `Node` and `LinkedList` with `append`, `prepend`,
  `last`, `clear`, `for_each` and `map`; the list is iterable and has a length.
- `fdfkit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr` onto any text
  stream, standard output by default.
- `fdfkit.lines`: `LineReader(stream, buffer_size=BUFFER_SIZE)` and
  `iter_lines(stream)` read a text or binary stream one line at a time, keeping
  each newline.

## Example

```python
from fdfkit.printf import sprintf
from fdfkit.convert import atoi_base, split

assert sprintf("%+05d|%-4s|%#x", 42, "ab", 255) == "+0042|ab  |0xff"
assert split("  10 20,0xFF  ", " ") == ["10", "20,0xFF"]
assert atoi_base("0xFF", 16) == 255
```

## What it does not do

fdfkit has no command and opens no window. It does not read map files, does
not project or rotate points onto the screen, and does not turn a `Map` into a
finished picture: it provides the image, camera, gradient and control pieces
that such a viewer would be built from. It has no exit-code messages and no
helpers for raw memory buffers.