# rtscene

Tools for reading `.rt` scene descriptions for a small ray tracer, plus
helpers for XPM images, named X11 colours and a simple 32-bit pixel buffer.
It has no dependencies outside the standard library.

## Scene files

A scene file names its elements one per line. The camera (`C`), ambient
light (`A`) and light (`L`) must each appear exactly once. Planes (`pl`),
spheres (`sp`) and cylinders (`cy`) may appear any number of times. Blank
lines and lines that start with `#` are skipped, and a `#` after the last
value of a line starts a comment.

```
A 0.2 255,255,255
C 0,0,-10 0,0,1 70
L 0,10,0 0.7 255,255,255
sp 0,0,0 2 255,0,0
pl 0,-1,0 0,1,0 0,255,0
cy 2,0,0 0,1,0 1 3 0,0,255
```

Values in a group are separated by commas with no spaces after them. The
camera orientation must lie in [-1, 1] and its field of view in [0, 180];
the ambient and light brightness in [0, 1] and their colours in [0, 255].
Shape values are not range-checked.

### Command line

```
rtscene scene.rt
```

For a valid file this prints one line per element (its kind followed by its
record values) and exits with status 0. Otherwise it prints `Error` and a
reason, and exits with status 1.

### From Python

```python
from rtscene.parser import load_scene, SceneFormatError

try:
    records = load_scene("scene.rt")
except SceneFormatError as exc:
    print(exc)
```

`load_scene` returns a list of records: the camera, ambient light and light
first, then the shapes in file order. Each record is a tuple of twelve floats:

| index | meaning                                          |
|-------|--------------------------------------------------|
| 0     | element kind (`rtscene.elements.ElementKind`)    |
| 1–3   | origin                                           |
| 4–6   | orientation                                      |
| 7     | diameter, field of view or brightness            |
| 8     | height                                           |
| 9–11  | colour                                           |

Slots an element does not use are 0.

Other entry points in `rtscene.parser`:

- `validate_filename(path)` checks that a path names a `.rt` file.
- `count_objects(lines)` checks the layout of a scene and counts its elements.
- `read_scene(lines)` parses an iterable of lines instead of a file.

`rtscene.elements` parses single lines (`parse_camera`, `parse_ambient`,
`parse_light`, `parse_shape`, each returning `None` for a line of another
kind and raising `ElementError` for a malformed one). `rtscene.numbers`
holds the number reader (`read_number`) and the range checks
(`in_range`, `valid_values`, `at_line_end`).

## XPM images

```python
from rtscene.xpm import read_xpm_file, XpmError

image = read_xpm_file("icon.xpm")
print(image.width, image.height, hex(image.pixel(0, 0)))
raw = image.to_bytes(big_endian=False)
```

`parse_xpm_text` parses XPM source held in a string, and `parse_xpm_lines`
parses the quoted strings of an XPM document that are already split out.
Comments are removed with `strip_comments` and quoted strings extracted with
`quoted_lines`. Pixels whose colour is `None` become `0xFF000000`; colour
codes with no entry in the palette give 0. Malformed data raises `XpmError`.

## Colours

`rtscene.colors.lookup_color("light blue")` returns the X11 colour value for
a name, matched without regard to case; unknown names raise `KeyError`, and
`"none"` gives -1. `text_to_rgb(name, end)` also accepts `#rrggbb` values and
returns 0 for unknown names.

## Framebuffer

`rtscene.image.FrameBuffer(width, height, big_endian=False)` stores 32-bit
pixels addressed by row and column. `put_pixel` ignores positions outside the
image, `get_pixel` raises `IndexError` for them, and `data` gives the raw
bytes. `color_to_hex` clamps an `(r, g, b)` triple to 0–255 and packs it as
`0xRRGGBB`.

## What it does not do

The package parses and checks scenes but does not render them: there is no
ray casting, no lighting or shadows, and no window to show an image in. The
`rtscene` command only validates a scene file and lists its elements.

## Tests

```
pip install -e ".[test]"
pytest
```