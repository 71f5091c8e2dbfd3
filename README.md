# gamekit

Plain-Python building blocks for small 2D games. It has no runtime
dependencies.

## What is inside

- `gamekit.mathutil`: `abs_value`, `combination` and `lerp`.
- `gamekit.strings`: `split(text, delim)`. An empty text gives an empty list.
- `gamekit.easing`: `get_rate(x, base, line)` with `Base` (`IN`, `OUT`,
  `IN_OUT`, `OUT_IN`) and `Line` (`LINEAR`, `SINE`, `QUAD`, `CUBIC`, `QUART`,
  `QUINT`, `EXPO`, `CIRC`, `BACK`, `ELASTIC`, `BOUNCE`). The module also has
  `get_sigmoid_rate` and `get_bounce_rate`. Progress outside (0, 1) clamps to
  0 or 1.
- `gamekit.text_analyze`: `get_in_bracket`, which raises `ValueError` when a
  bracket is never closed, plus `get_to_char`, `split_all` and
  `split_no_empty`.
- `gamekit.clamped`: `ValClamp`, a number kept between a minimum and a
  maximum. In-place arithmetic clamps the result. Plain arithmetic returns a
  bare number.
- `gamekit.composite`: `Composite`, a tree of values with parent links,
  `add_child`, `for_each` and `absolute_loop`.
- `gamekit.vectors`: the immutable vectors `Val2D` and `Val3D`, and
  `Polar2D`. They support elementwise arithmetic, `dot`, `cross`, `length`,
  `normalized`, rotations, `intersection`, `distance`, `lerp` and
  `to_string`.
- `gamekit.rects`: `Rect2D` and `Rect3D`, stored as an offset plus a size.
  They have corner and centre helpers, `in_rect`, `absolute`,
  `offset_center`, and `to_json` / `from_json`.
- `gamekit.colors`: `Color3`, `Color4` and `Color4F`, with hex packing
  (`from_hex`, `hex`), `to_string` and JSON forms.
- `gamekit.dates`: `DateData`, which holds a date and time, with `now()`,
  `to_string` and JSON forms.
- `gamekit.geometry`: `Vertex2D` and `IndexedVertex2D` meshes. The mesh
  factories are `line`, `triangle`, `rectangle`, `regular_polygon` and
  `circle`. Outlines come from `framed` and `truss_framed`. The module also
  has the simple shapes `Square` and `Triangle`.
- `gamekit.ringbuffer`: `RingBuffer`, a fixed-capacity buffer. It holds at
  most `capacity - 1` items and drops the oldest item when it is full.
- `gamekit.input`: `Keys` (virtual key codes) and `InputState`, which steps
  through the `State` values `NONE`, `DOWN`, `PRESS`, `UP` and `RELEASE`.
  - `KeyboardInput` is updated from the codes of the keys held this frame.
  - `MouseInput` is updated from a button bit mask and a position.
  - `InputDevices` updates both together.
  - Any device can be locked with `lock()`; while it is locked, reads return
    an idle state.
- `gamekit.storage`: `JsonStorage` keeps settings in a JSON file under
  slash-separated keys and can be used as a context manager that writes the
  file on exit. `StoredValue` reads one key and saves it back with `save()`.
- `gamekit.linq`: `ExtendedList`, a list with `all`, `any`, `contains`,
  `find`, `index_of` (which returns `NPOS` when nothing matches) and
  `reverse_view`.
- `gamekit.timer`: `Timer`, a stopwatch that can be stopped and resumed.
  `elapsed()` returns an `ElapsedTime`, which reads out in seconds,
  milliseconds, microseconds, nanoseconds or frames.

## Examples

```python
from gamekit.easing import Base, Line, get_rate
from gamekit.vectors import Val2D
from gamekit.clamped import ValClamp

get_rate(0.5, Base.IN, Line.QUAD)          # 0.25

v = Val2D(3, 4)
v.length()                                 # 5.0

idx = ValClamp(5, 0, 3)
int(idx)                                   # 3
```

Settings that last between runs:

```python
from gamekit.storage import JsonStorage

store = JsonStorage("config.json")
volume = store.get("Sound/Master", 0.5)
store.set("Sound/Master", 0.8)
store.write()
```

Tracking a key from frame to frame:

```python
from gamekit.input import InputDevices, Keys

devices = InputDevices()
devices.update(keys=[Keys.A])
devices.keyboard[Keys.A].down()            # True
devices.update(keys=[Keys.A])
devices.keyboard[Keys.A].press()           # True
```

## What it does not do

gamekit does not open windows, draw, play sound or read hardware. Meshes,
colours and rectangles are plain data, and input devices are fed the key and
button state by the caller. There is no scene manager or game loop. The
caller runs the frame loop.

## Tests

The tests use pytest and hypothesis. Both come with the `test` extra.