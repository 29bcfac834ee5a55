# ginkgokit

Small, self-contained building blocks for a game engine or editor, written
in plain Python with numpy for the matrix work.

## What is inside

- `ginkgokit.blackboard` – `Blackboard`, a key/value store. `set_value`
  stores a deep copy; `get_value(key, expected_type)` returns a copy and
  raises `KeyError` for a key never set and `TypeError` when the stored value
  is not exactly of `expected_type`. `key in board` tells whether a key is set.
- `ginkgokit.settings` – `SettingType` (slider, checkbox, dropdown, button),
  `SettingConfig` and `SettingCategory`: dataclasses describing an editor
  settings panel. `SettingConfig` checks that its type is a `SettingType` and
  that its default is a float, bool or int.
- `ginkgokit.rendering` – `skybox_triangles()` (36 x 3 float32 positions of a
  skybox cube) and `quad_vertices()` (4 x 5 float32 rows: position then
  texture coordinates of a full-screen quad). Each call returns a fresh copy.
- `ginkgokit.transform` – `Transform`, a position / Euler XYZ rotation (in
  radians) / scale component whose `matrix()` is `translate @ rotate @ scale`,
  rebuilt only after a change; and `euler_angle_xyz(x, y, z)`.
- `ginkgokit.rectpack` – `RectPacker`, `Rect`, `Heuristic` and `MAX_COORD`,
  a skyline rectangle packer (bottom-left or best-fit) for texture atlases.
- `ginkgokit.textundo` – `UndoState` and `UndoRecord`, an undo/redo history
  bounded by a number of records (99 by default) and of stored characters
  (999 by default); the oldest undo steps are dropped when space runs out.
- `ginkgokit.textlayout` – `TextBuffer`, `TextRow`, `FindState`,
  `locate_coord()` and `find_char_pos()`: a monospaced layout in which rows
  break only at newlines, and the mapping between points and cursor positions.
- `ginkgokit.textedit` – `TextEditState` and `Key`, which turn clicks, drags,
  key presses, typed text, cut and paste into cursor moves, selections and
  edits of a `TextBuffer`, recorded in an `UndoState`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

A blackboard:

```python
from ginkgokit.blackboard import Blackboard

board = Blackboard()
board.set_value("health", 100)
assert board.get_value("health", int) == 100
assert "health" in board
```

A transform:

```python
from ginkgokit.transform import Transform

t = Transform(position=(1.0, 2.0, 3.0), rotation=(0.0, 0.0, 0.0), scale=(1.0, 1.0, 1.0))
t.mod_position((1.0, 0.0, 0.0))
model = t.matrix()          # 4x4 float32 array, translation in the last column
```

Packing rectangles into an atlas:

```python
from ginkgokit.rectpack import Heuristic, Rect, RectPacker

packer = RectPacker(width=256, height=256, num_nodes=256)
packer.set_heuristic(Heuristic.SKYLINE_BF_SORT_HEIGHT)   # optional; bottom-left is the default
rects = [Rect(id=0, w=64, h=32), Rect(id=1, w=128, h=128)]
all_packed = packer.pack(rects)
for rect in rects:
    print(rect.id, rect.x, rect.y, rect.was_packed)
```

Rectangles are placed tallest first; the list keeps its order. A rectangle
that does not fit gets `was_packed = False` and both coordinates set to
`MAX_COORD`. Calling `pack` again continues filling the same area. By default
widths are rounded up so that `num_nodes` skyline segments always suffice;
`set_allow_out_of_mem(True)` packs exact widths but may run out of segments.

Editing text:

```python
from ginkgokit.textedit import Key, TextEditState
from ginkgokit.textlayout import TextBuffer

buffer = TextBuffer("hello", char_width=1.0, line_height=1.0)
state = TextEditState(single_line=True)
state.key(buffer, Key.TEXTEND)
state.text(buffer, " world")
state.key(buffer, Key.UNDO)
print(str(buffer))          # "hello"
```

`key` takes a `Key` member, a `Key` member combined with `Key.SHIFT` to
extend the selection, or a single character (or its code) to type. In a
single-line field up and down act as left and right, and newlines are not
typed. `Key.INSERT` toggles overwrite mode.

## What it does not do

The package holds data and logic only. It opens no window, draws nothing,
and has no command-line tool: vertex data, matrices, packed positions and
cursor state are returned for the caller to render. The text layout is
monospaced and breaks rows only at newlines; there is no word wrapping,
proportional font measurement or clipboard access.