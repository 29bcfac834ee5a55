"""Monospaced line layout of an editable text and cursor/coordinate mapping."""

from __future__ import annotations

from dataclasses import dataclass

NEWLINE = "\n"

NEWLINE_WIDTH = -1.0
"""Width reported for a newline character, so callers can tell it apart."""


@dataclass(frozen=True)
class TextRow:
    """Layout of one displayed row starting at some character.

    ``x0``/``x1`` are the start and end x of the row's visible characters,
    ``baseline_y_delta`` is the distance to the next row's baseline and
    ``ymin``/``ymax`` give the row's extent relative to its baseline.
    """

    x0: float = 0.0
    x1: float = 0.0
    baseline_y_delta: float = 0.0
    ymin: float = 0.0
    ymax: float = 0.0
    num_chars: int = 0


@dataclass(frozen=True)
class FindState:
    """Where a character sits: its position, its row and the row before it."""

    x: float
    y: float
    height: float
    first_char: int
    length: int
    prev_first: int


class TextBuffer:
    """A text laid out in rows broken at newlines, every character equally wide.

    A row includes the newline that ends it.
    """

    def __init__(self, text: str = "", char_width: float = 1.0, line_height: float = 1.0) -> None:
        if char_width <= 0:
            raise ValueError(f"char_width must be positive, got {char_width}")
        if line_height <= 0:
            raise ValueError(f"line_height must be positive, got {line_height}")
        self._text = text
        self.char_width = float(char_width)
        self.line_height = float(line_height)

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def char_at(self, index: int) -> str:
        """Return the character at ``index``."""
        if not 0 <= index < len(self._text):
            raise IndexError(f"character index {index} out of range")
        return self._text[index]

    def layout_row(self, start: int) -> TextRow:
        """Lay out the row that begins at character ``start``."""
        if start < 0:
            raise IndexError(f"row start {start} out of range")
        if start >= len(self._text):
            return TextRow(0.0, 0.0, self.line_height, 0.0, self.line_height, 0)
        end = self._text.find(NEWLINE, start)
        if end == -1:
            visible = len(self._text) - start
            count = visible
        else:
            visible = end - start
            count = visible + 1
        return TextRow(
            x0=0.0,
            x1=visible * self.char_width,
            baseline_y_delta=self.line_height,
            ymin=0.0,
            ymax=self.line_height,
            num_chars=count,
        )

    def char_width_at(self, line_start: int, offset: int) -> float:
        """Return the advance of the character ``offset`` places into the row at ``line_start``."""
        if self.char_at(line_start + offset) == NEWLINE:
            return NEWLINE_WIDTH
        return self.char_width

    def delete(self, where: int, length: int) -> None:
        """Remove ``length`` characters starting at ``where``."""
        if length < 0 or where < 0 or where + length > len(self._text):
            raise IndexError(f"cannot delete {length} characters at {where}")
        self._text = self._text[:where] + self._text[where + length:]

    def insert(self, where: int, chars: str) -> bool:
        """Insert ``chars`` before position ``where``; return True on success."""
        if not 0 <= where <= len(self._text):
            raise IndexError(f"insert position {where} out of range")
        self._text = self._text[:where] + chars + self._text[where:]
        return True


def locate_coord(buffer: TextBuffer, x: float, y: float) -> int:
    """Return the cursor position nearest the point (``x``, ``y``) in the laid-out text."""
    n = len(buffer)
    base_y = 0.0
    i = 0
    row = TextRow()

    while i < n:
        row = buffer.layout_row(i)
        if row.num_chars <= 0:
            return n
        if i == 0 and y < base_y + row.ymin:
            return 0
        if y < base_y + row.ymax:
            break
        i += row.num_chars
        base_y += row.baseline_y_delta

    if i >= n:
        return n

    if x < row.x0:
        return i

    if x < row.x1:
        prev_x = row.x0
        for k in range(row.num_chars):
            w = buffer.char_width_at(i, k)
            if x < prev_x + w:
                if x < prev_x + w / 2:
                    return i + k
                return i + k + 1
            prev_x += w

    last = i + row.num_chars - 1
    if buffer.char_at(last) == NEWLINE:
        return last
    return i + row.num_chars


def find_char_pos(buffer: TextBuffer, n: int, single_line: bool) -> FindState:
    """Locate character ``n``: its x/y, its row, and the start of the row above."""
    z = len(buffer)

    if n == z and single_line:
        row = buffer.layout_row(0)
        return FindState(
            x=row.x1,
            y=0.0,
            height=row.ymax - row.ymin,
            first_char=0,
            length=z,
            prev_first=0,
        )

    y = 0.0
    i = 0
    prev_start = 0
    while True:
        row = buffer.layout_row(i)
        length = row.num_chars
        if n < i + length:
            break
        if i + length == z and z > 0 and buffer.char_at(z - 1) != NEWLINE:
            break
        prev_start = i
        i += length
        y += row.baseline_y_delta
        if i == z:
            length = 0
            break

    first = i
    x = row.x0
    for offset in range(n - first):
        x += buffer.char_width_at(first, offset)

    return FindState(
        x=x,
        y=y,
        height=row.ymax - row.ymin,
        first_char=first,
        length=length,
        prev_first=prev_start,
    )