"""Cursor, selection and key handling for an editable text field."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Union

from ginkgokit.textlayout import (
    NEWLINE,
    NEWLINE_WIDTH,
    TextBuffer,
    find_char_pos,
    locate_coord,
)
from ginkgokit.textundo import UndoState

_FIRST_KEY = 0x200000


class Key(IntEnum):
    """Editing keys. Combine with ``Key.SHIFT`` to extend the selection.

    Any other positive integer below the first key code is taken as a
    character to type.
    """

    LEFT = 0x200000
    RIGHT = 0x200001
    UP = 0x200002
    DOWN = 0x200003
    LINESTART = 0x200004
    LINEEND = 0x200005
    TEXTSTART = 0x200006
    TEXTEND = 0x200007
    DELETE = 0x200008
    BACKSPACE = 0x200009
    UNDO = 0x20000A
    REDO = 0x20000B
    WORDLEFT = 0x20000C
    WORDRIGHT = 0x20000D
    PGUP = 0x20000E
    PGDOWN = 0x20000F
    INSERT = 0x200010
    SHIFT = 0x400000


def _as_key(value: int) -> Optional[Key]:
    try:
        member = Key(value)
    except ValueError:
        return None
    return None if member is Key.SHIFT else member


def _is_word_boundary(buffer: TextBuffer, idx: int) -> bool:
    if idx <= 0:
        return True
    return buffer.char_at(idx - 1).isspace() and not buffer.char_at(idx).isspace()


def _word_left(buffer: TextBuffer, c: int) -> int:
    c -= 1
    while c >= 0 and not _is_word_boundary(buffer, c):
        c -= 1
    return max(c, 0)


def _word_right(buffer: TextBuffer, c: int) -> int:
    length = len(buffer)
    c += 1
    while c < length and not _is_word_boundary(buffer, c):
        c += 1
    return min(c, length)


class TextEditState:
    """Cursor, selection, insert mode and undo history of one text field.

    The selection runs from ``select_start`` to ``select_end``; either may be
    the larger. When they are equal there is no selection.
    """

    def __init__(self, single_line: bool = False) -> None:
        self.single_line = bool(single_line)
        self.cursor = 0
        self.select_start = 0
        self.select_end = 0
        self.insert_mode = False
        self.row_count_per_page = 0
        self.has_preferred_x = False
        self.preferred_x = 0.0
        self.undo_state = UndoState()

    def has_selection(self) -> bool:
        return self.select_start != self.select_end

    def clamp(self, buffer: TextBuffer) -> None:
        """Pull cursor and selection back inside the text after outside edits."""
        n = len(buffer)
        if self.has_selection():
            self.select_start = min(self.select_start, n)
            self.select_end = min(self.select_end, n)
            if self.select_start == self.select_end:
                self.cursor = self.select_start
        self.cursor = min(self.cursor, n)

    def click(self, buffer: TextBuffer, x: float, y: float) -> None:
        """Move the cursor to the clicked point and clear the selection."""
        if self.single_line:
            y = buffer.layout_row(0).ymin
        self.cursor = locate_coord(buffer, x, y)
        self.select_start = self.cursor
        self.select_end = self.cursor
        self.has_preferred_x = False

    def drag(self, buffer: TextBuffer, x: float, y: float) -> None:
        """Extend the selection to the dragged-to point."""
        if self.single_line:
            y = buffer.layout_row(0).ymin
        if self.select_start == self.select_end:
            self.select_start = self.cursor
        p = locate_coord(buffer, x, y)
        self.cursor = self.select_end = p

    def cut(self, buffer: TextBuffer) -> bool:
        """Delete the selection; return True if there was one."""
        if self.has_selection():
            self._delete_selection(buffer)
            self.has_preferred_x = False
            return True
        return False

    def paste(self, buffer: TextBuffer, text: str) -> bool:
        """Replace the selection (if any) with ``text`` at the cursor."""
        self.clamp(buffer)
        self._delete_selection(buffer)
        if buffer.insert(self.cursor, text):
            self.undo_state.make_insert(self.cursor, len(text))
            self.cursor += len(text)
            self.has_preferred_x = False
            return True
        return False

    def text(self, buffer: TextBuffer, text: str) -> None:
        """Type ``text`` at the cursor, overwriting one character in insert mode."""
        if not text:
            return
        if text[0] == NEWLINE and self.single_line:
            return
        if self.insert_mode and not self.has_selection() and self.cursor < len(buffer):
            self.undo_state.make_replace(buffer, self.cursor, 1, 1)
            buffer.delete(self.cursor, 1)
            if buffer.insert(self.cursor, text):
                self.cursor += len(text)
                self.has_preferred_x = False
        else:
            self._delete_selection(buffer)
            if buffer.insert(self.cursor, text):
                self.undo_state.make_insert(self.cursor, len(text))
                self.cursor += len(text)
                self.has_preferred_x = False

    def key(self, buffer: TextBuffer, key: Union[int, str]) -> None:
        """Apply one key press: an editing key, possibly shifted, or a character."""
        if isinstance(key, str):
            if len(key) != 1:
                raise TypeError(f"a key must be a key code or a single character, got {key!r}")
            key = ord(key)

        while True:
            shift = bool(key & Key.SHIFT)
            base = _as_key(key & ~Key.SHIFT)
            if self.single_line and base in (Key.UP, Key.DOWN):
                # Up and down in a single line behave like left and right.
                key = (Key.RIGHT if base is Key.DOWN else Key.LEFT) | (key & Key.SHIFT)
                continue
            break

        if base is None:
            if 0 < key < _FIRST_KEY:
                self.text(buffer, chr(key))
        elif base is Key.INSERT:
            if not shift:
                self.insert_mode = not self.insert_mode
        elif base is Key.UNDO:
            if not shift:
                cursor = self.undo_state.undo(buffer)
                if cursor is not None:
                    self.cursor = cursor
                self.has_preferred_x = False
        elif base is Key.REDO:
            if not shift:
                cursor = self.undo_state.redo(buffer)
                if cursor is not None:
                    self.cursor = cursor
                self.has_preferred_x = False
        elif base is Key.LEFT:
            self._left(buffer, shift)
        elif base is Key.RIGHT:
            self._right(buffer, shift)
        elif base is Key.WORDLEFT:
            self._word(buffer, shift, _word_left, left=True)
        elif base is Key.WORDRIGHT:
            self._word(buffer, shift, _word_right, left=False)
        elif base in (Key.DOWN, Key.PGDOWN):
            self._down(buffer, shift, base is Key.PGDOWN)
        elif base in (Key.UP, Key.PGUP):
            self._up(buffer, shift, base is Key.PGUP)
        elif base is Key.DELETE:
            if self.has_selection():
                self._delete_selection(buffer)
            elif self.cursor < len(buffer):
                self._delete(buffer, self.cursor, 1)
            self.has_preferred_x = False
        elif base is Key.BACKSPACE:
            if self.has_selection():
                self._delete_selection(buffer)
            else:
                self.clamp(buffer)
                if self.cursor > 0:
                    prev = self.cursor - 1
                    self._delete(buffer, prev, self.cursor - prev)
                    self.cursor = prev
            self.has_preferred_x = False
        elif base is Key.TEXTSTART:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = 0
            else:
                self.cursor = self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base is Key.TEXTEND:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = len(buffer)
            else:
                self.cursor = len(buffer)
                self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base is Key.LINESTART:
            self.clamp(buffer)
            if shift:
                self._prep_selection_at_cursor()
            else:
                self._move_to_first()
            if self.single_line:
                self.cursor = 0
            else:
                while self.cursor > 0 and buffer.char_at(self.cursor - 1) != NEWLINE:
                    self.cursor -= 1
            if shift:
                self.select_end = self.cursor
            self.has_preferred_x = False
        elif base is Key.LINEEND:
            n = len(buffer)
            self.clamp(buffer)
            if shift:
                self._prep_selection_at_cursor()
            else:
                self._move_to_first()
            if self.single_line:
                self.cursor = n
            else:
                while self.cursor < n and buffer.char_at(self.cursor) != NEWLINE:
                    self.cursor += 1
            if shift:
                self.select_end = self.cursor
            self.has_preferred_x = False

    # -- helpers -----------------------------------------------------------

    def _delete(self, buffer: TextBuffer, where: int, length: int) -> None:
        self.undo_state.make_delete(buffer, where, length)
        buffer.delete(where, length)
        self.has_preferred_x = False

    def _delete_selection(self, buffer: TextBuffer) -> None:
        self.clamp(buffer)
        if self.has_selection():
            if self.select_start < self.select_end:
                self._delete(buffer, self.select_start, self.select_end - self.select_start)
                self.select_end = self.cursor = self.select_start
            else:
                self._delete(buffer, self.select_end, self.select_start - self.select_end)
                self.select_start = self.cursor = self.select_end
            self.has_preferred_x = False

    def _sort_selection(self) -> None:
        if self.select_end < self.select_start:
            self.select_start, self.select_end = self.select_end, self.select_start

    def _move_to_first(self) -> None:
        if self.has_selection():
            self._sort_selection()
            self.cursor = self.select_start
            self.select_end = self.select_start
            self.has_preferred_x = False

    def _move_to_last(self, buffer: TextBuffer) -> None:
        if self.has_selection():
            self._sort_selection()
            self.clamp(buffer)
            self.cursor = self.select_end
            self.select_start = self.select_end
            self.has_preferred_x = False

    def _prep_selection_at_cursor(self) -> None:
        if not self.has_selection():
            self.select_start = self.select_end = self.cursor
        else:
            self.cursor = self.select_end

    def _left(self, buffer: TextBuffer, shift: bool) -> None:
        if shift:
            self.clamp(buffer)
            self._prep_selection_at_cursor()
            if self.select_end > 0:
                self.select_end -= 1
            self.cursor = self.select_end
        elif self.has_selection():
            self._move_to_first()
        elif self.cursor > 0:
            self.cursor -= 1
        self.has_preferred_x = False

    def _right(self, buffer: TextBuffer, shift: bool) -> None:
        if shift:
            self._prep_selection_at_cursor()
            self.select_end += 1
            self.clamp(buffer)
            self.cursor = self.select_end
        else:
            if self.has_selection():
                self._move_to_last(buffer)
            else:
                self.cursor += 1
            self.clamp(buffer)
        self.has_preferred_x = False

    def _word(self, buffer: TextBuffer, shift: bool, move, left: bool) -> None:
        if shift:
            if not self.has_selection():
                self._prep_selection_at_cursor()
            self.cursor = move(buffer, self.cursor)
            self.select_end = self.cursor
            self.clamp(buffer)
        elif self.has_selection():
            if left:
                self._move_to_first()
            else:
                self._move_to_last(buffer)
        else:
            self.cursor = move(buffer, self.cursor)
            self.clamp(buffer)

    def _seek_column(self, buffer: TextBuffer, row_start: int, goal_x: float) -> None:
        row = buffer.layout_row(row_start)
        x = row.x0
        for i in range(row.num_chars):
            dx = buffer.char_width_at(row_start, i)
            if dx == NEWLINE_WIDTH:
                break
            x += dx
            if x > goal_x:
                break
            self.cursor += 1

    def _down(self, buffer: TextBuffer, sel: bool, is_page: bool) -> None:
        row_count = self.row_count_per_page if is_page else 1
        if sel:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_last(buffer)

        self.clamp(buffer)
        find = find_char_pos(buffer, self.cursor, self.single_line)
        first, length = find.first_char, find.length

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            start = first + length
            if length == 0:
                break
            # Going down from the last line does not jump to its end.
            if buffer.char_at(first + length - 1) != NEWLINE:
                break
            self.cursor = start
            self._seek_column(buffer, start, goal_x)
            self.clamp(buffer)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if sel:
                self.select_end = self.cursor
            first, length = start, buffer.layout_row(start).num_chars

    def _up(self, buffer: TextBuffer, sel: bool, is_page: bool) -> None:
        row_count = self.row_count_per_page if is_page else 1
        if sel:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_first()

        self.clamp(buffer)
        find = find_char_pos(buffer, self.cursor, self.single_line)
        first, prev_first = find.first_char, find.prev_first

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            if prev_first == first:
                break
            self.cursor = prev_first
            self._seek_column(buffer, prev_first, goal_x)
            self.clamp(buffer)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if sel:
                self.select_end = self.cursor
            prev_scan = prev_first - 1 if prev_first > 0 else 0
            while prev_scan > 0 and buffer.char_at(prev_scan - 1) != NEWLINE:
                prev_scan -= 1
            first, prev_first = prev_first, prev_scan