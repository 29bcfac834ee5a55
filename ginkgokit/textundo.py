"""Bounded undo/redo history for a text buffer being edited."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

DEFAULT_STATE_COUNT = 99
DEFAULT_CHAR_COUNT = 999


class EditableText(Protocol):
    """What the undo history needs from the text it restores."""

    def char_at(self, index: int) -> str: ...

    def delete(self, where: int, length: int) -> None: ...

    def insert(self, where: int, chars: str) -> object: ...


@dataclass
class UndoRecord:
    """One step of history.

    Applying the record deletes ``delete_length`` characters at ``where`` and
    then inserts ``insert_length`` characters, which are kept in ``chars``.
    """

    where: int
    insert_length: int
    delete_length: int
    chars: Optional[str] = None

    @property
    def stored(self) -> int:
        return 0 if self.chars is None else len(self.chars)


def _read(text: EditableText, where: int, length: int) -> str:
    return "".join(text.char_at(where + i) for i in range(length))


class UndoState:
    """Undo and redo stacks sharing a fixed number of records and characters.

    At most ``state_count`` records exist in both stacks together, and the
    characters they keep add up to at most ``char_count``. When space runs out
    the oldest undo steps are dropped first.
    """

    def __init__(
        self,
        state_count: int = DEFAULT_STATE_COUNT,
        char_count: int = DEFAULT_CHAR_COUNT,
    ) -> None:
        if state_count < 1:
            raise ValueError(f"state_count must be at least 1, got {state_count}")
        if char_count < 0:
            raise ValueError(f"char_count must not be negative, got {char_count}")
        self.state_count = state_count
        self.char_count = char_count
        self.undo_stack: list[UndoRecord] = []
        self.redo_stack: list[UndoRecord] = []

    @property
    def undo_chars(self) -> int:
        return sum(record.stored for record in self.undo_stack)

    @property
    def redo_chars(self) -> int:
        return sum(record.stored for record in self.redo_stack)

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def clear(self) -> None:
        """Forget all history."""
        self.undo_stack.clear()
        self.redo_stack.clear()

    def flush_redo(self) -> None:
        """Forget everything that could be redone."""
        self.redo_stack.clear()

    def _discard_undo(self) -> None:
        if self.undo_stack:
            del self.undo_stack[0]

    def _discard_redo(self) -> None:
        if self.redo_stack:
            del self.redo_stack[0]

    def _create(
        self, where: int, insert_length: int, delete_length: int, chars: Optional[str]
    ) -> Optional[UndoRecord]:
        self.flush_redo()
        if len(self.undo_stack) == self.state_count:
            self._discard_undo()
        if insert_length > self.char_count:
            # Cannot be stored at all; the history before it is no longer valid.
            self.undo_stack.clear()
            return None
        while self.undo_chars + insert_length > self.char_count:
            self._discard_undo()
        record = UndoRecord(where, insert_length, delete_length, chars if insert_length else None)
        self.undo_stack.append(record)
        return record

    def make_insert(self, where: int, length: int) -> None:
        """Record that ``length`` characters are about to be inserted at ``where``."""
        self._create(where, 0, length, None)

    def make_delete(self, text: EditableText, where: int, length: int) -> None:
        """Record that ``length`` characters at ``where`` are about to be deleted."""
        chars = _read(text, where, length) if length <= self.char_count else None
        self._create(where, length, 0, chars)

    def make_replace(
        self, text: EditableText, where: int, old_length: int, new_length: int
    ) -> None:
        """Record that ``old_length`` characters at ``where`` are about to become ``new_length``."""
        chars = _read(text, where, old_length) if old_length <= self.char_count else None
        self._create(where, old_length, new_length, chars)

    def undo(self, text: EditableText) -> Optional[int]:
        """Undo the latest step on ``text``; return the new cursor, or None if nothing to undo."""
        if not self.undo_stack:
            return None
        u = self.undo_stack[-1]
        redo = UndoRecord(u.where, u.delete_length, u.insert_length, None)

        if u.delete_length:
            if self.undo_chars + u.delete_length >= self.char_count:
                # No room to keep the characters needed to redo this step.
                redo.insert_length = 0
            else:
                while self.undo_chars + self.redo_chars + u.delete_length > self.char_count:
                    if not self.redo_stack:
                        return None
                    self._discard_redo()
                redo.chars = _read(text, u.where, u.delete_length)
            text.delete(u.where, u.delete_length)

        if u.insert_length and u.chars is not None:
            text.insert(u.where, u.chars)

        self.undo_stack.pop()
        self.redo_stack.append(redo)
        return u.where + u.insert_length

    def redo(self, text: EditableText) -> Optional[int]:
        """Redo the latest undone step on ``text``; return the new cursor, or None if nothing to redo."""
        if not self.redo_stack:
            return None
        r = self.redo_stack[-1]
        undo = UndoRecord(r.where, r.delete_length, r.insert_length, None)

        if r.delete_length:
            room = self.char_count - self.redo_chars
            if self.undo_chars + undo.insert_length > room:
                undo.insert_length = 0
                undo.delete_length = 0
            else:
                undo.chars = _read(text, undo.where, undo.insert_length)
            text.delete(r.where, r.delete_length)

        if r.insert_length and r.chars is not None:
            text.insert(r.where, r.chars)

        self.redo_stack.pop()
        self.undo_stack.append(undo)
        return r.where + r.insert_length