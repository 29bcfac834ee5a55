import pytest

from ginkgokit.textlayout import (
    NEWLINE_WIDTH,
    FindState,
    TextBuffer,
    TextRow,
    find_char_pos,
    locate_coord,
)
from ginkgokit.textundo import UndoState

CW = 10.0
LH = 20.0


def make(text):
    return TextBuffer(text, CW, LH)


def rows(buffer):
    start = 0
    result = []
    while start < len(buffer):
        row = buffer.layout_row(start)
        result.append((start, row))
        start += row.num_chars
    return result


def test_len_and_str():
    buf = make("ab\ncd")
    assert len(buf) == 5
    assert str(buf) == "ab\ncd"


def test_invalid_sizes_rejected():
    with pytest.raises(ValueError):
        TextBuffer("x", 0, LH)
    with pytest.raises(ValueError):
        TextBuffer("x", CW, -1)


def test_char_at_and_out_of_range():
    buf = make("ab\ncd")
    assert buf.char_at(2) == "\n"
    assert buf.char_at(4) == "d"
    with pytest.raises(IndexError):
        buf.char_at(5)
    with pytest.raises(IndexError):
        buf.char_at(-1)


@pytest.mark.parametrize("text", ["", "abc", "ab\ncd", "a\n\nb\n", "\n"])
def test_rows_partition_text(text):
    buf = make(text)
    layout = rows(buf)
    assert sum(row.num_chars for _, row in layout) == len(text)
    for start, row in layout:
        chunk = text[start:start + row.num_chars]
        assert "\n" not in chunk[:-1]
        assert row.x1 == row.x0 + CW * len(chunk.rstrip("\n"))
        assert row.baseline_y_delta == LH


def test_layout_row_past_end_is_empty():
    buf = make("abc")
    assert buf.layout_row(3).num_chars == 0


def test_newline_width_is_marked():
    buf = make("a\nb")
    assert buf.char_width_at(0, 1) == NEWLINE_WIDTH
    assert buf.char_width_at(0, 0) == CW
    assert buf.char_width_at(2, 0) == CW


def test_insert_and_delete_round_trip():
    buf = make("hello")
    assert buf.insert(2, "XY") is True
    assert str(buf) == "heXYllo"
    buf.delete(2, 2)
    assert str(buf) == "hello"


def test_insert_and_delete_out_of_range():
    buf = make("abc")
    with pytest.raises(IndexError):
        buf.insert(4, "x")
    with pytest.raises(IndexError):
        buf.delete(2, 2)


@pytest.mark.parametrize("text", ["", "abc", "ab\ncd", "ab\n", "a\n\nbc\nd"])
def test_find_then_locate_round_trip(text):
    buf = make(text)
    for n in range(len(text) + 1):
        fs = find_char_pos(buf, n, False)
        assert locate_coord(buf, fs.x, fs.y + LH / 2) == n


def test_find_char_pos_rows_contain_character():
    buf = make("ab\ncd\nef")
    for n in range(len(buf)):
        fs = find_char_pos(buf, n, False)
        assert fs.first_char <= n < fs.first_char + fs.length
        assert fs.height == LH
        assert fs.prev_first <= fs.first_char


def test_find_char_pos_single_line_end():
    buf = make("abc")
    fs = find_char_pos(buf, 3, True)
    assert fs == FindState(x=buf.layout_row(0).x1, y=0.0, height=LH,
                           first_char=0, length=3, prev_first=0)


def test_find_char_pos_after_trailing_newline_is_empty_row():
    buf = make("ab\n")
    fs = find_char_pos(buf, 3, False)
    assert fs.first_char == 3
    assert fs.length == 0
    assert fs.prev_first == 0


def test_locate_above_text_is_start():
    buf = make("ab\ncd")
    assert locate_coord(buf, 15.0, -5.0) == 0


def test_locate_below_text_is_end():
    buf = make("ab\ncd")
    assert locate_coord(buf, 0.0, 1000.0) == len(buf)


def test_locate_past_line_end_stops_before_newline():
    buf = make("ab\ncd")
    assert locate_coord(buf, 500.0, LH / 2) == 2
    assert locate_coord(buf, 500.0, LH * 1.5) == len(buf)


def test_locate_rounds_to_nearest_boundary():
    buf = make("abc")
    assert locate_coord(buf, CW * 0.4, 0.0) == 0
    assert locate_coord(buf, CW * 0.6, 0.0) == 1


def test_locate_on_empty_text():
    buf = make("")
    assert locate_coord(buf, 3.0, 3.0) == 0


def test_text_row_defaults_are_empty():
    row = TextRow()
    assert row.num_chars == 0
    assert row.x1 - row.x0 == 0.0


def test_buffer_works_with_undo_history():
    buf = make("hello")
    history = UndoState()
    history.make_delete(buf, 1, 3)
    buf.delete(1, 3)
    assert str(buf) == "ho"
    assert history.undo(buf) == 4
    assert str(buf) == "hello"
    assert history.redo(buf) == 1
    assert str(buf) == "ho"