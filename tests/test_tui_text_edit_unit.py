import random

import pytest

from core.desktop.devtools.interface.tui_text_edit import (
    FieldBuffer,
    cursor_line_col,
    delete_backward,
    insert,
    line_end,
    line_start,
    move_horizontal,
    move_vertical,
)


def test_insert_and_delete_keep_cursor_in_range():
    assert insert("abc", 1, "XY") == ("aXYbc", 3)
    assert insert("abc", 99, "!") == ("abc!", 4)
    assert delete_backward("abc", 0) == ("abc", 0)
    assert delete_backward("abc", 2) == ("ac", 1)
    assert move_horizontal("abc", 3, 5) == ("abc", 3)
    assert move_horizontal("abc", 0, -1) == ("abc", 0)


def test_line_bounds():
    text = "ab\ncdef\n"
    assert line_start(text, 4) == 3
    assert line_end(text, 4) == 7
    assert line_start(text, 8) == 8
    assert line_end(text, 8) == 8


def test_vertical_move_clamps_column_to_target_line():
    text = "abcdef\nxy\nlonger line"
    _, cursor = move_vertical(text, 5, 1)
    assert cursor_line_col(text, cursor) == (1, 2)
    _, cursor = move_vertical(text, cursor, 1)
    assert cursor_line_col(text, cursor) == (2, 2)


def test_vertical_move_up_from_first_line_is_noop():
    assert move_vertical("abc\ndef", 2, -1) == ("abc\ndef", 2)
    assert move_vertical("abc\ndef", 6, 1) == ("abc\ndef", 6)


def test_vertical_round_trip_on_equal_lines():
    text = "abcd\nefgh\nijkl"
    _, down = move_vertical(text, 2, 2)
    _, back = move_vertical(text, down, -2)
    assert back == 2


def test_down_reaches_trailing_empty_line():
    text = "abc\n"
    _, cursor = move_vertical(text, 2, 1)
    assert cursor == 4


@pytest.mark.parametrize("cursor", [-5, 0, 3, 100])
def test_cursor_invariant_after_any_operation(cursor):
    text = "one\ntwo"
    for op in (
        lambda b, c: insert(b, c, "z"),
        lambda b, c: delete_backward(b, c),
        lambda b, c: move_horizontal(b, c, -3),
        lambda b, c: move_vertical(b, c, 1),
        lambda b, c: move_vertical(b, c, -1),
    ):
        buffer, new_cursor = op(text, cursor)
        assert 0 <= new_cursor <= len(buffer)


SEQUENCE_OPERATIONS = (
    lambda b, c: insert(b, c, "z"),
    lambda b, c: insert(b, c, "\n"),
    lambda b, c: delete_backward(b, c),
    lambda b, c: move_horizontal(b, c, -1),
    lambda b, c: move_horizontal(b, c, 2),
    lambda b, c: move_vertical(b, c, 1),
    lambda b, c: move_vertical(b, c, -1),
)


@pytest.mark.parametrize("seed", range(25))
def test_cursor_invariant_over_operation_sequences(seed):
    rng = random.Random(seed)
    buffer = "first line\n\nthird\nlast"
    cursor = rng.randint(-3, len(buffer) + 3)
    for _ in range(200):
        buffer, cursor = rng.choice(SEQUENCE_OPERATIONS)(buffer, cursor)
        assert 0 <= cursor <= len(buffer)
        line, col = cursor_line_col(buffer, cursor)
        assert col <= len(buffer.split("\n")[line])


def test_scripted_sequence_over_multiline_buffer():
    buffer, cursor = "ab\ncdef", 6
    buffer, cursor = move_vertical(buffer, cursor, -1)
    assert cursor == 2
    buffer, cursor = insert(buffer, cursor, "X")
    assert (buffer, cursor) == ("abX\ncdef", 3)
    buffer, cursor = move_vertical(buffer, cursor, 1)
    assert cursor == 7
    buffer, cursor = delete_backward(buffer, cursor)
    assert (buffer, cursor) == ("abX\ncdf", 6)


def test_multiline_field_sequence_keeps_cursor_in_range():
    field = FieldBuffer("one\ntwo\nthree", 100, multiline=True)
    for step in ("up", "up", "up", "del", "del", "del", "del", "nl", "down", "down", "right", "ins"):
        if step == "up":
            field.move_vertical(-1)
        elif step == "down":
            field.move_vertical(1)
        elif step == "del":
            field.delete_backward()
        elif step == "nl":
            field.insert_newline()
        elif step == "right":
            field.move_horizontal(1)
        else:
            field.insert("é")
        assert 0 <= field.cursor <= len(field.text)


def test_single_line_field_drops_line_breaks():
    field = FieldBuffer("a\nb", 3)
    assert field.text == "a b"
    field.insert("c\r\nd")
    assert field.text == "a bc d"
    field.insert_newline()
    assert "\n" not in field.text


def test_field_snapshot_restore():
    field = FieldBuffer("hello", 5, multiline=True)
    state = field.snapshot()
    field.insert(" world")
    field.move_vertical(-1)
    field.restore(state)
    assert (field.text, field.cursor) == ("hello", 5)
