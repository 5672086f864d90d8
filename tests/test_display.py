import pytest

from pearlkernel.colors import GREEN_ON_BLACK, RED_ON_BLACK, WHITE_ON_BLUE
from pearlkernel.display import Display


def test_put_writes_text_and_advances_cursor():
    display = Display()
    display.put("hello")
    assert display.row_text(0) == "hello"
    assert display.cursor_position() == (len("hello"), 0)


def test_newline_moves_to_next_row():
    display = Display()
    display.put("ab\ncd")
    assert display.row_text(0) == "ab"
    assert display.row_text(1) == "cd"
    assert display.cursor_position() == (2, 1)


def test_default_theme_fills_attributes():
    display = Display()
    assert set(display.memory[1::2]) == {GREEN_ON_BLACK}
    assert len(display.memory) == 2 * display.width * display.height


def test_colored_char_sets_attribute_transparent_keeps_theme():
    display = Display()
    display.put_char("x", RED_ON_BLACK)
    display.put_char("y")
    assert display.memory[0:2] == bytes([ord("x"), RED_ON_BLACK])
    assert display.memory[2:4] == bytes([ord("y"), GREEN_ON_BLACK])


def test_scroll_at_bottom_keeps_latest_rows():
    display = Display(10, 3)
    display.put("a\nb\nc\n")
    assert [display.row_text(row) for row in range(3)] == ["b", "c", ""]
    assert display.cursor_position() == (0, 2)


def test_last_cell_is_never_written():
    display = Display(4, 2)
    display.put("x" * 50)
    last = 2 * (display.width * display.height - 1)
    assert display.memory[last] == 0
    column, row = display.cursor_position()
    assert 0 <= row < display.height


def test_scroll_clears_bottom_row_with_theme():
    display = Display(6, 3, WHITE_ON_BLUE)
    display.put("aa\nbb\ncc")
    display.scroll()
    assert display.row_text(2) == ""
    assert display.row_text(0) == "bb"
    assert set(display.memory[1::2]) == {WHITE_ON_BLUE}


def test_set_theme_paints_all_cells():
    display = Display(8, 4)
    display.put("text")
    display.set_theme(WHITE_ON_BLUE)
    assert set(display.memory[1::2]) == {WHITE_ON_BLUE}
    assert display.row_text(0) == "text"


def test_clear_blanks_and_keeps_theme():
    display = Display(8, 4)
    display.set_theme(WHITE_ON_BLUE)
    display.put("some\ntext")
    display.clear()
    assert display.text() == "\n" * (display.height - 1)
    assert display.cursor_position() == (0, 0)
    assert set(display.memory[1::2]) == {WHITE_ON_BLUE}


def test_delete_char_removes_last_character():
    display = Display()
    display.put("ab")
    display.delete_char()
    assert display.row_text(0) == "a"
    assert display.cursor_position() == (1, 0)


def test_delete_char_at_origin_does_nothing():
    display = Display()
    before = bytes(display.memory)
    display.delete_char()
    assert bytes(display.memory) == before
    assert display.cursor_position() == (0, 0)


def test_set_cursor_position_round_trip():
    display = Display()
    display.set_cursor_position(7, 3)
    assert display.cursor_position() == (7, 3)
    display.put("z")
    assert display.row_text(3).strip() == "z"


@pytest.mark.parametrize("column,row", [(-1, 0), (80, 0), (0, 25), (0, -1)])
def test_set_cursor_position_out_of_range(column, row):
    display = Display()
    with pytest.raises(ValueError):
        display.set_cursor_position(column, row)


def test_put_char_rejects_multiple_characters():
    display = Display()
    with pytest.raises(ValueError):
        display.put_char("ab")


def test_interior_blank_reads_as_space():
    display = Display()
    display.put("ab")
    display.set_cursor_position(4, 0)
    display.put("c")
    assert display.row_text(0) == "ab  c"


def test_text_has_one_line_per_row():
    display = Display(5, 3)
    display.put("hi")
    lines = display.text().split("\n")
    assert len(lines) == display.height
    assert lines[0] == "hi"