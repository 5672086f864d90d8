import pytest

from pearlkernel.colors import (
    BLACK_ON_WHITE,
    COMBINATIONS,
    GREEN_ON_BLACK,
    WHITE_ON_BLUE,
    Color,
    attribute,
)


def test_base_colours():
    assert attribute(Color.GREEN, Color.BLACK) == 0x02
    assert attribute(Color.WHITE, Color.BLACK) == 0x0F
    assert attribute(Color.LIGHT_PURPLE, Color.BLACK) == 0x0D


def test_named_attributes():
    assert attribute(Color.GREEN, Color.BLACK) == GREEN_ON_BLACK == 0x02
    assert attribute(Color.WHITE, Color.BLUE) == WHITE_ON_BLUE == 0x1F
    assert attribute(Color.BLACK, Color.WHITE) == BLACK_ON_WHITE == 0xF0


def test_attribute_splits_back():
    for fg in Color:
        for bg in Color:
            value = attribute(fg, bg)
            assert value & 0xF == fg
            assert value >> 4 == bg


def test_combinations_exclude_same_colour():
    assert "GREEN_ON_GREEN" not in COMBINATIONS
    assert COMBINATIONS["YELLOW_ON_WHITE"] == attribute(Color.YELLOW, Color.WHITE) == 0xFE
    assert len(COMBINATIONS) == 240
    for name, value in COMBINATIONS.items():
        fg, bg = name.split("_ON_")
        assert fg != bg
        assert attribute(Color[fg], Color[bg]) == value


@pytest.mark.parametrize("fg,bg", [(16, 0), (0, 16), (-1, 0)])
def test_attribute_out_of_range(fg, bg):
    with pytest.raises(ValueError):
        attribute(fg, bg)