import pytest

from ltlr.palette import Color, p8_palette_get


def test_first_entry_is_black():
    assert p8_palette_get(0) == Color(0, 0, 0, 255)


def test_blue_entry():
    assert p8_palette_get(12) == Color(41, 173, 255, 255)


def test_light_peach_is_last():
    assert p8_palette_get(15) == Color(255, 204, 170, 255)


@pytest.mark.parametrize("index", [0, 1, 5, 12, 15])
def test_index_wraps_around(index):
    assert p8_palette_get(index + 16) == p8_palette_get(index)
    assert p8_palette_get(index + 32) == p8_palette_get(index)


def test_all_entries_opaque_and_distinct():
    colors = [p8_palette_get(i) for i in range(16)]
    assert all(color.a == 255 for color in colors)
    assert len(set(colors)) == 16


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        p8_palette_get(-1)