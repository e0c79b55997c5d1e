import pytest

from lcbasetools.colors import (
    BLACK,
    KNOWN_COLOR16,
    LC_MAGENTA,
    LC_PINK,
    WHITE,
    ColorMapper,
    ColorMultiMap,
    ColorObj,
    RGBPack,
)


def test_magenta_unpacks_to_named_color():
    color = ColorObj.from_color16(0xF81F)
    assert (color.red, color.green, color.blue) == LC_MAGENTA


def test_pink_packs_to_its_code():
    assert ColorObj(*LC_PINK).color16() == 0xFC1A


@pytest.mark.parametrize("code,rgb", sorted(KNOWN_COLOR16.items()))
def test_known_colors_round_trip(code, rgb):
    color = ColorObj.from_color16(code)
    assert (color.red, color.green, color.blue) == rgb
    assert color.color16() == code


@pytest.mark.parametrize("code", [0x1234, 0xABCD, 0x0841, 0x7BEF])
def test_unknown_codes_round_trip(code):
    assert ColorObj.from_color16(code).color16() == code


def test_greyscale_extremes():
    assert WHITE.greyscale() == 255
    assert BLACK.greyscale() == 0


def test_greyscale_of_grey_is_itself():
    assert ColorObj(77, 77, 77).greyscale() == 77


def test_pack_round_trip():
    color = ColorObj(12, 34, 56)
    pack = color.pack()
    assert pack == RGBPack(12, 34, 56)
    assert ColorObj.from_pack(pack) == color


def test_copy_from():
    color = ColorObj()
    color.copy_from(ColorObj(1, 2, 3))
    assert color == ColorObj(1, 2, 3)


def test_mix_colors_extremes():
    start = ColorObj(10, 20, 30)
    other = ColorObj(200, 100, 50)
    assert start.mix_colors(other, 0) == start
    assert start.mix_colors(other, 100) == other
    assert start.mix_colors(other, 150) == other


def test_mix_colors_does_not_change_self():
    start = ColorObj(10, 20, 30)
    start.mix_colors(WHITE, 40)
    assert start == ColorObj(10, 20, 30)


def test_blend_changes_self():
    color = ColorObj(0, 0, 0)
    color.blend(ColorObj(0, 0, 200), 50)
    assert color == ColorObj(0, 0, 100)
    color.blend(WHITE, 0)
    assert color == ColorObj(0, 0, 100)
    color.blend(WHITE, 100)
    assert color == WHITE


def test_color_mapper_endpoints_and_clamp():
    start = ColorObj(10, 20, 30)
    end = ColorObj(110, 220, 130)
    mapper = ColorMapper(start, end)
    assert mapper.map(0) == start
    assert mapper.map(100) == end
    assert mapper.map(500) == end
    assert mapper.map(-5) == start


def test_color_mapper_from_color16():
    mapper = ColorMapper.from_color16(0x0000, 0xFFFF)
    assert mapper.map(0) == BLACK
    assert mapper.map(100) == WHITE


def test_color_mapper_set_colors():
    mapper = ColorMapper()
    mapper.set_colors(WHITE, BLACK)
    assert mapper.map(100) == BLACK
    assert mapper.map(0) == WHITE


def test_multi_map_empty_is_black():
    assert ColorMultiMap().map(5) == BLACK