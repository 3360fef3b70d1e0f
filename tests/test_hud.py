import pytest

from conftest import BG, FG, lit_cells, make_host
from pixeldodge.bitmaps import NUMBERS
from pixeldodge.hud import HUD, format_score
from pixeldodge.pixel_canvas import PixelCanvas
from pixeldodge.vector import Vector2D

# 40x20 play area at scale 1: canvas is 42x31, score glyphs start at (10, 24)
SCORE_X, SCORE_Y = 10, 24


@pytest.mark.parametrize("score, expected", [
    (0, "000000"),
    (0.04, "000000"),
    (0.05, "000001"),
    (12.34, "000123"),
    (99999.94, "999999"),
    (250000, "999999"),
])
def test_format_score(score, expected):
    assert format_score(score) == expected


def draw_hud(score):
    host = make_host(42, 31)
    canvas = PixelCanvas(host, Vector2D(0, 0), Vector2D(42, 31), 1)
    HUD(canvas, Vector2D(40, 20)).draw(score, FG, BG)
    return lit_cells(host, (0, 0), 1, 42, 31)


def glyph_cells(digit, x, y):
    return {
        (x + gx, y + gy)
        for gy, row in enumerate(NUMBERS["STYLISED"][digit])
        for gx, cell in enumerate(row)
        if cell
    }


def test_border_surrounds_the_play_area():
    cells = draw_hud(0)
    border = {(x, 0) for x in range(42)} | {(x, 21) for x in range(42)} \
        | {(0, y) for y in range(22)} | {(41, y) for y in range(22)}
    assert border <= cells
    assert (1, 1) not in cells and (40, 20) not in cells


def test_zero_score_keeps_units_and_tenths():
    cells = {c for c in draw_hud(0) if c[1] > 21}
    expected = glyph_cells(0, SCORE_X + 16, SCORE_Y) | {(SCORE_X + 20, SCORE_Y + 4)} \
        | glyph_cells(0, SCORE_X + 22, SCORE_Y)
    assert cells == expected


def test_leading_zeroes_are_suppressed():
    cells = {c for c in draw_hud(12.34) if c[1] > 21}
    expected = glyph_cells(1, SCORE_X + 12, SCORE_Y) | glyph_cells(2, SCORE_X + 16, SCORE_Y) \
        | {(SCORE_X + 20, SCORE_Y + 4)} | glyph_cells(3, SCORE_X + 22, SCORE_Y)
    assert cells == expected


def test_inner_zeroes_are_drawn():
    cells = {c for c in draw_hud(100.0) if c[1] > 21}
    expected = glyph_cells(1, SCORE_X + 8, SCORE_Y) \
        | glyph_cells(0, SCORE_X + 12, SCORE_Y) | glyph_cells(0, SCORE_X + 16, SCORE_Y) \
        | {(SCORE_X + 20, SCORE_Y + 4)} | glyph_cells(0, SCORE_X + 22, SCORE_Y)
    assert cells == expected


def test_strip_is_cleared_before_drawing():
    host = make_host(42, 31)
    canvas = PixelCanvas(host, Vector2D(0, 0), Vector2D(42, 31), 1)
    canvas.fill_rect(Vector2D(0, 22), Vector2D(42, 9), FG)
    HUD(canvas, Vector2D(40, 20)).draw(0, FG, BG)
    assert (1, 23) not in lit_cells(host, (0, 0), 1, 42, 31)
