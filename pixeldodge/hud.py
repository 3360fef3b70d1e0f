"""Play-area border and score readout."""

from __future__ import annotations

import math

from .constants import HUD_HEIGHT, SCORE_CHARS
from .pixel_canvas import Color, PixelCanvas
from .vector import Vector2D

GLYPH_STEP = 4          # glyph width plus one column of spacing


def format_score(score: float, num_chars: int = SCORE_CHARS) -> str:
    """Tenths of a second, zero-padded to ``num_chars - 1`` digits."""
    digits = num_chars - 1
    tenths = min(math.floor(score * 10 + 0.5), 10 ** digits - 1)
    return str(max(tenths, 0)).zfill(digits)


class HUD:
    """Draws the border around the play area and the score strip below it."""

    def __init__(self, canvas: PixelCanvas, play_area_size: Vector2D) -> None:
        self.canvas = canvas
        self.play_area_size = play_area_size

    def draw(self, score: float, fg: Color, bg: Color) -> None:
        # Game border
        border_h = self.play_area_size.y + 1
        border_w = self.play_area_size.x + 1
        self.canvas.draw_line(Vector2D(0, 0), Vector2D(0, border_h), fg)
        self.canvas.draw_line(Vector2D(0, border_h), Vector2D(border_w, border_h), fg)
        self.canvas.draw_line(Vector2D(0, 0), Vector2D(border_w, 0), fg)
        self.canvas.draw_line(Vector2D(border_w, 0), Vector2D(border_w, border_h), fg)

        hud_pos = Vector2D(0, border_h + 1)
        hud_size = Vector2D(border_w, HUD_HEIGHT)
        self.canvas.fill_rect(hud_pos, hud_size, bg)
        self.draw_score(hud_pos, hud_size, score, fg)

    def draw_score(self, hud_pos: Vector2D, hud_size: Vector2D, score: float, fg: Color) -> None:
        """
        Right-aligned score with a one-pixel decimal point before the tenths.

        Leading zeroes are skipped, but the units and tenths digits are
        always drawn.
        """
        score_pos = Vector2D.add(hud_pos, Vector2D(hud_size.x - GLYPH_STEP * SCORE_CHARS - 3, 2))
        score_str = format_score(score)
        leading_zeroes = True
        for i, char in enumerate(score_str):
            if leading_zeroes and i < SCORE_CHARS - 3 and char == "0":
                continue
            leading_zeroes = False
            if i == SCORE_CHARS - 2:
                self.canvas.draw_pixel(Vector2D.add(score_pos, Vector2D(GLYPH_STEP * i, 4)), fg)
                self.canvas.draw_number(Vector2D.add(score_pos, Vector2D(GLYPH_STEP * i + 2, 0)), char, fg)
            else:
                self.canvas.draw_number(Vector2D.add(score_pos, Vector2D(GLYPH_STEP * i, 0)), char, fg)
