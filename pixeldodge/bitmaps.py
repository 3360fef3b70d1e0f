"""
3x5 glyph tables for the HUD.

Each glyph is a row-major matrix of 0/1 cells, five rows of three columns.
Tables are indexed by offset from '0' (digits) or 'a' (letters).
"""

GLYPH_WIDTH = 3
GLYPH_HEIGHT = 5


def _glyph(*rows: str) -> tuple[tuple[int, ...], ...]:
    return tuple(tuple(int(cell) for cell in row) for row in rows)


NUMBERS = {
    "STYLISED": (
        _glyph("111", "101", "101", "101", "111"),  # 0
        _glyph("110", "010", "010", "010", "111"),  # 1
        _glyph("111", "001", "111", "100", "111"),  # 2
        _glyph("111", "001", "011", "001", "111"),  # 3
        _glyph("101", "101", "111", "001", "001"),  # 4
        _glyph("111", "100", "111", "001", "111"),  # 5
        _glyph("111", "100", "111", "101", "111"),  # 6
        _glyph("111", "001", "010", "010", "010"),  # 7
        _glyph("111", "101", "111", "101", "111"),  # 8
        _glyph("111", "101", "111", "001", "111"),  # 9
    ),
}

LETTERS = {
    "DEFAULT": (
        _glyph("010", "101", "111", "101", "101"),  # a
        _glyph("110", "101", "110", "101", "110"),  # b
        _glyph("011", "100", "100", "100", "011"),  # c
        _glyph("110", "101", "101", "101", "110"),  # d
        _glyph("111", "100", "110", "100", "111"),  # e
        _glyph("111", "100", "110", "100", "100"),  # f
        _glyph("011", "100", "101", "101", "011"),  # g
        _glyph("101", "101", "111", "101", "101"),  # h
        _glyph("111", "010", "010", "010", "111"),  # i
        _glyph("001", "001", "001", "101", "010"),  # j
        _glyph("101", "101", "110", "101", "101"),  # k
        _glyph("100", "100", "100", "100", "111"),  # l
        _glyph("101", "111", "111", "101", "101"),  # m
        _glyph("110", "101", "101", "101", "101"),  # n
        _glyph("010", "101", "101", "101", "010"),  # o
        _glyph("110", "101", "110", "100", "100"),  # p
        _glyph("010", "101", "101", "011", "001"),  # q
        _glyph("110", "101", "110", "101", "101"),  # r
        _glyph("011", "100", "010", "001", "110"),  # s
        _glyph("111", "010", "010", "010", "010"),  # t
        _glyph("101", "101", "101", "101", "111"),  # u
        _glyph("101", "101", "101", "101", "010"),  # v
        _glyph("101", "101", "111", "111", "101"),  # w
        _glyph("101", "101", "010", "101", "101"),  # x
        _glyph("101", "101", "010", "010", "010"),  # y
        _glyph("111", "001", "010", "100", "111"),  # z
    ),
}
