"""Folding pixel rows into half-block character cells."""

from ansi_shape_renderer.canvas import Canvas
from ansi_shape_renderer.color import ColorDepth
from ansi_shape_renderer.encoder import (FULL_BLOCK, LOWER_HALF_BLOCK, UPPER_HALF_BLOCK,
                                         encode_canvas, render_cell_256, render_cell_mono,
                                         render_cell_truecolor)
from ansi_shape_renderer.scene import Background, Color, Pattern

from helpers import BLUE, ORANGE

WHITE = Color(255, 255, 255)
DARK = Color(20, 20, 20)


def test_mono_glyphs() -> None:
    assert render_cell_mono(WHITE, WHITE) == FULL_BLOCK
    assert render_cell_mono(WHITE, DARK) == UPPER_HALF_BLOCK
    assert render_cell_mono(DARK, WHITE) == LOWER_HALF_BLOCK
    assert render_cell_mono(DARK, DARK) == ' '


def test_colored_cells_use_upper_half_block() -> None:
    assert render_cell_truecolor(ORANGE, BLUE).endswith(UPPER_HALF_BLOCK)
    assert render_cell_256(ORANGE, BLUE) == '\x1b[38;5;214m\x1b[48;5;21m' + UPPER_HALF_BLOCK


def test_encode_pairs_rows_and_resets_each_line() -> None:
    canvas = Canvas(2, 4)
    canvas.paint_background(Background(ORANGE, BLUE, Pattern.BRETON))

    out = encode_canvas(canvas, ColorDepth.TRUECOLOR)
    lines = out.split('\n')
    cell = '\x1b[38;2;255;165;0m\x1b[48;2;0;0;255m' + UPPER_HALF_BLOCK
    assert lines == [cell * 2 + '\x1b[0m'] * 2


def test_encode_mono_has_no_escapes() -> None:
    canvas = Canvas(3, 2)
    canvas.paint_background(Background(WHITE, DARK, Pattern.BRETON))
    assert encode_canvas(canvas, ColorDepth.MONOCHROME) == UPPER_HALF_BLOCK * 3


def test_encode_256_line_count() -> None:
    canvas = Canvas(5, 6)
    out = encode_canvas(canvas, ColorDepth.XTERM_256)
    lines = out.split('\n')
    assert len(lines) == 3
    assert all(line.count(UPPER_HALF_BLOCK) == 5 for line in lines)
    assert all(line.endswith('\x1b[0m') for line in lines)
