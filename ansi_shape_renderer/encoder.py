#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/encoder.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .canvas import Canvas
from .color import RESET, ColorDepth, ansi_256, ansi_truecolor, is_bright
from .scene import Color

# Each character cell shows two stacked pixels: row 2k on top, 2k+1 below.
UPPER_HALF_BLOCK = '▀'
LOWER_HALF_BLOCK = '▄'
FULL_BLOCK = '█'
BLANK = ' '


def render_cell_truecolor(upper: Color, lower: Color) -> str:
    return ansi_truecolor(upper, lower) + UPPER_HALF_BLOCK


def render_cell_256(upper: Color, lower: Color) -> str:
    return ansi_256(upper, lower) + UPPER_HALF_BLOCK


def render_cell_mono(upper: Color, lower: Color) -> str:
    """Pick a block glyph from which of the two pixels are bright."""
    top = is_bright(upper)
    bottom = is_bright(lower)
    if top and bottom:
        return FULL_BLOCK
    if top:
        return UPPER_HALF_BLOCK
    if bottom:
        return LOWER_HALF_BLOCK
    return BLANK


_CELL_RENDERERS = {
    ColorDepth.TRUECOLOR: render_cell_truecolor,
    ColorDepth.XTERM_256: render_cell_256,
    ColorDepth.MONOCHROME: render_cell_mono,
}


def encode_canvas(canvas: Canvas, color_depth: ColorDepth = ColorDepth.TRUECOLOR) -> str:
    """
    Fold pixel rows in pairs into lines of character cells.
    Colored lines end with a reset escape; monochrome lines carry no escapes.
    """
    render_cell = _CELL_RENDERERS[color_depth]
    line_end = '' if color_depth is ColorDepth.MONOCHROME else RESET
    pixels = canvas.pixels

    lines = []
    for y in range(0, canvas.h - 1, 2):
        upper_row = pixels[y]
        lower_row = pixels[y + 1]
        cells = [render_cell(upper_row[x], lower_row[x]) for x in range(canvas.w)]
        lines.append(''.join(cells) + line_end)
    return '\n'.join(lines)
