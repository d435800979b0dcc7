#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .scene import BLACK, Background, Color


def _channel(v: float) -> int:
    # Round half up, then clamp to a byte
    c = int(v + 0.5)
    if c < 0:
        return 0
    if c > 255:
        return 255
    return c


def blend_over(color, alpha: float, existing: Color) -> Color:
    """
    Composite `color` at `alpha` over an opaque `existing` color.
    `color` may hold fractional channels (e.g. straight after un-premultiplying).
    """
    inv = 1.0 - alpha
    return Color(_channel(color[0] * alpha + existing.red * inv),
                 _channel(color[1] * alpha + existing.green * inv),
                 _channel(color[2] * alpha + existing.blue * inv))


class Canvas:
    """
    Pixel grid owned by a single render call.

    pixels[y][x] holds the Color at screen column x, row y. Starts black.
    """
    __slots__ = ['w', 'h', 'pixels']

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.pixels = [[BLACK] * w for _ in range(h)]

    def blend_pixel(self, x, y, color, alpha: float):
        """Blend `color` at `alpha` over whatever is already at (x, y)."""
        row = self.pixels[y]
        row[x] = blend_over(color, alpha, row[x])

    def paint_background(self, background: Background):
        """Fill every pixel from the background's ink/paper stripe pattern."""
        pick = background.pattern.pick
        ink, paper = background.ink, background.paper
        for y in range(self.h):
            row = self.pixels[y]
            for x in range(self.w):
                row[x] = pick(x, y, ink, paper)
