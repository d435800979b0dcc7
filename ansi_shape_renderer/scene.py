#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple


class Color(NamedTuple):
    """An opaque 8-bit RGB color. Each channel is in [0, 255]."""
    red: int
    green: int
    blue: int


BLACK = Color(0, 0, 0)


class Position(NamedTuple):
    """Integer world coordinates of a shape's center (Y grows downward)."""
    x: int
    y: int


class Pattern(Enum):
    """Two-color stripe patterns, resolved per pixel by row/column parity."""
    BRETON = 'breton'        # horizontal stripes, one pixel row each
    PINSTRIPE = 'pinstripe'  # vertical stripes, one pixel column each

    def pick(self, x: int, y: int, ink: Color, paper: Color) -> Color:
        """Return `ink` or `paper` for the pixel at screen column x, row y."""
        if self is Pattern.BRETON:
            return ink if y % 2 == 0 else paper
        return ink if x % 2 == 0 else paper


class ShapeKind(Enum):
    CIRCLE = 'circle'
    SQUARE = 'square'
    TRIANGLE = 'triangle'


class StrokePosition(Enum):
    INSIDE = 'inside'
    CENTER = 'center'
    OUTSIDE = 'outside'


@dataclass(frozen=True)
class Background:
    ink: Color
    paper: Color
    pattern: Pattern


@dataclass(frozen=True)
class Shape:
    """
    One shape in the scene.

    `size` is the radius (circle), half-size (square) or circumradius-like
    scale (triangle), in world units. `stroke_width` is measured in screen
    pixels, not world units, so strokes keep their weight at any canvas size.
    """
    kind: ShapeKind
    size: int
    position: Position
    ink: Color
    paper: Color
    pattern: Pattern
    stroke_color: Color = BLACK
    stroke_position: StrokePosition = StrokePosition.CENTER
    stroke_width: float = 0.0


@dataclass(frozen=True)
class Scene:
    """
    Everything a single render needs, already validated.

    Shapes are kept in painter's order: later shapes draw over earlier ones.
    """
    canvas_width: int
    canvas_height: int
    background: Background
    shapes: Tuple[Shape, ...] = ()
