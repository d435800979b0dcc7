from ansi_shape_renderer.scene import (Color, Pattern, Position, Shape, ShapeKind,
                                       StrokePosition)

ORANGE = Color(255, 165, 0)
BLUE = Color(0, 0, 255)


def make_shape(kind=ShapeKind.CIRCLE, size=2, x=0, y=0, ink=Color(255, 0, 0),
               paper=None, pattern=Pattern.BRETON, stroke_color=Color(0, 0, 0),
               stroke_position=StrokePosition.CENTER, stroke_width=0.0) -> Shape:
    """Shape with solid fill (paper defaults to ink) and no stroke unless asked."""
    return Shape(kind=kind, size=size, position=Position(x, y), ink=ink,
                 paper=ink if paper is None else paper, pattern=pattern,
                 stroke_color=stroke_color, stroke_position=stroke_position,
                 stroke_width=stroke_width)
