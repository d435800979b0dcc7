#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/sdf.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
Signed distance functions and bounding boxes for the supported shape kinds.

Every SDF takes a point (px, py) relative to the shape's center, in world
units with Y growing downward, and returns a distance that is negative
inside, zero on the boundary and positive outside.
"""

import math
from typing import NamedTuple

from .errors import UnimplementedShapeKindError
from .scene import Shape, ShapeKind

SQRT3 = math.sqrt(3.0)

# The triangle's apex sits at 2/sqrt(3) * size above its center, so a
# vertical half-extent of 1.2 * size always covers it.
TRIANGLE_AABB_FACTOR = 1.2


class Box(NamedTuple):
    """Axis-aligned bounding box in world units (edges inclusive)."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


def _sign(v: float) -> int:
    return (v > 0) - (v < 0)


def sdf_circle(px: float, py: float, radius: float) -> float:
    return math.sqrt(px * px + py * py) - radius


def sdf_square(px: float, py: float, half_size: float) -> float:
    """Axis-aligned box with no rounding."""
    dx = abs(px) - half_size
    dy = abs(py) - half_size
    ax = max(dx, 0.0)
    ay = max(dy, 0.0)
    outside = math.sqrt(ax * ax + ay * ay)
    inside = min(max(dx, dy), 0.0)
    return outside + inside


def sdf_triangle(px: float, py: float, r: float) -> float:
    """
    Equilateral triangle, apex up on screen.

    The fold-and-clamp construction works with Y positive-up, so the
    world Y is flipped on the way in. The result keeps its sign.
    """
    py = -py
    x = abs(px) - r
    y = py + r / SQRT3
    if x + SQRT3 * y > 0.0:
        x, y = (x - SQRT3 * y) / 2.0, (-SQRT3 * x - y) / 2.0
    x -= min(max(x, -2.0 * r), 0.0)
    return -math.sqrt(x * x + y * y) * _sign(y)


def aabb_circle(shape: Shape, expand: float) -> Box:
    cx, cy = shape.position
    r = abs(shape.size) + expand
    return Box(cx - r, cx + r, cy - r, cy + r)


def aabb_square(shape: Shape, expand: float) -> Box:
    cx, cy = shape.position
    h = abs(shape.size) + expand
    return Box(cx - h, cx + h, cy - h, cy + h)


def aabb_triangle(shape: Shape, expand: float) -> Box:
    """Deliberately loose: covers the apex with room to spare."""
    cx, cy = shape.position
    hx = abs(shape.size) + expand
    hy = abs(shape.size) * TRIANGLE_AABB_FACTOR + expand
    return Box(cx - hx, cx + hx, cy - hy, cy + hy)


_SDF = {
    ShapeKind.CIRCLE: sdf_circle,
    ShapeKind.SQUARE: sdf_square,
    ShapeKind.TRIANGLE: sdf_triangle,
}

_AABB = {
    ShapeKind.CIRCLE: aabb_circle,
    ShapeKind.SQUARE: aabb_square,
    ShapeKind.TRIANGLE: aabb_triangle,
}


def sdf_for(kind: ShapeKind):
    """Return the distance function for `kind`."""
    try:
        return _SDF[kind]
    except KeyError:
        raise UnimplementedShapeKindError(kind) from None


def aabb_for(kind: ShapeKind):
    """Return the bounding-box estimator for `kind`."""
    try:
        return _AABB[kind]
    except KeyError:
        raise UnimplementedShapeKindError(kind) from None

