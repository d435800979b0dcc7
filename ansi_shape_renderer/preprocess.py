#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/preprocess.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
from typing import List, Tuple

from .scene import Scene, Shape, StrokePosition
from .sdf import Box, aabb_for, sdf_for

# The smaller screen dimension always spans this many world units.
WORLD_SPAN = 10.0

# Full width of the anti-aliasing band, in screen pixels.
AA_REGION_PIXELS = 0.85


def world_coord(i: int, count: int, world_extent: float) -> float:
    """World coordinate of the center of pixel i out of count, spanning world_extent."""
    return ((i + 0.5) / count - 0.5) * world_extent


def stroke_band(position: StrokePosition, width: float) -> Tuple[float, float]:
    """Signed-distance interval [band_min, band_max] covered by a stroke."""
    if position is StrokePosition.INSIDE:
        return -width, 0.0
    if position is StrokePosition.OUTSIDE:
        return 0.0, width
    half = width / 2.0
    return -half, half


def outward_stroke_extension(position: StrokePosition, width: float) -> float:
    """How far a stroke reaches beyond the shape's boundary."""
    if position is StrokePosition.OUTSIDE:
        return width
    if position is StrokePosition.CENTER:
        return width / 2.0
    return 0.0


class PreparedShape:
    """A shape plus everything the compositor needs that does not vary per pixel."""
    __slots__ = ('shape', 'sdf', 'box', 'cx', 'cy', 'size',
                 'stroke_width', 'band_min', 'band_max')

    def __init__(self, shape: Shape, world_units_per_pixel: float, aa_region: float):
        self.shape = shape
        self.sdf = sdf_for(shape.kind)
        self.cx = float(shape.position.x)
        self.cy = float(shape.position.y)
        self.size = float(shape.size)

        # Stroke width is given in screen pixels
        self.stroke_width = shape.stroke_width * world_units_per_pixel
        self.band_min, self.band_max = stroke_band(shape.stroke_position, self.stroke_width)

        # Never tighter than the area the AA band and stroke can touch
        expand = aa_region + outward_stroke_extension(shape.stroke_position, self.stroke_width)
        self.box: Box = aabb_for(shape.kind)(shape, expand)


class PreparedScene:
    """
    Per-render precomputation:
    - world size of one pixel and of the AA band
    - world coordinates of every column and row center
    - a PreparedShape (with expanded AABB) per shape, in painter's order
    """
    __slots__ = ('width', 'height', 'world_units_per_pixel', 'aa_region',
                 'world_width', 'world_height', 'world_xs', 'world_ys', 'shapes')

    def __init__(self, scene: Scene, aa_region_pixels: float = AA_REGION_PIXELS):
        w, h = scene.canvas_width, scene.canvas_height
        self.width = w
        self.height = h
        self.world_units_per_pixel = WORLD_SPAN / min(w, h)
        if not (math.isfinite(aa_region_pixels) and aa_region_pixels > 0.0):
            # Negative or non-finite widths collapse to a hard edge
            aa_region_pixels = 0.0
        self.aa_region = aa_region_pixels * self.world_units_per_pixel
        self.world_width = w * self.world_units_per_pixel
        self.world_height = h * self.world_units_per_pixel

        self.world_xs: List[float] = [world_coord(x, w, self.world_width) for x in range(w)]
        self.world_ys: List[float] = [world_coord(y, h, self.world_height) for y in range(h)]

        self.shapes: List[PreparedShape] = [
            PreparedShape(shape, self.world_units_per_pixel, self.aa_region)
            for shape in scene.shapes
        ]


def prepare_scene(scene: Scene, aa_region_pixels: float = AA_REGION_PIXELS) -> PreparedScene:
    return PreparedScene(scene, aa_region_pixels)
