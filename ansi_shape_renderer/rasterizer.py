#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .canvas import Canvas
from .preprocess import PreparedScene, PreparedShape


def fill_alpha(distance: float, aa_region: float) -> float:
    """
    Coverage of a shape's fill at a signed distance from its edge.
    Ramps linearly across an AA band of width aa_region centered on the edge,
    so the edge itself (distance 0) gets exactly 0.5.
    """
    if aa_region <= 0.0:
        # Degenerate band: hard edge
        return 1.0 if distance <= 0.0 else 0.0
    half = aa_region / 2.0
    if distance >= half:
        return 0.0
    if distance <= -half:
        return 1.0
    a = (-distance + half) / aa_region
    return 0.0 if a < 0.0 else 1.0 if a > 1.0 else a


def stroke_alpha(distance: float, band_min: float, band_max: float,
                 stroke_width: float, aa_region: float) -> float:
    """Coverage of a stroke occupying the distance band [band_min, band_max]."""
    if stroke_width <= 0.0:
        return 0.0
    if distance < band_min:
        to_band = band_min - distance
    elif distance > band_max:
        to_band = distance - band_max
    else:
        return 1.0
    half = aa_region / 2.0
    if to_band >= half:
        return 0.0
    return 1.0 - to_band / half


def composite_stroke_over_fill(fill_color, fill_a: float, stroke_color, stroke_a: float):
    """
    Combine a shape's stroke (on top) and fill into one straight-alpha color.
    Returns ((r, g, b), alpha). The caller guarantees the combined alpha is > 0.
    """
    under = fill_a * (1.0 - stroke_a)
    alpha = stroke_a + under
    r = (stroke_color[0] * stroke_a + fill_color[0] * under) / alpha
    g = (stroke_color[1] * stroke_a + fill_color[1] * under) / alpha
    b = (stroke_color[2] * stroke_a + fill_color[2] * under) / alpha
    return (r, g, b), alpha


def shade_pixel(canvas: Canvas, x: int, y: int, wx: float, wy: float,
                ps: PreparedShape, aa_region: float) -> bool:
    """
    Blend one shape into pixel (x, y) whose center is at world (wx, wy).
    Returns False when the shape does not touch the pixel.
    """
    d = ps.sdf(wx - ps.cx, wy - ps.cy, ps.size)
    fa = fill_alpha(d, aa_region)
    sa = stroke_alpha(d, ps.band_min, ps.band_max, ps.stroke_width, aa_region)
    if fa == 0.0 and sa == 0.0:
        return False

    shape = ps.shape
    fill = shape.pattern.pick(x, y, shape.ink, shape.paper)
    color, alpha = composite_stroke_over_fill(fill, fa, shape.stroke_color, sa)
    canvas.blend_pixel(x, y, color, alpha)
    return True


def rasterize_shapes(canvas: Canvas, prepared: PreparedScene, use_culling: bool = True) -> int:
    """
    Composite every shape onto `canvas` (already holding the background),
    in row-major pixel order and painter's shape order.

    With culling on, shapes whose AABB misses a pixel are skipped without
    evaluating their SDF. The output is identical either way.
    Returns the number of SDF evaluations skipped by culling.
    """
    aa_region = prepared.aa_region
    world_xs = prepared.world_xs
    shapes = prepared.shapes
    skipped = 0

    for y, wy in enumerate(prepared.world_ys):
        if use_culling:
            # Row-level cull on the Y extent keeps painter's order
            row_shapes = [ps for ps in shapes if ps.box.min_y <= wy <= ps.box.max_y]
            skipped += (len(shapes) - len(row_shapes)) * canvas.w
        else:
            row_shapes = shapes
        if not row_shapes:
            continue

        for x, wx in enumerate(world_xs):
            for ps in row_shapes:
                if use_culling and not ps.box.contains(wx, wy):
                    skipped += 1
                    continue
                shade_pixel(canvas, x, y, wx, wy, ps, aa_region)

    return skipped
