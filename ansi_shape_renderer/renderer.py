#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
from typing import Optional

from .canvas import Canvas
from .config import RenderConfig
from .encoder import encode_canvas
from .preprocess import AA_REGION_PIXELS, prepare_scene
from .rasterizer import rasterize_shapes
from .scene import Scene
from .validate import validate_aa_region_pixels, validate_args

logger = logging.getLogger(__name__)


def render_scene(scene: Scene, config: Optional[RenderConfig] = None) -> str:
    """
    Render an already-validated scene to a string of ANSI art.

    Pipeline:
      1. Precompute pixel-center world coordinates and per-shape AABBs
      2. Paint the background pattern
      3. Composite shapes in painter's order (SDF -> fill/stroke alpha -> blend)
      4. Fold pixel row pairs into half-block cells for the chosen color depth

    Pure: the same scene and config always give the same output.
    """
    if config is None:
        config = RenderConfig()

    prepared = prepare_scene(scene, config.aa_region_pixels)

    canv = Canvas(scene.canvas_width, scene.canvas_height)
    canv.paint_background(scene.background)

    skipped = rasterize_shapes(canv, prepared, use_culling=config.use_culling)
    logger.debug("rendered %dx%d px, %d shapes, %d SDF evaluations culled",
                 scene.canvas_width, scene.canvas_height, len(scene.shapes), skipped)

    return encode_canvas(canv, config.color_depth)


def render_ansi(canvas_width, canvas_height, background, shapes,
                color_depth='truecolor', *, use_culling: bool = True,
                aa_region_pixels: float = AA_REGION_PIXELS) -> str:
    """
    Render shapes as ANSI art.

    Args:
        canvas_width: Width in pixels (= characters), 1-120.
        canvas_height: Height in pixels, 2-64 and even; two pixel rows per line.
        background: Background record or mapping with ink, paper and pattern.
        shapes: Sequence of Shape records or mappings, drawn in order.
        color_depth: 'truecolor', '256' or 'monochrome' (or a ColorDepth).
        use_culling: Skip SDF evaluation outside each shape's bounding box.
            Only affects speed.
        aa_region_pixels: Width of the anti-aliasing band in pixels, finite and >= 0.
            Zero gives hard edges.

    Returns:
        canvas_height / 2 lines joined by newlines.

    Raises:
        RenderArgumentError: for the first invalid argument, before any drawing.
    """
    scene, depth = validate_args(canvas_width, canvas_height, background, shapes, color_depth)
    aa_pixels = validate_aa_region_pixels(aa_region_pixels)
    config = RenderConfig(color_depth=depth, use_culling=use_culling,
                          aa_region_pixels=aa_pixels)
    return render_scene(scene, config)
