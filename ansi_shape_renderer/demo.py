#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import json
import logging
import sys
from collections.abc import Mapping

from .color import ColorDepth, parse_hex_color
from .config import RenderConfig
from .errors import RenderArgumentError
from .renderer import render_scene
from .scene import Background, Color, Pattern, Position, Shape, ShapeKind, StrokePosition
from .validate import validate_args

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 20


def build_demo_scene():
    """A background plus one of each shape kind, used when no scene file is given."""
    background = Background(ink=Color(14, 14, 44), paper=Color(26, 26, 46),
                            pattern=Pattern.BRETON)
    shapes = [
        Shape(kind=ShapeKind.SQUARE, size=2, position=Position(3, 1),
              ink=Color(0, 170, 255), paper=Color(0, 120, 200), pattern=Pattern.PINSTRIPE,
              stroke_color=Color(255, 255, 255), stroke_position=StrokePosition.INSIDE,
              stroke_width=1.0),
        Shape(kind=ShapeKind.CIRCLE, size=3, position=Position(-2, 0),
              ink=Color(255, 136, 0), paper=Color(255, 165, 0), pattern=Pattern.BRETON,
              stroke_color=Color(141, 5, 130), stroke_position=StrokePosition.CENTER,
              stroke_width=1.5),
        Shape(kind=ShapeKind.TRIANGLE, size=2, position=Position(1, -1),
              ink=Color(208, 221, 20), paper=Color(208, 221, 20), pattern=Pattern.BRETON,
              stroke_color=Color(0, 0, 0), stroke_position=StrokePosition.OUTSIDE,
              stroke_width=0.0),
    ]
    return background, shapes


def load_scene_file(path):
    """
    Read a JSON scene: {"background": {...}, "shapes": [...]} with optional
    "width", "height" and "colorDepth" keys. Values are validated later.
    """
    with open(path, 'r') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at top level")
    return data


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
examples:
  %(prog)s                                   Demo scene, autodetected color depth
  %(prog)s scene.json                        Render a JSON scene file
  %(prog)s --width 60 --height 32            Bigger canvas
  %(prog)s --color-depth 256 --no-cull       Quantized colors, no AABB culling
  %(prog)s --mono                            Monochrome block glyphs only
  %(prog)s --bg-ink #FF8800 --bg-paper #1A1A2E --bg-pattern pinstripe
"""
    parser = argparse.ArgumentParser(
        description="Render circles, squares and triangles as ANSI art",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("scene", nargs='?', help="Path to a JSON scene file")
    parser.add_argument("--width", type=int, default=None,
                        help=f"Canvas width in pixels, 1-120 (default: {DEFAULT_WIDTH})")
    parser.add_argument("--height", type=int, default=None,
                        help=f"Canvas height in pixels, even, 2-64 (default: {DEFAULT_HEIGHT})")
    parser.add_argument("--color-depth", choices=[d.value for d in ColorDepth], default=None,
                        help="Color depth (default: detected from the terminal)")
    parser.add_argument("--mono", action="store_true",
                        help="Force monochrome output")
    parser.add_argument("--no-cull", action="store_true",
                        help="Disable bounding-box culling")
    parser.add_argument("--bg-ink", default=None,
                        help="Background ink color in hex #RRGGBB")
    parser.add_argument("--bg-paper", default=None,
                        help="Background paper color in hex #RRGGBB")
    parser.add_argument("--bg-pattern", choices=[p.value for p in Pattern], default=None,
                        help="Background stripe pattern")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug information to stderr")
    return parser.parse_args(argv)


def _override_background(background, args):
    """Apply --bg-* overrides to a Background record or a JSON mapping."""
    overrides = {}
    for name, raw in (('ink', args.bg_ink), ('paper', args.bg_paper)):
        if raw is None:
            continue
        rgb = parse_hex_color(raw)
        if rgb is None:
            raise ValueError(f"--bg-{name}: '{raw}' is not a #RRGGBB color")
        overrides[name] = rgb
    if args.bg_pattern is not None:
        overrides['pattern'] = Pattern(args.bg_pattern)
    if not overrides:
        return background
    if isinstance(background, Background):
        fields = {'ink': background.ink, 'paper': background.paper,
                  'pattern': background.pattern}
    elif isinstance(background, Mapping):
        fields = dict(background)
    else:
        # Left for validate_args to report
        return background
    fields.update(overrides)
    return fields


def build_config(args, file_depth=None) -> RenderConfig:
    config = RenderConfig.detect_terminal()
    if file_depth is not None:
        config.color_depth = file_depth
    if args.color_depth is not None:
        config.color_depth = ColorDepth(args.color_depth)
    if args.mono:
        config.color_depth = ColorDepth.MONOCHROME
    if args.no_cull:
        config.use_culling = False
    return config


def run(args) -> str:
    """Resolve the scene and config from parsed arguments and render it."""
    if args.scene:
        data = load_scene_file(args.scene)
        background = data.get('background')
        shapes = data.get('shapes', [])
        width = data.get('width', DEFAULT_WIDTH)
        height = data.get('height', DEFAULT_HEIGHT)
        file_depth = data.get('colorDepth')
    else:
        background, shapes = build_demo_scene()
        width, height, file_depth = DEFAULT_WIDTH, DEFAULT_HEIGHT, None

    if args.width is not None:
        width = args.width
    if args.height is not None:
        height = args.height
    background = _override_background(background, args)

    scene, depth = validate_args(width, height, background, shapes,
                                 file_depth if file_depth is not None else 'truecolor')
    config = build_config(args, depth if file_depth is not None else None)
    logger.debug("color depth %s, culling %s", config.color_depth.value,
                 'on' if config.use_culling else 'off')
    return render_scene(scene, config)


def main(argv=None) -> int:
    """Entry point. Returns a process exit status."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        output = run(args)
    except (RenderArgumentError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    print(output)
    return 0
