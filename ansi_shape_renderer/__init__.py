#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .scene import (Color, Position, Pattern, ShapeKind, StrokePosition,
                    Background, Shape, Scene)
from .color import ColorDepth, parse_hex_color
from .errors import (RenderArgumentError, ArgumentTypeError, ArgumentRangeError,
                     InvalidEnumError, StructureError, UnimplementedShapeKindError)
from .config import RenderConfig
from .canvas import Canvas
from .validate import validate_args
from .renderer import render_ansi, render_scene
