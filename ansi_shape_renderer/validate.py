#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/validate.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
Eager validation of render arguments.

Records may be given as the typed classes from scene.py or as plain
mappings decoded from JSON. Mapping keys may be snake_case or the
camelCase names used by JSON scene files (e.g. 'strokeWidth').
Fields are checked in a fixed order and the first violation is raised.
"""

import math
from collections.abc import Mapping
from typing import Tuple

from .color import ColorDepth
from .errors import (DEFAULT_PREFIX, ArgumentRangeError, ArgumentTypeError,
                     InvalidEnumError, StructureError)
from .scene import (Background, Color, Pattern, Position, Scene, Shape,
                    ShapeKind, StrokePosition)

CANVAS_WIDTH_RANGE = (1, 120)
CANVAS_HEIGHT_RANGE = (2, 64)
SIZE_RANGE = (1, 100)
POSITION_RANGE = (-1000, 1000)
CHANNEL_RANGE = (0, 255)
STROKE_WIDTH_RANGE = (0.0, 10.0)


_CAMEL_KEYS = {
    'stroke_color': 'strokeColor',
    'stroke_position': 'strokePosition',
    'stroke_width': 'strokeWidth',
}


def _type_name(value) -> str:
    return type(value).__name__


def _field(record, name):
    """Read a field from a mapping or a typed record. Missing reads as None."""
    if isinstance(record, Mapping):
        if name in record:
            return record[name]
        return record.get(_CAMEL_KEYS.get(name, name))
    return getattr(record, name, None)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_int_in_range(num, lo: int, hi: int) -> bool:
    """True for an integral number within [lo, hi]. NaN and bool are never accepted."""
    if not _is_number(num):
        return False
    if isinstance(num, float) and not num.is_integer():
        return False
    return lo <= num <= hi


def _check_record(value, path: str, record_cls, prefix: str):
    if value is None:
        raise StructureError(path, "is 'null' not a plain object", prefix)
    if isinstance(value, (Mapping, record_cls)):
        return
    if isinstance(value, (list, tuple)):
        raise StructureError(path, "is 'array' not a plain object", prefix)
    raise ArgumentTypeError(path, f"is type '{_type_name(value)}' not 'mapping'", prefix)


def _check_int(value, path: str, bounds: Tuple[int, int], prefix: str) -> int:
    if not _is_number(value):
        raise ArgumentTypeError(path, f"is type '{_type_name(value)}' not 'number'", prefix)
    lo, hi = bounds
    if not is_int_in_range(value, lo, hi):
        raise ArgumentRangeError(path, f"must be an integer between {lo} and {hi}", prefix)
    return int(value)


def _check_enum(value, path: str, enum_cls, prefix: str):
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise ArgumentTypeError(path, f"is type '{_type_name(value)}' not 'str'", prefix)
    try:
        return enum_cls(value)
    except ValueError:
        names = [f"'{member.value}'" for member in enum_cls]
        if len(names) > 2:
            allowed = ', '.join(names[:-1]) + f", or {names[-1]}"
        else:
            allowed = ' or '.join(names)
        raise InvalidEnumError(path, f"must be one of {allowed}", prefix) from None


def validate_color(value, path: str, prefix: str = DEFAULT_PREFIX) -> Color:
    _check_record(value, path, Color, prefix)
    return Color(*(_check_int(_field(value, channel), f"{path}.{channel}", CHANNEL_RANGE, prefix)
                   for channel in Color._fields))


def validate_position(value, path: str, prefix: str = DEFAULT_PREFIX) -> Position:
    _check_record(value, path, Position, prefix)
    return Position(*(_check_int(_field(value, axis), f"{path}.{axis}", POSITION_RANGE, prefix)
                      for axis in Position._fields))


def validate_stroke_width(value, path: str, prefix: str = DEFAULT_PREFIX) -> float:
    if not _is_number(value):
        raise ArgumentTypeError(path, f"is type '{_type_name(value)}' not 'number'", prefix)
    lo, hi = STROKE_WIDTH_RANGE
    if not lo <= value <= hi:
        raise ArgumentRangeError(path, f"must be a number between {lo:g} and {hi:g}", prefix)
    return float(value)


def validate_aa_region_pixels(value, path: str = 'aa_region_pixels',
                              prefix: str = DEFAULT_PREFIX) -> float:
    """Anti-aliasing band width: a finite number of pixels, zero for hard edges."""
    if not _is_number(value):
        raise ArgumentTypeError(path, f"is type '{_type_name(value)}' not 'number'", prefix)
    if not (math.isfinite(value) and value >= 0.0):
        raise ArgumentRangeError(path, "must be a finite number >= 0", prefix)
    return float(value)


def validate_background(value, path: str = 'background', prefix: str = DEFAULT_PREFIX) -> Background:
    _check_record(value, path, Background, prefix)
    return Background(
        ink=validate_color(_field(value, 'ink'), f"{path}.ink", prefix),
        paper=validate_color(_field(value, 'paper'), f"{path}.paper", prefix),
        pattern=_check_enum(_field(value, 'pattern'), f"{path}.pattern", Pattern, prefix),
    )


def validate_shape(value, index: int, prefix: str = DEFAULT_PREFIX) -> Shape:
    path = f"shapes[{index}]"
    _check_record(value, path, Shape, prefix)

    def sub(name):
        return _field(value, name), f"{path}.{name}"

    kind = _check_enum(*sub('kind'), ShapeKind, prefix)
    size = _check_int(*sub('size'), SIZE_RANGE, prefix)
    position = validate_position(*sub('position'), prefix)
    ink = validate_color(*sub('ink'), prefix)
    paper = validate_color(*sub('paper'), prefix)
    pattern = _check_enum(*sub('pattern'), Pattern, prefix)
    stroke_color = validate_color(*sub('stroke_color'), prefix)
    stroke_position = _check_enum(*sub('stroke_position'), StrokePosition, prefix)
    stroke_width = validate_stroke_width(*sub('stroke_width'), prefix)

    return Shape(kind=kind, size=size, position=position, ink=ink, paper=paper,
                 pattern=pattern, stroke_color=stroke_color,
                 stroke_position=stroke_position, stroke_width=stroke_width)


def validate_shapes(value, prefix: str = DEFAULT_PREFIX) -> Tuple[Shape, ...]:
    if value is None:
        raise StructureError('shapes', "is 'null' not a list", prefix)
    if not isinstance(value, (list, tuple)):
        raise ArgumentTypeError('shapes', f"is type '{_type_name(value)}' not 'list'", prefix)
    return tuple(validate_shape(shape, i, prefix) for i, shape in enumerate(value))


def validate_args(canvas_width, canvas_height, background, shapes,
                  color_depth='truecolor', prefix: str = DEFAULT_PREFIX) -> Tuple[Scene, ColorDepth]:
    """
    Check every render argument and return a typed Scene and ColorDepth.
    Raises a RenderArgumentError subclass for the first invalid field.
    """
    width = _check_int(canvas_width, 'canvas_width', CANVAS_WIDTH_RANGE, prefix)
    height = _check_int(canvas_height, 'canvas_height', CANVAS_HEIGHT_RANGE, prefix)
    if height % 2 != 0:
        raise ArgumentRangeError('canvas_height', "must be an even number", prefix)
    bg = validate_background(background, 'background', prefix)
    shape_list = validate_shapes(shapes, prefix)
    depth = _check_enum(color_depth, 'color_depth', ColorDepth, prefix)
    return Scene(width, height, bg, shape_list), depth
