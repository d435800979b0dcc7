#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

DEFAULT_PREFIX = 'render_ansi()'


class RenderArgumentError(Exception):
    """
    Base class for every argument rejected before rendering starts.

    `path` names the offending field, e.g. 'shapes[1].position.x'.
    """

    def __init__(self, path: str, detail: str, prefix: str = DEFAULT_PREFIX):
        self.path = path
        self.detail = detail
        super().__init__(f"{prefix} {path} {detail}")


class ArgumentTypeError(RenderArgumentError, TypeError):
    """A field holds the wrong primitive type."""


class ArgumentRangeError(RenderArgumentError, ValueError):
    """A numeric field is out of bounds, not integral, or has the wrong parity."""


class InvalidEnumError(RenderArgumentError, ValueError):
    """A tag is not one of the allowed values."""


class StructureError(RenderArgumentError, TypeError):
    """None or a list was supplied where a record was required."""


class UnimplementedShapeKindError(NotImplementedError):
    """A shape kind has no distance function. Validation should make this unreachable."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"no signed distance function for shape kind {kind!r}")
