#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from enum import Enum

from .scene import Color


class ColorDepth(Enum):
    TRUECOLOR = 'truecolor'    # 24-bit escapes
    XTERM_256 = '256'          # 6x6x6 cube of the xterm-256 palette
    MONOCHROME = 'monochrome'  # no escapes, glyph choice only


ESC = '\x1b'
RESET = ESC + '[0m'

# The 6x6x6 color cube occupies indices 16-231.
_CUBE_BASE = 16
_CUBE_STEP = 51  # 0, 51, 102, 153, 204, 255

# Integer luma weights, summing to 256.
_LUMA_R = 54
_LUMA_G = 183
_LUMA_B = 19
BRIGHT_THRESHOLD = 128


def parse_hex_color(hex_str):
    """
    Parse a hex color string to a Color.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: Color with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return Color(r, g, b)
    except ValueError:
        return None


def _cube_level(v: int) -> int:
    return int(v / _CUBE_STEP + 0.5)


def rgb_to_cube_index(color: Color) -> int:
    """Map a color onto the 216-color cube of the xterm-256 palette."""
    return (_CUBE_BASE
            + 36 * _cube_level(color.red)
            + 6 * _cube_level(color.green)
            + _cube_level(color.blue))


def luminance(color: Color) -> int:
    """Perceptual luma in [0, 255] using integer arithmetic only."""
    return (_LUMA_R * color.red + _LUMA_G * color.green + _LUMA_B * color.blue) >> 8


def is_bright(color: Color) -> bool:
    return luminance(color) > BRIGHT_THRESHOLD


def ansi_truecolor(upper: Color, lower: Color) -> str:
    """Escape codes painting `upper` as foreground and `lower` as background."""
    return (f"{ESC}[38;2;{upper.red};{upper.green};{upper.blue}m"
            f"{ESC}[48;2;{lower.red};{lower.green};{lower.blue}m")


def ansi_256(upper: Color, lower: Color) -> str:
    """Same as ansi_truecolor, quantized to indexed xterm-256 colors."""
    return (f"{ESC}[38;5;{rgb_to_cube_index(upper)}m"
            f"{ESC}[48;5;{rgb_to_cube_index(lower)}m")
