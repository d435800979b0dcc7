#
# PROJECT: ansi-shape-renderer
# MODULE: ansi_shape_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass

from .color import ColorDepth
from .preprocess import AA_REGION_PIXELS


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    color_depth: ColorDepth = ColorDepth.TRUECOLOR
    use_culling: bool = True
    # Tunable visual parameter, not a correctness constant
    aa_region_pixels: float = AA_REGION_PIXELS

    def __post_init__(self):
        if not isinstance(self.color_depth, ColorDepth):
            self.color_depth = ColorDepth(self.color_depth)

    @classmethod
    def detect_terminal(cls, environ=None) -> 'RenderConfig':
        """
        Guess the terminal's color support and return a default config.
        Checks NO_COLOR, TERM and COLORTERM environment variables.
        """
        env = os.environ if environ is None else environ
        term = env.get('TERM', '').lower()
        colorterm = env.get('COLORTERM', '').lower()

        if 'NO_COLOR' in env or term in ('dumb', 'unknown'):
            depth = ColorDepth.MONOCHROME
        elif colorterm in ('truecolor', '24bit'):
            depth = ColorDepth.TRUECOLOR
        else:
            depth = ColorDepth.XTERM_256

        return cls(color_depth=depth, use_culling=True)
