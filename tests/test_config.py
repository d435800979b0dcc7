"""RenderConfig defaults and terminal detection."""

import pytest

from ansi_shape_renderer.color import ColorDepth
from ansi_shape_renderer.config import RenderConfig


def test_defaults() -> None:
    config = RenderConfig()
    assert config.color_depth is ColorDepth.TRUECOLOR
    assert config.use_culling is True
    assert config.aa_region_pixels == pytest.approx(0.85)


def test_color_depth_accepts_tag() -> None:
    assert RenderConfig(color_depth='256').color_depth is ColorDepth.XTERM_256


@pytest.mark.parametrize(
    ("env", "depth"),
    [
        ({'COLORTERM': 'truecolor', 'TERM': 'xterm-256color'}, ColorDepth.TRUECOLOR),
        ({'COLORTERM': '24bit'}, ColorDepth.TRUECOLOR),
        ({'TERM': 'xterm-256color'}, ColorDepth.XTERM_256),
        ({}, ColorDepth.XTERM_256),
        ({'TERM': 'dumb', 'COLORTERM': 'truecolor'}, ColorDepth.MONOCHROME),
        ({'NO_COLOR': '1', 'COLORTERM': 'truecolor'}, ColorDepth.MONOCHROME),
    ],
)
def test_detect_terminal(env, depth) -> None:
    config = RenderConfig.detect_terminal(env)
    assert config.color_depth is depth
    assert config.use_culling is True
