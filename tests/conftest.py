import pytest

from ansi_shape_renderer.scene import Background, Pattern

from helpers import BLUE, ORANGE


@pytest.fixture
def background() -> Background:
    return Background(ink=ORANGE, paper=BLUE, pattern=Pattern.BRETON)


@pytest.fixture
def shape_mapping() -> dict:
    """A valid shape as decoded from a JSON scene file."""
    return {
        'kind': 'circle',
        'size': 10,
        'position': {'x': 0, 'y': 0},
        'ink': {'red': 255, 'green': 165, 'blue': 0},
        'paper': {'red': 0, 'green': 0, 'blue': 255},
        'pattern': 'breton',
        'strokeColor': {'red': 255, 'green': 0, 'blue': 180},
        'strokePosition': 'center',
        'strokeWidth': 2.75,
    }
