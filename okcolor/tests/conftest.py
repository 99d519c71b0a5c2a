"""Shared fixtures for okcolor tests."""

import numpy as np
import pytest

from okcolor import linear_rgb_to_oklab

# Corners of the linear sRGB cube
LINEAR_SRGB_COLORS = {
    'red': (1.0, 0.0, 0.0),
    'green': (0.0, 1.0, 0.0),
    'blue': (0.0, 0.0, 1.0),
    'cyan': (0.0, 1.0, 1.0),
    'magenta': (1.0, 0.0, 1.0),
    'yellow': (1.0, 1.0, 0.0),
    'white': (1.0, 1.0, 1.0),
    'black': (0.0, 0.0, 0.0),
    'grey': (0.5, 0.5, 0.5),
}


@pytest.fixture(params=sorted(LINEAR_SRGB_COLORS))
def named_oklab(request):
    """(name, (L, a, b)) for each named linear sRGB color."""
    r, g, b = LINEAR_SRGB_COLORS[request.param]
    return request.param, tuple(float(c) for c in linear_rgb_to_oklab(r, g, b))


@pytest.fixture
def random_srgb():
    """Reproducible in-gamut sRGB colors, shape (500, 3)."""
    rng = np.random.default_rng(42)
    return rng.random((500, 3))


@pytest.fixture
def hue_directions():
    """Unit (a_, b_) vectors for hues every 5 degrees."""
    h = np.deg2rad(np.arange(0.0, 360.0, 5.0))
    return np.cos(h), np.sin(h)
