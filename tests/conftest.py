"""Test configuration for iptcolor."""

import numpy as np
import pytest

from iptcolor import from_rgba8888


@pytest.fixture
def rng():
    """Seeded generator so sampled tests are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_words():
    """Packed colors from a spread of RGBA8888 inputs, including partial alpha."""
    codes = [
        0x000000FF, 0x808080FF, 0xFFFFFFFF, 0xFF0000FF, 0x00FF00FF,
        0x0000FFFF, 0x007F7FFF, 0xFF7F0080, 0x8F573BFF, 0xB991FF40,
    ]
    return [from_rgba8888(code) for code in codes]
