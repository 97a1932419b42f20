"""
Pytest configuration file for DBAP tests.
"""

import math
import pytest
import numpy as np
from dbap.panning.utils import Speaker
from dbap.panning.config import PanningConfig


@pytest.fixture
def test_config():
    """Return a test configuration with predefined settings."""
    return PanningConfig(rolloff_db=6.0, blur=0.5, precision=np.float64)


@pytest.fixture
def square_speakers():
    """Four unit-weight speakers at the corners of a 10 x 10 square, source at the center."""
    src = (5.0, 5.0)
    corners = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
    return [
        Speaker(distance=math.hypot(x - src[0], y - src[1]), weight=1.0)
        for x, y in corners
    ]


@pytest.fixture
def uneven_speakers():
    """Speakers at different distances with different weights."""
    return [
        Speaker(distance=1.0, weight=1.0),
        Speaker(distance=2.0, weight=0.5),
        Speaker(distance=4.0, weight=1.0),
    ]
