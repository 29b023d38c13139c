import pytest

from fractals.base import Viewport


@pytest.fixture
def live_viewport():
    # The classic 80x24 terminal framing of the main cardioid.
    return Viewport(center_x=-0.5, center_y=0.0, scale=0.015, aspect_ratio=2.11)
