import matplotlib

matplotlib.use("Agg")

import pytest

from mapboot.view.mapview import DisplayHost, DisplaySurface


@pytest.fixture
def host():
    return DisplayHost([DisplaySurface("map", 800, 600)])
