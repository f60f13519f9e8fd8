# tests/conftest.py
import logging
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest

from utility_router.routing.geometry import WallFootprint


@pytest.fixture
def vertical_wall():
    """Wall footprint running along x=0 from y=0 to y=20."""
    return WallFootprint(x=-0.25, y=0.0, width=0.5, height=20.0, id="w_vertical")


@pytest.fixture
def horizontal_wall():
    """Wall footprint running along y=0 from x=0 to x=20."""
    return WallFootprint(x=0.0, y=-0.25, width=20.0, height=0.5, id="w_horizontal")


@pytest.fixture
def gapped_walls():
    """Two collinear walls along y=5 with a gap between x=-2 and x=2."""
    return [
        WallFootprint(x=-10.0, y=4.75, width=8.0, height=0.5, id="w_left"),
        WallFootprint(x=2.0, y=4.75, width=8.0, height=0.5, id="w_right"),
    ]


@pytest.fixture
def floorplan_dict():
    """Floorplan request as it would be read from JSON."""
    return {
        "walls": [
            {"id": "w1", "x": -0.25, "y": 0.0, "width": 0.5, "height": 20.0},
            {"id": "w2", "x": 0.0, "y": -0.25, "width": 20.0, "height": 0.5},
        ],
        "runs": [
            {
                "id": "outlet_1",
                "start": {"x": 0.0, "y": 0.0},
                "end": {"x": 0.0, "y": 12.0},
                "run_kind": "wire",
                "material": "12AWG",
                "metadata": {"circuit_id": "c1"},
            },
            {
                "id": "sink_supply",
                "start": {"x": 0.0, "y": 0.0},
                "end": {"x": 8.0, "y": 0.0},
                "run_kind": "pipe",
                "material": "copper",
            },
        ],
        "prices": {
            "wire": {"prices": {"12AWG": 0.70}},
        },
        "config": {"grid_size": 1.0},
    }


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
