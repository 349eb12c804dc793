"""Pytest configuration and fixtures for mesh generation tests."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def uniform_params():
    """Reference uniform mesh: 5 x 7 cells on a 10 x 20 domain."""
    return {"nx": 5, "ny": 7, "width": 10.0, "height": 20.0}


@pytest.fixture
def nonuniform_params():
    """Non-uniform mesh with growing cells in x."""
    return {
        "face_locations_x": [0.0, 1.0, 3.0, 6.0],
        "face_locations_y": [0.0, 0.5, 1.0, 2.0, 4.0],
    }


@pytest.fixture
def parallelogram_params():
    """Tilted parallelogram (area 5.5), corners bottom-left, top-left, top-right, bottom-right."""
    return {
        "nx": 6,
        "ny": 4,
        "p1": [0.0, 0.0],
        "p2": [1.0, 2.0],
        "p3": [4.0, 2.5],
        "p4": [3.0, 0.5],
    }


@pytest.fixture
def trapezoid_params():
    """Tilted trapezoid with non-parallel left and right edges."""
    return {
        "nx": 5,
        "ny": 3,
        "p1": [0.0, 0.0],
        "p2": [0.5, 1.0],
        "p3": [2.0, 1.5],
        "p4": [3.0, 0.0],
    }
