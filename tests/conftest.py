"""Shared test fixtures for planar geometry tests."""
import pytest
import planar.coords as coords
from planar import CoordinateSystem, Triangle


@pytest.fixture(autouse=True)
def unset_default_system(monkeypatch):
    """Every test starts with no process default fixed."""
    monkeypatch.setattr(coords, "_default", None)


@pytest.fixture(params=[CoordinateSystem.Y_UP, CoordinateSystem.Y_DOWN], ids=["y_up", "y_down"])
def system(request):
    return request.param


@pytest.fixture
def right_tri():
    """3-4-5 right triangle, right angle at a, counter-clockwise."""
    return Triangle((0, 0), (4, 0), (0, 3))


@pytest.fixture
def scalene_tri():
    """Acute scalene triangle."""
    return Triangle((1, 1), (6, 2), (3, 7))


@pytest.fixture
def collinear_tri():
    return Triangle((0, 0), (1, 1), (2, 2))
