"""Tests for planar/coords.py: corners, edges, and the default coordinate system."""
import threading
import pytest
from planar import ConfigurationError, Point, Rect, Size
from planar.coords import (
    Axis, Corner, CoordinateSystem, Edge,
    configure, default_system, resolve,
)

Y_UP = CoordinateSystem.Y_UP
Y_DOWN = CoordinateSystem.Y_DOWN


# --- Edge / Corner ---

def test_edge_axis():
    assert Edge.MIN_X.axis is Axis.X
    assert Edge.MAX_Y.axis is Axis.Y


def test_edge_corners():
    assert Edge.MIN_X.corners == (Corner.MIN_X_MIN_Y, Corner.MIN_X_MAX_Y)
    assert Edge.MAX_Y.corners == (Corner.MIN_X_MAX_Y, Corner.MAX_X_MAX_Y)


def test_edge_opposite():
    assert Edge.MIN_X.opposite is Edge.MAX_X
    assert Edge.MAX_Y.opposite is Edge.MIN_Y


def test_edge_between_adjacent_corners():
    assert Edge.between(Corner.MIN_X_MIN_Y, Corner.MAX_X_MIN_Y) is Edge.MIN_Y
    assert Edge.between(Corner.MAX_X_MAX_Y, Corner.MAX_X_MIN_Y) is Edge.MAX_X


def test_edge_between_diagonal_raises():
    with pytest.raises(ValueError, match="not adjacent"):
        Edge.between(Corner.MIN_X_MIN_Y, Corner.MAX_X_MAX_Y)


def test_corner_edges():
    assert Corner.MAX_X_MIN_Y.x_edge is Edge.MAX_X
    assert Corner.MAX_X_MIN_Y.y_edge is Edge.MIN_Y
    assert Corner.from_edges(Edge.MIN_X, Edge.MAX_Y) is Corner.MIN_X_MAX_Y


def test_corner_from_wrong_axes_raises():
    with pytest.raises(ValueError, match="x-edge and a y-edge"):
        Corner.from_edges(Edge.MIN_Y, Edge.MIN_X)


def test_corner_opposite():
    assert Corner.MIN_X_MIN_Y.opposite is Corner.MAX_X_MAX_Y


def test_corner_resolves_on_rect():
    r = Rect(Point(1, 2), Size(3, 4))
    assert r.corner(Corner.MIN_X_MIN_Y) == (1, 2)
    assert r.corner(Corner.MAX_X_MAX_Y) == (4, 6)


# --- CoordinateSystem ---

def test_y_up_corner_order():
    assert Y_UP.corners == [Corner.MIN_X_MAX_Y, Corner.MAX_X_MAX_Y,
                            Corner.MAX_X_MIN_Y, Corner.MIN_X_MIN_Y]


def test_y_down_corner_order():
    assert Y_DOWN.corners == [Corner.MIN_X_MIN_Y, Corner.MAX_X_MIN_Y,
                              Corner.MAX_X_MAX_Y, Corner.MIN_X_MAX_Y]


def test_edge_order_follows_corners():
    assert Y_UP.edges == [Edge.MAX_Y, Edge.MAX_X, Edge.MIN_Y, Edge.MIN_X]
    assert Y_DOWN.edges == [Edge.MIN_Y, Edge.MAX_X, Edge.MAX_Y, Edge.MIN_X]


@pytest.mark.parametrize("top_left", list(Corner))
def test_every_orientation_enumerates_all(top_left):
    cs = CoordinateSystem(top_left)
    assert cs.corners[0] is top_left
    assert set(cs.corners) == set(Corner)
    assert set(cs.edges) == set(Edge)
    for i, e in enumerate(cs.edges):
        assert set(e.corners) == {cs.corners[i], cs.corners[(i + 1) % 4]}


def test_circle_runs_clockwise():
    assert Y_DOWN.circle_runs_clockwise
    assert not Y_UP.circle_runs_clockwise
    # mirrored in both axes behaves like screen coordinates
    assert CoordinateSystem(Corner.MAX_X_MAX_Y).circle_runs_clockwise
    assert not CoordinateSystem(Corner.MAX_X_MIN_Y).circle_runs_clockwise


# --- default / configure ---

def test_default_when_unconfigured():
    assert default_system() == Y_UP


def test_configure_sets_default():
    configure(Y_DOWN)
    assert default_system() == Y_DOWN


def test_configure_same_twice_is_noop():
    configure(Y_DOWN)
    assert configure(Y_DOWN) == Y_DOWN


def test_reconfigure_raises():
    configure(Y_DOWN)
    with pytest.raises(ConfigurationError, match="already fixed"):
        configure(Y_UP)


def test_configure_after_read_raises():
    default_system()
    with pytest.raises(ConfigurationError):
        configure(Y_DOWN)


def test_resolve_prefers_explicit():
    configure(Y_DOWN)
    assert resolve(Y_UP) == Y_UP
    assert resolve(None) == Y_DOWN


def test_default_changes_order_not_geometry():
    r = Rect(Point(0, 0), Size(4, 2))
    configure(Y_DOWN)
    assert r.points() == r.points(Y_DOWN)
    assert r.points() != r.points(Y_UP)
    assert set(r.points()) == set(r.points(Y_UP))


def test_concurrent_configure_fixes_one_system():
    systems = [Y_UP, Y_DOWN] * 8
    barrier = threading.Barrier(len(systems))
    fixed, refused = [], []

    def worker(system):
        barrier.wait()
        try:
            fixed.append(configure(system))
        except ConfigurationError:
            refused.append(system)

    threads = [threading.Thread(target=worker, args=(s,)) for s in systems]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    winner = default_system()
    assert fixed == [winner] * 8
    assert refused and all(s != winner for s in refused)
    assert len(fixed) + len(refused) == len(systems)
