"""Tests for planar/circle.py: circle metrics and perimeter sampling."""
import math
import pytest
from planar import (
    Angle, Circle, CoordinateSystem, GeometryError, Point, Rect, RotationDirection, Size, Square,
)


def close(p, q, tol=1e-12):
    return abs(p[0] - q[0]) < tol and abs(p[1] - q[1]) < tol


def screen_signed_area(points, system):
    """Shoelace sum after mapping *points* to y-down screen axes; > 0 is visually clockwise."""
    sx = 1 if system.x_grows_right else -1
    sy = 1 if system.y_grows_down else -1
    pts = [(sx*x, sy*y) for x, y in points]
    return sum(pts[i][0]*pts[(i+1) % len(pts)][1] - pts[(i+1) % len(pts)][0]*pts[i][1]
               for i in range(len(pts)))


# --- Construction ---

def test_negative_radius_raises():
    with pytest.raises(GeometryError, match="radius"):
        Circle((0, 0), -1)


def test_zero_radius_allowed():
    c = Circle((1, 1), 0)
    assert c.area == 0
    assert c.contains((1, 1))


def test_from_diameter():
    c = Circle.from_diameter((2, 3), 10)
    assert c.radius == 5
    assert c.center == (2, 3)


def test_inscribed_in_square():
    c = Circle.inscribed_in_square(Square((1, 1), 4))
    assert c.center == (3, 3)
    assert c.radius == 2


def test_inscribed_in_rect():
    c = Circle.inscribed_in_rect(Rect(Point(0, 0), Size(10, 4)))
    assert c.center == (5, 2)
    assert c.radius == 2


def test_center_and_radius_are_read_only():
    c = Circle((0, 0), 1)
    with pytest.raises(AttributeError):
        c.radius = 2


# --- Metrics ---

def test_metrics():
    c = Circle((1, 2), 3)
    assert c.diameter == 6
    assert c.circumference == 6 * math.pi
    assert c.perimeter == c.circumference
    assert c.area == 9 * math.pi
    assert (c.min_x, c.max_x, c.min_y, c.max_y) == (-2, 4, -1, 5)
    assert (c.mid_x, c.mid_y) == (1, 2)
    assert (c.width, c.height) == (6, 6)


def test_bounding_rect():
    assert Circle((1, 2), 3).bounding_rect == Rect(Point(-2, -1), Size(6, 6))


def test_bounding_square():
    sq = Circle((1, 1), 2).square
    assert sq.origin == (-1, -1)
    assert sq.edges == 4


def test_contains_boundary():
    c = Circle((0, 0), 5)
    assert c.contains((3, 4))
    assert c.contains((0, 0))
    assert not c.contains((3, 4.01))


# --- Comparison ---

def test_equality_is_by_radius():
    assert Circle((0, 0), 2) == Circle((5, 5), 2)
    assert Circle((0, 0), 2) != Circle((0, 0), 3)
    assert hash(Circle((0, 0), 2)) == hash(Circle((9, 9), 2))


def test_identical_compares_center():
    assert Circle((0, 0), 2).identical(Circle((0, 0), 2))
    assert not Circle((0, 0), 2).identical(Circle((5, 5), 2))


def test_ordering():
    small, mid, big = Circle((9, 9), 1), Circle((0, 0), 2), Circle((4, 4), 3)
    assert small < mid < big
    assert big >= mid
    assert sorted([big, small, mid]) == [small, mid, big]


# --- Perimeter sampling ---

def test_sample_count():
    c = Circle((0, 0), 1)
    assert len(c.points_along_perimeter(8)) == 8
    assert len(c.points_along_perimeter(2.5)) == 3
    assert c.points_along_perimeter(0) == []
    assert c.points_along_perimeter(-3) == []


def test_samples_lie_on_circle(system):
    c = Circle((3, -2), 5)
    for p in c.points_along_perimeter(7, Angle.from_degrees(33), system=system):
        assert abs(p.distance_to(c.center) - 5) < 1e-12


def test_first_sample_at_start_angle(system):
    c = Circle((0, 0), 2)
    pts = c.points_along_perimeter(1, Angle.from_degrees(90), system=system)
    assert len(pts) == 1
    assert close(pts[0], (0, 2))


def test_clockwise_y_up():
    pts = Circle((0, 0), 1).points_along_perimeter(4, system=CoordinateSystem.Y_UP)
    for p, q in zip(pts, [(1, 0), (0, -1), (-1, 0), (0, 1)]):
        assert close(p, q)


def test_clockwise_y_down():
    pts = Circle((0, 0), 1).points_along_perimeter(4, system=CoordinateSystem.Y_DOWN)
    for p, q in zip(pts, [(1, 0), (0, 1), (-1, 0), (0, -1)]):
        assert close(p, q)


@pytest.mark.parametrize("rotating, sign", [
    (RotationDirection.CLOCKWISE, 1),
    (RotationDirection.COUNTER_CLOCKWISE, -1),
])
def test_rotation_is_visual(system, rotating, sign):
    pts = Circle((0, 0), 1).points_along_perimeter(12, rotating=rotating, system=system)
    assert sign * screen_signed_area(pts, system) > 0


def test_sampling_uses_default_system():
    c = Circle((0, 0), 1)
    assert c.points_along_perimeter(6) == c.points_along_perimeter(6, system=CoordinateSystem.Y_UP)


def test_samples_are_float_points():
    p = Circle((0, 0), 1).points_along_perimeter(3)[0]
    assert isinstance(p, Point)
    assert type(p.x) is float


def test_four_samples_quarter_turn_apart():
    c = Circle((2, 2), 5)
    pts = c.points_along_perimeter(4, Angle(0))
    assert len(pts) == 4
    for p, q in zip(pts, pts[1:] + pts[:1]):
        assert abs(p.distance_to(c.center) - 5) < 1e-12
        # chord of a quarter turn
        assert abs(p.distance_to(q) - 5 * math.sqrt(2)) < 1e-12


def test_equality_is_exact_and_precision_fragile():
    # radii that are equal on paper but not in binary floating point
    assert Circle((0, 0), 0.1 + 0.2) != Circle((0, 0), 0.3)


def test_bounding_rect_extremes_match_for_inexact_decimals():
    c = Circle((0, 0.2), 2.1)
    br = c.bounding_rect
    assert (br.min_x, br.max_x, br.min_y, br.max_y) == (c.min_x, c.max_x, c.min_y, c.max_y)
    top = (0, c.max_y)
    assert c.contains(top)
    assert br.contains(top)
