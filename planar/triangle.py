"""Triangles: sides, angles, bisectors, altitudes, centers, and classification.

Everything is derived on demand from the three vertices (a, b, c).  Side
A is opposite vertex a (b -> c), side B opposite b (c -> a), side C
opposite c (a -> b).

Constructions that need two lines to cross (circumcenter, incenter,
orthocenter, and altitudes or bisectors with a zero-length base) return
None for degenerate input instead of raising.

Classification uses exact float comparison: is_right rounds each angle
to whole degrees, every other predicate compares raw values.
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional

from .angle import Angle
from .constants import RIGHT_ANGLE_DEG, TRIANGLE_EDGES
from .coords import CoordinateSystem
from .lines import LineSegment
from .rect import Rect
from .shape import Polygon
from .types import Point, Triplet

log = logging.getLogger(__name__)


def _altitude(vertex: Point, side: LineSegment) -> Optional[LineSegment]:
    """Segment from the foot on *side*'s line up to *vertex*."""
    if side.is_degenerate:
        return None
    base = side.line
    foot = base.perpendicular(vertex).intersection(base)
    if foot is None or foot == vertex:
        return None
    return LineSegment(foot, vertex)


@dataclass(frozen=True)
class Triangle(Polygon):
    a: Point
    b: Point
    c: Point

    def __post_init__(self):
        for name in ("a", "b", "c"):
            object.__setattr__(self, name, Point(*getattr(self, name)))

    @classmethod
    def from_triplet(cls, vertices: Triplet) -> "Triangle":
        return cls(vertices.a, vertices.b, vertices.c)

    @property
    def vertices(self) -> Triplet[Point]:
        return Triplet(self.a, self.b, self.c)

    @property
    def is_degenerate(self) -> bool:
        """True if the vertices are collinear (exact zero signed area)."""
        return (self.b - self.a).cross(self.c - self.a) == 0

    # ============================================================
    # Sides
    # ============================================================
    @property
    def side_a(self) -> LineSegment:
        return LineSegment(self.b, self.c)

    @property
    def side_b(self) -> LineSegment:
        return LineSegment(self.c, self.a)

    @property
    def side_c(self) -> LineSegment:
        return LineSegment(self.a, self.b)

    @property
    def sides(self) -> Triplet[LineSegment]:
        return Triplet(self.side_a, self.side_b, self.side_c)

    # ============================================================
    # Angles
    # ============================================================
    @property
    def _signed_angles(self) -> Triplet[Angle]:
        # all positive for a counter-clockwise (y-up) vertex order, all negative for clockwise
        return Triplet(self.a.angle(self.c, self.b),
                       self.b.angle(self.a, self.c),
                       self.c.angle(self.b, self.a))

    @property
    def angles(self) -> Triplet[Angle]:
        """Interior angles, computed together.

        If any raw angle is negative all three are inverted, so the set is
        either entirely as computed or entirely flipped.
        """
        raw = self._signed_angles
        if any(t.radians < 0 for t in raw):
            return Triplet(raw.a.inversed, raw.b.inversed, raw.c.inversed)
        return raw

    @property
    def angle_a(self) -> Angle:
        return self.angles.a

    @property
    def angle_b(self) -> Angle:
        return self.angles.b

    @property
    def angle_c(self) -> Angle:
        return self.angles.c

    # ============================================================
    # Bisectors / Altitudes
    # ============================================================
    @property
    def angle_bisector_a(self) -> Optional[LineSegment]:
        """Side a -> b turned about a by half of angle A."""
        base = LineSegment(self.a, self.b)
        return None if base.is_degenerate else base.rotated_around_a(0.5 * self._signed_angles.a)

    @property
    def angle_bisector_b(self) -> Optional[LineSegment]:
        base = LineSegment(self.b, self.c)
        return None if base.is_degenerate else base.rotated_around_a(0.5 * self._signed_angles.b)

    @property
    def angle_bisector_c(self) -> Optional[LineSegment]:
        base = LineSegment(self.c, self.a)
        return None if base.is_degenerate else base.rotated_around_a(0.5 * self._signed_angles.c)

    @property
    def angle_bisectors(self) -> Triplet[Optional[LineSegment]]:
        return Triplet(self.angle_bisector_a, self.angle_bisector_b, self.angle_bisector_c)

    @property
    def altitude_a(self) -> Optional[LineSegment]:
        """From the foot on side A's line to vertex a; None if a lies on that line."""
        return _altitude(self.a, self.side_a)

    @property
    def altitude_b(self) -> Optional[LineSegment]:
        return _altitude(self.b, self.side_b)

    @property
    def altitude_c(self) -> Optional[LineSegment]:
        return _altitude(self.c, self.side_c)

    @property
    def altitudes(self) -> Triplet[Optional[LineSegment]]:
        return Triplet(self.altitude_a, self.altitude_b, self.altitude_c)

    # ============================================================
    # Classification
    # ============================================================
    @property
    def _side_lengths(self) -> tuple[float, float, float]:
        return (self.side_a.length, self.side_b.length, self.side_c.length)

    @property
    def is_equilateral(self) -> bool:
        la, lb, lc = self._side_lengths
        return la == lb and la == lc

    @property
    def is_isosceles(self) -> bool:
        """Exactly two sides equal."""
        la, lb, lc = self._side_lengths
        return (la == lb and la != lc) or (la == lc and la != lb) or (lb == lc and la != lb)

    @property
    def is_scalene(self) -> bool:
        la, lb, lc = self._side_lengths
        return la != lb and la != lc and lb != lc

    @property
    def is_right(self) -> bool:
        """One angle is 90° once rounded to whole degrees."""
        return any(round(t.degrees) == RIGHT_ANGLE_DEG for t in self.angles)

    @property
    def is_oblique(self) -> bool:
        return not self.is_right

    @property
    def is_acute(self) -> bool:
        return all(t.degrees < RIGHT_ANGLE_DEG for t in self.angles)

    @property
    def is_obtuse(self) -> bool:
        """Some angle is over 90°. Not the complement of is_acute: a right triangle is neither."""
        return any(t.degrees > RIGHT_ANGLE_DEG for t in self.angles)

    # ============================================================
    # Centers
    # ============================================================
    @property
    def centroid(self) -> Point:
        """Mean of the three vertices."""
        return Point((self.a.x + self.b.x + self.c.x) / 3.0,
                     (self.a.y + self.b.y + self.c.y) / 3.0)

    @property
    def circumcenter(self) -> Optional[Point]:
        """Crossing of the perpendicular bisectors of sides A and B."""
        if self.is_degenerate:
            log.debug("circumcenter undefined for collinear %r", self)
            return None
        sa, sb = self.side_a, self.side_b
        return sa.line.perpendicular(sa.midpoint).intersection(sb.line.perpendicular(sb.midpoint))

    @property
    def incenter(self) -> Optional[Point]:
        """Crossing of the bisectors of angles A and B."""
        if self.is_degenerate:
            log.debug("incenter undefined for collinear %r", self)
            return None
        ba, bb = self.angle_bisector_a, self.angle_bisector_b
        if ba is None or bb is None:
            return None
        return ba.intersection(bb)

    @property
    def orthocenter(self) -> Optional[Point]:
        """Crossing of the altitudes from a and b."""
        if self.is_degenerate:
            log.debug("orthocenter undefined for collinear %r", self)
            return None
        ha, hb = self.altitude_a, self.altitude_b
        if ha is None or hb is None:
            return None
        return ha.intersection(hb)

    # ============================================================
    # Shape
    # ============================================================
    @property
    def min_x(self) -> float:
        return min(self.a.x, self.b.x, self.c.x)

    @property
    def max_x(self) -> float:
        return max(self.a.x, self.b.x, self.c.x)

    @property
    def min_y(self) -> float:
        return min(self.a.y, self.b.y, self.c.y)

    @property
    def max_y(self) -> float:
        return max(self.a.y, self.b.y, self.c.y)

    @property
    def mid_x(self) -> float:
        return self.min_x + (self.max_x - self.min_x)/2.0

    @property
    def mid_y(self) -> float:
        return self.min_y + (self.max_y - self.min_y)/2.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def perimeter(self) -> float:
        return sum(self._side_lengths)

    @property
    def area(self) -> float:
        """Heron's formula."""
        la, lb, lc = self._side_lengths
        s = (la + lb + lc) / 2.0
        return math.sqrt(max(0.0, s*(s-la)*(s-lb)*(s-lc)))

    @property
    def center(self) -> Point:
        return self.centroid

    @property
    def bounding_rect(self) -> Rect:
        return Rect.from_extremes(self.min_x, self.min_y, self.max_x, self.max_y)

    def contains(self, point) -> bool:
        """Edge-function test: inside iff the point is strictly on the same side of all three sides.

        Points on an edge, and every point of a degenerate triangle, are not contained.
        """
        px, py = point[0], point[1]

        def plane(v1: Point, v2: Point) -> float:
            return (v1.x - px)*(v2.y - py) - (v2.x - px)*(v1.y - py)

        d = (plane(self.a, self.b), plane(self.b, self.c), plane(self.c, self.a))
        if 0 in d:
            return False
        return (d[0] > 0) == (d[1] > 0) == (d[2] > 0)

    # ============================================================
    # Polygon
    # ============================================================
    @property
    def edge_count(self) -> int:
        return TRIANGLE_EDGES

    def points(self, system: Optional[CoordinateSystem] = None) -> list[Point]:
        """Vertices in (a, b, c) order; the order is positional, not axis-dependent."""
        return [self.a, self.b, self.c]

    def line_segments(self, system: Optional[CoordinateSystem] = None) -> list[LineSegment]:
        return [self.side_c, self.side_a, self.side_b]
