"""Infinite lines and bounded line segments.

All comparisons are exact; no tolerance is applied.  A point computed by
intersection is therefore not guaranteed to pass contains() on both lines.
"""
import math
from dataclasses import dataclass
from typing import Optional

from .angle import Angle
from .errors import GeometryError
from .types import Point, Vector, between


def _isect(p1: Point, d1: Vector, p2: Point, d2: Vector) -> Optional[Point]:
    """Intersection of (p1 + t*d1) and (p2 + s*d2), or None if parallel.

    Result is expressed from p1, so a point shared by both anchors comes back exactly.
    """
    det = d1.cross(d2)
    if det == 0:
        return None
    t = Vector(p2.x-p1.x, p2.y-p1.y).cross(d2)/det
    return Point(p1.x + t*d1.dx, p1.y + t*d1.dy)


# ============================================================
# Line
# ============================================================
@dataclass(frozen=True, eq=False)
class Line:
    """Infinite line through two distinct points.

    Equality is geometric: two Lines are equal if they describe the same
    set of points, whichever two points were used to build them.
    """
    a: Point
    b: Point

    def __post_init__(self):
        object.__setattr__(self, "a", Point(*self.a))
        object.__setattr__(self, "b", Point(*self.b))
        if self.a == self.b:
            raise GeometryError(f"Line needs two distinct points, got {self.a} twice")

    @property
    def direction(self) -> Vector:
        return self.b - self.a

    @property
    def angle(self) -> Angle:
        return self.direction.angle

    def contains(self, point) -> bool:
        return self.direction.cross(Point(*point) - self.a) == 0

    def is_parallel(self, other: "Line") -> bool:
        return self.direction.cross(other.direction) == 0

    def intersection(self, other: "Line") -> Optional[Point]:
        """The single crossing point, or None for parallel (including coincident) lines."""
        return _isect(self.a, self.direction, other.a, other.direction)

    def perpendicular(self, through) -> "Line":
        """Line through *through* at right angles to this one."""
        p = Point(*through)
        return Line(p, p + self.direction.perpendicular)

    def parallel(self, through) -> "Line":
        p = Point(*through)
        return Line(p, p + self.direction)

    def segment(self, p1, p2) -> "LineSegment":
        """Segment of this line between two points on it.

        Raises GeometryError if either point is not exactly on the line.
        """
        for p in (p1, p2):
            if not self.contains(p):
                raise GeometryError(f"Point {tuple(p)} is not on line through {self.a} and {self.b}")
        return LineSegment(p1, p2)

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.contains(other.a) and self.contains(other.b)

    __hash__ = None


# ============================================================
# LineSegment
# ============================================================
@dataclass(frozen=True)
class LineSegment:
    """Bounded line from endpoint a to endpoint b."""
    a: Point
    b: Point

    def __post_init__(self):
        object.__setattr__(self, "a", Point(*self.a))
        object.__setattr__(self, "b", Point(*self.b))

    @property
    def vector(self) -> Vector:
        return self.b - self.a

    @property
    def length(self) -> float:
        return self.vector.magnitude

    @property
    def midpoint(self) -> Point:
        return Point((self.a.x + self.b.x)/2, (self.a.y + self.b.y)/2)

    @property
    def is_degenerate(self) -> bool:
        """True for a zero-length segment, which defines no line."""
        return self.a == self.b

    @property
    def line(self) -> Line:
        """The infinite line through both endpoints. Raises GeometryError if zero-length."""
        return Line(self.a, self.b)

    @property
    def reversed(self) -> "LineSegment":
        return LineSegment(self.b, self.a)

    def contains(self, point) -> bool:
        p = Point(*point)
        if self.is_degenerate:
            return p == self.a
        return (self.vector.cross(p - self.a) == 0
                and between(p.x, self.a.x, self.b.x) and between(p.y, self.a.y, self.b.y))

    def intersection(self, other: "LineSegment") -> Optional[Point]:
        """Crossing point of the two segments' infinite lines.

        None if the lines are parallel or either segment is zero-length.
        """
        if self.is_degenerate or other.is_degenerate:
            return None
        return _isect(self.a, self.vector, other.a, other.vector)

    def crossing(self, other: "LineSegment") -> Optional[Point]:
        """Intersection point only if it lies within both segments."""
        p = self.intersection(other)
        if p is None:
            return None
        if not (between(p.x, self.a.x, self.b.x) and between(p.y, self.a.y, self.b.y)
                and between(p.x, other.a.x, other.b.x) and between(p.y, other.a.y, other.b.y)):
            return None
        return p

    def rotated_around_a(self, angle: Angle) -> "LineSegment":
        """Endpoint b rotated about endpoint a by *angle*; length preserved."""
        c, s = math.cos(angle.radians), math.sin(angle.radians)
        v = self.vector
        return LineSegment(self.a, Point(self.a.x + v.dx*c - v.dy*s, self.a.y + v.dx*s + v.dy*c))
