"""Value primitives: points, vectors, sizes, and (a, b, c) triplets."""
import math
from typing import Generic, NamedTuple, Sequence, TypeVar

from .angle import Angle
from .coords import Corner, Edge
from .constants import FULL_ROTATION_RAD, HALF_ROTATION_RAD
from .errors import GeometryError

T = TypeVar("T")


# ============================================================
# Comparable Helpers
# ============================================================
def clipped(value, lo, hi):
    """*value* limited to [lo, hi]. No check that lo <= hi."""
    return max(lo, min(value, hi))


def between(value, lower, upper) -> bool:
    """True if value lies between the two limits, in either order, inclusive."""
    return min(lower, upper) <= value <= max(lower, upper)


def _wrap_pi(rad: float) -> float:
    """Wrap radians into (-pi, pi]."""
    rad = math.fmod(rad, FULL_ROTATION_RAD)
    if rad > HALF_ROTATION_RAD:
        rad -= FULL_ROTATION_RAD
    elif rad <= -HALF_ROTATION_RAD:
        rad += FULL_ROTATION_RAD
    return rad


# ============================================================
# Point / Vector / Size
# ============================================================
def _tuple_eq(a, b):
    """Plain tuple equality, except that a Point never equals a Vector."""
    if isinstance(b, (Point, Vector)) and type(a) is not type(b):
        return False
    return tuple.__eq__(a, b)


class Point(NamedTuple):
    """A position in the plane. Compares equal to a plain (x, y) tuple."""
    x: float
    y: float

    @property
    def vector(self) -> "Vector":
        return Vector(self.x, self.y)

    @property
    def rounded(self) -> "Point":
        return Point(round(self.x), round(self.y))

    def distance_to(self, p) -> float:
        return math.hypot(p[0]-self.x, p[1]-self.y)

    def clipped_to(self, rect) -> "Point":
        """Constrain x and y to within *rect*."""
        return Point(clipped(self.x, rect.min_x, rect.max_x), clipped(self.y, rect.min_y, rect.max_y))

    def position_in(self, rect) -> "Point":
        """Position relative to rect's origin."""
        return Point(self.x - rect.origin.x, self.y - rect.origin.y)

    def normalized_position_in(self, rect) -> "Point":
        """Position inside rect mapped to the 0-1 range on each axis."""
        p = self.position_in(rect)
        return Point(p.x / rect.size.width, p.y / rect.size.height)

    def is_at(self, line) -> bool:
        return line.contains(self)

    def angle(self, prev_pt, next_pt) -> Angle:
        """Signed angle at this vertex, turning from the direction to *next_pt* to the direction to *prev_pt*.

        Wrapped to (-pi, pi]; positive when prev_pt lies counter-clockwise of next_pt
        in a y-up reading.
        """
        to_prev = math.atan2(prev_pt[1]-self.y, prev_pt[0]-self.x)
        to_next = math.atan2(next_pt[1]-self.y, next_pt[0]-self.x)
        return Angle(_wrap_pi(to_prev - to_next))

    def __add__(self, v: "Vector") -> "Point":
        return Point(self.x + v[0], self.y + v[1])

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Point(self.x - other.dx, self.y - other.dy)
        return Vector(self.x - other[0], self.y - other[1])

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __eq__(self, other):
        return _tuple_eq(self, other)

    def __ne__(self, other):
        eq = _tuple_eq(self, other)
        return eq if eq is NotImplemented else not eq

    __hash__ = tuple.__hash__


class Vector(NamedTuple):
    """A directed displacement."""
    dx: float
    dy: float

    @classmethod
    def from_angle(cls, angle: Angle, magnitude: float = 1.0) -> "Vector":
        return cls(magnitude * math.cos(angle.radians), magnitude * math.sin(angle.radians))

    @property
    def point(self) -> Point:
        return Point(self.dx, self.dy)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    @property
    def angle(self) -> Angle:
        return Angle(math.atan2(self.dy, self.dx))

    @property
    def inversed(self) -> "Vector":
        return Vector(-self.dx, -self.dy)

    @property
    def perpendicular(self) -> "Vector":
        """Rotated a quarter turn towards +y (CCW in a y-up reading)."""
        return Vector(-self.dy, self.dx)

    @property
    def dominant_edge(self) -> Edge:
        """The edge this vector tends towards the most."""
        if abs(self.dx) > abs(self.dy):
            return Edge.MAX_X if self.dx > 0 else Edge.MIN_X
        return Edge.MAX_Y if self.dy > 0 else Edge.MIN_Y

    @property
    def dominant_corner(self) -> Corner:
        return Corner.from_edges(Edge.MAX_X if self.dx > 0 else Edge.MIN_X,
                                 Edge.MAX_Y if self.dy > 0 else Edge.MIN_Y)

    def cross(self, other) -> float:
        return self.dx*other[1] - self.dy*other[0]

    def dot(self, other) -> float:
        return self.dx*other[0] + self.dy*other[1]

    def line_through(self, point):
        """Line through *point* following this vector."""
        from .lines import Line
        point = Point(*point)
        return Line(point, point + self)

    def line_segment_from(self, point):
        """Segment from *point* whose length equals this vector's magnitude."""
        from .lines import LineSegment
        point = Point(*point)
        return LineSegment(point, point + self)

    def __add__(self, v: "Vector") -> "Vector":
        return Vector(self.dx + v[0], self.dy + v[1])

    def __sub__(self, v: "Vector") -> "Vector":
        return Vector(self.dx - v[0], self.dy - v[1])

    def __mul__(self, k: float) -> "Vector":
        return Vector(self.dx * k, self.dy * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vector":
        return Vector(self.dx / k, self.dy / k)

    def __neg__(self) -> "Vector":
        return self.inversed

    def __eq__(self, other):
        return _tuple_eq(self, other)

    def __ne__(self, other):
        eq = _tuple_eq(self, other)
        return eq if eq is NotImplemented else not eq

    __hash__ = tuple.__hash__


class Size(NamedTuple):
    width: float
    height: float

    @classmethod
    def square(cls, edges: float) -> "Size":
        return cls(edges, edges)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def swapped(self) -> "Size":
        return Size(self.height, self.width)

    def clipped_to(self, size) -> "Size":
        """Limit each dimension to *size*."""
        return Size(min(self.width, size[0]), min(self.height, size[1]))

    def __mul__(self, k) -> "Size":
        if isinstance(k, tuple):
            return Size(self.width * k[0], self.height * k[1])
        return Size(self.width * k, self.height * k)

    __rmul__ = __mul__

    def __truediv__(self, k) -> "Size":
        if isinstance(k, tuple):
            return Size(self.width / k[0], self.height / k[1])
        return Size(self.width / k, self.height / k)


# ============================================================
# Triplet
# ============================================================
class Triplet(NamedTuple, Generic[T]):
    """Three related values (a, b, c), e.g. a triangle's vertices or angles."""
    a: T
    b: T
    c: T

    @classmethod
    def from_sequence(cls, values: Sequence[T]) -> "Triplet[T]":
        if len(values) != 3:
            raise GeometryError(f"Triplet needs exactly 3 values, got {len(values)}")
        return cls(values[0], values[1], values[2])

    def as_list(self) -> list[T]:
        return [self.a, self.b, self.c]

    @property
    def sum(self) -> T:
        return self.a + self.b + self.c
