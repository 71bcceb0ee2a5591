"""Axis-aligned rectangles and squares."""
from dataclasses import dataclass, field
from typing import Optional

from .constants import RECT_EDGES
from .coords import CoordinateSystem, Corner, Edge, resolve
from .errors import GeometryError
from .lines import LineSegment
from .shape import Polygon
from .types import Point, Size


@dataclass(frozen=True)
class Rect(Polygon):
    """Axis-aligned rectangle from an origin and a size.

    Negative sizes are allowed; extremities are always reported standardised
    (min_x <= max_x, min_y <= max_y).
    """
    origin: Point
    size: Size
    # corner opposite origin; origin + size rounds, so from_extremes pins it
    _far: Point = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "origin", Point(*self.origin))
        object.__setattr__(self, "size", Size(*self.size))
        object.__setattr__(self, "_far", Point(self.origin.x + self.size.width, self.origin.y + self.size.height))

    # ============================================================
    # Construction
    # ============================================================
    @classmethod
    def from_size(cls, size) -> "Rect":
        return cls(Point(0.0, 0.0), size)

    @classmethod
    def centered(cls, center, size) -> "Rect":
        size = Size(*size)
        return cls(Point(center[0] - size.width/2, center[1] - size.height/2), size)

    @classmethod
    def square_at(cls, origin, edges: float) -> "Rect":
        return cls(origin, Size.square(edges))

    @classmethod
    def square_centered(cls, center, edges: float) -> "Rect":
        return cls.centered(center, Size.square(edges))

    @classmethod
    def from_extremes(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "Rect":
        """Rect spanning the given extremes; they read back unchanged from min_x ... max_y."""
        r = cls(Point(min_x, min_y), Size(max_x - min_x, max_y - min_y))
        object.__setattr__(r, "_far", Point(max_x, max_y))
        return r

    @classmethod
    def anchored(cls, size, origin, corner: Corner) -> "Rect":
        """Rect of *size* placed so that *origin* lands on *corner*."""
        size = Size(*size)
        x = origin[0] - size.width if corner.x_edge is Edge.MAX_X else origin[0]
        y = origin[1] - size.height if corner.y_edge is Edge.MAX_Y else origin[1]
        return cls(Point(x, y), size)

    @classmethod
    def aspect_fill(cls, size, rect: "Rect") -> "Rect":
        """*size* scaled, keeping its ratio, to cover all of *rect*; centred on it."""
        ratio = _ratio(size, rect)
        return cls.centered(rect.center, Size(*size) * (1.0 / min(ratio)))

    @classmethod
    def aspect_fit(cls, size, rect: "Rect") -> "Rect":
        """*size* scaled, keeping its ratio, to fit inside *rect*; centred on it."""
        ratio = _ratio(size, rect)
        return cls.centered(rect.center, Size(*size) * (1.0 / max(ratio)))

    # ============================================================
    # Corners / Edges
    # ============================================================
    def edge(self, edge: Edge) -> float:
        """Coordinate of *edge* (MIN_X gives min_x, and so on)."""
        if edge is Edge.MIN_X:
            return self.min_x
        if edge is Edge.MAX_X:
            return self.max_x
        if edge is Edge.MIN_Y:
            return self.min_y
        return self.max_y

    def corner(self, corner: Corner) -> Point:
        return Point(self.edge(corner.x_edge), self.edge(corner.y_edge))

    def line_segment(self, edge: Edge, system: Optional[CoordinateSystem] = None) -> LineSegment:
        """Segment along *edge*, directed in the system's corner order."""
        system = resolve(system)
        cs = system.corners
        i = system.edges.index(edge)
        return LineSegment(self.corner(cs[i]), self.corner(cs[(i+1) % 4]))

    def scaled(self, scale: float, corner: Optional[Corner] = None) -> "Rect":
        """Size scaled by *scale*, keeping the center, or *corner* if given, in place."""
        if corner is None:
            return Rect.centered(self.center, self.size * scale)
        return Rect.anchored(self.size * scale, self.corner(corner), corner)

    # ============================================================
    # Shape
    # ============================================================
    @property
    def min_x(self) -> float:
        return min(self.origin.x, self._far.x)

    @property
    def max_x(self) -> float:
        return max(self.origin.x, self._far.x)

    @property
    def min_y(self) -> float:
        return min(self.origin.y, self._far.y)

    @property
    def max_y(self) -> float:
        return max(self.origin.y, self._far.y)

    @property
    def mid_x(self) -> float:
        return self.origin.x + self.size.width/2

    @property
    def mid_y(self) -> float:
        return self.origin.y + self.size.height/2

    @property
    def width(self) -> float:
        return abs(self.size.width)

    @property
    def height(self) -> float:
        return abs(self.size.height)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def perimeter(self) -> float:
        return 2.0*self.width + 2.0*self.height

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def bounding_rect(self) -> "Rect":
        return self

    def contains(self, point) -> bool:
        """Closed test: points on the boundary are contained."""
        return self.min_x <= point[0] <= self.max_x and self.min_y <= point[1] <= self.max_y

    # ============================================================
    # Polygon
    # ============================================================
    @property
    def edge_count(self) -> int:
        return RECT_EDGES

    def points(self, system: Optional[CoordinateSystem] = None) -> list[Point]:
        return [self.corner(c) for c in resolve(system).corners]

    def line_segments(self, system: Optional[CoordinateSystem] = None) -> list[LineSegment]:
        pts = self.points(system)
        return [LineSegment(pts[i], pts[(i+1) % RECT_EDGES]) for i in range(RECT_EDGES)]



def _ratio(size, rect: Rect) -> tuple[float, float]:
    w, h = size
    if w == 0 or h == 0 or rect.width == 0 or rect.height == 0:
        raise GeometryError(f"Aspect scaling needs non-zero sizes, got {tuple(size)} into {rect.width}x{rect.height}")
    return (abs(w) / rect.width, abs(h) / rect.height)


@dataclass(frozen=True)
class Square(Polygon):
    """A rectangle with edges of equal length."""
    origin: Point
    edges: float

    def __post_init__(self):
        object.__setattr__(self, "origin", Point(*self.origin))

    @classmethod
    def inscribed_in(cls, rect: Rect) -> "Square":
        """Largest square that fits in *rect*, centred on it."""
        r = Rect.aspect_fit(Size.square(min(rect.width, rect.height)), rect)
        return cls(r.origin, r.size.width)

    @property
    def rect(self) -> Rect:
        return Rect.square_at(self.origin, self.edges)

    # Shape
    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def max_x(self) -> float:
        return self.origin.x + self.edges

    @property
    def min_y(self) -> float:
        return self.origin.y

    @property
    def max_y(self) -> float:
        return self.origin.y + self.edges

    @property
    def mid_x(self) -> float:
        return self.center.x

    @property
    def mid_y(self) -> float:
        return self.center.y

    @property
    def width(self) -> float:
        return self.edges

    @property
    def height(self) -> float:
        return self.edges

    @property
    def area(self) -> float:
        return self.rect.area

    @property
    def perimeter(self) -> float:
        return self.rect.perimeter

    @property
    def center(self) -> Point:
        return self.rect.center

    @property
    def bounding_rect(self) -> Rect:
        return self.rect

    def contains(self, point) -> bool:
        return self.rect.contains(point)

    # Polygon
    @property
    def edge_count(self) -> int:
        return RECT_EDGES

    def points(self, system: Optional[CoordinateSystem] = None) -> list[Point]:
        return self.rect.points(system)

    def line_segments(self, system: Optional[CoordinateSystem] = None) -> list[LineSegment]:
        return self.rect.line_segments(system)
