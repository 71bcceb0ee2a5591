"""Circles and perimeter sampling."""
import math
from functools import total_ordering
from typing import Optional

import numpy as np

from .angle import Angle, RotationDirection
from .coords import CoordinateSystem, resolve
from .errors import GeometryError
from .rect import Rect, Square
from .shape import Shape
from .types import Point


@total_ordering
class Circle(Shape):
    """Circle from a center and a radius.

    == and < compare radius only, regardless of center; identical() also
    compares centers.
    """
    __slots__ = ("_center", "_radius")

    def __init__(self, center, radius: float):
        if radius < 0:
            raise GeometryError(f"Circle radius must be >= 0, got {radius}")
        self._center = Point(*center)
        self._radius = radius

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def __repr__(self) -> str:
        return f"Circle(center={self._center!r}, radius={self._radius!r})"

    @classmethod
    def from_diameter(cls, center, diameter: float) -> "Circle":
        return cls(center, diameter / 2.0)

    @classmethod
    def inscribed_in_square(cls, square: Square) -> "Circle":
        return cls.from_diameter(square.center, square.edges)

    @classmethod
    def inscribed_in_rect(cls, rect: Rect) -> "Circle":
        """Largest circle that fits in *rect*, centred on it."""
        return cls.inscribed_in_square(Square.inscribed_in(rect))

    @property
    def diameter(self) -> float:
        return self.radius * 2.0

    @property
    def circumference(self) -> float:
        return self.diameter * math.pi

    @property
    def square(self) -> Square:
        """The bounding square."""
        return Square(Point(self.min_x, self.min_y), self.diameter)

    def points_along_perimeter(
        self, segments: float, start: Angle = Angle(),
        rotating: RotationDirection = RotationDirection.CLOCKWISE,
        system: Optional[CoordinateSystem] = None,
    ) -> list[Point]:
        """Points spaced full_rotation/segments apart, beginning at *start*.

        *rotating* is the visual direction; it is resolved against the
        system's angular convention.  A non-integer *segments* gives
        ceil(segments) points; segments <= 0 gives [].
        """
        if segments <= 0:
            return []
        step = Angle.full_rotation() / segments
        backwards = resolve(system).circle_runs_clockwise != (rotating is RotationDirection.CLOCKWISE)
        sign = -1.0 if backwards else 1.0
        angles = start.radians + sign * step * np.arange(math.ceil(segments))
        xs = self.center.x + self.radius * np.cos(angles)
        ys = self.center.y + self.radius * np.sin(angles)
        return [Point(float(x), float(y)) for x, y in zip(xs, ys)]

    def identical(self, other: "Circle") -> bool:
        return self.radius == other.radius and self.center == other.center

    # Shape
    @property
    def min_x(self) -> float:
        return self.center.x - self.radius

    @property
    def max_x(self) -> float:
        return self.center.x + self.radius

    @property
    def min_y(self) -> float:
        return self.center.y - self.radius

    @property
    def max_y(self) -> float:
        return self.center.y + self.radius

    @property
    def mid_x(self) -> float:
        return self.center.x

    @property
    def mid_y(self) -> float:
        return self.center.y

    @property
    def width(self) -> float:
        return self.diameter

    @property
    def height(self) -> float:
        return self.diameter

    @property
    def area(self) -> float:
        return self.radius * self.radius * math.pi

    @property
    def perimeter(self) -> float:
        return self.circumference

    @property
    def bounding_rect(self) -> Rect:
        """Smallest rect the circle fits in."""
        return Rect.from_extremes(self.min_x, self.min_y, self.max_x, self.max_y)

    def contains(self, point) -> bool:
        return self.center.distance_to(point) <= self.radius

    def __eq__(self, other):
        if not isinstance(other, Circle):
            return NotImplemented
        return self.radius == other.radius

    def __lt__(self, other):
        if not isinstance(other, Circle):
            return NotImplemented
        return self.radius < other.radius

    def __hash__(self):
        return hash(self.radius)
