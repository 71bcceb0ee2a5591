"""Capability interfaces shared by every concrete shape.

Shape covers extremities, measures, and containment.  Polygon adds
ordered vertex and edge enumeration.  Neither carries an implementation;
each concrete shape answers every member itself.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from .coords import CoordinateSystem
from .types import Point

if TYPE_CHECKING:
    from .lines import LineSegment
    from .rect import Rect


class Shape(ABC):
    """A figure with extremities, area, perimeter, a center, and point containment.

    Implementations guarantee area >= 0, perimeter >= 0, bounding_rect
    extremities equal to the shape's own, and that no point outside
    bounding_rect is contained.
    """

    @property
    @abstractmethod
    def min_x(self) -> float: ...

    @property
    @abstractmethod
    def max_x(self) -> float: ...

    @property
    @abstractmethod
    def min_y(self) -> float: ...

    @property
    @abstractmethod
    def max_y(self) -> float: ...

    @property
    @abstractmethod
    def mid_x(self) -> float: ...

    @property
    @abstractmethod
    def mid_y(self) -> float: ...

    @property
    @abstractmethod
    def width(self) -> float: ...

    @property
    @abstractmethod
    def height(self) -> float: ...

    @property
    @abstractmethod
    def area(self) -> float: ...

    @property
    @abstractmethod
    def perimeter(self) -> float: ...

    @property
    @abstractmethod
    def center(self) -> Point: ...

    @property
    @abstractmethod
    def bounding_rect(self) -> "Rect": ...

    @abstractmethod
    def contains(self, point) -> bool: ...


class Polygon(Shape):
    """A shape described by an ordered ring of vertices.

    len(points()) == len(line_segments()) == edge_count, and segment i runs
    from points()[i] to points()[(i+1) % edge_count].  Shapes whose order
    follows the axis orientation read it from *system*, falling back to the
    process default.
    """

    @property
    @abstractmethod
    def edge_count(self) -> int: ...

    @abstractmethod
    def points(self, system: Optional[CoordinateSystem] = None) -> list[Point]: ...

    @abstractmethod
    def line_segments(self, system: Optional[CoordinateSystem] = None) -> list["LineSegment"]: ...
