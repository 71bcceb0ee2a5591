"""2D geometry kernel: points, angles, lines, and shapes over a configurable axis orientation."""

from .errors import GeometryError, ConfigurationError
from .types import Point, Vector, Size, Triplet, clipped, between
from .angle import Angle, AngleUnit, RotationDirection
from .coords import (
    Axis, Edge, Corner, CoordinateSystem,
    configure, default_system,
)
from .lines import Line, LineSegment
from .shape import Shape, Polygon
from .rect import Rect, Square
from .circle import Circle
from .triangle import Triangle
from .transform import AffineTransform, applying
from .svg import svg_path, make_svg_transform
