"""2D affine transforms, applied to points, vectors, sizes, and rects.

Same parameterisation as the usual graphics affine matrix:
    x' = a*x + c*y + tx
    y' = b*x + d*y + ty
"""
import math
from typing import NamedTuple, Sequence

import numpy as np

from .angle import Angle
from .coords import Corner
from .errors import GeometryError
from .rect import Rect
from .types import Point, Size, Vector


class AffineTransform(NamedTuple):
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(tx=tx, ty=ty)

    @classmethod
    def rotation(cls, angle: Angle) -> "AffineTransform":
        """Rotation by *angle* about the origin (positive turns +x towards +y)."""
        co, si = math.cos(angle.radians), math.sin(angle.radians)
        return cls(co, si, -si, co)

    @classmethod
    def scaling(cls, sx: float, sy: float) -> "AffineTransform":
        return cls(a=sx, d=sy)

    @classmethod
    def from_matrix(cls, m: np.ndarray) -> "AffineTransform":
        return cls(float(m[0, 0]), float(m[1, 0]), float(m[0, 1]), float(m[1, 1]),
                   float(m[0, 2]), float(m[1, 2]))

    @property
    def matrix(self) -> np.ndarray:
        """3x3 homogeneous matrix acting on column vectors (x, y, 1)."""
        return np.array([[self.a, self.c, self.tx],
                         [self.b, self.d, self.ty],
                         [0.0, 0.0, 1.0]])

    @property
    def is_identity(self) -> bool:
        return self == AffineTransform()

    def concatenating(self, other: "AffineTransform") -> "AffineTransform":
        """This transform followed by *other*."""
        return AffineTransform.from_matrix(other.matrix @ self.matrix)

    def translated_by(self, v) -> "AffineTransform":
        """Translation by vector *v* followed by this transform."""
        return AffineTransform.translation(v[0], v[1]).concatenating(self)

    def inverted(self) -> "AffineTransform":
        det = self.a*self.d - self.b*self.c
        if det == 0:
            raise GeometryError(f"Transform is not invertible: det={det}")
        return AffineTransform.from_matrix(np.linalg.inv(self.matrix))

    def apply_points(self, points: Sequence) -> list[Point]:
        """Transform many points in one matrix product."""
        if len(points) == 0:
            return []
        pts = np.asarray(points, dtype=float)
        out = pts @ self.matrix[:2, :2].T + self.matrix[:2, 2]
        return [Point(float(x), float(y)) for x, y in out]

    def apply(self, value):
        """Transform a Point, Vector, Size, or Rect.

        Vectors and sizes take only the linear part (no translation).  A rect
        becomes the bounding rect of its four transformed corners.
        """
        if isinstance(value, Vector):
            return Vector(self.a*value.dx + self.c*value.dy, self.b*value.dx + self.d*value.dy)
        if isinstance(value, Size):
            return Size(self.a*value.width + self.c*value.height, self.b*value.width + self.d*value.height)
        if isinstance(value, Rect):
            pts = np.array(self.apply_points([value.corner(k) for k in Corner]))
            return Rect.from_extremes(float(pts[:, 0].min()), float(pts[:, 1].min()),
                                      float(pts[:, 0].max()), float(pts[:, 1].max()))
        x, y = value
        return Point(self.a*x + self.c*y + self.tx, self.b*x + self.d*y + self.ty)


def applying(value, transform: AffineTransform, anchor=(0.0, 0.0)):
    """Apply *transform* to *value* about *anchor* instead of the origin."""
    ax, ay = anchor
    to_origin = AffineTransform.translation(-ax, -ay)
    back = AffineTransform.translation(ax, ay)
    return to_origin.concatenating(transform).concatenating(back).apply(value)
