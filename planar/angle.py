"""Angle value type and rotation direction."""
import math
from enum import Enum
from typing import NamedTuple

from .constants import FULL_ROTATION_RAD, FULL_ROTATION_DEG


class AngleUnit(Enum):
    RADIANS = "rad"
    DEGREES = "deg"


class RotationDirection(Enum):
    CLOCKWISE = "CW"
    COUNTER_CLOCKWISE = "CCW"

    @property
    def reversed(self) -> "RotationDirection":
        if self is RotationDirection.CLOCKWISE:
            return RotationDirection.COUNTER_CLOCKWISE
        return RotationDirection.CLOCKWISE


class Angle(NamedTuple):
    """A rotation, stored in radians.

    Never clamped on construction; call normalized() to wrap into [0, 2*pi).
    Comparison is exact on the stored radians.
    """
    radians: float = 0.0

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(math.radians(degrees))

    @classmethod
    def of(cls, value: float, unit: AngleUnit = AngleUnit.RADIANS) -> "Angle":
        if unit is AngleUnit.DEGREES:
            return cls.from_degrees(value)
        return cls(float(value))

    @staticmethod
    def full_rotation(unit: AngleUnit = AngleUnit.RADIANS) -> float:
        """One full turn expressed in *unit* (2*pi or 360)."""
        return FULL_ROTATION_DEG if unit is AngleUnit.DEGREES else FULL_ROTATION_RAD

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    def value(self, unit: AngleUnit = AngleUnit.RADIANS) -> float:
        return self.degrees if unit is AngleUnit.DEGREES else self.radians

    @property
    def inversed(self) -> "Angle":
        return Angle(-self.radians)

    def normalized(self) -> "Angle":
        """Equivalent angle in [0, 2*pi)."""
        return Angle(self.radians % FULL_ROTATION_RAD)

    def __add__(self, other: "Angle") -> "Angle":
        return Angle(self.radians + other.radians)

    def __radd__(self, other):
        # lets sum() start from 0
        if other == 0:
            return self
        return Angle(other.radians + self.radians)

    def __sub__(self, other: "Angle") -> "Angle":
        return Angle(self.radians - other.radians)

    def __mul__(self, k: float) -> "Angle":
        return Angle(self.radians * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Angle":
        return Angle(self.radians / k)

    def __neg__(self) -> "Angle":
        return self.inversed

    def __repr__(self) -> str:
        return f"Angle({self.radians!r} rad, {self.degrees:.4f}°)"
