"""Axis orientation: corners, edges, and the coordinate system that orders them.

The same shape reports its corners in a different order depending on
whether y grows upwards (Cartesian, AppKit, survey northings) or
downwards (SVG, UIKit, screen pixels).  CoordinateSystem resolves which
corner is visually top-left and which way increasing angles turn.
"""
import logging
import threading
from enum import Enum
from typing import NamedTuple, Optional

from .errors import ConfigurationError

log = logging.getLogger(__name__)


class Axis(Enum):
    X = "x"
    Y = "y"


class Edge(Enum):
    """One side of an axis-aligned rectangle, named by the extremity it sits on."""
    MIN_X = "minX"
    MAX_X = "maxX"
    MIN_Y = "minY"
    MAX_Y = "maxY"

    @property
    def axis(self) -> Axis:
        return Axis.X if self in (Edge.MIN_X, Edge.MAX_X) else Axis.Y

    @property
    def opposite(self) -> "Edge":
        return _OPPOSITE_EDGE[self]

    @property
    def corners(self) -> tuple["Corner", "Corner"]:
        """The two corners that terminate this edge."""
        if self.axis is Axis.X:
            return (Corner.from_edges(self, Edge.MIN_Y), Corner.from_edges(self, Edge.MAX_Y))
        return (Corner.from_edges(Edge.MIN_X, self), Corner.from_edges(Edge.MAX_X, self))

    @staticmethod
    def between(c1: "Corner", c2: "Corner") -> "Edge":
        """The edge shared by two adjacent corners."""
        if c1.x_edge is c2.x_edge and c1.y_edge is not c2.y_edge:
            return c1.x_edge
        if c1.y_edge is c2.y_edge and c1.x_edge is not c2.x_edge:
            return c1.y_edge
        raise ValueError(f"Corners {c1.name} and {c2.name} are not adjacent")


_OPPOSITE_EDGE = {
    Edge.MIN_X: Edge.MAX_X, Edge.MAX_X: Edge.MIN_X,
    Edge.MIN_Y: Edge.MAX_Y, Edge.MAX_Y: Edge.MIN_Y,
}


class Corner(Enum):
    """Meeting point of an x-edge and a y-edge."""
    MIN_X_MIN_Y = (Edge.MIN_X, Edge.MIN_Y)
    MAX_X_MIN_Y = (Edge.MAX_X, Edge.MIN_Y)
    MIN_X_MAX_Y = (Edge.MIN_X, Edge.MAX_Y)
    MAX_X_MAX_Y = (Edge.MAX_X, Edge.MAX_Y)

    @property
    def x_edge(self) -> Edge:
        return self.value[0]

    @property
    def y_edge(self) -> Edge:
        return self.value[1]

    @classmethod
    def from_edges(cls, x_edge: Edge, y_edge: Edge) -> "Corner":
        if x_edge.axis is not Axis.X or y_edge.axis is not Axis.Y:
            raise ValueError(f"Need an x-edge and a y-edge, got {x_edge.name}, {y_edge.name}")
        return cls((x_edge, y_edge))

    @property
    def opposite(self) -> "Corner":
        return Corner.from_edges(self.x_edge.opposite, self.y_edge.opposite)

    @property
    def flipped_x(self) -> "Corner":
        return Corner.from_edges(self.x_edge.opposite, self.y_edge)

    @property
    def flipped_y(self) -> "Corner":
        return Corner.from_edges(self.x_edge, self.y_edge.opposite)


class CoordinateSystem(NamedTuple):
    """Axis orientation, identified by the corner that is visually top-left."""
    top_left: Corner

    @property
    def corners(self) -> list[Corner]:
        """Top-left, top-right, bottom-right, bottom-left (visually clockwise)."""
        tl = self.top_left
        return [tl, tl.flipped_x, tl.opposite, tl.flipped_y]

    @property
    def edges(self) -> list[Edge]:
        """Edge i joins corners[i] to corners[i+1]."""
        cs = self.corners
        return [Edge.between(cs[i], cs[(i+1) % 4]) for i in range(4)]

    @property
    def x_grows_right(self) -> bool:
        return self.top_left.x_edge is Edge.MIN_X

    @property
    def y_grows_down(self) -> bool:
        return self.top_left.y_edge is Edge.MIN_Y

    @property
    def circle_runs_clockwise(self) -> bool:
        """True if increasing angle (cos, sin) traces a visually clockwise path."""
        return self.x_grows_right == self.y_grows_down


CoordinateSystem.Y_UP = CoordinateSystem(Corner.MIN_X_MAX_Y)
CoordinateSystem.Y_DOWN = CoordinateSystem(Corner.MIN_X_MIN_Y)

DEFAULT_SYSTEM = CoordinateSystem.Y_UP

_default: Optional[CoordinateSystem] = None
_default_lock = threading.Lock()


def configure(system: CoordinateSystem) -> CoordinateSystem:
    """Fix the process-wide default coordinate system.

    Allowed once; repeating the same system is a no-op.  Raises
    ConfigurationError if a different default is already in effect
    (configured, or read via default_system()).
    """
    global _default
    with _default_lock:
        if _default is not None:
            if _default != system:
                raise ConfigurationError(
                    f"Default coordinate system already fixed to top_left={_default.top_left.name}, "
                    f"cannot switch to top_left={system.top_left.name}")
            return _default
        _default = system
    log.info("default coordinate system set: top_left=%s", system.top_left.name)
    return system


def default_system() -> CoordinateSystem:
    """The process-wide default; fixes DEFAULT_SYSTEM on first read if never configured."""
    global _default
    with _default_lock:
        if _default is None:
            _default = DEFAULT_SYSTEM
            log.debug("default coordinate system not configured, using top_left=%s",
                      DEFAULT_SYSTEM.top_left.name)
        return _default


def resolve(system: Optional[CoordinateSystem]) -> CoordinateSystem:
    """*system* if given, else the process default."""
    return system if system is not None else default_system()
