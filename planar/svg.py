"""Render-path hook: SVG path data for shapes, and the page transform.

Nothing here draws; callers embed the returned path data in their own
documents.
"""
from typing import Callable, Optional

from .circle import Circle
from .constants import SVG_PRECISION
from .coords import CoordinateSystem, resolve
from .shape import Polygon, Shape
from .types import Size

ToSvg = Callable[[float, float], tuple[float, float]]


def make_svg_transform(page: Size, scale: float = 1.0,
                       system: Optional[CoordinateSystem] = None) -> ToSvg:
    """Create to_svg closure mapping *system* coordinates onto an SVG page.

    SVG puts the origin top-left with y growing downwards; axes that run the
    other way in *system* are flipped across the page.
    """
    system = resolve(system)
    w, h = page
    flip_x = not system.x_grows_right
    flip_y = not system.y_grows_down

    def to_svg(x: float, y: float) -> tuple[float, float]:
        sx = (w - x*scale) if flip_x else x*scale
        sy = (h - y*scale) if flip_y else y*scale
        return (sx, sy)
    return to_svg


def _fmt(p: tuple[float, float]) -> str:
    return f"{p[0]:.{SVG_PRECISION}f},{p[1]:.{SVG_PRECISION}f}"


def svg_path(shape: Shape, to_svg: Optional[ToSvg] = None,
             system: Optional[CoordinateSystem] = None) -> str:
    """SVG path data ("d" attribute) outlining *shape*.

    Polygons are traced through points() in *system* order; circles as two
    half-circle arcs.  Raises TypeError for shapes with no outline.
    """
    if to_svg is None:
        to_svg = lambda x, y: (x, y)  # noqa: E731
    if isinstance(shape, Polygon):
        pts = [to_svg(*p) for p in shape.points(system)]
        return "M " + " L ".join(_fmt(p) for p in pts) + " Z"
    if isinstance(shape, Circle):
        cx, cy = shape.center
        left, right = to_svg(cx - shape.radius, cy), to_svg(cx + shape.radius, cy)
        r = abs(right[0] - left[0]) / 2
        rs = f"{r:.{SVG_PRECISION}f}"
        return (f"M {_fmt(left)} A {rs} {rs} 0 1 0 {_fmt(right)} "
                f"A {rs} {rs} 0 1 0 {_fmt(left)} Z")
    raise TypeError(f"No SVG outline for {type(shape).__name__}")
