"""Generate gallery.svg: sample shapes with triangle centers and circle samples.

Coordinates are Cartesian (y up); the page transform flips them for SVG.
"""
import os

from planar import (
    Angle, Circle, CoordinateSystem, Point, Rect, RotationDirection, Size, Square, Triangle,
    configure, make_svg_transform, svg_path,
)

# US Letter landscape at 72 dpi (11" x 8.5")
W, H = 792, 612
SCALE = 12.0  # SVG points per unit

# ============================================================
# Gallery Data
# ============================================================
def build_gallery_data() -> dict:
    """Shapes and derived points placed on a 66 x 51 unit page."""
    tri = Triangle((4, 4), (28, 4), (10, 22))
    rect = Rect(Point(34, 4), Size(14, 9))
    frame = Rect(Point(34, 20), Size(28, 14))
    circle = Circle((52, 42), 6)
    return {
        "triangle": tri,
        "centers": {
            "centroid": tri.centroid,
            "circumcenter": tri.circumcenter,
            "incenter": tri.incenter,
            "orthocenter": tri.orthocenter,
        },
        "rect": rect,
        "frame": frame,
        "fit": Rect.aspect_fit(Size(4, 3), frame),
        "square": Square.inscribed_in(Rect(Point(4, 30), Size(20, 14))),
        "circle": circle,
        "samples": circle.points_along_perimeter(12, Angle.from_degrees(90), RotationDirection.CLOCKWISE),
    }


# ============================================================
# SVG Rendering
# ============================================================
_CENTER_COLORS = {"centroid": "#C0392B", "circumcenter": "#2471A3",
                  "incenter": "#1E8449", "orthocenter": "#7D3C98"}


def render_gallery_svg(data: dict) -> str:
    to_svg = make_svg_transform(Size(W, H), SCALE)
    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{W}" height="{H}" viewBox="0 0 {W} {H}">']
    for key in ("triangle", "rect", "frame", "square", "circle"):
        out.append(f'<path d="{svg_path(data[key], to_svg)}" fill="none" stroke="#333" stroke-width="1"/>')
    out.append(f'<path d="{svg_path(data["fit"], to_svg)}" fill="rgba(100,150,200,0.3)" stroke="#4682B4" stroke-width="0.8"/>')
    for name, p in data["centers"].items():
        if p is None:
            continue
        sx, sy = to_svg(*p)
        out.append(f'<circle cx="{sx:.1f}" cy="{sy:.1f}" r="2.5" fill="{_CENTER_COLORS[name]}"/>')
    for i, p in enumerate(data["samples"]):
        sx, sy = to_svg(*p)
        out.append(f'<circle cx="{sx:.1f}" cy="{sy:.1f}" r="1.5" fill="#333"/>')
        out.append(f'<text x="{sx+3:.1f}" y="{sy-3:.1f}" font-family="Arial" font-size="7" fill="#999">{i}</text>')
    out.append('</svg>')
    return "\n".join(out)


# ============================================================
# Main entry point
# ============================================================

if __name__ == "__main__":
    configure(CoordinateSystem.Y_UP)
    data = build_gallery_data()
    svg_file = os.path.join(os.path.dirname(os.path.abspath(__file__)), "gallery.svg")
    with open(svg_file, "w") as f:
        f.write(render_gallery_svg(data))

    tri = data["triangle"]
    print(f"Gallery written to {svg_file}")
    print(f"Triangle area:  {tri.area:.4f}  perimeter: {tri.perimeter:.4f}")
    print("Angles (deg):   " + ", ".join(f"{t.degrees:.2f}" for t in tri.angles))
    for name, p in data["centers"].items():
        print(f"  {name:<13s} ({p[0]:8.4f}, {p[1]:8.4f})" if p else f"  {name:<13s} undefined")
    print(f"Circle area:    {data['circle'].area:.4f}")
    print(f"Aspect fit:     {data['fit']}")
