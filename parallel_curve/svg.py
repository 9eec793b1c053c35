"""SVG transform factory and polyline rendering."""
from typing import Callable, Optional
from .types import PointLike
from .geometry import GeometryError
from .constants import W, H, MARGIN


def make_svg_transform(
    curves: list[list[PointLike]], width: float = W, height: float = H, margin: float = MARGIN,
) -> Callable[[float, float], tuple[float, float]]:
    """Create to_svg closure fitting all *curves* inside the page margins.

    Uniform scale, centred, y axis pointing up in world coordinates.
    """
    xs = [p[0] for c in curves for p in c]; ys = [p[1] for c in curves for p in c]
    if not xs:
        raise GeometryError("Nothing to draw: no points in any curve")
    x0, x1, y0, y1 = min(xs), max(xs), min(ys), max(ys)
    span = max(x1-x0, y1-y0)
    s = min(width-2*margin, height-2*margin)/span if span > 0 else 1.0
    cx = (x0+x1)/2; cy = (y0+y1)/2
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (width/2 + (x-cx)*s, height/2 - (y-cy)*s)
    return to_svg


def render_polyline(out: list[str], points: list[PointLike], to_svg, stroke: str,
                    width: float, dash: Optional[str] = None, fill: str = "none") -> None:
    """Append a <polyline> (or closed <polygon> when filled) element to *out*."""
    if len(points) < 2:
        return
    coords = " ".join(f"{x:.2f},{y:.2f}" for x, y in (to_svg(p[0], p[1]) for p in points))
    tag = "polyline" if fill == "none" else "polygon"
    dash_attr = f' stroke-dasharray="{dash}"' if dash else ""
    out.append(f'<{tag} points="{coords}" fill="{fill}" stroke="{stroke}"'
               f' stroke-width="{width}"{dash_attr}/>')


def render_curves_svg(layers, width: float = W, height: float = H) -> str:
    """Full SVG document for *layers* of (points, stroke, width, dash[, fill]).

    Layers are drawn in order, so later layers sit on top.
    """
    to_svg = make_svg_transform([layer[0] for layer in layers], width, height)
    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}"'
           f' viewBox="0 0 {width} {height}">',
           f'<rect width="{width}" height="{height}" fill="white"/>']
    for layer in layers:
        pts, stroke, w, dash = layer[:4]
        fill = layer[4] if len(layer) > 4 else "none"
        render_polyline(out, pts, to_svg, stroke, w, dash, fill)
    out.append('</svg>')
    return "\n".join(out)
