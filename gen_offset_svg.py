"""Generate an SVG of a sample road centre line with both offset edges.

The centre line has one concave bend on each side so the overlap
trimming is visible in the output. Writes offset.svg next to this script.
"""
import os

from parallel_curve.offset import raw_offset, offset_both_sides, corridor_polygon
from parallel_curve.geometry import polyline_length, poly_area, vertex_angle
from parallel_curve.svg import render_curves_svg
from parallel_curve.constants import (
    SOURCE_STROKE, SOURCE_WIDTH, SOURCE_DASH,
    LEFT_STROKE, RIGHT_STROKE, OFFSET_WIDTH, CORRIDOR_FILL,
)

ROAD_WIDTH = 7.0                  # two 3.5 m lanes

# Sample centre line (metres)
CENTRE_LINE = [
    (0.0, 0.0), (40.0, 0.0), (65.0, 18.0), (90.0, 12.0),
    (110.0, 35.0), (150.0, 35.0),
]


def build_offset_data(centre=CENTRE_LINE, road_width=ROAD_WIDTH):
    """Offset edges, corridor ring and summary figures for *centre*."""
    half = road_width / 2
    left, right = offset_both_sides(centre, half)
    corridor = corridor_polygon(centre, road_width)
    return {
        "centre": list(centre),
        "left": left,
        "right": right,
        "corridor": corridor,
        "raw_count": len(raw_offset(centre, half, True)),
        "centre_length": polyline_length(centre),
        "corridor_area": poly_area(corridor),
        "bends": [vertex_angle(centre[i-1], centre[i], centre[i+1])
                  for i in range(1, len(centre) - 1)],
    }


def render_offset_svg(data) -> str:
    """SVG document: corridor fill, offset edges, dashed centre line on top."""
    return render_curves_svg([
        (data["corridor"], "none", 0, None, CORRIDOR_FILL),
        (data["left"], LEFT_STROKE, OFFSET_WIDTH, None),
        (data["right"], RIGHT_STROKE, OFFSET_WIDTH, None),
        (data["centre"], SOURCE_STROKE, SOURCE_WIDTH, SOURCE_DASH),
    ])


if __name__ == "__main__":
    data = build_offset_data()
    svg_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "offset.svg")
    with open(svg_path, "w") as f:
        f.write(render_offset_svg(data))

    print(f"Offset curves written to {svg_path}")
    print(f"Road width:     {ROAD_WIDTH:.2f} m")
    print(f"Centre length:  {data['centre_length']:.2f} m")
    print(f"Corridor area:  {data['corridor_area']:.2f} sq m")
    print(f"Raw points:     {data['raw_count']} per side")
    print(f"Left points:    {len(data['left'])}")
    print(f"Right points:   {len(data['right'])}")
    print()
    for i, ang in enumerate(data["bends"], start=1):
        c = data["centre"][i]
        print(f"  V{i:<3d} ({c[0]:8.2f}, {c[1]:8.2f})  angle {ang:7.2f} deg")
