"""Parallel (offset) curves for open polylines, with concave-corner trimming."""

from .types import Point, Curve
from .geometry import (
    GeometryError, DegenerateSegmentError, ParallelLinesError,
    segment_length, vertex_angle, polyline_length, poly_area,
    segments_cross, lines_intersection, perpendicular_point,
)
from .offset import (
    as_curve, raw_offset, build_offset, resolve_overlaps,
    offset_both_sides, corridor_polygon,
)
from .svg import make_svg_transform, render_polyline, render_curves_svg
