"""Offset curve construction and local overlap trimming."""
import logging

import numpy as np

from .types import Point, Curve
from .geometry import (
    GeometryError,
    segments_cross, lines_intersection, perpendicular_point,
)

logger = logging.getLogger(__name__)

# ============================================================
# Input Normalisation
# ============================================================
def as_curve(points) -> Curve:
    """Convert a sequence of (x, y) pairs or an (N, 2) array to a list of Points."""
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise GeometryError(f"Expected (N, 2) coordinates, got shape {arr.shape}")
    return [Point(float(x), float(y)) for x, y in arr]

# ============================================================
# Offset Curve Builder
# ============================================================
def raw_offset(points, offset: float, left_side: bool) -> Curve:
    """Unresolved offset curve: two points per segment plus a trailing point.

    For n input points the result has 2*(n-1) + 1 points. The trailing
    point is projected from the last vertex back toward the one before it
    and coincides with the final segment's second point.
    """
    pts = as_curve(points)
    if len(pts) < 2:
        return []
    if offset < 0:
        raise GeometryError(f"Offset distance must be non-negative: {offset}")
    out: Curve = []
    for i in range(1, len(pts)):
        a = pts[i-1]; b = pts[i]
        out.append(perpendicular_point(a, b, offset, left_side))
        out.append(perpendicular_point(b, a, offset, not left_side))
    out.append(perpendicular_point(pts[-1], pts[-2], offset, not left_side))
    return out

def build_offset(points, offset: float, left_side: bool) -> Curve:
    """Curve parallel to *points* at distance *offset* on the requested side.

    Returns [] for fewer than 2 input points. Adjacent offset segments that
    cross at concave corners are trimmed to their intersection.
    """
    return resolve_overlaps(raw_offset(points, offset, left_side))

# ============================================================
# Overlap Resolver
# ============================================================
def resolve_overlaps(points) -> Curve:
    """Trim crossing pairs of adjacent segments in a single forward pass.

    Window i looks at segments pts[i-3]-pts[i-2] and pts[i-1]-pts[i]. On a
    proper crossing, pts[i-2] moves to the intersection and pts[i-1] is
    dropped once the scan is done. Later windows see the moved point but
    still see the dropped one, and new adjacencies created by a drop are
    not re-checked.

    Returns a new list; *points* is left untouched.
    """
    pts = [Point(p[0], p[1]) for p in points]
    if len(pts) < 4:
        return pts
    to_remove = []
    for i in range(3, len(pts)):
        a1, a2, b1, b2 = pts[i-3], pts[i-2], pts[i-1], pts[i]
        if segments_cross(a1, a2, b1, b2):
            pts[i-2] = lines_intersection(a1, a2, b1, b2)
            to_remove.append(i-1)
            logger.debug("trim at window %d: (%.6g, %.6g)", i, pts[i-2].x, pts[i-2].y)
    for idx in reversed(to_remove):
        del pts[idx]
    if to_remove:
        logger.debug("removed %d of %d offset points", len(to_remove), len(pts) + len(to_remove))
    return pts

# ============================================================
# Two-Sided Offsets
# ============================================================
def offset_both_sides(points, offset: float) -> tuple[Curve, Curve]:
    """Left and right offset curves at the same distance."""
    return build_offset(points, offset, True), build_offset(points, offset, False)

def corridor_polygon(points, width: float) -> Curve:
    """Closed ring around a band of *width* centred on *points*.

    Left edge in traversal order followed by the right edge reversed.
    The closing vertex is not repeated.
    """
    left, right = offset_both_sides(points, width/2)
    return left + right[::-1]
