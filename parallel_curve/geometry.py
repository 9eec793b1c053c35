"""Pure geometry functions: distances, angles, intersections, perpendiculars."""
import math
from .types import Point, PointLike
from .constants import PARALLEL_TOLERANCE

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

class DegenerateSegmentError(GeometryError):
    """Raised when a reference segment has zero length."""

class ParallelLinesError(GeometryError):
    """Raised when two lines have no unique intersection."""

# ============================================================
# Geometry Kernel
# ============================================================
def segment_length(a: PointLike, b: PointLike) -> float:
    """Euclidean distance from a to b."""
    return math.sqrt((b[0]-a[0])**2 + (b[1]-a[1])**2)

def vertex_angle(a: PointLike, b: PointLike, c: PointLike) -> float:
    """Interior angle at b of triangle a-b-c, in degrees (law of cosines).

    Raises DegenerateSegmentError if a or c coincides with b, and
    GeometryError if the cosine leaves [-1, 1], floating noise included.
    """
    ab = segment_length(a, b); bc = segment_length(b, c); ac = segment_length(a, c)
    if ab == 0 or bc == 0:
        raise DegenerateSegmentError(f"Zero-length side at vertex: AB={ab:.3g}, BC={bc:.3g}")
    cos_b = (bc*bc + ab*ab - ac*ac)/(2*bc*ab)
    if not -1.0 <= cos_b <= 1.0:
        raise GeometryError(f"acos argument out of range: {cos_b!r}")
    return math.degrees(math.acos(cos_b))

def _side(o: PointLike, e: PointLike, p: PointLike) -> float:
    """Signed doubled area of triangle o-e-p; positive when p is left of o -> e."""
    return (e[0]-o[0])*(p[1]-o[1]) - (e[1]-o[1])*(p[0]-o[0])

def polyline_length(points: list[PointLike]) -> float:
    """Total length of an open polyline."""
    return sum(segment_length(points[i-1], points[i]) for i in range(1, len(points)))

def poly_area(verts: list[PointLike]) -> float:
    """Area of a vertex ring as a fan of triangles from the first vertex.

    Either winding order gives the same positive result.
    """
    if len(verts) < 3:
        return 0.0
    o = verts[0]
    return abs(sum(_side(o, verts[i], verts[i+1]) for i in range(1, len(verts)-1)))/2

# ============================================================
# Segment Intersection
# ============================================================
def segments_cross(a: PointLike, b: PointLike, c: PointLike, d: PointLike) -> bool:
    """True if open segment ab properly crosses open segment cd.

    Touching at an endpoint or collinear overlap is not a crossing.
    """
    return (_side(c, d, a)*_side(c, d, b) < 0) and (_side(a, b, c)*_side(a, b, d) < 0)

def lines_intersection(a: PointLike, b: PointLike, c: PointLike, d: PointLike) -> Point:
    """Intersection of the infinite lines through a-b and c-d.

    Solved parametrically along c-d. Raises ParallelLinesError if parallel:
    the determinant is compared to the product of the segment lengths, so
    the check only depends on the angle between the lines.
    """
    z1 = b[0]-a[0]; z2 = d[0]-c[0]
    w1 = b[1]-a[1]; w2 = d[1]-c[1]
    det = w1*z2 - z1*w2
    if det == 0 or abs(det) < PARALLEL_TOLERANCE*segment_length(a, b)*segment_length(c, d):
        raise ParallelLinesError(f"Parallel lines: det={det:.2e}")
    k = (z1*(c[1]-a[1]) + w1*(a[0]-c[0]))/det
    return Point(c[0]+z2*k, c[1]+w2*k)

# ============================================================
# Perpendicular Projection
# ============================================================
def perpendicular_point(a: PointLike, b: PointLike, distance: float, left_side: bool) -> Point:
    """Point at *distance* from a, perpendicular to the bearing a -> b.

    The bearing is rotated +90 degrees for the left side, -90 for the right.
    Raises DegenerateSegmentError if a and b coincide.
    """
    dx = b[0]-a[0]; dy = b[1]-a[1]
    if dx == 0 and dy == 0:
        raise DegenerateSegmentError(f"No bearing from ({a[0]}, {a[1]}) to itself")
    theta = math.atan2(dy, dx) + (math.pi/2 if left_side else -math.pi/2)
    return Point(a[0]+distance*math.cos(theta), a[1]+distance*math.sin(theta))
