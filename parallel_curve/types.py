"""Shared type definitions for parallel curve computation."""
from typing import NamedTuple, Sequence

class Point(NamedTuple):
    x: float; y: float

Curve = list[Point]

# Anything indexable as p[0], p[1]: Point, plain tuples, numpy rows.
PointLike = Sequence[float]

