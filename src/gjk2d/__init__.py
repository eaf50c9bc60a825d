# MIT License (see LICENSE)
"""
gjk2d - 2D convex polygon intersection using the GJK algorithm.

Main entry points:
    - intersects: Do two convex vertex lists overlap?
    - Verdict: DISJOINT or INTERSECTING (truthy iff intersecting).
    - NonConvergenceError: Raised when malformed input exhausts the
      iteration bound.

Submodules:
    - vector: 2D vector primitives and the Minkowski support mapping.
    - gjk: The intersection test.
    - shapes: ConvexPolygon, box/regular_polygon constructors, is_convex.

Example:
    from gjk2d import intersects

    a = [(0, 0), (4, 0), (0, 4)]
    b = [(1, 1), (5, 1), (1, 5)]
    assert intersects(a, b)
"""
from .gjk import GJKError, NonConvergenceError, Verdict, intersects
from .shapes import ConvexPolygon, box, is_convex, regular_polygon

__all__ = [
    # Intersection test
    "intersects",
    "Verdict",
    # Errors
    "GJKError",
    "NonConvergenceError",
    # Shapes
    "ConvexPolygon",
    "box",
    "regular_polygon",
    "is_convex",
]
