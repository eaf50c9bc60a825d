# MIT License (see LICENSE)
"""
Convex polygon helpers.

``intersects`` takes plain vertex lists; this module adds a small value
type that carries validated vertices, plus constructors for common shapes
and a convexity check for callers who want to verify the precondition
``intersects`` does not check itself.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .gjk import Verdict, intersects
from .vector import Vec2, as_vertices, average_point, index_of_furthest_point


@dataclass(frozen=True)
class ConvexPolygon:
    """
    Convex polygon defined by vertices.

    Attributes:
        vertices: Array of vertices [N, 2], ordered (CCW or CW).
                  Convexity is the caller's responsibility.
    """
    vertices: np.ndarray

    def __post_init__(self) -> None:
        """Ensure vertices are stored as a float64 (N, 2) array."""
        object.__setattr__(self, "vertices", as_vertices(self.vertices))

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.vertices
        return self.vertices.astype(dtype)

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def centroid(self) -> Vec2:
        """Average of the vertices (not the area centroid)."""
        return average_point(self.vertices)

    def support(self, direction) -> Vec2:
        """Vertex furthest along direction; first one wins on ties."""
        d = np.asarray(direction, dtype=np.float64)
        return self.vertices[index_of_furthest_point(d, self.vertices)]

    def translated(self, offset) -> ConvexPolygon:
        """Return a copy moved by offset [dx, dy]."""
        return ConvexPolygon(self.vertices + np.asarray(offset, dtype=np.float64))

    def intersects(self, other) -> Verdict:
        """GJK test against another polygon or vertex list."""
        return intersects(self.vertices, other)


def box(center=(0.0, 0.0), half_extents=(0.5, 0.5)) -> ConvexPolygon:
    """
    Axis-aligned rectangle as a CCW polygon.

    Args:
        center: Box center [x, y].
        half_extents: (hx, hy) half-width and half-height.
    """
    cx, cy = center
    hx, hy = half_extents
    return ConvexPolygon([
        [cx - hx, cy - hy],
        [cx + hx, cy - hy],
        [cx + hx, cy + hy],
        [cx - hx, cy + hy],
    ])


def regular_polygon(n: int, radius: float = 1.0, center=(0.0, 0.0), angle: float = 0.0) -> ConvexPolygon:
    """
    Regular n-gon inscribed in a circle, vertices in CCW order.

    The first vertex sits at ``angle`` radians from the +x axis.

    Raises:
        ValueError: If n < 3 or radius <= 0.
    """
    if n < 3:
        raise ValueError(f"regular polygon needs at least 3 sides, got {n}")
    if radius <= 0:
        raise ValueError(f"radius must be positive, got {radius}")
    theta = angle + 2.0 * np.pi * np.arange(n) / n
    verts = np.column_stack([np.cos(theta), np.sin(theta)]) * radius
    return ConvexPolygon(verts + np.asarray(center, dtype=np.float64))


def is_convex(vertices) -> bool:
    """
    Check that an ordered vertex list describes a convex polygon.

    All turns between consecutive edges must share one sign; collinear
    vertices (zero cross product) are allowed. Self-intersecting outlines
    that turn one way but wind more than once (e.g. a pentagram) are
    rejected. Fewer than three vertices (a point or a segment) count as
    convex.
    """
    verts = as_vertices(vertices)
    n = len(verts)
    if n < 3:
        return True

    sign = 0
    turning = 0.0
    for i in range(n):
        p0 = verts[i]
        p1 = verts[(i + 1) % n]
        p2 = verts[(i + 2) % n]
        # 2D cross of consecutive edges
        e0 = p1 - p0
        e1 = p2 - p1
        cross = e0[0] * e1[1] - e0[1] * e1[0]
        turning += abs(np.arctan2(cross, e0[0] * e1[0] + e0[1] * e1[1]))
        if cross == 0.0:
            continue
        s = 1 if cross > 0 else -1
        if sign == 0:
            sign = s
        elif s != sign:
            return False
    # One full turn for a simple polygon
    return bool(turning < 2.0 * np.pi + 1e-9)
