# MIT License (see LICENSE)
"""
2D vector primitives for the GJK intersection test.

Vectors are numpy float64 arrays of shape (2,); vertex lists are arrays of
shape (N, 2). Operations that produce a vector return a new array unless an
``out`` array is given, in which case the result is written into ``out``
and ``out`` is returned. Passing the input itself as ``out`` gives the
mutate-and-return-self form:

    d = negate(a)            # new array
    negate(d, out=d)         # flips d in place, returns d

Scalar results are returned as Python floats.
"""
from __future__ import annotations

import numpy as np

Vec2 = np.ndarray  # Shape (2,), dtype float64
Vertices = np.ndarray  # Shape (N, 2), dtype float64


def vec2(x: float, y: float) -> Vec2:
    """Build a float64 vector (x, y)."""
    return np.array([x, y], dtype=np.float64)


def as_vertices(points) -> Vertices:
    """
    Convert an array-like of 2D points to a float64 array of shape (N, 2).

    Accepts lists of tuples, nested lists, numpy arrays and anything
    implementing ``__array__`` (e.g. ConvexPolygon).

    Raises:
        ValueError: If the input is empty or is not a list of 2D points.
    """
    verts = np.asarray(points, dtype=np.float64)
    if verts.size == 0:
        raise ValueError("shape must have at least one vertex")
    if verts.ndim != 2 or verts.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) array of points, got shape {verts.shape}")
    return verts


def subtract(a: Vec2, b: Vec2, out: Vec2 | None = None) -> Vec2:
    """Componentwise difference a - b."""
    if out is None:
        return np.array([a[0] - b[0], a[1] - b[1]], dtype=np.float64)
    out[0] = a[0] - b[0]
    out[1] = a[1] - b[1]
    return out


def negate(v: Vec2, out: Vec2 | None = None) -> Vec2:
    """Negated vector -v."""
    if out is None:
        return np.array([-v[0], -v[1]], dtype=np.float64)
    out[0] = -v[0]
    out[1] = -v[1]
    return out


def perpendicular(v: Vec2, out: Vec2 | None = None) -> Vec2:
    """
    Rotate v by -90 degrees: (x, y) -> (y, -x).

    The orientation is fixed; the sign tests in the GJK loop rely on it.
    """
    x, y = v[0], v[1]
    if out is None:
        return np.array([y, -x], dtype=np.float64)
    out[0] = y
    out[1] = -x
    return out


def dot(a: Vec2, b: Vec2) -> float:
    """Dot product a.x*b.x + a.y*b.y."""
    return float(a[0] * b[0] + a[1] * b[1])


def length_squared(v: Vec2) -> float:
    """Squared magnitude of v. Avoids sqrt."""
    return float(v[0] * v[0] + v[1] * v[1])


def triple_product(a: Vec2, b: Vec2, c: Vec2) -> Vec2:
    """
    Vector triple product (a x b) x c expanded for 2D: b(a.c) - a(b.c).

    With a = c = AB and b = AO the result is perpendicular to AB and points
    toward the origin side, which is how GJK picks its next search
    direction.
    """
    ac = dot(a, c)
    bc = dot(b, c)
    return np.array([b[0] * ac - a[0] * bc, b[1] * ac - a[1] * bc], dtype=np.float64)


def average_point(vertices: Vertices) -> Vec2:
    """
    Centroid (arithmetic mean) of a vertex list.

    Raises:
        ValueError: If vertices is empty.
    """
    if len(vertices) == 0:
        raise ValueError("average_point requires at least one vertex")
    n = len(vertices)
    sx = 0.0
    sy = 0.0
    for vx, vy in vertices:
        sx += vx
        sy += vy
    return np.array([sx / n, sy / n], dtype=np.float64)


def index_of_furthest_point(direction: Vec2, vertices: Vertices) -> int:
    """
    Index of the vertex with the largest projection onto direction.

    Ties keep the first (lowest-index) maximum.

    Raises:
        ValueError: If vertices is empty.
    """
    if len(vertices) == 0:
        raise ValueError("index_of_furthest_point requires at least one vertex")
    # Same arithmetic as dot() so ties compare exactly equal
    dots = vertices[:, 0] * direction[0] + vertices[:, 1] * direction[1]
    return int(np.argmax(dots))


def minkowski_support(direction: Vec2, vertices_a: Vertices, vertices_b: Vertices) -> Vec2:
    """
    Support point of the Minkowski difference A - B along direction.

    supA(d) - supB(-d), a vertex on the boundary of A - B.
    """
    i = index_of_furthest_point(direction, vertices_a)
    j = index_of_furthest_point(negate(direction), vertices_b)
    return subtract(vertices_a[i], vertices_b[j])
