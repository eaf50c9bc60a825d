# MIT License (see LICENSE)
"""
Gilbert-Johnson-Keerthi (GJK) intersection test for convex polygons.

GJK works in Minkowski space: two convex shapes A and B overlap iff the
Minkowski difference A - B contains the origin. The algorithm grows a
simplex (1-3 points of A - B) using the support mapping and steers the
search direction toward the origin until it either encloses the origin or
finds a direction in which A - B cannot reach it.

Key concepts:
- Support mapping: furthest vertex of a shape along a direction.
- Minkowski difference: {a - b : a in A, b in B}.
- Simplex: fixed 3-slot buffer; the newest support point is vertex A.

Boundary contact (shapes touching along an edge or at a single vertex
with no interior overlap) reports DISJOINT: the support point that lands
exactly on the origin fails the ``dot(a, d) <= 0`` test.

Usage:
    tri = [(0, 0), (4, 0), (0, 4)]
    other = [(1, 1), (5, 1), (1, 5)]
    if intersects(tri, other):
        ...
"""
from __future__ import annotations
import enum
import logging
import os

import numpy as np

from .constants import ITERATION_FACTOR, ITERATION_SLACK, MAX_ITERS_ENV
from .vector import (
    as_vertices,
    average_point,
    dot,
    length_squared,
    minkowski_support,
    negate,
    perpendicular,
    subtract,
    triple_product,
)

logger = logging.getLogger(__name__)


class Verdict(enum.IntEnum):
    """Outcome of an intersection test. Truthy iff the shapes intersect."""
    DISJOINT = 0
    INTERSECTING = 1


class GJKError(RuntimeError):
    """Base class for GJK failures that are not a verdict."""


class NonConvergenceError(GJKError):
    """
    The main loop hit its iteration bound without reaching a verdict.

    Only expected for malformed input (non-convex or self-intersecting
    vertex lists). Convex polygons always terminate well within the bound.

    Attributes:
        iterations: Number of iterations run before giving up.
        max_iters: The bound that was in effect.
    """

    def __init__(self, iterations: int, max_iters: int) -> None:
        super().__init__(
            f"GJK did not converge after {iterations} iterations "
            f"(limit {max_iters}); input is probably not convex"
        )
        self.iterations = iterations
        self.max_iters = max_iters


def iteration_limit(n_a: int, n_b: int, max_iters: int | None = None) -> int:
    """
    Resolve the iteration bound for shapes with n_a and n_b vertices.

    Precedence: explicit ``max_iters``, then the GJK2D_MAX_ITERS
    environment variable, then ITERATION_FACTOR * (n_a + n_b) + ITERATION_SLACK.

    Raises:
        ValueError: If the resolved bound is not a positive integer.
    """
    if max_iters is None:
        raw = os.environ.get(MAX_ITERS_ENV)
        if raw is None or raw.strip() == "":
            return ITERATION_FACTOR * (n_a + n_b) + ITERATION_SLACK
        try:
            max_iters = int(raw)
        except ValueError:
            raise ValueError(f"{MAX_ITERS_ENV} must be an integer, got {raw!r}") from None
    if max_iters < 1:
        raise ValueError(f"max_iters must be >= 1, got {max_iters}")
    return max_iters


def intersects(shape_a, shape_b, max_iters: int | None = None) -> Verdict:
    """
    Test whether two convex polygons overlap.

    Args:
        shape_a: Vertices of the first polygon, any (N, 2) array-like.
        shape_b: Vertices of the second polygon, any (M, 2) array-like.
        max_iters: Safety bound on loop iterations. Defaults to
            4 * (N + M) + 8, or GJK2D_MAX_ITERS when set.

    Returns:
        Verdict.INTERSECTING if the Minkowski difference encloses the
        origin, Verdict.DISJOINT otherwise.

    Raises:
        ValueError: If either shape is empty or not a list of 2D points.
        NonConvergenceError: If the loop exceeds max_iters (malformed input).

    Note:
        Convexity is not checked; see shapes.is_convex.
    """
    verts_a = as_vertices(shape_a)
    verts_b = as_vertices(shape_b)
    limit = iteration_limit(len(verts_a), len(verts_b), max_iters)
    logger.debug("GJK: iteration bound %d (n_a=%d, n_b=%d)", limit, len(verts_a), len(verts_b))

    d = subtract(average_point(verts_a), average_point(verts_b))
    if d[0] == 0.0 and d[1] == 0.0:
        d[0] = 1.0

    simplex = np.zeros((3, 2), dtype=np.float64)
    index = 0

    a = minkowski_support(d, verts_a, verts_b)
    simplex[0] = a

    if dot(a, d) <= 0.0:
        logger.debug("GJK: disjoint at seed (n_a=%d, n_b=%d)", len(verts_a), len(verts_b))
        return Verdict.DISJOINT

    negate(a, out=d)

    for iteration in range(1, limit + 1):
        index += 1
        simplex[index] = minkowski_support(d, verts_a, verts_b)
        a = simplex[index]

        if dot(a, d) <= 0.0:
            logger.debug("GJK: disjoint after %d iterations", iteration)
            return Verdict.DISJOINT

        ao = negate(a)

        if index < 2:
            # Line segment: search perpendicular to AB, toward the origin
            ab = subtract(simplex[0], a)
            d = triple_product(ab, ao, ab)
            if length_squared(d) == 0.0:
                # Origin lies on the line through A and B
                d = perpendicular(ab)
            continue

        ab = subtract(simplex[1], a)
        ac = subtract(simplex[0], a)

        acperp = triple_product(ab, ac, ac)

        if dot(acperp, ao) >= 0.0:
            # Origin beyond edge AC: drop B
            d = acperp
        else:
            abperp = triple_product(ac, ab, ab)

            if dot(abperp, ao) < 0.0:
                logger.debug("GJK: intersecting after %d iterations", iteration)
                return Verdict.INTERSECTING

            # Origin beyond edge AB: drop C
            simplex[0] = simplex[1]
            d = abperp

        simplex[1] = simplex[2]
        index -= 1

    logger.warning(
        "GJK: no verdict after %d iterations (n_a=%d, n_b=%d)",
        iteration, len(verts_a), len(verts_b),
    )
    raise NonConvergenceError(iteration, limit)
