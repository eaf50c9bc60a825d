# MIT License (see LICENSE)
"""
Numeric constants and defaults used by the GJK intersection test.

The iteration bound guards the main loop against malformed (non-convex or
self-intersecting) input. For convex polygons the loop converges long
before the bound is reached: each iteration picks a vertex of the Minkowski
difference, which has at most len(A) + len(B) vertices.
"""
from __future__ import annotations

# Default iteration bound: ITERATION_FACTOR * (len(A) + len(B)) + ITERATION_SLACK
ITERATION_FACTOR: int = 4
ITERATION_SLACK: int = 8

# Environment variable that overrides the default bound when set.
# Must parse as a positive integer.
MAX_ITERS_ENV: str = "GJK2D_MAX_ITERS"
