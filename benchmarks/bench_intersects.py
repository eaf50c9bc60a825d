"""
Microbenchmark: time per intersects() call vs polygon vertex count.
Run:
  python benchmarks/bench_intersects.py
"""
import time
import numpy as np
from gjk2d import regular_polygon, intersects


def run(n: int, calls: int = 2000):
    rng = np.random.default_rng(12345)  # determinism
    a = regular_polygon(n, radius=1.0)
    offsets = rng.uniform(-3.0, 3.0, size=(calls, 2))
    shapes = [regular_polygon(n, radius=1.0, center=o, angle=0.1).vertices for o in offsets]

    # warmup
    for s in shapes[:50]:
        intersects(a, s)

    hits = 0
    t0 = time.perf_counter()
    for s in shapes:
        if intersects(a, s):
            hits += 1
    t1 = time.perf_counter()
    return (t1 - t0) / calls, hits


if __name__ == "__main__":
    for n in [3, 8, 32, 128, 512]:
        per_call, hits = run(n)
        print(f"N={n:4d}  call={1e6*per_call:8.2f} us  calls/s={1/per_call:9.1f}  hits={hits}")
