"""
Microbenchmark: closest pair (divide and conquer) vs brute force.
Run:
  python benchmarks/bench_closest_pair.py
"""
import itertools
import time

import numpy as np
from geom2d import closest_pair, convex_hull, polygon_diameter
from geom2d.types import as_points
from geom2d.util import dist_sq


def brute_force(points):
    return min(dist_sq(a, b) for a, b in itertools.combinations(points, 2))


def timed(fn, *args, repeat: int = 3):
    best = float("inf")
    for _ in range(repeat):
        t0 = time.perf_counter()
        out = fn(*args)
        best = min(best, time.perf_counter() - t0)
    return out, best


def run(n: int):
    rng = np.random.default_rng(12345)  # determinism
    points = as_points(rng.uniform(0.0, 1000.0, size=(n, 2)))

    d, t_dc = timed(closest_pair, points)
    _, t_hull = timed(convex_hull, points)
    _, t_diam = timed(polygon_diameter, points)

    t_bf = None
    if n <= 2000:
        d2, t_bf = timed(brute_force, points, repeat=1)
        assert abs(float(d) ** 2 - float(d2)) < 1e-9 * max(1.0, float(d2))

    return t_dc, t_bf, t_hull, t_diam


if __name__ == "__main__":
    for n in [100, 500, 2000, 10000, 50000]:
        t_dc, t_bf, t_hull, t_diam = run(n)
        bf = f"{1e3*t_bf:9.2f} ms" if t_bf is not None else "        -   "
        print(f"N={n:6d}  closest={1e3*t_dc:9.2f} ms  brute={bf}  "
              f"hull={1e3*t_hull:8.2f} ms  diameter={1e3*t_diam:8.2f} ms")
