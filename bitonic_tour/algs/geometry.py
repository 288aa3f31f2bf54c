from __future__ import annotations
import math
from typing import List, Sequence, Tuple

VERBOSE: bool = False
EPS: float = 1e-9

Point = Tuple[float, ...]

def log(*args, **kwargs) -> None:  # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)

def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.dist(a, b)

def sort_points(points: Sequence[Point]) -> List[Point]:
    """Return a copy of ``points`` ordered by ascending x (ties keep input order)."""
    return sorted(points, key=lambda p: p[0])

def path_length(points: Sequence[Point]) -> float:
    return sum(distance(points[i - 1], points[i]) for i in range(1, len(points)))

def closed_tour_length(points: Sequence[Point]) -> float:
    """Length of points[0] -> ... -> points[-1] -> points[0]."""
    if len(points) < 2:
        return 0.0
    return path_length(points) + distance(points[-1], points[0])

def is_bitonic(tour: Sequence[Point], *, tol: float = EPS) -> bool:
    n = len(tour)
    if n < 3:
        return True
    start = min(range(n), key=lambda i: tour[i][0])
    xs = [tour[(start + i) % n][0] for i in range(n)]
    i = 1
    while i < n and xs[i] >= xs[i - 1] - tol:
        i += 1
    while i < n and xs[i] <= xs[i - 1] + tol:
        i += 1
    return i == n
