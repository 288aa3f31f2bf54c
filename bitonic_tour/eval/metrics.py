"""Evaluation metrics and summary utilities for bitonic tour outputs."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from bitonic_tour.algs.geometry import Point

__all__ = [
    "gap_pct",
    "tour_length_summary",
    "chain_split",
]


def gap_pct(cost: float, reference: float) -> float:
    """Relative excess of ``cost`` over ``reference`` in percent."""
    if reference <= 0.0:
        return 0.0
    return 100.0 * (cost - reference) / max(reference, 1e-9)


def tour_length_summary(lengths: Sequence[float]) -> dict[str, float]:
    if not lengths:
        return {"count": 0}
    arr = np.array(lengths, dtype=float)
    return {
        "count": float(arr.size),
        "mean": float(arr.mean()),
        "p50": float(np.percentile(arr, 50)),
        "p95": float(np.percentile(arr, 95)),
        "max": float(arr.max()),
    }


def chain_split(tour: Sequence[Point]) -> Tuple[List[Point], List[Point]]:
    """Split a tour into its two chains between the min-x and max-x points.

    Both chains are returned left to right and share their endpoints.
    """

    n = len(tour)
    if n == 0:
        return [], []
    xs = np.array([p[0] for p in tour], dtype=float)
    lo = int(np.argmin(xs))
    hi = int(np.argmax(xs))
    upper = [tour[(lo + i) % n] for i in range((hi - lo) % n + 1)]
    lower = [tour[(lo - i) % n] for i in range((lo - hi) % n + 1)]
    return upper, lower
