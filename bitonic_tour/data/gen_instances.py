"""Synthetic point-cloud families for tests and benchmarks.

``FamilyConfig`` declares the ranges shared by every family and
``draw_family`` samples an :class:`~bitonic_tour.data.schemas.Instance` from a
named family using a ``numpy.random.Generator``, so instances can be redrawn
exactly from the same seed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from bitonic_tour.data.schemas import Instance

FloatRange = Tuple[float, float]
Points = List[Tuple[float, ...]]

MIN_POINTS = 4
MAX_POINTS = 40

FAMILIES = ("uniform", "clustered", "circle", "grid")


@dataclass(frozen=True)
class FamilyConfig:
    """Configuration bundle for instance families."""

    x_range: FloatRange = (0.0, 100.0)
    y_range: FloatRange = (0.0, 100.0)
    min_points: int = MIN_POINTS
    max_points: int = MAX_POINTS
    dim: int = 2
    clusters: int = 3
    cluster_spread: float = 5.0
    jitter: float = 0.0

    def __post_init__(self) -> None:
        if not self.x_range[0] < self.x_range[1]:
            raise ValueError("x_range must contain ascending bounds")
        if not self.y_range[0] < self.y_range[1]:
            raise ValueError("y_range must contain ascending bounds")
        if self.min_points < 1 or self.max_points < self.min_points:
            raise ValueError("point counts must satisfy 1 <= min_points <= max_points")
        if self.dim not in (2, 3):
            raise ValueError("dim must be 2 or 3")
        if self.clusters < 1:
            raise ValueError("clusters must be positive")
        if self.cluster_spread <= 0.0:
            raise ValueError("cluster_spread must be positive")
        if self.jitter < 0.0:
            raise ValueError("jitter must be non-negative")


def _sample_count(config: FamilyConfig, rng: np.random.Generator) -> int:
    return int(rng.integers(config.min_points, config.max_points + 1))


def _uniform(config: FamilyConfig, rng: np.random.Generator, n: int) -> np.ndarray:
    xs = rng.uniform(*config.x_range, size=n)
    ys = rng.uniform(*config.y_range, size=n)
    return np.column_stack([xs, ys])


def _clustered(config: FamilyConfig, rng: np.random.Generator, n: int) -> np.ndarray:
    centres = _uniform(config, rng, config.clusters)
    assignment = rng.integers(0, config.clusters, size=n)
    offsets = rng.normal(0.0, config.cluster_spread, size=(n, 2))
    pts = centres[assignment] + offsets
    pts[:, 0] = np.clip(pts[:, 0], *config.x_range)
    pts[:, 1] = np.clip(pts[:, 1], *config.y_range)
    return pts


def _circle(config: FamilyConfig, rng: np.random.Generator, n: int) -> np.ndarray:
    cx = 0.5 * (config.x_range[0] + config.x_range[1])
    cy = 0.5 * (config.y_range[0] + config.y_range[1])
    radius = 0.5 * min(config.x_range[1] - config.x_range[0], config.y_range[1] - config.y_range[0])
    angles = np.sort(rng.uniform(0.0, 2.0 * math.pi, size=n))
    return np.column_stack([cx + radius * np.cos(angles), cy + radius * np.sin(angles)])


def _grid(config: FamilyConfig, rng: np.random.Generator, n: int) -> np.ndarray:
    side = max(2, math.ceil(math.sqrt(n)))
    xs = np.linspace(*config.x_range, side)
    ys = np.linspace(*config.y_range, side)
    cells = np.array([(x, y) for x in xs for y in ys])
    picked = rng.choice(len(cells), size=n, replace=False)
    return cells[picked]


_GENERATORS = {
    "uniform": _uniform,
    "clustered": _clustered,
    "circle": _circle,
    "grid": _grid,
}


def draw_family(family: str, config: FamilyConfig, rng: np.random.Generator) -> Instance:
    try:
        generator = _GENERATORS[family]
    except KeyError:
        raise ValueError(f"Unknown instance family: {family!r}") from None

    n = _sample_count(config, rng)
    pts = generator(config, rng, n)
    if config.jitter > 0.0:
        pts = pts + rng.normal(0.0, config.jitter, size=pts.shape)
    if config.dim == 3:
        pts = np.column_stack([pts, np.zeros(n)])
    points: Points = [tuple(float(c) for c in row) for row in pts]
    return Instance(points=tuple(points))


__all__ = ["FAMILIES", "FamilyConfig", "draw_family"]
