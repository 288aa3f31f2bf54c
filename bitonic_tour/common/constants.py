from __future__ import annotations

import os
import random
from typing import Dict

import numpy as np

# Geometry tolerance: retain source of truth from the geometry module.
from bitonic_tour.algs.geometry import EPS as _GEOM_EPS

EPS_GEOM: float = _GEOM_EPS
TOL_NUM: float = 1e-6
DEFAULT_SEED: int = 1337

# Below this size two proper monotone chains cannot be formed; inputs are
# returned in their given order.
MIN_BITONIC_POINTS: int = 4

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
    "bench": 4242,
    "data": 5150,
}


def seed_everywhere(seed: int) -> None:
    """Seed all supported RNG backends deterministically."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


__all__ = [
    "EPS_GEOM",
    "TOL_NUM",
    "DEFAULT_SEED",
    "MIN_BITONIC_POINTS",
    "RNG_SEEDS",
    "seed_everywhere",
]
