# Reference solver – default export
from .algs.reference import (
    BitonicTables,
    bitonic_tour,
    bitonic_tour_with_tables,
    build_bitonic_tables,
    reconstruct_bitonic_tour,
)

# Geometry & constants
from .algs.geometry import (
    VERBOSE,
    closed_tour_length,
    distance,
    is_bitonic,
    path_length,
    sort_points,
)
from .common.constants import (
    DEFAULT_SEED,
    EPS_GEOM,
    MIN_BITONIC_POINTS,
    RNG_SEEDS,
    TOL_NUM,
    seed_everywhere,
)

from .algs import reference as reference

__all__ = [
    # geometry
    "distance",
    "sort_points",
    "path_length",
    "closed_tour_length",
    "is_bitonic",
    "VERBOSE",
    "EPS_GEOM",
    "TOL_NUM",
    "DEFAULT_SEED",
    "MIN_BITONIC_POINTS",
    "RNG_SEEDS",
    "seed_everywhere",
    # solver
    "bitonic_tour",
    "bitonic_tour_with_tables",
    "build_bitonic_tables",
    "reconstruct_bitonic_tour",
    "BitonicTables",
    "reference",
]
