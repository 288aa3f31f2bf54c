"""Algorithm package entry points with reference solvers exposed by default."""

from __future__ import annotations

import bitonic_tour.algs.reference as reference
from bitonic_tour.algs.reference import (
    BitonicTables,
    bitonic_tour,
    bitonic_tour_with_tables,
    build_bitonic_tables,
    reconstruct_bitonic_tour,
)

__all__ = [
    "bitonic_tour",
    "bitonic_tour_with_tables",
    "build_bitonic_tables",
    "reconstruct_bitonic_tour",
    "BitonicTables",
    "reference",
]
