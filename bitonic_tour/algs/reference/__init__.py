"""Reference solvers for the minimum bitonic tour."""

from __future__ import annotations

from bitonic_tour.algs.reference.bitonic_ref import (
    BACKWARD,
    FORWARD,
    NIL_NODE,
    BitonicNode,
    BitonicTables,
    bitonic_tour,
    bitonic_tour_with_tables,
    build_bitonic_tables,
    reconstruct_bitonic_tour,
)

__all__ = [
    "FORWARD",
    "BACKWARD",
    "NIL_NODE",
    "BitonicNode",
    "BitonicTables",
    "bitonic_tour",
    "bitonic_tour_with_tables",
    "build_bitonic_tables",
    "reconstruct_bitonic_tour",
]
