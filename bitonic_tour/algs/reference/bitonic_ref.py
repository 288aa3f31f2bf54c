"""Reference dynamic programming solver for the minimum bitonic tour.

Points are sorted by x and two flat ``n * n`` tables are filled: the cost
table ``D`` where cell ``(i, j)`` (``i <= j``) holds the shortest pair of
x-monotone paths covering ``sorted[0..j]`` with open ends at ``i`` and ``j``,
and a parallel table of :class:`BitonicNode` back-pointers. Each node records
one vertex together with the end of the output it is written to; walking the
nodes from the last diagonal cell yields the tour.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from bitonic_tour.algs import geometry
from bitonic_tour.algs.geometry import Point, distance, log, sort_points
from bitonic_tour.common.constants import MIN_BITONIC_POINTS

__all__ = [
    "FORWARD",
    "BACKWARD",
    "BitonicNode",
    "NIL_NODE",
    "BitonicTables",
    "build_bitonic_tables",
    "reconstruct_bitonic_tour",
    "bitonic_tour",
    "bitonic_tour_with_tables",
]


FORWARD = "forward"
BACKWARD = "backward"


# ---------------------------------------------------------------------------
#  Reconstruction nodes
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class BitonicNode:
    """One back-pointer cell.

    ``vertex`` is written to the front of the output for FORWARD nodes and to
    the back for BACKWARD nodes. ``fw_tip`` is the open, not yet written end
    of the forward chain. ``prev`` is the flat table index of the predecessor.
    """

    fw_tip: int
    direction: str
    vertex: int
    prev: int

    @property
    def is_nil(self) -> bool:
        return self.vertex == -1

    def extend(self, src: int, dst: int, prev: int) -> "BitonicNode":
        if src == self.fw_tip or self.is_nil:
            return BitonicNode(fw_tip=dst, direction=FORWARD, vertex=src, prev=prev)
        return BitonicNode(fw_tip=self.fw_tip, direction=BACKWARD, vertex=dst, prev=prev)


NIL_NODE = BitonicNode(fw_tip=-1, direction=FORWARD, vertex=-1, prev=-1)


@dataclass(frozen=True)
class BitonicTables:
    """Filled DP state for one solve."""

    sorted_points: Tuple[Point, ...]
    distances: List[float]
    nodes: List[BitonicNode]

    @property
    def n(self) -> int:
        return len(self.sorted_points)

    def offset(self, i: int, j: int) -> int:
        return i * self.n + j

    def cost(self, i: int, j: int) -> float:
        return self.distances[self.offset(i, j)]

    def node(self, i: int, j: int) -> BitonicNode:
        return self.nodes[self.offset(i, j)]

    @property
    def optimal_length(self) -> float:
        return self.distances[-1]

    @property
    def terminal_node(self) -> BitonicNode:
        return self.nodes[-1]


# ---------------------------------------------------------------------------
#  Table fill
# ---------------------------------------------------------------------------
def build_bitonic_tables(
    sorted_points: Sequence[Point],
    *,
    debug: Optional[Dict[str, Any]] = None,
) -> BitonicTables:
    """Fill the cost and back-pointer tables for x-sorted ``sorted_points``."""

    pts = tuple(sorted_points)
    n = len(pts)
    if n < 2:
        raise ValueError("bitonic tables need at least two points")

    D: List[float] = [math.inf] * (n * n)
    nodes: List[BitonicNode] = [NIL_NODE] * (n * n)
    extend_transitions = 0
    close_transitions = 0
    close_candidates = 0
    close_ties = 0

    # Row 0: a single chain through sorted[0..j].
    D[0] = 0.0
    for j in range(1, n):
        D[j] = D[j - 1] + distance(pts[j - 1], pts[j])
        nodes[j] = nodes[j - 1].extend(j - 1, j, j - 1)

    for i in range(1, n):
        for j in range(i, n):
            offset = i * n + j
            if i < j - 1:
                D[offset] = D[offset - 1] + distance(pts[j - 1], pts[j])
                nodes[offset] = nodes[offset - 1].extend(j - 1, j, offset - 1)
                extend_transitions += 1
                continue

            best = math.inf
            best_k = 0
            best_offset = 0
            for k in range(i):
                alt = k * n + i
                cand = D[alt] + distance(pts[k], pts[j])
                close_candidates += 1
                if cand < best:
                    best = cand
                    best_k = k
                    best_offset = alt
                elif cand == best:
                    close_ties += 1
            D[offset] = best
            nodes[offset] = nodes[best_offset].extend(best_k, j, best_offset)
            close_transitions += 1
            if geometry.VERBOSE:
                log(f"D[{i}][{j}] = {best:.6f} via k={best_k}")

    if debug is not None:
        debug.update(
            {
                "n": n,
                "cells": n * (n + 1) // 2,
                "extend_transitions": extend_transitions,
                "close_transitions": close_transitions,
                "close_candidates": close_candidates,
                "close_ties": close_ties,
                "optimal_length": D[-1],
            }
        )

    return BitonicTables(sorted_points=pts, distances=D, nodes=nodes)


# ---------------------------------------------------------------------------
#  Reconstruction
# ---------------------------------------------------------------------------
def reconstruct_bitonic_tour(tables: BitonicTables) -> List[Point]:
    """Walk the back-pointers from the last diagonal cell into a tour."""

    n = tables.n
    out: List[Optional[Point]] = [None] * n
    left, right = 0, n - 1
    node = tables.terminal_node
    while True:
        if node.direction == FORWARD:
            out[left] = tables.sorted_points[node.vertex]
            left += 1
        else:
            out[right] = tables.sorted_points[node.vertex]
            right -= 1
        node = tables.nodes[node.prev]
        if node.is_nil:
            break

    if left != right + 1:
        raise RuntimeError(
            f"reconstruction wrote {left + (n - 1 - right)} of {n} vertices"
        )
    return out  # type: ignore[return-value]


# ---------------------------------------------------------------------------
#  Public API
# ---------------------------------------------------------------------------
def bitonic_tour_with_tables(
    points: Sequence[Point],
    *,
    debug: Optional[Dict[str, Any]] = None,
) -> Tuple[List[Point], Optional[BitonicTables]]:
    """Return ``(tour, tables)``; ``tables`` is ``None`` for tiny inputs."""

    if len(points) < MIN_BITONIC_POINTS:
        return list(points), None
    tables = build_bitonic_tables(sort_points(points), debug=debug)
    tour = reconstruct_bitonic_tour(tables)
    if geometry.VERBOSE:
        log(f"bitonic tour over {tables.n} points, length {tables.optimal_length:.6f}")
    return tour, tables


def bitonic_tour(points: Sequence[Point]) -> List[Point]:
    """Minimum-length bitonic ordering of ``points``.

    Coordinates must be finite; NaN or infinite values give an undefined
    ordering. Fewer than four points are returned in their given order.
    """

    tour, _ = bitonic_tour_with_tables(points)
    return tour
