from __future__ import annotations

import math
from typing import Dict

import pytest

from bitonic_tour.algs.reference import bitonic_tour_with_tables
from bitonic_tour.common.constants import RNG_SEEDS, seed_everywhere
from tests.test_utils import gen_points, rng


seed_everywhere(RNG_SEEDS["tests"])


@pytest.mark.parametrize("n", [4, 5, 10, 20, 40])
def test_transition_counts_are_quadratic(n: int) -> None:
    pts = gen_points(rng(10_123 + n), n)
    debug: Dict[str, object] = {}
    tour, tables = bitonic_tour_with_tables(pts, debug=debug)
    assert tables is not None
    assert debug["n"] == n
    assert debug["cells"] == n * (n + 1) // 2
    assert debug["close_transitions"] == 2 * n - 3
    assert debug["close_candidates"] == (n - 1) ** 2
    assert debug["extend_transitions"] == (n - 3) * (n - 2) // 2
    assert math.isclose(debug["optimal_length"], tables.optimal_length)
    assert len(tables.distances) == len(tables.nodes) == n * n


@pytest.mark.slow
def test_large_instance_completes() -> None:
    pts = gen_points(rng(99), 300)
    tour, tables = bitonic_tour_with_tables(pts)
    assert tables is not None
    assert len(tour) == 300
