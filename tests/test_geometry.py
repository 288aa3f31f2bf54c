from __future__ import annotations

import math

import pytest

from bitonic_tour.algs.geometry import (
    closed_tour_length,
    distance,
    is_bitonic,
    path_length,
    sort_points,
)
from bitonic_tour.eval.metrics import chain_split, gap_pct, tour_length_summary


def test_sort_points_copies_and_orders() -> None:
    pts = [(3.0, 0.0), (1.0, 5.0), (2.0, -1.0)]
    out = sort_points(pts)
    assert out == [(1.0, 5.0), (2.0, -1.0), (3.0, 0.0)]
    assert pts == [(3.0, 0.0), (1.0, 5.0), (2.0, -1.0)]


def test_sort_points_uses_first_coordinate_only() -> None:
    pts = [(1.0, 9.0), (0.0, 100.0), (1.0, -9.0)]
    assert [p[0] for p in sort_points(pts)] == [0.0, 1.0, 1.0]


def test_distance_is_full_dimensional() -> None:
    assert distance((0.0, 0.0), (3.0, 4.0)) == 5.0
    assert distance((0.0, 0.0, 0.0), (1.0, 2.0, 2.0)) == 3.0


def test_tour_lengths() -> None:
    square = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    assert path_length(square) == 3.0
    assert closed_tour_length(square) == 4.0
    assert closed_tour_length([(1.0, 1.0)]) == 0.0
    assert closed_tour_length([]) == 0.0


@pytest.mark.parametrize(
    "tour,expected",
    [
        ([(0, 0), (1, 1), (2, 0), (1, -1)], True),
        ([(1, 1), (2, 0), (1, -1), (0, 0)], True),
        ([(0, 0), (2, 1), (1, 2), (3, 0), (1.5, -1)], False),
        ([(0, 0), (1, 0)], True),
    ],
)
def test_is_bitonic(tour, expected) -> None:
    assert is_bitonic(tour) is expected


def test_chain_split_shares_endpoints() -> None:
    tour = [(2.5, 5.5), (2.0, 5.0), (1.0, 2.0), (3.0, 1.0), (4.0, 4.0)]
    upper, lower = chain_split(tour)
    assert upper == [(1.0, 2.0), (3.0, 1.0), (4.0, 4.0)]
    assert lower == [(1.0, 2.0), (2.0, 5.0), (2.5, 5.5), (4.0, 4.0)]
    assert chain_split([]) == ([], [])


def test_metrics_summaries() -> None:
    assert tour_length_summary([]) == {"count": 0}
    summary = tour_length_summary([1.0, 2.0, 3.0])
    assert summary["count"] == 3.0
    assert math.isclose(summary["mean"], 2.0)
    assert summary["max"] == 3.0
    assert math.isclose(gap_pct(11.0, 10.0), 10.0)
    assert gap_pct(5.0, 0.0) == 0.0


def test_is_bitonic_tolerance_is_keyword_only() -> None:
    wobble = [(0.0, 0.0), (1.0, 1.0), (0.99, 2.0), (2.0, 0.0)]
    assert is_bitonic(wobble) is False
    assert is_bitonic(wobble, tol=0.05) is True
    with pytest.raises(TypeError):
        is_bitonic(wobble, 0.05)  # type: ignore[misc]


def test_metrics_exports() -> None:
    from bitonic_tour.eval import metrics

    assert sorted(metrics.__all__) == ["chain_split", "gap_pct", "tour_length_summary"]
    assert not hasattr(metrics, "summarize_lengths")
    assert not hasattr(metrics, "extract_costs")
