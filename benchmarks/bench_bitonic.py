"""Benchmark harness for the reference bitonic tour solver."""

from __future__ import annotations

import argparse
import math
import statistics
import time
from typing import Dict, List, Optional, Sequence

import sys
from pathlib import Path

import numpy as np

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from bitonic_tour.algs.geometry import closed_tour_length, sort_points
from bitonic_tour.algs.reference import bitonic_tour_with_tables
from bitonic_tour.common.constants import DEFAULT_SEED, RNG_SEEDS, TOL_NUM
from bitonic_tour.data.gen_instances import FAMILIES, FamilyConfig, draw_family
from bitonic_tour.eval.metrics import gap_pct, tour_length_summary

TOL = TOL_NUM
BENCH_SEED = RNG_SEEDS.get("bench", DEFAULT_SEED)


def percentile(sorted_values: Sequence[float], pct: float) -> float:
    if not sorted_values:
        return float("nan")
    if pct <= 0:
        return sorted_values[0]
    if pct >= 1:
        return sorted_values[-1]
    idx = (len(sorted_values) - 1) * pct
    lo = math.floor(idx)
    hi = math.ceil(idx)
    if lo == hi:
        return sorted_values[int(idx)]
    weight = idx - lo
    return sorted_values[lo] * (1.0 - weight) + sorted_values[hi] * weight


def run_size(
    rng: np.random.Generator,
    family: str,
    n: int,
    repeats: int,
) -> Dict[str, float]:
    config = FamilyConfig(min_points=n, max_points=n)
    timings: List[float] = []
    lengths: List[float] = []
    gaps: List[float] = []
    candidates: List[int] = []
    for _ in range(repeats):
        points = list(draw_family(family, config, rng).points)
        debug: Dict[str, object] = {}
        start = time.perf_counter()
        tour, tables = bitonic_tour_with_tables(points, debug=debug)
        timings.append(time.perf_counter() - start)
        length = closed_tour_length(tour)
        lengths.append(length)
        if tables is not None:
            if abs(length - tables.optimal_length) > TOL * max(1.0, length):
                raise RuntimeError(f"n={n}: tour length {length} != DP optimum {tables.optimal_length}")
            candidates.append(int(debug["close_candidates"]))
        # baseline: visit the points in x order and jump straight back
        gaps.append(gap_pct(closed_tour_length(sort_points(points)), length))
    timings.sort()
    summary = tour_length_summary(lengths)
    return {
        "n": float(n),
        "mean_ms": 1e3 * statistics.fmean(timings),
        "p50_ms": 1e3 * percentile(timings, 0.5),
        "p95_ms": 1e3 * percentile(timings, 0.95),
        "mean_length": summary["mean"],
        "sorted_gap_pct": float(statistics.fmean(gaps)),
        "close_candidates": float(statistics.fmean(candidates)) if candidates else 0.0,
    }


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--sizes", type=str, default="8,16,32,64,128,256")
    parser.add_argument("--family", choices=FAMILIES, default="uniform")
    parser.add_argument("--repeats", type=int, default=5)
    parser.add_argument("--seed", type=int, default=BENCH_SEED)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> List[Dict[str, float]]:
    args = parse_args(argv)
    sizes = [int(s) for s in args.sizes.split(",") if s.strip()]
    rng = np.random.default_rng(args.seed)
    rows = []
    print(
        f"{'n':>6} {'mean ms':>10} {'p50 ms':>10} {'p95 ms':>10} "
        f"{'length':>10} {'gap %':>8} {'close cand':>12}"
    )
    for n in sizes:
        row = run_size(rng, args.family, n, args.repeats)
        rows.append(row)
        print(
            f"{n:>6d} {row['mean_ms']:>10.3f} {row['p50_ms']:>10.3f} {row['p95_ms']:>10.3f} "
            f"{row['mean_length']:>10.3f} {row['sorted_gap_pct']:>8.2f} {row['close_candidates']:>12.0f}"
        )
    return rows


if __name__ == "__main__":
    main()
