"""Cluster uniformly random 3-D points and report the result."""

from __future__ import annotations

import argparse
import random
import time
from typing import Sequence

from kdcluster.dbscan import DBSCAN


def generate_points(
    count: int,
    low: float = 0.0,
    high: float = 2000.0,
    seed: int | None = 0,
) -> list[tuple[float, float, float]]:
    """Return ``count`` points with coordinates drawn uniformly from [low, high]."""
    if count < 0:
        raise ValueError("count must not be negative")
    if low > high:
        raise ValueError("low must not exceed high")
    rng = random.Random(seed)
    return [(rng.uniform(low, high), rng.uniform(low, high), rng.uniform(low, high)) for _ in range(count)]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run DBSCAN over random 3-D points.")
    parser.add_argument("--eps", type=float, default=10.0)
    parser.add_argument("--min-points", type=int, default=3)
    parser.add_argument("--num-points", type=int, default=24000)
    parser.add_argument("--low", type=float, default=0.0)
    parser.add_argument("--high", type=float, default=2000.0)
    parser.add_argument("--seed", type=int, default=0)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    points = generate_points(args.num_points, args.low, args.high, args.seed)
    print(f"number of points: {len(points)}")

    start = time.perf_counter()
    clusters = DBSCAN(args.eps, args.min_points).estimate_cluster_indices(points)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    print(f"number of clusters: {len(clusters)}")
    print(f"processing time: {elapsed_ms:.3f} [ms]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())