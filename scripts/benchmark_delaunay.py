#!/usr/bin/env python3
"""
Benchmark for the divide-and-conquer Delaunay triangulator.

Times triangulate() on generated point sets and reports the recursion and
edge statistics. Small instances are also checked with
verify_triangulation().

Usage:
    python3 scripts/benchmark_delaunay.py [--sizes N1 N2 ...] [--runs R] [--csv PATH]
"""

from __future__ import annotations

import argparse
import csv
import statistics
import sys
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from delaunay_dc.datasets import GENERATORS, generate
from delaunay_dc.triangulation import DelaunayTriangulator
from delaunay_dc.validate import verify_triangulation


def log(msg: str) -> None:
    """Print timestamped log message."""
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}")


def positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {text}")
    return value


@dataclass
class RunResult:
    kind: str
    n: int
    seed: int
    time_ms: float
    max_depth: int
    cross_edges: int
    deleted_edges: int
    verified: Optional[bool] = None


def run_once(kind: str, n: int, seed: int, verify_max: int) -> RunResult:
    pts = generate(kind, n, seed=seed)
    tri = DelaunayTriangulator(pts)

    t0 = time.perf_counter()
    hull_edges = tri.triangulate()
    elapsed = (time.perf_counter() - t0) * 1000.0

    verified = None
    if len(pts) <= verify_max:
        le = hull_edges[0] if hull_edges else None
        verified, msg = verify_triangulation(pts, le)
        if not verified:
            log(f"FAIL [{kind} n={n} seed={seed}]: {msg}")

    return RunResult(
        kind=kind,
        n=len(pts),
        seed=seed,
        time_ms=elapsed,
        max_depth=tri.stats['max_depth'],
        cross_edges=tri.stats['cross_edges'],
        deleted_edges=tri.stats['deleted_edges'],
        verified=verified,
    )


def write_csv(results: List[RunResult], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["kind", "n", "seed", "time_ms", "max_depth",
                         "cross_edges", "deleted_edges", "verified"])
        for r in results:
            writer.writerow([r.kind, r.n, r.seed, f"{r.time_ms:.3f}", r.max_depth,
                             r.cross_edges, r.deleted_edges,
                             "" if r.verified is None else int(r.verified)])


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark divide-and-conquer Delaunay triangulation")
    parser.add_argument("--sizes", nargs="+", type=positive_int, default=[100, 1000, 10000],
                        help="Point counts (default: 100 1000 10000)")
    parser.add_argument("--runs", type=positive_int, default=3,
                        help="Runs per configuration, one seed each (default: 3)")
    parser.add_argument("--kinds", nargs="+", default=list(GENERATORS),
                        help=f"Point-set families (default: {' '.join(GENERATORS)})")
    parser.add_argument("--seed", type=int, default=0,
                        help="First seed (default: 0)")
    parser.add_argument("--verify-max", type=int, default=500,
                        help="Verify instances up to this many points (default: 500)")
    parser.add_argument("--csv", type=Path, default=None,
                        help="Write per-run results to this CSV file")
    args = parser.parse_args(argv)

    unknown = sorted(set(args.kinds) - set(GENERATORS))
    if unknown:
        log(f"ERROR: Unknown kinds: {unknown} (known: {list(GENERATORS)})")
        return 2

    log(f"Starting benchmark: sizes={args.sizes}, runs={args.runs}")

    results: List[RunResult] = []
    failed = 0
    for kind in args.kinds:
        log(f"=== {kind.upper()} ===")
        for n in args.sizes:
            runs = [run_once(kind, n, args.seed + i, args.verify_max) for i in range(args.runs)]
            results.extend(runs)
            failed += sum(1 for r in runs if r.verified is False)

            times = [r.time_ms for r in runs]
            mean = statistics.mean(times)
            stdev = statistics.stdev(times) if len(times) > 1 else 0.0
            depth = max(r.max_depth for r in runs)
            deleted = statistics.mean(r.deleted_edges for r in runs)
            log(f"  n={n:>7,}: {mean:>10.3f} ms (+/- {stdev:.3f}) depth={depth:>3} "
                f"deleted/n={deleted / n:.2f}")

    if args.csv is not None:
        write_csv(results, args.csv)
        log(f"Results saved to {args.csv}")

    log(f"Benchmark complete: {len(results)} runs, {failed} failed verification")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
