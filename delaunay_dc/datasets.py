"""
Deterministic point sets for tests and benchmarks.

Every generator returns an (N, 2) float array in arbitrary order; pass it
through prepare_points() to get the sorted, duplicate-free input that
triangulate() expects.
"""

import math

import numpy as np

from . import config


def prepare_points(points):
    """Sort by (x, y) and drop duplicate sites.

    This is the caller-side step triangulate() leaves out.
    """
    arr = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(arr) == 0:
        return arr
    # unique(axis=0) sorts rows lexicographically
    return np.unique(arr, axis=0)


def uniform_points(n, radius=config.DEFAULT_RADIUS, seed=config.DEFAULT_SEED):
    rng = np.random.default_rng(seed + n)
    return rng.uniform(-radius, radius, size=(n, 2))


def normal_points(n, radius=config.DEFAULT_RADIUS, seed=config.DEFAULT_SEED):
    rng = np.random.default_rng(seed + n)
    return rng.normal(0.0, radius / 3.0, size=(n, 2))


def circle_points(n, radius=config.DEFAULT_RADIUS, seed=config.DEFAULT_SEED):
    """Sites on a circle, jittered radially so no four are cocircular."""
    rng = np.random.default_rng(seed + n)
    angles = np.sort(rng.uniform(0.0, 2 * math.pi, size=n))
    r = radius * (1.0 + 1e-3 * rng.uniform(-1.0, 1.0, size=n))
    return np.column_stack([r * np.cos(angles), r * np.sin(angles)])


def grid_points(n, radius=config.DEFAULT_RADIUS, seed=config.DEFAULT_SEED, jitter=1e-3):
    """About n sites on a square grid, jittered off the degenerate lattice."""
    side = max(2, int(math.ceil(math.sqrt(n))))
    ticks = np.linspace(-radius, radius, side)
    xx, yy = np.meshgrid(ticks, ticks)
    pts = np.column_stack([xx.ravel(), yy.ravel()])[:n]
    rng = np.random.default_rng(seed + n)
    step = 2 * radius / (side - 1)
    return pts + rng.uniform(-jitter, jitter, size=pts.shape) * step


GENERATORS = {
    "uniform": uniform_points,
    "normal": normal_points,
    "circle": circle_points,
    "grid": grid_points,
}


def generate(kind, n, seed=config.DEFAULT_SEED):
    """Sorted, duplicate-free sites of the given kind."""
    try:
        gen = GENERATORS[kind]
    except KeyError:
        raise ValueError(f"unknown dataset kind {kind!r}; expected one of {sorted(GENERATORS)}") from None
    return prepare_points(gen(n, seed=seed))
