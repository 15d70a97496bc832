import logging

import numpy as np
import pytest

from delaunay_dc import config
from delaunay_dc.datasets import generate
from delaunay_dc.mesh import hull, iter_edges, triangles, vertices
from delaunay_dc.predicates import ccw, in_circle
from delaunay_dc.quadedge import Point
from delaunay_dc.triangulation import DelaunayTriangulator, as_points, first_unsorted, triangulate


def orbit_length(e, step):
    n, x = 1, step(e)
    while x is not e:
        n += 1
        x = step(x)
    return n


def monotone_chain(pts):
    """Strict convex hull, CCW from the lexicographically smallest point."""
    pts = sorted(pts)

    def half(seq):
        out = []
        for p in seq:
            while len(out) >= 2 and not ccw(out[-2], out[-1], p):
                out.pop()
            out.append(p)
        return out

    lower = half(pts)
    upper = half(reversed(pts))
    return lower[:-1] + upper[:-1]


# ---------------------------------------------------------------
# Base cases
# ---------------------------------------------------------------

@pytest.mark.parametrize("pts", [[], [(3.0, 4.0)]])
def test_fewer_than_two_points(pts):
    assert triangulate(pts) == ()


def test_two_points():
    le, re = triangulate([(0, 0), (1, 2)])
    assert le.org == (0, 0)
    assert le.dest == (1, 2)
    assert le.sym is re
    assert re.org == (1, 2)
    assert re.dest == (0, 0)


def test_collinear_triple():
    le, re = triangulate([(0, 0), (1, 0), (2, 0)])
    assert le.org == (0, 0) and le.dest == (1, 0)
    assert re.org == (2, 0) and re.dest == (1, 0)

    # Chained at (1, 0), nothing closes the triangle.
    assert le.sym.o_next is re.sym
    assert re.sym.o_next is le.sym
    assert le.o_next is le
    assert re.o_next is re
    assert len(list(iter_edges(le))) == 2
    assert triangles(le) == []


def test_counterclockwise_triple():
    pts = [(0, 0), (1, -1), (2, 1)]
    assert ccw(*pts)
    le, re = triangulate(pts)
    assert le.org == (0, 0) and le.dest == (1, -1)
    assert re.org == (2, 1) and re.dest == (1, -1)
    assert orbit_length(le, lambda e: e.l_next) == 3
    assert hull(le) == pts


def test_right_triangle():
    # (0,0), (1,0), (0,1) in (x, y) order
    le, re = triangulate([(0, 0), (0, 1), (1, 0)])
    assert le.org == (0, 0)
    assert le.dest == (1, 0)
    assert re.org == (1, 0)
    assert re.dest == (0, 0)

    e = le
    for _ in range(3):
        assert orbit_length(e, lambda x: x.l_next) == 3
        e = e.l_next
    assert e is le
    assert [x.org for x in (le, le.l_next, le.l_next.l_next)] == [(0, 0), (1, 0), (0, 1)]
    assert triangles(le) == [((0, 0), (1, 0), (0, 1))]


def test_unit_square():
    le, re = triangulate([(0, 0), (0, 1), (1, 0), (1, 1)])
    assert le.org == (0, 0)
    assert re.org == (1, 1)
    assert len(list(iter_edges(le))) == 5
    assert len(triangles(le)) == 2
    assert hull(le) == [(0, 0), (1, 0), (1, 1), (0, 1)]


def test_collinear_chain_of_many():
    pts = [(float(i), 2.0 * i) for i in range(9)]
    le, re = triangulate(pts)
    assert le.org == pts[0]
    assert re.org == pts[-1]
    assert len(list(iter_edges(le))) == len(pts) - 1
    assert triangles(le) == []


# ---------------------------------------------------------------
# Delaunay and hull properties
# ---------------------------------------------------------------

@pytest.mark.parametrize("kind", ["uniform", "normal", "circle", "grid"])
@pytest.mark.parametrize("n", [4, 5, 7, 12, 50, 150])
def test_empty_circumcircles(kind, n):
    pts = as_points(generate(kind, n, seed=7))
    le, re = triangulate(pts)

    tris = triangles(le)
    assert tris
    for a, b, c in tris:
        assert ccw(a, b, c)
        for d in pts:
            if d in (a, b, c):
                continue
            assert not in_circle(a, b, c, d), (a, b, c, d)


@pytest.mark.parametrize("n", [4, 9, 33, 200])
def test_hull_edges(n):
    pts = as_points(generate("uniform", n, seed=3))
    le, re = triangulate(pts)

    assert le.org == min(pts)
    assert re.org == max(pts)
    assert hull(le) == monotone_chain(pts)

    # re has the outer face on its left: l_next walks the hull clockwise.
    walk = [re.org]
    e = re.l_next
    while e is not re:
        walk.append(e.org)
        e = e.l_next
    ring = hull(le)
    i = ring.index(re.org)
    from_max = ring[i:] + ring[:i]
    assert walk == from_max[:1] + from_max[:0:-1]


@pytest.mark.parametrize("n", [10, 100, 1000])
def test_euler_counts(n):
    pts = as_points(generate("uniform", n, seed=11))
    le, _ = triangulate(pts)
    h = len(hull(le))
    assert vertices(le) == pts
    assert len(list(iter_edges(le))) == 3 * n - 3 - h
    assert len(triangles(le)) == 2 * n - 2 - h


def test_origin_ring_matches_degree():
    pts = as_points(generate("normal", 60, seed=5))
    le, _ = triangulate(pts)
    degree = {}
    for e in iter_edges(le):
        degree[e.org] = degree.get(e.org, 0) + 1
        degree[e.dest] = degree.get(e.dest, 0) + 1
    seen = set()
    for e in iter_edges(le):
        for d in (e, e.sym):
            if d.org in seen:
                continue
            seen.add(d.org)
            assert orbit_length(d, lambda x: x.o_next) == degree[d.org]
    assert len(seen) == len(pts)


def test_traversal_is_idempotent():
    pts = as_points(generate("uniform", 40, seed=1))
    le, re = triangulate(pts)
    assert le.o_next is le.o_next
    assert le.l_next is le.l_next
    assert triangles(le) == triangles(le)
    assert hull(le) == hull(le)


# ---------------------------------------------------------------
# Input handling
# ---------------------------------------------------------------

def test_numpy_input():
    arr = generate("uniform", 30, seed=2)
    assert isinstance(arr, np.ndarray)
    le, re = triangulate(arr)
    assert le.org == tuple(arr[0])
    assert isinstance(le.org, Point)
    assert isinstance(le.org.x, float)


def test_as_points():
    assert as_points([]) == []
    assert as_points([(1, 2), (3, 4)]) == [Point(1.0, 2.0), Point(3.0, 4.0)]
    with pytest.raises(ValueError):
        as_points([(1, 2, 3)])
    with pytest.raises(ValueError):
        as_points([(0, 0), (float("nan"), 1)])
    with pytest.raises(ValueError):
        as_points([(0, 0), (float("inf"), 1)])


def test_first_unsorted():
    assert first_unsorted([Point(0, 0), Point(0, 1), Point(1, 0)]) is None
    assert first_unsorted([Point(0, 1), Point(0, 0)]) == 1
    assert first_unsorted([Point(0, 0), Point(1, 0), Point(1, 0)]) == 2


@pytest.mark.parametrize("pts", [
    [(1, 0), (0, 0)],
    [(0, 1), (0, 0), (1, 1)],
    [(0, 0), (1, 1), (1, 1), (2, 0)],
])
def test_rejects_unsorted_or_duplicate(pts):
    with pytest.raises(ValueError, match="strictly ascending"):
        triangulate(pts)


def test_validation_can_be_disabled(monkeypatch):
    # Unsorted input is accepted (result unspecified) when the check is off.
    le, re = triangulate([(1, 0), (0, 0)], validate=False)
    assert le.org == (1, 0)

    monkeypatch.setattr(config, "VALIDATE_INPUT", False)
    le, re = triangulate([(1, 0), (0, 0)])
    assert le.org == (1, 0)


# ---------------------------------------------------------------
# Stats and logging
# ---------------------------------------------------------------

def test_stats_for_base_cases():
    tri = DelaunayTriangulator([(0, 0), (1, -1), (2, 1)])
    tri.triangulate()
    assert tri.stats['base_edges'] == 3
    assert tri.stats['merges'] == 0
    assert tri.stats['max_depth'] == 0


def test_stats_for_merge():
    pts = as_points(generate("uniform", 64, seed=9))
    tri = DelaunayTriangulator(pts)
    le, _ = tri.triangulate()
    s = tri.stats
    assert s['n'] == 64
    # 64 -> 32 -> 16 -> 8 -> 4 -> 2
    assert s['max_depth'] == 5
    assert s['merges'] == 31
    built = s['base_edges'] + s['cross_edges'] - s['deleted_edges']
    assert built == len(list(iter_edges(le)))


def test_logs_summary(caplog):
    with caplog.at_level(logging.DEBUG, logger="delaunay_dc.triangulation"):
        triangulate(as_points(generate("uniform", 20, seed=4)))
    assert "triangulated n=20" in caplog.text
