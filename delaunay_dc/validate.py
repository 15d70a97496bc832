"""
Validate a Delaunay triangulation produced by triangulate().

Checks:
 - the mesh covers exactly the input sites
 - triangle and edge counts match Euler's formula for the hull size
 - the hull walk is convex and counterclockwise
 - no two mesh edges cross (skipped for large meshes, it is O(E^2))
 - no site lies strictly inside any triangle's circumcircle

Intended for tests and small benchmark instances, not the hot path.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from . import config
from .mesh import hull, iter_edges, triangles, vertices
from .predicates import in_circle, three_point_det
from .quadedge import Edge, Point
from .triangulation import as_points

logger = logging.getLogger(__name__)

Coord = Tuple[float, float]


def on_segment(a: Coord, b: Coord, c: Coord, eps: float = config.EPS) -> bool:
    ax, ay = a
    bx, by = b
    cx, cy = c
    return (
        min(ax, bx) - eps <= cx <= max(ax, bx) + eps
        and min(ay, by) - eps <= cy <= max(ay, by) + eps
    )


def segments_cross(a: Coord, b: Coord, c: Coord, d: Coord, eps: float = config.EPS) -> bool:
    """Segments ab and cd meet somewhere other than a shared endpoint.

    Touching and collinear overlap count as crossing.
    """
    shared = {a, b} & {c, d}
    if len(shared) == 2:
        return True
    if shared:
        # Edges sharing one endpoint only conflict when they overlap.
        p = shared.pop()
        u = b if a == p else a
        v = d if c == p else c
        if three_point_det(p, u, v) != 0:
            return False
        return (u[0] - p[0]) * (v[0] - p[0]) + (u[1] - p[1]) * (v[1] - p[1]) > 0

    o1 = three_point_det(a, b, c)
    o2 = three_point_det(a, b, d)
    o3 = three_point_det(c, d, a)
    o4 = three_point_det(c, d, b)

    def sgn(x: float) -> int:
        if x > eps:
            return 1
        if x < -eps:
            return -1
        return 0

    s1, s2, s3, s4 = sgn(o1), sgn(o2), sgn(o3), sgn(o4)
    if s1 * s2 < 0 and s3 * s4 < 0:
        return True
    if s1 == 0 and on_segment(a, b, c, eps):
        return True
    if s2 == 0 and on_segment(a, b, d, eps):
        return True
    if s3 == 0 and on_segment(c, d, a, eps):
        return True
    if s4 == 0 and on_segment(c, d, b, eps):
        return True
    return False


def all_collinear(pts: Sequence[Point]) -> bool:
    return all(three_point_det(pts[0], pts[-1], p) == 0 for p in pts[1:-1])


def find_crossing(edges: List[Tuple[Point, Point]], eps: float = config.EPS) -> Optional[Tuple[int, int]]:
    for i, (a, b) in enumerate(edges):
        for j in range(i + 1, len(edges)):
            c, d = edges[j]
            if segments_cross(a, b, c, d, eps):
                return i, j
    return None


def find_encroached(tris, pts: Sequence[Point]) -> Optional[Tuple[tuple, Point]]:
    """First (triangle, site) with the site strictly inside the circumcircle."""
    for tri in tris:
        a, b, c = tri
        for d in pts:
            if d == a or d == b or d == c:
                continue
            if in_circle(a, b, c, d):
                return tri, d
    return None


def verify_triangulation(points, le: Optional[Edge],
                         crossing_max: Optional[int] = None) -> Tuple[bool, str]:
    """Verify that the mesh reachable from le is a Delaunay triangulation of points."""
    if crossing_max is None:
        crossing_max = config.CROSSING_CHECK_MAX
    pts = as_points(points)
    n = len(pts)

    if n < 2:
        if le is None:
            return True, "OK"
        return False, f"Expected no edges for n={n}"
    if le is None:
        return False, f"No edges for n={n}"

    # Check site coverage
    mesh_pts = vertices(le)
    if mesh_pts != sorted(set(pts)):
        return False, f"Vertex mismatch: mesh has {len(mesh_pts)}, input has {n}"

    if le.org != min(pts):
        return False, f"Left hull edge starts at {le.org}, expected {min(pts)}"

    edges = [(e.org, e.dest) for e in iter_edges(le)]
    tris = triangles(le)

    if all_collinear(pts):
        if len(edges) != n - 1 or tris:
            return False, f"Collinear sites: {len(edges)} edges, {len(tris)} triangles"
        return True, "OK"

    # Check Euler counts
    ring = hull(le)
    h = len(ring)
    if len(set(ring)) != h:
        return False, f"Hull walk revisits a vertex: {ring}"
    if len(tris) != 2 * n - 2 - h:
        return False, f"Wrong triangle count: {len(tris)} != {2 * n - 2 - h}"
    if len(edges) != 3 * n - 3 - h:
        return False, f"Wrong edge count: {len(edges)} != {3 * n - 3 - h}"

    # Check hull convexity
    for i in range(h):
        if three_point_det(ring[i - 1], ring[i], ring[(i + 1) % h]) < 0:
            return False, f"Hull turns clockwise at {ring[i]}"

    if len(edges) <= crossing_max:
        hit = find_crossing(edges)
        if hit is not None:
            i, j = hit
            return False, f"Edge crossing {edges[i]} x {edges[j]}"

    # Check empty circumcircles
    bad = find_encroached(tris, pts)
    if bad is not None:
        tri, d = bad
        return False, f"Site {d} inside circumcircle of {tri}"

    logger.debug("verified n=%d: triangles=%d, edges=%d, hull=%d", n, len(tris), len(edges), h)
    return True, "OK"
