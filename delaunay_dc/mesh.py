"""
Walking a triangulation.

The triangulator only hands back two hull edges; everything in here
recovers the rest of the mesh by following ring links from one edge.
Bookkeeping is by object identity, since Edge equality is geometric.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from .predicates import ccw
from .quadedge import Edge, Point
from .triangulation import triangulate

Triangle = Tuple[Point, Point, Point]


def iter_directed(e: Edge) -> Iterator[Edge]:
    """Every primal directed edge reachable from e, each exactly once."""
    visited = set()
    stack = [e]
    while stack:
        d = stack.pop()
        if id(d) in visited:
            continue
        visited.add(id(d))
        yield d
        stack.append(d.o_next)
        stack.append(d.sym)


def iter_edges(e: Edge) -> Iterator[Edge]:
    """One directed edge per undirected edge of the mesh containing e."""
    quads = set()
    for d in iter_directed(e):
        if id(d.quad) not in quads:
            quads.add(id(d.quad))
            yield d


def vertices(e: Edge) -> List[Point]:
    """Sites of the mesh, sorted by (x, y)."""
    return sorted({d.org for d in iter_directed(e)})


def triangles(e: Edge) -> List[Triangle]:
    """Counterclockwise triangles (bounded faces) of the mesh."""
    tris = []
    used = set()
    for a in iter_directed(e):
        if id(a) in used:
            continue
        b = a.l_next
        c = b.l_next
        if c.l_next is not a:
            continue
        used.update((id(a), id(b), id(c)))
        if ccw(a.org, b.org, c.org):
            tris.append((a.org, b.org, c.org))
    return tris


def hull(le: Edge) -> List[Point]:
    """Convex hull in counterclockwise order, starting at le.org.

    le must be the left hull edge returned by triangulate. For collinear
    sites the walk goes out along the chain and back, so interior sites
    appear twice.
    """
    pts = []
    e = le
    while True:
        pts.append(e.org)
        e = e.r_prev
        if e is le:
            break
    return pts


def neighbors(e: Edge) -> Dict[Point, List[Point]]:
    """Adjacent sites of every vertex, counterclockwise around it."""
    adj: Dict[Point, List[Point]] = {}
    for d in iter_directed(e):
        if d.org in adj:
            continue
        ring = []
        x = d
        while True:
            ring.append(x.dest)
            x = x.o_next
            if x is d:
                break
        adj[d.org] = ring
    return adj


class Mesh:
    """The (le, re) pair from triangulate, with the traversals above."""

    def __init__(self, le: Optional[Edge] = None, re: Optional[Edge] = None):
        self.le = le
        self.re = re

    @classmethod
    def from_points(cls, points, validate: Optional[bool] = None) -> Mesh:
        return cls(*triangulate(points, validate=validate))

    def __bool__(self) -> bool:
        return self.le is not None

    def edges(self) -> List[Edge]:
        return list(iter_edges(self.le)) if self.le is not None else []

    def vertices(self) -> List[Point]:
        return vertices(self.le) if self.le is not None else []

    def triangles(self) -> List[Triangle]:
        return triangles(self.le) if self.le is not None else []

    def hull(self) -> List[Point]:
        return hull(self.le) if self.le is not None else []

    def neighbors(self) -> Dict[Point, List[Point]]:
        return neighbors(self.le) if self.le is not None else {}
