"""
Delaunay Triangulation by Divide and Conquer

Guibas & Stolfi's O(n log n) algorithm over the quad-edge structure:
1. Split the x-sorted sites in half and triangulate each half recursively
2. Find the lower common tangent of the two halves
3. Zip the halves together bottom to top, deleting edges of either half
   that fail the in-circle test against the rising base edge

The input must be sorted ascending by x, ties by y, with no duplicates.
Predicates are plain floating point (see predicates.py): collinear and
cocircular configurations are not handled specially and may produce
wrong topology.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from . import config
from .predicates import ccw, in_circle, left_of, right_of, valid
from .quadedge import Edge, Point, connect, delete_edge, make_edge, splice

logger = logging.getLogger(__name__)

HullEdges = Union[Tuple[Edge, Edge], Tuple[()]]


def as_points(points: Union[Iterable[Sequence[float]], np.ndarray]) -> List[Point]:
    """Normalize a list of pairs or an (N, 2) array to a list of Points."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) collection of points, got shape {arr.shape}")
    if not np.isfinite(arr).all():
        raise ValueError("points must have finite coordinates")
    return [Point(x, y) for x, y in arr.tolist()]


def first_unsorted(points: Sequence[Point]) -> Optional[int]:
    """Index of the first point not strictly greater than its predecessor."""
    for i in range(1, len(points)):
        if not points[i - 1] < points[i]:
            return i
    return None


class DelaunayTriangulator:
    """
    Divide-and-conquer Delaunay triangulator.

    ``triangulate()`` returns ``(le, re)``: the counterclockwise convex hull
    edge out of the leftmost site and the clockwise convex hull edge out of
    the rightmost site. Everything else is reached by walking from them.
    """

    def __init__(self, points, validate: Optional[bool] = None):
        if validate is None:
            validate = config.VALIDATE_INPUT
        self.pts = as_points(points)
        self.n = len(self.pts)
        if validate:
            i = first_unsorted(self.pts)
            if i is not None:
                raise ValueError(
                    f"points must be strictly ascending by (x, y): "
                    f"point {i} {tuple(self.pts[i])} does not follow "
                    f"{tuple(self.pts[i - 1])}"
                )

        self.stats = {
            'n': self.n,
            'max_depth': 0,
            'base_edges': 0,
            'cross_edges': 0,
            'deleted_edges': 0,
            'merges': 0,
        }

    def triangulate(self) -> HullEdges:
        if self.n < 2:
            return ()
        result = self.delaunay(0, self.n, 0)
        logger.debug(
            "triangulated n=%d: depth=%d base=%d cross=%d deleted=%d",
            self.n, self.stats['max_depth'], self.stats['base_edges'],
            self.stats['cross_edges'], self.stats['deleted_edges'],
        )
        return result

    def delaunay(self, lo: int, hi: int, depth: int) -> HullEdges:
        """Triangulate sites pts[lo:hi]."""
        self.stats['max_depth'] = max(self.stats['max_depth'], depth)
        s = self.pts
        n = hi - lo

        if n < 2:
            return ()

        if n == 2:
            a = make_edge(s[lo], s[lo + 1])
            self.stats['base_edges'] += 1
            return a, a.sym

        if n == 3:
            s0, s1, s2 = s[lo], s[lo + 1], s[lo + 2]
            a = make_edge(s0, s1)
            b = make_edge(s1, s2)
            splice(a.sym, b)
            self.stats['base_edges'] += 2

            # Close the triangle unless the three sites are collinear.
            if ccw(s0, s1, s2):
                connect(b, a)
                self.stats['base_edges'] += 1
                return a, b.sym
            if ccw(s0, s2, s1):
                c = connect(b, a)
                self.stats['base_edges'] += 1
                return c.sym, c
            return a, b.sym

        mid = lo + n // 2
        ldo, ldi = self.delaunay(lo, mid, depth + 1)
        rdi, rdo = self.delaunay(mid, hi, depth + 1)
        return self.merge(ldo, ldi, rdi, rdo)

    def merge(self, ldo: Edge, ldi: Edge, rdi: Edge, rdo: Edge) -> Tuple[Edge, Edge]:
        """Zip two adjacent triangulations into one.

        ldo/ldi are the outer and inner hull edges of the left half, rdi/rdo
        those of the right half.
        """
        self.stats['merges'] += 1

        # Lower common tangent of the two hulls.
        while True:
            if left_of(rdi.org, ldi):
                ldi = ldi.l_next
            elif right_of(ldi.org, rdi):
                rdi = rdi.r_prev
            else:
                break

        # First cross edge, from rdi.org to ldi.org.
        basel = connect(rdi.sym, ldi)
        self.stats['cross_edges'] += 1
        if ldi.org == ldo.org:
            ldo = basel.sym
        if rdi.org == rdo.org:
            rdo = basel

        while True:
            # First L site the rising bubble meets; drop L edges out of
            # basel.dest that fail the circle test.
            lcand = basel.sym.o_next
            if valid(lcand, basel):
                while in_circle(basel.dest, basel.org, lcand.dest, lcand.o_next.dest):
                    t = lcand.o_next
                    delete_edge(lcand)
                    self.stats['deleted_edges'] += 1
                    lcand = t

            # Same on the right, clockwise.
            rcand = basel.o_prev
            if valid(rcand, basel):
                while in_circle(basel.dest, basel.org, rcand.dest, rcand.o_prev.dest):
                    t = rcand.o_prev
                    delete_edge(rcand)
                    self.stats['deleted_edges'] += 1
                    rcand = t

            l_ok = valid(lcand, basel)
            r_ok = valid(rcand, basel)
            if not l_ok and not r_ok:
                # basel is the upper common tangent
                break

            if not l_ok or (r_ok and in_circle(lcand.dest, lcand.org, rcand.org, rcand.dest)):
                basel = connect(rcand, basel.sym)
            else:
                basel = connect(basel.sym, lcand.sym)
            self.stats['cross_edges'] += 1

        return ldo, rdo


def triangulate(points, validate: Optional[bool] = None) -> HullEdges:
    """Delaunay triangulation of points sorted by (x, y) without duplicates.

    Returns ``(le, re)`` (see DelaunayTriangulator), or ``()`` for fewer
    than two points. Raises ValueError on unsorted or duplicate input
    unless ``validate`` is False, in which case the result is unspecified.
    """
    return DelaunayTriangulator(points, validate=validate).triangulate()
