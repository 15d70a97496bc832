"""
Quad-edge structure of Guibas and Stolfi.

"Primitives for the Manipulation of General Subdivisions and the
Computation of Voronoi Diagrams", ACM Transactions on Graphics 4(2), 1985.

Each undirected edge of a subdivision is stored as a QuadEdge: four
directed Edge objects, the two directions of the primal edge (r = 0, 2)
and the two directions of its dual (r = 1, 3). Every Edge keeps one link,
o_next, to the next edge counterclockwise around its origin; every other
traversal is a composition of o_next with the rotations.

There is no container for a subdivision. A mesh is whatever can be reached
from one of its edges, and an edge removed with delete_edge simply becomes
unreachable.
"""

from __future__ import annotations

from typing import NamedTuple, Optional


class Point(NamedTuple):
    x: float
    y: float


class Edge:
    """One directed edge of a QuadEdge.

    Two edges compare equal when their origins and destinations are equal
    points, regardless of which QuadEdge they belong to. Use ``is`` (or
    ``id()``) when the identity of the edge object matters.
    """

    __slots__ = ("r", "quad", "_next", "_data")

    def __init__(self, r: int, quad: QuadEdge):
        self.r = r
        self.quad = quad
        self._next: Optional[Edge] = None
        self._data: Optional[Point] = None

    # ---------------------------------------------------------------
    # Endpoints
    # ---------------------------------------------------------------

    @property
    def org(self) -> Optional[Point]:
        return self._data

    @org.setter
    def org(self, p: Optional[Point]) -> None:
        self._data = p

    @property
    def dest(self) -> Optional[Point]:
        return self.sym._data

    @dest.setter
    def dest(self, p: Optional[Point]) -> None:
        self.sym._data = p

    # ---------------------------------------------------------------
    # Rotations within the QuadEdge
    # ---------------------------------------------------------------

    @property
    def sym(self) -> Edge:
        """Same edge, opposite direction."""
        return self.quad.edges[(self.r + 2) % 4]

    @property
    def rot(self) -> Edge:
        """Dual edge, directed from the right face to the left face."""
        return self.quad.edges[(self.r + 1) % 4]

    @property
    def rot_inv(self) -> Edge:
        """Dual edge, directed from the left face to the right face."""
        return self.quad.edges[(self.r + 3) % 4]

    # ---------------------------------------------------------------
    # Ring traversal
    # ---------------------------------------------------------------

    @property
    def o_next(self) -> Edge:
        """Next edge counterclockwise with the same origin."""
        return self._next

    @property
    def o_prev(self) -> Edge:
        """Next edge clockwise with the same origin."""
        return self.rot._next.rot

    @property
    def d_next(self) -> Edge:
        """Next edge counterclockwise with the same destination."""
        return self.sym._next.sym

    @property
    def d_prev(self) -> Edge:
        """Next edge clockwise with the same destination."""
        return self.rot_inv._next.rot_inv

    @property
    def l_next(self) -> Edge:
        """Next edge counterclockwise around the left face."""
        return self.rot_inv._next.rot

    @property
    def l_prev(self) -> Edge:
        """Next edge clockwise around the left face."""
        return self._next.sym

    @property
    def r_next(self) -> Edge:
        """Next edge counterclockwise around the right face."""
        return self.rot._next.rot_inv

    @property
    def r_prev(self) -> Edge:
        """Next edge clockwise around the right face."""
        return self.sym._next

    # ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Edge):
            return NotImplemented
        if self.org is None or self.dest is None:
            return False
        return self.org == other.org and self.dest == other.dest

    def __hash__(self) -> int:
        return hash((self.org, self.dest))

    def __repr__(self) -> str:
        org, dest = self.org, self.dest
        if org is None or dest is None:
            return f"Edge(r={self.r}, unset)"
        return f"({org[0]:f}, {org[1]:f}) -> ({dest[0]:f}, {dest[1]:f})"


class QuadEdge:
    """The four directed edges of one undirected edge and its dual."""

    __slots__ = ("edges",)

    def __init__(self):
        self.edges = (Edge(0, self), Edge(1, self), Edge(2, self), Edge(3, self))
        e0, e1, e2, e3 = self.edges
        # A lone edge on the sphere: each primal end is its own ring, the
        # two dual directions share the one face.
        e0._next = e0
        e1._next = e3
        e2._next = e2
        e3._next = e1

    @property
    def base(self) -> Edge:
        return self.edges[0]


# ---------------------------------------------------------------
# Topological operators
# ---------------------------------------------------------------

def make_edge(org: Optional[Point] = None, dest: Optional[Point] = None) -> Edge:
    """Create an isolated edge (a subdivision of the sphere)."""
    e = QuadEdge().base
    e.org = org
    e.dest = dest
    return e


def splice(a: Edge, b: Edge) -> None:
    """Exchange the origin rings of a and b, and their left-face rings.

    If the two rings are distinct they are joined into one; if a and b are
    already in the same ring it is cut in two.
    """
    alpha = a._next.rot
    beta = b._next.rot

    a_next = a._next
    b_next = b._next
    alpha_next = alpha._next
    beta_next = beta._next

    a._next = b_next
    b._next = a_next
    alpha._next = beta_next
    beta._next = alpha_next


def connect(a: Edge, b: Edge) -> Edge:
    """Add an edge from a.dest to b.org.

    a and b must share a left face, or the result is not planar. This is
    not checked.
    """
    e = make_edge(a.dest, b.org)
    splice(e, a.l_next)
    splice(e.sym, b)
    return e


def delete_edge(e: Edge) -> None:
    """Detach e (both directions) from every ring it belongs to."""
    splice(e, e.o_prev)
    splice(e.sym, e.sym.o_prev)
