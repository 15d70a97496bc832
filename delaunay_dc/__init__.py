"""
Delaunay Triangulation by Divide and Conquer

Guibas & Stolfi's algorithm over the quad-edge structure:

- Quad-edge topology (make_edge, splice, connect, delete_edge)
- Orientation and in-circle predicates
- The recursive triangulator and its triangulate() entry point
- Mesh traversal and validation helpers

Sites must be sorted by (x, y) with no duplicates; see
datasets.prepare_points.
"""

from .quadedge import Edge, Point, QuadEdge, connect, delete_edge, make_edge, splice
from .predicates import ccw, in_circle, left_of, right_of, three_point_det, valid
from .triangulation import DelaunayTriangulator, as_points, triangulate
from .mesh import Mesh, hull, iter_edges, neighbors, triangles, vertices
from .validate import verify_triangulation

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "Point",
    "QuadEdge",
    "make_edge",
    "splice",
    "connect",
    "delete_edge",
    "three_point_det",
    "ccw",
    "left_of",
    "right_of",
    "in_circle",
    "valid",
    "DelaunayTriangulator",
    "as_points",
    "triangulate",
    "Mesh",
    "iter_edges",
    "vertices",
    "triangles",
    "hull",
    "neighbors",
    "verify_triangulation",
]
