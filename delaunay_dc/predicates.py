"""
Orientation and in-circle predicates.

All tests are plain floating-point determinants compared strictly against
zero. Collinear or cocircular input evaluates to False everywhere (a
point tested against a circle through itself is always False), and
nearly-degenerate input can come out with the wrong sign; there is no
epsilon and no exact-arithmetic fallback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .quadedge import Edge

Coord = Sequence[float]


def three_point_det(a: Coord, b: Coord, c: Coord) -> float:
    """Twice the signed area of triangle abc.

    Equivalent to the determinant of

        | ax  ay  1 |
        | bx  by  1 |
        | cx  cy  1 |
    """
    return ((b[0] * c[1] - c[0] * b[1])
            - (a[0] * c[1] - c[0] * a[1])
            + (a[0] * b[1] - b[0] * a[1]))


def ccw(a: Coord, b: Coord, c: Coord) -> bool:
    """True if a, b, c make a counterclockwise turn."""
    return three_point_det(a, b, c) > 0


def left_of(x: Coord, e: Edge) -> bool:
    return ccw(x, e.org, e.dest)


def right_of(x: Coord, e: Edge) -> bool:
    return ccw(x, e.dest, e.org)


def in_circle(a: Coord, b: Coord, c: Coord, d: Coord) -> bool:
    """True if d lies strictly inside the circle through a, b, c.

    a, b, c must be counterclockwise; for a clockwise triple the answer is
    inverted (d strictly outside). Equivalent to testing

        | ax  ay  ax^2 + ay^2  1 |
        | bx  by  bx^2 + by^2  1 |
        | cx  cy  cx^2 + cy^2  1 |
        | dx  dy  dx^2 + dy^2  1 |  > 0

    expanded along the lifted column, with d moved to the origin first.
    The translation leaves the determinant unchanged but makes the test
    exactly False when d coincides with a, b or c.
    """
    a = (a[0] - d[0], a[1] - d[1])
    b = (b[0] - d[0], b[1] - d[1])
    c = (c[0] - d[0], c[1] - d[1])
    o = (0.0, 0.0)
    return ((a[0] * a[0] + a[1] * a[1]) * three_point_det(b, c, o)
            - (b[0] * b[0] + b[1] * b[1]) * three_point_det(a, c, o)
            + (c[0] * c[0] + c[1] * c[1]) * three_point_det(a, b, o)) > 0


def valid(e: Edge, basel: Edge) -> bool:
    """True if e's destination lies above the base edge (to its right)."""
    return right_of(e.dest, basel)
