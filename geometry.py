"""
Geometric primitives over exact rationals.

Vertices double as vectors from the origin. Orientation follows the usual
y-up convention: counter-clockwise polygons have non-negative signed area
and "right of" an edge means a strictly negative cross product.

Edges of a polygon are the consecutive pairs (i, i+1) only. There is no
closing edge from the last vertex back to the first, so a closed shape must
repeat its first vertex at the end if the closing edge matters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from rational import HALF, ZERO, Rational, as_rational


@dataclass(frozen=True)
class Vertex:
    x: Rational
    y: Rational

    @classmethod
    def of(cls, x: Union[Rational, int, str], y: Union[Rational, int, str]) -> Vertex:
        """Build a vertex from ints, Rationals or ``"n/d"`` strings, reduced."""
        return cls(as_rational(x).reduce(), as_rational(y).reduce())

    def __sub__(self, other: Vertex) -> Vertex:
        return Vertex(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass(frozen=True)
class Edge:
    v1: Vertex
    v2: Vertex

    @property
    def direction(self) -> Vertex:
        return self.v2 - self.v1

    def __str__(self) -> str:
        return f"{self.v1} {self.v2}"


@dataclass(frozen=True)
class Triangle:
    v1: Vertex
    v2: Vertex
    v3: Vertex


@dataclass(frozen=True)
class Polygon:
    vertices: Tuple[Vertex, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))

    def __len__(self) -> int:
        return len(self.vertices)


def cross_product(u: Vertex, v: Vertex) -> Rational:
    return u.x * v.y - v.x * u.y


def _side(e: Edge, v: Vertex) -> Rational:
    """Cross product of the edge direction with the vector e.v1 -> v."""
    return cross_product(e.direction, v - e.v1)


def is_vertex_on_edge(e: Edge, v: Vertex) -> bool:
    """
    True if v is collinear with e but is not one of its endpoints.

    Collinear means on the supporting line, not necessarily between the
    endpoints. Shared endpoints of neighbouring edges never count.
    """
    if v == e.v1 or v == e.v2:
        return False
    # Zero results keep their denominator, so test the numerator.
    return abs(_side(e, v)).is_zero()


def is_vertex_right_of_edge(e: Edge, v: Vertex) -> bool:
    return _side(e, v).lt_int(0)


def edges_touch_or_cross(e1: Edge, e2: Edge) -> bool:
    """
    Directional touch/cross test of e2 against e1.

    True when an endpoint of e2 lies on e1 (see is_vertex_on_edge) or both
    endpoints of e2 are strictly right of e1. The result is not symmetric;
    test both orderings for a symmetric answer.
    """
    return (
        is_vertex_on_edge(e1, e2.v1)
        or is_vertex_on_edge(e1, e2.v2)
        or (is_vertex_right_of_edge(e1, e2.v1) and is_vertex_right_of_edge(e1, e2.v2))
    )


def edge_is_length_zero(e: Edge) -> bool:
    return e.v1 == e.v2


def open_edges(vertices: Iterable[Vertex]) -> List[Edge]:
    """Edges between consecutive vertices, without closing the loop."""
    vs = list(vertices)
    return [Edge(vs[i], vs[i + 1]) for i in range(len(vs) - 1)]


def polygon_edges(p: Polygon) -> List[Edge]:
    return open_edges(p.vertices)


def polygon_has_length_zero_edges(p: Polygon) -> bool:
    return any(edge_is_length_zero(e) for e in polygon_edges(p))


def polygon_orientation_is_positive(p: Polygon) -> bool:
    """Sign of sum((x[i+1] + x[i]) * (y[i+1] - y[i])) over consecutive pairs."""
    vs = p.vertices
    total = ZERO
    for i in range(len(vs) - 1):
        total = total + (vs[i + 1].x + vs[i].x) * (vs[i + 1].y - vs[i].y)
    return total.ge_int(0)


def triangulate(p: Polygon) -> List[Triangle]:
    """Fan triangulation from vertex 0; empty for fewer than 3 vertices."""
    vs = p.vertices
    if len(vs) < 3:
        return []
    return [Triangle(vs[0], vs[i - 1], vs[i]) for i in range(2, len(vs))]


def triangle_area(t: Triangle) -> Rational:
    return abs(cross_product(t.v2 - t.v1, t.v3 - t.v1)) * HALF


def polygon_area(p: Polygon) -> Rational:
    """
    Unsigned area as the sum of the fan triangles from vertex 0.

    Only exact when every fan triangle lies inside the polygon (convex
    polygons, or star-shaped ones around vertex 0). Otherwise the
    overlapping triangles are all counted positively.
    """
    total = ZERO
    for t in triangulate(p):
        total = total + triangle_area(t)
    return total
