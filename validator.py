"""
Problem area and solution self-consistency checks.

A solution is valid when its source vertices lie in the unit square, are
pairwise distinct, no facet has a zero-length edge, and no source edge
touches or crosses another. Folding the source onto the destination is not
simulated here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from geometry import (
    Edge,
    Polygon,
    Vertex,
    edges_touch_or_cross,
    open_edges,
    polygon_area,
    polygon_has_length_zero_edges,
    polygon_orientation_is_positive,
)
from rational import ZERO, Rational

logger = logging.getLogger("foldcheck.validator")


@dataclass(frozen=True)
class Problem:
    pos_polys: Tuple[Polygon, ...] = ()
    neg_polys: Tuple[Polygon, ...] = ()
    skeleton: Tuple[Edge, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pos_polys", tuple(self.pos_polys))
        object.__setattr__(self, "neg_polys", tuple(self.neg_polys))
        object.__setattr__(self, "skeleton", tuple(self.skeleton))

    @classmethod
    def from_polygons(cls, polygons: Iterable[Polygon], skeleton: Iterable[Edge] = ()) -> Problem:
        """Split polygons into positive and negative regions by orientation."""
        pos: List[Polygon] = []
        neg: List[Polygon] = []
        for poly in polygons:
            if polygon_orientation_is_positive(poly):
                pos.append(poly)
            else:
                neg.append(poly)
        return cls(pos_polys=tuple(pos), neg_polys=tuple(neg), skeleton=tuple(skeleton))


@dataclass(frozen=True)
class Solution:
    source: Tuple[Vertex, ...] = ()
    facets: Tuple[Polygon, ...] = ()
    destination: Tuple[Vertex, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", tuple(self.source))
        object.__setattr__(self, "facets", tuple(self.facets))
        object.__setattr__(self, "destination", tuple(self.destination))


def problem_area(problem: Problem) -> Rational:
    total = ZERO
    for poly in problem.pos_polys:
        total = total + polygon_area(poly)
    for poly in problem.neg_polys:
        total = total - polygon_area(poly)
    return total


def source_is_within_unit_square(solution: Solution) -> bool:
    for v in solution.source:
        if not (v.x.ge_int(0) and v.x.le_int(1) and v.y.ge_int(0) and v.y.le_int(1)):
            logger.debug("Source vertex %s lies outside the unit square", v)
            return False
    return True


def source_vertices_are_unique(solution: Solution) -> bool:
    # Vertices are reduced on construction, so == is geometric equality.
    source = solution.source
    for i, v in enumerate(source):
        for j, w in enumerate(source):
            if i != j and v == w:
                logger.debug("Source vertices %d and %d are both %s", i, j, v)
                return False
    return True


def any_facet_has_zero_length_edge(solution: Solution) -> bool:
    return any(polygon_has_length_zero_edges(f) for f in solution.facets)


def source_edges(solution: Solution) -> List[Edge]:
    """The source as an open polyline: consecutive pairs, no closing edge."""
    return open_edges(solution.source)


def source_has_no_edge_crosses_or_touches(solution: Solution) -> bool:
    edges = source_edges(solution)
    for i, e in enumerate(edges):
        for j, f in enumerate(edges):
            if i != j and edges_touch_or_cross(e, f):
                logger.info("Edge %s touches or crosses edge %s", e, f)
                return False
    return True


def validate(solution: Solution) -> bool:
    return (
        source_is_within_unit_square(solution)
        and source_vertices_are_unique(solution)
        and not any_facet_has_zero_length_edge(solution)
        and source_has_no_edge_crosses_or_touches(solution)
    )


# Named checks, each True when the solution passes. Cheapest first.
CHECKS: Dict[str, Callable[[Solution], bool]] = {
    "within_unit_square": source_is_within_unit_square,
    "unique_vertices": source_vertices_are_unique,
    "no_zero_length_facet_edges": lambda s: not any_facet_has_zero_length_edge(s),
    "no_edge_crosses_or_touches": source_has_no_edge_crosses_or_touches,
}

CHECK_NAMES: Tuple[str, ...] = tuple(CHECKS)


@dataclass(frozen=True)
class CheckResult:
    name: str
    passed: bool


@dataclass(frozen=True)
class ValidationReport:
    results: Tuple[CheckResult, ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failed(self) -> List[str]:
        return [r.name for r in self.results if not r.passed]


def run_checks(
    solution: Solution,
    checks: Sequence[str] = CHECK_NAMES,
    fail_fast: bool = False,
) -> ValidationReport:
    """
    Run the named checks in order and collect their outcomes.

    Raises ValueError for an unknown check name before running anything.
    With fail_fast the report stops at the first failing check.
    """
    unknown = [name for name in checks if name not in CHECKS]
    if unknown:
        raise ValueError(f"Unknown checks: {unknown}. Must be among {list(CHECK_NAMES)}")

    results: List[CheckResult] = []
    for name in checks:
        passed = CHECKS[name](solution)
        logger.debug("Check %s: %s", name, "pass" if passed else "FAIL")
        results.append(CheckResult(name=name, passed=passed))
        if fail_fast and not passed:
            break
    return ValidationReport(results=tuple(results))
