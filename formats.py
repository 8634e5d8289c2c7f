"""
Text formats for problems and solutions.

Problem::

    <number of polygons>
    <number of vertices>      then one "x,y" line per vertex, per polygon
    <number of skeleton edges>
    x1,y1 x2,y2               one line per edge

Solution::

    <number of source vertices N>
    x,y                       N lines
    <number of facets>
    k i1 ... ik               vertex count, then indices into the source
    x,y                       N destination lines

Coordinates are "n" or "n/d" and are reduced while parsing so that vertex
equality is structural. Blank lines are ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from geometry import Edge, Polygon, Vertex
from rational import Rational
from validator import Problem, Solution

logger = logging.getLogger("foldcheck.formats")


class FormatError(ValueError):
    """Malformed problem or solution text."""


class _Lines:
    """Cursor over the non-blank lines of a document."""

    def __init__(self, text: str, what: str):
        self.lines: List[Tuple[int, str]] = [
            (no, ln.strip()) for no, ln in enumerate(text.splitlines(), start=1) if ln.strip()
        ]
        self.pos = 0
        self.what = what

    def next(self, expecting: str) -> Tuple[int, str]:
        if self.pos >= len(self.lines):
            raise FormatError(f"{self.what}: unexpected end of input, expected {expecting}")
        item = self.lines[self.pos]
        self.pos += 1
        return item

    def count(self, expecting: str) -> int:
        no, line = self.next(expecting)
        try:
            value = int(line)
        except ValueError:
            raise FormatError(f"{self.what} line {no}: expected {expecting}, got {line!r}") from None
        if value < 0:
            raise FormatError(f"{self.what} line {no}: negative {expecting}: {value}")
        return value

    def vertex(self) -> Vertex:
        no, line = self.next("a vertex")
        return _vertex(line, f"{self.what} line {no}")

    def finish(self) -> None:
        if self.pos < len(self.lines):
            no, line = self.lines[self.pos]
            raise FormatError(f"{self.what} line {no}: unexpected trailing content {line!r}")


def _vertex(token: str, where: str) -> Vertex:
    parts = token.split(",")
    if len(parts) != 2:
        raise FormatError(f"{where}: expected 'x,y', got {token!r}")
    try:
        return Vertex(Rational.parse(parts[0]), Rational.parse(parts[1]))
    except (ValueError, ZeroDivisionError) as e:
        raise FormatError(f"{where}: bad coordinate in {token!r}: {e}") from None


def parse_vertex(text: str) -> Vertex:
    return _vertex(text.strip(), "vertex")


def parse_problem(text: str) -> Problem:
    lines = _Lines(text, "problem")
    polygons: List[Polygon] = []
    for _ in range(lines.count("number of polygons")):
        n = lines.count("number of vertices")
        polygons.append(Polygon(tuple(lines.vertex() for _ in range(n))))

    skeleton: List[Edge] = []
    for _ in range(lines.count("number of skeleton edges")):
        no, line = lines.next("a skeleton edge")
        ends = line.split()
        if len(ends) != 2:
            raise FormatError(f"problem line {no}: expected 'x1,y1 x2,y2', got {line!r}")
        where = f"problem line {no}"
        skeleton.append(Edge(_vertex(ends[0], where), _vertex(ends[1], where)))
    lines.finish()

    problem = Problem.from_polygons(polygons, skeleton)
    logger.debug(
        "Parsed problem: %d positive, %d negative polygons, %d skeleton edges",
        len(problem.pos_polys), len(problem.neg_polys), len(problem.skeleton),
    )
    return problem


def parse_solution(text: str) -> Solution:
    lines = _Lines(text, "solution")
    n = lines.count("number of source vertices")
    source = tuple(lines.vertex() for _ in range(n))

    facets: List[Polygon] = []
    for _ in range(lines.count("number of facets")):
        no, line = lines.next("a facet")
        where = f"solution line {no}"
        try:
            tokens = [int(t) for t in line.split()]
        except ValueError:
            raise FormatError(f"{where}: facet must be integers, got {line!r}") from None
        if not tokens or tokens[0] != len(tokens) - 1:
            raise FormatError(f"{where}: facet vertex count does not match its indices: {line!r}")
        indices = tokens[1:]
        for i in indices:
            if not 0 <= i < n:
                raise FormatError(f"{where}: facet index {i} out of range 0..{n - 1}")
        facets.append(Polygon(tuple(source[i] for i in indices)))

    destination = tuple(lines.vertex() for _ in range(n))
    lines.finish()

    logger.debug("Parsed solution: %d vertices, %d facets", n, len(facets))
    return Solution(source=source, facets=tuple(facets), destination=destination)


def format_problem(polygons: Sequence[Polygon], skeleton: Sequence[Edge]) -> str:
    out = [str(len(polygons))]
    for poly in polygons:
        out.append(str(len(poly.vertices)))
        out.extend(str(v) for v in poly.vertices)
    out.append(str(len(skeleton)))
    out.extend(str(e) for e in skeleton)
    return "\n".join(out) + "\n"


def format_solution(
    source: Sequence[Vertex],
    facets: Sequence[Sequence[int]],
    destination: Sequence[Vertex],
) -> str:
    """Facets are given as index lists into source, as in the file."""
    if len(destination) != len(source):
        raise ValueError("source and destination must have the same number of vertices")
    out = [str(len(source))]
    out.extend(str(v) for v in source)
    out.append(str(len(facets)))
    out.extend(" ".join(str(i) for i in [len(f), *f]) for f in facets)
    out.extend(str(v) for v in destination)
    return "\n".join(out) + "\n"


def _read_text(path: Union[str, Path]) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FormatError(f"{path}: not UTF-8 text ({e.reason} at byte {e.start})") from e


def read_problem(path: Union[str, Path]) -> Problem:
    return parse_problem(_read_text(path))


def read_solution(path: Union[str, Path]) -> Solution:
    return parse_solution(_read_text(path))
