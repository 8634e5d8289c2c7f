#!/usr/bin/env python3
"""
Generate deterministic problem/solution pairs with exact coordinates.

Each size k gives a convex k-gon whose vertices are rational points on the
circle of radius 1/2 centred in the unit square (t -> ((1-t^2)/(1+t^2),
2t/(1+t^2)) parametrisation), so every file is exact and the solution
passes all checks.

Outputs, per k:
  polygon_<k>.problem   the k-gon and its boundary as skeleton
  polygon_<k>.solution  the k-gon as source and destination, fan facets
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from formats import format_problem, format_solution
from geometry import Edge, Polygon, Vertex
from rational import HALF, ONE, Rational


def circle_point(t: Rational) -> Vertex:
    denom = ONE + t * t
    c = (ONE - t * t) / denom
    s = (t + t) / denom
    return Vertex(HALF + c * HALF, HALF + s * HALF)


def convex_polygon(k):
    # Increasing t means increasing angle, so the vertices come out CCW.
    return [circle_point(Rational(4 * j - 2 * (k - 1), k)) for j in range(k)]


def fan_facets(k):
    return [[0, i - 1, i] for i in range(2, k)]


def write_pair(k, output):
    verts = convex_polygon(k)
    skeleton = [Edge(verts[i], verts[(i + 1) % k]) for i in range(k)]
    problem_path = output / f"polygon_{k}.problem"
    solution_path = output / f"polygon_{k}.solution"
    problem_path.write_text(format_problem([Polygon(tuple(verts))], skeleton), encoding="utf-8")
    solution_path.write_text(format_solution(verts, fan_facets(k), verts), encoding="utf-8")
    return problem_path, solution_path


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--output", default="data/generated", type=Path)
    parser.add_argument("--sizes", nargs="+", type=int, default=[3, 4, 6, 8, 12, 24])
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)
    for k in args.sizes:
        if k < 3:
            parser.error(f"polygon size must be at least 3, got {k}")
        write_pair(k, args.output)

    print(f"Generated {len(args.sizes)} problem/solution pairs in {args.output}")


if __name__ == "__main__":
    main()
