"""
Tests for reading and writing problem/solution text.
"""

from pathlib import Path

import pytest

from formats import (
    FormatError,
    format_problem,
    format_solution,
    parse_problem,
    parse_solution,
    parse_vertex,
    read_problem,
    read_solution,
)
from geometry import Edge, Polygon, Vertex
from rational import Rational
from validator import problem_area, validate

DATA = Path(__file__).resolve().parent.parent / "data"

SQUARE_PROBLEM = """\
1
4
0,0
1,0
1,1
0,1
4
0,0 1,0
1,0 1,1
1,1 0,1
0,1 0,0
"""

SQUARE_SOLUTION = """\
4
0,0
1,0
1,1
0,1
1
4 0 1 2 3
0,0
1,0
1,1
0,1
"""


def test_parse_vertex_reduces():
    v = parse_vertex("2/4,-3/6")
    assert v == Vertex(Rational(1, 2), Rational(-1, 2))


def test_parse_vertex_keeps_zero_denominator_as_written():
    # Zero numerators are not normalized, so 0/3 is not the same coordinate as 0.
    assert parse_vertex("0/3,1") != parse_vertex("0,1")


@pytest.mark.parametrize("text", ["1", "1,2,3", "a,1", "1/0,1", "1.5,0"])
def test_parse_vertex_rejects(text):
    with pytest.raises(FormatError):
        parse_vertex(text)


def test_parse_problem():
    problem = parse_problem(SQUARE_PROBLEM)
    assert len(problem.pos_polys) == 1
    assert problem.neg_polys == ()
    assert len(problem.skeleton) == 4
    assert problem.skeleton[0] == Edge(Vertex.of(0, 0), Vertex.of(1, 0))
    assert problem_area(problem) == Rational(1, 1)


def test_parse_problem_ignores_blank_lines_and_padding():
    text = "\n\n" + "\n\n".join("  " + ln + "  " for ln in SQUARE_PROBLEM.splitlines()) + "\n\n"
    assert parse_problem(text) == parse_problem(SQUARE_PROBLEM)


def test_parse_solution():
    sol = parse_solution(SQUARE_SOLUTION)
    assert len(sol.source) == 4
    assert sol.facets == (Polygon(sol.source),)
    assert sol.destination == sol.source
    assert validate(sol)


def test_parse_solution_facets_reference_source_vertices():
    text = "3\n0,0\n1,0\n0,1\n1\n3 2 0 1\n0,0\n1,0\n0,1\n"
    sol = parse_solution(text)
    assert sol.facets[0].vertices == (sol.source[2], sol.source[0], sol.source[1])


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "unexpected end"),
        ("x\n", "number of source vertices"),
        ("2\n0,0\n", "unexpected end"),
        ("1\n0,0\n1\n2 0\n0,0\n", "does not match"),
        ("1\n0,0\n1\n1 5\n0,0\n", "out of range"),
        ("1\n0,0\n1\n1 a\n0,0\n", "integers"),
        ("1\n0,0\n0\n0,0\nextra\n", "trailing"),
        ("-1\n", "negative"),
    ],
)
def test_parse_solution_errors(text, message):
    with pytest.raises(FormatError, match=message):
        parse_solution(text)


@pytest.mark.parametrize(
    "text, message",
    [
        ("1\n3\n0,0\n1,0\n", "unexpected end"),
        ("1\n2\n0,0\n1,0\n1\n0,0\n", "x1,y1 x2,y2"),
        ("0\n1\n0,0 1/0,1\n", "bad coordinate"),
    ],
)
def test_parse_problem_errors(text, message):
    with pytest.raises(FormatError, match=message):
        parse_problem(text)


def test_format_error_names_the_line():
    with pytest.raises(FormatError, match="line 3"):
        parse_solution("2\n0,0\n1;0\n")


def test_format_problem_reads_back():
    square = Polygon(tuple(Vertex.of(*p) for p in [(0, 0), (1, 0), (1, 1), (0, 1)]))
    skeleton = [Edge(Vertex.of(0, 0), Vertex.of("1/2", "1/2"))]
    text = format_problem([square], skeleton)
    assert text.splitlines()[:3] == ["1", "4", "0,0"]
    assert "0,0 1/2,1/2" in text
    problem = parse_problem(text)
    assert problem.pos_polys == (square,)
    assert problem.skeleton == tuple(skeleton)


def test_format_solution():
    src = [Vertex.of(0, 0), Vertex.of(1, 0), Vertex.of(0, 1)]
    text = format_solution(src, [[0, 1, 2]], src)
    assert text == "3\n0,0\n1,0\n0,1\n1\n3 0 1 2\n0,0\n1,0\n0,1\n"


def test_format_solution_requires_matching_destination():
    with pytest.raises(ValueError):
        format_solution([Vertex.of(0, 0)], [], [])


def test_read_sample_files():
    assert problem_area(read_problem(DATA / "unit_square.problem")) == Rational(1, 1)
    assert problem_area(read_problem(DATA / "square_with_hole.problem")) == Rational(3, 4)
    assert validate(read_solution(DATA / "unit_square.solution"))
    assert not validate(read_solution(DATA / "outside_square.solution"))


def test_read_missing_file():
    with pytest.raises(FileNotFoundError):
        read_problem(DATA / "does_not_exist.problem")


def test_read_rejects_non_utf8(tmp_path):
    path = tmp_path / "latin.solution"
    path.write_bytes(b"1\n\xe9,0\n0\n0,0\n")
    with pytest.raises(FormatError, match="not UTF-8"):
        read_solution(path)
