import pytest

from planar_lp import server
from planar_lp.schemas import Constraint, Objective, Problem


def make_problem() -> Problem:
    return Problem(
        objective=Objective(c1=8.0, c2=10.0),
        constraints=[
            Constraint(name="1", a1=2.0, a2=1.0, cmp="<=", rhs=50.0),
            Constraint(name="2", a1=1.0, a2=2.0, cmp="<=", rhs=70.0),
        ],
    )


def test_solve_linear_program_tool_returns_json():
    payload = server.solve_linear_program(make_problem())

    assert payload["status"] == "optimal"
    assert payload["result"] == pytest.approx(380.0)
    assert payload["variables"] == {"x1": pytest.approx(10.0), "x2": pytest.approx(30.0)}


def test_solve_word_problem_tool():
    payload = server.solve_word_problem("maximize 3x + 2y subject to x + y <= 4, x + 3y >= 6")

    assert payload["problem"]["variables"] == {"x1": "x", "x2": "y"}
    assert payload["solution"]["result"] == pytest.approx(11.0)


def test_solve_word_problem_tool_reports_parse_errors():
    payload = server.solve_word_problem("minimize x + y subject to x + y >= 1")

    assert payload["solution"] is None
    assert payload["error"].startswith("Failed to parse problem")


def test_parse_natural_language_tool():
    payload = server.parse_natural_language("maximize x + y subject to x + y <= 3")
    assert payload["constraints"][0]["rhs"] == 3.0


def test_diagnose_and_highs_tools():
    problem = make_problem()
    assert server.diagnose_infeasibility(problem)["status"] == "optimal"
    assert server.solve_with_highs(problem)["result"] == pytest.approx(380.0, rel=1e-6)
