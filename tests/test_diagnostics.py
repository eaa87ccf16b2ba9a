import pytest

from planar_lp.lp.diagnostics import analyze_infeasibility, constraint_status
from planar_lp.schemas import Constraint, Objective, Point, Problem


def make_conflicting_problem() -> Problem:
    return Problem(
        name="conflict",
        objective=Objective(c1=1.0, c2=1.0),
        constraints=[
            Constraint(name="cap", a1=1.0, a2=1.0, cmp="<=", rhs=2.0),
            Constraint(name="demand", a1=1.0, a2=1.0, cmp=">=", rhs=5.0),
            Constraint(name="limit", a1=1.0, a2=0.0, cmp="<=", rhs=10.0),
        ],
    )


def test_constraint_status_slack_per_operator():
    constraints = [
        Constraint(a1=1.0, a2=1.0, cmp="<=", rhs=10.0),
        Constraint(a1=1.0, a2=0.0, cmp=">=", rhs=1.0),
        Constraint(name="fixed", a1=0.0, a2=1.0, cmp="=", rhs=4.0),
    ]
    report = constraint_status(constraints, Point(x1=3.0, x2=4.0))

    assert [s.constraint for s in report] == ["c1", "c2", "fixed"]
    assert [s.value for s in report] == [7.0, 3.0, 4.0]
    assert report[0].slack == pytest.approx(3.0)
    assert report[1].slack == pytest.approx(2.0)
    assert report[2].slack == pytest.approx(0.0)
    assert [s.binding for s in report] == [False, False, True]


def test_analyze_infeasibility_names_conflicts():
    report = analyze_infeasibility(make_conflicting_problem())

    assert report["status"] == "infeasible"
    assert report["conflicting_constraints"] == ["cap", "demand"]
    assert report["suggestions"]


def test_analyze_infeasibility_on_feasible_problem():
    problem = make_conflicting_problem()
    problem.constraints.pop(1)
    report = analyze_infeasibility(problem)

    assert report["status"] == "optimal"
    assert report["conflicting_constraints"] == []
