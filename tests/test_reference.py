import random

import pytest

from planar_lp.lp.reference import solve_reference
from planar_lp.lp.solver import solve_problem
from planar_lp.schemas import Constraint, Objective, Problem


def make_random_problem(seed: int) -> Problem:
    rng = random.Random(seed)
    constraints = [
        Constraint(
            name=f"c{j + 1}",
            a1=rng.uniform(0.5, 5.0),
            a2=rng.uniform(0.5, 5.0),
            cmp="<=",
            rhs=rng.uniform(4.0, 12.0),
        )
        for j in range(rng.randint(1, 6))
    ]
    return Problem(
        name=f"random-{seed}",
        objective=Objective(c1=rng.uniform(1.0, 4.0), c2=rng.uniform(1.0, 4.0)),
        constraints=constraints,
    )


def test_reference_matches_developer_blend():
    problem = Problem(
        objective=Objective(c1=8.0, c2=10.0),
        constraints=[
            Constraint(a1=2.0, a2=1.0, cmp="<=", rhs=50.0),
            Constraint(a1=1.0, a2=2.0, cmp="<=", rhs=70.0),
        ],
    )
    reference = solve_reference(problem)

    assert reference.status == "optimal"
    assert reference.result == pytest.approx(380.0, rel=1e-6)
    assert reference.variables["x1"] == pytest.approx(10.0, rel=1e-6)
    assert reference.variables["x2"] == pytest.approx(30.0, rel=1e-6)


def test_reference_matches_mixed_operators():
    problem = Problem(
        objective=Objective(c1=3.0, c2=2.0),
        constraints=[
            Constraint(a1=1.0, a2=1.0, cmp="<=", rhs=4.0),
            Constraint(a1=1.0, a2=3.0, cmp=">=", rhs=6.0),
            Constraint(a1=1.0, a2=-1.0, cmp="=", rhs=2.0),
        ],
    )
    ours = solve_problem(problem)
    reference = solve_reference(problem)

    assert ours.status == reference.status == "optimal"
    assert ours.result == pytest.approx(reference.result, rel=1e-6)


def test_reference_reports_infeasible():
    problem = Problem(
        objective=Objective(c1=1.0, c2=1.0),
        constraints=[Constraint(a1=1.0, a2=1.0, cmp="<=", rhs=-1.0)],
    )
    assert solve_reference(problem).status == "infeasible"
    assert solve_problem(problem).status == "infeasible"


@pytest.mark.parametrize("seed", range(10))
def test_vertex_search_agrees_with_highs(seed):
    problem = make_random_problem(seed)
    ours = solve_problem(problem)
    reference = solve_reference(problem)

    assert ours.status == reference.status == "optimal"
    assert ours.result == pytest.approx(reference.result, rel=1e-3, abs=1e-3)
