from __future__ import annotations

from typing import List, Tuple

import numpy as np
from scipy.optimize import linprog

from ..schemas import Problem, Solution


def solve_reference(problem: Problem) -> Solution:
    """Solve ``problem`` with SciPy's HiGHS backend, for cross-checking the vertex search."""

    c = -np.array([problem.objective.c1, problem.objective.c2], dtype=float)
    A_ub, b_ub, A_eq, b_eq = _build_constraint_matrices(problem)

    res = linprog(
        c,
        A_ub=A_ub if A_ub.size else None,
        b_ub=b_ub if b_ub.size else None,
        A_eq=A_eq if A_eq.size else None,
        b_eq=b_eq if b_eq.size else None,
        bounds=[(0, None), (0, None)],
        method="highs",
    )

    if res.status == 2:
        return Solution(status="infeasible", feasible=False, bounded=True, message=res.message)
    if res.status == 3:
        return Solution(status="unbounded", feasible=True, bounded=False, message=res.message)
    if not res.success:
        raise RuntimeError(f"HiGHS failed: {res.message}")

    return Solution(
        status="optimal",
        feasible=True,
        bounded=True,
        result=float(-res.fun),
        variables={"x1": float(res.x[0]), "x2": float(res.x[1])},
        message=res.message or "",
    )


def _build_constraint_matrices(problem: Problem) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    A_ub: List[List[float]] = []
    b_ub: List[float] = []
    A_eq: List[List[float]] = []
    b_eq: List[float] = []

    for cons in problem.constraints:
        row = [cons.a1, cons.a2]
        if cons.cmp == "<=":
            A_ub.append(row)
            b_ub.append(cons.rhs)
        elif cons.cmp == ">=":
            A_ub.append([-value for value in row])
            b_ub.append(-cons.rhs)
        else:
            A_eq.append(row)
            b_eq.append(cons.rhs)

    return (
        np.array(A_ub, dtype=float) if A_ub else np.empty((0, 2)),
        np.array(b_ub, dtype=float) if b_ub else np.empty(0),
        np.array(A_eq, dtype=float) if A_eq else np.empty((0, 2)),
        np.array(b_eq, dtype=float) if b_eq else np.empty(0),
    )
