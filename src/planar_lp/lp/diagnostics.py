from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ..schemas import DEFAULT_TOL, Constraint, ConstraintStatus, Point, Problem, SolveOptions


def constraint_status(
    constraints: Sequence[Constraint], point: Point, tol: float = DEFAULT_TOL
) -> List[ConstraintStatus]:
    """Value, slack and binding flag of every constraint at ``point``."""

    report: List[ConstraintStatus] = []
    for idx, cons in enumerate(constraints):
        value = cons.evaluate(point.x1, point.x2)
        if cons.cmp == "<=":
            slack = cons.rhs - value
        elif cons.cmp == ">=":
            slack = value - cons.rhs
        else:
            slack = abs(cons.rhs - value)
        report.append(
            ConstraintStatus(
                constraint=cons.name or f"c{idx + 1}",
                value=value,
                slack=slack,
                binding=abs(value - cons.rhs) < tol,
            )
        )
    return report


def analyze_infeasibility(problem: Problem, options: SolveOptions | None = None) -> Dict[str, Any]:
    """Very small IIS-style heuristic: drop each constraint and re-solve."""

    from .solver import solve_problem  # local import to avoid cycle

    opts = (options or SolveOptions()).model_copy(update={"report_constraints": False})
    solution = solve_problem(problem, opts)
    if solution.status != "infeasible":
        return {
            "status": solution.status,
            "message": solution.message or "Problem is not infeasible.",
            "conflicting_constraints": [],
            "suggestions": [],
        }

    conflicts: List[str] = []
    for idx, cons in enumerate(problem.constraints):
        sub_problem = problem.model_copy(
            update={"constraints": problem.constraints[:idx] + problem.constraints[idx + 1 :]}
        )
        if solve_problem(sub_problem, opts).status != "infeasible":
            conflicts.append(cons.name or f"c{idx + 1}")

    suggestions = []
    if conflicts:
        suggestions.append("Relax or inspect the conflicting constraints above.")
    else:
        suggestions.append("Several constraints conflict jointly; relax right-hand sides or check the operators.")

    return {
        "status": "infeasible",
        "message": "Detected infeasibility; listed constraints critical to infeasibility.",
        "conflicting_constraints": conflicts,
        "suggestions": suggestions,
    }
