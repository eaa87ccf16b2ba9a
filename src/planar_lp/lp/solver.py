from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping, Optional, Sequence

import numpy as np

from ..schemas import Constraint, Objective, Point, Problem, Solution, SolveOptions
from .diagnostics import constraint_status
from .vertices import enumerate_vertices, recession_rays

logger = logging.getLogger(__name__)


def solve(
    objective: Objective | Mapping[str, Any],
    constraints: Sequence[Constraint | Mapping[str, Any]],
    options: Optional[SolveOptions] = None,
) -> Solution:
    """
    Maximise ``c1*x1 + c2*x2`` over x1, x2 >= 0 by scoring every corner point.

    All three operators are supported. Among vertices with the same optimal
    value the first one in enumeration order wins (origin, axis intercepts,
    pairwise intersections). Never raises: any error while solving is
    reported as an infeasible solution carrying the error message.
    """

    opts = options or SolveOptions()
    try:
        obj = Objective.model_validate(objective)
        cons = [Constraint.model_validate(c) for c in constraints]
        return _solve(obj, cons, opts)
    except Exception as exc:
        logger.exception("Solve aborted")
        return Solution(
            status="infeasible",
            feasible=False,
            bounded=True,
            message=f"Solver error: {exc}",
        )


def solve_problem(problem: Problem, options: Optional[SolveOptions] = None) -> Solution:
    return solve(problem.objective, problem.constraints, options)


def _solve(objective: Objective, constraints: List[Constraint], opts: SolveOptions) -> Solution:
    vertices = enumerate_vertices(constraints, opts.tol)
    if not vertices:
        logger.info("Infeasible: no vertex among %d constraints", len(constraints))
        return Solution(
            status="infeasible",
            feasible=False,
            bounded=True,
            message="No feasible point with x1, x2 >= 0.",
        )

    if opts.detect_unbounded:
        ray = _improving_ray(objective, constraints, opts.tol)
        if ray is not None:
            logger.info("Unbounded along (%g, %g)", ray.x1, ray.x2)
            return Solution(
                status="unbounded",
                feasible=True,
                bounded=False,
                message=f"Objective grows without bound along direction ({ray.x1:.6g}, {ray.x2:.6g}).",
            )

    points = np.array([[p.x1, p.x2] for p in vertices], dtype=float)
    values = objective.c1 * points[:, 0] + objective.c2 * points[:, 1]
    # argmax returns the first index of the maximum.
    best = int(np.argmax(values))
    optimum = vertices[best]

    report = None
    if opts.report_constraints:
        report = constraint_status(constraints, optimum, opts.tol)

    logger.info("Optimal value %g at (%g, %g) from %d vertices", values[best], optimum.x1, optimum.x2, len(vertices))
    return Solution(
        status="optimal",
        feasible=True,
        bounded=True,
        result=float(values[best]),
        variables={"x1": optimum.x1, "x2": optimum.x2},
        constraint_status=report,
    )


def _improving_ray(objective: Objective, constraints: Sequence[Constraint], tol: float) -> Optional[Point]:
    threshold = tol * math.hypot(objective.c1, objective.c2)
    for ray in recession_rays(constraints, tol):
        if objective.value(ray.x1, ray.x2) > threshold:
            return ray
    return None
