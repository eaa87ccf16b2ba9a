from __future__ import annotations

from typing import Sequence

from ..schemas import DEFAULT_TOL, Constraint, Point


def is_feasible(point: Point, constraints: Sequence[Constraint], tol: float = DEFAULT_TOL) -> bool:
    for cons in constraints:
        if not cons.is_satisfied(point.x1, point.x2, tol):
            return False
    return True
