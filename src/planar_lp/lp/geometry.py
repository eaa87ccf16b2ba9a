from __future__ import annotations

import math
from typing import List, Optional

from ..schemas import DEFAULT_TOL, Constraint, Point


def axis_intercepts(constraint: Constraint) -> List[Point]:
    """
    Points where the boundary line of ``constraint`` meets the axes.

    The x1-axis crossing (x2 = 0) comes first, then the x2-axis crossing
    (x1 = 0). A crossing is skipped when the matching coefficient is zero
    and dropped when its coordinate is negative.
    """

    points: List[Point] = []
    if constraint.a1 != 0:
        x1 = constraint.rhs / constraint.a1
        if x1 >= 0:
            points.append(Point(x1=x1, x2=0.0))
    if constraint.a2 != 0:
        x2 = constraint.rhs / constraint.a2
        if x2 >= 0:
            points.append(Point(x1=0.0, x2=x2))
    return points


def intersect(first: Constraint, second: Constraint, tol: float = DEFAULT_TOL) -> Optional[Point]:
    """
    Solve both boundary lines as equalities with Cramer's rule.

    Returns None for parallel or coincident lines. The determinant is
    compared against ``tol`` scaled by both normal lengths, so the test is
    on the sine of the angle between the lines and ignores row scaling.
    """

    det = first.a1 * second.a2 - first.a2 * second.a1
    scale = math.hypot(first.a1, first.a2) * math.hypot(second.a1, second.a2)
    if det == 0 or abs(det) < tol * scale:
        return None

    x1 = (first.rhs * second.a2 - first.a2 * second.rhs) / det
    x2 = (first.a1 * second.rhs - first.rhs * second.a1) / det
    return Point(x1=x1, x2=x2)
