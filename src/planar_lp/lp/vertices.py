from __future__ import annotations

import logging
import math
from itertools import combinations
from typing import List, Sequence

from ..schemas import DEFAULT_TOL, Constraint, Point
from .feasibility import is_feasible
from .geometry import axis_intercepts, intersect

logger = logging.getLogger(__name__)

ORIGIN = Point(x1=0.0, x2=0.0)


def enumerate_vertices(constraints: Sequence[Constraint], tol: float = DEFAULT_TOL) -> List[Point]:
    """
    Candidate corner points of the feasible region inside x1, x2 >= 0.

    Order: origin, then each constraint's axis intercepts (x1-axis first),
    then pairwise intersections (i < j). Near-duplicates keep their first
    occurrence. An empty list means no feasible vertex exists.
    """

    candidates: List[Point] = []

    if is_feasible(ORIGIN, constraints, tol):
        candidates.append(ORIGIN)

    for cons in constraints:
        for point in axis_intercepts(cons):
            if is_feasible(point, constraints, tol):
                candidates.append(point)

    for first, second in combinations(constraints, 2):
        point = intersect(first, second, tol)
        if point is None or point.x1 < 0 or point.x2 < 0:
            continue
        if is_feasible(point, constraints, tol):
            candidates.append(point)

    vertices = _unique(candidates, tol)
    logger.debug("Enumerated %d candidates, %d unique vertices", len(candidates), len(vertices))
    return vertices


def recession_rays(constraints: Sequence[Constraint], tol: float = DEFAULT_TOL) -> List[Point]:
    """
    Extreme rays of the recession cone of the feasible region.

    A direction d >= 0 belongs to the cone when it satisfies every
    constraint with its right-hand side set to zero. In the plane the
    extreme rays lie on the axes or along some constraint boundary, so
    only those unit directions are tested.
    """

    directions: List[Point] = [Point(x1=1.0, x2=0.0), Point(x1=0.0, x2=1.0)]
    for cons in constraints:
        norm = math.hypot(cons.a1, cons.a2)
        if norm == 0:
            continue
        for d1, d2 in ((cons.a2, -cons.a1), (-cons.a2, cons.a1)):
            if d1 >= 0 and d2 >= 0:
                directions.append(Point(x1=d1 / norm, x2=d2 / norm))

    # Unit normals so the tolerance does not depend on coefficient scale.
    homogeneous = [
        cons.model_copy(update={"a1": cons.a1 / norm, "a2": cons.a2 / norm, "rhs": 0.0})
        for cons, norm in ((c, math.hypot(c.a1, c.a2)) for c in constraints)
        if norm > 0
    ]
    rays = [d for d in directions if is_feasible(d, homogeneous, tol)]
    return _unique(rays, tol)


def _unique(points: Sequence[Point], tol: float) -> List[Point]:
    unique: List[Point] = []
    for point in points:
        if any(abs(kept.x1 - point.x1) < tol and abs(kept.x2 - point.x2) < tol for kept in unique):
            continue
        unique.append(point)
    return unique
