"""Two-variable linear programming by corner-point enumeration."""

from .solver import solve, solve_problem
from .parser import parse_nl_to_problem
from .diagnostics import analyze_infeasibility, constraint_status
from .reference import solve_reference

__all__ = [
    "solve",
    "solve_problem",
    "parse_nl_to_problem",
    "analyze_infeasibility",
    "constraint_status",
    "solve_reference",
]
