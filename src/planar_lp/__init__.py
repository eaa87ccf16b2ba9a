"""Planar LP: maximise a linear objective in two variables over a small polygon."""

from .lp import analyze_infeasibility, parse_nl_to_problem, solve, solve_problem
from .schemas import Constraint, Objective, Problem, Solution, SolveOptions

__all__ = [
    "Constraint",
    "Objective",
    "Problem",
    "Solution",
    "SolveOptions",
    "analyze_infeasibility",
    "parse_nl_to_problem",
    "solve",
    "solve_problem",
]
