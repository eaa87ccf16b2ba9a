#!/usr/bin/env python3
import json
import time
from pathlib import Path

from planar_lp.lp.reference import solve_reference
from planar_lp.lp.solver import solve_problem
from planar_lp.schemas import Problem, SolveOptions
from scripts.generate_instances import generate_random_problem


def load_example(name: str) -> Problem:
    path = Path(__file__).resolve().parent.parent / "examples" / name
    return Problem.model_validate(json.loads(path.read_text()))


def main() -> None:
    opts = SolveOptions()
    cases = [
        ("examples/developer_blend.json", load_example("developer_blend.json")),
        ("examples/mixed_operators.json", load_example("mixed_operators.json")),
    ]
    for seed in range(5):
        cases.append((f"random-{seed}", generate_random_problem(6, seed)))

    print("name,status,objective,highs_objective,time_ms")
    for name, problem in cases:
        start = time.perf_counter()
        solution = solve_problem(problem, opts)
        elapsed_ms = (time.perf_counter() - start) * 1000
        reference = solve_reference(problem)
        print(
            f"{name},{solution.status},{solution.result},{reference.result},{elapsed_ms:.2f}"
        )


if __name__ == "__main__":
    main()
