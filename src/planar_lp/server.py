from __future__ import annotations

import logging
import os

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from .schemas import Problem, SolveOptions
from .lp.solver import solve_problem
from .lp.parser import parse_nl_to_problem
from .lp.diagnostics import analyze_infeasibility
from .lp.reference import solve_reference

logger = logging.getLogger(__name__)

app = FastMCP("Planar LP")


@app.tool()
def solve_linear_program(problem: Problem, options: SolveOptions | None = None) -> dict:
    """Maximise a two-variable LP by corner-point enumeration and return the solution as JSON."""
    return solve_problem(problem, options or SolveOptions()).model_dump()


@app.tool()
def parse_natural_language(spec: str) -> dict:
    """Parse text such as 'maximize 3x + 2y subject to x + y <= 4' into Problem JSON."""
    try:
        return parse_nl_to_problem(spec).model_dump()
    except ValueError as e:
        return {"error": f"Failed to parse problem: {e}"}


@app.tool()
def solve_word_problem(spec: str, options: SolveOptions | None = None) -> dict:
    """
    Parse a natural-language two-variable LP and solve it.

    Returns:
        Dictionary containing:
        - 'problem': The parsed problem, with the written variable names as labels
        - 'solution': The solution, or None if parsing failed
        - 'error': Present only when parsing failed
    """
    try:
        problem = parse_nl_to_problem(spec)
    except ValueError as e:
        return {
            "error": f"Failed to parse problem: {e}",
            "problem": None,
            "solution": None,
        }

    solution = solve_problem(problem, options or SolveOptions())
    return {
        "problem": problem.model_dump(),
        "solution": solution.model_dump(),
    }


@app.tool()
def diagnose_infeasibility(problem: Problem) -> dict:
    """Return heuristic infeasibility analysis (constraints whose removal restores feasibility)."""
    return analyze_infeasibility(problem)


@app.tool()
def solve_with_highs(problem: Problem) -> dict:
    """Solve the same problem with SciPy's HiGHS backend for comparison."""
    try:
        return solve_reference(problem).model_dump()
    except RuntimeError as e:
        logger.warning("HiGHS reference solve failed: %s", e)
        return {"error": str(e)}


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "stdio":
        app.run(transport="stdio")
    else:
        port = int(os.environ.get("PORT", "8081"))
        logger.info("Serving streamable HTTP on port %d", port)
        app.settings.host = "0.0.0.0"
        app.settings.port = port
        app.settings.streamable_http_path = "/mcp"
        app.settings.transport_security = TransportSecuritySettings(
            enable_dns_rebinding_protection=False,
            allowed_hosts=["*"],
            allowed_origins=["*"],
        )
        app.run(transport="streamable-http")


if __name__ == "__main__":
    main()
