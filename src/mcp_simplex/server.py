import os
import sys

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from .errors import InvalidInputError
from .schemas import LPModel, SolveOptions, StandardLP
from .lp.simplex import solve, simplex_solve
from .lp.parser import parse_natural_language_spec
from .lp.utils import analyze_infeasibility_model

mcp = FastMCP("MCP Simplex")


@mcp.tool()
def solve_standard_lp(problem: StandardLP, options: SolveOptions | None = None) -> dict:
    "Maximise c.x subject to A x <= b, x >= 0 with the tableau simplex."
    opts = options or SolveOptions()
    try:
        outcome = solve(problem.A, problem.b, problem.c, opts)
    except InvalidInputError as exc:
        return {"error": str(exc)}
    return outcome.model_dump()


@mcp.tool()
def solve_lp(model: LPModel, options: SolveOptions | None = None) -> dict:
    "Solve a named linear program (non-negative variables, <= / >= rows) and return solution dict."
    opts = options or SolveOptions()
    try:
        solution = simplex_solve(model, opts)
    except InvalidInputError as exc:
        return {"error": str(exc)}
    return solution.model_dump()


@mcp.tool()
def parse_nl_to_lp(spec: str) -> dict:
    "Parse a small natural-language spec into a structured LPModel JSON."
    try:
        model = parse_natural_language_spec(spec)
    except ValueError as exc:
        return {"error": str(exc)}
    return model.model_dump()


@mcp.tool()
def analyze_infeasibility(model: LPModel) -> dict:
    "Return basic infeasibility diagnostics (IIS heuristic, conflicting constraints)."
    return analyze_infeasibility_model(model)


def main() -> None:
    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "stdio" or "--stdio" in sys.argv:
        mcp.run(transport="stdio")
    else:
        mcp.settings.host = "0.0.0.0"
        mcp.settings.port = int(os.environ.get("PORT", "8081"))
        mcp.settings.streamable_http_path = "/mcp"
        mcp.settings.transport_security = TransportSecuritySettings(
            enable_dns_rebinding_protection=False,
            allowed_hosts=["*"],
            allowed_origins=["*"],
        )
        mcp.run(transport="streamable-http")


if __name__ == "__main__":
    main()
