"""MCP Simplex: dense tableau simplex for max c.x s.t. A x <= b, x >= 0."""

from .errors import InvalidInputError
from .lp.simplex import solve, simplex_solve
from .schemas import Infeasible, IterationLimit, Optimal, SolveOptions, Unbounded

__all__ = [
    "InvalidInputError",
    "Infeasible",
    "IterationLimit",
    "Optimal",
    "SolveOptions",
    "Unbounded",
    "solve",
    "simplex_solve",
]
