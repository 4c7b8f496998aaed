"""Linear programming utilities for MCP Simplex."""

from .simplex import solve, simplex_solve
from .parser import parse_natural_language_spec
from .reference import reference_solve

__all__ = ["solve", "simplex_solve", "parse_natural_language_spec", "reference_solve"]
