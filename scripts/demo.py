#!/usr/bin/env python3
"""Solve the three canonical examples and print the outcomes."""

import logging

from mcp_simplex.lp.simplex import solve
from mcp_simplex.schemas import Infeasible, Unbounded

CASES = [
    ([[1.0, -1.0], [-1.0, 1.0], [1.0, 1.0]], [1.0, 1.0, 3.0], [2.0, 1.0]),
    ([[1.0, -1.0], [-1.0, 1.0], [-1.0, -1.0]], [1.0, 1.0, -3.0], [2.0, 1.0]),
    ([[0.0, -1.0], [-1.0, 0.0], [1.0, 1.0]], [-2.0, -2.0, 1.0], [2.0, 1.0]),
]


def describe(outcome) -> str:
    if isinstance(outcome, Infeasible):
        return "No feasible solution exists, the constraints are inconsistent!"
    if isinstance(outcome, Unbounded):
        return "Answer = +Inf, the polytope is unbounded in the direction of the gradient of the objective function!"
    if outcome.status == "iteration_limit":
        return f"Gave up: {outcome.message}"
    return f"Answer = {outcome.value}, x = [{', '.join(str(v) for v in outcome.x)}]"


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    for idx, (A, b, c) in enumerate(CASES):
        if idx:
            print()
        print(describe(solve(A, b, c)))


if __name__ == "__main__":
    main()
