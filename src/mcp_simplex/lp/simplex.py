import logging
import time
from typing import Any, Optional

import numpy as np

from .tableau import (
    build_tableau,
    extract_solution,
    is_infeasible,
    pivot,
    select_entering,
    select_leaving,
    validate_problem,
)
from .utils import build_standard_form
from ..schemas import (
    Infeasible,
    IterationLimit,
    LPModel,
    LPSolution,
    Optimal,
    Outcome,
    SolveOptions,
    Unbounded,
)

logger = logging.getLogger(__name__)


def solve(A: Any, b: Any, c: Any, options: Optional[SolveOptions] = None) -> Outcome:
    """
    Maximise c.x subject to A x <= b, x >= 0 with a single-loop tableau simplex.

    Feasibility restoration and optimisation share one pivoting loop: the
    entering rule prefers columns that improve the auxiliary objective and
    only falls back to the real objective once the dictionary is feasible
    and the auxiliary one is flat there. Ties are broken on variable identity so degenerate problems terminate.

    Raises InvalidInputError for malformed input; infeasible and unbounded
    problems are reported through the returned outcome.
    """

    opts = options or SolveOptions()
    tol = opts.tol
    A_arr, b_arr, c_arr = validate_problem(A, b, c)
    tableau, leaving = build_tableau(A_arr, b_arr, c_arr)
    entering = tableau.feasibility_column
    deadline = None if opts.time_limit is None else time.perf_counter() + opts.time_limit
    iterations = 0

    while True:
        if leaving is not None:
            if iterations >= opts.max_iters:
                return _limit(iterations, f"Hit iteration limit after {iterations} pivots.")
            if deadline is not None and time.perf_counter() > deadline:
                return _limit(iterations, f"Hit time limit of {opts.time_limit}s after {iterations} pivots.")
            logger.debug(
                "Pivot",
                extra={
                    "iteration": iterations,
                    "row": leaving,
                    "column": entering,
                    "entering_id": int(tableau.col_ids[entering]),
                    "leaving_id": int(tableau.row_ids[leaving]),
                },
            )
            pivot(tableau, leaving, entering)
            iterations += 1

        entering = select_entering(tableau, tol)
        if entering is None:
            break
        leaving = select_leaving(tableau, entering, tol)
        if leaving is None:
            logger.info(
                "LP is unbounded",
                extra={"iterations": iterations, "entering_id": int(tableau.col_ids[entering])},
            )
            return Unbounded(iterations=iterations)

    if is_infeasible(tableau, tol):
        logger.info("LP is infeasible", extra={"iterations": iterations})
        return Infeasible(iterations=iterations)

    value, x = extract_solution(tableau, tol)
    logger.info("LP solved to optimality", extra={"iterations": iterations, "objective": value})
    return Optimal(value=value, x=x.tolist(), iterations=iterations)


def simplex_solve(model: LPModel, opts: Optional[SolveOptions] = None) -> LPSolution:
    """Solve a named model by reducing it to A x <= b, x >= 0."""

    opts = opts or SolveOptions()
    A, b, c, meta = build_standard_form(model)

    if A.shape[0] == 0:
        # nothing constrains the variables beyond their lower bounds
        if np.any(c > opts.tol):
            return LPSolution(
                status="unbounded",
                objective_value=None,
                x=None,
                iterations=0,
                message="Unbounded.",
            )
        return _named_solution(meta, 0.0, np.zeros(len(c)), 0)

    outcome = solve(A, b, c, opts)

    if isinstance(outcome, Infeasible):
        return LPSolution(
            status="infeasible",
            objective_value=None,
            x=None,
            iterations=outcome.iterations,
            message="Infeasible.",
        )
    if isinstance(outcome, Unbounded):
        return LPSolution(
            status="unbounded",
            objective_value=None,
            x=None,
            iterations=outcome.iterations,
            message="Unbounded.",
        )
    if isinstance(outcome, IterationLimit):
        return LPSolution(
            status="iteration_limit",
            objective_value=None,
            x=None,
            iterations=outcome.iterations,
            message=outcome.message,
        )

    return _named_solution(meta, outcome.value, np.asarray(outcome.x), outcome.iterations)


def _limit(iterations: int, message: str) -> IterationLimit:
    logger.warning(message, extra={"iterations": iterations})
    return IterationLimit(iterations=iterations, message=message)


def _named_solution(meta: dict, value: float, x_std: np.ndarray, iterations: int) -> LPSolution:
    if meta["sense"] == "max":
        objective_value = meta["objective_constant"] + value
    else:
        objective_value = meta["objective_constant"] - value

    x = {}
    for idx, name in enumerate(meta["names"]):
        v = meta["offsets"][name] + float(x_std[idx])
        if abs(v) < 1e-12:
            v = 0.0
        x[name] = v

    return LPSolution(
        status="optimal",
        objective_value=float(objective_value),
        x=x,
        iterations=iterations,
        message="",
    )
