from __future__ import annotations

from typing import Any, Optional

from scipy.optimize import linprog

from .tableau import validate_problem
from ..schemas import Infeasible, IterationLimit, Optimal, Outcome, SolveOptions, Unbounded


def reference_solve(A: Any, b: Any, c: Any, options: Optional[SolveOptions] = None) -> Outcome:
    """Solve max c.x s.t. A x <= b, x >= 0 with SciPy's HiGHS backend, for cross-checking."""

    opts = options or SolveOptions()
    A_arr, b_arr, c_arr = validate_problem(A, b, c)
    res = linprog(
        -c_arr,
        A_ub=A_arr,
        b_ub=b_arr,
        bounds=[(0.0, None)] * c_arr.shape[0],
        method="highs",
        options={"maxiter": opts.max_iters},
    )

    iterations = int(getattr(res, "nit", 0) or 0)
    if res.status == 0:
        return Optimal(value=float(-res.fun), x=[float(v) for v in res.x], iterations=iterations)
    if res.status == 2:
        return Infeasible(iterations=iterations)
    if res.status == 3:
        return Unbounded(iterations=iterations)
    return IterationLimit(iterations=iterations, message=res.message or "")
