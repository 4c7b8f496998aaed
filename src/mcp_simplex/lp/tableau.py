from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np

from ..errors import InvalidInputError


@dataclass
class Tableau:
    """
    Dense dictionary for max c.x s.t. A x <= b, x >= 0.

    Rows 0..m-1 hold the constraints, row m the objective and row m+1 the
    auxiliary (feasibility) objective. Columns 0..n-1 are the original
    variables, column n the feasibility variable and column n+1 the constant.

    Identities: 0..n-1 original variables, n the feasibility variable,
    n+1..n+m the row slacks. ``col_ids[j]`` / ``row_ids[i]`` name the variable
    currently sitting at column j (non-basic) / row i (basic).
    """

    a: np.ndarray
    col_ids: np.ndarray
    row_ids: np.ndarray
    m: int
    n: int

    @property
    def objective_row(self) -> int:
        return self.m

    @property
    def auxiliary_row(self) -> int:
        return self.m + 1

    @property
    def feasibility_column(self) -> int:
        return self.n

    @property
    def constant_column(self) -> int:
        return self.n + 1


def validate_problem(A: Any, b: Any, c: Any) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Coerce A, b, c to float arrays and check their shapes agree."""

    try:
        A_arr = np.asarray(A, dtype=float)
        b_arr = np.asarray(b, dtype=float)
        c_arr = np.asarray(c, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Problem data must be rectangular numeric arrays ({exc}).") from exc

    if A_arr.ndim != 2:
        raise InvalidInputError(f"Constraint matrix must be 2-dimensional, got {A_arr.ndim} dimension(s).")
    m, n = A_arr.shape
    if m == 0:
        raise InvalidInputError("Problem needs at least one constraint row.")
    if n == 0:
        raise InvalidInputError("Problem needs at least one variable.")
    if b_arr.ndim != 1 or b_arr.shape[0] != m:
        raise InvalidInputError(f"Right-hand side must have length {m}, got shape {b_arr.shape}.")
    if c_arr.ndim != 1 or c_arr.shape[0] != n:
        raise InvalidInputError(f"Objective must have length {n}, got shape {c_arr.shape}.")
    for label, arr in (("A", A_arr), ("b", b_arr), ("c", c_arr)):
        if not np.all(np.isfinite(arr)):
            raise InvalidInputError(f"{label} contains non-finite values.")

    return A_arr, b_arr, c_arr


def build_tableau(A: np.ndarray, b: np.ndarray, c: np.ndarray) -> Tuple[Tableau, Optional[int]]:
    """
    Build the initial dictionary. Also return the most infeasible row
    (most negative b, first on ties), or None when the slack basis is
    already feasible.
    """

    m, n = A.shape
    a = np.zeros((m + 2, n + 2), dtype=float)
    a[:m, :n] = -A
    a[:m, n] = 1.0
    a[:m, n + 1] = b
    a[m, :n] = c
    a[m + 1, n] = -1.0

    tableau = Tableau(
        a=a,
        col_ids=np.arange(n + 1),
        row_ids=np.arange(n + 1, n + 1 + m),
        m=m,
        n=n,
    )

    worst = int(np.argmin(b))
    leaving = worst if b[worst] < 0 else None
    return tableau, leaving


def pivot(tableau: Tableau, row: int, col: int) -> None:
    """Exchange the basic variable of ``row`` with the non-basic one of ``col`` in place."""

    a = tableau.a
    tableau.col_ids[col], tableau.row_ids[row] = tableau.row_ids[row], tableau.col_ids[col]

    inv = 1.0 / a[row, col]
    a[row, :] *= -inv
    a[row, col] = inv

    factors = a[:, col].copy()
    factors[row] = 0.0
    a += np.outer(factors, a[row, :])
    a[:, col] = factors * inv
    a[row, col] = inv


def select_entering(tableau: Tableau, tol: float) -> Optional[int]:
    """
    Column to bring into the basis, or None when the current dictionary is optimal.

    Feasibility first: a positive auxiliary coefficient qualifies; the real
    objective only counts where the auxiliary coefficient is zero, and only
    once the auxiliary constant has reached zero (the dictionary is
    feasible). Ties go to the smallest variable identity.
    """

    aux = tableau.a[tableau.auxiliary_row, : tableau.constant_column]
    obj = tableau.a[tableau.objective_row, : tableau.constant_column]
    eligible = aux > tol
    if not is_infeasible(tableau, tol):
        # a ray of the real objective only proves unboundedness from a feasible dictionary
        eligible |= (np.abs(aux) < tol) & (obj > tol)
    candidates = np.flatnonzero(eligible)
    if candidates.size == 0:
        return None
    return int(candidates[np.argmin(tableau.col_ids[candidates])])


def select_leaving(tableau: Tableau, col: int, tol: float) -> Optional[int]:
    """
    Ratio test on ``col``. Returns None when nothing limits the entering
    variable, i.e. the problem is unbounded along it.
    """

    a = tableau.a
    rhs = tableau.constant_column
    best: Optional[int] = None
    for i in range(tableau.m):
        if a[i, col] >= -tol:
            continue
        if best is None:
            best = i
            continue
        # ratios are non-positive; the larger one is the tighter bound
        d = a[best, rhs] / a[best, col] - a[i, rhs] / a[i, col]
        if d < -tol or (abs(d) < tol and tableau.row_ids[best] > tableau.row_ids[i]):
            best = i
    return best


def is_infeasible(tableau: Tableau, tol: float) -> bool:
    return bool(tableau.a[tableau.auxiliary_row, tableau.constant_column] < -tol)


def extract_solution(tableau: Tableau, tol: float) -> Tuple[float, np.ndarray]:
    """Objective value and x; non-basic original variables stay at zero."""

    a = tableau.a
    x = np.zeros(tableau.n)
    for i, ident in enumerate(tableau.row_ids):
        if ident < tableau.n:
            x[ident] = a[i, tableau.constant_column]
    x[np.abs(x) < tol] = 0.0
    return float(a[tableau.objective_row, tableau.constant_column]), x
