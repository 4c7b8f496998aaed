import numpy as np
from typing import Dict, Tuple, List, Any, Optional

from ..errors import InvalidInputError
from ..schemas import LPModel, Optimal, SolveOptions


def build_standard_form(model: LPModel) -> Tuple[np.ndarray, np.ndarray, np.ndarray, Dict[str, Any]]:
    """
    Reduce a named model to max c.x s.t. A x <= b, x >= 0.

    Finite lower bounds are shifted out (x = lb + x'), finite upper bounds
    become extra rows, '>=' rows are negated and a 'min' objective is negated.
    Free variables have no such reduction and are rejected.
    Return A, b, c and the metadata needed to map a solution back.
    """

    names: List[str] = []
    offsets: Dict[str, float] = {}
    index: Dict[str, int] = {}
    upper: List[Tuple[str, float]] = []

    for var in model.variables:
        if var.name in index:
            raise InvalidInputError(f"Variable '{var.name}' is declared twice.")
        lb = var.lb
        ub = var.ub
        if lb is None or np.isneginf(lb):
            raise InvalidInputError(
                f"Variable {var.name} is free; split it into two non-negative variables first."
            )
        if ub is not None and np.isposinf(ub):
            ub = None
        if not np.isfinite(lb) or (ub is not None and not np.isfinite(ub)):
            raise InvalidInputError(f"Variable {var.name} has non-finite bounds.")
        if ub is not None and lb > ub:
            raise InvalidInputError(f"Variable {var.name} has inconsistent bounds (lb {lb} > ub {ub}).")

        index[var.name] = len(names)
        names.append(var.name)
        offsets[var.name] = lb
        if ub is not None:
            upper.append((var.name, ub - lb))

    n = len(names)
    if n == 0:
        raise InvalidInputError("Model has no variables.")

    c_raw = np.zeros(n, dtype=float)
    objective_constant = model.objective.constant
    for term in model.objective.terms:
        if term.var not in index:
            raise InvalidInputError(f"Objective references unknown variable '{term.var}'.")
        c_raw[index[term.var]] += term.coef
        objective_constant += term.coef * offsets[term.var]

    rows: List[np.ndarray] = []
    rhs_values: List[float] = []
    row_names: List[str] = []

    for cons in model.constraints:
        row = np.zeros(n, dtype=float)
        shift = cons.lhs.constant
        for term in cons.lhs.terms:
            if term.var not in index:
                raise InvalidInputError(f"Constraint '{cons.name}' references unknown variable '{term.var}'.")
            row[index[term.var]] += term.coef
            shift += term.coef * offsets[term.var]
        rhs = cons.rhs - shift
        if cons.cmp == ">=":
            row = -row
            rhs = -rhs
        rows.append(row)
        rhs_values.append(rhs)
        row_names.append(cons.name)

    for var_name, width in upper:
        row = np.zeros(n, dtype=float)
        row[index[var_name]] = 1.0
        rows.append(row)
        rhs_values.append(width)
        row_names.append(f"bound_{var_name}_ub")

    if rows:
        A = np.vstack(rows)
        b = np.array(rhs_values, dtype=float)
    else:
        A = np.zeros((0, n), dtype=float)
        b = np.zeros(0, dtype=float)

    c = c_raw.copy() if model.sense == "max" else -c_raw

    metadata: Dict[str, Any] = {
        "names": names,
        "offsets": offsets,
        "constraint_names": row_names,
        "objective_constant": objective_constant,
        "sense": model.sense,
    }
    return A, b, c, metadata


def analyze_infeasibility_model(model: LPModel, opts: Optional[SolveOptions] = None) -> Dict[str, Any]:
    """
    Name the constraints whose removal on its own makes the model feasible.

    Only feasibility of what remains is checked (zero objective), so a
    remainder that would be unbounded still clears its dropped row.
    Variable bounds are never dropped.
    """

    from .simplex import simplex_solve, solve  # simplex imports this module

    opts = opts or SolveOptions()
    try:
        A, b, _, meta = build_standard_form(model)
    except InvalidInputError as exc:
        return {
            "status": "error",
            "message": str(exc),
            "conflicting_constraints": [],
            "suggestions": ["Give every variable a finite lower bound no greater than its upper bound."],
        }

    solution = simplex_solve(model, opts)
    if solution.status != "infeasible":
        return {
            "status": solution.status,
            "message": solution.message or f"Model is {solution.status}; nothing to diagnose.",
            "conflicting_constraints": [],
            "suggestions": [],
        }

    # model rows come first in the standard form, bound rows after them
    row_names = meta["constraint_names"][: len(model.constraints)]
    zero = np.zeros(A.shape[1])
    conflicts: List[str] = []
    for idx, name in enumerate(row_names):
        rest_A = np.delete(A, idx, axis=0)
        if rest_A.shape[0] == 0 or isinstance(solve(rest_A, np.delete(b, idx), zero, opts), Optimal):
            conflicts.append(name)

    if conflicts:
        message = f"{len(conflicts)} of {len(row_names)} constraints are each necessary for infeasibility."
        suggestions = [f"Loosen one of: {', '.join(conflicts)}."]
    else:
        message = "No single constraint causes the infeasibility."
        suggestions = ["Look for a conflict spanning several constraints or the variable bounds."]

    return {
        "status": "infeasible",
        "message": message,
        "conflicting_constraints": conflicts,
        "suggestions": suggestions,
    }
