import re
from collections import OrderedDict
from typing import List, Tuple

from ..schemas import LPModel, Variable, LinearExpr, LinearTerm, Constraint

_COMPARATOR = re.compile(r"(<=|>=|==|=)")
_MULTI_BOUND = re.compile(
    r"^([A-Za-z_][\w]*(?:\s*,\s*[A-Za-z_][\w]*)+)\s*(<=|>=)\s*(-?\d+(?:\.\d+)?)$"
)
_TERM_PATTERN = re.compile(r"([+-]?\s*\d*\.?\d*)\s*([A-Za-z_][\w]*)")
_NUMBER_PATTERN = re.compile(r"[+-]?\s*\d+(?:\.\d+)?")


def parse_natural_language_spec(spec: str) -> LPModel:
    """
    Extremely small rule-based parser for toy specs like:
      "maximize 3x + 2y subject to x + 2y <= 14, 3x - y >= 0, x <= 5, x,y >= 0"
    Every variable is non-negative. Single-variable rows with a unit
    coefficient become bounds, unless they contradict the bounds already
    collected, in which case they stay rows. Equality rows are rejected.
    """

    if not spec or not spec.strip():
        raise ValueError("Specification is empty.")

    normalized = " ".join(spec.replace("\n", " ").split())
    pieces = re.split(r"subject to|such that|s\.t\.", normalized, flags=re.IGNORECASE)
    objective_part = pieces[0].strip()
    constraints_part = pieces[1].strip() if len(pieces) > 1 else ""

    match = re.match(r"(maximize|minimize|max|min)\s*(.*)", objective_part, flags=re.IGNORECASE)
    if not match:
        raise ValueError("Objective must start with 'maximize' or 'minimize'.")
    sense_word = match.group(1).lower()
    sense = "max" if sense_word.startswith("max") else "min"
    objective_expr_str = match.group(2).strip()
    if not objective_expr_str:
        raise ValueError("Objective expression is missing.")

    objective_expr = _parse_linear_expr(objective_expr_str)
    variables = OrderedDict((term.var, Variable(name=term.var)) for term in objective_expr.terms)

    constraints: List[Constraint] = []
    for token in _split_constraints(constraints_part):
        multi = _MULTI_BOUND.match(token)
        if multi:
            vars_chunk, cmp, rhs_text = multi.groups()
            for var_name in [v.strip() for v in vars_chunk.split(",") if v.strip()]:
                var = variables.setdefault(var_name, Variable(name=var_name))
                if not _tighten(var, cmp, float(rhs_text)):
                    single = LinearExpr(terms=[LinearTerm(var=var_name, coef=1.0)])
                    _append_row(constraints, single, cmp, float(rhs_text))
            continue

        comp_match = _COMPARATOR.search(token)
        if not comp_match:
            raise ValueError(f"Could not parse constraint segment '{token}'.")
        cmp = comp_match.group(1)
        if cmp in ("=", "=="):
            raise ValueError(f"Equality constraint '{token}' is not supported; use a pair of inequalities.")
        lhs_str = token[: comp_match.start()].strip()
        rhs_str = token[comp_match.end() :].strip()
        if not lhs_str or not rhs_str:
            raise ValueError(f"Incomplete constraint expression '{token}'.")
        expr = _parse_linear_expr(lhs_str)
        try:
            rhs_value = float(rhs_str)
        except ValueError as exc:
            raise ValueError(f"Right-hand side '{rhs_str}' is not numeric.") from exc

        if len(expr.terms) == 1 and abs(expr.constant) < 1e-12 and abs(expr.terms[0].coef - 1.0) < 1e-12:
            var_name = expr.terms[0].var
            var = variables.setdefault(var_name, Variable(name=var_name))
            if _tighten(var, cmp, rhs_value):
                continue

        _append_row(constraints, expr, cmp, rhs_value)
        for term in expr.terms:
            variables.setdefault(term.var, Variable(name=term.var))

    return LPModel(
        name="parsed",
        sense=sense,
        objective=objective_expr,
        variables=list(variables.values()),
        constraints=constraints,
    )


def _split_constraints(text: str) -> List[str]:
    # commas separate both constraints and names in "x, y >= 0"; glue until a comparator shows up
    tokens: List[str] = []
    if not text:
        return tokens
    chunks = [chunk.strip() for chunk in re.split(r";|\band\b", text, flags=re.IGNORECASE) if chunk.strip()]
    for chunk in chunks:
        buffer: List[str] = []
        for piece in [p.strip() for p in chunk.split(",") if p.strip()]:
            buffer.append(piece)
            candidate = ", ".join(buffer)
            if _COMPARATOR.search(candidate):
                tokens.append(candidate)
                buffer.clear()
        if buffer:
            raise ValueError(f"Could not parse constraint segment '{', '.join(buffer)}'.")
    return tokens


def _tighten(var: Variable, cmp: str, value: float) -> bool:
    """Narrow the bounds of ``var``; leave them alone and return False if they would cross."""

    lb, ub = var.lb, var.ub
    if cmp == "<=":
        ub = value if ub is None else min(ub, value)
    else:
        lb = value if lb is None else max(lb, value)
    if lb is not None and ub is not None and lb > ub:
        return False
    var.lb, var.ub = lb, ub
    return True


def _append_row(constraints: List[Constraint], expr: LinearExpr, cmp: str, rhs: float) -> None:
    constraints.append(
        Constraint(
            name=f"c{len(constraints) + 1}",
            lhs=expr,
            cmp=cmp,  # type: ignore[arg-type]
            rhs=rhs,
        )
    )


def _parse_linear_expr(expr_str: str) -> LinearExpr:
    expr_clean = expr_str.replace("*", "")
    coeffs: OrderedDict[str, float] = OrderedDict()
    spans: List[Tuple[int, int]] = []

    for match in _TERM_PATTERN.finditer(expr_clean):
        coef_text = match.group(1).replace(" ", "")
        var_name = match.group(2)
        if coef_text in ("", "+"):
            coef = 1.0
        elif coef_text == "-":
            coef = -1.0
        else:
            coef = float(coef_text)
        coeffs[var_name] = coeffs.get(var_name, 0.0) + coef
        spans.append(match.span())

    remaining = list(expr_clean)
    for start, end in spans:
        for idx in range(start, end):
            remaining[idx] = " "
    remaining_str = "".join(remaining)

    constant = 0.0
    for num_match in _NUMBER_PATTERN.finditer(remaining_str):
        text = num_match.group(0).replace(" ", "")
        if text:
            constant += float(text)

    terms = [LinearTerm(var=name, coef=coef) for name, coef in coeffs.items() if abs(coef) > 1e-12]
    return LinearExpr(terms=terms, constant=constant)
