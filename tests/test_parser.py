import pytest

from mcp_simplex.lp.parser import parse_natural_language_spec
from mcp_simplex.lp.simplex import simplex_solve


def test_parser_outputs_expected_variables():
    spec = "maximize 3x + 2y subject to x + 2y <= 14, 3x - y >= 0, x <= 5, x,y >= 0"
    model = parse_natural_language_spec(spec)

    assert {v.name for v in model.variables} == {"x", "y"}
    assert model.sense == "max"
    assert len(model.constraints) == 2

    bounds = {var.name: (var.lb, var.ub) for var in model.variables}
    assert bounds["x"] == (0.0, 5.0)
    assert bounds["y"] == (0.0, None)


def test_parsed_model_solves():
    model = parse_natural_language_spec(
        "maximize 3x + 2y subject to x + 2y <= 14, 3x - y >= 0, x <= 5, x,y >= 0"
    )
    solution = simplex_solve(model)

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(24.0)
    assert solution.x == pytest.approx({"x": 5.0, "y": 4.5})


def test_parser_reads_coefficients_and_constants():
    model = parse_natural_language_spec("minimize 2.5a - b + 4 s.t. a + b >= 1; b, a <= 3")

    assert model.sense == "min"
    assert [(t.var, t.coef) for t in model.objective.terms] == [("a", 2.5), ("b", -1.0)]
    assert model.objective.constant == pytest.approx(4.0)
    assert model.constraints[0].cmp == ">="
    assert {v.name: v.ub for v in model.variables} == {"a": 3.0, "b": 3.0}


@pytest.mark.parametrize(
    "spec",
    [
        "",
        "   ",
        "optimize x",
        "maximize",
        "maximize x subject to x + y = 3",
        "maximize x subject to x + y",
    ],
)
def test_parser_rejects_bad_specs(spec):
    with pytest.raises(ValueError):
        parse_natural_language_spec(spec)


def test_contradictory_bound_stays_a_constraint():
    model = parse_natural_language_spec("maximize x + y subject to x + y <= 4, x >= 3, x <= 2")

    assert [c.name for c in model.constraints] == ["c1", "c2"]
    assert model.constraints[1].cmp == "<="
    assert [(t.var, t.coef) for t in model.constraints[1].lhs.terms] == [("x", 1.0)]
    assert model.constraints[1].rhs == pytest.approx(2.0)
    bounds = {var.name: (var.lb, var.ub) for var in model.variables}
    assert bounds["x"] == (3.0, None)

    assert simplex_solve(model).status == "infeasible"


def test_negative_upper_bound_stays_a_constraint():
    model = parse_natural_language_spec("maximize x subject to x <= -1")

    assert len(model.constraints) == 1
    assert model.variables[0].ub is None
    assert simplex_solve(model).status == "infeasible"


def test_contradictory_multi_bound_becomes_rows():
    model = parse_natural_language_spec("maximize x + y subject to x, y <= 5, x, y >= 7")

    assert [(c.lhs.terms[0].var, c.cmp, c.rhs) for c in model.constraints] == [("x", ">=", 7.0), ("y", ">=", 7.0)]
    assert {v.name: (v.lb, v.ub) for v in model.variables} == {"x": (0.0, 5.0), "y": (0.0, 5.0)}
    assert simplex_solve(model).status == "infeasible"
