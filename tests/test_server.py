import pytest

from mcp_simplex.schemas import Constraint, LPModel, LinearExpr, LinearTerm, StandardLP, Variable
from mcp_simplex.server import analyze_infeasibility, parse_nl_to_lp, solve_lp, solve_standard_lp


def test_solve_standard_lp_tool():
    problem = StandardLP(A=[[1, -1], [-1, 1], [1, 1]], b=[1, 1, 3], c=[2, 1])
    result = solve_standard_lp(problem)

    assert result["status"] == "optimal"
    assert result["value"] == pytest.approx(5.0)
    assert result["x"] == pytest.approx([2.0, 1.0])


def test_solve_standard_lp_tool_reports_bad_dimensions():
    result = solve_standard_lp(StandardLP(A=[[1, 2]], b=[1, 2], c=[1, 1]))
    assert "error" in result


def test_solve_lp_tool_round_trip_through_parser():
    model = LPModel.model_validate(parse_nl_to_lp("maximize x + y subject to x + 2y <= 4, 3x + y <= 6"))
    result = solve_lp(model)

    assert result["status"] == "optimal"
    assert result["objective_value"] == pytest.approx(2.8)


def test_solve_lp_tool_reports_free_variables():
    model = LPModel(
        sense="max",
        objective=LinearExpr(terms=[LinearTerm(var="x", coef=1.0)]),
        variables=[Variable(name="x", lb=None)],
        constraints=[],
    )
    assert "error" in solve_lp(model)


def test_parse_tool_reports_errors():
    assert "error" in parse_nl_to_lp("maximize x subject to x = 2")


def test_analyze_infeasibility_tool():
    model = LPModel(
        sense="max",
        objective=LinearExpr(terms=[LinearTerm(var="x", coef=1.0)]),
        variables=[Variable(name="x")],
        constraints=[
            Constraint(name="low", lhs=LinearExpr(terms=[LinearTerm(var="x", coef=1.0)]), cmp=">=", rhs=4.0),
            Constraint(name="high", lhs=LinearExpr(terms=[LinearTerm(var="x", coef=2.0)]), cmp="<=", rhs=2.0),
        ],
    )
    report = analyze_infeasibility(model)
    assert report["status"] == "infeasible"
    assert report["conflicting_constraints"] == ["low", "high"]


def test_solve_lp_tool_reports_infeasible_parsed_model():
    parsed = parse_nl_to_lp("maximize x + y subject to x + y <= 4, x >= 3, x <= 2")
    result = solve_lp(LPModel.model_validate(parsed))

    assert result["status"] == "infeasible"
    assert result["x"] is None
