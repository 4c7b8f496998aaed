from pydantic import BaseModel, Field
from typing import Annotated, Literal, List, Dict, Optional, Union

Sense = Literal["min", "max"]
Cmp = Literal["<=", ">="]


class Variable(BaseModel):
    name: str
    lb: float | None = 0.0
    ub: float | None = None


class LinearTerm(BaseModel):
    var: str
    coef: float


class LinearExpr(BaseModel):
    terms: List[LinearTerm] = Field(default_factory=list)
    constant: float = 0.0


class Constraint(BaseModel):
    name: str
    lhs: LinearExpr
    cmp: Cmp
    rhs: float


class LPModel(BaseModel):
    name: str = "problem"
    sense: Sense
    objective: LinearExpr
    variables: List[Variable]
    constraints: List[Constraint]


class StandardLP(BaseModel):
    """maximize c.x subject to A x <= b, x >= 0"""

    A: List[List[float]]
    b: List[float]
    c: List[float]


class SolveOptions(BaseModel):
    max_iters: int = Field(default=10_000, ge=1)
    tol: float = Field(default=1e-9, gt=0.0)
    time_limit: Optional[float] = Field(default=None, gt=0.0)


class Optimal(BaseModel):
    status: Literal["optimal"] = "optimal"
    value: float
    x: List[float]
    iterations: int = 0


class Infeasible(BaseModel):
    status: Literal["infeasible"] = "infeasible"
    iterations: int = 0


class Unbounded(BaseModel):
    status: Literal["unbounded"] = "unbounded"
    iterations: int = 0


class IterationLimit(BaseModel):
    status: Literal["iteration_limit"] = "iteration_limit"
    iterations: int = 0
    message: str = ""


Outcome = Annotated[
    Union[Optimal, Infeasible, Unbounded, IterationLimit],
    Field(discriminator="status"),
]


class LPSolution(BaseModel):
    status: Literal["optimal", "infeasible", "unbounded", "iteration_limit"]
    objective_value: Optional[float]
    x: Dict[str, float] | None
    iterations: int
    message: str = ""
