from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Cmp = Literal["<=", ">=", "="]
Status = Literal["optimal", "infeasible", "unbounded"]

DEFAULT_TOL = 1e-3


class Constraint(BaseModel):
    """One linear relation ``a1*x1 + a2*x2 <cmp> rhs``."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str = ""
    a1: float
    a2: float
    cmp: Cmp
    rhs: float

    @field_validator("cmp", mode="before")
    @classmethod
    def _normalise_cmp(cls, value: object) -> object:
        if value == "==":
            return "="
        return value

    def evaluate(self, x1: float, x2: float) -> float:
        return self.a1 * x1 + self.a2 * x2

    def is_satisfied(self, x1: float, x2: float, tol: float = DEFAULT_TOL) -> bool:
        value = self.evaluate(x1, x2)
        if self.cmp == "<=":
            return value <= self.rhs + tol
        if self.cmp == ">=":
            return value >= self.rhs - tol
        return abs(value - self.rhs) <= tol


class Objective(BaseModel):
    """Maximised objective ``Z = c1*x1 + c2*x2``."""

    model_config = ConfigDict(allow_inf_nan=False)

    c1: float
    c2: float

    def value(self, x1: float, x2: float) -> float:
        return self.c1 * x1 + self.c2 * x2


class VariableLabels(BaseModel):
    x1: str = "x1"
    x2: str = "x2"


class Problem(BaseModel):
    name: str = "problem"
    objective: Objective
    constraints: List[Constraint] = Field(default_factory=list)
    variables: VariableLabels = Field(default_factory=VariableLabels)


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x1: float
    x2: float


class SolveOptions(BaseModel):
    tol: float = Field(default=DEFAULT_TOL, gt=0.0)
    detect_unbounded: bool = True
    report_constraints: bool = True


class ConstraintStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    constraint: str
    value: float
    slack: float
    binding: bool


class Solution(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Status
    feasible: bool
    bounded: bool = True
    result: Optional[float] = None
    variables: Dict[str, float] | None = None
    constraint_status: List[ConstraintStatus] | None = None
    message: str = ""
