"""Result dataclasses shared by the parser, the solver and the adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SideAccumulator:
    """Running coefficient sums for one side of an equation."""

    x: float = 0.0
    y: float = 0.0
    const: float = 0.0
    has_decimal_literal: bool = False


@dataclass(frozen=True)
class CanonicalEquation:
    """A line in standard form ``a·x + b·y = c``."""

    a: float
    b: float
    c: float
    has_decimal: bool = False

    @property
    def is_vertical(self) -> bool:
        return self.b == 0

    @property
    def is_horizontal(self) -> bool:
        return self.a == 0

    def to_dict(self) -> dict[str, Any]:
        return {"a": self.a, "b": self.b, "c": self.c, "has_decimal": self.has_decimal}


@dataclass(frozen=True)
class Intercepts:
    """Axis intercepts; ``None`` means the line never crosses that axis."""

    x: float | None = None
    y: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Step:
    """One line of a derivation: a short description and the math it produces."""

    description: str
    expression: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description, "expression": self.expression}


@dataclass(frozen=True)
class PlotDirective:
    """A line (two endpoints) or a marker (one point) for the chart adapter."""

    kind: str  # "line" or "marker"
    name: str
    xs: tuple[float, ...]
    ys: tuple[float, ...]
    size: int | None = None

    def to_dict(self) -> dict[str, Any]:
        result_dict = {
            "kind": self.kind,
            "name": self.name,
            "x": list(self.xs),
            "y": list(self.ys),
        }
        if self.size is not None:
            result_dict["size"] = self.size
        return result_dict


@dataclass(frozen=True)
class Viewport:
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "x_min": self.x_min,
            "x_max": self.x_max,
            "y_min": self.y_min,
            "y_max": self.y_max,
        }


@dataclass
class EquationSolution:
    """Everything displayed for one input equation.

    ``status`` is "empty" for blank input, "invalid" when parsing failed
    (``error`` holds the user-facing message) and "ok" otherwise.
    """

    index: int
    raw: str
    status: str
    error: str | None = None
    equation: CanonicalEquation | None = None
    use_decimal: bool = False
    standard_form: str = ""
    slope_form: str = ""
    intercepts: Intercepts = field(default_factory=Intercepts)
    x_intercept_steps: list[Step] = field(default_factory=list)
    y_intercept_steps: list[Step] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "raw": self.raw,
            "status": self.status,
            "error": self.error,
            "equation": self.equation.to_dict() if self.equation else None,
            "use_decimal": self.use_decimal,
            "standard_form": self.standard_form,
            "slope_form": self.slope_form,
            "intercepts": self.intercepts.to_dict(),
            "x_intercept_steps": [s.to_dict() for s in self.x_intercept_steps],
            "y_intercept_steps": [s.to_dict() for s in self.y_intercept_steps],
        }


@dataclass
class IntersectionSolution:
    """Derivation of the crossing point of two parsed equations."""

    status: str  # "ok" or "none"
    use_decimal: bool = False
    point: Point | None = None
    steps: list[Step] = field(default_factory=list)
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "use_decimal": self.use_decimal,
            "point": self.point.to_dict() if self.point else None,
            "steps": [s.to_dict() for s in self.steps],
            "message": self.message,
        }


@dataclass
class PlotResult:
    """Output of one solve: display blocks plus geometry for the renderer."""

    equations: list[EquationSolution]
    intersection: IntersectionSolution | None
    directives: list[PlotDirective]
    viewport: Viewport

    @property
    def valid_equations(self) -> list[EquationSolution]:
        return [sol for sol in self.equations if sol.ok]

    def to_dict(self) -> dict[str, Any]:
        return {
            "equations": [sol.to_dict() for sol in self.equations],
            "intersection": self.intersection.to_dict() if self.intersection else None,
            "directives": [d.to_dict() for d in self.directives],
            "viewport": self.viewport.to_dict(),
        }
