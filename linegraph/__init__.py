"""LineGraph: parse, solve and plot up to two linear equations."""

from linegraph.engine import (
    compute_viewport,
    intersect,
    intersection_steps,
    slope_intercept,
    solve,
    solve_equation,
    x_intercept,
    y_intercept,
)
from linegraph.errors import (
    DegenerateEquation,
    EmptyInput,
    EquationError,
    MalformedSyntax,
    NonFiniteCoefficient,
    SingularSystem,
)
from linegraph.formatting import format_standard, format_value, fraction_parts, to_fraction
from linegraph.models import CanonicalEquation, PlotResult
from linegraph.normalizer import normalize
from linegraph.parser import build_equation, parse_equation

__all__ = [
    "CanonicalEquation",
    "DegenerateEquation",
    "EmptyInput",
    "EquationError",
    "MalformedSyntax",
    "NonFiniteCoefficient",
    "PlotResult",
    "SingularSystem",
    "build_equation",
    "compute_viewport",
    "format_standard",
    "format_value",
    "fraction_parts",
    "intersect",
    "intersection_steps",
    "normalize",
    "parse_equation",
    "slope_intercept",
    "solve",
    "solve_equation",
    "to_fraction",
    "x_intercept",
    "y_intercept",
]
