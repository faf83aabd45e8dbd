"""Error taxonomy for equation parsing and solving.

All errors derive from ``ValueError`` so callers that already handle bad
input the usual way keep working.  ``user_message`` is the text shown in
place of a result block.
"""

from linegraph import config


class EquationError(ValueError):
    """Base class for anything that stops one equation from being solved."""

    user_message = config.INVALID_EQUATION_MESSAGE


class EmptyInput(EquationError):
    """Blank input.  Callers show nothing rather than an error."""

    user_message = ""


class MalformedSyntax(EquationError):
    """Text does not match the equation grammar."""


class NonFiniteCoefficient(EquationError):
    """A coefficient divides by zero or overflows."""


class DegenerateEquation(EquationError):
    """Both variable coefficients cancel out, so there is no line."""


class SingularSystem(EquationError):
    """Two lines with no unique intersection (parallel or coincident)."""

    user_message = config.NO_INTERSECTION_MESSAGE
