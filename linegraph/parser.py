"""Equation text parser.

Turns strings such as ``"3x - 1/4y = -5"``, ``"y = 0.5x + 3"`` or
``"2x + 3 = y - x + 1"`` into a :class:`CanonicalEquation`
``a·x + b·y = c``.

Pipeline (each stage usable on its own):

1. :func:`normalize` cleans the raw text.
2. :func:`tokenize_side` splits one side into signed terms with a small
   state machine.
3. :func:`parse_side` classifies each term as an ``x`` term, a ``y`` term
   or a constant and sums the coefficients.
4. :func:`build_equation` moves variables left and constants right.
"""

import math
import re

from linegraph.errors import (
    DegenerateEquation,
    EmptyInput,
    EquationError,
    MalformedSyntax,
    NonFiniteCoefficient,
)
from linegraph.logging_config import get_logger
from linegraph.models import CanonicalEquation, SideAccumulator
from linegraph.normalizer import normalize

logger = get_logger("parser")

_SIGNS = "+-"
_VARIABLES = ("x", "y")

# Optional sign, then "12", "1.5", ".5" or "3.".  No exponents, no inf/nan.
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")

# Tokenizer states
_START = "start"  # nothing read for the current term yet
_SIGN = "sign"    # read a sign, waiting for the term body
_BODY = "body"    # inside a term body


def _parse_number(text: str, original: str) -> float:
    if not _NUMBER.fullmatch(text):
        raise MalformedSyntax(f"Could not parse coefficient: '{original}'")
    value = float(text)
    if not math.isfinite(value):
        raise NonFiniteCoefficient(f"Coefficient is too large: '{original}'")
    return value


def parse_coefficient(token: str) -> float:
    """Parse a signed coefficient token into a float.

    ``""`` and ``"+"`` mean 1, ``"-"`` means -1.  A ``num/den`` fraction may
    leave the numerator as a bare sign (``"-/2"`` is -0.5).
    """
    if token in ("", "+"):
        return 1.0
    if token == "-":
        return -1.0
    if "/" in token:
        parts = token.split("/")
        if len(parts) != 2:
            raise MalformedSyntax(f"Too many '/' in coefficient: '{token}'")
        num_s, den_s = parts
        if num_s in ("", "+"):
            num = 1.0
        elif num_s == "-":
            num = -1.0
        else:
            num = _parse_number(num_s, token)
        den = _parse_number(den_s, token)
        if den == 0:
            raise NonFiniteCoefficient(f"Division by zero in coefficient: '{token}'")
        value = num / den
        if not math.isfinite(value):
            raise NonFiniteCoefficient(f"Coefficient is too large: '{token}'")
        return value
    return _parse_number(token, token)


def tokenize_side(text: str) -> list:
    """Split one normalized side into signed terms.

    Each ``+`` or ``-`` that follows a term body closes that term and opens
    the next one.  Consecutive signs fold into one (``+-3`` is ``-3``,
    ``--3`` is ``+3``).  A trailing sign is a syntax error.
    """
    terms = []
    current = []
    state = _START
    for ch in text:
        if ch in _SIGNS:
            if state == _SIGN:
                current[-1] = "+" if current[-1] == ch else "-"
                continue
            if state == _BODY:
                terms.append("".join(current))
                current = []
            current.append(ch)
            state = _SIGN
        else:
            current.append(ch)
            state = _BODY
    if state == _SIGN:
        raise MalformedSyntax(f"Dangling sign at the end of '{text}'")
    if state == _BODY:
        terms.append("".join(current))
    return terms


def parse_side(text: str) -> SideAccumulator:
    """Sum the ``x``, ``y`` and constant terms of one side.

    An empty side is the zero accumulator.
    """
    acc = SideAccumulator()
    for term in tokenize_side(text):
        for var in _VARIABLES:
            if var in term:
                coef_s = term.replace(var, "", 1)
                break
        else:
            var = None
            coef_s = term
        if "." in coef_s:
            acc.has_decimal_literal = True
        coef = parse_coefficient(coef_s)
        if var == "x":
            acc.x += coef
        elif var == "y":
            acc.y += coef
        else:
            acc.const += coef
    return acc


def build_equation(text) -> CanonicalEquation:
    """Parse *text* into standard form, raising an :class:`EquationError`.

    Raises:
        EmptyInput: blank input
        MalformedSyntax: not exactly one '=' or a term that does not parse
        NonFiniteCoefficient: zero denominator or overflow
        DegenerateEquation: the x and y coefficients both cancel to zero
    """
    s = normalize(text)
    if not s:
        raise EmptyInput("Equation is empty.")

    parts = s.split("=")
    if len(parts) != 2:
        raise MalformedSyntax("Equation must contain exactly one '=' sign.")

    left = parse_side(parts[0])
    right = parse_side(parts[1])

    a = left.x - right.x
    b = left.y - right.y
    c = right.const - left.const
    if not (math.isfinite(a) and math.isfinite(b) and math.isfinite(c)):
        raise NonFiniteCoefficient("Coefficients overflow.")
    if a == 0 and b == 0:
        raise DegenerateEquation("Equation has no x or y term, so it is not a line.")

    return CanonicalEquation(
        a=a,
        b=b,
        c=c,
        has_decimal=left.has_decimal_literal or right.has_decimal_literal,
    )


def parse_equation(text):
    """Like :func:`build_equation` but returns ``None`` instead of raising."""
    try:
        return build_equation(text)
    except EmptyInput:
        return None
    except EquationError as e:
        logger.debug("Rejected equation %r: %s", text, e)
        return None
