"""Numeric formatting: fixed decimals or reduced fractions.

Each equation is shown in the style it was typed in.  If any literal in
its source used a decimal point the values print as ``0.50``; otherwise
they print as fractions such as ``-5/2``.
"""

import math

from linegraph import config


def _continued_fraction(x: float, tolerance: float) -> tuple:
    """Return ``(h, k)`` with ``h / k`` within *tolerance* (relative) of |x|."""
    x = abs(x)
    h1, h2 = 1, 0
    k1, k2 = 0, 1
    b = x
    for _ in range(config.MAX_FRACTION_TERMS):
        a = math.floor(b)
        h1, h2 = a * h1 + h2, h1
        k1, k2 = a * k1 + k2, k1
        if abs(h1 / k1 - x) <= x * tolerance:
            break
        remainder = b - a
        if remainder == 0:
            break
        b = 1 / remainder
        if not math.isfinite(b):
            break
    return h1, k1


def fraction_parts(x: float, tolerance: float = None) -> tuple:
    """Return ``(numerator, denominator)`` for *x*; the sign sits on the numerator."""
    if not math.isfinite(x):
        raise ValueError(f"Cannot express {x!r} as a fraction.")
    if tolerance is None:
        tolerance = config.FRACTION_TOLERANCE
    h, k = _continued_fraction(x, tolerance)
    return (-h if x < 0 else h), k


def to_fraction(x: float, tolerance: float = None) -> str:
    """Render *x* as the simplest fraction within *tolerance*.

    >>> to_fraction(0.75)
    '3/4'
    >>> to_fraction(-2.5)
    '-5/2'
    >>> to_fraction(4.0)
    '4'
    """
    if not math.isfinite(x):
        return config.NOT_AVAILABLE
    if tolerance is None:
        tolerance = config.FRACTION_TOLERANCE
    h, k = _continued_fraction(x, tolerance)
    result = f"{h}" if k == 1 else f"{h}/{k}"
    if x < 0 and h != 0:
        return f"-{result}"
    return result


def format_value(x: float, use_decimal: bool) -> str:
    """Format *x* for display: ``N/A``, fixed decimals or a fraction."""
    if x is None or not math.isfinite(x):
        return config.NOT_AVAILABLE
    if use_decimal:
        # Adding 0.0 turns -0.0 into 0.0 so it never prints as "-0.00".
        return f"{x + 0.0:.{config.DECIMAL_PLACES}f}"
    return to_fraction(x)


def format_signed_term(coef: float, variable: str, use_decimal: bool) -> str:
    """``"+ 3x"`` / ``"- 3x"``: a term that follows another term."""
    sign = "+" if coef >= 0 else "-"
    return f"{sign} {format_value(abs(coef), use_decimal)}{variable}"


def format_standard(eq, use_decimal: bool) -> str:
    """Standard form ``ax ± by = c``."""
    a = format_value(eq.a, use_decimal)
    c = format_value(eq.c, use_decimal)
    return f"{a}x {format_signed_term(eq.b, 'y', use_decimal)} = {c}"


def format_slope(eq, use_decimal: bool) -> str:
    """Slope-intercept form ``y = mx ± k``, or ``x = c/a`` for a vertical line."""
    if eq.is_vertical:
        return f"x = {format_value(eq.c / eq.a, use_decimal)}"
    m = -eq.a / eq.b
    k = eq.c / eq.b
    return f"y = {format_value(m, use_decimal)}x {format_signed_term(k, '', use_decimal)}"
