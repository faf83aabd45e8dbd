"""Step-by-step line solver.

From one or two canonical equations this module derives the intercepts,
the intersection point (Cramer's rule), the human-readable derivations and
the geometry handed to the plot adapters.  :func:`solve` runs the whole
pipeline for one "plot" action.
"""

import math
import time

import numpy as np

from linegraph import config
from linegraph.errors import EmptyInput, EquationError, SingularSystem
from linegraph.formatting import (
    format_signed_term,
    format_slope,
    format_standard,
    format_value,
)
from linegraph.logging_config import get_logger
from linegraph.models import (
    EquationSolution,
    Intercepts,
    IntersectionSolution,
    PlotDirective,
    PlotResult,
    Point,
    Step,
    Viewport,
)
from linegraph.parser import build_equation

logger = get_logger("engine")

INTERSECTION_MARKER_SIZE = 10


# ── Derived quantities ──────────────────────────────────────────────────

def x_intercept(eq):
    """``c / a``, or ``None`` when the line is horizontal."""
    if eq.is_horizontal:
        return None
    return eq.c / eq.a


def y_intercept(eq):
    """``c / b``, or ``None`` when the line is vertical."""
    if eq.is_vertical:
        return None
    return eq.c / eq.b


def intercepts(eq) -> Intercepts:
    return Intercepts(x=x_intercept(eq), y=y_intercept(eq))


def slope_intercept(eq):
    """Return ``(m, k)`` for ``y = mx + k``, or ``None`` for a vertical line."""
    if eq.is_vertical:
        return None
    return -eq.a / eq.b, eq.c / eq.b


def intersect(eq1, eq2, tolerance: float = None) -> Point:
    """Crossing point of two lines by Cramer's rule.

    Raises SingularSystem when ``|a1*b2 - a2*b1|`` is within *tolerance*
    (parallel or coincident lines).
    """
    if tolerance is None:
        tolerance = config.DETERMINANT_TOLERANCE
    det = eq1.a * eq2.b - eq2.a * eq1.b
    if abs(det) <= tolerance:
        raise SingularSystem(f"Determinant {det!r} is too close to zero.")
    x = (eq1.c * eq2.b - eq2.c * eq1.b) / det
    y = (eq1.a * eq2.c - eq2.a * eq1.c) / det
    return Point(x=x, y=y)


# ── Derivations ─────────────────────────────────────────────────────────

def x_intercept_steps(eq, use_decimal: bool) -> list:
    """Substitute y = 0 and solve for x.  Empty when there is no x-intercept."""
    xi = x_intercept(eq)
    if xi is None:
        return []
    fmt = lambda v: format_value(v, use_decimal)
    sign = "+" if eq.b >= 0 else "-"
    return [
        Step("Substitute y = 0", f"{fmt(eq.a)}x {sign} {fmt(abs(eq.b))}·0 = {fmt(eq.c)}"),
        Step("Simplify", f"{fmt(eq.a)}x = {fmt(eq.c)}"),
        Step(f"Divide both sides by {fmt(eq.a)}", f"x = {fmt(xi)}"),
        Step("So the x-intercept is", f"({fmt(xi)}, 0)"),
    ]


def y_intercept_steps(eq, use_decimal: bool) -> list:
    """Substitute x = 0 and solve for y.  Empty when there is no y-intercept."""
    yi = y_intercept(eq)
    if yi is None:
        return []
    fmt = lambda v: format_value(v, use_decimal)
    return [
        Step("Substitute x = 0",
             f"{fmt(eq.a)}·0 {format_signed_term(eq.b, 'y', use_decimal)} = {fmt(eq.c)}"),
        Step("Simplify", f"{fmt(eq.b)}y = {fmt(eq.c)}"),
        Step(f"Divide both sides by {fmt(eq.b)}", f"y = {fmt(yi)}"),
        Step("So the y-intercept is", f"(0, {fmt(yi)})"),
    ]


def _substitution_steps(x_val, target, target_name, y, use_decimal) -> list:
    """Plug a known x into *target* and solve for y."""
    fmt = lambda v: format_value(v, use_decimal)
    b_term = format_signed_term(target.b, "y", use_decimal)
    return [
        Step(f"Substitute x into {target_name}",
             f"{fmt(target.a)}({fmt(x_val)}) {b_term} = {fmt(target.c)}"),
        Step("Multiply", f"{fmt(target.a * x_val)} {b_term} = {fmt(target.c)}"),
        Step("Isolate the y term", f"{fmt(target.b)}y = {fmt(target.c - target.a * x_val)}"),
        Step("Solve for y", f"y = {fmt(y)}"),
    ]


def intersection_steps(eq1, eq2, point, use_decimal: bool) -> list:
    """Derivation of *point*, the intersection of *eq1* and *eq2*.

    Two sloped lines are solved by elimination; when exactly one line is
    vertical its x value is substituted into the other.
    """
    fmt = lambda v: format_value(v, use_decimal)

    if eq1.is_vertical and eq2.is_vertical:
        return [Step("Both lines are vertical. No single intersection point.")]

    if not (eq1.is_vertical or eq2.is_vertical):
        steps = [
            Step(f"Eliminate y: multiply Eq1 by {fmt(eq2.b)} and Eq2 by {fmt(eq1.b)}"),
            Step("Subtract to eliminate y",
                 f"{fmt(eq1.a * eq2.b)}x - {fmt(eq2.a * eq1.b)}x"
                 f" = {fmt(eq1.c * eq2.b)} - {fmt(eq2.c * eq1.b)}"),
            Step("Combine like terms",
                 f"{fmt(eq1.a * eq2.b - eq2.a * eq1.b)}x"
                 f" = {fmt(eq1.c * eq2.b - eq2.c * eq1.b)}"),
            Step("Solve for x", f"x = {fmt(point.x)}"),
        ]
        steps += _substitution_steps(point.x, eq1, "Eq1", point.y, use_decimal)
    elif eq1.is_vertical:
        x1 = eq1.c / eq1.a
        steps = [Step("Eq1 is vertical", f"x = {fmt(x1)}")]
        steps += _substitution_steps(x1, eq2, "Eq2", point.y, use_decimal)
    else:
        x2 = eq2.c / eq2.a
        steps = [Step("Eq2 is vertical", f"x = {fmt(x2)}")]
        steps += _substitution_steps(x2, eq1, "Eq1", point.y, use_decimal)

    steps.append(Step("Intersection point", f"({fmt(point.x)}, {fmt(point.y)})"))
    return steps


# ── Geometry ────────────────────────────────────────────────────────────

def compute_viewport(xs, ys, padding: float = None) -> Viewport:
    """Axis bounds that contain the origin and every finite coordinate given.

    Each range grows by *padding* times its width on both sides, or by one
    unit when the width is zero.
    """
    if padding is None:
        padding = config.VIEWPORT_PADDING

    def _bounds(values):
        arr = np.asarray([0.0, *values], dtype=float)
        arr = arr[np.isfinite(arr)]
        lo, hi = float(arr.min()), float(arr.max())
        pad = (hi - lo) * padding or 1.0
        return lo - pad, hi + pad

    x_min, x_max = _bounds(xs)
    y_min, y_max = _bounds(ys)
    return Viewport(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)


def line_directive(eq, viewport: Viewport, name: str) -> PlotDirective:
    """Segment of *eq* clipped to the viewport's x range (y range if vertical)."""
    slope = slope_intercept(eq)
    if slope is None:
        x_val = eq.c / eq.a
        return PlotDirective(
            kind="line", name=name,
            xs=(x_val, x_val), ys=(viewport.y_min, viewport.y_max),
        )
    m, k = slope
    xs = np.array([viewport.x_min, viewport.x_max])
    ys = m * xs + k
    return PlotDirective(
        kind="line", name=name,
        xs=tuple(float(v) for v in xs), ys=tuple(float(v) for v in ys),
    )


def marker_directive(point: Point, name: str, size=None) -> PlotDirective:
    return PlotDirective(kind="marker", name=name, xs=(point.x,), ys=(point.y,), size=size)


def plot_directives(solutions, intersection, viewport: Viewport) -> list:
    """Lines and markers for every valid equation, then the intersection."""
    directives = []
    for sol in solutions:
        if not sol.ok:
            continue
        label = f"Eq{sol.index}"
        directives.append(line_directive(sol.equation, viewport, label))
        xi, yi = sol.intercepts.x, sol.intercepts.y
        if xi is not None and math.isfinite(xi):
            directives.append(marker_directive(Point(xi, 0.0), f"{label} x-int"))
        if yi is not None and math.isfinite(yi):
            directives.append(marker_directive(Point(0.0, yi), f"{label} y-int"))
    if intersection is not None and intersection.point is not None:
        p = intersection.point
        if math.isfinite(p.x) and math.isfinite(p.y):
            directives.append(
                marker_directive(p, "Intersection", size=INTERSECTION_MARKER_SIZE)
            )
    return directives


# ── Pipeline ────────────────────────────────────────────────────────────

def solve_equation(raw, index: int = 1) -> EquationSolution:
    """Parse and solve one equation.  Never raises on bad input."""
    raw = raw or ""
    try:
        eq = build_equation(raw)
    except EmptyInput:
        return EquationSolution(index=index, raw=raw, status="empty")
    except EquationError as e:
        logger.debug("Equation %d rejected: %s", index, e)
        return EquationSolution(index=index, raw=raw, status="invalid", error=e.user_message)

    use_decimal = eq.has_decimal
    return EquationSolution(
        index=index,
        raw=raw,
        status="ok",
        equation=eq,
        use_decimal=use_decimal,
        standard_form=format_standard(eq, use_decimal),
        slope_form=format_slope(eq, use_decimal),
        intercepts=intercepts(eq),
        x_intercept_steps=x_intercept_steps(eq, use_decimal),
        y_intercept_steps=y_intercept_steps(eq, use_decimal),
    )


def solve_intersection(sol1: EquationSolution, sol2: EquationSolution) -> IntersectionSolution:
    """Intersection block for two successfully parsed equations."""
    eq1, eq2 = sol1.equation, sol2.equation
    use_decimal = sol1.use_decimal or sol2.use_decimal
    try:
        point = intersect(eq1, eq2)
    except SingularSystem as e:
        logger.debug("No unique intersection: %s", e)
        return IntersectionSolution(
            status="none", use_decimal=use_decimal, message=e.user_message,
        )
    return IntersectionSolution(
        status="ok",
        use_decimal=use_decimal,
        point=point,
        steps=intersection_steps(eq1, eq2, point, use_decimal),
    )


def solve(raw1, raw2=None) -> PlotResult:
    """
    Solve up to two equations for one plot.

    Each equation gets its own block (empty, invalid or solved); a failure in
    one never stops the other.  The intersection block is present only when
    both equations parsed.
    """
    t_start = time.perf_counter()

    solutions = [solve_equation(raw1, 1), solve_equation(raw2, 2)]
    sol1, sol2 = solutions

    intersection = None
    if sol1.ok and sol2.ok:
        intersection = solve_intersection(sol1, sol2)

    xs, ys = [], []
    for sol in solutions:
        if sol.ok:
            if sol.intercepts.x is not None:
                xs.append(sol.intercepts.x)
            if sol.intercepts.y is not None:
                ys.append(sol.intercepts.y)
    if intersection is not None and intersection.point is not None:
        xs.append(intersection.point.x)
        ys.append(intersection.point.y)

    viewport = compute_viewport(xs, ys)
    directives = plot_directives(solutions, intersection, viewport)

    logger.info(
        "Solved %d of 2 equation(s), intersection=%s in %.2f ms",
        sum(sol.ok for sol in solutions),
        intersection.status if intersection else "n/a",
        (time.perf_counter() - t_start) * 1000,
    )
    return PlotResult(
        equations=solutions,
        intersection=intersection,
        directives=directives,
        viewport=viewport,
    )
