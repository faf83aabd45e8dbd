"""
HTML solution blocks for the web front-end.

Every expression is wrapped in MathJax inline delimiters ``\\( … \\)`` so the
page can typeset it; descriptions are escaped as plain text.
"""

from html import escape

from linegraph.models import PlotResult


def _math(expr: str) -> str:
    return f"\\({escape(expr)}\\)"


def _steps_html(steps) -> str:
    items = []
    for step in steps:
        if step.expression:
            items.append(f"<li>{escape(step.description)}: {_math(step.expression)}</li>")
        else:
            items.append(f"<li>{escape(step.description)}</li>")
    return "<ol>" + "".join(items) + "</ol>"


def forms_html(solution) -> str:
    """Standard and slope form lines shown under an input box."""
    if solution.status == "empty":
        return ""
    if solution.status == "invalid":
        return escape(solution.error or "")
    return f"{_math(solution.standard_form)}<br>{_math(solution.slope_form)}"


def equation_block(solution) -> str:
    block = f"<div class='solution-block'><h3>Equation {solution.index}</h3>"
    block += f"<p>Standard form: {_math(solution.standard_form)}</p>"
    block += f"<p>Slope form: {_math(solution.slope_form)}</p>"

    if solution.x_intercept_steps:
        block += "<p><strong>x-intercept</strong></p>"
        block += _steps_html(solution.x_intercept_steps)
    else:
        block += "<p>No x-intercept</p>"

    if solution.y_intercept_steps:
        block += "<p><strong>y-intercept</strong></p>"
        block += _steps_html(solution.y_intercept_steps)
    else:
        block += "<p>No y-intercept</p>"

    return block + "</div>"


def intersection_block(intersection) -> str:
    if intersection.status != "ok":
        return f"<p>{escape(intersection.message)}</p>"
    block = "<div class='solution-block'><h3>Intersection</h3>"
    block += _steps_html(intersection.steps)
    return block + "</div>"


def solution_html(result: PlotResult) -> str:
    """All solution blocks for *result*, in display order."""
    html = "".join(equation_block(sol) for sol in result.valid_equations)
    if result.intersection is not None:
        html += intersection_block(result.intersection)
    return html
