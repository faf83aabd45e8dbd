"""
LineGraph — Entry point.

Solve up to two linear equations from the command line, print the
step-by-step derivations and optionally save the plot as an image.

    python main.py "x + y = 3" "x - y = 1" --save plot.png
"""

import argparse
import sys
from io import StringIO

from linegraph import config, solve
from linegraph.logging_config import setup_logging


def _print_steps(steps, out) -> None:
    for n, step in enumerate(steps, start=1):
        if step.expression:
            print(f"  {n}. {step.description}: {step.expression}", file=out)
        else:
            print(f"  {n}. {step.description}", file=out)


def format_report(result) -> str:
    """Plain-text rendering of every solution block in *result*."""
    out = StringIO()
    for sol in result.equations:
        if sol.status == "empty":
            continue
        print(f"Equation {sol.index}: {sol.raw.strip()}", file=out)
        if sol.status == "invalid":
            print(f"  {sol.error}", file=out)
            continue
        print(f"  Standard form: {sol.standard_form}", file=out)
        print(f"  Slope form: {sol.slope_form}", file=out)
        if sol.x_intercept_steps:
            print("  x-intercept", file=out)
            _print_steps(sol.x_intercept_steps, out)
        else:
            print("  No x-intercept", file=out)
        if sol.y_intercept_steps:
            print("  y-intercept", file=out)
            _print_steps(sol.y_intercept_steps, out)
        else:
            print("  No y-intercept", file=out)

    inter = result.intersection
    if inter is not None:
        print("Intersection", file=out)
        if inter.status == "ok":
            _print_steps(inter.steps, out)
        else:
            print(f"  {inter.message}", file=out)
    return out.getvalue()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linegraph",
        description="Solve and plot up to two linear equations.",
    )
    parser.add_argument("equation1", help='First equation, e.g. "3x - 1/4y = -5"')
    parser.add_argument("equation2", nargs="?", default="", help="Optional second equation")
    parser.add_argument("--save", type=str, help="Write the plot to this image file")
    parser.add_argument(
        "--theme", choices=("dark", "light"), default=config.DEFAULT_THEME,
        help="Plot colour theme",
    )
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL, help="Logging level")
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    result = solve(args.equation1, args.equation2)
    sys.stdout.write(format_report(result))

    if not result.valid_equations:
        return 1

    if args.save:
        from linegraph.graph import build_figure

        fig = build_figure(result, args.theme)
        fig.savefig(args.save, facecolor=fig.get_facecolor())
        print(f"Plot saved to {args.save}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
