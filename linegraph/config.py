"""Centralized configuration for LineGraph.

This module defines:
- Numeric tolerances used by the solver and the fraction formatter
- Output formatting options
- Viewport padding for the plot adapters
- Logging defaults

Every value can be overridden via environment variables prefixed with
LINEGRAPH_ (e.g. ``LINEGRAPH_DETERMINANT_TOLERANCE=1e-10``).
"""

import os

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("linegraph")
except Exception:
    VERSION = "1.0.0"

# Solver tolerances
DETERMINANT_TOLERANCE = float(
    os.getenv("LINEGRAPH_DETERMINANT_TOLERANCE", "1e-8")
)  # |a1*b2 - a2*b1| at or below this means no unique intersection
FRACTION_TOLERANCE = float(
    os.getenv("LINEGRAPH_FRACTION_TOLERANCE", "1e-9")
)  # relative error accepted by the continued-fraction approximation
MAX_FRACTION_TERMS = int(os.getenv("LINEGRAPH_MAX_FRACTION_TERMS", "64"))

# Output formatting
DECIMAL_PLACES = int(os.getenv("LINEGRAPH_DECIMAL_PLACES", "2"))
NOT_AVAILABLE = "N/A"

# Plotting
VIEWPORT_PADDING = float(
    os.getenv("LINEGRAPH_VIEWPORT_PADDING", "0.2")
)  # fraction of the data range added on each side
DEFAULT_THEME = os.getenv("LINEGRAPH_DEFAULT_THEME", "dark")  # "dark" or "light"

# Logging
LOG_LEVEL = os.getenv("LINEGRAPH_LOG_LEVEL", "WARNING")

# User-facing messages
INVALID_EQUATION_MESSAGE = "Invalid equation"
NO_INTERSECTION_MESSAGE = "No unique intersection"
