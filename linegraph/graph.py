"""
Graph builder for LineGraph.

Turns the plot directives of a :class:`PlotResult` into a themed matplotlib
Figure.  Lines are drawn across the viewport the solver computed, intercepts
are small dots in their line's colour and the intersection is a larger dot.

Uses the object-oriented ``Figure`` API only, and each figure resolves its
own palette, so concurrent requests never share drawing state.
"""

import numpy as np
from matplotlib.figure import Figure

from linegraph import config

# ── palette ────────────────────────────────────────────────────────────────
_DARK_GRAPH = dict(
    C_BG    = "#0f0f0f",
    C_AX    = "#181818",
    C_GRID  = "#252525",
    C_TICK  = "#666666",
    C_SPINE = "#333333",
    C_LEGEND = "#1e1e1e",
    C_TEXT  = "#cccccc",
)

_LIGHT_GRAPH = dict(
    C_BG    = "#ffffff",
    C_AX    = "#f7f9fc",
    C_GRID  = "#dde3ea",
    C_TICK  = "#555555",
    C_SPINE = "#b0b8c4",
    C_LEGEND = "#ffffff",
    C_TEXT  = "#222222",
)

C_LINES  = ("#1a8cff", "#ff8c42")   # Eq1, Eq2
C_DOT    = "#4caf50"                # intersection


def palette_for(theme) -> dict:
    """Colour dict for "dark" or "light"; anything else falls back to dark."""
    return _LIGHT_GRAPH if theme == "light" else _DARK_GRAPH


def _style_axes(ax, fig, palette=_DARK_GRAPH):
    fig.patch.set_facecolor(palette["C_BG"])
    ax.set_facecolor(palette["C_AX"])
    ax.tick_params(colors=palette["C_TICK"], labelsize=9)
    ax.xaxis.label.set_color(palette["C_TEXT"])
    ax.yaxis.label.set_color(palette["C_TEXT"])
    ax.title.set_color(palette["C_TEXT"])
    for spine in ax.spines.values():
        spine.set_edgecolor(palette["C_SPINE"])
    ax.grid(True, color=palette["C_GRID"], linewidth=0.8, linestyle="--", alpha=0.7)
    ax.axhline(0, color=palette["C_SPINE"], linewidth=0.8)
    ax.axvline(0, color=palette["C_SPINE"], linewidth=0.8)


def _text_figure(title: str, message: str, palette=_DARK_GRAPH) -> Figure:
    """A blank figure carrying only a message, for results with nothing to draw."""
    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig, palette)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title, color=palette["C_TEXT"], fontsize=10)
    ax.text(0.5, 0.5, message, ha="center", va="center",
            color=palette["C_TEXT"], fontsize=10, transform=ax.transAxes)
    return fig


def _colour_for(name: str) -> str:
    if name == "Intersection":
        return C_DOT
    if name.startswith("Eq2"):
        return C_LINES[1]
    return C_LINES[0]


def build_figure(result, theme: str = None):
    """
    Build and return a matplotlib Figure for *result* (a ``PlotResult``).
    With no valid equation the figure only carries a message.
    """
    palette = palette_for(theme or config.DEFAULT_THEME)
    text_colour = palette["C_TEXT"]

    if not result.directives:
        return _text_figure("Nothing to plot", "Enter at least one valid equation.", palette)

    labels = {sol.index: sol.standard_form for sol in result.valid_equations}

    fig = Figure(figsize=(7, 3.8), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig, palette)

    for d in result.directives:
        colour = _colour_for(d.name)
        xs = np.asarray(d.xs, dtype=float)
        ys = np.asarray(d.ys, dtype=float)
        if d.kind == "line":
            index = int(d.name[2:]) if d.name[2:].isdigit() else None
            ax.plot(xs, ys, color=colour, linewidth=2,
                    label=labels.get(index, d.name))
        elif d.name == "Intersection":
            size = (d.size or 10) ** 2
            ax.scatter(xs, ys, color=colour, s=size, zorder=5,
                       label=f"Intersection: ({xs[0]:g}, {ys[0]:g})")
        else:
            ax.scatter(xs, ys, color=colour, s=30, zorder=4)

    vp = result.viewport
    ax.set_xlim(vp.x_min, vp.x_max)
    ax.set_ylim(vp.y_min, vp.y_max)
    ax.set_xlabel("x", color=text_colour)
    ax.set_ylabel("y", color=text_colour)

    inter = result.intersection
    if inter is not None and inter.status == "none":
        ax.set_title("No unique intersection — parallel or identical lines",
                     color=text_colour, fontsize=9)
    elif inter is not None and inter.point is not None:
        ax.set_title(f"Lines intersect at ({inter.point.x:g}, {inter.point.y:g})",
                     color=text_colour, fontsize=9)

    ax.legend(fontsize=8, facecolor=palette["C_LEGEND"],
              edgecolor=palette["C_SPINE"], labelcolor=text_colour)
    fig.tight_layout(pad=1.2)
    return fig
