from matplotlib.colors import to_rgba
from matplotlib.figure import Figure

from linegraph import graph, solve


def test_palette_text_figure_and_style_axes() -> None:
    assert graph.palette_for("light") is graph._LIGHT_GRAPH
    assert graph.palette_for("dark") is graph._DARK_GRAPH
    assert graph.palette_for("neon") is graph._DARK_GRAPH

    fig = Figure(figsize=(4, 2))
    ax = fig.add_subplot(111)
    graph._style_axes(ax, fig, graph._LIGHT_GRAPH)
    assert ax.get_xlabel() == ""
    assert fig.get_facecolor() == to_rgba(graph._LIGHT_GRAPH["C_BG"])

    txt_fig = graph._text_figure("Title", "Message")
    assert isinstance(txt_fig, Figure)


def test_build_figure_two_lines() -> None:
    result = solve("x + y = 3", "x - y = 1")
    fig = graph.build_figure(result, "dark")
    assert isinstance(fig, Figure)

    ax = fig.get_axes()[0]
    assert len(ax.get_lines()) >= 2
    assert ax.get_xlim() == (result.viewport.x_min, result.viewport.x_max)
    assert ax.get_ylim() == (result.viewport.y_min, result.viewport.y_max)
    assert "(2, 1)" in ax.get_title()
    labels = [t.get_text() for t in ax.get_legend().get_texts()]
    assert "1x + 1y = 3" in labels


def test_build_figure_vertical_and_parallel() -> None:
    fig = graph.build_figure(solve("x = 2", "x = 5"), "light")
    ax = fig.get_axes()[0]
    assert "No unique intersection" in ax.get_title()


def test_build_figure_nothing_to_plot() -> None:
    fig = graph.build_figure(solve("", "nonsense"))
    assert isinstance(fig, Figure)
    assert fig.get_axes()[0].get_title() == "Nothing to plot"


def test_themes_do_not_leak_between_figures() -> None:
    result = solve("x + y = 3", "x - y = 1")
    dark = graph.build_figure(result, "dark")
    light = graph.build_figure(result, "light")
    dark_again = graph.build_figure(result, "dark")

    assert dark.get_facecolor() == to_rgba(graph._DARK_GRAPH["C_BG"])
    assert light.get_facecolor() == to_rgba(graph._LIGHT_GRAPH["C_BG"])
    assert dark_again.get_facecolor() == dark.get_facecolor()
    assert dark.get_axes()[0].get_facecolor() == to_rgba(graph._DARK_GRAPH["C_AX"])


def test_interleaved_builds_keep_their_own_theme(monkeypatch) -> None:
    # Build a light figure while a dark one is half-way through styling.
    result = solve("y = 2x + 1")
    original = graph._style_axes
    interleaved = []

    def _style_and_interleave(ax, fig, palette=graph._DARK_GRAPH):
        original(ax, fig, palette)
        if not interleaved:
            interleaved.append(True)
            interleaved.append(graph.build_figure(result, "light"))

    monkeypatch.setattr(graph, "_style_axes", _style_and_interleave)
    fig = graph.build_figure(result, "dark")

    assert interleaved[1].get_facecolor() == to_rgba(graph._LIGHT_GRAPH["C_BG"])
    assert fig.get_facecolor() == to_rgba(graph._DARK_GRAPH["C_BG"])
    legend = fig.get_axes()[0].get_legend()
    assert legend.get_frame().get_facecolor()[:3] == to_rgba(graph._DARK_GRAPH["C_LEGEND"])[:3]
    assert fig.get_axes()[0].xaxis.label.get_color() == graph._DARK_GRAPH["C_TEXT"]
