import main as entry


def test_main_prints_report(capsys) -> None:
    code = entry.main(["x + y = 3", "x - y = 1", "--log-level", "ERROR"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Equation 1: x + y = 3" in out
    assert "Standard form: 1x + 1y = 3" in out
    assert "Intersection point: (2, 1)" in out


def test_main_reports_invalid_and_fails_without_valid_equation(capsys) -> None:
    code = entry.main(["x + y", "--log-level", "ERROR"])
    out = capsys.readouterr().out
    assert code == 1
    assert "Invalid equation" in out


def test_main_saves_plot(tmp_path, capsys) -> None:
    target = tmp_path / "plot.png"
    code = entry.main(["y = 0.5x + 3", "--save", str(target), "--log-level", "ERROR"])
    assert code == 0
    assert target.exists() and target.stat().st_size > 0
    assert "Plot saved to" in capsys.readouterr().out


def test_format_report_parallel() -> None:
    from linegraph import solve

    text = entry.format_report(solve("x + y = 1", "x + y = 2"))
    assert "No unique intersection" in text
