import logging
import re
import sys

import pytest

import main as entry
from linegraph.logging_config import StructuredFormatter, get_logger, setup_logging

LINE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)? \[(\w+)\] ([\w.]+): (.*)$")


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("linegraph")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)


def test_formatter_layout() -> None:
    record = logging.LogRecord("linegraph.parser", logging.INFO, __file__, 1, "took %d ms", (3,), None)
    m = LINE.match(StructuredFormatter().format(record))
    assert m is not None
    assert m.group(2, 3, 4) == ("INFO", "linegraph.parser", "took 3 ms")


def test_formatter_appends_traceback() -> None:
    try:
        raise ValueError("bad coefficient")
    except ValueError:
        record = logging.LogRecord("linegraph", logging.ERROR, __file__, 1, "failed", (), None)
        record.exc_info = sys.exc_info()
    lines = StructuredFormatter().format(record).splitlines()
    assert lines[0].endswith("[ERROR] linegraph: failed")
    assert lines[-1] == "ValueError: bad coefficient"


def test_setup_logging_filters_by_level(tmp_path) -> None:
    log_file = tmp_path / "app.log"
    setup_logging("info", str(log_file))
    log = get_logger("test")
    log.debug("hidden")
    log.info("shown")
    lines = log_file.read_text().splitlines()
    assert len(lines) == 1
    assert LINE.match(lines[0]).group(2, 3, 4) == ("INFO", "linegraph.test", "shown")


def test_unknown_level_falls_back_to_warning() -> None:
    assert setup_logging("chatty").level == logging.WARNING


def test_cli_log_level_and_file(tmp_path, capsys) -> None:
    log_file = tmp_path / "cli.log"
    code = entry.main(["x + y = 3", "x - y = 1", "--log-level", "INFO", "--log-file", str(log_file)])
    capsys.readouterr()
    assert code == 0
    parsed = [LINE.match(line) for line in log_file.read_text().splitlines()]
    assert all(parsed)
    solved = [m for m in parsed if m.group(3) == "linegraph.engine"]
    assert solved and solved[-1].group(2) == "INFO"
    assert solved[-1].group(4).startswith("Solved 2 of 2 equation(s), intersection=ok")


def test_cli_default_level_keeps_info_out(tmp_path, capsys) -> None:
    log_file = tmp_path / "quiet.log"
    entry.main(["x + y = 3", "--log-level", "WARNING", "--log-file", str(log_file)])
    capsys.readouterr()
    assert log_file.read_text() == ""
