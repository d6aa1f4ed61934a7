from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from gotomarkdown.logging_setup import CleanFormatter, log_conversion_summary, setup_logging
from gotomarkdown.ui.progress import ProgressReporter


def _record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord("gotomarkdown", level, __file__, 1, msg, None, None)


def test_clean_formatter_levels() -> None:
    fmt = CleanFormatter()
    assert fmt.format(_record(logging.INFO, "Converting a.go")) == "Converting a.go"
    assert fmt.format(_record(logging.DEBUG, "detail")) == "debug: detail"
    assert fmt.format(_record(logging.ERROR, "boom")) == "ERROR: boom"


@pytest.mark.usefixtures("isolate_logging")
def test_setup_logging_sets_level() -> None:
    setup_logging(verbose=True)
    assert logging.root.level == logging.DEBUG
    setup_logging(verbose=False)
    assert logging.root.level == logging.INFO
    assert isinstance(logging.root.handlers[0].formatter, CleanFormatter)


@pytest.mark.usefixtures("isolate_logging")
def test_setup_logging_uses_shared_rich_console() -> None:
    buf = io.StringIO()
    console = Console(file=buf, width=120)
    handler = setup_logging(console=console)

    assert isinstance(handler, RichHandler)
    assert handler.console is console
    assert logging.root.handlers == [handler]

    with ProgressReporter(console=console) as pr:
        pr.emit("files:start", {"count": 1})
        logging.getLogger("gotomarkdown.cli").info("Converting a.go")
        logging.getLogger("gotomarkdown.cli").warning("careful")
    out = buf.getvalue()
    assert "Converting a.go" in out
    assert "WARNING: careful" in out


def test_log_conversion_summary(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="gotomarkdown"):
        log_conversion_summary("a.go", ["a.png", "b.png"], copied=False)
        log_conversion_summary("c.go", [], copied=True)
    assert "a.go: 2 media reference(s), not copying (--nocopy)" in caplog.text
    assert caplog.text.index("media: a.png") < caplog.text.index("media: b.png")
    assert "c.go: no media referenced" in caplog.text
