import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


HYPE_EXPORT = (
    "<!DOCTYPE html>\r\n"
    "<html>\r\n"
    "<body>\r\n"
    "\t<!-- copy these lines to your document: -->\r\n"
    '\t<div id="intro_hype_container" style="width:600px">\t\t\r\n'
    '\t\t<script src="Intro.hyperesources/intro_hype_generated_script.js"></script>\r\n'
    "\t</div>\r\n"
    "\t<!-- end copy -->\r\n"
    "</body>\r\n"
    "</html>\r\n"
)


@pytest.fixture
def hype_export(tmp_path: Path) -> Path:
    """A Hype HTML export named Intro.html with its resources directory."""
    export = tmp_path / "Intro.html"
    export.write_text(HYPE_EXPORT, encoding="utf-8")
    resources = tmp_path / "Intro.hyperesources"
    resources.mkdir()
    (resources / "intro_hype_generated_script.js").write_text("// generated\n", encoding="utf-8")
    return export


@pytest.fixture
def isolate_logging():
    """Isolate logging configuration between tests.

    The CLI reconfigures the root logger on every run; restore the original
    handlers so later tests do not write to streams CliRunner already closed.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    logging.root.handlers.clear()
    logging.root.addHandler(logging.NullHandler())

    yield

    logging.root.handlers.clear()
    logging.root.handlers.extend(original_handlers)
    logging.root.setLevel(original_level)
