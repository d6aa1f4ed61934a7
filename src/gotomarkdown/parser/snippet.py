"""Load the embeddable markup from a Tumult Hype HTML export.

Hype writes a demo page around the embed code and marks the part meant for
copying with two HTML comments. Only the first marked region is used.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import SnippetLoadError

logger = logging.getLogger(__name__)

COPY_START_MARKER = "<!-- copy these lines to your document: -->"
COPY_END_MARKER = "<!-- end copy -->"


def load_snippet(path: Path | str) -> str:
    """Return the lines between the copy markers of ``path``.

    Each copied line is stripped of trailing tabs and terminated with a
    newline; a blank line is appended after the snippet.

    Raises:
        SnippetLoadError: If the file cannot be read
    """

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SnippetLoadError(path, exc) from exc

    text = text.replace("\r", "")
    copying = False
    found = False
    lines: list[str] = []
    for line in text.split("\n"):
        if COPY_START_MARKER in line:
            copying = True
            found = True
            continue
        if copying and COPY_END_MARKER in line:
            break
        if copying:
            lines.append(line.rstrip("\t") + "\n")

    if not found:
        logger.warning("No copy region found in %s", path)
    return "".join(lines) + "\n"


__all__ = ["COPY_END_MARKER", "COPY_START_MARKER", "load_snippet"]
