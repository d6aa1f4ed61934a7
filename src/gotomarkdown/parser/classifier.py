from __future__ import annotations

import re

from ..model.content import LineKind, ScanState

COMMENT_PATTERN = r"^\s*//\s?"
COMMENT_START_PATTERN = r"^\s*/\*\s?"
COMMENT_END_PATTERN = r"\s?\*/\s*$"
DIRECTIVE_PATTERN = r"^//go:"

_COMMENT_RE = re.compile(COMMENT_PATTERN)
_COMMENT_START_RE = re.compile(COMMENT_START_PATTERN)
_COMMENT_END_RE = re.compile(COMMENT_END_PATTERN)
_DIRECTIVE_RE = re.compile(DIRECTIVE_PATTERN)


def is_directive(line: str) -> bool:
    """Return True for build-tool directives like ``//go:generate``.

    The comment token must start the line; indented directives are ordinary
    comments.
    """

    return _DIRECTIVE_RE.match(line) is not None


class LineClassifier:
    """Decide per line whether it is a directive, comment or code.

    The classifier remembers whether it is inside a ``/* ... */`` region, so
    one instance must see the lines of one document in order. Build a new
    instance for every document.
    """

    def __init__(self, state: ScanState | None = None) -> None:
        self.state = state if state is not None else ScanState()

    def classify(self, line: str) -> LineKind:
        if is_directive(line):
            return LineKind.DIRECTIVE
        if _COMMENT_RE.search(line):
            return LineKind.COMMENT
        # Opener wins over closer, so "/* x */" leaves the block open.
        if _COMMENT_START_RE.search(line):
            self.state.in_block_comment = True
            return LineKind.COMMENT
        if _COMMENT_END_RE.search(line):
            self.state.in_block_comment = False
            return LineKind.COMMENT
        if self.state.in_block_comment:
            return LineKind.COMMENT
        return LineKind.CODE


__all__ = [
    "COMMENT_END_PATTERN",
    "COMMENT_PATTERN",
    "COMMENT_START_PATTERN",
    "DIRECTIVE_PATTERN",
    "LineClassifier",
    "is_directive",
]
