"""Convert commented source text into a Markdown document.

Comment lines become prose with their delimiters removed; runs of code lines
become fenced code blocks. A blank line right after a comment does not open a
code block on its own, so two comment blocks separated by an empty line read
as consecutive paragraphs instead of being split by an empty fence.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from ..errors import ConversionError, GoToMarkdownError
from ..model.content import ConversionResult, LineKind
from ..model.options import ConvertOptions
from .classifier import (
    COMMENT_END_PATTERN,
    COMMENT_PATTERN,
    COMMENT_START_PATTERN,
    LineClassifier,
)
from .tags import extract_animation, extract_image_path

logger = logging.getLogger(__name__)

FENCE = "```"

_ALL_COMMENT_DELIMS_RE = re.compile(
    "|".join((COMMENT_PATTERN, COMMENT_START_PATTERN, COMMENT_END_PATTERN))
)


class _Segment(Enum):
    NEITHER = 0
    COMMENT = 1
    CODE = 2


def strip_comment_delimiters(line: str) -> str:
    """Remove ``//``, ``/*`` and ``*/`` delimiters (and one adjacent space)."""

    return _ALL_COMMENT_DELIMS_RE.sub("", line)


def convert(source_text: str, options: ConvertOptions | None = None) -> ConversionResult:
    """Convert ``source_text`` line by line into Markdown.

    Returns the document text together with the set of media paths referenced
    from comments. Image tags stay in the prose; HYPE tags are replaced by the
    embed snippet of their export.

    Fences open only on a non-empty code line, so empty or blank-only input
    yields its blank lines with no fence pair.

    Raises:
        ConversionError: If a tag is malformed or a snippet cannot be loaded
    """

    opts = options or ConvertOptions()
    classifier = LineClassifier()
    out: list[str] = []
    media: set[str] = set()
    last = _Segment.NEITHER

    lines = source_text.replace("\r", "").split("\n")
    for line_no, line in enumerate(lines, start=1):
        kind = classifier.classify(line)
        if kind is LineKind.DIRECTIVE:
            continue

        if kind is LineKind.COMMENT:
            if last is _Segment.CODE:
                out.append(FENCE + "\n")
            last = _Segment.COMMENT
            try:
                image = extract_image_path(line)
                animation = extract_animation(line, opts.base_dir)
            except GoToMarkdownError as exc:
                raise ConversionError(line_no, line, exc) from exc
            if image is not None:
                logger.debug("Line %d: image %s", line_no, image)
                media.add(image)
            if animation is not None:
                logger.debug("Line %d: animation resources %s", line_no, animation.resources_dir)
                out.append(animation.snippet)
                media.add(animation.resources_dir)
            else:
                out.append(strip_comment_delimiters(line) + "\n")
            continue

        if last is not _Segment.CODE and line != "":
            out.append(f"{FENCE}{opts.lang}\n")
            last = _Segment.CODE
        out.append(line + "\n")

    if last is _Segment.CODE:
        out.append(FENCE + "\n")

    return ConversionResult(output_text="".join(out), media_paths=media)


__all__ = ["FENCE", "convert", "strip_comment_delimiters"]
