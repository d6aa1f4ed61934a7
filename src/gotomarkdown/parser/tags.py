"""Detect media references inside comment lines.

Two tags are recognized:

- Markdown images: ``![alt](path)`` and ``![alt](path "title")``. The path may
  contain spaces. A backslash or backtick right before the ``!`` escapes the
  tag.
- Hype animations: ``HYPE[description](path/to/Export.html)``. The export's
  embed snippet replaces the comment line, and the export's resources
  directory (``Export.hyperesources``) is collected as media.

Only the first tag of each kind on a line is used. Both extractors are pure
functions and never touch classifier state.
"""

from __future__ import annotations

import os
import re
from pathlib import Path, PurePosixPath, PureWindowsPath

from ..errors import MalformedTagError
from ..model.content import AnimationTag
from .snippet import load_snippet

IMAGE_PATTERN = r"(?<![\\`])!\[[^\]]*\]\((?P<path>[^\")]*)(?:\"[^\"]*\")?\s*\)"
ANIMATION_PATTERN = r"HYPE\[[^\]]*\]\((?P<path>[^)]*)\)"
RESOURCES_SUFFIX = ".hyperesources"

_IMAGE_RE = re.compile(IMAGE_PATTERN)
_ANIMATION_RE = re.compile(ANIMATION_PATTERN)
_REMOTE_PREFIXES = ("http://", "https://", "data:")


def _checked_path(line: str, raw: str) -> str:
    path = raw.strip()
    if not path:
        raise MalformedTagError(line, "missing path")
    if PurePosixPath(path).is_absolute() or PureWindowsPath(path).is_absolute():
        raise MalformedTagError(line, f"absolute path {path!r}")
    if ".." in PurePosixPath(path.replace("\\", "/")).parts:
        raise MalformedTagError(line, f"path leaves the source tree {path!r}")
    return path


def extract_image_path(line: str) -> str | None:
    """Return the local path of the first image tag in ``line``, if any.

    Remote images (http, https, data URIs) are not media to copy and yield
    None.

    Raises:
        MalformedTagError: If the tag path is empty or points outside the source tree
    """

    m = _IMAGE_RE.search(line)
    if m is None:
        return None
    raw = m.group("path").strip()
    if raw.startswith(_REMOTE_PREFIXES):
        return None
    return _checked_path(line, raw)


def resources_dir_for(path: str) -> str:
    """Map ``anim/Intro.html`` to ``anim/Intro.hyperesources``."""

    root, _ext = os.path.splitext(path)
    return root + RESOURCES_SUFFIX


def extract_animation(line: str, base_dir: Path | str = ".") -> AnimationTag | None:
    """Load the snippet for the first HYPE tag in ``line``, if any.

    The export path is resolved against ``base_dir``; the returned
    resources directory stays relative.

    Raises:
        MalformedTagError: If the tag path is empty or points outside the source tree
        SnippetLoadError: If the export file cannot be read
    """

    m = _ANIMATION_RE.search(line)
    if m is None:
        return None
    path = _checked_path(line, m.group("path"))
    snippet = load_snippet(Path(base_dir) / path)
    return AnimationTag(snippet=snippet, resources_dir=resources_dir_for(path))


__all__ = [
    "ANIMATION_PATTERN",
    "IMAGE_PATTERN",
    "RESOURCES_SUFFIX",
    "extract_animation",
    "extract_image_path",
    "resources_dir_for",
]
