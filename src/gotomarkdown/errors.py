"""Exception types raised while converting source files to Markdown.

Every error carries the path or line it is about as an attribute and builds
its own message from those attributes, so the CLI can log ``str(exc)`` and
exit. Underlying exceptions are kept in ``cause`` and chained with
``raise ... from``.
"""

from __future__ import annotations

from pathlib import Path


class GoToMarkdownError(Exception):
    """Base class for all conversion failures."""


class ReadError(GoToMarkdownError):
    """A source file could not be read."""

    what = "file"

    def __init__(self, path: Path | str, cause: Exception | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        msg = f"Cannot read {self.what} {self.path}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)


class SnippetLoadError(ReadError):
    """An animation export referenced by a HYPE tag could not be read."""

    what = "animation snippet"


class MalformedTagError(GoToMarkdownError):
    """An image or animation tag is present but its path cannot be used."""

    def __init__(self, line: str, reason: str = "missing path") -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed tag ({reason}) in line: {line!r}")


class ConversionError(GoToMarkdownError):
    """Wraps a tag or snippet failure with the line it occurred on."""

    def __init__(self, line_no: int, line: str, cause: Exception) -> None:
        self.line_no = line_no
        self.line = line
        self.cause = cause
        super().__init__(f"Line {line_no}: {line!r}: {cause}")


class DirectoryCreateError(GoToMarkdownError):
    def __init__(self, path: Path | str, cause: Exception | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        msg = f"Cannot create path: {self.path}"
        if cause is not None:
            msg += f" - Error: {cause}"
        super().__init__(msg)


class WriteError(GoToMarkdownError):
    def __init__(self, path: Path | str, cause: Exception | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        msg = f"Cannot write file {self.path}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)


class CopyError(GoToMarkdownError):
    """Copying a media file or directory into the output directory failed."""

    def __init__(self, path: str, dest: Path | str, cause: Exception | None = None) -> None:
        self.path = path
        self.dest = Path(dest)
        self.cause = cause
        msg = f"Cannot copy {path} to {self.dest}"
        if cause is not None:
            msg += f"\n{cause}"
        super().__init__(msg)


__all__ = [
    "ConversionError",
    "CopyError",
    "DirectoryCreateError",
    "GoToMarkdownError",
    "MalformedTagError",
    "ReadError",
    "SnippetLoadError",
    "WriteError",
]
