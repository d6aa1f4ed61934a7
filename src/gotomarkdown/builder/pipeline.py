from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable, Iterable
from contextlib import suppress
from pathlib import Path
from tempfile import NamedTemporaryFile

from ..errors import CopyError, DirectoryCreateError, ReadError, WriteError
from ..model.content import ConversionResult
from ..model.options import ConvertOptions
from ..parser.converter import convert

logger = logging.getLogger(__name__)

OUT_DIR_MODE = 0o755  # rwxr-xr-x
MARKDOWN_SUFFIX = ".md"

ProgressCallback = Callable[[str, dict[str, int | str]], None] | None


def _safe_emit(on_progress: ProgressCallback, event: str, payload: dict[str, int | str]) -> None:
    if on_progress is None:
        return
    with suppress(Exception):
        on_progress(event, payload)


def output_path_for(source: Path, out_dir: Path) -> Path:
    """``src/name.go`` -> ``<out_dir>/name.md`` (extension replaced)."""

    return out_dir / (source.stem + MARKDOWN_SUFFIX)


def ensure_out_dir(out_dir: Path) -> None:
    try:
        out_dir.mkdir(mode=OUT_DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(out_dir, exc) from exc


def write_text(path: Path, data: str) -> None:
    """Write ``data`` to a temp file next to ``path`` and move it into place."""

    try:
        with NamedTemporaryFile(
            "w", encoding="utf-8", dir=str(path.parent), delete=False, newline=""
        ) as tmp:
            tmp.write(data)
            tmp_path = Path(tmp.name)
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except OSError as exc:
        raise WriteError(path, exc) from exc


def convert_file(source: Path, options: ConvertOptions) -> ConversionResult:
    """Read ``source``, convert it and write ``<out_dir>/<stem>.md``.

    Returns the conversion result so the caller can copy the media it lists.

    Raises:
        ReadError: If the source cannot be read
        ConversionError: If a tag in the source is unusable
        DirectoryCreateError: If the output directory cannot be created
        WriteError: If the Markdown file cannot be written
    """

    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(source, exc) from exc

    result = convert(text, options)
    ensure_out_dir(options.out_dir)
    out_path = output_path_for(source, options.out_dir)
    write_text(out_path, result.output_text)
    logger.info("Wrote %s (%d media reference(s))", out_path, len(result.media_paths))
    return result


def copy_media(
    paths: Iterable[str],
    options: ConvertOptions,
    on_progress: ProgressCallback = None,
) -> int:
    """Copy each media file or directory to ``<out_dir>/<same relative path>``.

    Paths are copied in the given order, duplicates once. Directories are
    copied recursively and merged into existing ones.
    Returns the number of copied entries.

    Raises:
        CopyError: On the first path that cannot be copied
    """

    count = 0
    for rel in dict.fromkeys(paths):
        src = options.base_dir / rel
        dest = options.out_dir / rel
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            if src.is_dir():
                shutil.copytree(src, dest, dirs_exist_ok=True)
            else:
                shutil.copy2(src, dest)
        except (OSError, shutil.Error) as exc:
            raise CopyError(rel, dest, exc) from exc
        logger.debug("Copied %s -> %s", src, dest)
        count += 1
        _safe_emit(on_progress, "media:copied", {"path": rel})
    return count


__all__ = [
    "MARKDOWN_SUFFIX",
    "OUT_DIR_MODE",
    "convert_file",
    "copy_media",
    "ensure_out_dir",
    "output_path_for",
    "write_text",
]
