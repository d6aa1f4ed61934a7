"""Conversion options for gotomarkdown.

One ``ConvertOptions`` value is built by the CLI and passed explicitly to the
converter and the file pipeline. Nothing reads configuration from module
globals, so several documents can be converted side by side.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_OUT_DIR = Path("out")
DEFAULT_LANG = "go"


@dataclass(frozen=True)
class ConvertOptions:
    """Settings for one gotomarkdown run.

    Defaults match running the command with no flags.
    """

    # Destination for generated Markdown and copied media
    out_dir: Path = DEFAULT_OUT_DIR

    # Copy collected media into out_dir (--nocopy turns this off)
    copy_media: bool = True

    # Language tag written after opening code fences
    lang: str = DEFAULT_LANG

    # Directory that relative media and snippet paths are resolved against
    base_dir: Path = field(default_factory=lambda: Path("."))

    @classmethod
    def from_cli(
        cls,
        *,
        outdir: str | Path = DEFAULT_OUT_DIR,
        nocopy: bool = False,
        lang: str = DEFAULT_LANG,
        base_dir: str | Path = ".",
    ) -> ConvertOptions:
        """Build ConvertOptions from CLI argument values.

        Raises:
            ValueError: If the language tag is empty or contains whitespace
        """
        lang = (lang or "").strip()
        if not lang or any(ch.isspace() for ch in lang):
            raise ValueError(f"Invalid language tag '{lang}'. Use a single word such as 'go'.")
        if not str(outdir).strip():
            raise ValueError("Output directory must not be empty")

        return cls(
            out_dir=Path(outdir),
            copy_media=not nocopy,
            lang=lang,
            base_dir=Path(base_dir),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "out_dir": str(self.out_dir),
            "copy_media": self.copy_media,
            "lang": self.lang,
            "base_dir": str(self.base_dir),
        }


__all__ = ["ConvertOptions", "DEFAULT_LANG", "DEFAULT_OUT_DIR"]
