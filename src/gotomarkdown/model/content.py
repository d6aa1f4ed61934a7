"""Data structures shared by the classifier, converter and file pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LineKind(Enum):
    """Classification of a single source line."""

    DIRECTIVE = "directive"  # build-tool instruction, dropped from output
    COMMENT = "comment"
    CODE = "code"


@dataclass(slots=True)
class ScanState:
    # True while inside a /* ... */ region
    in_block_comment: bool = False


@dataclass(slots=True)
class AnimationTag:
    # Markup copied from the export's marked region
    snippet: str
    # Resources directory that has to travel with the snippet
    resources_dir: str


@dataclass(slots=True)
class ConversionResult:
    output_text: str = ""
    media_paths: set[str] = field(default_factory=set)

    def sorted_media(self) -> list[str]:
        return sorted(self.media_paths)


__all__ = [
    "AnimationTag",
    "ConversionResult",
    "LineKind",
    "ScanState",
]
