from __future__ import annotations

__all__ = [
    "LineClassifier",
    "convert",
    "extract_animation",
    "extract_image_path",
    "is_directive",
    "load_snippet",
    "resources_dir_for",
    "strip_comment_delimiters",
]

# Re-export primary functions from submodules (explicit alias)
from .classifier import LineClassifier as LineClassifier
from .classifier import is_directive as is_directive
from .converter import convert as convert
from .converter import strip_comment_delimiters as strip_comment_delimiters
from .snippet import load_snippet as load_snippet
from .tags import extract_animation as extract_animation
from .tags import extract_image_path as extract_image_path
from .tags import resources_dir_for as resources_dir_for
