from __future__ import annotations

from pathlib import Path

import pytest

from gotomarkdown.model.options import ConvertOptions


def test_defaults() -> None:
    opts = ConvertOptions()
    assert opts.out_dir == Path("out")
    assert opts.copy_media is True
    assert opts.lang == "go"
    assert opts.base_dir == Path(".")


def test_from_cli_maps_flags() -> None:
    opts = ConvertOptions.from_cli(outdir="docs", nocopy=True, lang=" rust ")
    assert opts.out_dir == Path("docs")
    assert opts.copy_media is False
    assert opts.lang == "rust"


@pytest.mark.parametrize("lang", ["", "   ", "c sharp"])
def test_from_cli_rejects_bad_language(lang: str) -> None:
    with pytest.raises(ValueError, match="Invalid language tag"):
        ConvertOptions.from_cli(lang=lang)


def test_from_cli_rejects_empty_outdir() -> None:
    with pytest.raises(ValueError, match="Output directory"):
        ConvertOptions.from_cli(outdir="  ")


def test_to_dict() -> None:
    opts = ConvertOptions.from_cli(outdir="docs", nocopy=False, lang="go")
    assert opts.to_dict() == {
        "out_dir": "docs",
        "copy_media": True,
        "lang": "go",
        "base_dir": ".",
    }
