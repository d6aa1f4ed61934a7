"""CLI interface for gotomarkdown."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from gotomarkdown import __version__
from gotomarkdown.builder.pipeline import convert_file, copy_media
from gotomarkdown.errors import GoToMarkdownError
from gotomarkdown.logging_setup import log_conversion_summary, setup_logging
from gotomarkdown.model.options import DEFAULT_LANG, ConvertOptions
from gotomarkdown.ui.progress import ProgressReporter

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="gotomarkdown",
    help="Convert commented source files into Markdown documents.",
)


def version_callback(value: bool) -> None:
    """Version callback for --version flag."""
    if value:
        typer.echo(f"gotomarkdown version {__version__}")
        raise typer.Exit()


@app.command(no_args_is_help=True)
def convert(
    files: Annotated[
        list[Path],
        typer.Argument(
            help="Source files to convert",
            dir_okay=False,
        ),
    ],
    outdir: Annotated[
        Path,
        typer.Option(
            "--outdir",
            help="Output directory for Markdown and copied media (default: out)",
        ),
    ] = Path("out"),
    nocopy: Annotated[
        bool,
        typer.Option("--nocopy", help="Do not copy images and animation resources to outdir"),
    ] = False,
    lang: Annotated[
        str,
        typer.Option("--lang", help="Language tag for opening code fences (default: go)"),
    ] = DEFAULT_LANG,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every collected media path"),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """
    Convert commented source files into Markdown.

    Comments become prose, code becomes fenced code blocks, //go: directives
    are dropped. Images and Hype animations referenced from comments are
    copied into the output directory. Processing stops at the first file
    that fails.

    Examples:

        # Write out/main.md and copy its images to out/
        gotomarkdown main.go

        # Custom output directory, no media copy
        gotomarkdown a.go b.go --outdir docs --nocopy
    """
    console = Console(stderr=True)
    setup_logging(verbose, console=console)

    try:
        options = ConvertOptions.from_cli(outdir=outdir, nocopy=nocopy, lang=lang)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    logger.debug("Options: %s", options.to_dict())

    try:
        with ProgressReporter(console=console) as pr:
            pr.emit("files:start", {"count": len(files)})
            for source in files:
                logger.info("Converting %s", source)
                result = convert_file(source, options)
                media = result.sorted_media()
                log_conversion_summary(str(source), media, options.copy_media)
                if options.copy_media and media:
                    pr.emit("media:start", {"count": len(media)})
                    copy_media(media, options, on_progress=pr.emit)
                pr.emit("file:converted", {"file": source.name})
            pr.emit("files:done", {})
    except GoToMarkdownError as exc:
        logger.error("%s", exc)
        raise typer.Exit(1) from exc

    logger.info("Done.")


if __name__ == "__main__":  # pragma: no cover - executed only via `python -m`
    app()
