"""gotomarkdown - turn commented source files into Markdown documents."""

__version__ = "0.1.0"

__all__ = ["__version__"]
