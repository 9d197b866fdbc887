"""Compile, lint, autoprefix and minify a single SCSS file."""

from scss_powertools._meta import __version__, logger

__all__ = ["__version__", "logger"]
