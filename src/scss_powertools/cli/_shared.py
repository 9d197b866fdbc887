from __future__ import annotations

import logging
import sys

import click.utils as click_utils
from rich.console import Console

from scss_powertools._meta import logger
from scss_powertools.core.config import LOG_FORMAT


def resolve_use_color(*, color: bool, no_color: bool, color_allowed: bool) -> bool:
    # CLI flags take precedence over terminal detection.
    if no_color:
        return False
    if color:
        return True
    return color_allowed


def stdout_color_allowed() -> bool:
    try:
        is_tty = bool(getattr(sys.stdout, "isatty", lambda: False)())
    except OSError:
        return False
    return is_tty and not click_utils.should_strip_ansi(sys.stdout)


def make_console(*, use_color: bool, stderr: bool = False) -> Console:
    return Console(
        stderr=stderr,
        force_terminal=use_color,
        color_system="standard" if use_color else None,
        highlight=False,
        soft_wrap=True,
    )


def configure_runtime(*, quiet: bool, verbose: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)


__all__ = ["configure_runtime", "make_console", "resolve_use_color", "stdout_color_allowed"]
