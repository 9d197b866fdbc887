"""Vendor prefixing through postcss-cli and autoprefixer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scss_powertools._meta import logger
from scss_powertools.adapters.node import run_node_tool
from scss_powertools.core.config import ToolSettings
from scss_powertools.errors import PrefixError, ToolNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


def build_prefix_command(settings: ToolSettings) -> list[str]:
    # postcss-cli reads stdin and writes stdout when no files are given;
    # source maps are inlined unless --no-map is passed.
    return [*settings.node_runner, "postcss", "--use", "autoprefixer"]


async def prefix_css(css: str, source: Path, output: Path, *, settings: ToolSettings | None = None) -> str:
    """Return *css* with vendor prefixes added."""
    settings = settings or ToolSettings()
    env = {"BROWSERSLIST": settings.browsers} if settings.browsers else None
    logger.debug("prefixing %s -> %s", source, output)
    try:
        result = await run_node_tool(build_prefix_command(settings), stdin=css, env=env)
    except (ToolNotFoundError, OSError) as exc:
        raise PrefixError(str(exc)) from exc

    if result.returncode != 0:
        raise PrefixError(result.stderr.strip() or f"postcss exited with {result.returncode}")
    return result.stdout


__all__ = ["build_prefix_command", "prefix_css"]
