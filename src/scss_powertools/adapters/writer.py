from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from scss_powertools.errors import WriteError

if TYPE_CHECKING:
    from pathlib import Path


def write_css_sync(destination: Path, css: str) -> None:
    """Write *css* to *destination*, creating missing parent directories."""
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(css, encoding="utf-8")
    except OSError as exc:
        raise WriteError(str(exc)) from exc


async def write_css(destination: Path, css: str) -> None:
    await asyncio.to_thread(write_css_sync, destination, css)


__all__ = ["write_css", "write_css_sync"]
