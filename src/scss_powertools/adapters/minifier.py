from __future__ import annotations

import asyncio

import sass

from scss_powertools.errors import MinifyError


def minify_css_sync(css: str) -> str:
    """Minify plain CSS by re-emitting it through libsass in compressed style."""
    try:
        return sass.compile(string=css, output_style="compressed")
    except sass.CompileError as exc:
        raise MinifyError(str(exc).strip()) from exc


async def minify_css(css: str) -> str:
    return await asyncio.to_thread(minify_css_sync, css)


__all__ = ["minify_css", "minify_css_sync"]
