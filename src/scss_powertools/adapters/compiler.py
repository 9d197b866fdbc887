"""SCSS to CSS compilation through libsass."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import sass

from scss_powertools.core.config import ToolSettings
from scss_powertools.errors import CompileError

if TYPE_CHECKING:
    from pathlib import Path

OUTPUT_STYLE = "expanded"


def compile_scss_sync(source: Path, output: Path, *, settings: ToolSettings | None = None) -> str:
    """Compile *source* and return CSS with an embedded source map.

    *output* is only a hint so the map's paths are relative to the CSS file.
    """
    settings = settings or ToolSettings()
    try:
        css, _source_map = sass.compile(
            filename=str(source),
            include_paths=list(settings.include_paths),
            output_style=OUTPUT_STYLE,
            precision=settings.precision,
            output_filename_hint=str(output),
            source_map_filename=f"{output}.map",
            source_map_embed=True,
            source_map_contents=True,
        )
    except sass.CompileError as exc:
        raise CompileError(str(exc).strip(), status=1) from exc
    except OSError as exc:
        raise CompileError(str(exc), status=exc.errno or 1) from exc
    return css


async def compile_scss(source: Path, output: Path, *, settings: ToolSettings | None = None) -> str:
    return await asyncio.to_thread(compile_scss_sync, source, output, settings=settings)


__all__ = ["OUTPUT_STYLE", "compile_scss", "compile_scss_sync"]
