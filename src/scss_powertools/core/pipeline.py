from __future__ import annotations

import asyncio
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from scss_powertools._meta import logger
from scss_powertools.adapters.compiler import compile_scss
from scss_powertools.adapters.linter import lint_scss
from scss_powertools.adapters.minifier import minify_css
from scss_powertools.adapters.prefixer import prefix_css
from scss_powertools.adapters.writer import write_css
from scss_powertools.core.reporter import Reporter
from scss_powertools.core.types import Failure, Stage, Success
from scss_powertools.errors import CompileError, LintError, MinifyError, PrefixError, WriteError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from pathlib import Path

    from scss_powertools.core.config import BuildConfig, ToolSettings
    from scss_powertools.core.reporter import BuildOutcome
    from scss_powertools.core.types import LintResult

LINT_OK_MESSAGE = "Lint succeeded!"
DONE_MESSAGE = "Your CSS is done!"


@dataclass(frozen=True, slots=True)
class Toolchain:
    """The external tools, one async callable per stage."""

    lint: Callable[[Path], Awaitable[LintResult]]
    compile: Callable[[Path, Path], Awaitable[str]]
    prefix: Callable[[str, Path, Path], Awaitable[str]]
    minify: Callable[[str], Awaitable[str]]
    write: Callable[[Path, str], Awaitable[None]]


def default_toolchain(settings: ToolSettings | None = None) -> Toolchain:
    """Bind the libsass and node adapters to *settings*."""
    return Toolchain(
        lint=partial(lint_scss, settings=settings),
        compile=partial(compile_scss, settings=settings),
        prefix=partial(prefix_css, settings=settings),
        minify=minify_css,
        write=write_css,
    )


class Pipeline:
    """Lint and build one SCSS file.

    Lint runs alongside the compile chain and never stops it, whatever it
    raises. Each step of the chain (compile, prefix, minify, write) stops
    the chain when it fails.
    """

    def __init__(self, config: BuildConfig, reporter: Reporter, toolchain: Toolchain) -> None:
        self.config = config
        self.reporter = reporter
        self.toolchain = toolchain

    async def run(self) -> None:
        async with asyncio.TaskGroup() as tg:
            tg.create_task(self._lint())
            tg.create_task(self._build())

    async def _lint(self) -> None:
        try:
            result = await self.toolchain.lint(self.config.input)
        except LintError as exc:
            self.reporter.handle(Failure(str(exc), Stage.LINT))
            return
        except Exception as exc:
            # lint never halts the build
            logger.exception("unexpected lint failure for %s", self.config.input)
            self.reporter.handle(Failure(str(exc) or type(exc).__name__, Stage.LINT))
            return

        if result.errored:
            self.reporter.handle(Failure(result.output, Stage.LINT))
        else:
            self.reporter.handle(Success(LINT_OK_MESSAGE, Stage.LINT))

    async def _build(self) -> None:
        source, output = self.config.input, self.config.output

        try:
            css = await self.toolchain.compile(source, output)
        except CompileError as exc:
            self.reporter.handle(Failure(str(exc), Stage.COMPILE))
            return
        logger.debug("compiled %s", source)

        try:
            css = await self.toolchain.prefix(css, source, output)
        except PrefixError as exc:
            self.reporter.handle(Failure(str(exc), Stage.PREFIX))
            return

        if self.config.wants_minify:
            try:
                css = await self.toolchain.minify(css)
            except MinifyError as exc:
                self.reporter.handle(Failure(str(exc), Stage.MINIFY))
                return

        try:
            await self.toolchain.write(output, css)
        except WriteError as exc:
            self.reporter.handle(Failure(str(exc), Stage.WRITE))
            return
        self.reporter.handle(Success(DONE_MESSAGE, Stage.DONE))


def run_build(
    config: BuildConfig,
    *,
    toolchain: Toolchain | None = None,
    reporter: Reporter | None = None,
    settings: ToolSettings | None = None,
) -> BuildOutcome:
    """Run the whole pipeline for *config* and return what was reported."""
    reporter = reporter or Reporter(config)
    toolchain = toolchain or default_toolchain(settings)
    asyncio.run(Pipeline(config, reporter, toolchain).run())
    return reporter.outcome


__all__ = ["DONE_MESSAGE", "LINT_OK_MESSAGE", "Pipeline", "Toolchain", "default_toolchain", "run_build"]
