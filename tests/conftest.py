from __future__ import annotations

import io
import json
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

from scss_powertools.core.config import BuildConfig
from scss_powertools.core.pipeline import Toolchain
from scss_powertools.core.reporter import Reporter
from scss_powertools.core.types import LintResult

COMPILED_CSS = "a {\n  display: flex;\n}\n"


def stylelint_payload(source: str, warnings: list[tuple[str, int]]) -> str:
    """Build a payload shaped like stylelint's JSON formatter output."""
    return json.dumps(
        [
            {
                "source": source,
                "errored": bool(warnings),
                "warnings": [
                    {"line": line, "column": 1, "rule": "rule", "severity": "error", "text": text}
                    for text, line in warnings
                ],
            }
        ]
    )


@dataclass
class FakeTools:
    """Stand-ins for the external tools that record every call.

    A field holding an exception makes the matching stage raise it.
    """

    lint_result: LintResult | Exception = field(default_factory=lambda: LintResult(errored=False, output="[]"))
    compiled: str | Exception = COMPILED_CSS
    prefix_error: Exception | None = None
    minify_error: Exception | None = None
    write_error: Exception | None = None
    calls: list[str] = field(default_factory=list)
    written: dict[Path, str] = field(default_factory=dict)

    async def lint(self, source: Path) -> LintResult:
        self.calls.append("lint")
        if isinstance(self.lint_result, Exception):
            raise self.lint_result
        return self.lint_result

    async def compile(self, source: Path, output: Path) -> str:
        self.calls.append("compile")
        if isinstance(self.compiled, Exception):
            raise self.compiled
        return self.compiled

    async def prefix(self, css: str, source: Path, output: Path) -> str:
        self.calls.append("prefix")
        if self.prefix_error is not None:
            raise self.prefix_error
        return f"PREFIXED({css})"

    async def minify(self, css: str) -> str:
        self.calls.append("minify")
        if self.minify_error is not None:
            raise self.minify_error
        return f"MIN({css})"

    async def write(self, destination: Path, css: str) -> None:
        self.calls.append("write")
        if self.write_error is not None:
            raise self.write_error
        self.written[destination] = css

    def toolchain(self) -> Toolchain:
        return Toolchain(
            lint=self.lint,
            compile=self.compile,
            prefix=self.prefix,
            minify=self.minify,
            write=self.write,
        )


@dataclass
class CapturedReporter:
    reporter: Reporter
    out: io.StringIO
    err: io.StringIO


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def lint_payload():
    return stylelint_payload


@pytest.fixture
def fake_tools() -> FakeTools:
    return FakeTools()


@pytest.fixture
def build_config(tmp_path: Path):
    def make(*, production: bool = False, minify: bool = False) -> BuildConfig:
        return BuildConfig(
            production=production,
            minify=minify,
            input=tmp_path / "a.scss",
            output=tmp_path / "a.css",
        )

    return make


@pytest.fixture
def captured_reporter():
    def make(config: BuildConfig) -> CapturedReporter:
        out, err = io.StringIO(), io.StringIO()
        reporter = Reporter(
            config,
            console=Console(file=out, color_system=None, soft_wrap=True),
            err_console=Console(file=err, color_system=None, soft_wrap=True),
        )
        return CapturedReporter(reporter=reporter, out=out, err=err)

    return make
