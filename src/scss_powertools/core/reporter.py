"""User-facing reporting of stage results."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from scss_powertools._meta import logger
from scss_powertools.core.types import Failure, LintWarning, Stage, StageResult, Success
from scss_powertools.errors import LintPayloadError

if TYPE_CHECKING:
    from scss_powertools.core.config import BuildConfig


@dataclass(slots=True)
class BuildOutcome:
    """Everything reported during one pipeline run.

    ``failed`` only ever goes from ``False`` to ``True``.
    """

    failed: bool = False
    results: list[StageResult] = field(default_factory=list)

    def record(self, result: StageResult) -> None:
        self.results.append(result)

    def mark_failed(self) -> None:
        self.failed = True

    def failures(self, stage: Stage | None = None) -> list[Failure]:
        return [r for r in self.results if isinstance(r, Failure) and (stage is None or r.stage == stage)]

    def successes(self, stage: Stage | None = None) -> list[Success]:
        return [r for r in self.results if isinstance(r, Success) and (stage is None or r.stage == stage)]


def parse_lint_warnings(payload: str) -> list[LintWarning]:
    """Extract the first file's warnings from stylelint's JSON output."""
    try:
        entries = json.loads(payload)
    except (TypeError, ValueError) as exc:
        msg = f"lint output is not JSON: {exc}"
        raise LintPayloadError(msg) from exc

    if not isinstance(entries, list) or not entries or not isinstance(entries[0], dict):
        msg = "lint output has no file results"
        raise LintPayloadError(msg)

    raw = entries[0].get("warnings")
    if not isinstance(raw, list):
        msg = "lint output has no warnings list"
        raise LintPayloadError(msg)

    try:
        return [LintWarning(text=str(w["text"]), line=int(w["line"])) for w in raw]
    except (KeyError, TypeError, ValueError) as exc:
        msg = f"malformed lint warning: {exc}"
        raise LintPayloadError(msg) from exc


def print_error_header(console: Console, stage: str) -> None:
    console.print(f"[red]Error in step:[/red] [reverse]{escape(str(stage))}[/reverse]")


class Reporter:
    """Print stage results and track whether the build has failed.

    In production mode every reported error marks the outcome failed, which
    the CLI turns into a non-zero exit code.
    """

    def __init__(
        self,
        config: BuildConfig,
        outcome: BuildOutcome | None = None,
        *,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.config = config
        self.outcome = outcome if outcome is not None else BuildOutcome()
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)

    def handle(self, result: StageResult) -> None:
        match result:
            case Success(message=message, stage=stage):
                self.report_success(message, stage)
            case Failure(detail=detail, stage=stage):
                self.report_error(detail, stage)

    def report_success(self, message: str, stage: Stage) -> None:
        self.console.print(f"[green]Success in step:[/green] [reverse]{escape(str(stage))}[/reverse]")
        self.console.print(escape(message))
        self.outcome.record(Success(message, stage))

    def report_error(self, detail: str, stage: Stage) -> None:
        print_error_header(self.err_console, stage)
        if stage == Stage.LINT:
            self._print_lint_warnings(detail)
        else:
            self.err_console.print(escape(detail))

        self.outcome.record(Failure(detail, stage))
        if self.config.production:
            self.outcome.mark_failed()

    def _print_lint_warnings(self, detail: str) -> None:
        # only the step header goes to stderr for lint
        try:
            warnings = parse_lint_warnings(detail)
        except LintPayloadError as exc:
            logger.warning("could not read lint result: %s", exc)
            self.console.print(escape(detail))
            return

        self.console.print(f"In file [bold]{escape(str(self.config.input))}[/bold]")
        for warning in warnings:
            self.console.print(f"{escape(warning.text)} on line {warning.line}")


__all__ = ["BuildOutcome", "Reporter", "parse_lint_warnings", "print_error_header"]
