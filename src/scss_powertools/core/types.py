from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Stage(StrEnum):
    INITIALIZE = "initialize"
    LINT = "lint"
    COMPILE = "compile"
    PREFIX = "prefix"
    MINIFY = "minify"
    WRITE = "fs (outputFile)"
    DONE = "scss-powertools"


@dataclass(frozen=True, slots=True)
class Success:
    """A stage finished; *message* is shown to the user."""

    message: str
    stage: Stage


@dataclass(frozen=True, slots=True)
class Failure:
    """A stage failed; *detail* is the raw error text (JSON for lint)."""

    detail: str
    stage: Stage


StageResult = Success | Failure


@dataclass(frozen=True, slots=True)
class LintWarning:
    text: str
    line: int


@dataclass(frozen=True, slots=True)
class LintResult:
    """Outcome of a linter run.

    Fields
    ------
    errored:
        ``True`` when the linter reported at least one problem.
    output:
        The linter's JSON-formatted result, one entry per linted file.
    """

    errored: bool
    output: str


__all__ = [
    "Failure",
    "LintResult",
    "LintWarning",
    "Stage",
    "StageResult",
    "Success",
]
