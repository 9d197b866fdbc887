"""stylelint, run through the node runner with the JSON formatter."""

from __future__ import annotations

import asyncio
import json
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from scss_powertools._meta import logger
from scss_powertools.adapters.node import run_node_tool
from scss_powertools.core.config import LINT_CUSTOM_SYNTAX, ToolSettings
from scss_powertools.core.types import LintResult
from scss_powertools.errors import LintError, ToolNotFoundError

if TYPE_CHECKING:
    from scss_powertools.adapters.node import ToolOutput

# stylelint exit statuses
_LINT_CLEAN = 0
_LINT_PROBLEMS = 2


def build_lint_config(settings: ToolSettings) -> dict[str, object]:
    return {"extends": list(settings.lint_extends), "customSyntax": LINT_CUSTOM_SYNTAX}


def _interpret(output: ToolOutput) -> LintResult:
    if output.returncode == _LINT_CLEAN:
        return LintResult(errored=False, output=output.stdout.strip() or "[]")
    if output.returncode == _LINT_PROBLEMS:
        # newer stylelint releases print the formatter output on stderr
        payload = output.stdout.strip() or output.stderr.strip()
        return LintResult(errored=True, output=payload)
    detail = output.stderr.strip() or output.stdout.strip() or f"stylelint exited with {output.returncode}"
    raise LintError(detail)


def _write_lint_config(settings: ToolSettings) -> Path:
    tmp = Path(tempfile.mkdtemp(prefix="scss-powertools-"))
    config_path = tmp / "stylelint.config.json"
    config_path.write_text(json.dumps(build_lint_config(settings)), encoding="utf-8")
    return config_path


async def lint_scss(source: Path, *, settings: ToolSettings | None = None) -> LintResult:
    """Lint *source* with the SCSS rule-set profile."""
    settings = settings or ToolSettings()
    try:
        config_path = await asyncio.to_thread(_write_lint_config, settings)
    except OSError as exc:
        msg = f"could not write the lint config: {exc}"
        raise LintError(msg) from exc

    command = [
        *settings.node_runner,
        "stylelint",
        str(source),
        "--config",
        str(config_path),
        "--config-basedir",
        str(Path.cwd()),
        "--formatter",
        "json",
    ]
    try:
        output = await run_node_tool(command)
    except (ToolNotFoundError, OSError) as exc:
        raise LintError(str(exc)) from exc
    finally:
        await asyncio.to_thread(shutil.rmtree, config_path.parent, ignore_errors=True)

    result = _interpret(output)
    logger.debug("lint of %s errored=%s", source, result.errored)
    return result


__all__ = ["build_lint_config", "lint_scss"]
