"""Central configuration and constants for ``scss-powertools``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from scss_powertools._meta import logger
from scss_powertools.errors import BadExtensionError, SettingsError, WrongArgCountError

if TYPE_CHECKING:
    from collections.abc import Sequence

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

SOURCE_SUFFIX = ".scss"
OUTPUT_SUFFIX = ".css"

DEFAULT_INCLUDE_PATHS: tuple[str, ...] = ("node_modules",)
DEFAULT_PRECISION = 6
DEFAULT_LINT_EXTENDS: tuple[str, ...] = (
    "stylelint-config-standard",
    "stylelint-config-recommended-scss",
)
LINT_CUSTOM_SYNTAX = "postcss-scss"
DEFAULT_NODE_RUNNER: tuple[str, ...] = ("npx", "--no-install")

PYPROJECT_TABLE = "scss-powertools"

_EXPECTED_ARGS = 2


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Resolved command line for a single build."""

    production: bool
    minify: bool
    input: Path
    output: Path

    @property
    def wants_minify(self) -> bool:
        return self.production or self.minify


@dataclass(frozen=True, slots=True)
class ToolSettings:
    """Knobs handed to the external tools.

    Fields
    ------
    include_paths:
        Extra ``@import`` search paths for libsass.
    precision:
        Number of decimals libsass keeps in computed values.
    lint_extends:
        stylelint shareable configs the lint profile extends.
    node_runner:
        Command prefix used to launch node tools (``npx`` by default).
    browsers:
        Optional browserslist query for autoprefixer; the project's own
        browserslist config applies when unset.
    """

    include_paths: tuple[str, ...] = DEFAULT_INCLUDE_PATHS
    precision: int = DEFAULT_PRECISION
    lint_extends: tuple[str, ...] = DEFAULT_LINT_EXTENDS
    node_runner: tuple[str, ...] = DEFAULT_NODE_RUNNER
    browsers: str | None = None


def resolve_config(args: Sequence[str], *, production: bool = False, minify: bool = False) -> BuildConfig:
    """Turn positional arguments and flags into a :class:`BuildConfig`."""
    if len(args) != _EXPECTED_ARGS:
        msg = "You have to give two arguments: <source> <output>"
        raise WrongArgCountError(msg)

    source, output = args
    if not source.endswith(SOURCE_SUFFIX) or not output.endswith(OUTPUT_SUFFIX):
        msg = (
            "Some of your files do not have the right extension. "
            "Input should be .scss and output should be .css"
        )
        raise BadExtensionError(msg)

    return BuildConfig(production=production, minify=minify, input=Path(source), output=Path(output))


def _read_pyproject_table(pyproject: Path) -> dict[str, Any]:
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", pyproject, e)
        return {}

    table = data.get("tool", {}).get(PYPROJECT_TABLE, {})
    if not isinstance(table, dict):
        msg = f"[tool.{PYPROJECT_TABLE}] in {pyproject} must be a table"
        raise SettingsError(msg)
    return table


def _string_tuple(table: dict[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = table.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return tuple(value)
    msg = f"{key} must be a string or a list of strings"
    raise SettingsError(msg)


def load_tool_settings(cwd: Path | None = None) -> ToolSettings:
    """Read ``[tool.scss-powertools]`` from ``pyproject.toml`` in *cwd*, if present."""
    pyproject = (cwd or Path.cwd()) / "pyproject.toml"
    if not pyproject.exists():
        return ToolSettings()

    table = _read_pyproject_table(pyproject)
    if not table:
        return ToolSettings()

    precision = table.get("precision", DEFAULT_PRECISION)
    # bool is an int subclass
    if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0:
        msg = "precision must be a non-negative integer"
        raise SettingsError(msg)

    browsers = table.get("browsers")
    if browsers is not None and not isinstance(browsers, str):
        msg = "browsers must be a browserslist query string"
        raise SettingsError(msg)

    node_runner = _string_tuple(table, "node-runner", DEFAULT_NODE_RUNNER)
    if not node_runner:
        msg = "node-runner must name at least one command"
        raise SettingsError(msg)

    settings = ToolSettings(
        include_paths=_string_tuple(table, "include-paths", DEFAULT_INCLUDE_PATHS),
        precision=precision,
        lint_extends=_string_tuple(table, "lint-extends", DEFAULT_LINT_EXTENDS),
        node_runner=node_runner,
        browsers=browsers,
    )
    logger.debug("tool settings from %s: %s", pyproject, settings)
    return settings


__all__ = [
    "DEFAULT_INCLUDE_PATHS",
    "DEFAULT_LINT_EXTENDS",
    "DEFAULT_NODE_RUNNER",
    "DEFAULT_PRECISION",
    "LINT_CUSTOM_SYNTAX",
    "LOG_FORMAT",
    "BuildConfig",
    "ToolSettings",
    "load_tool_settings",
    "resolve_config",
]
