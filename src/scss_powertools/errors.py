"""Centralised exception hierarchy for scss-powertools."""

from __future__ import annotations


class PowertoolsError(Exception):
    """Base class for all custom scss-powertools exceptions."""


class ConfigError(PowertoolsError):
    """Base class for errors raised before the pipeline starts."""


class WrongArgCountError(ConfigError):
    """The command line did not name exactly one source and one output."""


class BadExtensionError(ConfigError):
    """The source is not a ``.scss`` file or the output is not a ``.css`` file."""


class SettingsError(ConfigError):
    """The ``[tool.scss-powertools]`` table holds a value of the wrong type."""


class ToolNotFoundError(PowertoolsError):
    """A node executable could not be found on ``PATH``."""


class LintPayloadError(PowertoolsError):
    """The linter's serialized result could not be turned into warnings."""


class StageError(PowertoolsError):
    """Base class for failures of a single pipeline stage."""


class LintError(StageError):
    """The linter could not be run or crashed."""


class CompileError(StageError):
    """libsass rejected the source file."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return f"Message: {self.message} Status code: {self.status}"


class PrefixError(StageError):
    """The autoprefixer run failed."""


class MinifyError(StageError):
    """The minifier could not process the prefixed CSS."""


class WriteError(StageError):
    """The output file could not be written."""


__all__ = [
    "BadExtensionError",
    "CompileError",
    "ConfigError",
    "LintError",
    "LintPayloadError",
    "MinifyError",
    "PowertoolsError",
    "PrefixError",
    "SettingsError",
    "StageError",
    "ToolNotFoundError",
    "WriteError",
    "WrongArgCountError",
]
