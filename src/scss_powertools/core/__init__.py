"""Configuration, reporting and orchestration of a single build."""

from scss_powertools.core.config import BuildConfig, ToolSettings, load_tool_settings, resolve_config
from scss_powertools.core.reporter import BuildOutcome, Reporter
from scss_powertools.core.types import Failure, LintResult, LintWarning, Stage, StageResult, Success

__all__ = [
    "BuildConfig",
    "BuildOutcome",
    "Failure",
    "LintResult",
    "LintWarning",
    "Reporter",
    "Stage",
    "StageResult",
    "Success",
    "ToolSettings",
    "load_tool_settings",
    "resolve_config",
]
