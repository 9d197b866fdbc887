"""Tests for argument resolution and project settings."""

from __future__ import annotations

import importlib
import logging
import sys
import textwrap
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from scss_powertools.core.config import (
    DEFAULT_INCLUDE_PATHS,
    DEFAULT_LINT_EXTENDS,
    DEFAULT_PRECISION,
    ToolSettings,
    load_tool_settings,
    resolve_config,
)
from scss_powertools.errors import BadExtensionError, ConfigError, SettingsError, WrongArgCountError

if TYPE_CHECKING:
    from _pytest.logging import LogCaptureFixture
    from _pytest.monkeypatch import MonkeyPatch


def test_resolve_config_builds_paths() -> None:
    config = resolve_config(["styles/a.scss", "dist/a.css"])
    assert config.input == Path("styles/a.scss")
    assert config.output == Path("dist/a.css")
    assert not config.production
    assert not config.minify
    assert not config.wants_minify


@pytest.mark.parametrize("args", [["a.scss"], ["a.scss", "a.css", "b.css"], ["a", "b", "c", "d"]])
def test_resolve_config_wrong_arg_count(args: list[str]) -> None:
    with pytest.raises(WrongArgCountError, match="two arguments"):
        resolve_config(args)


@pytest.mark.parametrize(
    ("source", "output"),
    [
        ("a.sass", "a.css"),
        ("a.scss", "a.scss"),
        ("a.css", "a.scss"),
        ("a.scss.txt", "a.css"),
        ("a.scss", "a.css.map"),
    ],
)
def test_resolve_config_bad_extension(source: str, output: str) -> None:
    with pytest.raises(BadExtensionError, match="right extension"):
        resolve_config([source, output])


def test_config_errors_share_a_base() -> None:
    assert issubclass(WrongArgCountError, ConfigError)
    assert issubclass(BadExtensionError, ConfigError)


def test_production_does_not_set_minify() -> None:
    config = resolve_config(["a.scss", "a.css"], production=True)
    assert config.production
    assert not config.minify
    assert config.wants_minify


def test_minify_without_production() -> None:
    config = resolve_config(["a.scss", "a.css"], minify=True)
    assert not config.production
    assert config.wants_minify


def test_build_config_is_frozen() -> None:
    config = resolve_config(["a.scss", "a.css"])
    with pytest.raises(AttributeError):
        config.production = True  # type: ignore[misc]


def test_load_tool_settings_without_pyproject(tmp_path: Path) -> None:
    assert load_tool_settings(tmp_path) == ToolSettings()


def test_load_tool_settings_without_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "site"\n', encoding="utf-8")
    settings = load_tool_settings(tmp_path)
    assert settings.include_paths == DEFAULT_INCLUDE_PATHS
    assert settings.precision == DEFAULT_PRECISION
    assert settings.lint_extends == DEFAULT_LINT_EXTENDS


def test_load_tool_settings_reads_overrides(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        textwrap.dedent(
            """
            [tool.scss-powertools]
            include-paths = ["node_modules", "vendor/scss"]
            precision = 8
            lint-extends = "stylelint-config-standard-scss"
            node-runner = ["pnpm", "exec"]
            browsers = "last 2 versions"
            """
        ),
        encoding="utf-8",
    )
    settings = load_tool_settings(tmp_path)
    assert settings.include_paths == ("node_modules", "vendor/scss")
    assert settings.precision == 8
    assert settings.lint_extends == ("stylelint-config-standard-scss",)
    assert settings.node_runner == ("pnpm", "exec")
    assert settings.browsers == "last 2 versions"


def test_load_tool_settings_uses_cwd(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.scss-powertools]\nprecision = 3\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_tool_settings().precision == 3


@pytest.mark.parametrize(
    "body",
    [
        "precision = -1",
        "precision = true",
        'precision = "6"',
        "browsers = 5",
        "include-paths = [1, 2]",
        "node-runner = []",
    ],
)
def test_load_tool_settings_rejects_bad_values(tmp_path: Path, body: str) -> None:
    (tmp_path / "pyproject.toml").write_text(f"[tool.scss-powertools]\n{body}\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        load_tool_settings(tmp_path)


def test_load_tool_settings_tolerates_broken_toml(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.scss-powertools\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="scss_powertools"):
        settings = load_tool_settings(tmp_path)
    assert settings == ToolSettings()
    assert "Failed to parse" in caplog.text


def test_import_has_no_side_effects(monkeypatch: MonkeyPatch) -> None:
    """Importing the package should not configure logging."""
    basic_called = False

    def fake_basic(*args, **kwargs):
        nonlocal basic_called
        basic_called = True

    monkeypatch.setattr(logging, "basicConfig", fake_basic)

    for name in [m for m in sys.modules if m.startswith("scss_powertools")]:
        monkeypatch.delitem(sys.modules, name)

    importlib.import_module("scss_powertools.cli")

    assert not basic_called
