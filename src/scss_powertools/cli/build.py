from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

import typer
from rich.markup import escape

from scss_powertools._meta import __version__, logger
from scss_powertools.cli._shared import (
    configure_runtime,
    make_console,
    resolve_use_color,
    stdout_color_allowed,
)
from scss_powertools.cli.exit_codes import EXIT_CONFIG, EXIT_FAILURE, EXIT_OK, EXIT_USAGE
from scss_powertools.core.config import load_tool_settings, resolve_config
from scss_powertools.core.pipeline import default_toolchain, run_build
from scss_powertools.core.reporter import Reporter, print_error_header
from scss_powertools.core.types import Stage
from scss_powertools.errors import ConfigError, SettingsError

if TYPE_CHECKING:
    from rich.console import Console

_BOOL_FALSE = False

PROG_NAME = "scss-powertools"


def _fail_initialize(console: Console, message: str, code: int) -> typer.Exit:
    print_error_header(console, Stage.INITIALIZE)
    console.print(escape(message))
    return typer.Exit(code=code)


def build_cmd(
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="<source SCSS> <output CSS>",
            help="The SCSS file to compile and the CSS file to write.",
            show_default=False,
        ),
    ] = None,
    production: Annotated[
        bool,
        typer.Option(
            "-p",
            "--production",
            help="Run in production, any error (such as lint) will fail the build. Also enables minify.",
        ),
    ] = _BOOL_FALSE,
    minify: Annotated[
        bool,
        typer.Option("-m", "--minify", help="Minify the file, even if not in production."),
    ] = _BOOL_FALSE,
    version: Annotated[
        bool,
        typer.Option("--version", is_eager=True, help="Show version and exit."),
    ] = _BOOL_FALSE,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Emit diagnostic logging."),
    ] = _BOOL_FALSE,
    quiet: Annotated[
        bool,
        typer.Option("-q", "--quiet", help="Suppress INFO logs, emit only errors."),
    ] = _BOOL_FALSE,
    color: Annotated[
        bool,
        typer.Option("--color", help="Force color output."),
    ] = _BOOL_FALSE,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable color output."),
    ] = _BOOL_FALSE,
) -> None:
    """Compile, lint, autoprefix and optionally minify a single SCSS file."""
    if version:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit(code=EXIT_OK)

    if color and no_color:
        msg = "Cannot combine --color and --no-color"
        raise typer.BadParameter(msg)

    configure_runtime(quiet=quiet, verbose=verbose)
    use_color = resolve_use_color(color=color, no_color=no_color, color_allowed=stdout_color_allowed())
    console = make_console(use_color=use_color)
    err_console = make_console(use_color=use_color, stderr=True)

    args = paths or []
    if not args:
        console.print(f"[bold yellow]{PROG_NAME}![/bold yellow]")
        console.print(f"[cyan]Usage:[/cyan] {PROG_NAME} --help")
        raise typer.Exit(code=EXIT_OK)

    try:
        config = resolve_config(args, production=production, minify=minify)
    except ConfigError as exc:
        raise _fail_initialize(err_console, str(exc), EXIT_USAGE) from exc

    try:
        settings = load_tool_settings()
    except SettingsError as exc:
        raise _fail_initialize(err_console, str(exc), EXIT_CONFIG) from exc

    logger.debug(
        "building %s -> %s (production=%s, minify=%s)", config.input, config.output, production, minify
    )
    reporter = Reporter(config, console=console, err_console=err_console)
    outcome = run_build(config, reporter=reporter, toolchain=default_toolchain(settings))

    raise typer.Exit(code=EXIT_FAILURE if outcome.failed else EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command(PROG_NAME)(build_cmd)


__all__ = ["PROG_NAME", "register"]
