from __future__ import annotations

import typer
from typer.main import get_command

from scss_powertools.cli import build


def create_app() -> typer.Typer:
    app = typer.Typer(
        help="Compile a single SCSS file to CSS, lint it, autoprefix it and optionally minify it.",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )
    build.register(app)
    return app


def main() -> None:
    app = create_app()
    get_command(app)(prog_name=build.PROG_NAME)


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
