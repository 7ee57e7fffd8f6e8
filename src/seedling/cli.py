"""Command-line entry point for Seedling."""

from __future__ import annotations

import typer

from . import __version__
from .commands.create import create_project

app = typer.Typer(
    add_completion=False,
    help="Scaffold a new project directory from a template.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def create(
    project_directory: str = typer.Argument(
        ...,
        metavar="<project-directory>",
        help="Directory to create the project in; its name becomes the package name.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Create a project from a template."""
    create_project(project_directory)


def main() -> None:
    app()
