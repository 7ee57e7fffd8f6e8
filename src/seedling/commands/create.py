"""Implementation for the ``seedling <project-directory>`` command.

Scaffolds a new project from a bundled template, prompting before any
existing files are removed.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.text import Text

from .. import log
from ..io import confirm, select
from ..models import DirectoryConflictReport
from ..services import CancelledError, InvalidNameError, ServiceFailure
from ..services.project import ScaffoldProjectOutcome, ScaffoldProjectService


def report_conflicts(project_directory: str, report: DirectoryConflictReport) -> None:
    """Print the conflicting entries of a destination directory."""
    header = Text("The directory ")
    header.append(project_directory, style="green")
    header.append(" contains files that could conflict:")
    log.info(header)
    log.info("")
    for entry in report.entries:
        log.info(f"  {entry.display_name}", style="blue" if entry.is_directory else None)
    log.info("")
    log.info("Either try using a new directory name, or remove the files listed above.")
    log.info("")


def _report_invalid_name(error: InvalidNameError) -> None:
    header = Text("Cannot create a project named ", style="red")
    header.append(f'"{error.name}"', style="green")
    header.append(" because of npm naming restrictions:", style="red")
    log.error(header)
    log.error("")
    for message in error.messages:
        log.error(f"  * {message}")
    log.error("")
    log.error(error.recovery_hint or "Please choose a different project name.")


def _report_success(outcome: ScaffoldProjectOutcome) -> None:
    log.info("")
    log.success("Success! Now run:")
    log.info("")
    for step in outcome.next_steps:
        log.info(f"  {step}")


def create_project(project_directory: str, cwd: Path | None = None) -> None:
    """Scaffold ``project_directory`` and render the outcome.

    Args:
        project_directory: Directory name or path, resolved against ``cwd``.
        cwd: Working directory; defaults to the process working directory.

    Returns:
        None. Exits with status 1 on invalid names, template problems, or
        filesystem failures; cancellation exits normally.

    Example:
        $ seedling my-app
    """
    try:
        outcome = ScaffoldProjectService.run_default(
            project_directory=project_directory,
            cwd=cwd or Path.cwd(),
            confirm_choice=lambda text, default: confirm(text, default=default),
            select_template=select,
            report_conflicts=report_conflicts,
        )
    except CancelledError as cancelled:
        log.info(Text.assemble(("✖", "red"), f" {cancelled.message}"))
        return
    except InvalidNameError as exc:
        _report_invalid_name(exc)
        raise typer.Exit(code=1) from exc
    except ServiceFailure as exc:
        log.error(exc.message)
        if exc.recovery_hint:
            log.error(exc.recovery_hint)
        raise typer.Exit(code=1) from exc
    _report_success(outcome)
