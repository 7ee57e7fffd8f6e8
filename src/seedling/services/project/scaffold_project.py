from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from pydantic import BaseModel, ConfigDict

from ... import conflicts, log, materialize, naming
from ...models import DirectoryConflictReport, ManifestDocument, ProjectRequest, Template
from ...templates import TemplateCatalog
from ..base import BaseService
from ..errors import CancelledError, InvalidNameError, io_failure

ConfirmChoice = Callable[[str, bool], bool]
SelectTemplate = Callable[[str, Sequence[Template]], str]
ReportConflicts = Callable[[str, DirectoryConflictReport], None]
Materialize = Callable[..., ManifestDocument]

OVERWRITE_PROMPT = "Remove existing files and continue?"
SELECT_PROMPT = "Select a template"


class ScaffoldProjectRequest(BaseModel):
    project_directory: str
    cwd: Path
    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class ScaffoldProjectOutcome:
    project: ProjectRequest
    template_id: str
    manifest: ManifestDocument
    manifest_path: Path
    removed_logs: tuple[str, ...]
    purged: bool

    @property
    def next_steps(self) -> tuple[str, ...]:
        return (f"cd {self.project.name}", "npm install", "npm run dev")


class ScaffoldProjectService(BaseService[ScaffoldProjectRequest, ScaffoldProjectOutcome]):
    """Create a project directory from a catalog template.

    Order: validate the name, create the destination, scan it, confirm
    removal of conflicts, select and resolve the template, materialize.
    Nothing outside the destination is touched, and nothing inside it is
    removed (apart from stale logs) until the operator confirms.
    """

    def __init__(
        self,
        confirm_choice: ConfirmChoice,
        select_template: SelectTemplate,
        report_conflicts: ReportConflicts,
        catalog: TemplateCatalog,
        materializer: Materialize = materialize.materialize,
    ) -> None:
        self._confirm_choice = confirm_choice
        self._select_template = select_template
        self._report_conflicts = report_conflicts
        self._catalog = catalog
        self._materialize = materializer

    @classmethod
    def run_default(
        cls,
        *,
        project_directory: str,
        cwd: Path,
        confirm_choice: ConfirmChoice,
        select_template: SelectTemplate,
        report_conflicts: ReportConflicts,
        templates_dir: Path | None = None,
    ) -> ScaffoldProjectOutcome:
        """Run the scaffold flow with default collaborators."""
        service = cls(
            confirm_choice=confirm_choice,
            select_template=select_template,
            report_conflicts=report_conflicts,
            catalog=TemplateCatalog(templates_dir),
        )
        return service(ScaffoldProjectRequest(project_directory=project_directory, cwd=cwd))

    def _run(self, request: ScaffoldProjectRequest) -> ScaffoldProjectOutcome:
        project = ProjectRequest.from_directory(request.project_directory, request.cwd)
        validation = naming.validate_name(project.name)
        if not validation.valid_for_new_packages:
            raise InvalidNameError(project.name, validation.messages)

        destination = project.destination_path
        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise io_failure(exc, "create directory", destination) from exc

        report = conflicts.scan(destination)
        overwrite = False
        if report.has_conflicts:
            self._report_conflicts(request.project_directory, report)
            if not self._confirm_choice(OVERWRITE_PROMPT, False):
                raise CancelledError()
            overwrite = True

        template_id = self._select_template(SELECT_PROMPT, self._catalog.list())
        template = self._catalog.resolve(template_id)
        log.debug(f"Scaffolding {project.name} from {template.id}")
        manifest = self._materialize(destination, project.name, template, purge=overwrite)
        return ScaffoldProjectOutcome(
            project=project,
            template_id=template.id,
            manifest=manifest,
            manifest_path=destination / materialize.MANIFEST_FILENAME,
            removed_logs=report.removed_logs,
            purged=overwrite,
        )
