"""Template catalog and descriptor loading."""

from __future__ import annotations

import json
import os
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from . import log
from .models import Template, TemplateDescriptor
from .services.errors import InvalidTemplateError, MissingTemplateError, UnknownTemplateError

TEMPLATES_DIR_ENV = "SEEDLING_TEMPLATES_DIR"
DESCRIPTOR_FILENAME = "template.json"
FILES_DIRNAME = "template"

CATALOG: tuple[Template, ...] = (
    Template(id="react-app", display_label="react-app", style="cyan"),
    Template(id="react-app-ts", display_label="react-app-ts", style="cyan"),
    Template(id="ts-library", display_label="ts-lib", style="magenta"),
    Template(id="react-lib", display_label="react-lib", style="magenta"),
)


def packaged_templates_dir() -> Path:
    """Return the template root bundled with the package.

    Example:
        >>> packaged_templates_dir().name
        'templates'
    """
    return Path(str(resources.files("seedling").joinpath("templates")))


def default_templates_dir() -> Path:
    override = os.environ.get(TEMPLATES_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return packaged_templates_dir()


def load_descriptor(template_root: Path) -> TemplateDescriptor:
    """Load and validate ``template.json`` from ``template_root``.

    Args:
        template_root: Directory holding the template.

    Returns:
        Parsed descriptor; an empty descriptor when the file is absent.
    """
    path = template_root / DESCRIPTOR_FILENAME
    if not path.is_file():
        return TemplateDescriptor()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidTemplateError(path, str(exc)) from exc
    if not isinstance(payload, dict):
        raise InvalidTemplateError(path, "expected a JSON object")
    try:
        return TemplateDescriptor.model_validate(payload)
    except ValidationError as exc:
        raise InvalidTemplateError(path, "'package' must be an object") from exc


class TemplateCatalog:
    """Static template catalog bound to a template root directory."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root if root is not None else default_templates_dir()

    def list(self) -> tuple[Template, ...]:
        return CATALOG

    def get(self, template_id: str) -> Template:
        for template in CATALOG:
            if template.id == template_id:
                return template
        raise UnknownTemplateError(template_id, [template.id for template in CATALOG])

    def resolve(self, template_id: str) -> Template:
        """Locate a template on disk and load its manifest overrides.

        Raises:
            UnknownTemplateError: ``template_id`` is not in the catalog.
            MissingTemplateError: the template's file tree directory is absent.
            InvalidTemplateError: ``template.json`` is malformed.
        """
        template = self.get(template_id)
        template_root = self.root / template_id
        files_dir = template_root / FILES_DIRNAME
        if not files_dir.is_dir():
            raise MissingTemplateError(files_dir)
        descriptor = load_descriptor(template_root)
        log.debug(f"Resolved template {template_id} at {template_root}")
        return template.model_copy(
            update={"root": template_root, "manifest_overrides": dict(descriptor.package)}
        )
