"""Pydantic models for scaffold requests, templates, and reports."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

EntryClass = Literal["benign", "stale_log", "conflict"]

MANIFEST_DEFAULT_VERSION = "0.1.0"

ManifestDocument = dict[str, Any]


class ProjectRequest(BaseModel):
    """Resolved project name and destination for one scaffold run.

    Attributes:
        name: Base name of the destination, validated as a package name.
        destination_path: Absolute destination directory.

    Example:
        >>> ProjectRequest.from_directory("apps/demo", Path("/work")).name
        'demo'
    """

    model_config = ConfigDict(frozen=True)

    name: str
    destination_path: Path

    @classmethod
    def from_directory(cls, project_directory: str, cwd: Path) -> ProjectRequest:
        destination = Path(os.path.abspath(cwd / project_directory))
        return cls(name=destination.name, destination_path=destination)


class NameValidation(BaseModel):
    """Outcome of checking a name against package naming rules.

    Example:
        >>> NameValidation(name="demo").valid_for_new_packages
        True
    """

    model_config = ConfigDict(frozen=True)

    name: str
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def valid_for_old_packages(self) -> bool:
        return not self.errors

    @property
    def valid_for_new_packages(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def messages(self) -> tuple[str, ...]:
        return (*self.errors, *self.warnings)


class TemplateDescriptor(BaseModel):
    """Optional per-template document (``template.json``).

    Attributes:
        package: Manifest keys overlaid onto the generated ``package.json``.

    Example:
        >>> TemplateDescriptor.model_validate({"package": {"scripts": {}}}).package
        {'scripts': {}}
    """

    model_config = ConfigDict(extra="allow")

    package: dict[str, Any] = Field(default_factory=dict)

    @field_validator("package", mode="before")
    @classmethod
    def normalize_package(cls, value: object) -> object:
        if value is None:
            return {}
        return value


class Template(BaseModel):
    """Catalog entry for a scaffold template.

    ``root`` and ``manifest_overrides`` are populated when the template is
    resolved against a template directory.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    display_label: str
    style: str = ""
    manifest_overrides: dict[str, Any] = Field(default_factory=dict)
    root: Path | None = None

    @property
    def files_dir(self) -> Path | None:
        if self.root is None:
            return None
        return self.root / "template"


class ConflictEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    is_directory: bool = False

    @property
    def display_name(self) -> str:
        return f"{self.name}/" if self.is_directory else self.name


class DirectoryConflictReport(BaseModel):
    """Classification of a destination directory's existing entries.

    Attributes:
        entries: Conflicting entries in enumeration order.
        removed_logs: Stale log entries deleted during the scan.

    Example:
        >>> DirectoryConflictReport(entries=(ConflictEntry(name="notes.txt"),)).has_conflicts
        True
    """

    model_config = ConfigDict(frozen=True)

    entries: tuple[ConflictEntry, ...] = ()
    removed_logs: tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_conflicts(self) -> bool:
        return bool(self.entries)


def build_manifest(app_name: str, overrides: dict[str, Any] | None = None) -> ManifestDocument:
    """Build the generated ``package.json`` payload.

    Template overrides win on key collisions, including ``name``.

    Example:
        >>> build_manifest("demo", {"version": "1.0.0", "scripts": {"dev": "vite"}})
        {'name': 'demo', 'version': '1.0.0', 'private': True, 'scripts': {'dev': 'vite'}}
    """
    manifest: ManifestDocument = {
        "name": app_name,
        "version": MANIFEST_DEFAULT_VERSION,
        "private": True,
    }
    manifest.update(overrides or {})
    return manifest
