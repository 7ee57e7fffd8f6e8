"""Copy a template into a destination and write the generated manifest."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from . import conflicts, log
from .models import ManifestDocument, Template, build_manifest
from .services.errors import IoFailedError, MissingTemplateError, io_failure

MANIFEST_FILENAME = "package.json"


def write_manifest(destination: Path, manifest: ManifestDocument) -> Path:
    path = destination / MANIFEST_FILENAME
    try:
        text = json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise io_failure(exc, "write", path) from exc
    return path


def copy_tree(source: Path, destination: Path) -> None:
    """Copy ``source`` into ``destination``, replacing same-path files."""
    try:
        shutil.copytree(source, destination, symlinks=True, dirs_exist_ok=True)
    except shutil.Error as exc:
        failures = exc.args[0] if exc.args and isinstance(exc.args[0], list) else []
        detail = failures[0][2] if failures else str(exc)
        raise IoFailedError(
            f"failed to copy template into {destination}: {detail}", path=destination
        ) from exc
    except OSError as exc:
        raise io_failure(exc, "copy template into", destination) from exc


def materialize(
    destination: Path,
    app_name: str,
    template: Template,
    *,
    purge: bool = False,
) -> ManifestDocument:
    """Materialize ``template`` into ``destination``.

    Steps run in order without recovery: optional purge of every top-level
    entry, manifest write, then the recursive copy of the template file tree.

    Args:
        destination: Existing destination directory.
        app_name: Project name used as the manifest default ``name``.
        template: Resolved template (``root`` set).
        purge: Remove existing entries first.

    Returns:
        The manifest document that was written.
    """
    files_dir = template.files_dir
    if files_dir is None or not files_dir.is_dir():
        raise MissingTemplateError(files_dir or Path(template.id))

    if purge:
        removed = conflicts.purge(destination)
        log.debug(f"Purged {len(removed)} entries from {destination}")

    manifest = build_manifest(app_name, template.manifest_overrides)
    write_manifest(destination, manifest)
    log.debug(f"Copying {files_dir} into {destination}")
    copy_tree(files_dir, destination)
    return manifest
