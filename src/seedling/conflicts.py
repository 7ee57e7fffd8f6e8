"""Destination-directory conflict detection."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from . import log
from .models import ConflictEntry, DirectoryConflictReport, EntryClass
from .services.errors import io_failure

BENIGN_ENTRIES = frozenset(
    {
        ".DS_Store",
        ".git",
        ".gitignore",
        ".idea",
        "README.md",
        "package.json",
        "package-lock.json",
        "yarn-lock.json",
        "yarn.lock",
    }
)
STALE_LOG_PREFIXES = (
    "npm-debug.log",
    "yarn-error.log",
    "yarn-debug.log",
)


def is_stale_log(name: str) -> bool:
    return name.startswith(STALE_LOG_PREFIXES)


def classify_entry(name: str) -> EntryClass:
    """Classify one directory entry name.

    Example:
        >>> [classify_entry(n) for n in (".git", "npm-debug.log.1", "src")]
        ['benign', 'stale_log', 'conflict']
    """
    if name in BENIGN_ENTRIES:
        return "benign"
    if is_stale_log(name):
        return "stale_log"
    return "conflict"


def remove_entry(path: Path) -> None:
    """Remove a file, symlink, or directory tree."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink(missing_ok=True)


def scan(destination: Path) -> DirectoryConflictReport:
    """Classify the entries of ``destination`` and delete stale logs.

    Stale log entries are removed regardless of whether conflicts exist.

    Args:
        destination: Existing directory to inspect.

    Returns:
        ``DirectoryConflictReport`` with conflicting entries in listing order.
    """
    try:
        names = os.listdir(destination)
    except OSError as exc:
        raise io_failure(exc, "read directory", destination) from exc

    entries: list[ConflictEntry] = []
    removed_logs: list[str] = []
    for name in names:
        kind = classify_entry(name)
        path = destination / name
        if kind == "stale_log":
            try:
                remove_entry(path)
            except OSError as exc:
                raise io_failure(exc, "remove stale log", path) from exc
            log.debug(f"Removed stale log {name}")
            removed_logs.append(name)
        elif kind == "conflict":
            entries.append(
                ConflictEntry(
                    name=name,
                    is_directory=path.is_dir() and not path.is_symlink(),
                )
            )
    log.trace(f"Scanned {destination}: {len(entries)} conflicting entries")
    return DirectoryConflictReport(entries=tuple(entries), removed_logs=tuple(removed_logs))


def purge(destination: Path) -> tuple[str, ...]:
    """Remove every top-level entry of ``destination``.

    The directory itself is kept.

    Returns:
        Names of removed entries.
    """
    if not destination.exists():
        return ()
    removed: list[str] = []
    for path in sorted(destination.iterdir()):
        try:
            remove_entry(path)
        except OSError as exc:
            raise io_failure(exc, "remove", path) from exc
        log.debug(f"Removed {path.name}")
        removed.append(path.name)
    return tuple(removed)
