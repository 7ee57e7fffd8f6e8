"""Service failure contracts.

Services return typed outcomes on success and raise ServiceFailure on expected
domain/runtime failures. Programmer bugs raise normal exceptions. Operator
cancellation is not a failure and is signalled with CancelledError.
"""

from __future__ import annotations

import errno
from pathlib import Path
from typing import Literal, Sequence

ServiceFailureCode = Literal[
    "validation_failed",
    "dependency_missing",
    "io_failed",
]


class ServiceFailure(Exception):
    """Expected service failure: validation or runtime error.

    Raised by services instead of returning a failure value. Use ``raise
    ServiceFailure(...) from exc`` to chain a causing exception; it is
    available as ``__cause__``. Callers catch ServiceFailure and handle per
    their interface (the CLI prints and exits non-zero).
    """

    def __init__(
        self,
        code: ServiceFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recovery_hint = recovery_hint


class ValidationFailedError(ServiceFailure):
    """Validation failed (invalid input, constraint violation)."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("validation_failed", message, recovery_hint=recovery_hint)


class DependencyMissingError(ServiceFailure):
    """Required resource is missing or unavailable."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("dependency_missing", message, recovery_hint=recovery_hint)


class IoFailedError(ServiceFailure):
    """I/O operation failed (delete, copy, write)."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        reason: str = "other",
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__("io_failed", message, recovery_hint=recovery_hint)
        self.path = path
        self.reason = reason


class InvalidNameError(ValidationFailedError):
    """Project name violates package naming rules."""

    def __init__(self, name: str, messages: Sequence[str]) -> None:
        super().__init__(
            f'Cannot create a project named "{name}" because of npm naming restrictions',
            recovery_hint="Please choose a different project name.",
        )
        self.name = name
        self.messages = tuple(messages)


class UnknownTemplateError(ValidationFailedError):
    """Requested template id is not in the catalog."""

    def __init__(self, template_id: str, known: Sequence[str]) -> None:
        super().__init__(
            f"unknown template: {template_id}",
            recovery_hint="choose one of: " + ", ".join(known),
        )
        self.template_id = template_id


class InvalidTemplateError(ValidationFailedError):
    """Template descriptor document is unreadable or has the wrong shape."""

    def __init__(self, descriptor_path: Path, detail: str) -> None:
        super().__init__(f"invalid template descriptor {descriptor_path}: {detail}")
        self.descriptor_path = descriptor_path


class MissingTemplateError(DependencyMissingError):
    """Template root lacks the file tree that gets copied."""

    def __init__(self, template_dir: Path) -> None:
        super().__init__(f"Could not locate supplied template: {template_dir}")
        self.template_dir = template_dir


class CancelledError(Exception):
    """Operator declined a prompt or aborted it."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)
        self.message = message


_OS_ERROR_REASONS = {
    errno.EACCES: ("permission_denied", "permission denied"),
    errno.EPERM: ("permission_denied", "permission denied"),
    errno.EROFS: ("permission_denied", "read-only file system"),
    errno.ENOSPC: ("disk_full", "no space left on device"),
    errno.EDQUOT: ("disk_full", "disk quota exceeded"),
    errno.ENAMETOOLONG: ("path_too_long", "path too long"),
}


def io_failure(exc: OSError, action: str, path: Path | str | None = None) -> IoFailedError:
    """Classify an ``OSError`` into an ``IoFailedError``.

    Args:
        exc: Raised operating-system error.
        action: Short verb phrase describing the failed step.
        path: Path the step operated on; defaults to ``exc.filename``.

    Returns:
        ``IoFailedError`` naming the failure class. Chain it with
        ``raise ... from exc``.

    Example:
        >>> err = io_failure(PermissionError(errno.EACCES, "denied"), "write", "/x")
        >>> (err.reason, err.message)
        ('permission_denied', 'failed to write /x: permission denied')
    """
    target = path if path is not None else exc.filename
    reason, detail = _OS_ERROR_REASONS.get(
        exc.errno if exc.errno is not None else -1,
        ("other", exc.strerror or str(exc)),
    )
    location = f" {target}" if target is not None else ""
    return IoFailedError(
        f"failed to {action}{location}: {detail}",
        path=Path(target) if target is not None else None,
        reason=reason,
    )
