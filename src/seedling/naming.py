"""Package-name validation for new projects.

Follows the npm naming rules: errors make a name unusable for any package,
warnings only rule it out for newly published packages.
"""

from __future__ import annotations

import re
from urllib.parse import quote

from .models import NameValidation

MAX_NAME_LENGTH = 214
RESERVED_NAMES = ("node_modules", "favicon.ico")
SPECIAL_CHARACTERS = "~'!()*"
# encodeURIComponent leaves these unescaped in addition to quote()'s safe set.
_URL_SAFE_EXTRA = "!*'()"
_SCOPED_NAME_RE = re.compile(r"^(?:@([^/]+?)/)?([^/]+?)$")

CORE_MODULE_NAMES = frozenset(
    {
        "assert",
        "assert/strict",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "dns/promises",
        "domain",
        "events",
        "fs",
        "fs/promises",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "path/posix",
        "path/win32",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "readline/promises",
        "repl",
        "stream",
        "stream/consumers",
        "stream/promises",
        "stream/web",
        "string_decoder",
        "sys",
        "timers",
        "timers/promises",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "util/types",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)


def _url_friendly(value: str) -> bool:
    return quote(value, safe=_URL_SAFE_EXTRA) == value


def _name_errors(name: str) -> list[str]:
    errors: list[str] = []
    if not name:
        errors.append("name length must be greater than zero")
    if name.startswith("."):
        errors.append("name cannot start with a period")
    if name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")
    for reserved in RESERVED_NAMES:
        if name.lower() == reserved:
            errors.append(f"{reserved} is not a valid package name")
    if not _url_friendly(name):
        match = _SCOPED_NAME_RE.match(name)
        if match and match.group(1) is not None:
            scope, package = match.group(1), match.group(2)
            if package.startswith("."):
                errors.append("name cannot start with a period")
            if _url_friendly(scope) and _url_friendly(package):
                return errors
        errors.append("name can only contain URL-friendly characters")
    return errors


def _name_warnings(name: str) -> list[str]:
    warnings: list[str] = []
    if name.lower() in CORE_MODULE_NAMES:
        warnings.append(f"{name} is a core module name")
    if len(name) > MAX_NAME_LENGTH:
        warnings.append(
            f"name can no longer contain more than {MAX_NAME_LENGTH} characters"
        )
    if name.lower() != name:
        warnings.append("name can no longer contain capital letters")
    last_segment = name.split("/")[-1]
    if any(char in SPECIAL_CHARACTERS for char in last_segment):
        warnings.append(
            f'name can no longer contain special characters ("{SPECIAL_CHARACTERS}")'
        )
    return warnings


def validate_name(name: str) -> NameValidation:
    """Check ``name`` against package naming rules.

    Args:
        name: Candidate project name.

    Returns:
        ``NameValidation`` listing errors and warnings in detection order.

    Example:
        >>> validate_name("my-app").valid_for_new_packages
        True
        >>> validate_name("My App").messages
        ('name can only contain URL-friendly characters', 'name can no longer contain capital letters')
    """
    return NameValidation(
        name=name,
        errors=tuple(_name_errors(name)),
        warnings=tuple(_name_warnings(name)),
    )
