"""Console I/O helpers for user-facing prompts."""

from __future__ import annotations

import sys
from typing import Sequence

import questionary

from .models import Template
from .services.errors import CancelledError


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def _choice_style(template: Template) -> str:
    return f"fg:ansi{template.style}" if template.style else ""


def _read(text: str) -> str:
    try:
        return input(text)
    except (EOFError, KeyboardInterrupt) as exc:
        raise CancelledError() from exc


def confirm(text: str, default: bool = False) -> bool:
    """Prompt for a yes/no confirmation.

    Args:
        text: Prompt label shown to the user.
        default: Default answer when the user presses enter.

    Returns:
        ``True`` when the user confirms.

    Raises:
        CancelledError: The prompt was aborted (Ctrl-C, end of input).
    """
    if _use_questionary():
        response = questionary.confirm(text, default=default).ask()
        if response is None:
            raise CancelledError()
        return bool(response)
    suffix = "[Y/n]" if default else "[y/N]"
    response = _read(f"{text} {suffix}: ").strip().lower()
    if response == "":
        return default
    return response in {"y", "yes"}


def select(text: str, templates: Sequence[Template]) -> str:
    """Prompt for exactly one template; no option is preselected.

    Args:
        text: Prompt label shown to the user.
        templates: Options in display order.

    Returns:
        The chosen template id.

    Raises:
        CancelledError: The prompt was aborted.
    """
    if _use_questionary():
        choices = [
            questionary.Choice(
                title=[(_choice_style(template), template.display_label)],
                value=template.id,
            )
            for template in templates
        ]
        response = questionary.select(text, choices=choices).ask()
        if response is None:
            raise CancelledError()
        return str(response)
    print(text)
    for index, template in enumerate(templates, start=1):
        print(f"  {index}) {template.display_label}")
    while True:
        value = _read(f"Choose 1-{len(templates)}: ").strip()
        if value.isdecimal() and 1 <= int(value) <= len(templates):
            return templates[int(value) - 1].id
        for template in templates:
            if value in {template.id, template.display_label}:
                return template.id
