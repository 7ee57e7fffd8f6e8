"""Project scaffold service modules."""

from .scaffold_project import (
    ScaffoldProjectOutcome,
    ScaffoldProjectRequest,
    ScaffoldProjectService,
)

__all__ = [
    "ScaffoldProjectOutcome",
    "ScaffoldProjectRequest",
    "ScaffoldProjectService",
]
