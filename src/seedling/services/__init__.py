from .base import BaseService
from .errors import (
    CancelledError,
    DependencyMissingError,
    InvalidNameError,
    InvalidTemplateError,
    IoFailedError,
    MissingTemplateError,
    ServiceFailure,
    UnknownTemplateError,
    ValidationFailedError,
)

__all__ = [
    "BaseService",
    "CancelledError",
    "DependencyMissingError",
    "InvalidNameError",
    "InvalidTemplateError",
    "IoFailedError",
    "MissingTemplateError",
    "ServiceFailure",
    "UnknownTemplateError",
    "ValidationFailedError",
]
