"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   │   └── InvalidFlagError
    │   ├── NotFoundError
    │   │   └── UnknownFlagError
    │   └── ConflictError
    │       └── DuplicateFlagError
    └── ApplicationError     (application.py)
        └── ConfigError      (launcher_flags.config.validation)
"""

from launcher_flags.kernel.errors.application import ApplicationError
from launcher_flags.kernel.errors.base import BaseError
from launcher_flags.kernel.errors.domain import (
    ConflictError,
    DomainError,
    DuplicateFlagError,
    InvalidFlagError,
    NotFoundError,
    UnknownFlagError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "DuplicateFlagError",
    "InvalidFlagError",
    "NotFoundError",
    "UnknownFlagError",
    "ValidationError",
]
