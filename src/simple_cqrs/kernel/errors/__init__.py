"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── AmbiguousHandlerError
    └── ApplicationError         (application.py)
        └── ConfigError          (simple_cqrs.config.errors)
"""

from simple_cqrs.kernel.errors.application import ApplicationError
from simple_cqrs.kernel.errors.base import BaseError
from simple_cqrs.kernel.errors.domain import AmbiguousHandlerError, DomainError

__all__ = [
    "AmbiguousHandlerError",
    "ApplicationError",
    "BaseError",
    "DomainError",
]
