"""Kernel – framework-agnostic building blocks."""

from simple_cqrs.kernel.errors import (
    AmbiguousHandlerError,
    ApplicationError,
    BaseError,
    DomainError,
)

__all__ = [
    "AmbiguousHandlerError",
    "ApplicationError",
    "BaseError",
    "DomainError",
]
