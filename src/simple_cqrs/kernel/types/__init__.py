"""Kernel value types."""

from simple_cqrs.kernel.types.ids import EntityId

__all__ = ["EntityId"]
