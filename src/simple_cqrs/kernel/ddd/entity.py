"""Entity base class."""

from __future__ import annotations

from simple_cqrs.kernel.types.ids import EntityId


class Entity:
    """Something with a stable identity; two entities of the same concrete
    type are equal when their ids are.  A random id is generated when none
    is given.
    """

    def __init__(self, id: EntityId | None = None) -> None:  # noqa: A002
        self._id = id if id is not None else EntityId.generate()

    @property
    def id(self) -> EntityId:
        return self._id

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}({self._id})"


__all__ = ["Entity"]
