"""Convention-based event handler resolution for aggregate roots.

An aggregate applies an event of class ``OrderPlaced`` through a method named
``on_order_placed`` taking exactly one argument besides ``self``.  Any
visibility is accepted::

    class Order(AggregateRoot):
        def on_order_placed(self, event: OrderPlaced) -> None: ...      # public
        def _on_order_shipped(self, event: OrderShipped) -> None: ...   # protected
        def __on_order_cancelled(self, event: OrderCancelled) -> None:  # private
            ...

The mapping from event type to handler is computed once per aggregate class
(see :meth:`HandlerResolver.for_type`); dispatching an event is a dict lookup
followed by a ``getattr`` on the instance, so overrides in subclasses and
instance-level replacements are honoured.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import re
import weakref
from typing import Any, Callable, Mapping

from simple_cqrs.kernel.errors.domain import AmbiguousHandlerError
from simple_cqrs.observability.logging import get_logger

DEFAULT_HANDLER_PREFIX = "on_"

_WORD_START = re.compile(r"(.)([A-Z][a-z]+)")
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_DOTTED_NAME = re.compile(r"[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*")
_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)

_log = get_logger(__name__)


@functools.lru_cache(maxsize=1024)
def event_key(type_name: str) -> str:
    """Return the snake_case key for an event class name.

    ``"OrderPlaced"`` -> ``"order_placed"``, ``"HTTPRequestSent"`` ->
    ``"http_request_sent"``.
    """
    words = _WORD_START.sub(r"\1_\2", type_name)
    return _LOWER_UPPER.sub(r"\1_\2", words).lower()


def handler_name_for(event_type: type, prefix: str = DEFAULT_HANDLER_PREFIX) -> str:
    """Return the public handler name an aggregate would use for *event_type*."""
    return f"{prefix}{event_key(event_type.__name__)}"


@dataclasses.dataclass(frozen=True)
class HandlerBinding:
    """One resolved handler: which attribute applies which event key."""

    event_key: str
    attribute: str
    owner: str
    visibility: str
    annotation: Any = None

    def accepts(self, event_type: type) -> bool:
        """Return ``True`` when the handler's parameter admits *event_type* exactly."""
        if self.annotation is None:
            return True
        if isinstance(self.annotation, type):
            return self.annotation is event_type
        declared = _annotation_name(self.annotation)
        return declared is None or declared == event_type.__name__


def _annotation_name(annotation: Any) -> str | None:
    if isinstance(annotation, type):
        return annotation.__name__
    if isinstance(annotation, str):
        text = annotation.strip("'\" ")
        if _DOTTED_NAME.fullmatch(text):
            return text.rsplit(".", 1)[-1]
    # unions, generics and other expressions name no single event type
    return None


def _split_name(name: str, owner: type, prefix: str) -> tuple[str, str] | None:
    """Return ``(event_key, visibility)`` for a handler-looking attribute name."""
    mangled = f"_{owner.__name__.lstrip('_')}__{prefix}"
    for start, visibility in (
        (mangled, "private"),
        (f"_{prefix}", "protected"),
        (prefix, "public"),
    ):
        if name.startswith(start):
            key = name[len(start):]
            return (key, visibility) if key else None
    return None


def _single_parameter(func: Callable[..., Any]) -> inspect.Parameter | None:
    """Return the only parameter after ``self``, or ``None`` when arity differs."""
    try:
        params = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        return None
    if len(params) != 2 or any(p.kind not in _POSITIONAL for p in params):
        return None
    return params[1]


def _binding_for(
    name: str,
    value: Any,
    owner: type,
    prefix: str,
) -> HandlerBinding | None:
    parsed = _split_name(name, owner, prefix)
    if parsed is None or not inspect.isfunction(value):
        return None
    key, visibility = parsed
    param = _single_parameter(value)
    if param is None:
        return None
    annotation = None if param.annotation is inspect.Parameter.empty else param.annotation
    declared = _annotation_name(annotation)
    if declared is not None and event_key(declared) != key:
        # annotated with some other event type: never applicable under this name
        return None
    return HandlerBinding(
        event_key=key,
        attribute=name,
        owner=owner.__qualname__,
        visibility=visibility,
        annotation=annotation,
    )


class HandlerResolver:
    """Dispatch table for one aggregate class.

    Table rules, applied while walking the MRO from the most-derived class:

    * a name redefined lower in the hierarchy shadows its ancestors, even
      when the redefinition does not qualify as a handler;
    * only plain functions with exactly one parameter besides ``self`` are
      candidates;
    * the most-derived class contributing a candidate for an event key wins;
    * one class contributing two candidates for the same key (for example
      ``on_x`` and ``_on_x``) raises :class:`AmbiguousHandlerError`.
    """

    _cache: "weakref.WeakKeyDictionary[type, dict[str, HandlerResolver]]" = (
        weakref.WeakKeyDictionary()
    )

    def __init__(
        self,
        aggregate_type: type,
        bindings: Mapping[str, HandlerBinding],
        prefix: str = DEFAULT_HANDLER_PREFIX,
    ) -> None:
        self._aggregate_type = aggregate_type
        self._bindings = dict(bindings)
        self._prefix = prefix

    @classmethod
    def build(cls, aggregate_type: type, prefix: str = DEFAULT_HANDLER_PREFIX) -> "HandlerResolver":
        """Introspect *aggregate_type* and return a fresh resolver (uncached)."""
        seen: set[str] = set()
        bindings: dict[str, HandlerBinding] = {}
        for klass in aggregate_type.__mro__:
            if klass is object:
                continue
            found: dict[str, list[HandlerBinding]] = {}
            for name, value in vars(klass).items():
                if name in seen:
                    continue
                seen.add(name)
                binding = _binding_for(name, value, klass, prefix)
                if binding is not None:
                    found.setdefault(binding.event_key, []).append(binding)
            for key, candidates in found.items():
                if key in bindings:
                    continue
                if len(candidates) > 1:
                    raise AmbiguousHandlerError(
                        aggregate_type.__qualname__,
                        key,
                        [c.attribute for c in candidates],
                    )
                bindings[key] = candidates[0]
        return cls(aggregate_type, bindings, prefix)

    @classmethod
    def for_type(cls, aggregate_type: type, prefix: str = DEFAULT_HANDLER_PREFIX) -> "HandlerResolver":
        """Return the cached resolver for *aggregate_type*, building it on first use."""
        per_prefix = cls._cache.setdefault(aggregate_type, {})
        resolver = per_prefix.get(prefix)
        if resolver is None:
            resolver = cls.build(aggregate_type, prefix)
            per_prefix[prefix] = resolver
        return resolver

    @property
    def aggregate_type(self) -> type:
        return self._aggregate_type

    @property
    def bindings(self) -> Mapping[str, HandlerBinding]:
        return dict(self._bindings)

    def binding_for(self, event_type: type) -> HandlerBinding | None:
        binding = self._bindings.get(event_key(event_type.__name__))
        if binding is None or not binding.accepts(event_type):
            return None
        return binding

    def resolve(self, aggregate: Any, event: Any) -> Callable[[Any], Any] | None:
        """Return the bound handler for *event* on *aggregate*, or ``None``."""
        binding = self.binding_for(type(event))
        if binding is None:
            return None
        return getattr(aggregate, binding.attribute)

    def dispatch(self, aggregate: Any, event: Any) -> bool:
        """Invoke the handler for *event*; return whether one was found.

        A missing handler is not an error.  Exceptions raised by the handler
        propagate unchanged.
        """
        handler = self.resolve(aggregate, event)
        if handler is None:
            _log.debug(
                "handler_not_found",
                aggregate_type=self._aggregate_type.__name__,
                event_type=type(event).__name__,
            )
            return False
        handler(event)
        _log.debug(
            "handler_dispatched",
            aggregate_type=self._aggregate_type.__name__,
            event_type=type(event).__name__,
        )
        return True

    def __repr__(self) -> str:  # pragma: no cover
        return f"HandlerResolver({self._aggregate_type.__name__}, keys={sorted(self._bindings)})"


__all__ = [
    "DEFAULT_HANDLER_PREFIX",
    "HandlerBinding",
    "HandlerResolver",
    "event_key",
    "handler_name_for",
]
