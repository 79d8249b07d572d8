"""Testing – call recording for aggregate handlers.

Decorate handlers on a test aggregate with :func:`recorded`; every call is
logged on the instance's :class:`CallRecorder` (created on first use as
``self.handler_calls``)::

    class SpyOrder(Order):
        @recorded
        def on_order_placed(self, event: OrderPlaced) -> None:
            super().on_order_placed(event)

    order = SpyOrder()
    order.apply_event(event)
    order.handler_calls.assert_called_once_with("on_order_placed", event)

The wrapper keeps the wrapped signature, so arity-based handler resolution
sees the original parameters.
"""
from __future__ import annotations

import dataclasses
import functools
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

RECORDER_ATTRIBUTE = "handler_calls"


@dataclasses.dataclass(frozen=True)
class HandlerCall:
    name: str
    args: tuple[Any, ...]

    def matches(self, name: str, *args: Any) -> bool:
        """Compare by name and argument identity."""
        return self.name == name and len(self.args) == len(args) and all(
            a is b for a, b in zip(self.args, args)
        )


class CallRecorder:
    """Ordered record of handler invocations."""

    def __init__(self) -> None:
        self._calls: list[HandlerCall] = []

    def record(self, name: str, *args: Any) -> None:
        self._calls.append(HandlerCall(name, args))

    @property
    def calls(self) -> list[HandlerCall]:
        return list(self._calls)

    def count(self, name: str, *args: Any) -> int:
        """Number of calls to *name*; restricted to identical *args* when given."""
        if not args:
            return sum(1 for c in self._calls if c.name == name)
        return sum(1 for c in self._calls if c.matches(name, *args))

    def assert_called_once_with(self, name: str, *args: Any) -> None:
        times = self.count(name, *args)
        assert times == 1, f"expected {name} to be called once with {args!r}, called {times} times"

    def assert_not_called(self, name: str) -> None:
        times = self.count(name)
        assert times == 0, f"expected {name} not to be called, called {times} times"

    def clear(self) -> None:
        self._calls.clear()


def recorder_for(instance: Any) -> CallRecorder:
    """Return (creating if needed) the recorder attached to *instance*."""
    recorder = instance.__dict__.get(RECORDER_ATTRIBUTE)
    if recorder is None:
        recorder = CallRecorder()
        setattr(instance, RECORDER_ATTRIBUTE, recorder)
    return recorder


def recorded(func: F) -> F:
    """Record each call to the decorated method, then run its body."""

    @functools.wraps(func)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        recorder_for(self).record(func.__name__, *args, *kwargs.values())
        return func(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


__all__ = ["CallRecorder", "HandlerCall", "recorded", "recorder_for"]
