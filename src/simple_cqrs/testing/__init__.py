"""Testing support – spies for asserting on aggregate handler calls."""

from simple_cqrs.testing.spies import CallRecorder, HandlerCall, recorded

__all__ = ["CallRecorder", "HandlerCall", "recorded"]
