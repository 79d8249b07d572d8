"""Unit tests for handler call recording."""

from __future__ import annotations

import inspect

import pytest

from simple_cqrs.testing import CallRecorder, recorded


class Target:
    @recorded
    def on_thing(self, event: object) -> str:
        return "done"


class TestRecorded:
    def test_records_and_returns(self) -> None:
        target = Target()
        event = object()
        assert target.on_thing(event) == "done"
        target.handler_calls.assert_called_once_with("on_thing", event)

    def test_keeps_wrapped_signature(self) -> None:
        assert list(inspect.signature(Target.on_thing).parameters) == ["self", "event"]

    def test_recorders_are_per_instance(self) -> None:
        a, b = Target(), Target()
        a.on_thing(1)
        assert b.__dict__.get("handler_calls") is None


class TestCallRecorder:
    def test_count_by_name_and_identity(self) -> None:
        recorder = CallRecorder()
        first, second = object(), object()
        recorder.record("on_x", first)
        recorder.record("on_x", second)
        assert recorder.count("on_x") == 2
        assert recorder.count("on_x", first) == 1
        assert recorder.count("on_y") == 0

    def test_assertions_fail_loudly(self) -> None:
        recorder = CallRecorder()
        recorder.record("on_x", 1)
        with pytest.raises(AssertionError):
            recorder.assert_not_called("on_x")
        with pytest.raises(AssertionError):
            recorder.assert_called_once_with("on_y")

    def test_clear(self) -> None:
        recorder = CallRecorder()
        recorder.record("on_x")
        recorder.clear()
        assert recorder.calls == []
