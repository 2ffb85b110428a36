"""Tests for the bundled observer implementations."""

import logging
from typing import Any, Mapping

from patternbook.observer import (
    CompositeObserver,
    FunctionObserver,
    LoggingObserver,
    NullObserver,
    RecordingObserver,
    Subject,
)


class FailingObserver:
    """Observer that raises exceptions."""

    def update(self, state: Mapping[str, Any]) -> None:
        raise ValueError("Intentional failure")


class TestNullObserver:
    def test_update_is_noop(self) -> None:
        obs = NullObserver()
        obs.update({"a": 1})


class TestFunctionObserver:
    def test_calls_callback_with_state(self) -> None:
        seen: list[dict[str, Any]] = []
        subject = Subject()
        subject.attach(FunctionObserver(lambda state: seen.append(dict(state))))

        subject.set_state({"a": 1})

        assert seen == [{"a": 1}]


class TestRecordingObserver:
    def test_last_state_before_updates(self) -> None:
        assert RecordingObserver().last_state is None


class TestLoggingObserver:
    def test_logs_state(self, caplog) -> None:
        subject = Subject()
        subject.attach(LoggingObserver(name="watcher"))

        with caplog.at_level(logging.INFO, logger="patternbook.observer.simple"):
            subject.set_state({"a": 1})

        assert "watcher received state: {'a': 1}" in caplog.text

    def test_respects_level(self, caplog) -> None:
        obs = LoggingObserver(level=logging.DEBUG)

        with caplog.at_level(logging.INFO, logger="patternbook.observer.simple"):
            obs.update({"a": 1})

        assert caplog.records == []


class TestCompositeObserver:
    def test_forwards_to_all_observers(self) -> None:
        obs1 = RecordingObserver()
        obs2 = RecordingObserver()
        composite = CompositeObserver([obs1, obs2])

        composite.update({"a": 1})

        assert obs1.history == [{"a": 1}]
        assert obs2.history == [{"a": 1}]

    def test_continues_on_observer_failure(self, caplog) -> None:
        recording = RecordingObserver()
        composite = CompositeObserver([FailingObserver(), recording])

        with caplog.at_level(logging.WARNING):
            composite.update({"a": 1})

        assert len(recording.history) == 1
        assert "FailingObserver.update raised ValueError" in caplog.text

    def test_isolates_failures_under_subject(self) -> None:
        recording = RecordingObserver()
        subject = Subject()
        subject.attach(CompositeObserver([FailingObserver(), recording]))

        subject.set_state({"a": 1})

        assert dict(recording.last_state) == {"a": 1}

    def test_add_and_remove(self) -> None:
        recording = RecordingObserver()
        composite = CompositeObserver()
        composite.add(recording)
        composite.update({"a": 1})
        composite.remove(recording)
        composite.update({"a": 2})

        assert recording.history == [{"a": 1}]

    def test_add_during_update_applies_next_update(self) -> None:
        late = RecordingObserver()
        composite = CompositeObserver()
        composite.add(FunctionObserver(lambda state: composite.add(late)))

        composite.update({"a": 1})
        assert late.history == []

        composite.update({"a": 2})
        assert late.history == [{"a": 2}]

    def test_empty_composite(self) -> None:
        composite = CompositeObserver([])
        composite.update({"a": 1})
