"""Ready-made observers for common reactions."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)


class FunctionObserver:
    """Adapts a plain callable into an observer."""

    def __init__(self, callback: Callable[[Mapping[str, Any]], object]) -> None:
        self._callback = callback

    def update(self, state: Mapping[str, Any]) -> None:
        self._callback(state)


class RecordingObserver:
    """Keeps every state snapshot it receives, oldest first."""

    def __init__(self) -> None:
        self.history: list[Mapping[str, Any]] = []

    @property
    def last_state(self) -> Mapping[str, Any] | None:
        return self.history[-1] if self.history else None

    def update(self, state: Mapping[str, Any]) -> None:
        self.history.append(state)


class LoggingObserver:
    """Writes each update to the log.

    Args:
        name: Label included in every log line.
        level: Logging level used for updates.
    """

    def __init__(self, name: str = "observer", level: int = logging.INFO) -> None:
        self.name = name
        self.level = level

    def update(self, state: Mapping[str, Any]) -> None:
        logger.log(self.level, "%s received state: %s", self.name, dict(state))
