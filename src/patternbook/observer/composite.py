"""Composite observer for fan-out to multiple observers."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from patternbook.observer.protocol import Observer

logger = logging.getLogger(__name__)


class CompositeObserver:
    """Fan-out observer that forwards updates to multiple child observers.

    If a child observer raises an exception, it is logged but does not
    prevent other observers from receiving the update.
    """

    def __init__(self, observers: Sequence[Observer] = ()) -> None:
        self._observers = list(observers)

    def add(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove(self, observer: Observer) -> None:
        self._observers = [obs for obs in self._observers if obs is not observer]

    def update(self, state: Mapping[str, Any]) -> None:
        for obs in list(self._observers):
            try:
                obs.update(state)
            except Exception as exc:
                logger.warning(
                    "Observer %s.update raised %s: %s",
                    obs.__class__.__name__,
                    type(exc).__name__,
                    exc,
                )
