"""Subject holding observable state."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from patternbook.observer.protocol import Observer

logger = logging.getLogger(__name__)


class Subject:
    """Holds a state mapping and notifies attached observers when it changes.

    The state is stored as a frozen snapshot. Every call to :meth:`set_state`
    builds a new snapshot, so a mapping handed to an observer never changes
    after the fact.

    Notification is synchronous and unguarded: if an observer raises, the
    remaining observers are skipped and the exception reaches the caller.
    Wrap observers in a :class:`CompositeObserver` to isolate failures.
    """

    def __init__(self) -> None:
        self._state: Mapping[str, Any] = MappingProxyType({})
        self._observers: list[Observer] = []

    @property
    def state(self) -> Mapping[str, Any]:
        """Current read-only state snapshot."""
        return self._state

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        """Register an observer. Duplicates are allowed."""
        self._observers.append(observer)
        logger.debug("Attached %s", observer.__class__.__name__)

    def detach(self, observer: Observer) -> None:
        """Remove every registration of ``observer``, compared by identity."""
        before = len(self._observers)
        self._observers = [obs for obs in self._observers if obs is not observer]
        removed = before - len(self._observers)
        if removed:
            logger.debug(
                "Detached %s (%d registrations)", observer.__class__.__name__, removed
            )

    def set_state(
        self, partial_state: Mapping[str, Any] | None = None, /, **changes: Any
    ) -> None:
        """Shallow-merge new values into the state and notify observers.

        Args:
            partial_state: Keys to add or overwrite.
            **changes: Extra keys, applied after ``partial_state``. Any string
                is accepted as a key, including ``self`` and ``partial_state``.
        """
        merged = dict(self._state)
        if partial_state:
            merged.update(partial_state)
        merged.update(changes)
        self._state = MappingProxyType(merged)
        self.notify()

    def notify(self) -> None:
        """Send the current state to every observer in attachment order."""
        observers = list(self._observers)
        logger.debug("Notifying %d observers", len(observers))
        for observer in observers:
            observer.update(self._state)
