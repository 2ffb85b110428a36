"""Observer protocol definition."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class Observer(Protocol):
    """Protocol for anything that reacts to a subject's state changes.

    No base class is required: any object with a matching ``update`` method
    can be attached to a :class:`~patternbook.observer.subject.Subject`.
    """

    def update(self, state: Mapping[str, Any]) -> None:
        """Called with the full, read-only state after every change."""
        ...
