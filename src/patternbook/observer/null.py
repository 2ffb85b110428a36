"""Null observer implementation (no-op)."""

from __future__ import annotations

from typing import Any, Mapping


class NullObserver:
    """Observer that ignores every update.

    Useful as an explicit placeholder where an observer is required.
    """

    def update(self, state: Mapping[str, Any]) -> None:
        pass
