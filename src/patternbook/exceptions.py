"""Exception hierarchy for patternbook."""

from __future__ import annotations

from typing import Any


class PatternbookError(Exception):
    """Base exception for all patternbook errors."""


class TreeError(PatternbookError):
    """Error building or loading a composite tree."""


class CycleError(TreeError):
    """Adding a node would make a composite its own descendant."""

    def __init__(self, message: str, parent: Any, child: Any) -> None:
        super().__init__(message)
        self.parent = parent
        self.child = child
