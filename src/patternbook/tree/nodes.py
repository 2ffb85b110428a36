"""Leaf and composite nodes of a component tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Union

from patternbook.exceptions import CycleError

logger = logging.getLogger(__name__)

Action = Callable[[Any], object]


def log_value(value: Any) -> None:
    """Default leaf action: log the leaf's value."""
    logger.info("%s", value)


@dataclass(frozen=True, slots=True, eq=False)
class Leaf:
    """Terminal node holding a single value.

    Leaves have no ``add`` or ``remove``; only :class:`Composite` can hold
    children. Leaves are immutable, so one leaf may be shared by several
    composites.
    """

    value: Any
    action: Action = field(default=log_value, repr=False)

    def perform_action(self) -> None:
        self.action(self.value)


class Composite:
    """Node that aggregates children and delegates the action to them in order."""

    def __init__(
        self, children: Iterable[Component] = (), name: str | None = None
    ) -> None:
        self.name = name
        self._children: list[Component] = []
        for child in children:
            self.add(child)

    def __repr__(self) -> str:
        return f"Composite(name={self.name!r}, children={len(self._children)})"

    def __len__(self) -> int:
        return len(self._children)

    @property
    def children(self) -> tuple[Component, ...]:
        return tuple(self._children)

    def add(self, child: Component) -> None:
        """Append a child.

        Raises:
            CycleError: If ``child`` is this composite or one of its ancestors.
        """
        if child is self or (isinstance(child, Composite) and child.contains(self)):
            raise CycleError(
                f"Cannot add {child!r} to {self!r}", parent=self, child=child
            )
        self._children.append(child)
        logger.debug("Added %r to %r", child, self)

    def remove(self, child: Component) -> None:
        """Remove every occurrence of ``child``, compared by identity."""
        before = len(self._children)
        self._children = [node for node in self._children if node is not child]
        if len(self._children) != before:
            logger.debug("Removed %r from %r", child, self)

    def contains(self, node: Component) -> bool:
        """Whether ``node`` is a descendant of this composite."""
        return any(descendant is node for descendant in self.iter_nodes())

    def iter_nodes(self) -> Iterator[Component]:
        """Yield every descendant depth-first, in action order."""
        for child in self._children:
            yield child
            if isinstance(child, Composite):
                yield from child.iter_nodes()

    def iter_leaves(self) -> Iterator[Leaf]:
        """Yield the leaves in the order :meth:`perform_action` visits them."""
        for node in self.iter_nodes():
            if isinstance(node, Leaf):
                yield node

    def perform_action(self) -> None:
        for child in self._children:
            child.perform_action()


Component = Union[Leaf, Composite]
