"""Observer pattern: a subject that notifies observers of state changes."""

from patternbook.observer.composite import CompositeObserver
from patternbook.observer.null import NullObserver
from patternbook.observer.protocol import Observer
from patternbook.observer.simple import (
    FunctionObserver,
    LoggingObserver,
    RecordingObserver,
)
from patternbook.observer.subject import Subject

__all__ = [
    "Observer",
    "Subject",
    "NullObserver",
    "FunctionObserver",
    "RecordingObserver",
    "LoggingObserver",
    "CompositeObserver",
]
