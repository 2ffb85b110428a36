"""patternbook: working implementations of the Observer and Composite patterns."""

from patternbook.exceptions import CycleError, PatternbookError, TreeError
from patternbook.observer import (
    CompositeObserver,
    FunctionObserver,
    LoggingObserver,
    NullObserver,
    Observer,
    RecordingObserver,
    Subject,
)
from patternbook.tree import (
    Action,
    Component,
    Composite,
    Leaf,
    NodeSpec,
    TreeManifest,
    build_tree,
    load_manifest,
    load_tree,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Subject",
    "Observer",
    "NullObserver",
    "FunctionObserver",
    "RecordingObserver",
    "LoggingObserver",
    "CompositeObserver",
    "Action",
    "Component",
    "Leaf",
    "Composite",
    "NodeSpec",
    "TreeManifest",
    "build_tree",
    "load_manifest",
    "load_tree",
    "PatternbookError",
    "TreeError",
    "CycleError",
]
