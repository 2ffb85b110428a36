"""Composite pattern: leaves and composites sharing one action."""

from patternbook.tree.loader import build_tree, load_manifest, load_tree
from patternbook.tree.nodes import Action, Component, Composite, Leaf, log_value
from patternbook.tree.schema import NodeSpec, TreeManifest

__all__ = [
    "Action",
    "Component",
    "Leaf",
    "Composite",
    "log_value",
    "NodeSpec",
    "TreeManifest",
    "build_tree",
    "load_manifest",
    "load_tree",
]
