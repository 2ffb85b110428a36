from __future__ import annotations

from pathlib import Path

import yaml

from patternbook.exceptions import TreeError
from patternbook.tree.nodes import Action, Component, Composite, Leaf, log_value
from patternbook.tree.schema import NodeSpec, TreeManifest


def build_tree(spec: NodeSpec, action: Action | None = None) -> Component:
    """Build nodes from a validated spec, giving every leaf ``action``."""
    action = action or log_value
    if spec.is_leaf:
        return Leaf(spec.value, action=action)
    return Composite(
        (build_tree(child, action) for child in spec.children or []),
        name=spec.name,
    )


def _find_manifest(path: Path) -> Path:
    if path.is_file():
        return path
    if not path.is_dir():
        raise TreeError(f"Tree path does not exist: {path}")

    for filename in ("tree.yaml", "tree.yml"):
        candidate = path / filename
        if candidate.exists():
            return candidate
    raise TreeError(f"Tree manifest not found in {path}")


def load_manifest(path: str | Path) -> TreeManifest:
    """Read and validate a tree manifest.

    Args:
        path: A manifest file, or a directory containing tree.yaml

    Raises:
        TreeError: If the manifest is missing, unreadable, or invalid
    """
    manifest_path = _find_manifest(Path(path))

    try:
        with manifest_path.open("r", encoding="utf-8") as file_handle:
            data = yaml.safe_load(file_handle)
    except Exception as exc:
        raise TreeError(f"Failed to read tree manifest: {exc}") from exc

    if not isinstance(data, dict):
        raise TreeError(f"Tree manifest must be a mapping: {manifest_path}")

    try:
        return TreeManifest(**data)
    except Exception as exc:
        raise TreeError(f"Invalid tree manifest: {exc}") from exc


def load_tree(path: str | Path, action: Action | None = None) -> Component:
    """Load a manifest and build its tree.

    Args:
        path: A manifest file, or a directory containing tree.yaml
        action: Callable run with each leaf's value (defaults to logging it)

    Returns:
        The root node

    Raises:
        TreeError: If the manifest is missing, unreadable, or invalid
    """
    manifest = load_manifest(path)
    return build_tree(manifest.root, action)
