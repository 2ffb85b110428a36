from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator


class NodeSpec(BaseModel):
    """A node in a tree manifest: a leaf ``value`` or a list of ``children``."""

    name: str | None = None
    value: Any = None
    children: list[NodeSpec] | None = None

    @model_validator(mode="after")
    def validate_kind(self) -> NodeSpec:
        has_value = "value" in self.model_fields_set
        if has_value and self.children is not None:
            raise ValueError("Node cannot have both a value and children")
        if not has_value and self.children is None:
            raise ValueError("Node needs either a value or children")
        return self

    @property
    def is_leaf(self) -> bool:
        return self.children is None


class TreeManifest(BaseModel):
    """The tree.yaml schema."""

    name: str
    version: str = "1.0"
    root: NodeSpec
