#!/usr/bin/env python3
"""Demo script for the Composite pattern.

Builds root -> [foo, bar, baz, branch -> [hello, world]] by hand, runs the
action, removes the branch, and runs it again. With --manifest, the tree is
loaded from a tree.yaml file instead.

Run with: python examples/composite_demo.py
"""

import argparse
from pathlib import Path
from typing import Any

from patternbook import Component, Composite, Leaf, load_tree


def shout(value: Any) -> None:
    print(str(value).upper())


def build_sample() -> tuple[Composite, Composite]:
    branch = Composite([Leaf("hello", shout), Leaf("world", shout)], name="branch")
    root = Composite(name="root")
    for value in ("foo", "bar", "baz"):
        root.add(Leaf(value, shout))
    root.add(branch)
    return root, branch


def run_demo(manifest: Path | None) -> None:
    if manifest is not None:
        tree: Component = load_tree(manifest, action=shout)
        print(f"Loaded tree from {manifest}:")
        tree.perform_action()
        return

    root, branch = build_sample()
    print("Full tree:")
    root.perform_action()

    root.remove(branch)
    print("\nWithout branch:")
    root.perform_action()


def main() -> None:
    parser = argparse.ArgumentParser(description="Composite pattern demo")
    parser.add_argument(
        "--manifest",
        type=Path,
        default=None,
        help="Path to a tree.yaml file or a directory containing one",
    )
    args = parser.parse_args()

    run_demo(args.manifest)


if __name__ == "__main__":
    main()
