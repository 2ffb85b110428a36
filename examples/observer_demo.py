#!/usr/bin/env python3
"""Demo script for the Observer pattern.

A subject holds a small dashboard state. A logging observer prints every change,
a recorder keeps the history, and a deliberately broken observer shows how a
CompositeObserver keeps the others running.

Run with: python examples/observer_demo.py --updates 3
"""

import argparse
import logging
from typing import Any, Mapping

from patternbook import CompositeObserver, LoggingObserver, RecordingObserver, Subject


class FlakyObserver:
    """An observer that fails on every update."""

    def update(self, state: Mapping[str, Any]) -> None:
        raise RuntimeError("display disconnected")


def run_demo(updates: int) -> None:
    subject = Subject()
    recorder = RecordingObserver()

    subject.attach(LoggingObserver(name="console"))
    subject.attach(recorder)
    subject.attach(
        CompositeObserver([FlakyObserver(), LoggingObserver(name="backup")])
    )

    for tick in range(1, updates + 1):
        subject.set_state({"tick": tick, f"reading_{tick}": tick * 10})

    print(f"\nRecorded {len(recorder.history)} snapshots")
    print(f"Final state: {dict(subject.state)}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Observer pattern demo")
    parser.add_argument(
        "--updates",
        type=int,
        default=3,
        help="Number of state changes to publish",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging from the subject",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    run_demo(args.updates)


if __name__ == "__main__":
    main()
