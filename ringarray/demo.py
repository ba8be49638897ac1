"""Small demonstrations of the circular array."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from ringarray.algorithms import copy_to, erase
from ringarray.array import CircularArray


def _flag(value: bool) -> int:
    return int(value)


def _run_array() -> None:
    ring = CircularArray(3)

    ring.push_front(1)
    ring.push_back(2, 3)
    ring.push_front(4)

    ring.sort()

    print(f"size: {len(ring)}")
    print(f"full: {_flag(ring.full)}")
    for value in ring:
        print(value)

    ring.push_back(5, 10)

    print(f"size: {len(ring)}")
    print(f"full: {_flag(ring.full)}")
    for segment in ring.split():
        for value in segment:
            print(value)

    ring.erase(1)

    print(f"size: {len(ring)}")
    print(f"full: {_flag(ring.full)}")
    for value in ring:
        print(value)

    print(f"{len(list(ring))} : {len(ring)} {ring[0]}")

    erase(ring, 10, 9, 8)


def _randomize(rng: random.Random, *arrays: CircularArray) -> None:
    for array in arrays:
        array.resize(rng.randrange(array.capacity) + 1)
        array.clear()


def _run_copy(seed: Optional[int]) -> None:
    rng = random.Random(seed)
    source = CircularArray(100)
    target = CircularArray(100)

    _randomize(rng, source, target)

    source.resize(source.capacity)
    source.assign(range(source.capacity))

    buffer = copy_to(source)
    target.append(buffer)
    if source != target:
        raise RuntimeError("copied array differs from its source")

    for value in reversed(target):
        print(value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the demonstrations and print its output."""
    parser = argparse.ArgumentParser(description="Circular array demonstrations.")
    parser.add_argument(
        "program", nargs="?", choices=("array", "copy"), default="array"
    )
    parser.add_argument("--seed", type=int, default=None)
    options = parser.parse_args(argv)

    if options.program == "copy":
        _run_copy(options.seed)
    else:
        _run_array()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())