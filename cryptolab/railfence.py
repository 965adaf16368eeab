"""Rail fence (zigzag) transposition cipher."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from itertools import cycle

_PLACEHOLDER = "0"


def _rail_pattern(depth: int) -> Iterator[int]:
    if depth == 1:
        return cycle((0,))
    return cycle([*range(depth), *range(depth - 2, 0, -1)])


def encrypt(message: str, depth: int) -> str:
    """Encrypt ``message`` by writing it in a zigzag over ``depth`` rails.

    Rails are read top to bottom. The character ``"0"`` marks an empty cell
    of the grid, so any ``"0"`` in the message is left out of the result.
    """
    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")
    rails: list[list[str]] = [[] for _ in range(depth)]
    for char, rail in zip(message, _rail_pattern(depth)):
        rails[rail].append(char)
    return "".join(char for rail in rails for char in rail if char != _PLACEHOLDER)


def main(argv: list[str] | None = None) -> int:
    """Read a message and a depth, and print the rail fence cipher text."""
    parser = argparse.ArgumentParser(description="Rail fence cipher.")
    parser.add_argument("message", nargs="?")
    parser.add_argument("depth", nargs="?", type=int)
    args = parser.parse_args(argv)

    message = args.message
    if message is None:
        message = input("enter the message:")
    depth = args.depth
    if depth is None:
        depth = int(input("\n enter depth:"))
    print(f"encrypted message:{encrypt(message, depth)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())