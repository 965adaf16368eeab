"""The DES initial permutation (IP) and its inverse on 64-bit blocks."""

from __future__ import annotations

import argparse

_BLOCK_BITS = 64
_BLOCK_LIMIT = 1 << _BLOCK_BITS
_ROW = 8


def _build_initial_permutation() -> tuple[int, ...]:
    # Each output row gathers one input column, read from the last input row
    # upwards: even-numbered columns first, then the odd-numbered ones.
    column_tops = (
        *range(_BLOCK_BITS - _ROW + 2, _BLOCK_BITS + 1, 2),
        *range(_BLOCK_BITS - _ROW + 1, _BLOCK_BITS, 2),
    )
    return tuple(top - _ROW * step for top in column_tops for step in range(_ROW))


def _invert(table: tuple[int, ...]) -> tuple[int, ...]:
    inverse = [0] * len(table)
    for position, source_bit in enumerate(table, start=1):
        inverse[source_bit - 1] = position
    return tuple(inverse)


_INITIAL_PERMUTATION = _build_initial_permutation()
_INITIAL_PERMUTATION_INVERSE = _invert(_INITIAL_PERMUTATION)

_DEFAULT_BLOCK = 0x0123456789ABCDEF


def _permute(block: int, table: tuple[int, ...]) -> int:
    if not 0 <= block < _BLOCK_LIMIT:
        raise ValueError(f"block must be an unsigned 64-bit integer, got {block!r}")
    result = 0
    for position, source_bit in enumerate(table):
        bit = (block >> (_BLOCK_BITS - source_bit)) & 1
        result |= bit << (_BLOCK_BITS - 1 - position)
    return result


def initial_permutation(block: int) -> int:
    """Apply the DES initial permutation to a 64-bit block."""
    return _permute(block, _INITIAL_PERMUTATION)


def initial_permutation_inverse(block: int) -> int:
    """Apply the inverse of the DES initial permutation to a 64-bit block."""
    return _permute(block, _INITIAL_PERMUTATION_INVERSE)


def main(argv: list[str] | None = None) -> int:
    """Show a block before and after the permutation and its inverse."""
    parser = argparse.ArgumentParser(
        description="Apply the DES initial permutation and its inverse."
    )
    parser.add_argument(
        "block",
        nargs="?",
        type=lambda text: int(text, 16),
        default=_DEFAULT_BLOCK,
        help="64-bit block in hexadecimal",
    )
    args = parser.parse_args(argv)

    block = args.block
    print(f"Original Plaintext: {block:016X}")
    block = initial_permutation(block)
    print(f"After Initial Permutation: {block:016X}")
    block = initial_permutation_inverse(block)
    print(f"After Initial Permutation Inverse: {block:016X}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())