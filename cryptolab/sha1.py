"""The SHA-1 message digest."""

from __future__ import annotations

import argparse
import struct

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


def _rotate_left(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    schedule = list(struct.unpack(">16I", block))
    for t in range(16, 80):
        schedule.append(
            _rotate_left(schedule[t - 3] ^ schedule[t - 8] ^ schedule[t - 14] ^ schedule[t - 16], 1)
        )
    a, b, c, d, e = state
    for t, word in enumerate(schedule):
        if t < 20:
            mixed, constant = (b & c) | (~b & d), 0x5A827999
        elif t < 40:
            mixed, constant = b ^ c ^ d, 0x6ED9EBA1
        elif t < 60:
            mixed, constant = (b & c) | (b & d) | (c & d), 0x8F1BBCDC
        else:
            mixed, constant = b ^ c ^ d, 0xCA62C1D6
        temp = (_rotate_left(a, 5) + (mixed & _MASK) + e + constant + word) & _MASK
        a, b, c, d, e = temp, a, _rotate_left(b, 30), c, d
    return tuple((old + new) & _MASK for old, new in zip(state, (a, b, c, d, e)))


def sha1(message: bytes) -> tuple[int, int, int, int, int]:
    """Return the SHA-1 hash of ``message`` as five 32-bit words."""
    data = memoryview(message).tobytes()
    padding = b"\x80" + b"\x00" * ((55 - len(data)) % _BLOCK_SIZE)
    data += padding + struct.pack(">Q", (len(data) * 8) & 0xFFFFFFFFFFFFFFFF)
    state: tuple[int, ...] = _INITIAL_STATE
    for start in range(0, len(data), _BLOCK_SIZE):
        state = _compress(state, data[start:start + _BLOCK_SIZE])
    return tuple(state)  # type: ignore[return-value]


def main(argv: list[str] | None = None) -> int:
    """Read one word and print its SHA-1 hash."""
    parser = argparse.ArgumentParser(description="Compute the SHA-1 hash of a word.")
    parser.add_argument("message", nargs="?")
    args = parser.parse_args(argv)

    message = args.message
    if message is None:
        words = input("\nEnter the message : ").split()
        message = words[0] if words else ""
    words_out = sha1(message.encode("utf-8"))
    print("SHA-1 Hash: " + "".join(f"{word:08x}" for word in words_out))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())