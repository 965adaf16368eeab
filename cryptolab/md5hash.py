"""The MD5 message digest, computed incrementally."""

from __future__ import annotations

import argparse
import struct

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

_CONSTANTS = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_DEFAULT_MESSAGE = "Hello, world!"


def _rotate_left(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for step in range(64):
        round_index = step // 16
        if round_index == 0:
            mixed = (b & c) | (~b & d)
            word = step
        elif round_index == 1:
            mixed = (b & d) | (c & ~d)
            word = (5 * step + 1) % 16
        elif round_index == 2:
            mixed = b ^ c ^ d
            word = (3 * step + 5) % 16
        else:
            mixed = c ^ (b | (~d & _MASK))
            word = (7 * step) % 16
        total = (a + (mixed & _MASK) + words[word] + _CONSTANTS[step]) & _MASK
        a, d, c = d, c, b
        b = (b + _rotate_left(total, _SHIFTS[step])) & _MASK
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


class MD5:
    """Incremental MD5 hasher; ``digest`` may be called at any time."""

    digest_size = 16
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = bytearray()
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        chunk = memoryview(data).tobytes()
        self._length += len(chunk)
        self._buffer += chunk
        full = len(self._buffer) - len(self._buffer) % _BLOCK_SIZE
        for start in range(0, full, _BLOCK_SIZE):
            self._state = _compress(self._state, bytes(self._buffer[start:start + _BLOCK_SIZE]))
        del self._buffer[:full]

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        tail = bytes(self._buffer)
        padding = b"\x80" + b"\x00" * ((55 - len(tail)) % _BLOCK_SIZE)
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail += padding + struct.pack("<Q", bit_length)
        state = self._state
        for start in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, tail[start:start + _BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def md5(data: bytes) -> bytes:
    """Return the MD5 digest of ``data``."""
    return MD5(data).digest()


def main(argv: list[str] | None = None) -> int:
    """Print the MD5 hash of a message."""
    parser = argparse.ArgumentParser(description="Compute the MD5 hash of a message.")
    parser.add_argument("message", nargs="?", default=_DEFAULT_MESSAGE)
    args = parser.parse_args(argv)
    digest = md5(args.message.encode("utf-8"))
    print(f"MD5 hash of '{args.message}': {digest.hex()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())