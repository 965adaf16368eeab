"""Textbook RSA over small integers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyPair:
    """Public exponent ``e``, private exponent ``d`` and modulus ``n``."""

    e: int
    d: int
    n: int


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def power(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent`` reduced modulo ``modulus``."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result


def generate_key_pairs(p: int, q: int) -> KeyPair:
    """Build a key pair from primes ``p`` and ``q``.

    ``e`` is the smallest integer from 2 upward coprime to the totient and
    ``d`` the smallest non-negative inverse of ``e`` modulo the totient.
    """
    totient = (p - 1) * (q - 1)
    if totient < 2:
        raise ValueError(f"totient of p={p}, q={q} is {totient}; no key pair exists")
    e = 2
    while gcd(e, totient) != 1:
        e += 1
    d = pow(e, -1, totient)
    return KeyPair(e=e, d=d, n=p * q)


def encrypt(plaintext: int, e: int, n: int) -> int:
    """Encrypt an integer with the public exponent."""
    return power(plaintext, e, n)


def decrypt(ciphertext: int, d: int, n: int) -> int:
    """Decrypt an integer with the private exponent."""
    return power(ciphertext, d, n)


def _read_int(prompt: str) -> int:
    return int(input(prompt))


def main(argv: list[str] | None = None) -> int:
    """Generate keys from two primes, then encrypt and decrypt a number."""
    parser = argparse.ArgumentParser(description="Textbook RSA on small numbers.")
    parser.add_argument("p", nargs="?", type=int)
    parser.add_argument("q", nargs="?", type=int)
    parser.add_argument("plaintext", nargs="?", type=int)
    args = parser.parse_args(argv)

    p = args.p if args.p is not None else _read_int("Enter prime number p: ")
    q = args.q if args.q is not None else _read_int("Enter prime number q: ")
    keys = generate_key_pairs(p, q)
    plaintext = (
        args.plaintext if args.plaintext is not None else _read_int("Enter plaintext: ")
    )
    ciphertext = encrypt(plaintext, keys.e, keys.n)
    print(f"Ciphertext: {ciphertext}")
    print(f"Decrypted Text: {decrypt(ciphertext, keys.d, keys.n)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())