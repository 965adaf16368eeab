"""Educational cryptography routines: DES initial permutation, MD5, SHA-1, rail fence and textbook RSA."""

__version__ = "0.1.0"
__all__ = ["despermute", "md5hash", "railfence", "toyrsa", "sha1"]