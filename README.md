# cryptolab

A small collection of cryptography exercises in pure Python. They are meant
for learning. Do not use them to protect real data.

- `cryptolab.despermute`: the DES initial permutation and its inverse on a
  64-bit block (`initial_permutation`, `initial_permutation_inverse`).
  Blocks outside the unsigned 64-bit range raise `ValueError`.
- `cryptolab.md5hash`: an incremental MD5 hasher (`MD5`, with `update`,
  `digest` and `hexdigest`) and a one-shot `md5(data)` that returns the
  16-byte digest.
- `cryptolab.sha1`: `sha1(message)` returns the SHA-1 hash of a bytes
  message as a tuple of five 32-bit integers.
- `cryptolab.railfence`: rail fence (zigzag) transposition encryption with
  `encrypt(message, depth)`. The character `"0"` marks an empty cell of the
  grid, so any `"0"` in the message is dropped from the result. A depth
  below 1 raises `ValueError`.
- `cryptolab.toyrsa`: textbook RSA on small integers: `gcd`, `power`
  (modular exponentiation), `generate_key_pairs(p, q)` returning a `KeyPair`
  with fields `e`, `d` and `n`, and `encrypt` / `decrypt`. `e` is the
  smallest integer from 2 upward coprime to `(p - 1) * (q - 1)`, and `d` its
  inverse modulo that totient.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from cryptolab.despermute import initial_permutation, initial_permutation_inverse
from cryptolab.md5hash import MD5, md5
from cryptolab.sha1 import sha1
from cryptolab.railfence import encrypt as railfence_encrypt
from cryptolab.toyrsa import generate_key_pairs, encrypt, decrypt

block = initial_permutation(0x0123456789ABCDEF)
assert initial_permutation_inverse(block) == 0x0123456789ABCDEF

print(md5(b"Hello, world!").hex())

h = MD5()
h.update(b"Hello, ")
h.update(b"world!")
assert h.digest() == md5(b"Hello, world!")
print(h.hexdigest())

print("".join(f"{word:08x}" for word in sha1(b"abc")))

print(railfence_encrypt("WEAREDISCOVERED", 3))

keys = generate_key_pairs(61, 53)
ciphertext = encrypt(65, keys.e, keys.n)
assert decrypt(ciphertext, keys.d, keys.n) == 65
```

## Commands

```
cryptolab-des-permute [BLOCK]          # BLOCK in hex; default 0123456789ABCDEF
cryptolab-md5 [MESSAGE]                # default message "Hello, world!"
cryptolab-sha1 [MESSAGE]               # prompts if no message; uses the first word typed
cryptolab-railfence [MESSAGE [DEPTH]]  # prompts for whatever is not given
cryptolab-rsa [P [Q [PLAINTEXT]]]      # prompts for whatever is not given
```

`cryptolab-des-permute` prints the block, the block after the initial
permutation, and the block after the inverse permutation. `cryptolab-rsa`
builds a key pair from the two primes, then prints the ciphertext and the
decrypted text.

## What it does not do

There is no DES encryption or decryption: only the initial permutation and
its inverse. There is no rail fence decryption. The RSA routines work on
plain integers with no padding and no prime checking, and there is no key
storage or file handling in any of the commands.