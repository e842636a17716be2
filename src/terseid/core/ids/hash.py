"""
Deterministic base36 hash codec.

Seed bytes are digested with SHA-256; the first 8 bytes of the digest are
read as a big-endian unsigned 64-bit integer and encoded in base36
(0-9 then a-z, most significant digit first). The encoded string is then
truncated or zero-padded to the requested length.

Example:
    >>> base36_encode(36)
    '10'
    >>> len(base36_hash(b"hello", 6))
    6
"""

import hashlib

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def compute_digest(seed: bytes) -> int:
    """
    Digest seed bytes into an unsigned 64-bit integer.

    Args:
        seed: Arbitrary seed material

    Returns:
        First 8 bytes of SHA-256(seed) as a big-endian integer
    """
    digest = hashlib.sha256(seed).digest()
    return int.from_bytes(digest[:8], "big")


def base36_encode(value: int) -> str:
    """Encode a non-negative integer as a lowercase base36 string."""
    if value < 0:
        raise ValueError(f"Cannot base36-encode negative value: {value}")
    if value == 0:
        return "0"

    digits: list[str] = []
    while value > 0:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def base36_hash(seed: bytes | str, length: int) -> str:
    """
    Hash seed material into exactly `length` base36 characters.

    The most significant characters are kept when the encoding is longer
    than `length`; shorter encodings are left-padded with '0'.

    Args:
        seed: Seed bytes (str seeds are UTF-8 encoded)
        length: Number of characters to return

    Returns:
        A string of exactly `length` characters from [0-9a-z]

    Examples:
        >>> base36_hash(b"hello", 3) == base36_hash(b"hello", 3)
        True
        >>> base36_hash(b"hello", 20).startswith("0")
        True
    """
    if isinstance(seed, str):
        seed = seed.encode("utf-8")
    encoded = base36_encode(compute_digest(seed))
    if len(encoded) >= length:
        return encoded[:length]
    return encoded.rjust(length, "0")
