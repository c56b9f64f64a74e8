"""
Cryptographic digests for self-authenticating principals and account ids.
"""

import hashlib
from typing import Callable

HashFunction = Callable[[bytes], bytes]

DIGEST_SIZE = 28


def sha224(data: bytes) -> bytes:
    """
    SHA-224 digest of data.

    Returns:
        28-byte digest
    """
    return hashlib.sha224(bytes(data)).digest()


def sha256(data: bytes) -> bytes:
    """SHA-256 digest of data (for callers hashing principals for lookup)."""
    return hashlib.sha256(bytes(data)).digest()
