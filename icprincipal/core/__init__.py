"""
Leaf primitives for the principal codec.

This module provides:
- Checksum: CRC-32, big-endian, 4 bytes
- Digest: SHA-224, 28 bytes
- Encoding: upper-case hex and grouped, unpadded base-32
- Errors: the codec's exception taxonomy
"""

from .checksum import CHECKSUM_SIZE, crc32
from .digest import DIGEST_SIZE, HashFunction, sha224, sha256
from .encoding import (
    GROUP_SEPARATOR,
    GROUP_SIZE,
    b32_decode,
    b32_encode,
    from_hex,
    is_hex,
    group,
    to_hex,
    ungroup,
)
from .errors import (
    ChecksumMismatch,
    DecodeError,
    InvalidSubAccount,
    KeyFormatError,
    PrincipalError,
)

__all__ = [
    "CHECKSUM_SIZE",
    "crc32",
    "DIGEST_SIZE",
    "HashFunction",
    "sha224",
    "sha256",
    "GROUP_SEPARATOR",
    "GROUP_SIZE",
    "b32_decode",
    "b32_encode",
    "from_hex",
    "is_hex",
    "group",
    "to_hex",
    "ungroup",
    "PrincipalError",
    "DecodeError",
    "ChecksumMismatch",
    "InvalidSubAccount",
    "KeyFormatError",
]
