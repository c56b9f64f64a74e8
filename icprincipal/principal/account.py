"""
Ledger account identifiers.

account_identifier(principal, subaccount) = crc32(h) · h
where h = sha224("\x0Aaccount-id" · principal · subaccount)
"""

from typing import Optional

from ..core.checksum import CHECKSUM_SIZE, crc32
from ..core.digest import DIGEST_SIZE, sha224
from ..core.errors import InvalidSubAccount
from .model import BytesLike, Principal

SUBACCOUNT_SIZE = 32
ACCOUNT_ID_SIZE = CHECKSUM_SIZE + DIGEST_SIZE

# Byte form of "\x0Aaccount-id" (length-prefixed domain separator)
ACCOUNT_ID_PREFIX = b"\x0aaccount-id"

DEFAULT_SUBACCOUNT = bytes(SUBACCOUNT_SIZE)


def account_identifier(principal: Principal, subaccount: Optional[BytesLike] = None) -> bytes:
    """
    Derive the ledger account identifier for principal and sub-account.

    Args:
        principal: Account owner
        subaccount: 32-byte sub-account (default: 32 zero bytes)

    Returns:
        32 bytes: 4-byte CRC-32 followed by the 28-byte SHA-224 digest

    Raises:
        InvalidSubAccount: If subaccount is not exactly 32 bytes
    """
    if subaccount is None:
        subaccount = DEFAULT_SUBACCOUNT
    subaccount = bytes(subaccount)
    if len(subaccount) != SUBACCOUNT_SIZE:
        raise InvalidSubAccount(
            f"sub-account must be {SUBACCOUNT_SIZE} bytes, got {len(subaccount)}"
        )

    digest = sha224(ACCOUNT_ID_PREFIX + principal.raw + subaccount)
    return crc32(digest) + digest


def verify_account_identifier(value: BytesLike) -> bool:
    """
    Check an account identifier's embedded checksum.

    Returns:
        True if value is 32 bytes and starts with crc32 of the remaining 28
    """
    value = bytes(value)
    if len(value) != ACCOUNT_ID_SIZE:
        return False
    return crc32(value[CHECKSUM_SIZE:]) == value[:CHECKSUM_SIZE]
