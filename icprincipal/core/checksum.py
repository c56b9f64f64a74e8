"""
CRC-32 checksum used in principal text and account identifiers.
"""

import zlib

CHECKSUM_SIZE = 4


def crc32(data: bytes) -> bytes:
    """
    Compute CRC-32 (IEEE) over data.

    Args:
        data: Bytes to checksum

    Returns:
        4-byte big-endian checksum
    """
    return (zlib.crc32(bytes(data)) & 0xFFFFFFFF).to_bytes(CHECKSUM_SIZE, "big")
