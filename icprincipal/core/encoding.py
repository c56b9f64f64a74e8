"""
Hex and grouped base-32 codecs.

Text forms are deterministic: the same bytes always render to the same
string, and the decoders reject anything they would not have produced
themselves (modulo case, for hex).
"""

import base64
import re

from .errors import DecodeError

GROUP_SIZE = 5
GROUP_SEPARATOR = "-"

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def is_hex(value: str) -> bool:
    """True if every character of value is a hex digit (either case)."""
    return _HEX_RE.fullmatch(value) is not None


def to_hex(data: bytes) -> str:
    """Upper-case hex, two characters per byte, no delimiters."""
    return bytes(data).hex().upper()


def from_hex(value: str) -> bytes:
    """
    Parse a delimiter-free hex string (either case).

    Raises:
        DecodeError: On odd length or non-hex characters
    """
    if not isinstance(value, str):
        raise DecodeError(f"hex value must be a string, got {type(value).__name__}")
    if len(value) % 2:
        raise DecodeError(f"hex string has odd length: {len(value)}")
    if not is_hex(value):
        raise DecodeError(f"invalid hex string: {value!r}")
    return bytes.fromhex(value)


def b32_encode(data: bytes) -> str:
    """RFC 4648 base-32, lower-case, padding stripped."""
    return base64.b32encode(bytes(data)).decode("ascii").rstrip("=").lower()


def b32_decode(value: str) -> bytes:
    """
    Decode unpadded RFC 4648 base-32 (either case).

    Raises:
        DecodeError: If value is not valid base-32
    """
    padded = value.upper() + "=" * (-len(value) % 8)
    try:
        return base64.b32decode(padded)
    except ValueError as e:
        # binascii.Error and non-ASCII input both land here
        raise DecodeError(f"invalid base32 string {value!r}: {e}") from e


def group(value: str, size: int = GROUP_SIZE) -> str:
    """Split value into dash-separated groups of `size` (last may be shorter)."""
    return GROUP_SEPARATOR.join(value[i:i + size] for i in range(0, len(value), size))


def ungroup(value: str) -> str:
    """Strip group separators."""
    return value.replace(GROUP_SEPARATOR, "")
