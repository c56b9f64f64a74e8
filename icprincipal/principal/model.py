"""
Principal value type.

A principal is an opaque byte string naming an actor. Its kind is read off
the trailing byte and is never stored, so a principal cannot carry a kind
that disagrees with its bytes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..core.checksum import CHECKSUM_SIZE, crc32
from ..core.digest import HashFunction, sha224
from ..core.encoding import b32_decode, b32_encode, from_hex, group, to_hex, ungroup
from ..core.errors import ChecksumMismatch, DecodeError

BytesLike = Union[bytes, bytearray, memoryview]

SELF_AUTHENTICATING_SUFFIX = 0x02
DERIVED_SUFFIX = 0x03
ANONYMOUS_SUFFIX = 0x04
RESERVED_SUFFIX = 0x7F


class PrincipalKind(str, Enum):
    """
    Structural tag of a principal.

    - OPAQUE: assigned by the system, no outside structure
    - SELF_AUTHENTICATING: H(public_key) · 0x02
    - DERIVED: H(|registrar| · registrar · nonce) · 0x03
    - ANONYMOUS: the single byte 0x04
    - RESERVED: blob · 0x7f
    """
    OPAQUE = "opaque"
    SELF_AUTHENTICATING = "self_authenticating"
    DERIVED = "derived"
    ANONYMOUS = "anonymous"
    RESERVED = "reserved"


_KIND_BY_SUFFIX = {
    SELF_AUTHENTICATING_SUFFIX: PrincipalKind.SELF_AUTHENTICATING,
    DERIVED_SUFFIX: PrincipalKind.DERIVED,
    ANONYMOUS_SUFFIX: PrincipalKind.ANONYMOUS,
    RESERVED_SUFFIX: PrincipalKind.RESERVED,
}


def classify(raw: bytes) -> PrincipalKind:
    """Kind of a raw principal, from its last byte (Opaque when empty)."""
    if not raw:
        return PrincipalKind.OPAQUE
    return _KIND_BY_SUFFIX.get(raw[-1], PrincipalKind.OPAQUE)


@dataclass(frozen=True)
class Principal:
    """
    Immutable principal.

    Build instances through the classmethods (from_bytes, from_hex, from_text,
    self_authenticating, anonymous, management). Equality and hash() use the
    raw bytes only.
    """
    raw: bytes

    def __post_init__(self):
        if not isinstance(self.raw, (bytes, bytearray, memoryview)):
            raise TypeError(f"raw must be bytes-like, got {type(self.raw).__name__}")
        object.__setattr__(self, "raw", bytes(self.raw))

    @property
    def kind(self) -> PrincipalKind:
        return classify(self.raw)

    # Construction

    @classmethod
    def from_bytes(cls, raw: BytesLike) -> "Principal":
        """Wrap raw bytes. Always succeeds; kind is best-effort labeling."""
        return cls(bytes(raw))

    @classmethod
    def from_hex(cls, value: str) -> "Principal":
        """
        Parse a delimiter-free hex string.

        Raises:
            DecodeError: On odd length or non-hex characters
        """
        return cls(from_hex(value))

    @classmethod
    def from_text(cls, text: str) -> "Principal":
        """
        Parse the canonical text form, e.g. "rrkah-fqaaa-aaaaa-aaaaq-cai".

        The decoded principal is re-encoded and must reproduce `text`
        exactly, which checks the embedded CRC-32 along with casing and
        grouping.

        Raises:
            DecodeError: If text is not base-32 or too short to hold a checksum
            ChecksumMismatch: If re-encoding does not reproduce text
        """
        if not isinstance(text, str):
            raise DecodeError(f"principal text must be a string, got {type(text).__name__}")

        decoded = b32_decode(ungroup(text.lower()))
        if len(decoded) < CHECKSUM_SIZE:
            raise DecodeError(f"principal text {text!r} is too short to contain a checksum")

        principal = cls(decoded[CHECKSUM_SIZE:])
        canonical = principal.to_text()
        if canonical != text:
            raise ChecksumMismatch(
                f"principal {text!r} does not have a valid checksum (canonical form: {canonical!r})"
            )
        return principal

    @classmethod
    def self_authenticating(cls, encoded_public_key: BytesLike) -> "Principal":
        """
        Principal for a DER-encoded public key: sha224(key) · 0x02.
        """
        digest = sha224(bytes(encoded_public_key))
        return cls(digest + bytes([SELF_AUTHENTICATING_SUFFIX]))

    @classmethod
    def anonymous(cls) -> "Principal":
        """The anonymous principal ("2vxsx-fae")."""
        return cls(bytes([ANONYMOUS_SUFFIX]))

    @classmethod
    def management(cls) -> "Principal":
        """The management canister ("aaaaa-aa"), empty raw bytes."""
        return cls(b"")

    # Rendering

    def to_text(self) -> str:
        """
        Canonical text: base32(crc32(raw) · raw), lower-case, unpadded,
        dash-grouped every 5 characters.
        """
        return group(b32_encode(crc32(self.raw) + self.raw))

    def to_hex(self) -> str:
        """Upper-case hex of raw, no checksum, no delimiters."""
        return to_hex(self.raw)

    def compute_hash(self, hash_fn: HashFunction) -> bytes:
        """Digest of raw under a caller-supplied hash function."""
        return hash_fn(self.raw)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Principal({self.to_text()!r})"

    def __bytes__(self) -> bytes:
        return self.raw
