"""
Asset-scoped account keys.

A key packs an owner principal and a 12-byte unique asset id into one
big-endian integer: int(principal.raw · asset_id). Splitting shifts the
asset id back out of the low 96 bits.
"""

from dataclasses import dataclass
from typing import Tuple

from ..core.encoding import is_hex
from ..core.errors import DecodeError
from .model import Principal

ASSET_ID_SIZE = 12
_ASSET_ID_BITS = ASSET_ID_SIZE * 8
_ASSET_ID_MASK = (1 << _ASSET_ID_BITS) - 1


@dataclass(frozen=True, order=True)
class UniqueAssetId:
    """Unsigned asset id that fits in 12 bytes."""
    value: int

    def __post_init__(self):
        if self.value < 0 or self.value > _ASSET_ID_MASK:
            raise ValueError(f"asset id must fit in {ASSET_ID_SIZE} bytes: {self.value}")

    @classmethod
    def parse(cls, hex_value: str) -> "UniqueAssetId":
        """
        Parse a hex asset id such as "F94E2AD9DD5CBBC041430001".

        Raises:
            DecodeError: If hex_value is not hex or exceeds 12 bytes
        """
        s = hex_value.strip()
        if s[:2].lower() == "0x":
            s = s[2:]
        if not s or not is_hex(s):
            raise DecodeError(f"invalid asset id hex: {hex_value!r}")
        value = int(s, 16)
        if value > _ASSET_ID_MASK:
            raise DecodeError(f"asset id {hex_value!r} exceeds {ASSET_ID_SIZE} bytes")
        return cls(value)

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(ASSET_ID_SIZE, "big")

    def to_hex(self) -> str:
        return self.to_bytes().hex().upper()

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class AssetAccountKey:
    """Balance key for one principal's holding of one asset."""
    value: int

    @classmethod
    def new(cls, principal: Principal, asset_id: UniqueAssetId) -> "AssetAccountKey":
        return cls(int.from_bytes(principal.raw + asset_id.to_bytes(), "big"))

    def split(self) -> Tuple[Principal, UniqueAssetId]:
        """
        Recover (principal, asset_id).

        Leading zero bytes of the principal do not survive the integer
        packing; callers keying on such principals should store them aside.
        """
        owner = self.value >> _ASSET_ID_BITS
        raw = owner.to_bytes((owner.bit_length() + 7) // 8, "big")
        return Principal.from_bytes(raw), UniqueAssetId(self.value & _ASSET_ID_MASK)
