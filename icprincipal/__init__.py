"""
Principal codec

Canonical, checksum-protected identifiers: binary, hex and grouped base-32
text forms, self-authenticating principals from public keys, and ledger
account identifiers.
"""

__version__ = "0.1.0"

from .core.errors import (
    ChecksumMismatch,
    DecodeError,
    InvalidSubAccount,
    KeyFormatError,
    PrincipalError,
)
from .principal import (
    Principal,
    PrincipalKind,
    account_identifier,
    verify_account_identifier,
)

__all__ = [
    "__version__",
    "Principal",
    "PrincipalKind",
    "account_identifier",
    "verify_account_identifier",
    "PrincipalError",
    "DecodeError",
    "ChecksumMismatch",
    "InvalidSubAccount",
    "KeyFormatError",
]
