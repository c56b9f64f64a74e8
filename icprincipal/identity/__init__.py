"""
Identity keys that yield self-authenticating principals.
"""

from .keys import (
    KEY_PATH_ENV,
    SigningKey,
    VerifyingKey,
    ensure_keypair,
    get_default_key_path,
)

__all__ = [
    "KEY_PATH_ENV",
    "SigningKey",
    "VerifyingKey",
    "ensure_keypair",
    "get_default_key_path",
]
