"""
Ed25519 identity keys.

A key's principal is the self-authenticating principal of its DER-encoded
SubjectPublicKeyInfo.

Key management:
- Default path: $ICPRINCIPAL_KEY_PATH or ~/.icprincipal/keys/identity_ed25519
- Public key stored next to it with a .pub suffix
"""

import os
from pathlib import Path
from typing import Optional, Tuple

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from ..core.errors import KeyFormatError
from ..logging_config import get_logger
from ..principal.model import BytesLike, Principal

KEY_PATH_ENV = "ICPRINCIPAL_KEY_PATH"


def _der_public_key(public_key: Ed25519PublicKey) -> bytes:
    return public_key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


class SigningKey:
    """
    Ed25519 private key wrapper.

    Provides:
    - Key generation
    - PEM load/save
    - DER public key and principal derivation
    """

    def __init__(self, private_key: Ed25519PrivateKey):
        self.private_key = private_key
        self.public_key = private_key.public_key()

    @classmethod
    def generate(cls) -> "SigningKey":
        """Generate new Ed25519 keypair."""
        return cls(Ed25519PrivateKey.generate())

    @classmethod
    def from_seed(cls, seed: BytesLike) -> "SigningKey":
        """Deterministic key from a 32-byte seed (tests, fixtures)."""
        seed = bytes(seed)
        if len(seed) != 32:
            raise KeyFormatError(f"Ed25519 seed must be 32 bytes, got {len(seed)}")
        return cls(Ed25519PrivateKey.from_private_bytes(seed))

    @classmethod
    def load_pem(cls, path: str, password: Optional[bytes] = None) -> "SigningKey":
        """
        Load private key from PEM file.

        Raises:
            FileNotFoundError: If key file doesn't exist
            KeyFormatError: If the key is not an Ed25519 private key
        """
        with open(path, "rb") as f:
            data = f.read()

        try:
            private_key = serialization.load_pem_private_key(data, password=password)
        except (ValueError, TypeError) as e:
            raise KeyFormatError(f"Cannot parse private key {path}: {e}") from e

        if not isinstance(private_key, Ed25519PrivateKey):
            raise KeyFormatError("Key file is not Ed25519 private key")

        key = cls(private_key)
        get_logger(__name__, principal=key.principal().to_text()).debug("Loaded identity key from %s", path)
        return key

    def save_pem(self, path: str, public_path: Optional[str] = None) -> None:
        """
        Save private key (PKCS8 PEM) and optionally the public key.

        Args:
            path: Path to save private key
            public_path: Optional path to save public key
        """
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

        private_pem = self.private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
        with open(path, "wb") as f:
            f.write(private_pem)
        os.chmod(path, 0o600)

        if public_path:
            with open(public_path, "wb") as f:
                f.write(self.get_public_key_pem())

    def der_public_key(self) -> bytes:
        """DER SubjectPublicKeyInfo of the public key (44 bytes)."""
        return _der_public_key(self.public_key)

    def principal(self) -> Principal:
        """Self-authenticating principal of this key."""
        return Principal.self_authenticating(self.der_public_key())

    def get_public_key_pem(self) -> bytes:
        """Get public key in PEM format."""
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )


class VerifyingKey:
    """
    Ed25519 public key.

    Enough to compute a principal without access to the private key.
    """

    def __init__(self, public_key: Ed25519PublicKey):
        self.public_key = public_key

    @classmethod
    def load_pem(cls, path: str) -> "VerifyingKey":
        """
        Load public key from PEM file.

        Raises:
            KeyFormatError: If the key is not an Ed25519 public key
        """
        with open(path, "rb") as f:
            data = f.read()

        try:
            public_key = serialization.load_pem_public_key(data)
        except ValueError as e:
            raise KeyFormatError(f"Cannot parse public key {path}: {e}") from e

        if not isinstance(public_key, Ed25519PublicKey):
            raise KeyFormatError("Key file is not Ed25519 public key")

        return cls(public_key)

    @classmethod
    def from_der(cls, der: BytesLike) -> "VerifyingKey":
        """Parse a DER SubjectPublicKeyInfo."""
        try:
            public_key = serialization.load_der_public_key(bytes(der))
        except ValueError as e:
            raise KeyFormatError(f"Cannot parse DER public key: {e}") from e

        if not isinstance(public_key, Ed25519PublicKey):
            raise KeyFormatError("DER key is not Ed25519 public key")

        return cls(public_key)

    @classmethod
    def from_signing_key(cls, signing_key: SigningKey) -> "VerifyingKey":
        """Extract verifying key from signing key."""
        return cls(signing_key.public_key)

    def der_public_key(self) -> bytes:
        return _der_public_key(self.public_key)

    def principal(self) -> Principal:
        return Principal.self_authenticating(self.der_public_key())


def get_default_key_path() -> Path:
    """
    Default identity key path.

    Returns:
        $ICPRINCIPAL_KEY_PATH if set, else ~/.icprincipal/keys/identity_ed25519
    """
    override = os.getenv(KEY_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".icprincipal" / "keys" / "identity_ed25519"


def ensure_keypair(key_path: Optional[str] = None) -> Tuple[str, str]:
    """
    Ensure keypair exists (generate if missing).

    Args:
        key_path: Optional custom key path (default: get_default_key_path())

    Returns:
        (private_key_path, public_key_path) tuple
    """
    if key_path is None:
        key_path = str(get_default_key_path())

    public_key_path = key_path + ".pub"

    if not os.path.exists(key_path):
        signing_key = SigningKey.generate()
        signing_key.save_pem(key_path, public_key_path)
        get_logger(__name__, principal=signing_key.principal().to_text()).info(
            "Generated identity key at %s", key_path
        )

    return key_path, public_key_path
