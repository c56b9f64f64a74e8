"""
Tests for Ed25519 identity keys and self-authenticating principals.
"""

import hashlib
import os
import tempfile

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from icprincipal.core.errors import KeyFormatError
from icprincipal.identity import (
    KEY_PATH_ENV,
    SigningKey,
    VerifyingKey,
    ensure_keypair,
    get_default_key_path,
)
from icprincipal.principal import Principal, PrincipalKind

ED25519_DER_PREFIX = bytes.fromhex("302a300506032b6570032100")


def test_self_authenticating_layout():
    """raw = sha224(key) || 0x02, 29 bytes."""
    der = ED25519_DER_PREFIX + bytes(range(32))
    p = Principal.self_authenticating(der)

    assert p.raw == hashlib.sha224(der).digest() + b"\x02"
    assert len(p.raw) == 29
    assert p.kind == PrincipalKind.SELF_AUTHENTICATING


def test_self_authenticating_deterministic():
    """Same key bytes always give the same principal."""
    der = ED25519_DER_PREFIX + b"\x11" * 32
    results = {Principal.self_authenticating(der).raw for _ in range(100)}
    assert len(results) == 1


def test_der_public_key_is_spki():
    key = SigningKey.from_seed(bytes(32))
    der = key.der_public_key()

    assert len(der) == 44
    assert der.startswith(ED25519_DER_PREFIX)


def test_key_principal_matches_codec():
    key = SigningKey.from_seed(b"\x01" * 32)
    assert key.principal() == Principal.self_authenticating(key.der_public_key())
    assert Principal.from_text(key.principal().to_text()) == key.principal()


def test_seed_determinism():
    a = SigningKey.from_seed(b"\x07" * 32)
    b = SigningKey.from_seed(b"\x07" * 32)
    assert a.principal() == b.principal()


def test_bad_seed_length_rejected():
    with pytest.raises(KeyFormatError):
        SigningKey.from_seed(b"\x00" * 31)


def test_pem_roundtrip():
    """Saved keys load back to the same principal."""
    key = SigningKey.generate()

    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "keys", "id.pem")
        key.save_pem(path, path + ".pub")

        loaded = SigningKey.load_pem(path)
        public = VerifyingKey.load_pem(path + ".pub")

    assert loaded.principal() == key.principal()
    assert public.principal() == key.principal()


def test_verifying_key_from_der():
    key = SigningKey.generate()
    vk = VerifyingKey.from_der(key.der_public_key())

    assert vk.der_public_key() == key.der_public_key()
    assert vk.principal() == VerifyingKey.from_signing_key(key).principal()


def test_non_ed25519_key_rejected():
    ec_key = ec.generate_private_key(ec.SECP256R1())
    pem = ec_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    der = ec_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )

    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "ec.pem")
        with open(path, "wb") as f:
            f.write(pem)
        with pytest.raises(KeyFormatError):
            SigningKey.load_pem(path)

    with pytest.raises(KeyFormatError):
        VerifyingKey.from_der(der)


def test_garbage_pem_rejected():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "junk.pem")
        with open(path, "wb") as f:
            f.write(b"not a key")
        with pytest.raises(KeyFormatError):
            SigningKey.load_pem(path)


def test_missing_key_file():
    with pytest.raises(FileNotFoundError):
        SigningKey.load_pem("/nonexistent/icprincipal/key.pem")


def test_ensure_keypair_creates_once():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "identity")
        priv, pub = ensure_keypair(path)

        assert os.path.exists(priv)
        assert os.path.exists(pub)
        with open(priv, "rb") as f:
            first = f.read()

        ensure_keypair(path)
        with open(priv, "rb") as f:
            assert f.read() == first


def test_default_key_path_env_override(monkeypatch):
    monkeypatch.setenv(KEY_PATH_ENV, "/tmp/icp/id.pem")
    assert str(get_default_key_path()) == "/tmp/icp/id.pem"

    monkeypatch.delenv(KEY_PATH_ENV)
    assert get_default_key_path().name == "identity_ed25519"
