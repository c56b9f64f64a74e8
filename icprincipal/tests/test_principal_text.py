"""
Tests for the canonical text form.

Critical: text must be bit-for-bit compatible with the wider ecosystem, and
decoding must reject anything that does not re-encode to the exact input.
"""

import pytest

from icprincipal.core.errors import ChecksumMismatch, DecodeError
from icprincipal.principal import Principal, PrincipalKind

BASE32_ALPHABET = "abcdefghijklmnopqrstuvwxyz234567"


def test_management_text():
    """aaaaa-aa is the empty principal."""
    p = Principal.from_text("aaaaa-aa")

    assert p.raw == b""
    assert p.kind == PrincipalKind.OPAQUE
    assert p.to_text() == "aaaaa-aa"
    assert p == Principal.management()


def test_anonymous_text():
    """Anonymous principal renders as 2vxsx-fae."""
    p = Principal.anonymous()

    assert p.raw == b"\x04"
    assert p.kind == PrincipalKind.ANONYMOUS
    assert p.to_text() == "2vxsx-fae"
    assert Principal.from_text("2vxsx-fae") == p


def test_canister_id_text():
    """Well-known canister id decodes to its raw bytes."""
    p = Principal.from_text("rrkah-fqaaa-aaaaa-aaaaq-cai")

    assert p.to_hex() == "00000000000000010101"
    assert p.kind == PrincipalKind.OPAQUE
    assert str(p) == "rrkah-fqaaa-aaaaa-aaaaq-cai"


def test_text_roundtrip_lengths_0_to_29():
    """decode(encode(p)) == p for every practical length."""
    for n in range(30):
        for raw in (bytes(range(n)), bytes([0xFF]) * n, bytes([0x00]) * n):
            p = Principal.from_bytes(raw)
            assert Principal.from_text(p.to_text()) == p


def test_text_is_grouped_lowercase():
    """Groups of 5 lower-case characters, last group may be shorter."""
    text = Principal.from_bytes(bytes(range(29))).to_text()
    groups = text.split("-")

    assert text == text.lower()
    assert all(len(g) == 5 for g in groups[:-1])
    assert 1 <= len(groups[-1]) <= 5


def test_single_character_flip_fails_checksum():
    """Changing any one character must be rejected as a checksum mismatch."""
    text = "rrkah-fqaaa-aaaaa-aaaaq-cai"

    for i, ch in enumerate(text):
        if ch == "-":
            continue
        replacement = BASE32_ALPHABET[(BASE32_ALPHABET.index(ch) + 1) % 32]
        tampered = text[:i] + replacement + text[i + 1:]
        with pytest.raises(ChecksumMismatch):
            Principal.from_text(tampered)


def test_uppercase_text_rejected():
    """Decoding is strict: non-canonical casing does not round-trip."""
    with pytest.raises(ChecksumMismatch):
        Principal.from_text("2VXSX-FAE")


def test_regrouped_text_rejected():
    """Decoding is strict: non-canonical grouping does not round-trip."""
    with pytest.raises(ChecksumMismatch):
        Principal.from_text("2vxsxfae")
    with pytest.raises(ChecksumMismatch):
        Principal.from_text("2vx-sx-fae")


def test_non_base32_text_is_decode_error():
    """Characters outside the alphabet are malformed input."""
    with pytest.raises(DecodeError):
        Principal.from_text("aaaaa-a1")


def test_too_short_text_is_decode_error():
    """Text must carry at least the 4 checksum bytes."""
    with pytest.raises(DecodeError):
        Principal.from_text("aa")
    with pytest.raises(DecodeError):
        Principal.from_text("")


def test_bad_padding_is_decode_error():
    """Lengths base-32 cannot produce are malformed."""
    with pytest.raises(DecodeError):
        Principal.from_text("a")


def test_non_string_text_is_decode_error():
    with pytest.raises(DecodeError):
        Principal.from_text(b"aaaaa-aa")  # type: ignore[arg-type]


def test_errors_are_value_errors():
    """Callers may catch the whole taxonomy as ValueError."""
    with pytest.raises(ValueError):
        Principal.from_text("2vxsx-fad")
