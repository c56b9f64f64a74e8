"""
Exception types for the principal codec.

Every failure is a deterministic function of the input, so none of these
are retryable.
"""


class PrincipalError(ValueError):
    """Base class for all codec failures."""
    pass


class DecodeError(PrincipalError):
    """Raised when hex or base-32 input is malformed."""
    pass


class ChecksumMismatch(PrincipalError):
    """Raised when decoded text does not re-encode to the exact input."""
    pass


class InvalidSubAccount(PrincipalError):
    """Raised when a sub-account is not exactly 32 bytes."""
    pass


class KeyFormatError(PrincipalError):
    """Raised when key material is not an Ed25519 key."""
    pass
