"""
Principal codec.

Provides:
- Principal: immutable identity value with text/hex/bytes conversions
- PrincipalKind: structural tag derived from the trailing byte
- account_identifier: ledger account id derivation
- AssetAccountKey / UniqueAssetId: per-asset balance keys
- JSON helpers
"""

from .model import (
    ANONYMOUS_SUFFIX,
    DERIVED_SUFFIX,
    RESERVED_SUFFIX,
    SELF_AUTHENTICATING_SUFFIX,
    Principal,
    PrincipalKind,
    classify,
)
from .account import (
    ACCOUNT_ID_PREFIX,
    ACCOUNT_ID_SIZE,
    DEFAULT_SUBACCOUNT,
    SUBACCOUNT_SIZE,
    account_identifier,
    verify_account_identifier,
)
from .asset_account import ASSET_ID_SIZE, AssetAccountKey, UniqueAssetId
from .jsonutil import PrincipalJSONEncoder, dumps, principal_from_json

__all__ = [
    "Principal",
    "PrincipalKind",
    "classify",
    "SELF_AUTHENTICATING_SUFFIX",
    "DERIVED_SUFFIX",
    "ANONYMOUS_SUFFIX",
    "RESERVED_SUFFIX",
    "account_identifier",
    "verify_account_identifier",
    "ACCOUNT_ID_PREFIX",
    "ACCOUNT_ID_SIZE",
    "SUBACCOUNT_SIZE",
    "DEFAULT_SUBACCOUNT",
    "AssetAccountKey",
    "UniqueAssetId",
    "ASSET_ID_SIZE",
    "PrincipalJSONEncoder",
    "principal_from_json",
    "dumps",
]
