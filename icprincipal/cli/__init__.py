"""
icprincipal CLI

Commands:
- icprincipal decode/encode - Text and hex conversions
- icprincipal account/check-account - Ledger account identifiers
- icprincipal well-known - Anonymous and management principals
- icprincipal identity new/show - Ed25519 identity keys
"""
