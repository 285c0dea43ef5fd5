"""Crypto package.

This package provides the key derivation and authenticated
encryption primitives behind sealed tokens.
"""

from .aead import NONCE_LENGTH, TAG_LENGTH, AEADCipher
from .key import KEY_LENGTH, SecretKey, SecretKeyProvider

__all__ = [
    "AEADCipher",
    "KEY_LENGTH",
    "NONCE_LENGTH",
    "SecretKey",
    "SecretKeyProvider",
    "TAG_LENGTH",
]
