"""Sealed-token API package.

This package provides the token codec and the pending-registration helper
built on top of it.
"""

from sealed_token.api.codec import (
    CryptoConfig,
    EncodingConfig,
    TokenCodec,
    TokenCodecConfig,
)
from sealed_token.api.registration import PendingRegistrations

__all__ = [
    # Codec
    "TokenCodec",
    # Registration
    "PendingRegistrations",
    # Configuration types
    "TokenCodecConfig",
    "CryptoConfig",
    "EncodingConfig",
]
