"""Sealed-token Python implementation.

This package seals arbitrary JSON payloads into stateless, tamper-evident
tokens that can travel through URLs and form fields without any server-side
session storage.

Main Components:
    - TokenCodec: create() and read() sealed tokens
    - PendingRegistrations: expiring registration records carried in tokens
    - SecretKeyProvider: derives the AES-256 key from the configured secret
    - Interfaces: Protocol definitions for crypto, encoding and clocks

Example:
    >>> from sealed_token import TokenCodec
    >>> codec = TokenCodec.from_secret("test-secret")
    >>> codec.read(codec.create({"plan": "pro"}))
    {'plan': 'pro'}
"""

from sealed_token.api import (
    CryptoConfig,
    EncodingConfig,
    PendingRegistrations,
    TokenCodec,
    TokenCodecConfig,
)
from sealed_token.config import TokenSettings
from sealed_token.crypto import AEADCipher, SecretKey, SecretKeyProvider
from sealed_token.encoding import Base64Url, JsonSerializer
from sealed_token.exceptions import (
    ConfigurationError,
    FormatError,
    IntegrityError,
    SealedTokenError,
    SerializationError,
)
from sealed_token.result import Failure, FailureReason, Success

__version__ = "0.1.0"

__all__ = [
    # API
    "TokenCodec",
    "PendingRegistrations",
    "TokenCodecConfig",
    "CryptoConfig",
    "EncodingConfig",
    "TokenSettings",
    # Primitives
    "AEADCipher",
    "Base64Url",
    "JsonSerializer",
    "SecretKey",
    "SecretKeyProvider",
    # Results
    "Success",
    "Failure",
    "FailureReason",
    # Exceptions
    "SealedTokenError",
    "ConfigurationError",
    "FormatError",
    "IntegrityError",
    "SerializationError",
]
