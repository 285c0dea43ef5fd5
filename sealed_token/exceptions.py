"""Exception classes for sealed-token.

This module defines the error taxonomy used throughout the sealed-token library.
Only ConfigurationError is meant to reach callers of TokenCodec.read; the
others are recovered on the decode path and reported as an absent payload.
"""


class SealedTokenError(Exception):
    """Base exception class for all sealed-token errors."""

    pass


class ConfigurationError(SealedTokenError):
    """Exception raised when the token secret is missing or unusable."""

    pass


class FormatError(SealedTokenError):
    """Exception raised for malformed token text or invalid base64url."""

    pass


class IntegrityError(SealedTokenError):
    """Exception raised when authenticated decryption fails."""

    pass


class SerializationError(SealedTokenError):
    """Exception raised when a payload cannot be converted to or from JSON."""

    pass
