"""Symmetric key derivation from a configured secret.

The key is a single SHA-256 digest of the secret's UTF-8 bytes. There is no
salt and no work factor, so the secret must be high-entropy operator
configuration and never a user-chosen password. Changing the derivation
would silently invalidate every outstanding token.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from cryptography.hazmat.primitives import hashes

from sealed_token.config import TokenSettings
from sealed_token.exceptions import ConfigurationError
from sealed_token.interfaces.crypto import IKeyProvider

logger = logging.getLogger(__name__)

KEY_LENGTH = 32


@dataclass(frozen=True)
class SecretKey:
    """A 256-bit symmetric key.

    Attributes:
        material: The raw key bytes. Hidden from repr.
    """

    material: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if len(self.material) != KEY_LENGTH:
            raise ConfigurationError(
                f"invalid key length: expected {KEY_LENGTH} bytes, got {len(self.material)}"
            )

    @classmethod
    def from_secret(cls, secret: str) -> SecretKey:
        """Derive a key by hashing a secret string with SHA-256.

        Args:
            secret: The configured secret.

        Returns:
            The derived key.

        Raises:
            ConfigurationError: If the secret cannot be encoded as UTF-8.
        """
        try:
            material = secret.encode("utf-8")
        except UnicodeEncodeError as e:
            # Undecodable environment bytes arrive as lone surrogates
            raise ConfigurationError("REGISTRATION_TOKEN_SECRET is not valid UTF-8") from e

        digest = hashes.Hash(hashes.SHA256())
        digest.update(material)
        return cls(digest.finalize())


class SecretKeyProvider(IKeyProvider):
    """Key provider that derives and caches one key from one secret.

    Validation is deferred to the first get_key() call, so a missing secret
    fails loudly at first use instead of producing a default key.
    """

    def __init__(self, secret: Optional[str]) -> None:
        self._secret = secret
        self._key: Optional[SecretKey] = None

    @classmethod
    def from_settings(cls, settings: Optional[TokenSettings] = None) -> SecretKeyProvider:
        """Build a provider from environment-backed settings.

        Args:
            settings: Settings to read from. Loaded from the environment if omitted.

        Returns:
            A provider for REGISTRATION_TOKEN_SECRET.
        """
        settings = settings or TokenSettings()
        return cls(settings.REGISTRATION_TOKEN_SECRET)

    def get_key(self) -> SecretKey:
        """Return the derived key, deriving it on first use.

        Returns:
            The 256-bit key.

        Raises:
            ConfigurationError: If the secret is missing or blank.
        """
        if self._key is None:
            if self._secret is None or not self._secret.strip():
                raise ConfigurationError("REGISTRATION_TOKEN_SECRET is missing")

            # Racing callers derive the same digest, so the cache needs no lock.
            self._key = SecretKey.from_secret(self._secret)
            logger.info("Derived token key from configured secret")

        return self._key
