"""Cryptographic interfaces for sealed-token.

This module defines protocols for key provisioning and authenticated
encryption, plus the value type an encryption call returns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple, Protocol

if TYPE_CHECKING:
    from sealed_token.crypto.key import SecretKey


class Sealed(NamedTuple):
    """Output of a single authenticated encryption.

    Attributes:
        nonce: The 96-bit nonce drawn for this encryption.
        ciphertext: The encrypted bytes, same length as the plaintext.
        tag: The 128-bit authentication tag.
    """

    nonce: bytes
    ciphertext: bytes
    tag: bytes


class IKeyProvider(Protocol):
    """Interface for symmetric key provisioning."""

    def get_key(self) -> SecretKey:
        """Return the process-wide symmetric key.

        Returns:
            The derived secret key.

        Raises:
            ConfigurationError: If no usable secret is configured.
        """
        ...


class ICipher(Protocol):
    """Interface for authenticated symmetric encryption."""

    def encrypt(self, plaintext: bytes, key: SecretKey) -> Sealed:
        """Encrypt plaintext under a fresh nonce.

        Args:
            plaintext: The bytes to encrypt.
            key: The symmetric key.

        Returns:
            The nonce, ciphertext and tag.
        """
        ...

    def decrypt(self, nonce: bytes, ciphertext: bytes, tag: bytes, key: SecretKey) -> bytes:
        """Verify the tag and decrypt the ciphertext.

        Args:
            nonce: The nonce used for encryption.
            ciphertext: The encrypted bytes.
            tag: The authentication tag.
            key: The symmetric key.

        Returns:
            The authenticated plaintext.

        Raises:
            IntegrityError: When verification fails.
        """
        ...
