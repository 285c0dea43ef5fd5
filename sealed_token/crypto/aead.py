"""AES-256-GCM authenticated encryption.

This module provides the cipher used to seal token payloads. The nonce is
always drawn inside encrypt(); there is no way to pass one in.
"""

from __future__ import annotations

import secrets
from typing import Callable

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from sealed_token.exceptions import IntegrityError
from sealed_token.interfaces.crypto import ICipher, Sealed

from .key import SecretKey

NONCE_LENGTH = 12
TAG_LENGTH = 16


class AEADCipher(ICipher):
    """AES-256-GCM cipher that implements ICipher.

    Produces a 96-bit random nonce and a 128-bit tag per encryption.
    No associated data is bound.
    """

    def __init__(self, entropy: Callable[[int], bytes] = secrets.token_bytes) -> None:
        """Initialize the cipher.

        Args:
            entropy: Thread-safe source of secure random bytes for nonces.
        """
        self._entropy = entropy

    def encrypt(self, plaintext: bytes, key: SecretKey) -> Sealed:
        """Encrypt plaintext under a fresh random nonce.

        Args:
            plaintext: The bytes to encrypt.
            key: The 256-bit key.

        Returns:
            The nonce, ciphertext and tag.
        """
        nonce = self._entropy(NONCE_LENGTH)

        # AESGCM appends the tag to the ciphertext
        combined = AESGCM(key.material).encrypt(nonce, plaintext, None)

        return Sealed(
            nonce=nonce,
            ciphertext=combined[:-TAG_LENGTH],
            tag=combined[-TAG_LENGTH:],
        )

    def decrypt(self, nonce: bytes, ciphertext: bytes, tag: bytes, key: SecretKey) -> bytes:
        """Verify the tag and decrypt the ciphertext.

        Args:
            nonce: The 96-bit nonce.
            ciphertext: The encrypted bytes.
            tag: The 128-bit tag.
            key: The 256-bit key.

        Returns:
            The authenticated plaintext.

        Raises:
            IntegrityError: When the nonce or tag has the wrong length, or the
                tag does not verify under this key.
        """
        if len(nonce) != NONCE_LENGTH:
            raise IntegrityError(
                f"invalid nonce length: expected {NONCE_LENGTH} bytes, got {len(nonce)}"
            )

        if len(tag) != TAG_LENGTH:
            raise IntegrityError(
                f"invalid tag length: expected {TAG_LENGTH} bytes, got {len(tag)}"
            )

        try:
            return AESGCM(key.material).decrypt(nonce, ciphertext + tag, None)
        except InvalidTag as e:
            raise IntegrityError("authentication failed") from e
