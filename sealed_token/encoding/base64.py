"""Base64url encoding utilities.

This module provides URL-safe, unpadded base64 encoding/decoding utilities.
"""

import base64
import binascii
import re

from sealed_token.exceptions import FormatError
from sealed_token.interfaces.encoding import IBinaryEncoder

_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


class Base64Url(IBinaryEncoder):
    """Base64url encoding utilities without padding.

    This class provides static methods to encode bytes to base64url strings
    (RFC 4648 Section 5, '-' and '_' in place of '+' and '/') with the '='
    padding stripped, and to decode such strings back to bytes.
    """

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode bytes to an unpadded URL-safe base64 string.

        Args:
            data: The bytes to encode.

        Returns:
            A URL-safe base64 string with no trailing '='.
        """
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")

    @staticmethod
    def decode(text: str) -> bytes:
        """Decode an unpadded URL-safe base64 string to bytes.

        Padding is re-derived from the length before decoding. Standard
        alphabet characters ('+', '/'), explicit padding, and encodings with
        non-zero unused trailing bits are rejected.

        Args:
            text: The base64url string to decode.

        Returns:
            The decoded bytes.

        Raises:
            FormatError: If the text contains characters outside the URL-safe
                alphabet, its length cannot correspond to whole bytes, or it
                is not the canonical encoding of its bytes.
        """
        if not isinstance(text, str) or _ALPHABET.fullmatch(text) is None:
            raise FormatError("invalid base64url alphabet")

        # A single leftover character carries only 6 bits, never a full byte
        if len(text) % 4 == 1:
            raise FormatError("invalid base64url length")

        padding = "=" * (-len(text) % 4)
        try:
            data = base64.urlsafe_b64decode(text + padding)
        except binascii.Error as e:
            raise FormatError("invalid base64url") from e

        # Unused trailing bits must be zero, so each byte string has one spelling
        if Base64Url.encode(data) != text:
            raise FormatError("non-canonical base64url")

        return data
