"""Encoding and timestamp interfaces for sealed-token.

This module defines protocols for binary-to-text encoding, payload
serialization, clocks, and token encoding/decoding.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from sealed_token.result import DecodeResult


class IBinaryEncoder(Protocol):
    """Interface for binary-to-text encoding."""

    def encode(self, data: bytes) -> str:
        """Encode bytes as text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: str) -> bytes:
        """Decode text back to bytes.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            FormatError: If the text is not a valid encoding.
        """
        ...


class ISerializer(Protocol):
    """Interface for payload serialization."""

    def dumps(self, payload: Any) -> bytes:
        """Serialize a payload to bytes.

        Args:
            payload: The value to serialize.

        Returns:
            The serialized bytes.

        Raises:
            SerializationError: If the payload is not representable.
        """
        ...

    def loads(self, data: bytes) -> Any:
        """Deserialize bytes to a payload.

        Args:
            data: The serialized bytes.

        Returns:
            The reconstructed payload.

        Raises:
            SerializationError: If the bytes are not a valid document.
        """
        ...


class IClock(Protocol):
    """Interface for reading the current time."""

    def now(self) -> datetime:
        """Get the current datetime.

        Returns:
            The current timezone-aware datetime.
        """
        ...


class ITokenCodec(Protocol):
    """Interface for sealing payloads into tokens and opening them again."""

    def create(self, payload: Any) -> str:
        """Seal a payload into a token.

        Args:
            payload: Any JSON-representable value.

        Returns:
            The token string.
        """
        ...

    def decode(self, token: Any) -> DecodeResult:
        """Open a token into an explicit success or failure result.

        Args:
            token: The presented token.

        Returns:
            Success carrying the payload, or Failure.
        """
        ...

    def read(self, token: Any) -> Any:
        """Open a token, returning None for anything that is not valid.

        Args:
            token: The presented token.

        Returns:
            The payload, or None.
        """
        ...
