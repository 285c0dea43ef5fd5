"""JSON payload serialization.

Payloads are written as compact UTF-8 JSON text. NaN and Infinity are not
JSON and are rejected in both directions.
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

from sealed_token.exceptions import SerializationError
from sealed_token.interfaces.encoding import ISerializer


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"non-standard JSON constant: {name}")


class JsonSerializer(ISerializer):
    """Serializer that maps JSON values to UTF-8 JSON bytes."""

    def dumps(self, payload: Any) -> bytes:
        """Serialize a JSON value.

        Args:
            payload: A dict, list, str, int, float, bool or None, nested freely.

        Returns:
            Compact UTF-8 encoded JSON text.

        Raises:
            SerializationError: For unsupported types, circular references,
                or non-finite floats.
        """
        try:
            text = json.dumps(
                payload,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
            # Lone surrogates survive dumps but not UTF-8
            return text.encode("utf-8")
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError("payload is not JSON-representable") from e

    def loads(self, data: bytes) -> Any:
        """Parse UTF-8 JSON bytes.

        Args:
            data: The serialized payload.

        Returns:
            The decoded JSON value.

        Raises:
            SerializationError: If the bytes are not UTF-8 JSON text.
        """
        try:
            return json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            # UnicodeDecodeError and JSONDecodeError are both ValueErrors
            raise SerializationError("payload is not valid JSON") from e
