"""Encoding package.

This package provides the base64url codec, JSON payload serializer and
epoch-millisecond clock used by sealed tokens.
"""

from .base64 import Base64Url
from .serializer import JsonSerializer
from .timestamper import EpochMillis

__all__ = [
    "Base64Url",
    "EpochMillis",
    "JsonSerializer",
]
