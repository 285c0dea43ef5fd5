"""Sealed-token interfaces package.

This package provides protocol definitions for key provisioning,
authenticated encryption, encoding, serialization and clocks.
"""

from .crypto import ICipher, IKeyProvider, Sealed
from .encoding import IBinaryEncoder, IClock, ISerializer, ITokenCodec

__all__ = [
    # crypto
    "ICipher",
    "IKeyProvider",
    "Sealed",
    # encoding
    "IBinaryEncoder",
    "IClock",
    "ISerializer",
    "ITokenCodec",
]
