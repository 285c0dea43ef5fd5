"""Explicit result type for the token decode path.

TokenCodec.decode never raises; every stage reports its outcome through one
of the two classes below so callers branch on a value rather than on an
exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class FailureReason(str, Enum):
    """Stage at which a token was rejected.

    Only used for internal diagnostics; TokenCodec.read collapses every
    reason to the same absent result.
    """

    FORMAT = "format"
    INTEGRITY = "integrity"
    SERIALIZATION = "serialization"


@dataclass(frozen=True)
class Success:
    """A token that opened cleanly.

    Attributes:
        value: The decoded payload. May itself be None for a sealed JSON null.
    """

    value: Any

    @property
    def ok(self) -> bool:
        return True

    def value_or(self, default: Any) -> Any:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A token that was rejected.

    Attributes:
        reason: The stage that rejected it.
    """

    reason: FailureReason

    @property
    def ok(self) -> bool:
        return False

    def value_or(self, default: Any) -> Any:
        return default


DecodeResult = Union[Success, Failure]
