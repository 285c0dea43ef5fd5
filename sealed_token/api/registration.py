"""Pending-registration tokens.

A sign-up that still awaits email verification is carried entirely inside a
sealed token instead of a database row. The token stamps ``iat`` and
``expiresAt`` (epoch milliseconds) onto the caller's record; redeeming it
checks the expiry, and renewing it (the "resend code" flow) re-stamps a
fresh lifetime onto a still-authentic token.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Dict, Iterable, Mapping, Optional

from sealed_token.config import TokenSettings
from sealed_token.encoding import EpochMillis
from sealed_token.interfaces.encoding import IClock, ITokenCodec

from .codec import TokenCodec

logger = logging.getLogger(__name__)

ISSUED_AT = "iat"
EXPIRES_AT = "expiresAt"

DEFAULT_LIFETIME = timedelta(minutes=15)


class PendingRegistrations:
    """Issues, redeems and renews pending-registration tokens.

    Attributes:
        lifetime: How long an issued token stays redeemable.
    """

    def __init__(
        self,
        codec: ITokenCodec,
        lifetime: timedelta = DEFAULT_LIFETIME,
        clock: Optional[IClock] = None,
    ) -> None:
        """Initialize the registration helper.

        Args:
            codec: The token codec that seals records.
            lifetime: Validity window for issued tokens.
            clock: Time source. Defaults to the UTC system clock.
        """
        self.lifetime = lifetime
        self._codec = codec
        self._timestamper = EpochMillis()
        self._clock: IClock = clock or self._timestamper

    @classmethod
    def from_settings(cls, settings: Optional[TokenSettings] = None) -> PendingRegistrations:
        """Build a helper from environment-backed settings.

        Args:
            settings: Settings to read. Loaded from the environment if omitted.

        Returns:
            A helper using REGISTRATION_TOKEN_SECRET and
            REGISTRATION_TOKEN_TTL_SECONDS.

        Raises:
            ConfigurationError: If the secret is missing or blank.
        """
        settings = settings or TokenSettings()
        return cls(
            TokenCodec.from_settings(settings),
            lifetime=timedelta(seconds=settings.REGISTRATION_TOKEN_TTL_SECONDS),
        )

    def issue(self, record: Mapping[str, Any]) -> str:
        """Seal a registration record with fresh timestamps.

        Args:
            record: JSON-representable fields of the pending sign-up.

        Returns:
            The registration token.

        Raises:
            SerializationError: If the record is not JSON-representable.
        """
        return self._codec.create(self._stamp(record))

    def redeem(self, token: Any, required: Iterable[str] = ()) -> Optional[Dict[str, Any]]:
        """Open a registration token that has not yet expired.

        Args:
            token: The presented token.
            required: Field names that must be present and truthy. A single str
                names one field.

        Returns:
            The record including its timestamps, or None if the token is
            invalid, expired, or missing a required field.
        """
        record = self._open(token, required)
        if record is None:
            return None

        expires_at = record.get(EXPIRES_AT)
        if not _is_number(expires_at) or expires_at < self._now_millis():
            logger.debug("Rejected expired registration token")
            return None

        return record

    def renew(
        self,
        token: Any,
        changes: Optional[Mapping[str, Any]] = None,
        required: Iterable[str] = (),
    ) -> Optional[str]:
        """Reissue an authentic registration token with a new lifetime.

        Expired tokens are renewable; only authenticity is checked.

        Args:
            token: The presented token.
            changes: Fields to overwrite in the renewed record.
            required: Field names that must be present and truthy. A single str
                names one field.

        Returns:
            A new token, or None if the presented one is not valid.
        """
        record = self._open(token, required)
        if record is None:
            return None

        record.update(changes or {})
        return self.issue(record)

    def _open(self, token: Any, required: Iterable[str]) -> Optional[Dict[str, Any]]:
        record = self._codec.read(token)
        if not isinstance(record, dict):
            return None

        if isinstance(required, str):
            required = (required,)

        if not all(record.get(name) for name in required):
            return None

        return record

    def _stamp(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        now = self._clock.now()
        stamped = dict(record)
        stamped[ISSUED_AT] = self._timestamper.format(now)
        stamped[EXPIRES_AT] = self._timestamper.format(now + self.lifetime)
        return stamped

    def _now_millis(self) -> int:
        return self._timestamper.format(self._clock.now())


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
