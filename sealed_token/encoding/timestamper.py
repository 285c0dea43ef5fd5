"""Epoch-millisecond timestamps.

Registration payloads carry their issue and expiry times as integer
milliseconds since the Unix epoch, which any JSON consumer can compare
without a date parser.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sealed_token.interfaces.encoding import IClock


class EpochMillis(IClock):
    """Clock and formatter for epoch-millisecond timestamps.

    Naive datetimes are treated as UTC, matching how the timestamps are
    written by issuers on other platforms.
    """

    def format(self, when: datetime) -> int:
        """Convert a datetime to integer milliseconds since the epoch.

        Args:
            when: The datetime to format.

        Returns:
            Milliseconds since 1970-01-01T00:00:00Z, truncated.

        Example:
            >>> dt = datetime(2025, 1, 1, tzinfo=timezone.utc)
            >>> EpochMillis().format(dt)
            1735689600000
        """
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)

        delta = when - datetime(1970, 1, 1, tzinfo=timezone.utc)
        return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000

    def now(self) -> datetime:
        """Get the current datetime in UTC.

        Returns:
            The current datetime with UTC timezone.
        """
        return datetime.now(timezone.utc)
