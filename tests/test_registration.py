"""Tests for pending-registration tokens."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from sealed_token import PendingRegistrations, TokenCodec
from sealed_token.config import TokenSettings
from sealed_token.encoding import EpochMillis

START = datetime(2025, 10, 8, 12, 0, 0, tzinfo=timezone.utc)

RECORD = {
    "email": "a@b.com",
    "passwordHash": "$2b$10$abcdefghijklmnopqrstuv",
    "name": "Ada",
    "codeHash": "$2b$10$zyxwvutsrqponmlkjihgfe",
}


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(START)


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec.from_secret("test-secret")


@pytest.fixture
def registrations(codec: TokenCodec, clock: FakeClock) -> PendingRegistrations:
    return PendingRegistrations(codec, clock=clock)


def test_issue_stamps_timestamps(registrations: PendingRegistrations, codec: TokenCodec) -> None:
    """Issued tokens carry iat and a 15 minute expiresAt in epoch millis."""
    token = registrations.issue(RECORD)
    payload = codec.read(token)

    assert payload["iat"] == 1759924800000
    assert payload["expiresAt"] == 1759924800000 + 15 * 60 * 1000
    assert {key: payload[key] for key in RECORD} == RECORD


def test_issue_does_not_mutate_record(registrations: PendingRegistrations) -> None:
    """The caller's mapping is copied before stamping."""
    record = dict(RECORD)
    registrations.issue(record)

    assert record == RECORD


def test_redeem_within_lifetime(registrations: PendingRegistrations, clock: FakeClock) -> None:
    """A token redeems up to and including its expiry instant."""
    token = registrations.issue(RECORD)

    clock.advance(timedelta(minutes=15))
    redeemed = registrations.redeem(token, required=("email", "codeHash"))

    assert redeemed is not None
    assert redeemed["email"] == "a@b.com"


def test_redeem_after_expiry(registrations: PendingRegistrations, clock: FakeClock) -> None:
    """An expired token is indistinguishable from an invalid one."""
    token = registrations.issue(RECORD)

    clock.advance(timedelta(minutes=15, milliseconds=1))

    assert registrations.redeem(token) is None


def test_redeem_requires_fields(registrations: PendingRegistrations) -> None:
    """Missing or empty required fields reject the token."""
    token = registrations.issue({"email": "a@b.com", "codeHash": ""})

    assert registrations.redeem(token, required=("email",)) is not None
    assert registrations.redeem(token, required=("email", "codeHash")) is None
    assert registrations.redeem(token, required=("passwordHash",)) is None


@pytest.mark.parametrize("token", ["", "a.b", "a.b.c.d", "!!!.b.c", None])
def test_redeem_invalid_token(registrations: PendingRegistrations, token: str | None) -> None:
    """Malformed input redeems to None."""
    assert registrations.redeem(token) is None


def test_redeem_rejects_tokens_without_expiry(
    registrations: PendingRegistrations, codec: TokenCodec
) -> None:
    """Authentic tokens that were not issued as registrations are refused."""
    assert registrations.redeem(codec.create(RECORD)) is None
    assert registrations.redeem(codec.create({**RECORD, "expiresAt": "never"})) is None
    assert registrations.redeem(codec.create({**RECORD, "expiresAt": True})) is None
    assert registrations.redeem(codec.create(["not", "a", "record"])) is None


def test_redeem_under_other_secret(registrations: PendingRegistrations, clock: FakeClock) -> None:
    """Tokens from another deployment do not redeem."""
    other = PendingRegistrations(TokenCodec.from_secret("other-secret"), clock=clock)

    assert other.redeem(registrations.issue(RECORD)) is None


def test_renew_expired_token(registrations: PendingRegistrations, clock: FakeClock) -> None:
    """Resending a code extends an expired but authentic registration."""
    token = registrations.issue(RECORD)
    clock.advance(timedelta(hours=2))

    renewed = registrations.renew(token, {"codeHash": "new-hash"}, required=("email", "passwordHash"))

    assert renewed is not None
    assert renewed != token
    redeemed = registrations.redeem(renewed)
    assert redeemed is not None
    assert redeemed["codeHash"] == "new-hash"
    assert redeemed["passwordHash"] == RECORD["passwordHash"]
    assert redeemed["iat"] == EpochMillis().format(START + timedelta(hours=2))


def test_renew_invalid_token(registrations: PendingRegistrations) -> None:
    """Invalid tokens are not renewed."""
    token = registrations.issue({"email": "a@b.com"})

    assert registrations.renew("a.b.c") is None
    assert registrations.renew(token, required=("passwordHash",)) is None


def test_custom_lifetime(codec: TokenCodec, clock: FakeClock) -> None:
    """The lifetime is configurable."""
    registrations = PendingRegistrations(codec, lifetime=timedelta(seconds=30), clock=clock)
    token = registrations.issue(RECORD)

    clock.advance(timedelta(seconds=31))

    assert registrations.redeem(token) is None


def test_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Secret and lifetime come from the environment."""
    monkeypatch.setenv("REGISTRATION_TOKEN_SECRET", "test-secret")
    monkeypatch.setenv("REGISTRATION_TOKEN_TTL_SECONDS", "60")

    registrations = PendingRegistrations.from_settings(TokenSettings(_env_file=None))

    assert registrations.lifetime == timedelta(seconds=60)
    assert registrations.redeem(registrations.issue(RECORD)) is not None


def test_epoch_millis_format() -> None:
    """Datetimes convert to epoch milliseconds, naive ones as UTC."""
    timestamper = EpochMillis()
    when = datetime(2025, 1, 1, 0, 0, 0, 123000, tzinfo=timezone.utc)

    assert timestamper.format(when) == 1735689600123
    assert timestamper.format(datetime(2025, 1, 1)) == 1735689600000
    assert timestamper.now().tzinfo == timezone.utc


def test_required_accepts_single_field_name(registrations: PendingRegistrations) -> None:
    """A bare string names one field rather than one field per character."""
    token = registrations.issue({"email": "a@b.com"})

    assert registrations.redeem(token, required="email") is not None
    assert registrations.redeem(token, required="passwordHash") is None
    assert registrations.renew(token, required="email") is not None
