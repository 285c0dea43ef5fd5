"""Token codec for sealing JSON payloads into opaque, tamper-evident tokens.

Implements the token format ``<nonce>.<tag>.<ciphertext>``, each segment an
unpadded base64url string. The payload is compact UTF-8 JSON encrypted with
AES-256-GCM under a key derived once from the configured secret.

Every way a presented token can be wrong (bad shape, bad base64url, failed
authentication, undecodable plaintext) produces the same outcome from read(),
so responses cannot be used to tell the stages apart.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from sealed_token.config import TokenSettings
from sealed_token.crypto import AEADCipher, SecretKey, SecretKeyProvider
from sealed_token.encoding import Base64Url, JsonSerializer
from sealed_token.exceptions import FormatError, IntegrityError, SerializationError
from sealed_token.interfaces.crypto import ICipher
from sealed_token.interfaces.encoding import IBinaryEncoder, ISerializer, ITokenCodec
from sealed_token.result import DecodeResult, Failure, FailureReason, Success

logger = logging.getLogger(__name__)

SEPARATOR = "."
SEGMENT_COUNT = 3


@dataclass
class CryptoConfig:
    """Configuration for cryptographic operations.

    Attributes:
        key: The derived symmetric key.
        cipher: Authenticated encryption implementation.
    """

    key: SecretKey
    cipher: ICipher = field(default_factory=AEADCipher)


@dataclass
class EncodingConfig:
    """Configuration for encoding operations.

    Attributes:
        binary: Encodes each raw token segment as text.
        serializer: Converts payloads to and from bytes.
    """

    binary: IBinaryEncoder = field(default_factory=Base64Url)
    serializer: ISerializer = field(default_factory=JsonSerializer)


@dataclass
class TokenCodecConfig:
    """Complete configuration for TokenCodec.

    Attributes:
        crypto: Cryptographic configuration.
        encoding: Encoding configuration.
    """

    crypto: CryptoConfig
    encoding: EncodingConfig = field(default_factory=EncodingConfig)


class TokenCodec(ITokenCodec):
    """Seals payloads into tokens and opens them again.

    The key is injected through the configuration and never read from the
    environment here, so codecs with different keys can coexist in one
    process. Instances hold no mutable state and may be shared across threads.

    Example:
        >>> codec = TokenCodec.from_secret("test-secret")
        >>> token = codec.create({"email": "a@b.com", "plan": "pro"})
        >>> codec.read(token)
        {'email': 'a@b.com', 'plan': 'pro'}
        >>> codec.read("not-a-token") is None
        True
    """

    def __init__(self, config: TokenCodecConfig) -> None:
        """Initialize the codec.

        Args:
            config: Key, cipher and encoding collaborators.
        """
        self._key = config.crypto.key
        self._cipher = config.crypto.cipher
        self._binary = config.encoding.binary
        self._serializer = config.encoding.serializer

    @classmethod
    def from_secret(cls, secret: Optional[str]) -> TokenCodec:
        """Build a codec with the default primitives for a secret string.

        Args:
            secret: The configured secret.

        Returns:
            A ready codec.

        Raises:
            ConfigurationError: If the secret is missing or blank.
        """
        key = SecretKeyProvider(secret).get_key()
        return cls(TokenCodecConfig(crypto=CryptoConfig(key=key)))

    @classmethod
    def from_settings(cls, settings: Optional[TokenSettings] = None) -> TokenCodec:
        """Build a codec from environment-backed settings.

        Args:
            settings: Settings to read. Loaded from the environment if omitted.

        Returns:
            A ready codec.

        Raises:
            ConfigurationError: If REGISTRATION_TOKEN_SECRET is missing or blank.
        """
        key = SecretKeyProvider.from_settings(settings).get_key()
        return cls(TokenCodecConfig(crypto=CryptoConfig(key=key)))

    def create(self, payload: Any) -> str:
        """Seal a payload into a token.

        Args:
            payload: Any JSON-representable value.

        Returns:
            The token string ``nonce.tag.ciphertext``.

        Raises:
            SerializationError: If the payload cannot be written as JSON.
        """
        plaintext = self._serializer.dumps(payload)
        sealed = self._cipher.encrypt(plaintext, self._key)

        return SEPARATOR.join(
            self._binary.encode(segment)
            for segment in (sealed.nonce, sealed.tag, sealed.ciphertext)
        )

    def decode(self, token: Any) -> DecodeResult:
        """Open a token into an explicit result.

        Args:
            token: The presented token. Anything other than a str is rejected.

        Returns:
            Success with the payload, or Failure naming the rejecting stage.
        """
        if not isinstance(token, str):
            return self._reject(FailureReason.FORMAT)

        segments = token.split(SEPARATOR)
        if len(segments) != SEGMENT_COUNT:
            return self._reject(FailureReason.FORMAT)

        try:
            nonce, tag, ciphertext = [self._binary.decode(segment) for segment in segments]
            plaintext = self._cipher.decrypt(nonce, ciphertext, tag, self._key)
            payload = self._serializer.loads(plaintext)
        except FormatError:
            return self._reject(FailureReason.FORMAT)
        except IntegrityError:
            return self._reject(FailureReason.INTEGRITY)
        except SerializationError:
            return self._reject(FailureReason.SERIALIZATION)

        return Success(payload)

    def read(self, token: Any) -> Any:
        """Open a token, collapsing every failure to None.

        A sealed JSON null also reads as None; use decode() when that
        distinction matters.

        Args:
            token: The presented token.

        Returns:
            The payload, or None if the token is not valid under this key.
        """
        return self.decode(token).value_or(None)

    def _reject(self, reason: FailureReason) -> Failure:
        logger.debug("Rejected token at %s stage", reason.value)
        return Failure(reason)
