"""
Type definitions for request authentication

This module provides the credential and header types used by the MAC
request signer.
"""

import base64
import binascii
from dataclasses import dataclass, field
from typing import Callable, Dict

from ..exceptions import ConfigurationError

# Protocol version of the MAC authentication scheme
MAC_VERSION = 1

HEADER_MAC_VERSION = 'x-mac-version'
HEADER_MAC_USER_ID = 'x-mac-userid'
HEADER_MAC_TIMESTAMP = 'x-mac-timestamp'
HEADER_MAC_VALUE = 'x-mac-value'

AUTHENTICATION_HEADERS = (
    HEADER_MAC_VERSION,
    HEADER_MAC_USER_ID,
    HEADER_MAC_TIMESTAMP,
    HEADER_MAC_VALUE,
)


@dataclass(frozen=True)
class Credentials:
    """
    Application user credentials

    Attributes:
        user_id: The application user's id
        application_key: The application user's base64 encoded security key
    """
    user_id: int
    application_key: str = field(repr=False)

    def __post_init__(self):
        """Validate credentials after initialization"""
        if not self.application_key:
            raise ConfigurationError(
                "The application key cannot be empty or null.",
                "EMPTY_APPLICATION_KEY"
            )

        if not isinstance(self.application_key, str):
            raise ConfigurationError(
                "The application key must be a base64 encoded string.",
                "INVALID_APPLICATION_KEY"
            )

        if isinstance(self.user_id, bool) or not isinstance(self.user_id, int):
            raise ConfigurationError(
                f"The user id must be an integer, got {type(self.user_id).__name__}.",
                "INVALID_USER_ID"
            )

        # Decode once so a broken key fails here rather than on the first call
        object.__setattr__(self, '_secret', decode_application_key(self.application_key))

    @property
    def secret(self) -> bytes:
        """The raw shared secret used as HMAC key."""
        return self._secret


@dataclass(frozen=True)
class AuthHeaders:
    """
    Authentication headers for a single request

    Attributes:
        version: MAC protocol version
        user_id: Application user id
        timestamp: Unix timestamp (seconds) the MAC is bound to
        mac_value: Base64 encoded HMAC-SHA-512 value
    """
    version: int
    user_id: int
    timestamp: int
    mac_value: str

    def as_headers(self) -> Dict[str, str]:
        """Return the header mapping to send with the request."""
        return {
            HEADER_MAC_VERSION: str(self.version),
            HEADER_MAC_USER_ID: str(self.user_id),
            HEADER_MAC_TIMESTAMP: str(self.timestamp),
            HEADER_MAC_VALUE: self.mac_value,
        }


def decode_application_key(application_key: str) -> bytes:
    """
    Decode the base64 application key into the raw secret.

    Raises:
        ConfigurationError: If the key is not valid base64
    """
    try:
        return base64.b64decode(application_key, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ConfigurationError(
            f"The application key is not a valid base64 string: {e}",
            "INVALID_APPLICATION_KEY"
        )


# Type aliases for convenience
TimestampGenerator = Callable[[], int]
HeaderDict = Dict[str, str]
