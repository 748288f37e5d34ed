"""
HMAC-SHA-512 request signer

This module computes the ``x-mac-*`` authentication headers the payment API
expects on every request. Only the protocol version, the user id, the
timestamp, the HTTP method and the request path are covered by the MAC.
"""

import base64
import logging
from typing import Optional

from cryptography.hazmat.primitives import hashes, hmac

from .types import (
    MAC_VERSION,
    AuthHeaders,
    Credentials,
    TimestampGenerator,
    decode_application_key,
)
from .utils import build_secured_data, generate_timestamp

logger = logging.getLogger(__name__)


def calculate_mac(secret: bytes, secured_data: str) -> str:
    """
    Calculate the base64 encoded HMAC-SHA-512 of the secured data.

    Args:
        secret: Raw shared secret
        secured_data: String covered by the MAC

    Returns:
        str: Base64 encoded digest
    """
    mac = hmac.HMAC(secret, hashes.SHA512())
    mac.update(secured_data.encode('utf-8'))
    return base64.b64encode(mac.finalize()).decode('ascii')


def sign(secret: str, user_id: int, method: str, path: str, timestamp: int,
         version: int = MAC_VERSION) -> str:
    """
    Compute the MAC value for a request.

    Args:
        secret: Base64 encoded application key
        user_id: Application user id
        method: HTTP method
        path: Request path including the query string
        timestamp: Unix timestamp the MAC is bound to
        version: MAC protocol version

    Returns:
        str: Value of the ``x-mac-value`` header

    Raises:
        ConfigurationError: If the secret is not valid base64
    """
    secured_data = build_secured_data(version, user_id, timestamp, method, path)
    return calculate_mac(decode_application_key(secret), secured_data)


class MacSigner:
    """
    Signer bound to one set of credentials.

    A new timestamp is taken for every call to :meth:`authentication_headers`,
    so two requests never share a signature.
    """

    def __init__(self, credentials: Credentials, timestamp_generator: Optional[TimestampGenerator] = None):
        """
        Initialize the signer.

        Args:
            credentials: Application user credentials
            timestamp_generator: Optional clock returning Unix seconds
        """
        self.credentials = credentials
        self.timestamp_generator = timestamp_generator or generate_timestamp

    def authentication_headers(self, method: str, path: str) -> AuthHeaders:
        """
        Compute the authentication headers for a request.

        Args:
            method: HTTP method
            path: Request path including the query string

        Returns:
            AuthHeaders: Freshly computed headers
        """
        timestamp = self.timestamp_generator()
        secured_data = build_secured_data(MAC_VERSION, self.credentials.user_id, timestamp, method, path)
        mac_value = calculate_mac(self.credentials.secret, secured_data)

        logger.debug(f"Signed {method} {path} for user {self.credentials.user_id} at {timestamp}")

        return AuthHeaders(
            version=MAC_VERSION,
            user_id=self.credentials.user_id,
            timestamp=timestamp,
            mac_value=mac_value
        )


def create_signer(user_id: int, application_key: str,
                  timestamp_generator: Optional[TimestampGenerator] = None) -> MacSigner:
    """
    Create a signer from raw credential values.

    Raises:
        ConfigurationError: If the credentials are invalid
    """
    return MacSigner(Credentials(user_id, application_key), timestamp_generator)
