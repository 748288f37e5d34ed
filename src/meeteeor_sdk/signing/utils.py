"""
Utility functions for request authentication

This module provides idempotency token generation, timestamp handling and
request path extraction used by the MAC signer and the dispatcher.
"""

import re
import time
import uuid
from urllib.parse import urlsplit


_TOKEN_PATTERN = re.compile(
    r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$',
    re.IGNORECASE
)


def generate_idempotency_token() -> str:
    """
    Generate a UUID v4 idempotency token for a single request.

    Returns:
        str: UUID v4 string
    """
    return str(uuid.uuid4())


def validate_idempotency_token(token: str) -> bool:
    """
    Validate idempotency token format (UUID-like).

    Args:
        token: Token string to validate

    Returns:
        bool: True if token looks like a UUID
    """
    if not isinstance(token, str):
        return False

    return bool(_TOKEN_PATTERN.match(token))


def generate_timestamp() -> int:
    """
    Generate current Unix timestamp.

    Returns:
        int: Current Unix timestamp (seconds since epoch)
    """
    return int(time.time())


def build_secured_data(version: int, user_id: int, timestamp: int, method: str, path: str) -> str:
    """
    Build the pipe-delimited string covered by the MAC.

    Args:
        version: MAC protocol version
        user_id: Application user id
        timestamp: Unix timestamp
        method: HTTP method
        path: Request path including the query string

    Returns:
        str: ``version|user_id|timestamp|method|path``
    """
    return '|'.join([str(version), str(user_id), str(timestamp), method, path])


def request_path(url: str) -> str:
    """
    Extract the request-line path (path plus query string) from a URL.

    Args:
        url: Absolute request URL

    Returns:
        str: Path component, with ``?query`` appended when present
    """
    parts = urlsplit(url)
    path = parts.path or '/'
    if parts.query:
        path = f"{path}?{parts.query}"
    return path
