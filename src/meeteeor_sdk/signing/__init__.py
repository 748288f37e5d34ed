"""
Meeteeor Python SDK - Request Signing Module

HMAC-SHA-512 request authentication for the Meeteeor payment API.
"""

from .types import (
    MAC_VERSION,
    HEADER_MAC_VERSION,
    HEADER_MAC_USER_ID,
    HEADER_MAC_TIMESTAMP,
    HEADER_MAC_VALUE,
    AUTHENTICATION_HEADERS,
    Credentials,
    AuthHeaders,
    decode_application_key,
)

from .mac_signer import (
    MacSigner,
    calculate_mac,
    create_signer,
    sign,
)

from .utils import (
    generate_idempotency_token,
    validate_idempotency_token,
    generate_timestamp,
    build_secured_data,
    request_path,
)

# Public API exports
__all__ = [
    # Types
    'MAC_VERSION',
    'HEADER_MAC_VERSION',
    'HEADER_MAC_USER_ID',
    'HEADER_MAC_TIMESTAMP',
    'HEADER_MAC_VALUE',
    'AUTHENTICATION_HEADERS',
    'Credentials',
    'AuthHeaders',
    'decode_application_key',
    # Signer
    'MacSigner',
    'calculate_mac',
    'create_signer',
    'sign',
    # Utilities
    'generate_idempotency_token',
    'validate_idempotency_token',
    'generate_timestamp',
    'build_secured_data',
    'request_path',
]
