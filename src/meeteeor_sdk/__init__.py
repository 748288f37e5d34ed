"""
Meeteeor Python SDK
Client for the Meeteeor payment service API
"""

from .version import __version__
from .exceptions import (
    MeeteeorSDKError,
    ConfigurationError,
    ConnectionException,
    VersioningException,
    ApiException,
)
from .config import (
    ClientConfig,
    DEFAULT_BASE_PATH,
    INITIAL_CONNECTION_TIMEOUT,
    load_client_config_from_json,
    load_client_config_from_file,
)
from .signing import (
    Credentials,
    AuthHeaders,
    MacSigner,
    create_signer,
    sign,
    generate_idempotency_token,
)
from .http import (
    HttpRequest,
    HttpResponse,
    HttpTransport,
    HttpClientFactory,
)
from .api_response import (
    ApiResponse,
    ResponseKind,
    classify_response,
)
from .api_client import ApiClient
from .services import (
    ApiService,
    RefundService,
    TransactionService,
    register_service,
)


def initialize_sdk():
    """
    Check which transports can be used in this environment.

    Returns:
        dict: 'compatible' (bool), 'transports' (type -> availability) and 'warnings' (list)
    """
    warnings = []
    transports = HttpClientFactory.available_transports()

    for transport_type, available in transports.items():
        if not available:
            warnings.append(f"Transport '{transport_type}' is not available")

    return {
        'compatible': any(transports.values()),
        'transports': transports,
        'warnings': warnings
    }


def is_compatible():
    """
    Quick synchronous compatibility check.

    Returns:
        bool: True if at least one transport is usable
    """
    return initialize_sdk()['compatible']


# Public API exports
__all__ = [
    '__version__',
    'initialize_sdk',
    'is_compatible',
    # Exceptions
    'MeeteeorSDKError',
    'ConfigurationError',
    'ConnectionException',
    'VersioningException',
    'ApiException',
    # Configuration
    'ClientConfig',
    'DEFAULT_BASE_PATH',
    'INITIAL_CONNECTION_TIMEOUT',
    'load_client_config_from_json',
    'load_client_config_from_file',
    # Signing
    'Credentials',
    'AuthHeaders',
    'MacSigner',
    'create_signer',
    'sign',
    'generate_idempotency_token',
    # HTTP
    'HttpRequest',
    'HttpResponse',
    'HttpTransport',
    'HttpClientFactory',
    # Client
    'ApiClient',
    'ApiResponse',
    'ResponseKind',
    'classify_response',
    # Services
    'ApiService',
    'RefundService',
    'TransactionService',
    'register_service',
]
