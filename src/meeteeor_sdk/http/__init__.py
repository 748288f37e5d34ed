"""
HTTP layer for Meeteeor Python SDK

Request/response model, the transport abstraction and transport selection.
Concrete transports are imported lazily by ``HttpClientFactory``.
"""

from .request import HttpRequest, HEADER_USER_AGENT, HEADER_IDEMPOTENCY_KEY
from .response import HttpResponse
from .transport import HttpTransport, build_ssl_context
from .factory import HttpClientFactory

__all__ = [
    'HttpRequest',
    'HttpResponse',
    'HttpTransport',
    'HttpClientFactory',
    'HEADER_USER_AGENT',
    'HEADER_IDEMPOTENCY_KEY',
    'build_ssl_context',
]
