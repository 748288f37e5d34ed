"""
Transport based on the httpx library
"""

import logging
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..config import ClientConfig
from ..exceptions import ConnectionException
from .request import HttpRequest
from .response import HttpResponse
from .transport import HttpTransport, build_ssl_context

logger = logging.getLogger(__name__)


class HttpxTransport(HttpTransport):
    """
    Transport using pooled ``httpx.Client`` instances.

    One client is kept per TLS setting so the certificate configuration of
    a call is always honoured.
    """

    name = 'httpx'

    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        """
        Args:
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``)
        """
        self._transport = transport
        self._clients: Dict[Tuple[bool, str], httpx.Client] = {}
        self._lock = threading.Lock()

    def _client(self, config: ClientConfig) -> httpx.Client:
        key = (config.certificate_authority_check, config.effective_certificate_authority)
        with self._lock:
            client = self._clients.get(key)
            if client is None:
                client = httpx.Client(
                    verify=build_ssl_context(config),
                    transport=self._transport,
                    follow_redirects=False,
                )
                self._clients[key] = client
            return client

    def _send(self, config: ClientConfig, request: HttpRequest) -> HttpResponse:
        try:
            response = self._client(config).request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
                timeout=request.timeout,
            )
        except httpx.TimeoutException as e:
            raise ConnectionException(
                f"Request timeout after {request.timeout} seconds: {request.url}",
                "TIMEOUT",
                url=request.url,
                details={'original_error': str(e)}
            )
        except httpx.TransportError as e:
            raise ConnectionException(f"Connection error: {e}", url=request.url)

        return HttpResponse.create(response.status_code, response.headers.multi_items(), response.content)

    def close(self) -> None:
        with self._lock:
            for client in self._clients.values():
                client.close()
            self._clients.clear()
